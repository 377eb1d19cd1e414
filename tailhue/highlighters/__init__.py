"""Highlighters for individual kinds of tokens, and the builder of their stages."""