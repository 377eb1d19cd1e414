# tailhue

`tailhue` colours log files so they are easier to read. It picks out dates,
times, numbers, IPv4 and IPv6 addresses, URLs, file paths, UUIDs, hexadecimal
pointers, process names with ids (`sshd[42]`), `key=value` pairs, quoted
strings and keywords such as `ERROR`, `WARN`, `GET` or `null`, and shows the
result in `less`.

## Installing

```
pip install .
```

Python 3.11 or later is needed and there are no other Python dependencies.
Paging uses the `less` command and `--listen-command` uses `sh`; both must be
on your `PATH`.

## Using it

Open a file in `less` with highlighting:

```
tailhue app.log
```

The file's existing lines are highlighted into a temporary file, which is then
opened with `less --ignore-case --RAW-CONTROL-CHARS` (with `LESSSECURE=1`).
Lines appended to the log afterwards keep being highlighted into that file.

Open `less` in follow mode (`+F`), like `tail -f`:

```
tailhue --follow app.log
```

Skip the existing contents and only show lines written from now on:

```
tailhue --follow --start-at-end app.log
```

Watch every file in a folder. Only regular files directly inside the folder are
watched, hidden files (names starting with `.`) are skipped, and each file is
followed from its current end. A short banner listing the watched files comes
first. Folders are always followed:

```
tailhue /var/log/myapp
```

Write the highlighted text to standard output instead of opening `less`:

```
tailhue --print app.log
```

Anything piped in is highlighted and written to standard output:

```
cat app.log | tailhue
```

Run a shell command and highlight what it prints. The command is started as
`sh -c "trap '' INT; <command>"`, so Ctrl + C does not reach it:

```
tailhue --listen-command 'kubectl logs -f my-pod'
```

`--listen-command` cannot be combined with a file argument (exit status 2) or
with `--follow`. Run without any input and with a terminal on standard input,
`tailhue` prints a hint to use `tailhue --help` and exits with status 0.

### Options

| Option                           | Effect                                              |
|----------------------------------|-----------------------------------------------------|
| `FILE`                           | file or folder to read                              |
| `-f`, `--follow`                 | follow the file in `less`                           |
| `-e`, `--start-at-end`           | start at the end of the file                        |
| `-p`, `--print`                  | write to standard output instead of `less`          |
| `--config-path PATH`             | read colours from this TOML file                    |
| `-c`, `--listen-command COMMAND` | highlight the output of a shell command             |
| `--words-<colour> WORDS`         | highlight extra words (see below)                   |
| `--disable-builtin-keywords`     | turn off all built-in keyword groups                |
| `--disable-booleans`             | turn off `null`, `true`, `false`                    |
| `--disable-severity`             | turn off `ERROR`, `WARN`, `WARNING`, `INFO`, `DEBUG`, `SUCCESS`, `TRACE` |
| `--disable-rest`                 | turn off `GET`, `HEAD`, `POST`, `PUT`, `PATCH`, `DELETE` |

Two further options are hidden from `--help`: `--suppress-output` discards all
output (for debugging and benchmarking), and
`--z-generate-shell-completions bash|zsh|fish` prints a completion script:

```
tailhue --z-generate-shell-completions bash > tailhue.bash
```

### Highlighting extra words

Words can be highlighted on the fly in one of six colours. Each option takes a
comma separated list and may be given more than once:

```
tailhue --words-red timeout,refused --words-green ready app.log
```

The options are `--words-red`, `--words-green`, `--words-yellow`,
`--words-blue`, `--words-magenta` and `--words-cyan`. Words only match whole
words.

## Configuration

Colours are read from a TOML file. Pass one with `--config-path`:

```
tailhue --config-path ./theme.toml app.log
```

Without it, `$XDG_CONFIG_HOME/tailhue/config.toml` (or
`~/.config/tailhue/config.toml` when `XDG_CONFIG_HOME` is not set) is used if it
exists; otherwise built-in defaults apply. A file that is not valid TOML, or a
value of the wrong type, is reported on standard error and `tailhue` exits with
status 1.

Every section is optional, and so is every field; unknown keys are ignored. A
style has the fields `fg`, `bg`, `bold`, `faint`, `italic` and `underline`.
Colours are `red`, `green`, `yellow`, `blue`, `magenta` (or `purple`), `cyan`,
`white` and `black`, in any letter case; an empty or missing colour means the
terminal default, and any other name is an error.

```toml
[date]
number = { fg = "magenta" }
separator = { faint = true }

[time]
time = { fg = "blue" }
zone = { fg = "red" }

[quotes]
style = { fg = "yellow" }
token = "'"

[pointer]
separator_token = ":"

[uuid]
disabled = true

[[keywords]]
words = ["panic", "fatal"]
style = { fg = "red", bold = true }

[[keywords]]
words = ["GET"]
style = { fg = "black", bg = "green" }
border = true

[[regexps]]
regular_expression = 'user=(\w+)'
style = { fg = "cyan", underline = true }
```

The sections are `date`, `date_word`, `time`, `number`, `quotes`, `uuid`,
`pointer`, `url`, `ip`, `key_value`, `path` and `process`; each accepts
`disabled = true`. Disabling `date` turns off the word-date highlighter as
well. `token` in `quotes` and `separator_token` in `pointer` must be a single
character.

Keywords with the same style and border are merged. A keyword with
`border = true` is drawn with a space on each side. Regular expressions use
Python's `re` syntax; one with exactly one capturing group highlights only that
group, otherwise the whole match is highlighted.

## Using it as a library

```python
from tailhue.highlighters.builder import Highlighters, KeywordOptions
from tailhue.processor import HighlightProcessor
from tailhue.theme import Theme

processor = HighlightProcessor(Highlighters.from_theme(Theme(), KeywordOptions()))
processor.highlight_line("Hello null")  # 'Hello \x1b[3;31mnull\x1b[0m'
processor.apply(["first line", "second line"])  # lines joined with "\n"
```

A theme from a file is built with `tailhue.mapper.map_theme(tailhue.theme_loader.load_theme(path))`.
Each highlighter in `tailhue.highlighters` can also be used on its own through
its `apply` method.

## Limitations

Files are followed by polling every 0.1 seconds. A file that shrinks is read
again from the start, but a file that is renamed or replaced is not picked up
again, and files added to a watched folder later are not watched.

## Running the tests

```
pip install '.[test]'
pytest
```