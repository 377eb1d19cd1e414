[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tailhue"
version = "0.1.0"
description = "A log file highlighter: colours dates, times, numbers, IPs, URLs, paths, UUIDs and keywords, then pages the result through less."
requires-python = ">=3.11"
dependencies = []
keywords = ["logs", "log-viewer", "highlighting", "tail", "ansi", "terminal", "less"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Logging",
    "Topic :: Text Processing :: Filters",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest", "pytest-asyncio"]

[project.scripts]
tailhue = "tailhue.app:main"

[tool.hatch.build.targets.wheel]
packages = ["tailhue"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 110
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
warn_redundant_casts = true
