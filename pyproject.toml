[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fzfcore"
version = "0.62.0"
description = "Scoring schemes, Latin normalization, ANSI color extraction, item storage and query history for a command-line fuzzy finder"
requires-python = ">=3.10"
dependencies = []
keywords = ["fuzzy", "finder", "ansi", "normalization", "history", "chunks"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fzfcore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
