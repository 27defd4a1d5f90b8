# fzfcore

Building blocks for a command-line fuzzy finder, as a plain Python library
with no third-party dependencies.

## What is in it

- `fzfcore.scoring` holds the scoring model. The score constants are `SCORE_MATCH`, `SCORE_GAP_START`, `BONUS_BOUNDARY`, `BONUS_CAMEL123`, `BONUS_CONSECUTIVE` and others. `CharClass` classifies characters. `Scheme` can be `"default"`, `"path"` or `"history"`. It classifies characters with `char_class_of` and gives the bonus for a position with `bonus_for` and `bonus_at`. `set_scheme(name)` chooses the current scheme and `current_scheme()` returns it. An unknown scheme name raises `ValueError`.
- `fzfcore.normalize.normalize_rune` and `normalize_runes` fold accented and other Latin-script letter variants to their ASCII base letters. Upper-case variants fold to upper case. Lower-case variants fold through `fzfcore.latin_lower.lower_base`.
- `fzfcore.ansi` handles escape sequences. `next_ansi_escape_sequence` finds the next sequence in a string. `parse_ansi_code` and `interpret_code` turn SGR and OSC 8 hyperlink codes into an `AnsiState`, which holds the foreground, background, `Attr` flags and an optional `Url`. `extract_color` strips the sequences from a line and returns three things: the plain text, a list of `AnsiOffset` ranges measured in characters, and the state that carries over to the next line. `AnsiState.to_ansi_string()` rebuilds an escape sequence from a state.
- `fzfcore.item.Item` is one input line. `as_string(strip_ansi)` returns the original line, with or without escape sequences.
- `fzfcore.chunklist` stores items. `ChunkList` builds items from raw data through a builder callable, which may return `None` to skip the data. It stores them in `Chunk`s of `CHUNK_SIZE` (100) items. `snapshot(tail)` returns a `Snapshot(chunks, count, changed)`, and when `tail` is greater than 0 only the last `tail` items are kept. `count_items` counts the items in a list of chunks.
- `fzfcore.cache.ChunkCache` caches results for each chunk and query. It only caches full chunks, and only up to `QUERY_CACHE_MAX` results. It offers `add`, `lookup`, `search`, `retire` and `clear`. `search` falls back to the longest cached prefix or suffix of the query.
- `fzfcore.history.History` keeps query history in a file of at most `max_size` entries, created with mode 0600. You move through it with `previous()`, `next()` and `current()`, and `override()` edits an entry in memory only. `HistoryError` is raised when the file cannot be read or created.
- `fzfcore.tempfiles.write_temporary_file` writes strings to a new temporary file, each one followed by a separator. It returns the path, or `None` if the file could not be created. `remove_files` deletes files and ignores failures.
- `fzfcore.constants` holds the limits and defaults, and `ExitCode` gives the process exit statuses.

## Installation

```
pip install .
```

## Examples

Stripping ANSI colors:

```python
from fzfcore.ansi import extract_color

text, offsets, state = extract_color("hello \x1b[32;1mworld", None, None)
print(text)                # hello world
print(offsets[0].start, offsets[0].end, offsets[0].color.fg)   # 6 11 2
```

Normalizing Latin letters:

```python
from fzfcore.normalize import normalize_runes

print(normalize_runes("Danço"))   # Danco
```

Bonus points:

```python
from fzfcore.scoring import current_scheme

scheme = current_scheme()
print(scheme.bonus_at("fooBar", 3))   # camelCase bonus, 7
```

Storing items:

```python
from fzfcore.cache import ChunkCache
from fzfcore.chunklist import ChunkList
from fzfcore.item import Item

items = ChunkList(ChunkCache(), lambda data: Item(text=data))
for line in ("alpha", "beta", "gamma"):
    items.push(line)
snapshot = items.snapshot(2)
print(snapshot.count, snapshot.changed)   # 2 True
```

Query history:

```python
from fzfcore.history import History

history = History("/tmp/queries", 1000)
history.append("foo")
print(history.previous())   # foo
```

## What it does not do

The package has no matching functions. It provides no fuzzy, exact, prefix, suffix or equality matcher that scores a pattern against a line, although `fzfcore.scoring` holds the constants and bonuses such matchers would use. There is also no command to run, no input reader, no search coordinator and no terminal interface. The package is a library of the pieces listed above.

## Running the tests

```
pip install .[test]
pytest
```