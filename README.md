# waterdrop

A collection of small building blocks for Python services.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and run `pytest`:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `waterdrop.buffer` | `Buffer`, a byte buffer that tracks its capacity; `BufferPool` and `SizedBufferPool`, which reuse buffers and do not keep ones that have grown beyond their initial capacity |
| `waterdrop.lru` | `LRUCache`, thread safe, with an optional `on_evicted` callback; a `max_entries` of zero means no limit |
| `waterdrop.rollingwindow` | `RollingWindow` and `Bucket`, time-bucketed sums and counts; the clock can be supplied for testing |
| `waterdrop.trie` | `Trie`, which finds keywords in text and replaces them with a mask character (`*` by default) |
| `waterdrop.slices` | `contain`, `remove`, `reverse`, `diff`, `intersect`, `unique`, `merge` and `sort_values` |
| `waterdrop.jitter` | `jitter` for integers and `jitter_time` for `timedelta` values |
| `waterdrop.timeutil` | `Time`, with begin and end of year, month, week (Sunday to Saturday), day, hour and minute; `now`, `parse_by_layout`, `format_unix` and layout constants such as `DATE_FORMAT` |
| `waterdrop.netutil` | `internal_ip`, `external_ip` and `is_public_ipv4` (interface data comes from `psutil`) |

## Examples

An LRU cache that evicts its oldest entry:

```python
from waterdrop.lru import LRUCache

cache = LRUCache(2)
cache.add("a", 1)
cache.add("b", 2)
cache.add("c", 3)       # evicts "a"
cache.get("a", None)    # -> None
len(cache)              # -> 2
```

Masking keywords with a trie:

```python
from waterdrop.trie import Trie

trie = Trie(["foo", "bar"])
sanitized, found, exist = trie.query("a foo and a bar")
# sanitized == "a *** and a ***", found == ["foo", "bar"], exist is True

Trie(["foo"], mask="#").query("foo!")[0]   # -> "###!"
```

List helpers:

```python
from waterdrop.slices import diff, intersect, merge, unique

diff([1, 2, 3], [2])            # -> [1, 3]
intersect([1, 2, 3], [3, 2])    # -> [2, 3]
unique(merge([1, 2], [2, 3]))   # -> [1, 2, 3]
```

Jitter:

```python
from datetime import timedelta
from waterdrop.jitter import jitter, jitter_time

jitter(10, 0.5)                   # a value in [5, 15)
jitter_time(timedelta(seconds=10)) # between 9 and 11 seconds
```

Calendar helpers:

```python
from datetime import timezone
from waterdrop.timeutil import DATETIME_FORMAT, DATE_FORMAT, parse_by_layout

t = parse_by_layout("2020-11-26 14:10:32", DATETIME_FORMAT, timezone.utc)
t.begin_of_month().format(DATE_FORMAT)   # -> "2020-11-01"
t.current_unix_time()                    # -> 1606399832
```

Layouts are `strftime` patterns; `%:z` writes the UTC offset as `+HH:MM`.

## What this package does not do

It has no command-line tool, no encryption, hashing or encoding helpers, no
priority queue, no concurrent map and no string helpers. It only offers the
modules listed above.