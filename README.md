# sliceops

Small helpers for working with lists, with no dependencies beyond the
standard library. It covers taking and dropping elements by position,
filtering and mapping, sorting, set-like operations, simple statistics,
function composition and currying, JSON encoding of flat lists, handing
elements to a consumer until cancelled, and a chainable wrapper.

Most functions accept `None` where a list is expected and treat it as
empty. Functions that build lists always return new lists and leave their
input unchanged (except `access.pop`, which removes from the list it is
given).

## Installation

```
pip install sliceops
```

## Modules

- `sliceops.stats`: `absolute`, `total`, `product`, `average`, `minimum`,
  `maximum`, `median`, `mode`, `stddev`, `count_values`, `random_element`.
  Empty input gives `0` (or `0.0` for `average` and `stddev`, `[]` for
  `mode`).
- `sliceops.predicates`: `all_of`, `any_of`, `are_sorted`, `contains`,
  `equals`, `index_of` (returns `-1` when nothing matches), `find`
  (calls `fn(element, index)`, returns `None` when nothing matches).
- `sliceops.access`: `top`, `bottom`, `drop_top`, `drop_while`, `chunk`,
  `first`, `first_or`, `last`, `last_or`, `flat`, `insert`, `pop`, `shift`,
  `unshift`, `sub_slice`.
- `sliceops.transform`: `each`, `filter_items`, `filter_not`, `map_items`,
  `reduce_items`, `reverse`, `group_by`, `shuffle`, `sort_items`,
  `sort_using`, `sort_stable_using`, `unique`, `are_unique`, `diff`,
  `intersect`, `keys`, `values`.
- `sliceops.sequence`: `sequence`, `sequence_using`.
- `sliceops.compose`: `compose`.
- `sliceops.curry`: `curry`.
- `sliceops.encoding`: `json_bytes`, `json_bytes_indent`,
  `json_string_indent`.
- `sliceops.channel`: `send`.
- `sliceops.chain`: `Chain`, `of`, `of_split_string`.

## Examples

Statistics:

```python
from sliceops.stats import average, median, count_values

average([2.2, 3.1, 5.1, 1.9])      # 3.075
median([2.1, 12.3, 4.5])           # 4.5
count_values([1, 2, 2, 3, 3, 3])   # {1: 1, 2: 2, 3: 3}
```

`median` of an even number of integers truncates the mean of the two middle
values towards zero. `random_element` and `transform.shuffle` take an
optional `random.Random`; without one they use the `random` module.

Taking parts of a list:

```python
from sliceops.access import top, bottom, chunk, sub_slice

top([1.23, 2.34], 1)               # [1.23]
bottom([1, 2, 3], 2)               # [3, 2]
chunk([1, 2, 3], 2)                # [[1, 2], [3]]
sub_slice([1.23, 2.34], 1, 3, 0)   # [2.34, 0]
```

`chunk` raises `ValueError` when the chunk length is not greater than 0, and
`insert` raises `IndexError` for a negative index.

Transforming:

```python
from sliceops.transform import filter_items, group_by, diff, sort_stable_using

filter_items([1, 2, 3], lambda x: x != 2)                        # [1, 3]
group_by([23, 76, 37, 11, 23, 47], lambda n: n % 5)              # {3: [23, 23], 1: [76, 11], 2: [37, 47]}
added, removed = diff([1, 2, 3], [2, 3, 4])                      # [4], [1]
sort_stable_using(["aaa", "b", "cc"], lambda a, b: len(a) < len(b))  # ["b", "cc", "aaa"]
```

`unique` keeps the order of first appearance; `intersect` returns an empty
list when no other lists are given.

Ranges:

```python
from sliceops.sequence import sequence, sequence_using

sequence(3)            # [0, 1, 2]
sequence(3, 7, 2)      # [3, 5]
sequence(-6, -10, -1)  # [-6, -7, -8, -9]
sequence_using(float, 2)   # [0.0, 1.0]
```

A step of zero raises `ValueError`; no arguments give an empty list.

Composition and currying:

```python
from sliceops.compose import compose
from sliceops.curry import curry

inc = lambda x: x + 1
dbl = lambda x: x * 2
compose(inc, dbl)(0)     # 1, applied right to left

add3 = curry(lambda a, b, c: a + b + c, 3)
add3(1)(2)(3)            # 6
```

`curry` accepts an arity from 2 to 16; `compose` needs at least one
function.

JSON (flat lists of numbers, strings and booleans):

```python
from sliceops.encoding import json_bytes, json_string_indent

json_bytes([23, -2.5, 3424, 12.3])    # b"[23,-2.5,3424,12.3]"
json_string_indent([12.3], "", "  ")  # "[\n  12.3\n]"
json_bytes(None)                      # b"[]"
```

Sending to a consumer:

```python
import queue
import threading
from sliceops.channel import send

q = queue.Queue()
stop = threading.Event()
sent = send([1.2, 3.2], q.put, stop)   # [1.2, 3.2]
```

`cancelled` is checked before each element; a returned list shorter than the
input means sending stopped early.

Chaining:

```python
from sliceops.chain import of, of_split_string

of(["Bob", "Sally", "John", "Jane"]).filter_not(lambda n: n.startswith("J")).result
# ["Bob", "Sally"]

of_split_string("a,b,c", ",").reverse().join("-")   # "c-b-a"
```

## Running the tests

```
pip install -e ".[test]"
pytest
```