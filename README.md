# gklib

A small collection of algorithmic building blocks for numerical and
text-processing code, in pure Python with no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite, install the `test` extra and run pytest:

```
pip install ".[test]"
pytest
```

## What is inside

| Module            | Contents |
|-------------------|----------|
| `gklib.qsort`     | `quicksort(items, less)`: an in-place, non-stable median-of-three quicksort that finishes with an insertion-sort pass; `less(a, b)` decides the order |
| `gklib.sorting`   | `sort_ascending`, `sort_descending` for plain values; `sort_kv_ascending`, `sort_kv_descending` for lists of the `KeyValue` dataclass (`key`, `val`), ordered by key |
| `gklib.pqueue`    | `PriorityQueue(maxnodes)`: a max-heap over integer nodes in `range(maxnodes)` with `insert`, `delete`, `update`, `pop`, `peek_value`, `peek_key`, `key_of`, `reset`, `check_heap`, `len()` and `in`; `BoundedPriorityQueue(maxnodes)`: a max-heap of arbitrary values whose `insert` returns `False` once it is full |
| `gklib.blas`      | vector helpers: `incset`, `vmax`, `vmin`, `argmax`, `argmin`, `argmax_n`, `vsum`, `scale`, `norm2`, `dot`, `axpy`, and `array2csr`, which groups positions of a label array by value |
| `gklib.rng`       | `MersenneTwister64(seed)`: a 64-bit Mersenne Twister with `seed`, `randint64` (values in `[0, 2**63)`), `randint32` (values in `[0, 2**31)`), `rand_in_range`, and the in-place shuffles `permute` and `permute_fine` |
| `gklib.rw`        | `pagerank(rowptr, rowind, rowval, restart, lamda, eps, max_niter)`: personalised PageRank over a graph given as CSR arrays; returns the scores and the iteration count |
| `gklib.tokenizer` | `tokenize(line, delim)`: splits a line at runs of delimiter characters, never yielding empty tokens |
| `gklib.strings`   | `chr_replace` (like `tr//`), `regex_replace` (like `s///`, with `$0`–`$9` and the `i`/`g` options), `tail_prune`, `head_prune`, `equal_ignore_case`, `reverse_compare`, `time_to_str`, `str_to_time`, `get_string_id` |
| `gklib.seq`       | `AlphabetMap`, the `Sequence` dataclass and `read_gkmod_pssm(filename)`, which reads a PSSM/PSFM file in gkmod format |
| `gklib.timers`    | `wclock_seconds`, `cpu_seconds` and `Timer`, an accumulating timer that can also be used as a context manager |

Errors are raised as exceptions: popping or peeking an empty queue raises
`IndexError`, an unknown node raises `KeyError`, a malformed pattern,
replacement or time string raises `ValueError`, and `get_string_id` raises
`KeyError` when no name matches.

## Examples

Priority queue:

```python
from gklib.pqueue import PriorityQueue

pq = PriorityQueue(10)
pq.insert(3, 5.0)
pq.insert(7, 9.0)
pq.update(3, 12.0)
assert pq.pop() == 3
```

Tokenizing a line:

```python
from gklib.tokenizer import tokenize

assert tokenize("  a b\tc\n", " \t\n") == ["a", "b", "c"]
```

Regex substitution, with `$1` referring to the first captured group:

```python
from gklib.strings import regex_replace

text, count = regex_replace("foo bar", "(o+)", "[$1]", "g")
assert (text, count) == ("f[oo] bar", 1)
```

Seeded random permutation:

```python
from gklib.rng import MersenneTwister64

rng = MersenneTwister64(42)
p = list(range(20))
rng.permute_fine(p)
```

PageRank over a two-node graph stored in CSR form:

```python
from gklib.rw import pagerank

scores, iterations = pagerank([0, 1, 2], [1, 0], [1.0, 1.0], [0.5, 0.5], 0.85, 1e-9, 100)
```

Timing a block:

```python
from gklib.timers import Timer, cpu_seconds

with Timer(cpu_seconds) as t:
    sum(range(100000))
print(t.elapsed())
```

## What it does not do

This is a library only: it installs no command-line tool. It has no sparse
matrix or graph type — `pagerank` works on plain CSR arrays you supply — and
no general file readers or writers beyond the PSSM reader in `gklib.seq`.