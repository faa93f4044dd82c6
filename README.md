# shiftword

Two small solvers in one package:

* **Wordle helper** (`shiftword.wordle`): given a partially known word and
  letters that must appear somewhere in it, list every dictionary word
  that fits.
* **Shift scheduler** (`shiftword.schedwork`): given which workers are
  available on which days, assign a fixed number of distinct workers to
  every day without anyone working more than a set number of shifts.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Wordle helper

The pattern uses letters for known positions and `-` for unknown ones.
Each unknown position must be filled by a lower-case letter `a`–`z`.
The optional second argument lists "floating" letters: letters that must
be used in one of the unknown positions. A letter given twice must be
used twice.

```
shiftword-wordle "s---ng" "i"
```

The command reads its word list from `dict-eng.txt` in the current
directory; any whitespace-separated text file works. Words starting with
a capital letter, and words holding anything other than ASCII letters,
are skipped, and the number of words kept is reported on standard error.
Matching words are printed one per line in alphabetical order. Run
without arguments, the command prints a usage hint and exits with
status 1.

From Python:

```python
from shiftword.dictionary import read_dict_words
from shiftword.wordle import wordle

words = read_dict_words("dict-eng.txt")
for word in sorted(wordle("s---ng", "i", words)):
    print(word)
```

`read_dict_words` returns a `frozenset` of words and raises `OSError`
("Cannot open dictionary file.") when the file cannot be opened.
`wordle` accepts any iterable of words and returns a `set` of matches.

## Shift scheduler

Availability is a matrix with one row per day and one column per worker;
a truthy value (such as `1`) means the worker can work that day.
`schedule(avail, daily_need, max_shifts)` picks `daily_need` distinct
available workers for every day, giving no worker more than `max_shifts`
shifts in total. Workers are tried in order of their id, so the first
valid schedule found is returned.

```python
from shiftword.schedwork import schedule, format_schedule

avail = [
    [1, 1, 1, 1],
    [1, 0, 1, 0],
    [1, 1, 0, 1],
    [1, 0, 0, 1],
]
sched = schedule(avail, 2, 2)
if sched is not None:
    print(format_schedule(sched), end="")
```

The result is a list holding one list of worker ids per day, or `None`
when no schedule exists. An empty availability matrix has no schedule.
`format_schedule` renders one `Day N: ...` line per day, each worker id
followed by a space.

The bundled demonstration solves the example above (two workers per
day, at most two shifts each):

```
shiftword-schedwork
```

It prints one line per day, such as `Day 0: 0 1 `, or
`No solution found!` when no schedule exists.

## What the package does not do

The scheduler command only runs its built-in example; it does not read
an availability matrix from a file or from the command line. No word
list is included: the Wordle command needs a `dict-eng.txt` supplied by
you.