# audioblocks

Small building blocks for block-based audio processing, in pure Python with
no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install .[test]
pytest
```

## Modules

### `audioblocks.mathtools`

- `db2linear(level, power=False)` and `linear2db(x, power=False)` convert
  between decibel levels and linear gain (factor 20, or 10 with `power=True`).
  `linear2db` returns `-inf` for 0 and `nan` for negative input.
- `deg2rad`, `rad2deg`, `square`.
- `wrap(x, full)` wraps into `[0, full)`; `wrap_two_pi(x)` wraps an angle into
  `[0, 2*pi)`.
- `next_power_of_2(number)` gives the smallest power of 2 that is `>= number`
  (1 for anything `<= 1`).
- `max_amplitude(values)`, `rms(values)` (`nan` for an empty input) and
  `has_only_zeros(values)`.
- `RaisedCosine(period)`: a callable with results between 0 and 1.
- `LinearInterpolator(first, last, length=1)`: a callable giving `first` at 0
  and `last` at `length`; `set()` changes the range.

### `audioblocks.blockparameter`

`BlockParameter(value)` keeps a current and a previous value. `assign(value)`
stores a new value and makes the former one `old`; the properties `value`,
`old` and `changed` report on them. The in-place operators `+=`, `-=`, `*=`
and `/=` change only the current value. `both()` returns a `BothProxy` whose
comparisons (`==`, `!=`, `<`, `>`, `<=`, `>=`) are true only if they hold for
both values. `exactly_one_assignment()` and `no_multiple_assignments()` check
how often `assign` was called and reset the count.

### `audioblocks.stringtools`

- `to_string(value)`: booleans become `"true"`/`"false"`, floats use six
  significant digits.
- `parse(text, kind)` converts to `bool`, `int`, `float` or `str`; only
  surrounding whitespace is allowed besides the value, and booleans accept
  `"1"`, `"0"`, `"true"` and `"false"`. Raises `ValueError` on failure.
- `parse_or(text, default)` converts to the type of `default` and returns
  `default` if that fails.
- `string_to_time(text, kind=float)` returns seconds from strings such as
  `"1:02:03.5"`, `"2:30"`, `"4 min"`, `"2 h"`, `"250 ms"` or `"12.5"`.
  Negative times are allowed. With `kind=int` the result must be a whole
  number of seconds. Raises `ValueError` for invalid strings.

### `audioblocks.containers`

- `FixedVector(size=0, factory=None)`: storage that is set up once. An empty
  vector may be given room exactly once with `reserve(n)` (then filled with
  `append`) or `resize(n)`; otherwise its size never changes. Breaking these
  rules raises `RuntimeError`.
- `FixedList(items)`: elements can be re-ordered with `move`, `move_range`,
  `reverse` and `sort`, but not added or removed.
- `FixedMatrix(channels, slices)`: flat storage with writable `channels` and
  `slices` views of the same data. `set_channels(rows)` copies rows in;
  passing another matrix's `slices` transposes it.
- `distribute_list(source, targets, member)` moves each element of `source`
  to the list attribute `member` of the matching target;
  `undistribute_list(source, targets, member, garbage)` takes them back out
  into `garbage`.

### `audioblocks.delayline`

`BlockDelayLine(block_size, max_delay)` is a write-once/read-many delay line.
`write_block(source)` advances by one block and writes it; alternatively call
`advance()` and then `write_current(source)`. `read_block(delay, weight=None)`
returns one block delayed by `delay` samples, optionally scaled, and raises
`ValueError` for a delay outside `0..max_delay`. `read_samples(delay)` yields
samples endlessly from that delay on. `delay_is_valid` and `corrected_delay`
check and clamp delays.

`NonCausalBlockDelayLine(block_size, max_delay, initial_delay)` offers the
same interface but accepts delays down to `-initial_delay`.

### `audioblocks.fifo`

`LockFreeFifo(size)` is a ring-buffer queue for one producer and one consumer.
The size is rounded up to a power of 2 and it holds at most `size - 1` items.
`push(item)` returns `False` if the queue is full or `item` is `None`;
`pop()` returns `None` when the queue is empty; `empty()` tells whether there
is anything to pop.

## Examples

```python
from audioblocks.delayline import BlockDelayLine

line = BlockDelayLine(block_size=4, max_delay=6)
line.write_block([1, 2, 3, 4])
line.write_block([5, 6, 7, 8])
line.read_block(2)        # [3, 4, 5, 6]
line.read_block(0, 0.5)   # [2.5, 3.0, 3.5, 4.0]
```

```python
from audioblocks.stringtools import string_to_time

string_to_time("1:30", float)    # 90.0
string_to_time("2 h", int)       # 7200
string_to_time("250 ms")         # 0.25
```

## What this package does not do

It has no audio input or output: it does not open sound cards, audio
servers or sound files, and it provides no command-line program. Samples are
held in plain Python lists; the pieces here are meant to be used inside your
own processing code.