# pushswap

`pushswap` sorts a list of distinct integers using two stacks, `a` and `b`,
and prints the instructions that sort them. It also comes with the small
helper library it is built on: character classes, string helpers, a
printf-style formatter, a buffered line reader and a singly linked list.

## Installation

```
pip install .
```

## Command line

```
pushswap 3 2 1
pushswap "4 67 3 87 23"
```

You can pass the numbers as separate arguments or as one argument that
holds them separated by spaces. The first number is the top of stack `a`.
The program prints one instruction per line to standard output and exits
with status 0. Input that is already sorted prints nothing.

If no argument is given, or the single argument is empty, the program
exits with status 1 and prints nothing. If a token is not an optional
sign followed by digits, or a value is repeated, it prints `Error` and
exits with status 1. Numbers are read as 32-bit signed integers: a value
outside that range is not rejected but wraps around, so it may end up
reported as a repeat of another value.

The instructions are:

| Instruction | Effect |
|-------------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, of `b`, or of both |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate up: the top element goes to the bottom |
| `rra`, `rrb`, `rrr` | rotate down: the bottom element goes to the top |

## Library use

```python
from pushswap.sorter import solve
from pushswap.stack import is_sorted

moves = solve([3, 2, 1])        # ['ra', 'sa']
print(is_sorted([1, 2, 3]))     # True
```

`pushswap.stack.Stacks(values, stream=None)` holds the two stacks as
`deque` objects in `a` and `b`, top first, and has one method for each
instruction. Every method writes the instruction's name as a line to
`stream` (standard output when it is `None`) and appends it to the
`operations` list. `pushswap.sorter.sort_three` and
`pushswap.sorter.sort_stacks` work on a `Stacks` object directly;
`solve` runs the whole sort on a private stream and returns the list of
instruction names.

`pushswap.cli` exposes the pieces of the command: `is_valid_number`,
`parse_args`, `parse_numbers` (raising `InputError`) and `main(argv=None)`.

The helper modules:

- `pushswap.chars`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `is_sign`, `is_space`, `to_upper`, `to_lower`. Each takes
  an integer code or a one-character string.
- `pushswap.strings`: `atoi`, `itoa`, `split`, `strchr`, `strrchr`,
  `striteri`, `strjoin`, `strlcat`, `strlcpy`, `strmapi`, `strncmp`,
  `strnstr`, `strtrim`, `substr`. Search functions return an index or
  `None`; `strlcat` and `strlcpy` return the resulting string together
  with the length the full result would have had.
- `pushswap.output`: `format_printf` and `printf` handle the
  `%c %s %d %i %u %x %X %p %%` conversions and raise `FormatError` on
  any other conversion or a missing argument. `printf` returns the number
  of characters written. `put_char`, `put_str`, `put_endl` and `put_nbr`
  write to a stream, standard output by default.
- `pushswap.lines`: `LineReader(stream, buffer_size=42)` reads a text or
  binary stream in chunks of `buffer_size` and returns one line at a time
  from `readline()`, keeping the newline, and `None` at the end. You can
  iterate over it.
- `pushswap.linked`: `LinkedList` provides `push_front`, `push_back`,
  `last`, `clear`, `for_each`, `len()` and iteration.

## What it does not do

The package has no raw byte-buffer helpers (fill, copy, compare or search
within a `bytearray`); use Python's own `bytes` and `bytearray` methods
for that. There is also no checker command that reads instructions and
verifies a sort.

## Tests

```
pip install ".[test]"
pytest
```