# pushswap

Sorts a list of distinct integers using two stacks and a fixed set of
instructions, and prints the instructions it used, one per line.

## Installation

```
pip install .
```

## Command line

```
push_swap 3 2 1
```

prints

```
sa
rra
```

Each argument is one integer. If any argument is rejected, `Error` is
written to standard error and the command exits with a non-zero status.
An argument is rejected when:

- it does not read as a number (leading whitespace and a single `+` or `-`
  are allowed; after the digits only the end of the text or a space may
  follow),
- its value lies outside the 32-bit signed range,
- or its value repeats an earlier one.

One quirk: an argument that starts with `0` and does not otherwise read as
a number, such as `0abc`, is taken as the value 0, while `-0` is rejected.

With fewer than two arguments nothing is checked and nothing is printed.
If the numbers are already in ascending order, nothing is printed.

## Instructions

| Name  | Effect                                          |
|-------|-------------------------------------------------|
| `sa`  | swap the top two elements of stack a            |
| `sb`  | swap the top two elements of stack b            |
| `ss`  | `sa` and `sb` together                          |
| `pa`  | move the top of b onto a                        |
| `pb`  | move the top of a onto b                        |
| `ra`  | rotate a up by one (top goes to bottom)         |
| `rb`  | rotate b up by one                              |
| `rr`  | `ra` and `rb` together                          |
| `rra` | rotate a down by one (bottom goes to top)       |
| `rrb` | rotate b down by one                            |
| `rrr` | `rra` and `rrb` together                        |

An instruction that would have nothing to act on (for example `pa` with b
empty, or `ra` with fewer than two elements on a) is skipped and not
reported.

## Strategy

The input is first replaced by ranks `1..n` (`pushswap.parsing.normalize`).
Two to five values are sorted by small fixed routines (`solve2` to `solve5`
in `pushswap.sorting`); larger inputs use a binary radix sort across the two
stacks (`radix_sort`). `sort_stacks` picks the routine by size and does
nothing when stack a is already in order.

## Limitations

- The radix sort makes as many passes as the bit length of `n - 1`. When
  `n` is a power of two of 8 or more, the largest rank needs one bit more
  than that, so it ends up on top of the stack instead of at the bottom and
  the printed sequence does not fully sort the input.
- `normalize` marks ranked entries with the largest 32-bit integer, so an
  input containing 2147483647 is not always ranked faithfully.
- There is no checker: the package produces instruction sequences but does
  not read instructions back to verify them.

## Library use

```python
from pushswap.parsing import parse_stack, normalize
from pushswap.stacks import Stacks
from pushswap.sorting import sort_stacks

ops = []
stacks = Stacks(normalize(parse_stack(["5", "1", "4", "2", "3"])), ops.append)
sort_stacks(stacks)
print(ops)
```

`parse_stack` raises `ArgumentError` (a `ValueError`) on invalid input.
`Stacks` holds the deques `a` and `b`, each with its top at index 0; every
instruction is a method of the same name, and `Stacks.apply(name)` runs one
by name, raising `ValueError` for an unknown name. The second argument to
`Stacks` receives the name of each instruction that takes effect; without
it the names are written to standard output.

## Other helpers

The package also holds small stand-alone helpers:

- `pushswap.charclass`: ASCII classification and case conversion on code
  points (`isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`, `tolower`,
  `toupper`).
- `pushswap.numconv`: `atoi` (32-bit, wrapping), `atol` (64-bit, wrapping,
  returns 0 when the digits are followed by anything but a space or the
  end) and `itoa`.
- `pushswap.memory`: `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`,
  `memmove` and `memset` on `bytearray` buffers.
- `pushswap.strings`: `strlen`, `strchr`, `strrchr`, `strdup`, `substr`,
  `strjoin`, `strlcpy`, `strlcat`, `strncmp`, `strnstr`, `strtrim`,
  `split`, `strmapi` and `striteri`, returning indices or `None` where a
  search fails.
- `pushswap.output`: `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`
  on a text stream, and `putnbr`, `putstr` on standard output.
- `pushswap.formatting`: `sprintf` and `printf` supporting `%c %s %p %d %i
  %u %x %X %%`, plus `format_decimal`, `format_unsigned`, `format_hex`,
  `format_pointer` and `format_string`.