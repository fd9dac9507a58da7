# pushswap

Sorts a list of distinct integers using two stacks and a fixed set of
moves, and prints the moves it made, one per line.

## Install

```
pip install .
```

## Usage

```
push_swap 3 2 1
```

prints

```
ra
sa
```

Numbers can be given as separate arguments or several to one argument,
separated by spaces:

```
push_swap "4 67 3" 87 23
```

The first number is the top of stack a. Input that is already sorted
prints nothing. With no arguments the command prints nothing and exits
with status 0.

If a word is not a whole number in the 32-bit signed range, if an
argument is empty or only spaces, or if a number appears twice, the
command prints `Error` on standard output and exits with status 1. A
lone `+` or `-` is read as 0.

## The moves

`pushswap.stacks.Stacks` holds stacks `a` and `b` (top first) and offers
these moves; each one that changes a stack is appended to
`Stacks.operations` and, when `output` is set, written to it:

| Move            | Method                    | Effect                                   |
|-----------------|---------------------------|------------------------------------------|
| `sa` / `sb`     | `swap(name)`              | swap the two top elements of the stack   |
| `pa` / `pb`     | `push(name)`              | move the top of the other stack onto it  |
| `ra` / `rb`     | `rotate(name)`            | the top goes to the bottom               |
| `rra` / `rrb`   | `reverse_rotate(name)`    | the bottom goes to the top               |

A move on a stack with too few elements does nothing and is not recorded.

## How it sorts

`pushswap.sorting.sort_stacks` picks the method by the size of stack a:

- 2 numbers: one swap.
- 3 numbers (`sort_three`): a fixed sequence of at most two moves.
- 4 or 5 (`sort_four_five`): the smallest values are pushed to b until
  three are left, those are sorted, and b is pushed back.
- 6 or 7 (`sort_six_seven`): the smallest values are pushed to b until
  four are left, then as for five.
- More than 7 (`radix_sort`): a binary radix sort on the rank of each
  value. It raises `ValueError` if stack b is not empty, and
  `RuntimeError` if its passes leave a in an order rotation cannot fix.

## Library use

```python
from pushswap.parsing import parse_arguments
from pushswap.sorting import sort_stacks
from pushswap.stacks import Stacks

stacks = Stacks.from_values(parse_arguments(["3 2 1"]))
sort_stacks(stacks)
print(stacks.operations)   # ['ra', 'sa']
```

`parse_arguments` raises `pushswap.parsing.InputError` (a `ValueError`)
on bad input.

The package also carries small helper modules:

- `pushswap.numbers`: `atoi` (32-bit checked) and `itoa`.
- `pushswap.chars`: ASCII classification and case conversion.
- `pushswap.strings`: `strncmp`, `strchr`, `strrchr`, `strnstr`,
  `substr`, `strjoin`, `strtrim`, `split`, `strmapi`, `striteri`, and the
  byte-buffer copies `strlcpy` and `strlcat`.
- `pushswap.memory`: `memset`, `bzero`, `memcpy`, `memmove`, `memchr`,
  `memcmp`, `calloc`, `realloc` on byte buffers.
- `pushswap.linked_list`: `LinkedList` and `Node`.
- `pushswap.fdout`: `put_char`, `put_str`, `put_endl`, `put_nbr`.
- `pushswap.printf`: `printf`, `format_string` and `itoa_base`, with the
  conversions `%c %s %d %i %u %p %x %X %%`.
- `pushswap.lines`: `LineReader` and `get_next_line`, reading a text or
  binary stream line by line in fixed-size chunks.

## What it does not do

There is no checker: the package prints moves that sort the input but has
no command that reads moves back and verifies them.

## Tests

```
pip install .[test]
pytest
```