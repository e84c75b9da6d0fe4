# eulerkit

Solutions to Project Euler problems 1 to 32, one module per problem, each made
of plain functions. Several problems come with two approaches (a direct one and
a faster one), and both are kept so their answers and timings can be compared.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Using the library

Each problem lives in its own module, `eulerkit.problem001` to
`eulerkit.problem032`. Every solver takes the problem's own figures as
defaults, so calling it with no arguments gives the answer to the problem as
posed; the arguments let you try other sizes.

```python
from eulerkit.problem001 import sum_multiples, sum_multiples_loop
from eulerkit.problem007 import nth_prime
from eulerkit.problem011 import largest_product
from eulerkit.problem015 import count_paths
from eulerkit.problem024 import nth_permutation

sum_multiples(1000)                  # multiples of 3 or 5 below 1000
sum_multiples_loop(10)               # 23, the same sum by checking each number
nth_prime(10001)                     # the 10001st prime
largest_product(size=4)              # four adjacent numbers in the built-in 20x20 grid
count_paths(20)                      # lattice paths through a 20x20 grid
nth_permutation(range(10), 1000000)  # millionth lexicographic permutation, as a string
```

Some helpers are useful on their own, for example
`problem008.largest_window_product(digits, size)`, which returns both the
largest product and the digits of the window that gave it, and
`problem024.permutations_in_order(digits)`, a generator of every arrangement
as a string.

Functions raise `ValueError` for arguments that make no sense, such as a
negative grid size or exponent.

### Problems that read a data file

Problems 18 and 22 work on a file whose path you give:

```python
from eulerkit.problem018 import read_pyramid, max_path_sum, solve as max_triangle_path
from eulerkit.problem022 import solve as names_score

max_triangle_path("triangle.txt")  # prints the pyramid and its running sums, returns the best sum
max_path_sum(read_pyramid("triangle.txt"))  # the same sum without printing
names_score("names.txt")           # sorts the names and returns the total score
```

- The pyramid file starts with the number of rows, followed by the numbers of
  the rows, separated by whitespace.
- The names file starts with the number of names, followed by the names in
  upper case, separated by whitespace (one per line works well). Only the
  first `count` names are used.

A file that is empty or holds fewer numbers or names than its count announces
raises `ValueError`.

## Command line

The `eulerkit` command runs a problem's solutions and prints each answer with
the processor time it took:

```
eulerkit 1
eulerkit 15
eulerkit 18 triangle.txt
eulerkit 22 names.txt
eulerkit --help
```

Problems with two approaches print a `Solution 1` and a `Solution 2` line;
the others print one `Solution` line. Problem 3 is run on the number 71, and
problem 8 prints only the product. Problems 18 and 22 need the path of their
data file; other problems refuse one. A file that cannot be read or parsed is
reported on standard error with exit status 1.

## What it does not include

The data files for problems 18 and 22 are not shipped; you supply them. Some
of the straightforward approaches (for example
`problem015.count_paths_recursive` or `problem003.largest_prime_factor_descending`)
are slow on large inputs and are meant for comparison on small ones.