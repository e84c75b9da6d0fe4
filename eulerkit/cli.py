"""Command line entry point: run a problem's solutions and time them."""

import argparse
import sys
import time

from . import (
    problem001,
    problem002,
    problem003,
    problem004,
    problem005,
    problem006,
    problem007,
    problem008,
    problem009,
    problem010,
    problem011,
    problem012,
    problem013,
    problem014,
    problem015,
    problem016,
    problem017,
    problem018,
    problem019,
    problem020,
    problem021,
    problem022,
    problem023,
    problem024,
    problem025,
    problem026,
    problem027,
    problem028,
    problem029,
    problem030,
    problem031,
    problem032,
)

_PROBLEM3_INPUT = 71


def _single(solver):
    return (("Solution", solver),)


def _pair(first, second):
    return (("Solution 1", first), ("Solution 2", second))


SOLVERS = {
    1: _pair(problem001.sum_multiples_loop, problem001.sum_multiples),
    2: _pair(problem002.even_fibonacci_sum, problem002.even_fibonacci_sum_stepped),
    3: _pair(
        lambda: problem003.largest_prime_factor_descending(_PROBLEM3_INPUT),
        lambda: problem003.largest_prime_factor(_PROBLEM3_INPUT),
    ),
    4: _single(problem004.largest_palindrome_product),
    5: _single(problem005.smallest_multiple),
    6: _pair(
        problem006.sum_square_difference,
        problem006.sum_square_difference_single_pass,
    ),
    7: _single(problem007.nth_prime),
    8: _single(lambda: problem008.largest_window_product()[0]),
    9: _single(problem009.triplet_product),
    10: _single(problem010.sum_of_primes),
    11: _pair(problem011.largest_product, problem011.largest_product_combined),
    12: _single(problem012.first_triangle_with_divisors),
    13: _single(problem013.leading_sum),
    14: _single(problem014.longest_collatz_start),
    15: _single(problem015.count_paths),
    16: _single(problem016.power_digit_sum),
    17: _single(problem017.number_letter_count),
    19: _single(problem019.count_sundays),
    20: _single(problem020.factorial_digit_sum),
    21: _single(problem021.amicable_sum),
    23: _single(problem023.non_abundant_sum),
    24: _single(problem024.nth_permutation),
    25: _single(problem025.first_fibonacci_with_digits),
    26: _single(problem026.longest_cycle_denominator),
    27: _single(problem027.quadratic_primes_product),
    28: _single(problem028.spiral_diagonal_sum),
    29: _single(problem029.distinct_powers),
    30: _single(problem030.digit_power_numbers_sum),
    31: _single(problem031.count_coin_combinations),
    32: _single(problem032.pandigital_products_sum),
}

FILE_SOLVERS = {
    18: problem018.solve,
    22: problem022.solve,
}


def _run(label, solver):
    start = time.process_time()
    result = solver()
    elapsed = time.process_time() - start
    print(f"{label}: {result} ({elapsed:f} s)")


def _parser():
    parser = argparse.ArgumentParser(
        prog="eulerkit", description="Solve a numbered problem and report the time taken."
    )
    parser.add_argument("problem", type=int, help="problem number")
    parser.add_argument("path", nargs="?", help="input file, for problems that read one")
    return parser


def main(argv=None):
    """Run the requested problem; return the process exit status."""
    parser = _parser()
    args = parser.parse_args(argv)

    if args.problem in FILE_SOLVERS:
        if args.path is None:
            parser.error(f"problem {args.problem} needs an input file")
        solver = FILE_SOLVERS[args.problem]
        try:
            _run("Solution", lambda: solver(args.path))
        except (OSError, ValueError) as error:
            print(f"eulerkit: {error}", file=sys.stderr)
            return 1
        return 0

    if args.problem not in SOLVERS:
        parser.error(f"unknown problem {args.problem}")
    if args.path is not None:
        parser.error(f"problem {args.problem} takes no input file")
    for label, solver in SOLVERS[args.problem]:
        _run(label, solver)
    return 0


if __name__ == "__main__":
    sys.exit(main())