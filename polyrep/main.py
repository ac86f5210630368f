#!/usr/bin/env python

"""
Demonstration entry point for polyrep. Run with --help for options.

Prints a few sample computations and checks that the arithmetic operations
leave their operands unchanged.
"""

import sys
import argparse

from polyrep import opts
from polyrep import logging
from polyrep.dense import DensePolynomial
from polyrep.polynomials import CROSS_ADD
from polyrep.sparse import SparsePolynomial

def _immutability_checks(one, two_x):
    """Yield (operation name, passed?) for each arithmetic operation on `one`."""
    with logging.task("add"):
        one.add(two_x)
        yield "Add", one.coefficient_at(1) == 0
    with logging.task("subtract"):
        one.subtract(two_x)
        yield "Subtract", one.coefficient_at(1) == 0
    with logging.task("multiply"):
        one.multiply_by_scalar(2)
        yield "Multiply", one.coefficient_at(0) == 1
    with logging.task("negate"):
        one.negate()
        yield "Negate", one.coefficient_at(0) == 1

def demo(make, out=None):
    """Print the sample computations using polynomials built by `make`.

    `make(coefficient, exponent)` is DensePolynomial or SparsePolynomial.
    Output goes to `out` (default: standard output).  Returns True if every
    immutability check passed.
    """
    if out is None:
        out = sys.stdout
    name = make.__name__
    with logging.task("demo", representation=name):
        zero = make()
        one = make(1, 0)
        two_x = make(2, 1)
        minus_two_x = make(-2, 1)
        x_to_minus_100 = SparsePolynomial(1, -100)

        with logging.recording() as events:
            print("zero: {}".format(zero), file=out)
            print("one: {}".format(one), file=out)
            print("one plus twoX: {}".format(one + two_x), file=out)
            print("one plus twoX plus minusTwoX: {}".format(one + two_x + minus_two_x), file=out)
            print("one plus x to -100: {}".format(one + x_to_minus_100), file=out)
        print("cross-representation additions: {}".format(
            sum(1 for e in events if e.message.startswith(CROSS_ADD))), file=out)

        ok = True
        for op, passed in _immutability_checks(one, two_x):
            print("{} method test: {} is {}an immutable class.".format(
                op, name, "" if passed else "not "), file=out)
            ok = ok and passed
    return ok

def run(argv=None):
    """Entry point for the polyrep executable.

    This procedure reads sys.argv (or `argv`) and prints the demonstration.
    """

    parser = argparse.ArgumentParser(description="Dense and sparse integer polynomials.")
    parser.add_argument("--sparse", action="store_true", help="Build the sample polynomials as SparsePolynomials")
    parser.add_argument("--profile", metavar="FILE", default=None, help="Write time spent in each step to FILE")

    internal_opts = parser.add_argument_group("Internal parameters")
    opts.setup(internal_opts)

    args = parser.parse_args(argv)
    opts.read(args)

    ok = demo(SparsePolynomial if args.sparse else DensePolynomial)

    if args.profile:
        logging.dump_profile(args.profile)

    if not ok:
        sys.exit(1)

if __name__ == "__main__":
    run()
