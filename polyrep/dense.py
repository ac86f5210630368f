"""Polynomials stored as a tuple of coefficients indexed by exponent."""

from polyrep.common import typechecked
from polyrep.logging import event
from polyrep.polynomials import CROSS_ADD, Polynomial
from polyrep.sparse import SparsePolynomial
from polyrep.term import Term
from polyrep.wf import NotWellFormed, assert_wf

class DensePolynomial(Polynomial):
    """A polynomial whose i-th stored coefficient belongs to x^i.

    Invariants:
     - the zero polynomial has no stored coefficients
     - otherwise the last stored coefficient is nonzero

    Negative exponents cannot be stored; adding a SparsePolynomial to a
    DensePolynomial produces a SparsePolynomial for that reason.
    """
    __slots__ = ("_coefficients",)

    @typechecked
    def __init__(self, coefficient : int = 0, exponent : int = 0):
        if coefficient == 0:
            coefficients = ()
        else:
            if exponent < 0:
                raise ValueError("dense polynomials cannot hold the exponent {}".format(exponent))
            coefficients = (0,) * exponent + (coefficient,)
        object.__setattr__(self, "_coefficients", coefficients)
        assert_wf(self)

    @staticmethod
    def _of(coefficients):
        """Wrap a tuple that is already canonical."""
        p = DensePolynomial.__new__(DensePolynomial)
        object.__setattr__(p, "_coefficients", coefficients)
        return assert_wf(p)

    @staticmethod
    def from_coefficients(coefficients):
        """Build a polynomial from [c0, c1, c2, ...], ignoring trailing zeros."""
        coefficients = list(coefficients)
        for c in coefficients:
            if not isinstance(c, int) or isinstance(c, bool):
                raise TypeError("coefficient {!r} is not an int".format(c))
        return DensePolynomial._truncated(coefficients)

    @staticmethod
    def _truncated(buf):
        i = len(buf) - 1
        while i >= 0 and buf[i] == 0:
            i -= 1
        if i < 0:
            return DensePolynomial.ZERO
        return DensePolynomial._of(tuple(buf[:i+1]))

    def __reduce__(self):
        return (DensePolynomial.from_coefficients, (self._coefficients,))

    def __repr__(self):
        return "DensePolynomial.from_coefficients({!r})".format(list(self._coefficients))

    def coefficients(self):
        """The stored coefficients, lowest exponent first."""
        return self._coefficients

    def min_exponent(self):
        for i, c in enumerate(self._coefficients):
            if c != 0:
                return i
        return 0

    def max_exponent(self):
        if self.is_zero():
            return 0
        return len(self._coefficients) - 1

    @typechecked
    def coefficient_at(self, exp : int):
        if 0 <= exp < len(self._coefficients):
            return self._coefficients[exp]
        return 0

    def is_zero(self):
        return len(self._coefficients) == 0

    def terms(self):
        for i, c in enumerate(self._coefficients):
            if c != 0:
                yield Term(c, i)

    def is_well_formed(self):
        if not isinstance(self._coefficients, tuple):
            return NotWellFormed("dense", None, "storage is a {}, not a tuple".format(type(self._coefficients).__name__))
        if self._coefficients and self._coefficients[-1] == 0:
            return NotWellFormed("dense", len(self._coefficients) - 1, "trailing zero coefficient")
        return True

    def _add(self, other):
        if isinstance(other, DensePolynomial):
            return self._add_dense(other)
        # Fold each of our terms into the other operand.  The result is
        # sparse since the other operand may hold negative exponents.
        event("{}: dense {} + {} {}".format(CROSS_ADD, self, type(other).__name__, other))
        result = other if isinstance(other, SparsePolynomial) else other.to_sparse()
        for i, c in enumerate(self._coefficients):
            result = result.add(SparsePolynomial(c, i))
        return assert_wf(result)

    def _add_dense(self, other):
        if other.is_zero():
            return self
        if self.is_zero():
            return other
        buf = [0] * max(len(self._coefficients), len(other._coefficients))
        for i in range(len(buf)):
            buf[i] = self.coefficient_at(i) + other.coefficient_at(i)
        # Cancellation may leave zeros at the top, e.g. 2x + -2x.
        return DensePolynomial._truncated(buf)

    @typechecked
    def multiply_by_scalar(self, factor : int):
        if self.is_zero():
            return self
        if factor == 0:
            return DensePolynomial.ZERO
        return DensePolynomial._of(tuple(c * factor for c in self._coefficients))

    def to_dense(self):
        return self

    def _same_storage(self, other):
        return self._coefficients == other._coefficients

    def __str__(self):
        if self.is_zero():
            return "0"
        s = ""
        for i, c in enumerate(self._coefficients):
            if c != 0:
                term = str(Term(c, i))
                s = term + " + " + s if s else term
        return s

DensePolynomial.ZERO = DensePolynomial()
DensePolynomial.ONE  = DensePolynomial(1, 0)
DensePolynomial.X    = DensePolynomial(1, 1)
