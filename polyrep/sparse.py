"""Polynomials stored as an ascending tuple of nonzero terms.

A sparse polynomial is efficient when the polynomial has few terms relative
to its degree.  For example, x^100 has just one term although its degree is
100, and x^-100 cannot be stored densely at all.
"""

from polyrep.common import typechecked
from polyrep.logging import event
from polyrep.polynomials import CROSS_ADD, Polynomial
from polyrep.term import Term
from polyrep.wf import NotWellFormed, assert_wf

class SparsePolynomial(Polynomial):
    """A polynomial that stores only its nonzero terms.

    Invariants:
     - terms are sorted by strictly ascending exponent (so no two terms
       share an exponent)
     - no term has a zero coefficient
     - the zero polynomial has no terms
    """
    __slots__ = ("_terms",)

    @typechecked
    def __init__(self, coefficient : int = 0, exponent : int = 0):
        terms = () if coefficient == 0 else (Term(coefficient, exponent),)
        object.__setattr__(self, "_terms", terms)
        assert_wf(self)

    @staticmethod
    def _of(terms):
        """Wrap a tuple of terms that is already canonical."""
        p = SparsePolynomial.__new__(SparsePolynomial)
        object.__setattr__(p, "_terms", terms)
        return assert_wf(p)

    @staticmethod
    def from_terms(terms):
        """Build a polynomial from any iterable of Terms.

        Terms may be in any order; terms with equal exponents are combined
        and zero coefficients are dropped.
        """
        totals = {}
        for t in terms:
            if not isinstance(t, Term):
                raise TypeError("{!r} is not a Term".format(t))
            totals[t.exponent] = totals.get(t.exponent, 0) + t.coefficient
        return SparsePolynomial._of(tuple(sorted(
            Term(c, e) for e, c in totals.items() if c != 0)))

    def __reduce__(self):
        return (SparsePolynomial.from_terms, (self._terms,))

    def __repr__(self):
        return "SparsePolynomial.from_terms({!r})".format(list(self._terms))

    def __iter__(self):
        return iter(self._terms)

    def __len__(self):
        return len(self._terms)

    def terms(self):
        return iter(self._terms)

    def min_exponent(self):
        if self.is_zero():
            return 0
        return self._terms[0].exponent

    def max_exponent(self):
        if self.is_zero():
            return 0
        return self._terms[-1].exponent

    @typechecked
    def coefficient_at(self, exp : int):
        for t in self._terms:
            if t.exponent == exp:
                return t.coefficient
            if t.exponent > exp:
                return 0
        return 0

    def is_zero(self):
        return len(self._terms) == 0

    def is_well_formed(self):
        if not isinstance(self._terms, tuple):
            return NotWellFormed("sparse", None, "storage is a {}, not a tuple".format(type(self._terms).__name__))
        prev = None
        for i, t in enumerate(self._terms):
            if not isinstance(t, Term):
                return NotWellFormed("sparse", i, "{!r} is not a Term".format(t))
            if t.coefficient == 0:
                return NotWellFormed("sparse", i, "zero coefficient")
            if prev is not None and prev.exponent >= t.exponent:
                return NotWellFormed("sparse", i, "exponent {} does not follow {}".format(t.exponent, prev.exponent))
            prev = t
        return True

    def _add(self, other):
        if isinstance(other, SparsePolynomial):
            return self._add_sparse(other)
        # Fold in every exponent of the other operand's range, one
        # single-term polynomial at a time.
        event("{}: sparse {} + {} {}".format(CROSS_ADD, self, type(other).__name__, other))
        result = self
        if not other.is_zero():
            for exp in range(other.min_exponent(), other.max_exponent() + 1):
                result = result._add_sparse(SparsePolynomial(other.coefficient_at(exp), exp))
        return assert_wf(result)

    def _add_sparse(self, other):
        """Merge two ascending term sequences."""
        if other.is_zero():
            return self
        if self.is_zero():
            return other

        merged = []
        xs = self._terms
        ys = other._terms
        i = j = 0
        while i < len(xs) and j < len(ys):
            x = xs[i]
            y = ys[j]
            if x.exponent == y.exponent:
                c = x.coefficient + y.coefficient
                if c != 0:
                    merged.append(Term(c, x.exponent))
                i += 1
                j += 1
            elif x.exponent < y.exponent:
                merged.append(x)
                i += 1
            else:
                merged.append(y)
                j += 1

        # At most one of these is nonempty; none of its exponents can
        # collide with a term already merged.
        merged.extend(xs[i:])
        merged.extend(ys[j:])
        return SparsePolynomial._of(tuple(merged))

    @typechecked
    def multiply_by_scalar(self, factor : int):
        if self.is_zero():
            return self
        if factor == 0:
            return SparsePolynomial.ZERO
        return SparsePolynomial._of(tuple(t.scaled(factor) for t in self._terms))

    def to_sparse(self):
        return self

    def _same_storage(self, other):
        return self._terms == other._terms

    def __str__(self):
        if self.is_zero():
            return "0"
        s = ""
        for t in self._terms:
            s = str(t) + " + " + s if s else str(t)
        return s

SparsePolynomial.ZERO = SparsePolynomial()
SparsePolynomial.ONE  = SparsePolynomial(1, 0)
SparsePolynomial.X    = SparsePolynomial(1, 1)
