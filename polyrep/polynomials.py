"""The contract shared by every polynomial representation.

A polynomial here is a finite mapping from integer exponents to nonzero
integer coefficients.  Two concrete representations implement it:

 - DensePolynomial  (polyrep.dense): a tuple of coefficients indexed by
   exponent, for low-degree polynomials with contiguous support
 - SparsePolynomial (polyrep.sparse): an ascending tuple of Terms, for
   polynomials with large, negative, or widely spaced exponents

Operands of any arithmetic operation are never modified; every operation
returns a fresh (or an existing, unchanged) immutable instance.  Subclasses
implement the abstract methods below; `subtract` and `negate` are derived.

Arithmetic is also available through operators:

    p + q, p - q, -p, 3 * p, p * 3

Equality is semantic: a dense and a sparse polynomial with the same
coefficients are equal, render to the same string, and hash the same.
"""

from polyrep.common import OrderedSet, FrozenDict

# Prefix of the polyrep.logging event raised when operands of different
# representations are added.
CROSS_ADD = "cross-representation add"

class Polynomial(object):
    __slots__ = ()

    def __setattr__(self, name, value):
        raise AttributeError("{} is immutable".format(type(self).__name__))

    def __delattr__(self, name):
        raise AttributeError("{} is immutable".format(type(self).__name__))

    # Queries

    def min_exponent(self):
        """Lowest exponent with a nonzero coefficient (0 for the zero polynomial)."""
        raise NotImplementedError()

    def max_exponent(self):
        """Highest exponent with a nonzero coefficient (0 for the zero polynomial)."""
        raise NotImplementedError()

    def coefficient_at(self, exp):
        """The coefficient of x^exp, or 0 if there is no such term."""
        raise NotImplementedError()

    def is_zero(self):
        raise NotImplementedError()

    def terms(self):
        """Yield the nonzero Terms from the lowest to the highest exponent."""
        raise NotImplementedError()

    def is_well_formed(self):
        """Returns True or an instance of polyrep.wf.NotWellFormed."""
        raise NotImplementedError()

    def support(self):
        """The exponents with a nonzero coefficient, in ascending order."""
        return OrderedSet(t.exponent for t in self.terms())

    def as_dict(self):
        """An immutable exponent -> coefficient mapping of the nonzero terms."""
        return FrozenDict((t.exponent, t.coefficient) for t in self.terms())

    # Arithmetic

    def add(self, other):
        """Return self + other.  Neither self nor other is changed."""
        if other is None:
            raise ValueError("cannot add None to a polynomial")
        if not isinstance(other, Polynomial):
            raise TypeError("cannot add {} to a polynomial".format(type(other).__name__))
        return self._add(other)

    def _add(self, other):
        raise NotImplementedError()

    def multiply_by_scalar(self, factor):
        """Return self * factor.  Self is not changed."""
        raise NotImplementedError()

    def subtract(self, other):
        """Return self - other.  Neither self nor other is changed."""
        if other is None:
            raise ValueError("cannot subtract None from a polynomial")
        if not isinstance(other, Polynomial):
            raise TypeError("cannot subtract {} from a polynomial".format(type(other).__name__))
        return self.add(other.multiply_by_scalar(-1))

    def negate(self):
        """Return -self.  Self is not changed."""
        return self.multiply_by_scalar(-1)

    def to_sparse(self):
        from polyrep.sparse import SparsePolynomial
        return SparsePolynomial.from_terms(self.terms())

    def to_dense(self):
        """Convert to a DensePolynomial; raises ValueError for negative exponents."""
        from polyrep.dense import DensePolynomial
        if not self.is_zero() and self.min_exponent() < 0:
            raise ValueError("{} has a negative exponent and has no dense representation".format(self))
        coefficients = [0] * (self.max_exponent() + 1)
        for t in self.terms():
            coefficients[t.exponent] = t.coefficient
        return DensePolynomial.from_coefficients(coefficients)

    def __add__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self):
        return self.negate()

    def __mul__(self, factor):
        if not isinstance(factor, int) or isinstance(factor, bool):
            return NotImplemented
        return self.multiply_by_scalar(factor)

    __rmul__ = __mul__

    # Equality and rendering

    def _same_storage(self, other):
        """Compare against another instance of the same representation."""
        raise NotImplementedError()

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Polynomial):
            return NotImplemented
        if type(self) is type(other):
            return self._same_storage(other)
        # Different representations agree on the canonical string of any
        # polynomial they both hold.
        return str(self) == str(other)

    def __ne__(self, other):
        res = self.__eq__(other)
        return res if res is NotImplemented else not res

    def __hash__(self):
        return hash(tuple(self.terms()))

    def __bool__(self):
        return not self.is_zero()

    def __str__(self):
        raise NotImplementedError()
