"""A single term of a polynomial: c*x^e."""

from polyrep.common import typechecked

class Term(object):
    """A coefficient and an exponent, for example 2x^3.

    Terms are immutable and compare by value.  `<` orders by exponent first,
    then by coefficient, so sorting a list of terms puts them in ascending
    exponent order.
    """
    __slots__ = ("coefficient", "exponent")

    @typechecked
    def __init__(self, coefficient : int, exponent : int):
        object.__setattr__(self, "coefficient", coefficient)
        object.__setattr__(self, "exponent", exponent)

    def __setattr__(self, name, value):
        raise AttributeError("Term is immutable")

    def __delattr__(self, name):
        raise AttributeError("Term is immutable")

    def __reduce__(self):
        return (Term, (self.coefficient, self.exponent))

    def __eq__(self, other):
        if self is other:
            return True
        if type(other) is not Term:
            return False
        return self.coefficient == other.coefficient and self.exponent == other.exponent

    def __lt__(self, other):
        if type(other) is not Term:
            return NotImplemented
        return (self.exponent, self.coefficient) < (other.exponent, other.coefficient)

    def __hash__(self):
        return hash((self.coefficient, self.exponent))

    def __str__(self):
        # A coefficient of -1 is printed as "-1x^e", never "-x^e".
        if self.exponent == 0:
            return str(self.coefficient)
        if self.exponent == 1:
            return "{}x".format(self.coefficient)
        if self.coefficient == 1:
            return "x^{}".format(self.exponent)
        return "{}x^{}".format(self.coefficient, self.exponent)

    def __repr__(self):
        return "Term({}, {})".format(self.coefficient, self.exponent)

    def scaled(self, factor):
        """The term with its coefficient multiplied by `factor`."""
        return Term(self.coefficient * factor, self.exponent)
