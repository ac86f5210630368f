"""Well-formedness checks for polynomial representations.

Both representations keep their storage in a canonical form (see
DensePolynomial.is_well_formed and SparsePolynomial.is_well_formed).  A
representation that breaks its invariants indicates a bug in polyrep itself,
so `assert_wf` is an assertion rather than an error callers should handle.
"""

from polyrep.common import No
from polyrep.opts import Option

check_invariants = Option("check-invariants", True,
    description="Assert representation invariants after every construction and arithmetic operation")

class NotWellFormed(No):
    """An explanation for why a polynomial's storage is not canonical.

    This object is falsy so that it can be used elegantly in conditionals:

        if p.is_well_formed():
            <p is definitely canonical>
    """
    def __init__(self, representation, index, reason):
        super().__init__("{} storage at index {}: {}".format(representation, index, reason))
        self.representation = representation
        self.index = index
        self.reason = reason
    def __repr__(self):
        return "NotWellFormed({!r}, {!r}, {!r})".format(
            self.representation,
            self.index,
            self.reason)

def assert_wf(p):
    """Assert that `p` is well-formed (when the check-invariants option is on).

    Returns `p` so it can wrap a result expression.
    """
    if check_invariants.value:
        res = p.is_well_formed()
        assert res, "{!r} is not well-formed: {}".format(p, res)
    return p
