"""Utility functions and classes shared across polyrep.

Important functions and classes:
 - @typechecked: decorator to check annotated arguments at run time
 - No: a falsy value carrying an explanation

Extra collection types:
 - OrderedSet: complements Python's OrderedDict
 - FrozenDict: a hashable immutable dictionary
"""

# builtins
from functools import wraps
import inspect

# 3rd party
from ordered_set import OrderedSet
from dictionaries import FrozenDict as _FrozenDict

__all__ = ["check_type", "typechecked", "No", "OrderedSet", "FrozenDict"]

def check_type(value, ty, value_name="value"):
    """
    Verify that `value` is an instance of the class `ty` (None: no check).

    Booleans are not accepted where an int is expected, even though Python
    considers bool a subclass of int; `DensePolynomial(True, 2)` is a bug.
    """
    if ty is None:
        return
    ok = isinstance(value, ty) and not (ty is int and isinstance(value, bool))
    assert ok, "{} has type {}, not {}".format(value_name, type(value).__name__, ty.__name__)

def typechecked(f):
    """
    Use the @typechecked decorator on a function to check the arguments that
    have a class as their annotation, including defaulted ones the caller
    passed by keyword.
    """
    sig = inspect.signature(f)
    checks = [(name, p.annotation) for name, p in sig.parameters.items()
              if p.annotation is not inspect.Parameter.empty]
    @wraps(f)
    def g(*args, **kwargs):
        bound = sig.bind(*args, **kwargs)
        for name, ty in checks:
            if name in bound.arguments:
                check_type(bound.arguments[name], ty, name)
        return f(*args, **kwargs)
    return g

class No(object):
    """A falsy object with a message.

    This is useful if you want to return False with an associated reason."""
    def __init__(self, msg):
        self.msg = msg
    def __bool__(self):
        return False
    def __str__(self):
        return "no: {}".format(self.msg)
    def __repr__(self):
        return "{}({!r})".format(type(self).__name__, self.msg)

class FrozenDict(_FrozenDict):
    """Immutable dictionary that is hashable (suitable for use in sets/maps)."""

    def __repr__(self):
        return "FrozenDict({!r})".format(sorted(self.items()))
