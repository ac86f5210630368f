"""Integer polynomials with dense and sparse representations."""

from polyrep.term import Term
from polyrep.polynomials import Polynomial
from polyrep.sparse import SparsePolynomial
from polyrep.dense import DensePolynomial

__all__ = ["Term", "Polynomial", "DensePolynomial", "SparsePolynomial"]
