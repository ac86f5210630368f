import pickle
import unittest

from polyrep.dense import DensePolynomial
from polyrep.sparse import SparsePolynomial
from polyrep.term import Term

class TestSparsePolynomial(unittest.TestCase):

    def setUp(self):
        self.zero = SparsePolynomial(0, 5)
        self.one = SparsePolynomial(1, 0)
        self.minus_one = SparsePolynomial(-1, 0)
        self.two_x = SparsePolynomial(2, 1)
        self.minus_two_x = SparsePolynomial(-2, 1)
        self.two_x_plus_one = self.two_x.add(self.one)
        self.four_x_plus_two = SparsePolynomial(4, 1).add(SparsePolynomial(2, 0))
        self.minus_two_x_minus_one = self.minus_two_x.add(self.minus_one)
        self.four_x_squared_plus_four_x_plus_one = SparsePolynomial(4, 2).add(SparsePolynomial(4, 1).add(self.one))
        self.x_to_100 = SparsePolynomial(1, 100)
        self.x_to_minus_100 = SparsePolynomial(1, -100)

    def test_construction(self):
        self.assertEqual(list(SparsePolynomial()), [])
        self.assertEqual(list(self.zero), [])
        self.assertEqual(list(self.x_to_minus_100), [Term(1, -100)])

    def test_from_terms(self):
        p = SparsePolynomial.from_terms([Term(3, 5), Term(1, -2), Term(-3, 5), Term(2, 0), Term(4, 0)])
        self.assertEqual(list(p), [Term(1, -2), Term(6, 0)])
        self.assertTrue(p.is_well_formed())
        self.assertTrue(SparsePolynomial.from_terms([]).is_zero())
        with self.assertRaises(TypeError):
            SparsePolynomial.from_terms([(1, 2)])

    def test_coefficient_at(self):
        self.assertEqual(self.zero.coefficient_at(0), 0)
        self.assertEqual(self.one.coefficient_at(0), 1)
        self.assertEqual(self.one.coefficient_at(-1), 0)
        self.assertEqual(self.one.coefficient_at(1), 0)
        self.assertEqual(self.x_to_100.coefficient_at(100), 1)
        self.assertEqual(self.x_to_100.coefficient_at(10), 0)
        self.assertEqual(self.x_to_100.coefficient_at(1000), 0)
        self.assertEqual(self.x_to_100.coefficient_at(-1000), 0)
        self.assertEqual(self.x_to_minus_100.coefficient_at(-100), 1)

    def test_max_exponent(self):
        self.assertEqual(self.zero.max_exponent(), 0)
        self.assertEqual(self.one.max_exponent(), 0)
        self.assertEqual(self.x_to_100.max_exponent(), 100)
        self.assertEqual(self.x_to_minus_100.max_exponent(), -100)

    def test_min_exponent(self):
        self.assertEqual(self.zero.min_exponent(), 0)
        self.assertEqual(self.x_to_minus_100.min_exponent(), -100)
        self.assertEqual(self.four_x_squared_plus_four_x_plus_one.min_exponent(), 0)

    def test_iterator(self):
        it = iter(self.two_x_plus_one)
        self.assertEqual(next(it), Term(1, 0))
        self.assertEqual(next(it), Term(2, 1))
        with self.assertRaises(StopIteration):
            next(it)
        self.assertEqual(len(self.two_x_plus_one), 2)

    def test_add(self):
        self.assertEqual(self.zero.add(self.two_x), self.two_x.add(self.zero))
        self.assertEqual(self.zero, self.zero.add(self.zero))
        self.assertEqual(self.zero, self.one.add(self.minus_one))
        self.assertEqual(self.one, self.two_x_plus_one.add(self.minus_two_x))
        self.assertIs(self.two_x.add(self.zero), self.two_x)

    def test_merge_interleaves_and_cancels(self):
        p = SparsePolynomial.from_terms([Term(1, -3), Term(2, 0), Term(5, 4), Term(7, 9)])
        q = SparsePolynomial.from_terms([Term(4, -1), Term(-2, 0), Term(1, 4), Term(1, 20)])
        r = p.add(q)
        self.assertEqual(list(r), [Term(1, -3), Term(4, -1), Term(6, 4), Term(7, 9), Term(1, 20)])
        self.assertTrue(r.is_well_formed())

    def test_add_dense_gives_sparse(self):
        p = self.x_to_minus_100.add(DensePolynomial.from_coefficients([1, 0, 3]))
        self.assertIsInstance(p, SparsePolynomial)
        self.assertEqual(str(p), "3x^2 + 1 + x^-100")
        self.assertIs(self.two_x.add(DensePolynomial()), self.two_x)

    def test_add_none(self):
        with self.assertRaises(ValueError):
            self.zero.add(None)

    def test_negate(self):
        self.assertEqual(self.zero.negate(), self.zero)
        self.assertEqual(self.one.negate(), self.minus_one)
        self.assertEqual(self.two_x_plus_one.negate(), self.minus_two_x_minus_one)

    def test_is_zero(self):
        self.assertTrue(self.zero.is_zero())
        self.assertFalse(self.one.is_zero())
        self.assertFalse(self.two_x.is_zero())
        self.assertFalse(bool(self.zero))
        self.assertTrue(bool(self.one))

    def test_multiply_by_scalar(self):
        self.assertEqual(self.zero.multiply_by_scalar(1), self.zero)
        self.assertEqual(self.one.multiply_by_scalar(0), self.zero)
        self.assertEqual(self.two_x_plus_one.multiply_by_scalar(1), self.two_x_plus_one)
        self.assertEqual(self.two_x_plus_one.multiply_by_scalar(2), self.four_x_plus_two)

    def test_subtract(self):
        self.assertEqual(self.two_x_plus_one.subtract(self.one), self.two_x)

    def test_to_string(self):
        self.assertEqual(str(self.zero), "0")
        self.assertEqual(str(self.one), "1")
        self.assertEqual(str(self.two_x), "2x")
        self.assertEqual(str(self.two_x_plus_one), "2x + 1")
        self.assertEqual(str(self.minus_two_x_minus_one), "-2x + -1")
        self.assertEqual(str(self.four_x_squared_plus_four_x_plus_one), "4x^2 + 4x + 1")
        self.assertEqual(str(SparsePolynomial(-1, 3)), "-1x^3")

    def test_equals(self):
        self.assertEqual(self.zero, self.zero)
        self.assertFalse(self.zero == None)
        self.assertFalse(self.zero == 0)
        self.assertNotEqual(self.zero, self.two_x)
        self.assertNotEqual(self.zero, self.two_x_plus_one)
        self.assertNotEqual(self.zero, self.one)
        self.assertEqual(self.four_x_squared_plus_four_x_plus_one,
            SparsePolynomial(4, 2).add(SparsePolynomial(4, 1).add(self.one)))

    def test_to_dense(self):
        d = self.four_x_plus_two.to_dense()
        self.assertIsInstance(d, DensePolynomial)
        self.assertEqual(d.coefficients(), (2, 4))
        self.assertTrue(SparsePolynomial().to_dense().is_zero())
        with self.assertRaises(ValueError):
            self.x_to_minus_100.to_dense()
        self.assertIs(self.one.to_sparse(), self.one)

    def test_well_formed_explanations(self):
        def raw(*terms):
            p = SparsePolynomial.__new__(SparsePolynomial)
            object.__setattr__(p, "_terms", terms)
            return p
        self.assertTrue(raw(Term(1, 0), Term(1, 1)).is_well_formed())
        self.assertIn("zero coefficient", str(raw(Term(1, 0), Term(0, 1)).is_well_formed()))
        self.assertEqual(raw(Term(1, 2), Term(1, 1)).is_well_formed().index, 1)
        self.assertFalse(raw(Term(1, 2), Term(3, 2)).is_well_formed())

    def test_pickle(self):
        p = self.minus_two_x_minus_one.add(self.x_to_minus_100)
        self.assertEqual(pickle.loads(pickle.dumps(p)), p)
        self.assertEqual(eval(repr(p)), p)
