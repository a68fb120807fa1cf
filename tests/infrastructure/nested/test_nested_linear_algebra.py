import math
import unittest

import numpy as np

from nestarray import NestedArray, inner_product
from nestarray.domain._errors import ShapeError


def _arr(data):
    return NestedArray.construct_matrix(data)


class TestNestedVectorOps(unittest.TestCase):
    def test_vector_dot(self) -> None:
        self.assertEqual(_arr([1, 2, 3]).vector_dot([4, 5, 6]), 32)
        self.assertEqual(_arr([1, 2, 3]).vector_dot(np.array([4, 5, 6])), 32)

    def test_vector_dot_accumulates_in_double(self) -> None:
        out = _arr([1, 2, 3]).vector_dot([4, 5, 6])
        self.assertIsInstance(out, float)
        self.assertEqual(out, 32.0)

    def test_vector_dot_mismatch(self) -> None:
        with self.assertRaises(ShapeError):
            _arr([1, 2, 3]).vector_dot([1, 2])

    def test_vector_dot_scalar_scales(self) -> None:
        self.assertEqual(_arr([1, 2]).vector_dot(3).to_list(), [3, 6])

    def test_length(self) -> None:
        v = _arr([3, 4])
        self.assertEqual(v.length_squared(), 25.0)
        self.assertEqual(v.length(), 5.0)
        self.assertEqual(_arr([[1, 1], [1, 1]]).length(), 2.0)

    def test_normalise(self) -> None:
        out = _arr([3, 4]).normalise()
        self.assertAlmostEqual(out.get_1d(0), 0.6)
        self.assertAlmostEqual(out.get_1d(1), 0.8)
        self.assertAlmostEqual(out.length(), 1.0)

    def test_distance(self) -> None:
        self.assertEqual(_arr([0, 0]).distance([3, 4]), 5.0)
        self.assertEqual(_arr([1, 2]).distance(_arr([1, 2])), 0.0)


class TestNestedElementwiseArithmetic(unittest.TestCase):
    def setUp(self) -> None:
        self.a = _arr([[1, 2], [3, 4]])
        self.b = _arr([[10, 20], [30, 40]])

    def test_add_commutes(self) -> None:
        self.assertEqual(self.a.matrix_add(self.b), self.b.matrix_add(self.a))
        self.assertEqual(self.a.matrix_add(self.b).to_list(), [[11, 22], [33, 44]])

    def test_sub_self_is_zero(self) -> None:
        out = self.a.matrix_sub(self.a)
        self.assertTrue(all(x == 0 for x in out.element_seq()))

    def test_add_broadcasts(self) -> None:
        self.assertEqual(self.a.matrix_add([1, 1]).to_list(), [[2, 3], [4, 5]])
        self.assertEqual(self.a.matrix_add(1).to_list(), [[2, 3], [4, 5]])

    def test_add_incompatible(self) -> None:
        with self.assertRaises(ShapeError):
            self.a.matrix_add([1, 2, 3])

    def test_element_multiply(self) -> None:
        self.assertEqual(self.a.element_multiply(self.a).to_list(), [[1, 4], [9, 16]])
        self.assertEqual(self.a.element_multiply(2).to_list(), [[2, 4], [6, 8]])

    def test_scale_and_square(self) -> None:
        self.assertEqual(self.a.scale(3).to_list(), [[3, 6], [9, 12]])
        self.assertEqual(self.a.pre_scale(0.5).to_list(), [[0.5, 1.0], [1.5, 2.0]])
        self.assertEqual(self.a.square().to_list(), [[1, 4], [9, 16]])

    def test_operands_not_mutated(self) -> None:
        self.a.matrix_add(self.b)
        self.a.scale(2)
        self.assertEqual(self.a.to_list(), [[1, 2], [3, 4]])
        self.assertEqual(self.b.to_list(), [[10, 20], [30, 40]])


class TestNestedMatrixMultiply(unittest.TestCase):
    def test_matrix_matrix(self) -> None:
        out = _arr([[1, 2], [3, 4]]).matrix_multiply([[5, 6], [7, 8]])
        self.assertEqual(out, _arr([[19, 22], [43, 50]]))
        self.assertEqual(out.to_list(), [[19.0, 22.0], [43.0, 50.0]])
        self.assertIsInstance(out.get_2d(0, 0), float)

    def test_matches_numpy(self) -> None:
        rng = np.random.default_rng(0)
        x, y = rng.normal(size=(3, 4)), rng.normal(size=(4, 2))
        out = _arr(x.tolist()).matrix_multiply(_arr(y.tolist()))
        np.testing.assert_allclose(np.asarray(out.to_list()), x @ y)

    def test_matrix_vector(self) -> None:
        m = _arr([[1, 2], [3, 4]])
        self.assertEqual(m.matrix_multiply([1, 1]).to_list(), [3.0, 7.0])
        self.assertEqual(_arr([1, 1]).matrix_multiply(m).to_list(), [4.0, 6.0])

    def test_scalar_operand(self) -> None:
        self.assertEqual(_arr([[1, 2]]).matrix_multiply(2).to_list(), [[2, 4]])

    def test_higher_dimensional_falls_back_to_inner_product(self) -> None:
        t = _arr([[[1, 2], [3, 4]], [[5, 6], [7, 8]]])
        self.assertEqual(t.matrix_multiply([1, 1]).to_list(), [[3, 7], [11, 15]])

    def test_mismatch(self) -> None:
        with self.assertRaises(ShapeError):
            _arr([[1, 2], [3, 4]]).matrix_multiply([[1, 2, 3]])

    def test_inner_product(self) -> None:
        self.assertEqual(inner_product(2, _arr([1, 2])).to_list(), [2, 4])
        self.assertEqual(inner_product(_arr([1, 2]), 3).to_list(), [3, 6])
        self.assertEqual(inner_product(_arr([1, 2]), _arr([[1, 0], [0, 1]])).to_list(), [1, 2])
        with self.assertRaises(ShapeError):
            inner_product(_arr([1, 2]), _arr([[1, 2]]))

    def test_vector_transform(self) -> None:
        m = _arr([[0, 1], [1, 0]])
        v = _arr([1.0, 2.0])
        self.assertEqual(m.vector_transform(v).to_list(), [2.0, 1.0])
        self.assertEqual(m.vector_transform_(v).to_list(), [2.0, 1.0])
        self.assertEqual(v.to_list(), [1.0, 2.0])

    def test_vector_transform_in_place_numpy(self) -> None:
        m = _arr([[0, 1], [1, 0]])
        v = np.array([1.0, 2.0])
        out = m.vector_transform_(v)
        self.assertIs(out, v)
        np.testing.assert_allclose(v, [2.0, 1.0])


class TestNestedRowOps(unittest.TestCase):
    def setUp(self) -> None:
        self.m = _arr([[1, 2], [3, 4]])

    def test_swap_rows(self) -> None:
        self.assertEqual(self.m.swap_rows(0, 1).to_list(), [[3, 4], [1, 2]])
        self.assertIs(self.m.swap_rows(1, 1), self.m)
        self.assertEqual(self.m.to_list(), [[1, 2], [3, 4]])

    def test_multiply_row(self) -> None:
        out = self.m.multiply_row(0, 2)
        self.assertEqual(out.to_list(), [[2, 4], [3, 4]])
        self.assertIs(out[1], self.m[1])

    def test_add_row(self) -> None:
        out = self.m.add_row(1, 0, -3)
        self.assertEqual(out.to_list(), [[1, 2], [0, -2]])
        self.assertIs(out[0], self.m[0])

    def test_row_index_out_of_range(self) -> None:
        with self.assertRaises(IndexError):
            self.m.swap_rows(0, 2)


class TestScalarLength(unittest.TestCase):
    def test_scalar_length(self) -> None:
        from nestarray import capabilities as caps

        self.assertEqual(caps.length(-3), 3.0)
        self.assertTrue(math.isclose(caps.length_squared(1.5), 2.25))


if __name__ == "__main__":
    unittest.main()
