import unittest

import numpy as np

from nestarray import NestedArray


def _arr(data):
    return NestedArray.construct_matrix(data)


class TestNestedOperators(unittest.TestCase):
    def setUp(self) -> None:
        self.a = _arr([[1, 2], [3, 4]])
        self.b = _arr([[5, 6], [7, 8]])

    def test_add_sub(self) -> None:
        self.assertEqual((self.a + self.b).to_list(), [[6, 8], [10, 12]])
        self.assertEqual((self.b - self.a).to_list(), [[4, 4], [4, 4]])
        self.assertEqual((self.a + [1, 1]).to_list(), [[2, 3], [4, 5]])

    def test_reflected_scalar_operators(self) -> None:
        self.assertEqual((1 + self.a).to_list(), [[2, 3], [4, 5]])
        self.assertEqual((10 - self.a).to_list(), [[9, 8], [7, 6]])
        self.assertEqual((2 * self.a).to_list(), [[2, 4], [6, 8]])

    def test_mul_is_elementwise(self) -> None:
        self.assertEqual((self.a * self.b).to_list(), [[5, 12], [21, 32]])
        self.assertEqual((self.a * 3).to_list(), [[3, 6], [9, 12]])

    def test_matmul(self) -> None:
        self.assertEqual(self.a @ self.b, _arr([[19, 22], [43, 50]]))
        self.assertEqual((self.a @ [1, 0]).to_list(), [1.0, 3.0])

    def test_numpy_right_operand(self) -> None:
        out = self.a + np.array([[1, 1], [1, 1]])
        self.assertIsInstance(out, NestedArray)
        self.assertEqual(out.to_list(), [[2, 3], [4, 5]])

    def test_numpy_left_operand_defers(self) -> None:
        left = np.array([[1, 1], [1, 1]])
        np.testing.assert_array_equal(left + self.a, [[2, 3], [4, 5]])
        np.testing.assert_array_equal(left - self.a, [[0, -1], [-2, -3]])
        np.testing.assert_allclose(
            np.asarray((left @ self.a).to_list()), [[4.0, 6.0], [4.0, 6.0]]
        )
        np.testing.assert_allclose(
            np.asarray((left * self.a).to_list()), [[1, 2], [3, 4]]
        )

    def test_negation(self) -> None:
        self.assertEqual((-self.a).to_list(), [[-1, -2], [-3, -4]])

    def test_operators_do_not_mutate(self) -> None:
        _ = self.a + self.b
        _ = self.a @ self.b
        self.assertEqual(self.a.to_list(), [[1, 2], [3, 4]])


if __name__ == "__main__":
    unittest.main()
