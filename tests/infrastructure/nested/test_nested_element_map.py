import unittest
from operator import add, mul

import numpy as np

from nestarray import NestedArray, mapmatrix
from nestarray.domain._errors import ShapeError


def _arr(data):
    return NestedArray.construct_matrix(data)


class TestNestedElementSeq(unittest.TestCase):
    def test_row_major_order(self) -> None:
        t = _arr([[[1, 2], [3, 4]], [[5, 6], [7, 8]]])
        self.assertEqual(list(t.element_seq()), [1, 2, 3, 4, 5, 6, 7, 8])

    def test_sequence_can_be_read_twice(self) -> None:
        for data in ([[1, 2], [3, 4]], [[[1, 2], [3, 4]], [[5, 6], [7, 8]]]):
            seq = _arr(data).element_seq()
            first = list(seq)
            self.assertEqual(list(seq), first)
            self.assertEqual(len(seq), len(first))

    def test_vector_and_empty(self) -> None:
        self.assertEqual(list(_arr([1, 2, 3]).element_seq()), [1, 2, 3])
        self.assertEqual(list(NestedArray().element_seq()), [])

    def test_numpy_leaves(self) -> None:
        a = NestedArray((np.array([1.0, 2.0]), np.array([3.0, 4.0])))
        self.assertEqual(list(a.element_seq()), [1.0, 2.0, 3.0, 4.0])


class TestNestedElementMap(unittest.TestCase):
    def test_unary_map(self) -> None:
        m = _arr([[1, 2], [3, 4]])
        self.assertEqual(m.element_map(lambda x: x * 10).to_list(), [[10, 20], [30, 40]])
        self.assertEqual(m.to_list(), [[1, 2], [3, 4]])

    def test_map_several_operands(self) -> None:
        m = _arr([[1, 2], [3, 4]])
        out = m.element_map(lambda x, y, z: x + y * z, [[1, 1], [1, 1]], 2)
        self.assertEqual(out.to_list(), [[3, 4], [5, 6]])

    def test_map_broadcasts_operands(self) -> None:
        m = _arr([[1, 2], [3, 4]])
        self.assertEqual(m.element_map(add, [10, 20]).to_list(), [[11, 22], [13, 24]])

    def test_map_broadcasts_receiver(self) -> None:
        v = _arr([1, 2])
        out = v.element_map(mul, [[1, 1], [2, 2]])
        self.assertEqual(out.to_list(), [[1, 2], [2, 4]])

    def test_map_incompatible(self) -> None:
        with self.assertRaises(ShapeError):
            _arr([1, 2]).element_map(add, [1, 2, 3])

    def test_map_numpy_operand(self) -> None:
        m = _arr([[1, 2], [3, 4]])
        out = m.element_map(add, np.array([[1, 1], [1, 1]]))
        self.assertIsInstance(out, NestedArray)
        self.assertEqual(out.to_list(), [[2, 3], [4, 5]])

    def test_map_indexed(self) -> None:
        m = _arr([[1, 2], [3, 4]])
        out = m.element_map_indexed(lambda idx, x: 10 * idx[0] + idx[1])
        self.assertEqual(out.to_list(), [[0, 1], [10, 11]])
        out = m.element_map_indexed(lambda idx, x, y: x + y + idx[1], [100, 200])
        self.assertEqual(out.to_list(), [[101, 203], [103, 205]])

    def test_map_indexed_passes_tuples(self) -> None:
        seen = []
        _arr([[1, 2, 3]]).element_map_indexed(lambda idx, x: seen.append(idx))
        self.assertEqual(seen, [(0, 0), (0, 1), (0, 2)])

    def test_mapmatrix_scalar(self) -> None:
        self.assertEqual(mapmatrix(add, 2, 3), 5)


class TestNestedElementMapInPlace(unittest.TestCase):
    def test_scalar_leaves_rebuild(self) -> None:
        m = _arr([[1, 2], [3, 4]])
        out = m.element_map_(lambda x: x + 1)
        self.assertEqual(out.to_list(), [[2, 3], [4, 5]])
        self.assertEqual(m.to_list(), [[1, 2], [3, 4]])

    def test_numpy_leaves_mutated(self) -> None:
        first, second = np.array([1.0, 2.0]), np.array([3.0, 4.0])
        a = NestedArray((first, second))
        out = a.element_map_(lambda x, y: x * y, [10.0, 100.0])
        self.assertIs(out, a)
        np.testing.assert_allclose(first, [10.0, 200.0])
        np.testing.assert_allclose(second, [30.0, 400.0])

    def test_read_only_numpy_leaf(self) -> None:
        leaf = np.array([1.0, 2.0])
        leaf.setflags(write=False)
        a = NestedArray((leaf,))
        out = a.element_map_(lambda x: x + 1)
        self.assertEqual(out.to_list(), [[2.0, 3.0]])
        np.testing.assert_allclose(leaf, [1.0, 2.0])

    def test_mutated_leaf_kept_by_identity(self) -> None:
        leaf = np.array([1.0, 2.0])
        m = NestedArray((leaf, _arr([3.0, 4.0])))
        out = m.element_map_(lambda x: x * 2)
        self.assertIs(out[0], leaf)
        self.assertEqual(out[1].to_list(), [6.0, 8.0])

    def test_indexed_in_place(self) -> None:
        leaf = np.zeros((2,))
        m = NestedArray((leaf, np.zeros((2,))))
        m.element_map_indexed_(lambda idx, x: 10 * idx[0] + idx[1])
        np.testing.assert_allclose(leaf, [0.0, 1.0])
        np.testing.assert_allclose(m[1], [10.0, 11.0])


class TestNestedReduce(unittest.TestCase):
    def test_reduce(self) -> None:
        m = _arr([[1, 2], [3, 4]])
        self.assertEqual(m.element_reduce(mul), 24)
        self.assertEqual(m.element_reduce(add, 100), 110)

    def test_reduce_empty(self) -> None:
        self.assertEqual(NestedArray().element_reduce(add, 7), 7)
        with self.assertRaises(TypeError):
            NestedArray().element_reduce(add)

    def test_element_sum(self) -> None:
        self.assertEqual(_arr([[1, 2], [3, 4]]).element_sum(), 10)
        self.assertEqual(NestedArray().element_sum(), 0)
        a = NestedArray((np.array([0.5, 0.5]), np.array([1.0, 1.0])))
        self.assertAlmostEqual(a.element_sum(), 3.0)


if __name__ == "__main__":
    unittest.main()
