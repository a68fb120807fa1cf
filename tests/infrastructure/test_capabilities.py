import unittest

from nestarray import NestedArray
from nestarray import capabilities as caps
from nestarray.domain._errors import ArrayIndexError, ShapeError


class TestScalarCapabilities(unittest.TestCase):
    def test_dimension_information(self) -> None:
        self.assertEqual(caps.dimensionality(3.5), 0)
        self.assertEqual(caps.shape(3.5), ())
        self.assertEqual(caps.element_count(3.5), 1)
        self.assertTrue(caps.is_scalar(3.5))
        self.assertFalse(caps.is_vector(3.5))
        self.assertFalse(caps.is_mutable(3.5))

    def test_opaque_values_are_scalars(self) -> None:
        self.assertEqual(caps.dimensionality("text"), 0)
        self.assertIsNone(caps.get_0d(None))
        self.assertEqual(list(caps.element_seq("text")), ["text"])

    def test_access(self) -> None:
        self.assertEqual(caps.get_0d(4), 4)
        self.assertEqual(caps.get_nd(4, ()), 4)
        self.assertEqual(caps.set_nd(4, (), 5), 5)
        with self.assertRaises(ArrayIndexError):
            caps.get_1d(4, 0)
        with self.assertRaises(ArrayIndexError):
            caps.get_nd(4, (0,))

    def test_slicing_scalar_raises(self) -> None:
        for call in (
            lambda: caps.get_major_slice_seq(1),
            lambda: caps.get_major_slice(1, 0),
            lambda: caps.get_slice(1, 0, 0),
            lambda: caps.rotate(1, 0, 1),
            lambda: caps.dimension_count(1, 0),
        ):
            with self.assertRaises(ShapeError):
                call()

    def test_select(self) -> None:
        self.assertEqual(caps.select(7, []), 7)
        with self.assertRaises(ShapeError):
            caps.select(7, [[0]])

    def test_arithmetic(self) -> None:
        self.assertEqual(caps.matrix_add(1, 2), 3)
        self.assertEqual(caps.matrix_sub(5, 2), 3)
        self.assertEqual(caps.scale(2, 3), 6)
        self.assertEqual(caps.pre_scale(2, 3), 6)
        self.assertEqual(caps.vector_dot(2, 3), 6)
        self.assertEqual(caps.length_squared(-2), 4.0)
        self.assertEqual(caps.length(-2), 2.0)

    def test_scalar_with_array_operand(self) -> None:
        v = NestedArray.construct_matrix([1, 2])
        self.assertEqual(caps.matrix_add(10, v).to_list(), [11, 12])
        self.assertEqual(caps.matrix_sub(10, v).to_list(), [9, 8])
        self.assertEqual(caps.vector_dot(3, v).to_list(), [3, 6])
        self.assertFalse(caps.matrix_equals(1, v))

    def test_element_map_on_scalar(self) -> None:
        self.assertEqual(caps.element_map_(2, lambda x, y: x * y, 5), 10)
        self.assertEqual(caps.element_map_indexed_(2, lambda idx, x: (idx, x)), ((), 2))


class TestSequenceCapabilities(unittest.TestCase):
    def test_sequences_are_coerced(self) -> None:
        data = [[1, 2, 3], [4, 5, 6]]
        self.assertEqual(caps.dimensionality(data), 2)
        self.assertEqual(caps.shape(data), (2, 3))
        self.assertEqual(caps.element_count(data), 6)
        self.assertEqual(caps.get_nd(data, (1, 2)), 6)
        self.assertEqual(list(caps.element_seq(data)), [1, 2, 3, 4, 5, 6])
        self.assertEqual(caps.to_list((1, (2, 3))), [1, [2, 3]])

    def test_sequence_results_are_nested_arrays(self) -> None:
        out = caps.set_nd([[1, 2], [3, 4]], (0, 0), 9)
        self.assertIsInstance(out, NestedArray)
        self.assertEqual(out.to_list(), [[9, 2], [3, 4]])
        self.assertEqual(caps.matrix_add([1, 2], [3, 4]).to_list(), [4, 6])
        self.assertTrue(caps.matrix_equals([1, 2], (1, 2)))

    def test_nested_arrays_dispatch_to_methods(self) -> None:
        m = NestedArray.construct_matrix([[1, 2], [3, 4]])
        self.assertEqual(caps.shape(m), m.get_shape())
        self.assertEqual(caps.rotate(m, 0, 1), m.rotate(0, 1))
        self.assertIs(caps.convert_to_nested_vectors(m), m)


if __name__ == "__main__":
    unittest.main()
