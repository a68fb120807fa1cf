import unittest
from math import prod

import numpy as np

from nestarray import NestedArray
from nestarray.domain._errors import ShapeError, ValidationError


def _arr(data):
    return NestedArray.construct_matrix(data)


class TestNestedShapeInference(unittest.TestCase):
    def test_vector(self) -> None:
        v = _arr([1, 2, 3])
        self.assertEqual(v.dimensionality(), 1)
        self.assertEqual(v.get_shape(), (3,))
        self.assertEqual(v.shape, (3,))
        self.assertTrue(v.is_vector())
        self.assertFalse(v.is_scalar())

    def test_matrix_and_higher(self) -> None:
        m = _arr([[1, 2, 3], [4, 5, 6]])
        self.assertEqual(m.dimensionality(), 2)
        self.assertEqual(m.get_shape(), (2, 3))
        self.assertFalse(m.is_vector())

        t = _arr([[[1], [2]], [[3], [4]], [[5], [6]]])
        self.assertEqual(t.get_shape(), (3, 2, 1))
        self.assertEqual(t.dimensionality(), 3)

    def test_empty_array_is_one_dimensional(self) -> None:
        e = NestedArray()
        self.assertEqual(e.dimensionality(), 1)
        self.assertEqual(e.get_shape(), (0,))
        self.assertEqual(e.element_count(), 0)
        self.assertTrue(e.is_vector())

    def test_shape_length_matches_dimensionality_and_counts(self) -> None:
        samples = [
            [1],
            [1, 2, 3],
            [[1, 2], [3, 4], [5, 6]],
            [[[1, 2, 3, 4]] * 2] * 3,
        ]
        for data in samples:
            with self.subTest(data=data):
                a = _arr(data)
                self.assertEqual(len(a.get_shape()), a.dimensionality())
                self.assertEqual(a.element_count(), prod(a.get_shape()))

    def test_dimension_count(self) -> None:
        m = _arr([[1, 2, 3], [4, 5, 6]])
        self.assertEqual(m.dimension_count(0), 2)
        self.assertEqual(m.dimension_count(1), 3)

    def test_dimension_count_out_of_range(self) -> None:
        m = _arr([[1, 2, 3], [4, 5, 6]])
        with self.assertRaises(ShapeError):
            m.dimension_count(2)
        with self.assertRaises(ShapeError):
            m.dimension_count(-1)

    def test_foreign_leaf_contributes_its_shape(self) -> None:
        a = NestedArray((np.zeros((2, 3)), np.ones((2, 3))))
        self.assertEqual(a.get_shape(), (2, 2, 3))
        self.assertEqual(a.dimensionality(), 3)
        self.assertEqual(a.element_count(), 12)
        self.assertEqual(a.dimension_count(2), 3)

    def test_inference_does_not_validate(self) -> None:
        # Shape comes from the first element only.
        ragged = NestedArray((NestedArray((1, 2)), NestedArray((3,))))
        self.assertEqual(ragged.get_shape(), (2, 2))


class TestNestedValidateShape(unittest.TestCase):
    def test_valid_returns_shape(self) -> None:
        self.assertEqual(_arr([[1, 2], [3, 4]]).validate_shape(), (2, 2))
        self.assertEqual(NestedArray().validate_shape(), (0,))

    def test_ragged_rows_rejected(self) -> None:
        ragged = NestedArray((NestedArray((1, 2)), NestedArray((3,))))
        with self.assertRaises(ValidationError):
            ragged.validate_shape()

    def test_mixed_scalar_and_array_siblings_rejected(self) -> None:
        mixed = NestedArray((1, NestedArray((2, 3))))
        with self.assertRaises(ValidationError):
            mixed.validate_shape()

    def test_deep_raggedness_detected(self) -> None:
        deep = NestedArray(
            (
                NestedArray((NestedArray((1, 2)), NestedArray((3, 4)))),
                NestedArray((NestedArray((5, 6)), NestedArray((7,)))),
            )
        )
        with self.assertRaises(ValidationError):
            deep.validate_shape()

    def test_validation_error_is_a_shape_error(self) -> None:
        ragged = NestedArray((NestedArray((1, 2)), NestedArray((3,))))
        with self.assertRaises(ShapeError):
            ragged.validate_shape()


if __name__ == "__main__":
    unittest.main()
