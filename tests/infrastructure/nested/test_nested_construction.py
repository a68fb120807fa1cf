import unittest

import numpy as np

from nestarray import NestedArray
from nestarray.domain._errors import ValidationError
from nestarray.infrastructure.nested import (
    coerce,
    construct_from_generator,
    is_canonical,
    new_nd,
)


class TestCoerce(unittest.TestCase):
    def test_scalars_pass_through(self) -> None:
        for value in (3, 2.5, None, "label"):
            with self.subTest(value=value):
                self.assertIs(coerce(value), value)

    def test_sequences_become_nested_arrays(self) -> None:
        a = coerce([[1, 2], (3, 4)])
        self.assertIsInstance(a, NestedArray)
        self.assertIsInstance(a[1], NestedArray)
        self.assertEqual(a.to_list(), [[1, 2], [3, 4]])

    def test_canonical_input_returned_unchanged(self) -> None:
        a = coerce([[1, 2], [3, 4]])
        self.assertIs(coerce(a), a)

    def test_idempotent(self) -> None:
        samples = [5, [1, 2, 3], [[1, 2], [3, 4]], np.arange(6).reshape(2, 3), []]
        for data in samples:
            with self.subTest(data=data):
                once = coerce(data)
                self.assertEqual(coerce(once), once)

    def test_numpy_array_converted(self) -> None:
        a = coerce(np.array([[1.0, 2.0], [3.0, 4.0]]))
        self.assertIsInstance(a, NestedArray)
        self.assertEqual(a.to_list(), [[1.0, 2.0], [3.0, 4.0]])
        self.assertIsInstance(a.get_2d(0, 0), float)

    def test_zero_dimensional_numpy_unwrapped(self) -> None:
        self.assertEqual(coerce(np.array(7.5)), 7.5)

    def test_foreign_leaves_converted(self) -> None:
        a = NestedArray((np.array([1, 2]), np.array([3, 4])))
        self.assertFalse(is_canonical(a))
        c = coerce(a)
        self.assertTrue(is_canonical(c))
        self.assertEqual(c.to_list(), [[1, 2], [3, 4]])

    def test_generators_are_coerced(self) -> None:
        a = coerce(x * x for x in range(4))
        self.assertEqual(a.to_list(), [0, 1, 4, 9])


class TestIsCanonical(unittest.TestCase):
    def test_scalars_and_nested(self) -> None:
        self.assertTrue(is_canonical(1.0))
        self.assertTrue(is_canonical(NestedArray((1, 2))))
        self.assertTrue(is_canonical(NestedArray()))

    def test_sequences_and_numpy_are_not_canonical(self) -> None:
        self.assertFalse(is_canonical([1, 2]))
        self.assertFalse(is_canonical(np.zeros(2)))

    def test_ragged_is_not_canonical(self) -> None:
        ragged = NestedArray((NestedArray((1, 2)), NestedArray((3,))))
        self.assertFalse(is_canonical(ragged))

    def test_nested_sequence_leaf_is_not_canonical(self) -> None:
        self.assertFalse(is_canonical(NestedArray(([1, 2], [3, 4]))))


class TestFactories(unittest.TestCase):
    def test_new_vector_matrix_nd(self) -> None:
        self.assertEqual(NestedArray.new_vector(3).to_list(), [0.0, 0.0, 0.0])
        self.assertEqual(NestedArray.new_matrix(2, 2).to_list(), [[0.0, 0.0]] * 2)
        self.assertEqual(NestedArray.new_nd((2, 1, 3)).get_shape(), (2, 1, 3))
        self.assertEqual(NestedArray.new_nd(()), 0.0)
        self.assertEqual(new_nd((2,), fill=1).to_list(), [1, 1])

    def test_construct_matrix_validates(self) -> None:
        with self.assertRaises(ValidationError):
            NestedArray.construct_matrix([[1, 2], [3]])

    def test_construct_matrix_scalar(self) -> None:
        self.assertEqual(NestedArray.construct_matrix(4), 4)

    def test_construct_from_generator_row_major(self) -> None:
        seen = []

        def gen(coords):
            seen.append(coords)
            return sum(c * 10**k for k, c in enumerate(reversed(coords)))

        a = NestedArray.construct_from_generator((2, 3), gen)
        self.assertEqual(a.to_list(), [[0, 1, 2], [10, 11, 12]])
        self.assertEqual(
            seen, [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)]
        )

    def test_construct_from_generator_module_function(self) -> None:
        a = construct_from_generator([3], lambda c: c[0] * 2)
        self.assertEqual(a.to_list(), [0, 2, 4])

    def test_implementation_metadata(self) -> None:
        self.assertEqual(NestedArray.implementation_key(), "nested")
        self.assertIn("doc", NestedArray.meta_info())
        self.assertFalse(NestedArray.supports_dimensionality(0))
        self.assertTrue(NestedArray.supports_dimensionality(1))
        self.assertTrue(NestedArray.supports_dimensionality(5))


class TestContainerProtocol(unittest.TestCase):
    def test_immutable(self) -> None:
        a = NestedArray((1, 2))
        with self.assertRaises(AttributeError):
            a._items = (3,)
        with self.assertRaises(AttributeError):
            a.extra = 1
        with self.assertRaises(TypeError):
            a[0] = 5

    def test_len_iter_repr(self) -> None:
        a = NestedArray.construct_matrix([[1, 2], [3, 4]])
        self.assertEqual(len(a), 2)
        self.assertEqual([r.to_list() for r in a], [[1, 2], [3, 4]])
        self.assertEqual(repr(a), "NestedArray([[1, 2], [3, 4]])")

    def test_python_slicing_returns_nested_array(self) -> None:
        a = NestedArray((1, 2, 3, 4))
        s = a[1:3]
        self.assertIsInstance(s, NestedArray)
        self.assertEqual(s.to_list(), [2, 3])

    def test_tuple_key_reads_coordinate(self) -> None:
        a = NestedArray.construct_matrix([[1, 2], [3, 4]])
        self.assertEqual(a[1, 0], 3)

    def test_hash_consistent_with_equality(self) -> None:
        a = NestedArray.construct_matrix([[1, 2], [3, 4]])
        b = NestedArray.construct_matrix([[1.0, 2.0], [3.0, 4.0]])
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))
        self.assertEqual(len({a, b}), 1)

    def test_hash_with_numpy_leaves(self) -> None:
        a = NestedArray((np.array([1, 2]), np.array([3, 4])))
        b = NestedArray.construct_matrix([[1, 2], [3, 4]])
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))
        self.assertEqual(len({a, b}), 1)

    def test_equality_with_other_types_is_not_implemented(self) -> None:
        a = NestedArray((1, 2))
        self.assertNotEqual(a, (1, 2))
        self.assertNotEqual(a, "x")


if __name__ == "__main__":
    unittest.main()
