import unittest

from nestarray.domain._errors import (
    ArrayIndexError,
    NestedArrayError,
    ShapeError,
    UpdateError,
    ValidationError,
)


class TestErrorHierarchy(unittest.TestCase):
    def test_builtin_bases(self) -> None:
        self.assertTrue(issubclass(ShapeError, ValueError))
        self.assertTrue(issubclass(ValidationError, ShapeError))
        self.assertTrue(issubclass(UpdateError, ValueError))
        self.assertTrue(issubclass(ArrayIndexError, IndexError))
        for cls in (ShapeError, ValidationError, UpdateError, ArrayIndexError):
            with self.subTest(cls=cls):
                self.assertTrue(issubclass(cls, NestedArrayError))

    def test_shape_error_carries_shapes(self) -> None:
        e = ShapeError("bad", shape=[2, 3], target=(4,))
        self.assertEqual(str(e), "bad")
        self.assertEqual(e.shape, (2, 3))
        self.assertEqual(e.target, (4,))

    def test_shape_error_shapes_default_to_none(self) -> None:
        e = ValidationError("ragged")
        self.assertIsNone(e.shape)
        self.assertIsNone(e.target)

    def test_array_index_error_message(self) -> None:
        e = ArrayIndexError(5, 3)
        self.assertEqual(e.index, 5)
        self.assertEqual(e.size, 3)
        self.assertIn("5", str(e))
        self.assertIn("3", str(e))
        self.assertEqual(str(ArrayIndexError(-1)), "Index -1 is out of range")


if __name__ == "__main__":
    unittest.main()
