import unittest
import numpy as np
import cssmatrix
from cssmatrix import InvalidInputError, InvalidLengthError

IDENTITY = [1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1]


class TestFormat(unittest.TestCase):
    def test_short_form_expands_to_long_form(self):
        # matrix(a, b, c, d, tx, ty) is matrix3d(a, b, 0, 0, c, d, 0, 0, 0, 0, 1, 0, tx, ty, 0, 1)
        out = cssmatrix.format([1, 2, 3, 4, 5, 6])
        np.testing.assert_array_equal(
            out, [1, 2, 0, 0, 3, 4, 0, 0, 0, 0, 1, 0, 5, 6, 0, 1])
        self.assertEqual(out.dtype, np.float64)
        self.assertEqual(out.shape, (16,))

    def test_short_form_leaves_other_entries_at_identity(self):
        short = [2.5, -1.0, 0.25, 7.0, 100.0, -40.0]
        out = cssmatrix.format(short)
        np.testing.assert_array_equal(out[[0, 1, 4, 5, 12, 13]], short)
        for i in (2, 3, 6, 7, 8, 9, 10, 11, 14, 15):
            self.assertEqual(out[i], IDENTITY[i])

    def test_long_form_array_is_returned_as_is(self):
        source = np.arange(16, dtype=np.float64)
        self.assertIs(cssmatrix.format(source), source)

    def test_long_form_list_keeps_values(self):
        source = [1, 2, 0, 0, 3, 4, 0, 0, 0, 0, 1, 0, 5, 6, 0, 1]
        np.testing.assert_array_equal(cssmatrix.format(source), source)
        np.testing.assert_array_equal(cssmatrix.format(tuple(source)), source)

    def test_integer_array_is_converted(self):
        out = cssmatrix.format(np.arange(6))
        self.assertEqual(out.dtype, np.float64)
        np.testing.assert_array_equal(
            out, [0, 1, 0, 0, 2, 3, 0, 0, 0, 0, 1, 0, 4, 5, 0, 1])

    def test_idempotent(self):
        for source in ([1, 2, 3, 4, 5, 6], list(range(16)), cssmatrix.rotate_x(30)):
            once = cssmatrix.format(source)
            np.testing.assert_array_equal(cssmatrix.format(once), once)

    def test_non_sequence_raises_invalid_input(self):
        for bad in ({"foo": "bar"}, {}, "wild and crazy string", 42, None, {1, 2, 3, 4, 5, 6}):
            with self.assertRaises(InvalidInputError):
                cssmatrix.format(bad)

    def test_invalid_input_is_a_type_error(self):
        with self.assertRaises(TypeError):
            cssmatrix.format({"foo": "bar"})

    def test_non_numeric_elements_raise_invalid_input(self):
        with self.assertRaises(InvalidInputError):
            cssmatrix.format([1, 2, 3, 4, 5, "6"])
        with self.assertRaises(InvalidInputError):
            cssmatrix.format([True] * 6)
        with self.assertRaises(InvalidInputError):
            cssmatrix.format(np.array(["a"] * 6))

    def test_two_dimensional_array_raises_invalid_input(self):
        with self.assertRaises(InvalidInputError):
            cssmatrix.format(np.eye(4))

    def test_non_finite_values_raise_invalid_input(self):
        for bad in (float("nan"), float("inf"), -float("inf")):
            with self.assertRaises(InvalidInputError):
                cssmatrix.format([1, 0, 0, 1, 0, bad])
            with self.assertRaises(InvalidInputError):
                cssmatrix.format(IDENTITY[:15] + [bad])

    def test_integers_too_large_for_a_float_raise_invalid_input(self):
        with self.assertRaises(InvalidInputError):
            cssmatrix.format([10 ** 400, 0, 0, 1, 0, 0])
        with self.assertRaises(InvalidInputError):
            cssmatrix.format(IDENTITY[:15] + [-10 ** 400])

    def test_wrong_length_raises_invalid_length(self):
        for bad in ([], [1, 2, 3], [0] * 5, [0] * 7, [0] * 15, [0] * 17):
            with self.assertRaises(InvalidLengthError) as ctx:
                cssmatrix.format(bad)
            self.assertIn("6", str(ctx.exception))
            self.assertIn("16", str(ctx.exception))

    def test_invalid_length_is_a_value_error(self):
        with self.assertRaises(ValueError):
            cssmatrix.format([])


if __name__ == "__main__":
    unittest.main()
