# tests/test_dunders.py

import unittest
import numpy as np
import cssmatrix
from cssmatrix import TransformMatrix, InvalidInputError, SingularMatrixError


class TestTransformMatrix(unittest.TestCase):
    def setUp(self):
        # 10° about X, 30° about Z, then move by (1, 2, 3)
        self.t1 = (
            TransformMatrix.rotate_x(10)
            .then(TransformMatrix.rotate_z(30))
            .then(TransformMatrix.translate3d(1, 2, 3))
        )

    def test_default_is_identity(self):
        self.assertEqual(TransformMatrix(), TransformMatrix.identity())
        np.testing.assert_array_equal(TransformMatrix().values, cssmatrix.identity())

    def test_short_form_source(self):
        t = TransformMatrix([1, 2, 3, 4, 5, 6])
        np.testing.assert_array_equal(t.values, cssmatrix.format([1, 2, 3, 4, 5, 6]))

    def test_invalid_source_raises(self):
        with self.assertRaises(InvalidInputError):
            TransformMatrix("matrix(1, 0, 0, 1, 0, 0)")

    def test_values_are_read_only(self):
        with self.assertRaises(ValueError):
            self.t1.values[0] = 5.0

    def test_source_is_copied(self):
        source = cssmatrix.translate(4, 5)
        t = TransformMatrix(source)
        source[12] = 100.0
        self.assertEqual(t[12], 4.0)

    def test_then_matches_multiply(self):
        expected = cssmatrix.multiply_all(
            cssmatrix.translate3d(1, 2, 3), cssmatrix.rotate_z(30), cssmatrix.rotate_x(10))
        np.testing.assert_allclose(self.t1.values, expected, atol=1e-12)

    def test_matmul_with_transform(self):
        t2 = TransformMatrix.scale(2, 3)
        combo = t2 @ self.t1
        np.testing.assert_array_equal(
            combo.values, cssmatrix.multiply(t2.values, self.t1.values))

    def test_matmul_with_matrix_like(self):
        short = [1, 0, 0, 1, 5, 6]
        np.testing.assert_array_equal(
            (self.t1 @ short).values, cssmatrix.multiply(self.t1.values, short))
        np.testing.assert_array_equal(
            (short @ self.t1).values, cssmatrix.multiply(short, self.t1.values))

    def test_rmatmul_with_ndarray(self):
        m = cssmatrix.skew(10, 5)
        combo = m @ self.t1
        self.assertIsInstance(combo, TransformMatrix)
        np.testing.assert_array_equal(combo.values, cssmatrix.multiply(m, self.t1.values))

    def test_matmul_with_unsupported_type_raises(self):
        with self.assertRaises(TypeError):
            self.t1 @ "scale(2)"

    def test_inverse(self):
        self.assertTrue((self.t1 @ self.t1.inverse()).isclose(TransformMatrix(), atol=1e-12))
        with self.assertRaises(SingularMatrixError):
            TransformMatrix.scale(0).inverse()

    def test_transform_point(self):
        t = TransformMatrix.translate(10, 20)
        np.testing.assert_allclose(t.transform_point(1, 2), [11, 22, 0])
        r = TransformMatrix.rotate(90)
        np.testing.assert_allclose(r.transform_point(1, 0), [0, 1, 0], atol=1e-12)

    def test_transform_point_perspective(self):
        p = TransformMatrix.perspective(4)
        # w = 1 - z / 4
        np.testing.assert_allclose(p.transform_point(1, 2, 2), [2, 4, 4])
        with self.assertRaises(ZeroDivisionError):
            p.transform_point(1, 1, 4)

    def test_array_round_trip(self):
        a = self.t1.to_array()
        self.assertEqual(a.shape, (4, 4))
        np.testing.assert_array_equal(a[:3, 3], [1, 2, 3])
        self.assertEqual(TransformMatrix.from_array(a), self.t1)
        with self.assertRaises(InvalidInputError):
            TransformMatrix.from_array(np.eye(3))

    def test_to_array_is_writable_copy(self):
        a = self.t1.to_array()
        a[0, 0] = 42.0
        self.assertNotEqual(self.t1[0], 42.0)

    def test_string_round_trip(self):
        s = str(TransformMatrix.scale(2))
        self.assertEqual(s, "matrix3d(2, 0, 0, 0, 0, 2, 0, 0, 0, 0, 1, 0, 0, 0, 0, 1)")
        self.assertEqual(TransformMatrix.from_string(self.t1.to_string()), self.t1)
        self.assertEqual(TransformMatrix.from_string("none"), TransformMatrix())

    def test_eq_and_hash(self):
        a = TransformMatrix.rotate(30)
        b = TransformMatrix(cssmatrix.rotate_z(30))
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))
        self.assertEqual(len({a, b}), 1)
        self.assertNotEqual(a, TransformMatrix.rotate(31))
        self.assertTrue(a == cssmatrix.rotate(30))
        self.assertFalse(a == 123)

    def test_sequence_protocol(self):
        t = TransformMatrix.translate(7, 8)
        self.assertEqual(len(t), 16)
        self.assertEqual(list(t)[12:14], [7.0, 8.0])
        self.assertEqual(t[13], 8.0)

    def test_repr(self):
        r = repr(TransformMatrix())
        self.assertTrue(r.startswith("TransformMatrix(["))


if __name__ == "__main__":
    unittest.main()
