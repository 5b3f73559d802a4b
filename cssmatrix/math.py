# math.py
#
# Numeric kernels over flat, column-major 4x4 matrices: element ``4 * col + row``
# holds row ``row``, column ``col``.

from numba import njit
import numpy as np
from numba.core.errors import NumbaPerformanceWarning
import warnings
warnings.filterwarnings("ignore", category=NumbaPerformanceWarning)


@njit(cache=True)
def mul4(m, x):
    """
    Product of two flat 4x4 matrices.

    Parameters
    ----------
    m : (16,) float64 array
        The outer matrix, applied second.
    x : (16,) float64 array
        The inner matrix, applied first.

    Returns
    -------
    (16,) float64 array
        ``m @ x`` in the same column-major flattening.
    """
    out = np.empty(16, dtype=np.float64)
    for i in range(4):
        r0 = m[i]
        r1 = m[i + 4]
        r2 = m[i + 8]
        r3 = m[i + 12]
        for j in range(4):
            k = j * 4
            out[i + k] = r0 * x[k] + r1 * x[k + 1] + \
                r2 * x[k + 2] + r3 * x[k + 3]
    return out


@njit(cache=True)
def det4(m):
    """
    Determinant of a flat 4x4 matrix using the 12-subfactor scheme.

    Parameters
    ----------
    m : (16,) float64 array

    Returns
    -------
    float64
        det(m)
    """
    # sub-factors from the first two columns of the flattening
    s0 = m[0] * m[5] - m[4] * m[1]
    s1 = m[0] * m[6] - m[4] * m[2]
    s2 = m[0] * m[7] - m[4] * m[3]
    s3 = m[1] * m[6] - m[5] * m[2]
    s4 = m[1] * m[7] - m[5] * m[3]
    s5 = m[2] * m[7] - m[6] * m[3]

    # complementary sub-factors from the last two
    c5 = m[10] * m[15] - m[14] * m[11]
    c4 = m[9] * m[15] - m[13] * m[11]
    c3 = m[9] * m[14] - m[13] * m[10]
    c2 = m[8] * m[15] - m[12] * m[11]
    c1 = m[8] * m[14] - m[12] * m[10]
    c0 = m[8] * m[13] - m[12] * m[9]

    return s0 * c5 - s1 * c4 + s2 * c3 + s3 * c2 - s4 * c1 + s5 * c0


# -------------------------------------------------------------------------
# analytic inverse for a flat 4x4 matrix
# -------------------------------------------------------------------------
@njit(cache=True, error_model="numpy")
def inv4(m):
    """
    Analytic inverse of a flat 4x4 matrix.

    Never raises: a singular input yields a non-finite reciprocal, which the
    caller must check before using ``out``.

    Returns
    -------
    tuple[(16,) float64 array, float64]
        The inverse and the reciprocal of the determinant.
    """

    # ---- step 1: the 12 sub-factors (exactly as det4) --------------------
    s0 = m[0] * m[5] - m[4] * m[1]
    s1 = m[0] * m[6] - m[4] * m[2]
    s2 = m[0] * m[7] - m[4] * m[3]
    s3 = m[1] * m[6] - m[5] * m[2]
    s4 = m[1] * m[7] - m[5] * m[3]
    s5 = m[2] * m[7] - m[6] * m[3]

    c5 = m[10] * m[15] - m[14] * m[11]
    c4 = m[9] * m[15] - m[13] * m[11]
    c3 = m[9] * m[14] - m[13] * m[10]
    c2 = m[8] * m[15] - m[12] * m[11]
    c1 = m[8] * m[14] - m[12] * m[10]
    c0 = m[8] * m[13] - m[12] * m[9]

    # ---- step 2: reciprocal of the determinant ---------------------------
    inv_det = 1.0 / (s0 * c5 - s1 * c4 + s2 * c3 + s3 * c2 - s4 * c1 + s5 * c0)

    # ---- step 3: the adjugate, scaled ------------------------------------
    out = np.empty(16, dtype=np.float64)

    out[0] = (m[5] * c5 - m[6] * c4 + m[7] * c3) * inv_det
    out[1] = (-m[1] * c5 + m[2] * c4 - m[3] * c3) * inv_det
    out[2] = (m[13] * s5 - m[14] * s4 + m[15] * s3) * inv_det
    out[3] = (-m[9] * s5 + m[10] * s4 - m[11] * s3) * inv_det

    out[4] = (-m[4] * c5 + m[6] * c2 - m[7] * c1) * inv_det
    out[5] = (m[0] * c5 - m[2] * c2 + m[3] * c1) * inv_det
    out[6] = (-m[12] * s5 + m[14] * s2 - m[15] * s1) * inv_det
    out[7] = (m[8] * s5 - m[10] * s2 + m[11] * s1) * inv_det

    out[8] = (m[4] * c4 - m[5] * c2 + m[7] * c0) * inv_det
    out[9] = (-m[0] * c4 + m[1] * c2 - m[3] * c0) * inv_det
    out[10] = (m[12] * s4 - m[13] * s2 + m[15] * s0) * inv_det
    out[11] = (-m[8] * s4 + m[9] * s2 - m[11] * s0) * inv_det

    out[12] = (-m[4] * c3 + m[5] * c1 - m[6] * c0) * inv_det
    out[13] = (m[0] * c3 - m[1] * c1 + m[2] * c0) * inv_det
    out[14] = (-m[12] * s3 + m[13] * s1 - m[14] * s0) * inv_det
    out[15] = (m[8] * s3 - m[9] * s1 + m[10] * s0) * inv_det

    return out, inv_det
