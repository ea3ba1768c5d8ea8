"""
Dense matrix operations used by the normal-equation solver.

Every function accepts array-likes (nested lists, numpy arrays, pandas
objects), validates them, and returns a new float64 `numpy.ndarray`.
Inputs are never modified.
"""

import numpy as np

from .config import DTYPE, DEFAULT_RCOND
from .errors import ShapeError, DimensionMismatch, SingularMatrixError, NumericalOverflowError
from typing import Optional, Tuple


def as_matrix(M, name: str = "matrix") -> np.ndarray:
    """
    Coerce an array-like to a non-empty 2D float array.

    Args:
        M: Array-like of shape (m, n)
        name: Name used in error messages. Default: 'matrix'.

    Returns:
        `numpy.ndarray` of shape (m, n) and dtype float64

    Raises:
        ShapeError: If `M` is ragged, non-numeric, not 2D, empty or contains
            non-finite values.
    """
    try:
        arr = np.asarray(M, dtype=DTYPE)
    except (TypeError, ValueError) as e:
        raise ShapeError(f"{name} must be a rectangular numeric matrix: {e}") from e

    if arr.ndim != 2:
        raise ShapeError(f"{name} must be 2-dimensional, got {arr.ndim} dimension(s).")
    if arr.shape[0] == 0 or arr.shape[1] == 0:
        raise ShapeError(f"{name} must be non-empty, got shape {arr.shape}.")
    if not np.all(np.isfinite(arr)):
        raise ShapeError(f"{name} must contain only finite values.")

    return arr


def as_vector(v, name: str = "vector") -> np.ndarray:
    """
    Coerce an array-like to a 1D float array.

    A single column of shape (m, 1) is flattened to shape (m,). Empty vectors
    are allowed here; callers decide whether that is an error.

    Args:
        v: Array-like of shape (m,) or (m, 1)
        name: Name used in error messages. Default: 'vector'.

    Returns:
        `numpy.ndarray` of shape (m,) and dtype float64
    """
    try:
        arr = np.asarray(v, dtype=DTYPE)
    except (TypeError, ValueError) as e:
        raise ShapeError(f"{name} must be a numeric vector: {e}") from e

    if arr.ndim == 2 and arr.shape[1] == 1:
        arr = arr[:, 0]
    if arr.ndim != 1:
        raise ShapeError(f"{name} must be 1-dimensional, got shape {arr.shape}.")
    if not np.all(np.isfinite(arr)):
        raise ShapeError(f"{name} must contain only finite values.")

    return arr


def columnize(v, name: str = "vector") -> np.ndarray:
    """Return a length-m vector as an (m, 1) column matrix."""
    arr = as_vector(v, name)
    if arr.size == 0:
        raise ShapeError(f"{name} must be non-empty.")
    return arr.reshape(-1, 1).copy()


def transpose(M) -> np.ndarray:
    """
    Transpose a matrix.

    Args:
        M: Array-like of shape (m, n)

    Returns:
        New array of shape (n, m) with result[j, i] == M[i, j]
    """
    return as_matrix(M).T.copy()


def multiply(A, B) -> np.ndarray:
    """
    Multiply two matrices.

    Args:
        A: Array-like of shape (p, q)
        B: Array-like of shape (q, r)

    Returns:
        New array of shape (p, r) with result[i, j] = sum_k A[i, k] * B[k, j]

    Raises:
        DimensionMismatch: If the column count of `A` differs from the row
            count of `B`.
        NumericalOverflowError: If the product does not fit in float64.
    """
    a = as_matrix(A, "A")
    b = as_matrix(B, "B")

    if a.shape[1] != b.shape[0]:
        raise DimensionMismatch(
            f"Cannot multiply matrices of shape {a.shape} and {b.shape}: "
            f"inner dimensions {a.shape[1]} and {b.shape[0]} differ."
        )

    with np.errstate(over="ignore", invalid="ignore"):
        product = a @ b

    if not np.all(np.isfinite(product)):
        raise NumericalOverflowError(
            f"Product of matrices of shape {a.shape} and {b.shape} overflows float64."
        )

    return product


def _equilibrate(arr: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Scale rows, then columns, so that each has a largest magnitude of 1.

    Returns the scaled matrix S with the row and column factors r, c such
    that arr = diag(r) @ S @ diag(c).
    """
    row_scale = np.max(np.abs(arr), axis=1)
    if np.any(row_scale == 0):
        raise SingularMatrixError(f"Matrix of shape {arr.shape} has a zero row.")
    scaled = arr / row_scale[:, None]

    col_scale = np.max(np.abs(scaled), axis=0)
    if np.any(col_scale == 0):
        raise SingularMatrixError(f"Matrix of shape {arr.shape} has a zero column.")

    return scaled / col_scale[None, :], row_scale, col_scale


def invert(M, rcond: Optional[float] = None) -> np.ndarray:
    """
    Invert a square matrix.

    Rows and columns are equilibrated first so that features measured in
    different units do not make a well-posed matrix look singular. The
    scaled matrix is rejected when its smallest singular value is at most
    `rcond` times its largest. Otherwise the inverse is computed by LAPACK
    (LU decomposition with partial pivoting) through `numpy.linalg.inv` and
    the scaling is undone.

    Args:
        M: Array-like of shape (n, n)
        rcond: Relative singular-value cutoff. Default: `config.DEFAULT_RCOND`.

    Returns:
        inverse: Array of shape (n, n) such that M @ inverse ~= I

    Raises:
        DimensionMismatch: If `M` is not square.
        SingularMatrixError: If `M` is singular or ill-conditioned.
    """
    arr = as_matrix(M)
    rcond = DEFAULT_RCOND if rcond is None else rcond

    if arr.shape[0] != arr.shape[1]:
        raise DimensionMismatch(f"Only square matrices can be inverted, got shape {arr.shape}.")

    scaled, row_scale, col_scale = _equilibrate(arr)

    try:
        s = np.linalg.svd(scaled, compute_uv=False)
        if not np.all(np.isfinite(s)) or not s[0] > 0 or s[-1] <= rcond * s[0]:
            cond = s[0] / s[-1] if s[-1] > 0 else np.inf
            raise SingularMatrixError(
                f"Matrix of shape {arr.shape} is singular or ill-conditioned "
                f"(scaled condition number {cond:.3g}, limit {1.0 / rcond:.3g})."
            )
        scaled_inv = np.linalg.inv(scaled)
    except np.linalg.LinAlgError as e:
        raise SingularMatrixError(f"Matrix of shape {arr.shape} could not be inverted: {e}") from e

    # arr^-1 = diag(1/c) @ scaled^-1 @ diag(1/r)
    return scaled_inv / col_scale[:, None] / row_scale[None, :]
