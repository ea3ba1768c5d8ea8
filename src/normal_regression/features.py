"""Design-matrix construction."""

import numpy as np

from .config import BIAS_VALUE
from .linalg import as_matrix


def add_bias_column(X) -> np.ndarray:
    """
    Prepend a column of ones to a feature matrix.

    The ones column lets the solver estimate an intercept as an ordinary
    coefficient. Calling this twice adds two bias columns.

    Args:
        X: Feature matrix of shape (n_samples, n_features)

    Returns:
        New array of shape (n_samples, n_features + 1) whose first column is 1.0
    """
    arr = as_matrix(X, "X")
    bias = np.full((arr.shape[0], 1), BIAS_VALUE)
    return np.hstack([bias, arr])
