"""Predictions from fitted coefficients."""

import logging

import numpy as np
import pandas as pd

from .errors import DimensionMismatch
from .linalg import as_matrix, multiply
from .solver import CoefficientSet

logger = logging.getLogger(__name__)


def _select_features(X: pd.DataFrame, coeffs: CoefficientSet) -> pd.DataFrame:
    """Reorder DataFrame columns to match the order used during fitting."""
    names = list(coeffs.feature_names)
    if set(X.columns) != set(names) or len(X.columns) != len(names):
        raise DimensionMismatch(
            f"Expected feature columns {names}, got {list(X.columns)}."
        )
    return X.loc[:, names]


def predict(X, coeffs: CoefficientSet):
    """
    Apply fitted coefficients to each row of a feature matrix.

    prediction[i] = bias + sum_j X[i, j] * weights[j]

    Args:
        X: Feature matrix of shape (n_samples, n_features)
        coeffs: Coefficients returned by `solver.fit`

    Returns:
        predictions: Array of shape (n_samples,), index-aligned with the rows
            of `X`. A `pandas.Series` with the same index when `X` is a
            `pandas.DataFrame`.

    Raises:
        DimensionMismatch: If the column count of `X` differs from the number
            of weights.
    """
    is_frame = isinstance(X, pd.DataFrame)
    if is_frame and coeffs.feature_names is not None:
        X = _select_features(X, coeffs)

    X_arr = as_matrix(X, "X")

    if X_arr.shape[1] != coeffs.n_features:
        raise DimensionMismatch(
            f"X has {X_arr.shape[1]} features but the model has {coeffs.n_features} weights."
        )

    logger.debug("Predicting %d samples", X_arr.shape[0])

    predictions = multiply(X_arr, coeffs.weights.reshape(-1, 1))[:, 0] + coeffs.bias

    if is_frame:
        return pd.Series(predictions, index=X.index, name="prediction")
    return predictions
