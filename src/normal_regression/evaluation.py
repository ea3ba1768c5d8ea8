"""Evaluation metrics for regression models."""

import numpy as np
from typing import Tuple

from .errors import DimensionMismatch, EmptyInputError
from .linalg import as_vector


def _check_pair(y_true, y_pred) -> Tuple[np.ndarray, np.ndarray]:
    """Validate that two vectors are non-empty and of equal length."""
    y_true = as_vector(y_true, "y_true")
    y_pred = as_vector(y_pred, "y_pred")

    if y_true.shape[0] != y_pred.shape[0]:
        raise DimensionMismatch(
            f"y_true has {y_true.shape[0]} values but y_pred has {y_pred.shape[0]}."
        )
    if y_true.shape[0] == 0:
        raise EmptyInputError("Cannot evaluate a metric over zero samples.")

    return y_true, y_pred


def mean_squared_error(y_true, y_pred) -> float:
    """
    Calculate the mean squared error (MSE).

    MSE = mean((y_true - y_pred)^2)

    Args:
        y_true: True values
        y_pred: Predicted values

    Returns:
        mse: Mean squared error (0.0 for a perfect fit)

    Raises:
        DimensionMismatch: If the inputs differ in length.
        EmptyInputError: If the inputs are empty.
    """
    y_true, y_pred = _check_pair(y_true, y_pred)
    return float(np.mean((y_true - y_pred)**2))


def rmse(y_true, y_pred) -> float:
    """
    Calculate the root mean square error (RMSE).

    Args:
        y_true: True values
        y_pred: Predicted values

    Returns:
        rmse: Root mean square error
    """
    return float(np.sqrt(mean_squared_error(y_true, y_pred)))


def mae(y_true, y_pred) -> float:
    """
    Calculate mean absolute error (MAE).

    Args:
        y_true: True values
        y_pred: Predicted values

    Returns:
        mae: Mean absolute error
    """
    y_true, y_pred = _check_pair(y_true, y_pred)
    return float(np.mean(np.abs(y_pred - y_true)))


def r2_score(y_true, y_pred) -> float:
    """
    The coefficient of determination of a set of predictions.

    R^2 = 1 - SS_res / SS_tot. For a constant `y_true` (SS_tot == 0) this
    returns 1.0 if the predictions are exact and 0.0 otherwise.

    Args:
        y_true: True values
        y_pred: Predicted values
    """
    y_true, y_pred = _check_pair(y_true, y_pred)
    sum_e = np.sum((y_true - y_pred)**2)
    sum_s = np.sum((y_true - np.mean(y_true))**2)
    if sum_s == 0:
        return 1.0 if sum_e == 0 else 0.0
    return float(1.0 - sum_e / sum_s)
