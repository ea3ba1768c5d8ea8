"""
Fit-then-predict workflow.

Fits coefficients once, predicts over the training features (or a new
feature matrix) and optionally scores the fit. The result is what a
plotting or reporting layer consumes: predictions index-aligned with the
feature rows that produced them.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

import numpy as np
import pandas as pd

from .evaluation import mean_squared_error
from .prediction import predict
from .solver import CoefficientSet, fit

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FitResult:
    """
    Output of `fit_predict`.

    Attributes:
        coefficients: Fitted `CoefficientSet`
        predictions: Predictions for the requested feature rows
        mse: Mean squared error on the training data, or None if not scored
    """

    coefficients: CoefficientSet
    predictions: Union[np.ndarray, pd.Series]
    mse: Optional[float] = None


def fit_predict(X, y, include_bias: bool = True, X_new=None, score: bool = True) -> FitResult:
    """
    Fit a linear model and generate predictions.

    Args:
        X: Training feature matrix of shape (n_samples, n_features)
        y: Training targets of shape (n_samples,)
        include_bias: Whether to estimate an intercept term. Default: True.
        X_new: Feature matrix to predict on. Default: None (predict on `X`).
        score: If True and predicting on `X`, compute the training MSE.
            Default: True.

    Returns:
        result: `FitResult`
    """
    coefficients = fit(X, y, include_bias=include_bias)

    if X_new is None:
        predictions = predict(X, coefficients)
        mse = mean_squared_error(y, predictions) if score else None
    else:
        predictions = predict(X_new, coefficients)
        mse = None

    if mse is not None:
        logger.debug("Training MSE: %.6g", mse)

    return FitResult(coefficients, predictions, mse)
