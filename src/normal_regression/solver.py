"""
Closed-form ordinary least squares via the normal equations.

    beta = (X^T X)^{-1} X^T y
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
import pandas as pd

from .errors import DimensionMismatch
from .features import add_bias_column
from .linalg import as_matrix, as_vector, columnize, invert, multiply, transpose

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class CoefficientSet:
    """
    Fitted coefficients of a linear model.

    Attributes:
        bias: Intercept term. 0.0 when the model was fitted without one.
        weights: Read-only array of shape (n_features,)
        feature_names: Column labels of the training features when they were
            given as a `pandas.DataFrame`, otherwise None.

    Two sets are equal when their bias, weights and feature names are equal.
    """

    bias: float
    weights: np.ndarray
    feature_names: Optional[Tuple] = None

    def __post_init__(self):
        weights = np.array(self.weights, dtype=np.float64).reshape(-1)
        weights.flags.writeable = False
        object.__setattr__(self, "bias", float(self.bias))
        object.__setattr__(self, "weights", weights)
        if self.feature_names is not None:
            object.__setattr__(self, "feature_names", tuple(self.feature_names))

    @property
    def n_features(self) -> int:
        return self.weights.shape[0]

    def as_array(self) -> np.ndarray:
        """Return `[bias, *weights]` as a new array."""
        return np.concatenate([[self.bias], self.weights])

    def __eq__(self, other):
        if not isinstance(other, CoefficientSet):
            return NotImplemented
        return (
            self.bias == other.bias
            and np.array_equal(self.weights, other.weights)
            and self.feature_names == other.feature_names
        )

    def __repr__(self):
        return f"CoefficientSet(bias={self.bias!r}, weights={self.weights.tolist()!r})"


def fit(X, y, include_bias: bool = True, rcond: Optional[float] = None) -> CoefficientSet:
    """
    Fit a linear model with the normal equations.

    Args:
        X: Feature matrix of shape (n_samples, n_features). A `pandas.DataFrame`
            also records its column labels on the result.
        y: Target vector of shape (n_samples,)
        include_bias: Whether to estimate an intercept term. Default: True.
        rcond: Singular-value cutoff passed to `invert`. Default: None
            (use `config.DEFAULT_RCOND`).

    Returns:
        coefficients: `CoefficientSet` with the fitted bias and weights

    Raises:
        ShapeError: If `X` or `y` is malformed.
        DimensionMismatch: If `X` and `y` have different numbers of samples.
        NumericalOverflowError: If X^T X or X^T y overflows float64.
        SingularMatrixError: If X^T X cannot be inverted, e.g. collinear
            features or fewer samples than coefficients.
    """
    feature_names = tuple(X.columns) if isinstance(X, pd.DataFrame) else None
    X_arr = as_matrix(X, "X")
    y_arr = as_vector(y, "y")

    if y_arr.shape[0] != X_arr.shape[0]:
        raise DimensionMismatch(
            f"X has {X_arr.shape[0]} samples but y has {y_arr.shape[0]}."
        )

    logger.debug(
        "Fitting normal equations: %d samples, %d features, include_bias=%s",
        X_arr.shape[0], X_arr.shape[1], include_bias,
    )

    design = add_bias_column(X_arr) if include_bias else X_arr

    design_T = transpose(design)
    gram = multiply(design_T, design)
    moment = multiply(design_T, columnize(y_arr, "y"))

    beta = multiply(invert(gram, rcond=rcond), moment)

    if include_bias:
        return CoefficientSet(beta[0, 0], beta[1:, 0], feature_names)
    return CoefficientSet(0.0, beta[:, 0], feature_names)
