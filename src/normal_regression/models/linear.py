"""Linear regression estimator built on the normal-equation solver."""

import numpy as np
from typing import Optional

from .base import RegressionModel
from ..errors import NotFittedError
from ..evaluation import r2_score
from .. import prediction, solver
from ..solver import CoefficientSet


class LinearRegression(RegressionModel):
    """
    Ordinary Least Squares (OLS) linear regression.

    Fits a linear model by minimizing the squared residuals:
        minimize ||y - Xθ||²

    The solution is obtained via the normal equations:
        θ = (X^T X)^{-1} X^T y

    Attributes:
        fit_intercept: Whether an intercept (bias) term is estimated
        rcond: Singular-value cutoff used when inverting X^T X
        coefficients: Fitted `CoefficientSet`, or None before fitting

    Example:
        >>> regressor = LinearRegression()
        >>> regressor.fit(X_train, y_train)
        >>> predictions = regressor.predict(X_test)
        >>> coefficients = regressor.get_params()
    """

    def __init__(self, fit_intercept: bool = True, rcond: Optional[float] = None):
        """
        Create a `LinearRegression` instance.

        Args:
            fit_intercept: If True, add a bias column before solving. Default: True.
            rcond: Singular-value cutoff for inverting X^T X.
                Default: None (use `config.DEFAULT_RCOND`).
        """
        self.fit_intercept = fit_intercept
        self.rcond = rcond
        self.coefficients: Optional[CoefficientSet] = None

    def fit(self, X, y) -> "LinearRegression":
        """
        Fit the linear regression model using ordinary least squares.

        A failed fit leaves the model unfitted.

        Args:
            X: Feature matrix of shape (n_samples, n_features)
            y: Target vector of shape (n_samples,)

        Returns:
            self: The fitted model
        """
        self.coefficients = None
        self.coefficients = solver.fit(X, y, include_bias=self.fit_intercept, rcond=self.rcond)
        return self

    def _check_fitted(self, method: str):
        if self.coefficients is None:
            raise NotFittedError(f"Model must be fitted before calling {method}(). Call fit() first.")

    def predict(self, X):
        """
        Generate predictions using the fitted model.

        Args:
            X: Feature matrix of shape (n_samples, n_features)

        Returns:
            predictions: Predicted values of shape (n_samples,)
        """
        self._check_fitted("predict")
        return prediction.predict(X, self.coefficients)

    def get_params(self) -> CoefficientSet:
        """
        Get the fitted parameters.

        Returns:
            coefficients: `CoefficientSet` with bias and weights
        """
        self._check_fitted("get_params")
        return self.coefficients

    def score(self, X, y) -> float:
        """Return R² of the predictions on (X, y)."""
        self._check_fitted("score")
        return r2_score(y, self.predict(X))

    @property
    def coef_(self) -> np.ndarray:
        """Weights, excluding the intercept."""
        return self.get_params().weights

    @property
    def intercept_(self) -> float:
        """Intercept term (0.0 when fit_intercept is False)."""
        return self.get_params().bias

    def __repr__(self):
        return f"LinearRegression(fit_intercept={self.fit_intercept}, rcond={self.rcond})"
