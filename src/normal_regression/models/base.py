"""Base interface for regression models."""

from abc import ABC, abstractmethod
import numpy as np
import pandas as pd
from typing import Union


class RegressionModel(ABC):
    """
    Base class for regression models.
    """

    @abstractmethod
    def fit(self, X, y) -> "RegressionModel":
        """
        Fit model parameters to observed data.

        Args:
            X: Feature matrix of shape (n_samples, n_features).
               Array-like or `pandas.DataFrame`.
            y: Target vector of shape (n_samples,)

        Returns:
            self: The fitted model
        """
        pass

    @abstractmethod
    def predict(self, X) -> Union[np.ndarray, pd.Series]:
        """
        Generate predictions using the fitted model.

        Args:
            X: Feature matrix of shape (n_samples, n_features)

        Returns:
            predictions: Predicted values of shape (n_samples,)
        """
        pass

    @abstractmethod
    def get_params(self):
        """
        Get the fitted parameters.
        """
        pass
