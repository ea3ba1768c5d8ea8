"""Regression model estimators."""

from .base import RegressionModel
from .linear import LinearRegression

__all__ = ["RegressionModel", "LinearRegression"]
