"""Multivariate linear regression via the normal equations."""

__version__ = "0.1.0"

from .errors import (
    RegressionError,
    ShapeError,
    DimensionMismatch,
    SingularMatrixError,
    EmptyInputError,
    NumericalOverflowError,
    NotFittedError,
)

from .linalg import (
    as_matrix,
    as_vector,
    columnize,
    transpose,
    multiply,
    invert,
)

from .features import add_bias_column
from .solver import CoefficientSet, fit
from .prediction import predict
from .pipeline import FitResult, fit_predict

from .evaluation import (
    mean_squared_error,
    rmse,
    mae,
    r2_score,
)

from .models import RegressionModel, LinearRegression

__all__ = [
    # Errors
    "RegressionError",
    "ShapeError",
    "DimensionMismatch",
    "SingularMatrixError",
    "EmptyInputError",
    "NumericalOverflowError",
    "NotFittedError",

    # Matrix operations
    "as_matrix",
    "as_vector",
    "columnize",
    "transpose",
    "multiply",
    "invert",

    # Fitting and prediction
    "add_bias_column",
    "CoefficientSet",
    "fit",
    "predict",
    "FitResult",
    "fit_predict",

    # Evaluation metrics
    "mean_squared_error",
    "rmse",
    "mae",
    "r2_score",

    # Estimators
    "RegressionModel",
    "LinearRegression",
]
