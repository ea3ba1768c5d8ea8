"""Exceptions raised by the regression solver."""


class RegressionError(ValueError):
    """Base class for all errors raised by `normal_regression`."""


class ShapeError(RegressionError):
    """A matrix or vector is empty, ragged, non-numeric or has the wrong rank."""


class DimensionMismatch(RegressionError):
    """Two operands have incompatible shapes."""


class SingularMatrixError(RegressionError):
    """A matrix is singular or too ill-conditioned to invert reliably."""


class EmptyInputError(RegressionError):
    """An aggregate was asked to reduce a zero-length input."""


class NotFittedError(RegressionError):
    """An estimator was used before a successful call to fit()."""


class NumericalOverflowError(RegressionError):
    """An intermediate result does not fit in the working float precision."""
