import dataclasses
import warnings

import numpy as np
import pandas as pd
import pytest
from sklearn.linear_model import LinearRegression as SklearnLinearRegression

from normal_regression.errors import (
    ShapeError,
    DimensionMismatch,
    SingularMatrixError,
    NumericalOverflowError,
)
from normal_regression.prediction import predict
from normal_regression.solver import CoefficientSet, fit


class TestFit:
    """Tests for `fit`."""

    def test_simple_line(self):
        """y = 2x is recovered with zero intercept."""
        coeffs = fit([[1], [2], [3], [4]], [2, 4, 6, 8], include_bias=True)
        assert coeffs.bias == pytest.approx(0.0, abs=1e-10)
        np.testing.assert_allclose(coeffs.weights, [2.0], rtol=1e-10)

    def test_known_multivariate_function(self):
        rng = np.random.default_rng(seed=1)
        X = rng.uniform(-5, 5, size=(20, 3))
        y = 1.5 + X @ np.array([2.0, -1.0, 0.5])

        coeffs = fit(X, y)

        assert coeffs.bias == pytest.approx(1.5, rel=1e-9)
        np.testing.assert_allclose(coeffs.weights, [2.0, -1.0, 0.5], rtol=1e-9)

    def test_without_bias(self):
        coeffs = fit([[1.0], [2.0], [3.0]], [3.0, 6.0, 9.0], include_bias=False)
        assert coeffs.bias == 0.0
        np.testing.assert_allclose(coeffs.weights, [3.0], rtol=1e-10)

    def test_without_bias_forces_zero_bias_on_offset_data(self):
        coeffs = fit([[1.0], [2.0], [3.0]], [11.0, 12.0, 13.0], include_bias=False)
        assert coeffs.bias == 0.0
        assert coeffs.n_features == 1

    def test_matches_sklearn_with_intercept(self):
        rng = np.random.default_rng(seed=2)
        X = rng.uniform(size=(50, 4))
        y = X @ np.array([1.0, 2.0, 3.0, 4.0]) + 0.7 + rng.normal(scale=0.1, size=50)

        coeffs = fit(X, y, include_bias=True)
        reference = SklearnLinearRegression(fit_intercept=True).fit(X, y)

        np.testing.assert_allclose(coeffs.weights, reference.coef_, rtol=1e-8)
        np.testing.assert_allclose(coeffs.bias, reference.intercept_, rtol=1e-8)

    def test_matches_sklearn_without_intercept(self):
        rng = np.random.default_rng(seed=3)
        X = rng.uniform(size=(30, 2))
        y = X @ np.array([-2.0, 5.0]) + rng.normal(scale=0.1, size=30)

        coeffs = fit(X, y, include_bias=False)
        reference = SklearnLinearRegression(fit_intercept=False).fit(X, y)

        np.testing.assert_allclose(coeffs.weights, reference.coef_, rtol=1e-8)

    def test_deterministic(self):
        rng = np.random.default_rng(seed=4)
        X = rng.uniform(size=(15, 3))
        y = rng.uniform(size=15)
        first = fit(X, y)
        second = fit(X, y)
        assert first.bias == second.bias
        np.testing.assert_array_equal(first.weights, second.weights)

    def test_column_target(self):
        coeffs = fit([[1], [2], [3]], [[2], [4], [6]])
        np.testing.assert_allclose(coeffs.weights, [2.0], rtol=1e-10)

    def test_dataframe_records_feature_names(self):
        df = pd.DataFrame({"size": [50.0, 60.0, 80.0, 100.0], "rooms": [1.0, 3.0, 2.0, 4.0]})
        y = 1000.0 * df["size"] + 500.0 * df["rooms"]
        coeffs = fit(df, y)
        assert coeffs.feature_names == ("size", "rooms")

    def test_collinear_with_bias_column(self):
        """A constant feature duplicates the bias column."""
        X = [[1, 1], [1, 2], [1, 3], [1, 4]]
        with pytest.raises(SingularMatrixError):
            fit(X, [1, 2, 3, 4], include_bias=True)

    def test_collinear_features(self):
        X = [[1, 2], [2, 4], [3, 6], [4, 8]]
        with pytest.raises(SingularMatrixError):
            fit(X, [1, 2, 3, 4])

    def test_too_few_samples(self):
        with pytest.raises(SingularMatrixError):
            fit([[1.0, 2.0]], [3.0])

    def test_length_mismatch(self):
        with pytest.raises(DimensionMismatch, match="4 samples but y has 3"):
            fit([[1], [2], [3], [4]], [2, 4, 6])

    def test_ragged_features(self):
        with pytest.raises(ShapeError):
            fit([[1, 2], [3]], [1, 2])

    def test_features_on_different_scales(self):
        """Floor area in square metres next to a valuation in currency units."""
        X = np.array([
            [45.0, 8.1e5],
            [60.0, 1.3e6],
            [72.0, 9.0e5],
            [90.0, 1.9e6],
            [110.0, 1.2e6],
            [130.0, 2.1e6],
        ])
        y = 1000.0 + 5000.0 * X[:, 0] + 0.3 * X[:, 1]

        coeffs = fit(X, y)
        reference = SklearnLinearRegression(fit_intercept=True).fit(X, y)

        assert coeffs.bias == pytest.approx(1000.0, rel=1e-6)
        np.testing.assert_allclose(coeffs.weights, [5000.0, 0.3], rtol=1e-6)
        np.testing.assert_allclose(coeffs.weights, reference.coef_, rtol=1e-6)
        np.testing.assert_allclose(predict(X, coeffs), y, rtol=1e-6)

    def test_overlapping_columns_still_full_rank(self):
        """[[1,1],[1,2],[2,2],[2,3]] stays full rank with a bias column."""
        X = [[1, 1], [1, 2], [2, 2], [2, 3]]
        y = [6.0, 9.0, 11.0, 14.0]  # 1 + 2*x0 + 3*x1

        coeffs = fit(X, y)

        assert coeffs.bias == pytest.approx(1.0, rel=1e-9)
        np.testing.assert_allclose(coeffs.weights, [2.0, 3.0], rtol=1e-9)
        np.testing.assert_allclose(predict(X, coeffs), y, rtol=1e-9)

    def test_overflowing_gram_matrix(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            with pytest.raises(NumericalOverflowError):
                fit([[1e200], [2e200], [3e200]], [1, 2, 3])


class TestCoefficientSet:
    """Tests for `CoefficientSet`."""

    def test_weights_read_only(self):
        coeffs = CoefficientSet(1.0, [2.0, 3.0])
        with pytest.raises(ValueError):
            coeffs.weights[0] = 10.0

    def test_frozen(self):
        coeffs = CoefficientSet(1.0, [2.0])
        with pytest.raises(dataclasses.FrozenInstanceError):
            coeffs.bias = 5.0

    def test_copies_weights(self):
        weights = np.array([2.0, 3.0])
        coeffs = CoefficientSet(0.0, weights)
        weights[0] = 100.0
        assert coeffs.weights[0] == 2.0

    def test_as_array(self):
        coeffs = CoefficientSet(1.0, [2.0, 3.0])
        np.testing.assert_array_equal(coeffs.as_array(), [1.0, 2.0, 3.0])

    def test_equal_by_value(self):
        assert CoefficientSet(1.0, [2.0, 3.0]) == CoefficientSet(1.0, np.array([2.0, 3.0]))

    def test_not_equal(self):
        assert CoefficientSet(1.0, [2.0, 3.0]) != CoefficientSet(1.0, [2.0, 4.0])
        assert CoefficientSet(1.0, [2.0]) != CoefficientSet(0.0, [2.0])
        assert CoefficientSet(1.0, [2.0], ("size",)) != CoefficientSet(1.0, [2.0])

    def test_repeated_fits_are_equal(self):
        X = [[1.0, 2.0], [2.0, 1.0], [3.0, 5.0], [4.0, 3.0]]
        y = [1.0, 2.0, 4.0, 3.0]
        assert fit(X, y) == fit(X, y)
