from __future__ import annotations

"""
Unregularized binary logistic regression: sigmoid link, cross-entropy cost and
its analytic gradient, minimized with a general-purpose scipy optimizer.
"""

import numpy as np
from scipy import optimize
from scipy.special import xlogy

from .constants import DEFAULT_MAX_ITER, DEFAULT_METHOD
from .data_prep import add_bias_column, drop_missing_rows
from .errors import DimensionMismatchError, EmptyInputError


def sigmoid(z):
    """Elementwise logistic function 1 / (1 + exp(-z))."""
    return 1.0 / (1.0 + np.exp(-np.asarray(z, dtype=float)))


def _check_shapes(theta: np.ndarray, X: np.ndarray, y: np.ndarray):
    if X.ndim != 2:
        raise DimensionMismatchError(f"X must be 2-D, got shape {X.shape}")
    if theta.ndim != 1 or X.shape[1] != theta.shape[0]:
        raise DimensionMismatchError(
            f"X has {X.shape[1]} columns but theta has shape {theta.shape}"
        )
    if y.ndim != 1 or X.shape[0] != y.shape[0]:
        raise DimensionMismatchError(f"X has {X.shape[0]} rows but y has shape {y.shape}")
    if X.shape[0] == 0:
        raise EmptyInputError("Cannot evaluate on zero rows.")


def cost(theta, X, y) -> float:
    """
    Mean cross-entropy of sigmoid(X @ theta) against labels y.

    Saturated predictions are not clipped: a label-weighted log(0) gives inf.
    Terms whose label weight is zero count as 0 (xlogy), so saturation never
    yields nan; a perfectly saturated fit costs exactly 0.0.
    """
    theta = np.asarray(theta, dtype=float)
    X = np.asarray(X, dtype=float)
    y = np.asarray(y, dtype=float)
    _check_shapes(theta, X, y)

    h = sigmoid(X @ theta)
    m = X.shape[0]
    # + 0.0 turns the -0.0 of an all-zero sum into 0.0
    return float(-np.sum(xlogy(y, h) + xlogy(1 - y, 1 - h)) / m) + 0.0


def gradient(theta, X, y) -> np.ndarray:
    """Gradient of `cost` with respect to theta: X.T @ (h - y) / m."""
    theta = np.asarray(theta, dtype=float)
    X = np.asarray(X, dtype=float)
    y = np.asarray(y, dtype=float)
    _check_shapes(theta, X, y)

    h = sigmoid(X @ theta)
    return (X.T @ (h - y)) / X.shape[0]


def minimize(
    objective,
    gradient,
    initial_point,
    auxiliary_data=(),
    method: str = DEFAULT_METHOD,
    max_iter: int | None = DEFAULT_MAX_ITER,
    verbose: bool = False,
) -> optimize.OptimizeResult:
    """
    Hand objective and analytic gradient to scipy.optimize.minimize.

    Convergence is whatever the chosen method decides; a failed run is reported
    through `result.success`, never raised.
    """
    options = {}
    if max_iter is not None:
        # TNC caps function evaluations rather than iterations
        options["maxfun" if method.upper() == "TNC" else "maxiter"] = max_iter

    result = optimize.minimize(
        objective,
        np.asarray(initial_point, dtype=float),
        args=tuple(auxiliary_data),
        method=method,
        jac=gradient,
        options=options,
    )

    if verbose:
        print(
            f"[{method}] success={result.success}, nit={getattr(result, 'nit', None)}, "
            f"fun={float(result.fun):.6f}, message={result.message}"
        )
    return result


def _fit(X_raw, y_raw, method=DEFAULT_METHOD, max_iter=DEFAULT_MAX_ITER, verbose=False):
    if len(X_raw) != len(y_raw):
        raise DimensionMismatchError(
            f"X has {len(X_raw)} rows but y has {len(y_raw)} entries"
        )
    X, y = drop_missing_rows(X_raw, y_raw)
    if X.shape[0] == 0:
        raise EmptyInputError("No complete rows left after dropping missing values.")

    X = add_bias_column(X)
    theta0 = np.zeros(X.shape[1])
    result = minimize(
        cost, gradient, theta0, (X, y), method=method, max_iter=max_iter, verbose=verbose
    )

    theta = np.array(result.x, dtype=float)
    theta.flags.writeable = False
    return theta, result


def train(
    X_raw,
    y_raw,
    method: str = DEFAULT_METHOD,
    max_iter: int | None = DEFAULT_MAX_ITER,
    verbose: bool = False,
) -> np.ndarray:
    """
    Fit coefficients [bias, w_1..w_D] from raw features and 0/1 labels.

    Incomplete rows are dropped, a bias column is prepended and the optimizer
    starts from zeros. The returned vector is read-only.
    """
    theta, _ = _fit(X_raw, y_raw, method=method, max_iter=max_iter, verbose=verbose)
    return theta


def predict_probability(theta, X_raw) -> np.ndarray:
    """
    Return P(y=1) for every complete row of X_raw.

    A 1-D input whose length matches the feature count is read as a single row.
    """
    theta = np.asarray(theta, dtype=float)
    if np.ndim(X_raw) == 1 and len(X_raw) == theta.shape[0] - 1:
        X_raw = np.atleast_2d(np.asarray(X_raw, dtype=float))
    X = drop_missing_rows(X_raw)
    if X.shape[0] == 0:
        raise EmptyInputError("No complete rows to predict on.")
    if X.shape[1] + 1 != theta.shape[0]:
        raise DimensionMismatchError(
            f"X has {X.shape[1]} features but theta expects {theta.shape[0] - 1}"
        )
    return sigmoid(add_bias_column(X) @ theta)


def predict_label(p):
    """Round probabilities to 0/1 (numpy rounds half to even, so 0.5 -> 0)."""
    labels = np.round(np.asarray(p, dtype=float)).astype(int)
    if labels.ndim == 0:
        return int(labels)
    return labels


class LogisticRegressionTNC:
    """
    Estimator-style wrapper around `train` / `predict_probability`.
    No scaling and no penalty; the bias lives in theta_[0].
    """

    def __init__(
        self,
        method: str = DEFAULT_METHOD,
        max_iter: int | None = DEFAULT_MAX_ITER,
        verbose: bool = False,
    ):
        self.method = method
        self.max_iter = max_iter
        self.verbose = verbose
        self.theta_: np.ndarray | None = None
        self.n_iter_: int | None = None
        self.converged_: bool = False

    def fit(self, X, y):
        """Fit theta_ with the configured scipy method."""
        theta, result = _fit(
            X, y, method=self.method, max_iter=self.max_iter, verbose=self.verbose
        )
        self.theta_ = theta
        self.n_iter_ = getattr(result, "nit", None)
        self.converged_ = bool(result.success)
        self.intercept_ = float(theta[0])
        self.coef_ = theta[1:]
        return self

    def _require_fitted(self):
        if self.theta_ is None:
            raise RuntimeError("Model is not fitted.")

    def predict_proba(self, X) -> np.ndarray:
        self._require_fitted()
        return predict_probability(self.theta_, X)

    def predict(self, X) -> np.ndarray:
        return predict_label(self.predict_proba(X))

    def decision_boundary(self, x1) -> np.ndarray:
        """x2 on the p = 0.5 line, i.e. theta0 + theta1*x1 + theta2*x2 = 0 (2 features only)."""
        self._require_fitted()
        if self.theta_.shape[0] != 3:
            raise DimensionMismatchError("decision_boundary needs exactly two features")
        t0, t1, t2 = self.theta_
        return -(t0 + t1 * np.asarray(x1, dtype=float)) / t2
