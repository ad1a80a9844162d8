"""Online gradient descent for linear regression.

Built on sklearn's SGDRegressor: squared loss, one parameter update per
training example, rows visited in table order unless shuffling is enabled.

    score = dot(w, x) + b
    g     = 2 * (score - y)
    rate  = learning_rate / sqrt(t + 1)     (or learning_rate, if not decreasing)
    w    <- w - rate * g * x
    b    <- b - rate * g

SGDRegressor's squared loss is halved, so its eta0 is twice learning_rate.
t counts the examples processed so far in this call, so a warm-started fit
begins again from the full learning rate. l2_regularization is passed as
SGDRegressor's alpha.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np
from sklearn.linear_model import SGDRegressor

from homeprice.config import TrainerConfig
from homeprice.exceptions import EmptyDatasetError, SchemaError


@dataclass
class LinearModelParameters:
    """Weights and bias of a linear model."""

    weights: np.ndarray
    bias: float

    def __post_init__(self) -> None:
        self.weights = np.array(self.weights, dtype=np.float64).reshape(-1)
        self.bias = float(self.bias)

    @property
    def n_features(self) -> int:
        return self.weights.shape[0]

    def score(self, X: np.ndarray) -> np.ndarray:
        """Scores for a (n_samples, n_features) matrix."""
        return X @ self.weights + self.bias

    def copy(self) -> "LinearModelParameters":
        return LinearModelParameters(weights=self.weights.copy(), bias=self.bias)

    def to_dict(self) -> dict:
        return {"weights": self.weights.tolist(), "bias": self.bias}


def build_regressor(config: TrainerConfig) -> SGDRegressor:
    """SGDRegressor configured for per-example updates from TrainerConfig."""
    return SGDRegressor(
        loss="squared_error",
        penalty="l2" if config.l2_regularization > 0 else None,
        alpha=config.l2_regularization,
        fit_intercept=True,
        learning_rate="invscaling" if config.decrease_learning_rate else "constant",
        eta0=2.0 * config.learning_rate,
        power_t=0.5,
        max_iter=config.number_of_iterations,
        tol=None,
        shuffle=config.shuffle,
        random_state=config.seed,
    )


def online_gradient_descent(
    X: np.ndarray,
    y: np.ndarray,
    config: TrainerConfig,
    initial: Optional[LinearModelParameters] = None,
) -> LinearModelParameters:
    """Fit linear model parameters with per-example gradient steps.

    Args:
        X: Feature matrix (n_samples, n_features)
        y: Labels (n_samples,)
        config: Iteration count, learning rate schedule, L2, shuffling
        initial: Starting parameters (warm start). Zeros when None.

    Returns:
        New LinearModelParameters. initial is not modified.

    Raises:
        EmptyDatasetError: If X has no rows
        SchemaError: If shapes disagree
    """
    X = np.asarray(X, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64).reshape(-1)

    if X.ndim != 2:
        raise SchemaError(f"Feature matrix must be 2-D, got shape {X.shape}")
    n_samples, n_features = X.shape
    if n_samples == 0:
        raise EmptyDatasetError("Cannot train on an empty table")
    if y.shape[0] != n_samples:
        raise SchemaError(
            f"Label count {y.shape[0]} does not match row count {n_samples}"
        )

    if initial is None:
        coef_init = np.zeros(n_features, dtype=np.float64)
        intercept_init = np.zeros(1, dtype=np.float64)
    else:
        if initial.n_features != n_features:
            raise SchemaError(
                f"Initial parameters have {initial.n_features} weights, "
                f"features have width {n_features}"
            )
        coef_init = initial.weights.copy()
        intercept_init = np.array([initial.bias], dtype=np.float64)

    sgd = build_regressor(config)
    sgd.fit(X, y, coef_init=coef_init, intercept_init=intercept_init)

    return LinearModelParameters(weights=sgd.coef_, bias=sgd.intercept_[0])


__all__ = ["LinearModelParameters", "build_regressor", "online_gradient_descent"]
