"""Centralized configuration for homeprice.

All paths, trainer defaults, and output settings in one place.
Environment variables can override defaults.

Path Constants:
    MODELS_DIR - Fitted stage artifacts (overridable via HOMEPRICE_MODELS_DIR)
    DATA_TRANSFORMER_FILENAME - Fitted feature concatenation stage
    REGRESSION_TRANSFORMER_FILENAME - Fitted linear regression stage

Trainer Defaults:
    DEFAULT_SEED, DEFAULT_ITERATIONS, DEFAULT_LEARNING_RATE,
    DEFAULT_DECREASE_LEARNING_RATE, DEFAULT_L2

Environment Variables:
    HOMEPRICE_MODELS_DIR - Override the models directory
    HOMEPRICE_CURRENCY_SYMBOL - Override the currency symbol used in output.
        The process locale is deliberately not consulted, so output is the
        same on every host.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

# Relative to the working directory, like the tutorial's ./models paths
MODELS_DIR = Path(os.environ.get("HOMEPRICE_MODELS_DIR", "models"))

DATA_TRANSFORMER_FILENAME = "TutorialDataTransformer.joblib"
REGRESSION_TRANSFORMER_FILENAME = "TutorialRegressionTransformer.joblib"

# Column names
SIZE_COLUMN = "size"
PRICE_COLUMN = "price"
FEATURES_COLUMN = "features"
SCORE_COLUMN = "score"

# Trainer defaults
DEFAULT_SEED = 1
DEFAULT_ITERATIONS = 100
DEFAULT_LEARNING_RATE = 0.1
DEFAULT_DECREASE_LEARNING_RATE = True
DEFAULT_L2 = 0.0

# Output formatting. Not taken from the locale.
CURRENCY_SYMBOL = os.environ.get("HOMEPRICE_CURRENCY_SYMBOL", "£")


@dataclass(frozen=True)
class TrainerConfig:
    """Configuration for online gradient descent training.

    Passed explicitly to every training call; nothing is read from
    global state at fit time.

    Attributes:
        number_of_iterations: Passes over the training rows.
        learning_rate: Initial step size.
        decrease_learning_rate: Scale the step by 1/sqrt(t + 1), where t is
            the number of examples processed so far in the fit.
        l2_regularization: L2 penalty strength (SGDRegressor alpha). Each
            update shrinks the weights by a factor of (1 - rate * alpha).
        shuffle: Shuffle row order at the start of each pass.
        seed: random_state for the shuffle.
    """
    number_of_iterations: int = DEFAULT_ITERATIONS
    learning_rate: float = DEFAULT_LEARNING_RATE
    decrease_learning_rate: bool = DEFAULT_DECREASE_LEARNING_RATE
    l2_regularization: float = DEFAULT_L2
    shuffle: bool = False
    seed: int = DEFAULT_SEED

    def __post_init__(self) -> None:
        if self.number_of_iterations < 1:
            raise ValueError(
                f"number_of_iterations must be >= 1, got {self.number_of_iterations}"
            )
        if self.learning_rate <= 0:
            raise ValueError(f"learning_rate must be > 0, got {self.learning_rate}")
        if self.l2_regularization < 0:
            raise ValueError(
                f"l2_regularization must be >= 0, got {self.l2_regularization}"
            )
