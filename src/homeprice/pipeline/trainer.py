"""Model trainer for homeprice.

ALL TRAINING LOGIC MUST LIVE HERE.
The runner and scripts fit regression stages only through this class.

Two training modes:
    1. Cold fit: weights and bias start at zero
    2. Retrain (warm start): start from previously learned parameters and
       take further gradient steps over the new data only. Old data is not
       revisited.

Key Classes:
    Trainer - Canonical trainer for the regression stage

Usage:
    from homeprice.pipeline import Trainer

    trainer = Trainer()
    stage = trainer.train(transformed_df)
    retrained = trainer.retrain(new_transformed_df, stage)
"""

from __future__ import annotations

import logging
from typing import Optional, Union

import pandas as pd

from homeprice.analysis.metrics import evaluate_regression
from homeprice.config import FEATURES_COLUMN, PRICE_COLUMN, SCORE_COLUMN, TrainerConfig
from homeprice.models.linear import LinearRegressionStage
from homeprice.models.online_gradient import LinearModelParameters

logger = logging.getLogger(__name__)


class Trainer:
    """Canonical trainer for the linear regression stage."""

    def __init__(
        self,
        config: Optional[TrainerConfig] = None,
        feature_column: str = FEATURES_COLUMN,
        label_column: str = PRICE_COLUMN,
        score_column: str = SCORE_COLUMN,
    ):
        self.config = config or TrainerConfig()
        self.feature_column = feature_column
        self.label_column = label_column
        self.score_column = score_column

    def _new_stage(self) -> LinearRegressionStage:
        return LinearRegressionStage(
            config=self.config,
            feature_column=self.feature_column,
            label_column=self.label_column,
            score_column=self.score_column,
        )

    def train(self, train_df: pd.DataFrame) -> LinearRegressionStage:
        """Fit a regression stage from zero-initialized parameters.

        Args:
            train_df: Table with feature vectors and labels.

        Returns:
            Fitted LinearRegressionStage.
        """
        logger.info(
            "Training online gradient descent on %d rows (%d iterations)",
            len(train_df), self.config.number_of_iterations,
        )
        stage = self._new_stage().fit(train_df)
        self._log_fit(stage, train_df)
        return stage

    def retrain(
        self,
        train_df: pd.DataFrame,
        previous: Union[LinearRegressionStage, LinearModelParameters],
    ) -> LinearRegressionStage:
        """Continue training from previously learned parameters.

        Args:
            train_df: New data only.
            previous: Fitted stage or its parameters. Not modified.

        Returns:
            New fitted LinearRegressionStage.
        """
        if isinstance(previous, LinearRegressionStage):
            initial = previous.parameters
        else:
            initial = previous.copy()

        logger.info(
            "Retraining on %d new rows from weights=%s bias=%.4f",
            len(train_df), initial.weights.tolist(), initial.bias,
        )
        stage = self._new_stage().fit(train_df, initial_parameters=initial)
        self._log_fit(stage, train_df)
        return stage

    def _log_fit(self, stage: LinearRegressionStage, train_df: pd.DataFrame) -> None:
        params = stage.parameters
        metrics = evaluate_regression(
            stage.transform(train_df),
            label_column=self.label_column,
            score_column=self.score_column,
        )
        logger.info(
            "  → weights=%s bias=%.4f, train %r",
            params.weights.tolist(), params.bias, metrics,
        )


__all__ = ["Trainer"]
