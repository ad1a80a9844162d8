"""Linear regression stage trained by online gradient descent.

Consumes a feature vector column and a label column at fit time; at
transform time only the feature column is required, and a score column
is appended.

The fitted parameters are the only state that matters for persistence
and retraining. They can be read back with `parameters` and passed as
`initial_parameters` to a later fit to warm-start it.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import numpy as np
import pandas as pd

from homeprice.config import FEATURES_COLUMN, PRICE_COLUMN, SCORE_COLUMN, TrainerConfig
from homeprice.data.schemas import infer_schema, vector_width
from homeprice.exceptions import NotFittedError, SchemaError
from homeprice.models.base import PipelineStage
from homeprice.models.online_gradient import LinearModelParameters, online_gradient_descent


class LinearRegressionStage(PipelineStage):
    """Linear regression on a vector feature column."""

    def __init__(
        self,
        config: Optional[TrainerConfig] = None,
        feature_column: str = FEATURES_COLUMN,
        label_column: str = PRICE_COLUMN,
        score_column: str = SCORE_COLUMN,
    ):
        """Initialize an unfitted stage.

        Args:
            config: Trainer settings (defaults to TrainerConfig())
            feature_column: Vector column produced by ConcatenateFeatures
            label_column: Column holding the regression target
            score_column: Column appended by transform()
        """
        super().__init__(output_column=score_column)
        self.config = config or TrainerConfig()
        self.feature_column = feature_column
        self.label_column = label_column
        self._parameters: Optional[LinearModelParameters] = None

    @classmethod
    def from_parameters(
        cls,
        parameters: LinearModelParameters,
        feature_column: str = FEATURES_COLUMN,
        score_column: str = SCORE_COLUMN,
        config: Optional[TrainerConfig] = None,
    ) -> "LinearRegressionStage":
        """Build a fitted stage directly from known parameters."""
        stage = cls(config=config, feature_column=feature_column, score_column=score_column)
        stage._parameters = parameters.copy()
        stage._input_schema = {
            feature_column: f"vector<float64>[{parameters.n_features}]"
        }
        return stage

    @property
    def parameters(self) -> LinearModelParameters:
        """Fitted weights and bias (copy)."""
        if self._parameters is None:
            raise NotFittedError("LinearRegressionStage is not fitted. Call fit() first.")
        return self._parameters.copy()

    def fit(
        self,
        df: pd.DataFrame,
        initial_parameters: Optional[LinearModelParameters] = None,
    ) -> "LinearRegressionStage":
        """Train on df, optionally warm-started.

        Args:
            df: Table with feature_column and label_column
            initial_parameters: Parameters to start from instead of zeros

        Returns:
            self, fitted

        Raises:
            SchemaError: If columns are missing, labels are missing values,
                or the feature width does not match initial_parameters
            EmptyDatasetError: If df has no rows
        """
        X = self._feature_matrix(df)
        y = self._labels(df)

        self._parameters = online_gradient_descent(
            X, y, self.config, initial=initial_parameters
        )
        self._input_schema = infer_schema(df[[self.feature_column]])
        return self

    def transform(self, df: pd.DataFrame) -> pd.DataFrame:
        self._validate_input(df)
        X = self._feature_matrix(df)

        result = df.copy()
        result[self._output_column] = self._parameters.score(X)
        return result

    def _feature_matrix(self, df: pd.DataFrame) -> np.ndarray:
        if self.feature_column not in df.columns:
            raise SchemaError(f"Missing required feature column: {self.feature_column!r}")
        if len(df) == 0:
            width = self._parameters.n_features if self._parameters is not None else 0
            return np.empty((0, width), dtype=np.float64)

        type_name = infer_schema(df[[self.feature_column]])[self.feature_column]
        if vector_width(type_name) is None:
            raise SchemaError(
                f"Column {self.feature_column!r} must hold feature vectors, got {type_name}"
            )
        try:
            return np.vstack(df[self.feature_column].to_list()).astype(np.float64)
        except ValueError as e:
            raise SchemaError(
                f"Column {self.feature_column!r} has vectors of differing widths"
            ) from e

    def _labels(self, df: pd.DataFrame) -> np.ndarray:
        if self.label_column not in df.columns:
            raise SchemaError(f"Missing required label column: {self.label_column!r}")
        labels = pd.to_numeric(df[self.label_column], errors="coerce")
        if labels.isna().any():
            raise SchemaError(
                f"Label column {self.label_column!r} has {int(labels.isna().sum())} "
                f"missing or non-numeric values"
            )
        return labels.to_numpy(dtype=np.float64)

    def get_state(self) -> Dict[str, Any]:
        state = super().get_state()
        state["feature_column"] = self.feature_column
        state["label_column"] = self.label_column
        if self._parameters is not None:
            state["parameters"] = self._parameters.to_dict()
        return state


__all__ = ["LinearRegressionStage"]
