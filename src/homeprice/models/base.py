"""Base interface for pipeline stages.

A stage is a fit/transform unit. fit() learns whatever the stage needs from
a table and records the schema of the columns it consumes; transform()
validates a table against that schema and returns a new table with the
stage's output column appended. Stages never modify their input.

Concrete stages:
    ConcatenateFeatures - homeprice.features.concatenate
    LinearRegressionStage - homeprice.models.linear
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Optional

import pandas as pd

from homeprice.data.schemas import Schema, check_schema
from homeprice.exceptions import NotFittedError


class PipelineStage(ABC):
    """Abstract base class for fit/transform stages."""

    def __init__(self, output_column: str):
        self._output_column = output_column
        self._input_schema: Optional[Schema] = None

    @property
    def output_column(self) -> str:
        """Column this stage appends on transform()."""
        return self._output_column

    @property
    def input_schema(self) -> Schema:
        """Schema of the columns this stage consumes (copy)."""
        self._require_fitted()
        return dict(self._input_schema)

    @property
    def is_fitted(self) -> bool:
        return self._input_schema is not None

    @abstractmethod
    def fit(self, df: pd.DataFrame) -> "PipelineStage":
        """Fit the stage on a table.

        Args:
            df: Training table

        Returns:
            self, fitted
        """
        pass

    @abstractmethod
    def transform(self, df: pd.DataFrame) -> pd.DataFrame:
        """Apply the fitted stage.

        Args:
            df: Table with the columns recorded at fit time

        Returns:
            Copy of df with output_column appended
        """
        pass

    def _require_fitted(self) -> None:
        if self._input_schema is None:
            raise NotFittedError(
                f"{type(self).__name__} is not fitted. Call fit() first."
            )

    def _validate_input(self, df: pd.DataFrame) -> None:
        """Check df against the schema recorded at fit time.

        Raises:
            NotFittedError: If fit() has not been called
            SchemaError: If required columns are missing or mistyped
        """
        self._require_fitted()
        check_schema(df, self._input_schema)

    def get_state(self) -> Dict:
        """Plain-data description of the stage, for logging and reports."""
        return {
            "stage_type": type(self).__name__,
            "output_column": self._output_column,
            "input_schema": dict(self._input_schema) if self.is_fitted else None,
        }

    def __repr__(self) -> str:
        status = "fitted" if self.is_fitted else "unfitted"
        return f"{type(self).__name__}(output_column={self._output_column!r}, {status})"


__all__ = ["PipelineStage"]
