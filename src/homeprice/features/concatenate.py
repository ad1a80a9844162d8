"""Feature concatenation stage.

Maps one or more numeric input columns into a single vector column, one
vector per row, with entries in input-column order. The stage learns no
statistics; fit() only records the schema of the input columns so that
transform() can reject tables that do not match.
"""

from __future__ import annotations

from typing import Dict, List, Sequence

import numpy as np
import pandas as pd

from homeprice.config import FEATURES_COLUMN, SIZE_COLUMN
from homeprice.data.schemas import infer_schema, is_numeric
from homeprice.exceptions import SchemaError
from homeprice.models.base import PipelineStage


class ConcatenateFeatures(PipelineStage):
    """Concatenate numeric columns into a feature vector column."""

    def __init__(
        self,
        input_columns: Sequence[str] = (SIZE_COLUMN,),
        output_column: str = FEATURES_COLUMN,
    ):
        """Initialize the stage.

        Args:
            input_columns: Source columns, in vector order
            output_column: Name of the vector column to append
        """
        if not input_columns:
            raise ValueError("input_columns must name at least one column")
        super().__init__(output_column=output_column)
        self._input_columns = list(input_columns)

    @property
    def input_columns(self) -> List[str]:
        return self._input_columns.copy()

    @property
    def width(self) -> int:
        """Length of each output vector."""
        return len(self._input_columns)

    def fit(self, df: pd.DataFrame) -> "ConcatenateFeatures":
        missing = [c for c in self._input_columns if c not in df.columns]
        if missing:
            raise SchemaError(f"Missing required feature columns: {missing}")

        schema = infer_schema(df[self._input_columns])
        non_numeric = [c for c, t in schema.items() if not is_numeric(t)]
        if non_numeric:
            raise SchemaError(f"Feature columns must be numeric: {non_numeric}")

        self._input_schema = schema
        return self

    def transform(self, df: pd.DataFrame) -> pd.DataFrame:
        self._validate_input(df)

        values = df[self._input_columns].to_numpy(dtype=np.float64)
        result = df.copy()
        result[self._output_column] = pd.Series(
            list(values), index=df.index, dtype=object
        )
        return result

    def get_state(self) -> Dict:
        state = super().get_state()
        state["input_columns"] = self.input_columns
        return state


__all__ = ["ConcatenateFeatures"]
