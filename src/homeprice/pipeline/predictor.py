"""Single-record prediction on a composed model chain."""

from __future__ import annotations

from typing import Type

from pydantic import BaseModel

from homeprice.config import SCORE_COLUMN
from homeprice.data.loader import RecordLike, load_records
from homeprice.data.schemas import HouseRecord
from homeprice.exceptions import SchemaError
from homeprice.pipeline.composer import ModelChain


class PredictionEngine:
    """Score one record at a time with a fitted chain.

    The chain is never refitted, so predict() can be called repeatedly.
    """

    def __init__(
        self,
        chain: ModelChain,
        score_column: str = SCORE_COLUMN,
        record_model: Type[BaseModel] = HouseRecord,
    ):
        self.chain = chain
        self.score_column = score_column
        self.record_model = record_model

    def predict(self, record: RecordLike) -> float:
        """Predict the score for one record.

        Args:
            record: Record instance or mapping with the input fields

        Returns:
            Scalar score

        Raises:
            SchemaError: If the record lacks a required input field
        """
        df = load_records([record], record_model=self.record_model)
        scored = self.chain.transform(df)
        if self.score_column not in scored.columns:
            raise SchemaError(f"Chain did not produce column {self.score_column!r}")
        return float(scored[self.score_column].iloc[0])


__all__ = ["PredictionEngine"]
