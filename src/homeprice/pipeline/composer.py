"""Compose fitted stages into a single model chain.

A chain is an ordered, immutable sequence of fitted stages. transform()
feeds each stage's output table into the next; the first failure aborts
the chain.
"""

from __future__ import annotations

from typing import Iterator, Sequence, Tuple

import pandas as pd

from homeprice.exceptions import NotFittedError
from homeprice.models.base import PipelineStage


class ModelChain:
    """Ordered chain of fitted pipeline stages."""

    def __init__(self, stages: Sequence[PipelineStage]):
        if not stages:
            raise ValueError("A model chain needs at least one stage")
        unfitted = [type(s).__name__ for s in stages if not s.is_fitted]
        if unfitted:
            raise NotFittedError(f"Cannot compose unfitted stages: {unfitted}")
        self._stages: Tuple[PipelineStage, ...] = tuple(stages)

    @property
    def stages(self) -> Tuple[PipelineStage, ...]:
        return self._stages

    @property
    def last(self) -> PipelineStage:
        """Final stage, typically the trained predictor."""
        return self._stages[-1]

    def append(self, stage: PipelineStage) -> "ModelChain":
        """Return a new chain with stage added at the end."""
        return ModelChain(self._stages + (stage,))

    def transform(self, df: pd.DataFrame) -> pd.DataFrame:
        for stage in self._stages:
            df = stage.transform(df)
        return df

    def __len__(self) -> int:
        return len(self._stages)

    def __iter__(self) -> Iterator[PipelineStage]:
        return iter(self._stages)

    def __repr__(self) -> str:
        names = " -> ".join(type(s).__name__ for s in self._stages)
        return f"ModelChain({names})"


def compose(*stages: PipelineStage) -> ModelChain:
    """Chain fitted stages in the given order."""
    return ModelChain(stages)


__all__ = ["ModelChain", "compose"]
