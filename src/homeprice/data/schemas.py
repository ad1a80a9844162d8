"""Pydantic record models and table schema helpers.

Models:
    HouseRecord - One house: size (input) and price (label)

Schema helpers:
    infer_schema() - Column name -> type name mapping for a DataFrame
    check_schema() - Validate a DataFrame against an expected mapping

A schema is a plain dict so it can be stored next to a fitted stage:

    {"size": "float64", "price": "float64", "features": "vector<float64>[1]"}

Usage:
    from homeprice.data.schemas import HouseRecord, infer_schema

    house = HouseRecord(size=2.5)
    schema = infer_schema(df)
"""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional

import numpy as np
import pandas as pd
from pydantic import BaseModel, ConfigDict

from homeprice.exceptions import SchemaError

Schema = Dict[str, str]


class HouseRecord(BaseModel):
    """One row of house data.

    price is optional so the same model describes rows to predict on.
    """
    model_config = ConfigDict(frozen=True)

    size: float
    price: Optional[float] = None


def _column_type(series: pd.Series) -> str:
    """Type name for one column."""
    if series.dtype == object and len(series) > 0:
        first = series.iloc[0]
        if isinstance(first, np.ndarray) and first.ndim == 1:
            return f"vector<{first.dtype}>[{first.shape[0]}]"
    return str(series.dtype)


def infer_schema(df: pd.DataFrame) -> Schema:
    """Build the column name -> type name mapping of a DataFrame.

    Args:
        df: Table to describe.

    Returns:
        Dict in column order.
    """
    return {col: _column_type(df[col]) for col in df.columns}


def vector_width(type_name: str) -> Optional[int]:
    """Width of a vector type name, or None for scalar types."""
    if not type_name.startswith("vector<"):
        return None
    return int(type_name[type_name.index("[") + 1:-1])


def is_numeric(type_name: str) -> bool:
    """True for numeric scalar type names (int*, uint*, float*)."""
    if vector_width(type_name) is not None:
        return False
    try:
        return np.issubdtype(np.dtype(type_name), np.number)
    except TypeError:
        return False


def check_schema(df: pd.DataFrame, expected: Mapping[str, str]) -> None:
    """Validate that df has every expected column with a compatible type.

    Numeric scalar columns are compatible with each other; vector columns
    must match exactly. Extra columns in df are ignored.

    Raises:
        SchemaError: Listing every missing or mismatched column.
    """
    missing: List[str] = [c for c in expected if c not in df.columns]
    if missing:
        raise SchemaError(f"Missing required columns: {missing}")

    actual = infer_schema(df[list(expected)])
    mismatched = []
    for col, want in expected.items():
        got = actual[col]
        if got == want or (is_numeric(got) and is_numeric(want)):
            continue
        # An empty column carries no vectors to infer a width from
        if len(df) == 0 and got == "object" and vector_width(want) is not None:
            continue
        mismatched.append(f"{col} (expected {want}, got {got})")
    if mismatched:
        raise SchemaError(f"Column type mismatch: {mismatched}")


__all__ = [
    "HouseRecord",
    "Schema",
    "infer_schema",
    "check_schema",
    "vector_width",
    "is_numeric",
]
