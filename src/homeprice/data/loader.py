"""Load in-memory records into a DataFrame.

Each record is validated through a pydantic model, so a missing or
non-numeric field fails here rather than inside a stage. Row order is
preserved: online gradient descent visits rows in the order they are
loaded.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping, Type, Union

import pandas as pd
from pydantic import BaseModel, ValidationError

from homeprice.data.schemas import HouseRecord
from homeprice.exceptions import EmptyDatasetError, SchemaError

logger = logging.getLogger(__name__)

RecordLike = Union[BaseModel, Mapping[str, Any]]


def _validate(record: RecordLike, record_model: Type[BaseModel]) -> BaseModel:
    if isinstance(record, record_model):
        return record
    if isinstance(record, BaseModel):
        record = record.model_dump()
    try:
        return record_model.model_validate(record)
    except ValidationError as e:
        fields = sorted({".".join(str(p) for p in err["loc"]) for err in e.errors()})
        raise SchemaError(
            f"Invalid {record_model.__name__} record, bad fields: {fields}"
        ) from e


def load_records(
    records: Iterable[RecordLike],
    record_model: Type[BaseModel] = HouseRecord,
) -> pd.DataFrame:
    """Convert records into a DataFrame with one float column per field.

    Args:
        records: Model instances or mappings with the model's fields.
        record_model: Pydantic model that defines the columns.

    Returns:
        DataFrame with columns in field-declaration order. Optional
        fields left unset become NaN.

    Raises:
        EmptyDatasetError: If records is empty.
        SchemaError: If any record fails validation.
    """
    validated: List[BaseModel] = [_validate(r, record_model) for r in records]
    if not validated:
        raise EmptyDatasetError("Cannot load an empty collection of records")

    columns = list(record_model.model_fields)
    df = pd.DataFrame(
        [r.model_dump() for r in validated],
        columns=columns,
    ).astype("float64")

    logger.debug("Loaded %d %s rows", len(df), record_model.__name__)
    return df


__all__ = ["load_records", "RecordLike"]
