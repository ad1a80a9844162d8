"""Data module - record models, schema helpers, and the in-memory loader.

Usage:
    from homeprice.data import HouseRecord, load_records

    df = load_records([HouseRecord(size=1.1, price=1.2)])
"""

from homeprice.data.schemas import HouseRecord, Schema, infer_schema, check_schema
from homeprice.data.loader import load_records

__all__ = [
    "HouseRecord",
    "Schema",
    "infer_schema",
    "check_schema",
    "load_records",
]
