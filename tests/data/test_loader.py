"""Tests for the in-memory record loader."""

import numpy as np
import pandas as pd
import pytest

from homeprice.data import HouseRecord, load_records
from homeprice.exceptions import EmptyDatasetError, SchemaError


class TestLoadRecords:
    """Tests for load_records()."""

    def test_columns_follow_field_order(self):
        """Columns should be size then price, as declared on HouseRecord."""
        df = load_records([HouseRecord(size=1.1, price=1.2)])
        assert list(df.columns) == ["size", "price"]

    def test_preserves_insertion_order(self):
        """Rows must come out in the order they went in."""
        sizes = [3.4, 1.1, 2.8, 1.9]
        df = load_records([HouseRecord(size=s, price=1.0) for s in sizes])
        assert df["size"].tolist() == sizes

    def test_columns_are_float64(self):
        df = load_records([{"size": 2, "price": 3}])
        assert df["size"].dtype == np.float64
        assert df["price"].dtype == np.float64

    def test_accepts_mappings(self):
        """Plain dicts are validated through the record model."""
        df = load_records([{"size": 1.5, "price": 2.0}, {"size": 2.5, "price": 3.0}])
        assert len(df) == 2
        assert np.isclose(df["price"].iloc[1], 3.0)

    def test_missing_optional_price_is_nan(self):
        """Records to predict on carry no price."""
        df = load_records([HouseRecord(size=2.5)])
        assert np.isnan(df["price"].iloc[0])

    def test_empty_collection_raises(self):
        with pytest.raises(EmptyDatasetError):
            load_records([])

    def test_missing_required_field_raises_schema_error(self):
        """A record without size is a schema error, not a default."""
        with pytest.raises(SchemaError, match="size"):
            load_records([{"price": 2.0}])

    def test_non_numeric_field_raises_schema_error(self):
        with pytest.raises(SchemaError):
            load_records([{"size": "large", "price": 2.0}])

    def test_accepts_generator(self):
        df = load_records(HouseRecord(size=s, price=s) for s in (1.0, 2.0))
        assert isinstance(df, pd.DataFrame)
        assert len(df) == 2
