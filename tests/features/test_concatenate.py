"""Tests for the ConcatenateFeatures stage."""

import numpy as np
import pandas as pd
import pytest

from homeprice.exceptions import NotFittedError, SchemaError
from homeprice.features import ConcatenateFeatures


@pytest.fixture
def multi_df():
    return pd.DataFrame({
        "size": [1.0, 2.0, 3.0],
        "rooms": [2.0, 3.0, 4.0],
        "price": [1.5, 2.5, 3.5],
    })


class TestFit:
    """Tests for fit()."""

    def test_fit_returns_self(self, house_df):
        stage = ConcatenateFeatures()
        assert stage.fit(house_df) is stage
        assert stage.is_fitted

    def test_records_input_schema(self, house_df):
        stage = ConcatenateFeatures().fit(house_df)
        assert stage.input_schema == {"size": "float64"}

    def test_missing_column_raises(self, house_df):
        with pytest.raises(SchemaError, match="rooms"):
            ConcatenateFeatures(input_columns=["rooms"]).fit(house_df)

    def test_non_numeric_column_raises(self):
        df = pd.DataFrame({"size": ["a", "b"]})
        with pytest.raises(SchemaError, match="numeric"):
            ConcatenateFeatures().fit(df)

    def test_requires_input_columns(self):
        with pytest.raises(ValueError):
            ConcatenateFeatures(input_columns=[])


class TestTransform:
    """Tests for transform()."""

    def test_row_count_and_width(self, house_df):
        """Output has one vector per row, width = number of source columns."""
        stage = ConcatenateFeatures().fit(house_df)
        result = stage.transform(house_df)
        assert len(result) == len(house_df)
        assert all(v.shape == (1,) for v in result["features"])

    def test_vector_order_follows_input_columns(self, multi_df):
        stage = ConcatenateFeatures(input_columns=["rooms", "size"]).fit(multi_df)
        result = stage.transform(multi_df)
        assert stage.width == 2
        assert np.allclose(result["features"].iloc[0], [2.0, 1.0])
        assert np.allclose(result["features"].iloc[2], [4.0, 3.0])

    def test_values_copied_from_source(self, house_df):
        result = ConcatenateFeatures().fit(house_df).transform(house_df)
        stacked = np.vstack(result["features"].to_list())
        assert np.allclose(stacked[:, 0], house_df["size"].values)

    def test_input_not_modified(self, house_df):
        before = house_df.copy()
        ConcatenateFeatures().fit(house_df).transform(house_df)
        pd.testing.assert_frame_equal(house_df, before)
        assert "features" not in house_df.columns

    def test_transform_before_fit_raises(self, house_df):
        with pytest.raises(NotFittedError):
            ConcatenateFeatures().transform(house_df)

    def test_missing_column_at_transform_raises(self, house_df):
        stage = ConcatenateFeatures().fit(house_df)
        with pytest.raises(SchemaError):
            stage.transform(house_df.drop(columns=["size"]))

    def test_mistyped_column_at_transform_raises(self, house_df):
        stage = ConcatenateFeatures().fit(house_df)
        bad = pd.DataFrame({"size": ["big"], "price": [1.0]})
        with pytest.raises(SchemaError):
            stage.transform(bad)

    def test_label_not_required_at_transform(self, house_df):
        stage = ConcatenateFeatures().fit(house_df)
        result = stage.transform(pd.DataFrame({"size": [2.5]}))
        assert np.allclose(result["features"].iloc[0], [2.5])
