"""Pytest fixtures/config for homeprice tests."""

import os
import sys

import pytest


def pytest_sessionstart(session) -> None:  # type: ignore[unused-argument]
    repo_root = os.path.dirname(os.path.dirname(__file__))
    src_path = os.path.join(repo_root, "src")
    if src_path not in sys.path:
        sys.path.insert(0, src_path)


@pytest.fixture
def house_df():
    """The four tutorial training houses as a table."""
    from homeprice.data import load_records
    from homeprice.pipeline.runner import TRAINING_HOUSES

    return load_records(TRAINING_HOUSES)


@pytest.fixture
def prepared(house_df):
    """Fitted ConcatenateFeatures and the transformed training table."""
    from homeprice.features import ConcatenateFeatures

    prep = ConcatenateFeatures().fit(house_df)
    return prep, prep.transform(house_df)
