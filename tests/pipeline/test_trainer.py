"""Tests for Trainer training and warm-start retraining."""

import numpy as np
import pytest

from homeprice.config import TrainerConfig
from homeprice.data import load_records
from homeprice.exceptions import SchemaError
from homeprice.models import LinearModelParameters, LinearRegressionStage
from homeprice.pipeline import Trainer
from homeprice.pipeline.runner import NEW_HOUSES


@pytest.fixture
def new_transformed(prepared):
    prep, _ = prepared
    return prep.transform(load_records(NEW_HOUSES))


class TestTrain:
    """Tests for Trainer.train()."""

    def test_returns_fitted_stage(self, prepared):
        _, transformed = prepared
        stage = Trainer().train(transformed)
        assert isinstance(stage, LinearRegressionStage)
        assert stage.is_fitted

    def test_config_is_threaded_through(self, prepared):
        _, transformed = prepared
        config = TrainerConfig(number_of_iterations=3)
        stage = Trainer(config).train(transformed)
        assert stage.config is config

    def test_custom_label_column(self, prepared):
        _, transformed = prepared
        with pytest.raises(SchemaError):
            Trainer(label_column="sale_price").train(transformed)


class TestRetrain:
    """Tests for Trainer.retrain()."""

    def test_warm_start_differs_from_cold_fit(self, prepared, new_transformed):
        """Prior state is actually reused."""
        _, transformed = prepared
        trainer = Trainer()
        original = trainer.train(transformed)

        warm = trainer.retrain(new_transformed, original)
        cold = trainer.train(new_transformed)

        assert not np.allclose(warm.parameters.weights, cold.parameters.weights)

    def test_previous_stage_untouched(self, prepared, new_transformed):
        _, transformed = prepared
        trainer = Trainer()
        original = trainer.train(transformed)
        before = original.parameters

        retrained = trainer.retrain(new_transformed, original)

        assert retrained is not original
        assert np.array_equal(original.parameters.weights, before.weights)
        assert original.parameters.bias == before.bias

    def test_accepts_parameters(self, prepared, new_transformed):
        _, transformed = prepared
        trainer = Trainer()
        original = trainer.train(transformed)

        from_stage = trainer.retrain(new_transformed, original)
        from_params = trainer.retrain(new_transformed, original.parameters)

        assert np.allclose(from_stage.parameters.weights, from_params.parameters.weights)
        assert np.isclose(from_stage.parameters.bias, from_params.parameters.bias)

    def test_trains_on_new_data_only(self, prepared, new_transformed):
        """Retraining equals a fit on the new table seeded with the old parameters."""
        _, transformed = prepared
        trainer = Trainer()
        original = trainer.train(transformed)

        retrained = trainer.retrain(new_transformed, original)
        direct = LinearRegressionStage().fit(
            new_transformed, initial_parameters=original.parameters
        )

        assert np.allclose(retrained.parameters.weights, direct.parameters.weights)

    def test_width_mismatch_raises(self, new_transformed):
        wide = LinearModelParameters(weights=[1.0, 1.0], bias=0.0)
        with pytest.raises(SchemaError):
            Trainer().retrain(new_transformed, wide)
