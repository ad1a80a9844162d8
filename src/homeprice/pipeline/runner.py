"""House price tutorial pipeline.

End-to-end walkthrough that orchestrates:
1. Loading in-memory training data
2. Data preparation (ConcatenateFeatures)
3. Training (online gradient descent)
4. Composing the model chain and predicting
5. Saving and reloading the fitted stages
6. Loading new data
7. Extracting learned parameters and retraining (warm start)
8. Recomposing and predicting again

Usage:
    from homeprice.pipeline import Tutorial

    # Full walkthrough
    Tutorial.run()

    # Or step by step
    tutorial = Tutorial()
    tutorial.load_data()
    tutorial.prepare_data()
    tutorial.train()
    tutorial.compose()
    price = tutorial.predict(2.5)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import pandas as pd

from homeprice.config import (
    DATA_TRANSFORMER_FILENAME,
    MODELS_DIR,
    REGRESSION_TRANSFORMER_FILENAME,
    TrainerConfig,
)
from homeprice.data import HouseRecord, Schema, infer_schema, load_records
from homeprice.features import ConcatenateFeatures
from homeprice.formatting import format_prediction_line
from homeprice.models.linear import LinearRegressionStage
from homeprice.models.registry import load_stage, save_stage
from homeprice.pipeline.composer import ModelChain, compose
from homeprice.pipeline.predictor import PredictionEngine
from homeprice.pipeline.trainer import Trainer

logger = logging.getLogger(__name__)

TRAINING_HOUSES: List[HouseRecord] = [
    HouseRecord(size=1.1, price=1.2),
    HouseRecord(size=1.9, price=2.3),
    HouseRecord(size=2.8, price=3.0),
    HouseRecord(size=3.4, price=3.7),
]

NEW_HOUSES: List[HouseRecord] = [
    HouseRecord(size=4.0, price=3.0),
    HouseRecord(size=2.0, price=2.3),
]

QUERY_SIZE = 2.5


class Tutorial:
    """End-to-end house price tutorial."""

    def __init__(
        self,
        config: Optional[TrainerConfig] = None,
        models_dir: Optional[Path] = None,
    ):
        """Initialize the tutorial.

        Args:
            config: Trainer settings, threaded through every fit.
            models_dir: Where fitted stages are saved (default: MODELS_DIR).
        """
        self.config = config or TrainerConfig()
        self.models_dir = Path(models_dir) if models_dir is not None else MODELS_DIR
        self.trainer = Trainer(self.config)

        # State
        self.train_df: Optional[pd.DataFrame] = None
        self.transformed_df: Optional[pd.DataFrame] = None
        self.data_prep: Optional[ConcatenateFeatures] = None
        self.regression: Optional[LinearRegressionStage] = None
        self.model: Optional[ModelChain] = None
        self.data_prep_schema: Optional[Schema] = None
        self.model_schema: Optional[Schema] = None

    @property
    def data_transformer_path(self) -> Path:
        return self.models_dir / DATA_TRANSFORMER_FILENAME

    @property
    def regression_transformer_path(self) -> Path:
        return self.models_dir / REGRESSION_TRANSFORMER_FILENAME

    def load_data(self, records=None) -> pd.DataFrame:
        """Step 1: Load training data from memory."""
        self.train_df = load_records(records if records is not None else TRAINING_HOUSES)
        return self.train_df

    def prepare_data(self) -> pd.DataFrame:
        """Step 1b: Fit the data preparation stage and transform training data."""
        if self.train_df is None:
            raise ValueError("Call load_data() first")

        self.data_prep = ConcatenateFeatures().fit(self.train_df)
        self.transformed_df = self.data_prep.transform(self.train_df)
        return self.transformed_df

    def train(self) -> LinearRegressionStage:
        """Step 2: Train the regression stage."""
        if self.transformed_df is None:
            raise ValueError("Call prepare_data() first")

        self.regression = self.trainer.train(self.transformed_df)
        return self.regression

    def compose(self) -> ModelChain:
        """Step 3: Chain data preparation and regression."""
        if self.data_prep is None or self.regression is None:
            raise ValueError("Call prepare_data() and train() first")

        self.model = compose(self.data_prep, self.regression)
        return self.model

    def predict(self, size: float = QUERY_SIZE) -> float:
        """Step 4: Predict the price of one house."""
        if self.model is None:
            raise ValueError("Call compose() first")

        return PredictionEngine(self.model).predict(HouseRecord(size=size))

    def save_artifacts(self) -> None:
        """Step 5: Save both fitted stages with their input schemas."""
        if self.model is None:
            raise ValueError("Call compose() first")

        self.models_dir.mkdir(parents=True, exist_ok=True)
        save_stage(self.data_prep, infer_schema(self.train_df), self.data_transformer_path)
        save_stage(
            self.regression,
            infer_schema(self.transformed_df),
            self.regression_transformer_path,
        )
        logger.info("Stages saved to %s", self.models_dir)

    def load_artifacts(self) -> None:
        """Step 5.1: Reload both fitted stages from disk."""
        self.data_prep, self.data_prep_schema = load_stage(self.data_transformer_path)
        self.regression, self.model_schema = load_stage(self.regression_transformer_path)

    def retrain(self, records=None) -> LinearRegressionStage:
        """Steps 6-8: Load new data, retrain from the current model, recompose.

        The previous parameters come from the last stage of the current
        chain; only the new records are trained on.
        """
        if self.model is None or self.data_prep is None:
            raise ValueError("Call compose() first")

        new_df = load_records(records if records is not None else NEW_HOUSES)
        transformed_new = self.data_prep.transform(new_df)

        retrained = self.trainer.retrain(transformed_new, self.model.last)

        self.regression = retrained
        self.model = compose(self.data_prep, retrained)
        return retrained

    @classmethod
    def run(cls, models_dir: Optional[Path] = None) -> "Tutorial":
        """Run the full tutorial end-to-end and print both predictions."""
        tutorial = cls(models_dir=models_dir)
        tutorial.load_data()
        tutorial.prepare_data()
        tutorial.train()
        tutorial.compose()

        price = tutorial.predict(QUERY_SIZE)
        print(format_prediction_line(4, QUERY_SIZE, price))

        tutorial.save_artifacts()
        tutorial.load_artifacts()

        tutorial.retrain()
        new_price = tutorial.predict(QUERY_SIZE)
        print(format_prediction_line(9, QUERY_SIZE, new_price))
        return tutorial


def main() -> None:
    """Console entry point."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    Tutorial.run()


__all__ = ["Tutorial", "TRAINING_HOUSES", "NEW_HOUSES", "main"]
