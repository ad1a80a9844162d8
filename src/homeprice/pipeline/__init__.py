"""
Pipeline Module

Training, composition, prediction, and the end-to-end tutorial.

Components:
    Tutorial         - Full walkthrough (load → prepare → train → predict → save → retrain)
    Trainer          - Online gradient descent training and warm-start retraining
    ModelChain       - Ordered chain of fitted stages
    PredictionEngine - Single-record scoring
"""

from homeprice.pipeline.trainer import Trainer
from homeprice.pipeline.composer import ModelChain, compose
from homeprice.pipeline.predictor import PredictionEngine
from homeprice.pipeline.runner import Tutorial

__all__ = [
    "Tutorial",
    "Trainer",
    "ModelChain",
    "compose",
    "PredictionEngine",
]
