"""Models module - pipeline stages, the training algorithm, and persistence.

This module contains:
- base: PipelineStage interface (fit/transform)
- online_gradient: Online gradient descent and LinearModelParameters
- linear: LinearRegressionStage
- registry: save_stage()/load_stage() for fitted stages

Data preparation stages live in homeprice.features.
"""

from homeprice.models.base import PipelineStage
from homeprice.models.online_gradient import LinearModelParameters, online_gradient_descent
from homeprice.models.linear import LinearRegressionStage
from homeprice.models.registry import save_stage, load_stage, list_artifacts

__all__ = [
    "PipelineStage",
    "LinearModelParameters",
    "online_gradient_descent",
    "LinearRegressionStage",
    "save_stage",
    "load_stage",
    "list_artifacts",
]
