"""Persistence for fitted pipeline stages.

Provides save_stage()/load_stage() to write a fitted stage together with
the schema of the table it was fitted on, and to read both back.

Artifact layout (joblib):
    {
        "format_version": 1,
        "stage_type": "ConcatenateFeatures" | "LinearRegressionStage",
        "stage": <fitted stage>,
        "schema": {column: type_name, ...},
    }

No fallbacks: a missing file, an unreadable file, or an unknown layout
fails loudly.
"""

from __future__ import annotations

import logging
import pickle
from pathlib import Path
from typing import Dict, Mapping, Tuple, Union

import joblib

from homeprice.config import (
    DATA_TRANSFORMER_FILENAME,
    MODELS_DIR,
    REGRESSION_TRANSFORMER_FILENAME,
)
from homeprice.data.schemas import Schema
from homeprice.exceptions import ArtifactError, NotFittedError
from homeprice.models.base import PipelineStage

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1
REQUIRED_KEYS = ("format_version", "stage_type", "stage", "schema")


def save_stage(
    stage: PipelineStage,
    schema: Mapping[str, str],
    path: Union[str, Path],
) -> Path:
    """Save a fitted stage and its input table schema.

    The parent directory must already exist.

    Args:
        stage: Fitted stage
        schema: Schema of the table the stage was fitted on
        path: Destination file

    Returns:
        Path to the saved artifact

    Raises:
        NotFittedError: If the stage is not fitted
        FileNotFoundError: If the parent directory does not exist
    """
    path = Path(path)
    if not stage.is_fitted:
        raise NotFittedError(f"Cannot save unfitted {type(stage).__name__}")
    if not path.parent.is_dir():
        raise FileNotFoundError(
            f"Directory {path.parent} does not exist. Create it before saving."
        )

    joblib.dump({
        "format_version": FORMAT_VERSION,
        "stage_type": type(stage).__name__,
        "stage": stage,
        "schema": dict(schema),
    }, path)

    logger.info("Saved %s to %s", type(stage).__name__, path)
    return path


def load_stage(path: Union[str, Path]) -> Tuple[PipelineStage, Schema]:
    """Load a fitted stage and its schema.

    Args:
        path: Artifact written by save_stage()

    Returns:
        Tuple of (stage, schema)

    Raises:
        FileNotFoundError: If the artifact doesn't exist
        ArtifactError: If the artifact can't be read or has an unknown layout
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"No artifact found at {path}")

    try:
        data = joblib.load(path)
    except (
        EOFError,
        pickle.UnpicklingError,
        ValueError,
        KeyError,
        IndexError,
        ImportError,
        AttributeError,
    ) as e:
        raise ArtifactError(f"Unreadable artifact at {path}: {e}") from e

    if not isinstance(data, dict) or any(k not in data for k in REQUIRED_KEYS):
        raise ArtifactError(f"Unknown artifact format in {path}")
    if data["format_version"] != FORMAT_VERSION:
        raise ArtifactError(
            f"Unsupported artifact version {data['format_version']} in {path} "
            f"(expected {FORMAT_VERSION})"
        )

    stage = data["stage"]
    if not isinstance(stage, PipelineStage) or type(stage).__name__ != data["stage_type"]:
        raise ArtifactError(
            f"Artifact {path} declares {data['stage_type']} "
            f"but holds {type(stage).__name__}"
        )
    if not stage.is_fitted:
        raise ArtifactError(f"Artifact {path} holds an unfitted stage")

    logger.info("Loaded %s from %s", data["stage_type"], path)
    return stage, dict(data["schema"])


def list_artifacts(models_dir: Path = None) -> Dict[str, bool]:
    """List which tutorial artifacts are present.

    Args:
        models_dir: Directory to check (default: MODELS_DIR)

    Returns:
        Dict mapping artifact filename to existence
    """
    if models_dir is None:
        models_dir = MODELS_DIR
    models_dir = Path(models_dir)

    return {
        name: (models_dir / name).exists()
        for name in (DATA_TRANSFORMER_FILENAME, REGRESSION_TRANSFORMER_FILENAME)
    }


__all__ = ["save_stage", "load_stage", "list_artifacts", "FORMAT_VERSION"]
