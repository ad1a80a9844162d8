"""Error types raised by homeprice.

All subclass ValueError so callers that catch bad input the usual way
keep working.
"""

from __future__ import annotations


class SchemaError(ValueError):
    """A table or record does not match the columns a stage expects."""


class EmptyDatasetError(ValueError):
    """No rows were supplied where at least one is required."""


class ArtifactError(ValueError):
    """A persisted artifact could not be read or has an unknown layout."""


class NotFittedError(ValueError):
    """A stage was used before fit() was called."""


__all__ = ["SchemaError", "EmptyDatasetError", "ArtifactError", "NotFittedError"]
