"""Features module - data preparation stages."""

from homeprice.features.concatenate import ConcatenateFeatures

__all__ = ["ConcatenateFeatures"]
