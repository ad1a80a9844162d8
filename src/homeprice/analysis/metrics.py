"""Evaluation metrics for regression scores.

Key Classes:
    RegressionMetrics - MAE, RMSE, R² for a scored table

Key Functions:
    evaluate_regression() - Score a table that has label and score columns

Metrics Explained:
    MAE: Average absolute error (lower is better)
    RMSE: Root mean square error (penalizes large errors)
    R²: Share of label variance explained (undefined for fewer than 2 rows)

Usage:
    from homeprice.analysis import evaluate_regression

    metrics = evaluate_regression(chain.transform(df))
    print(f"RMSE: {metrics.rmse:.3f}")
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import pandas as pd
from sklearn.metrics import mean_absolute_error, mean_squared_error, r2_score

from homeprice.config import PRICE_COLUMN, SCORE_COLUMN
from homeprice.exceptions import EmptyDatasetError, SchemaError


@dataclass
class RegressionMetrics:
    """Metrics for regression accuracy."""

    mae: float  # Mean Absolute Error
    rmse: float  # Root Mean Square Error
    r2: float  # R-squared, NaN when n_samples < 2
    n_samples: int

    def to_dict(self) -> dict:
        return {
            "mae": round(self.mae, 4),
            "rmse": round(self.rmse, 4),
            "r2": round(self.r2, 4),
            "n_samples": self.n_samples,
        }

    def __repr__(self) -> str:
        return f"MAE: {self.mae:.4f}, RMSE: {self.rmse:.4f}, R²: {self.r2:.3f} (n={self.n_samples})"


def evaluate_regression(
    df: pd.DataFrame,
    label_column: str = PRICE_COLUMN,
    score_column: str = SCORE_COLUMN,
) -> RegressionMetrics:
    """Compute regression metrics from a scored table.

    Args:
        df: Table with label and score columns
        label_column: Column with actual values
        score_column: Column with predicted values

    Returns:
        RegressionMetrics
    """
    missing = [c for c in (label_column, score_column) if c not in df.columns]
    if missing:
        raise SchemaError(f"Missing required columns: {missing}")
    if len(df) == 0:
        raise EmptyDatasetError("Cannot evaluate an empty table")

    y_true = df[label_column].to_numpy(dtype=float)
    y_pred = df[score_column].to_numpy(dtype=float)

    r2 = float(r2_score(y_true, y_pred)) if len(df) >= 2 else float("nan")

    return RegressionMetrics(
        mae=float(mean_absolute_error(y_true, y_pred)),
        rmse=float(np.sqrt(mean_squared_error(y_true, y_pred))),
        r2=r2,
        n_samples=len(df),
    )


__all__ = ["RegressionMetrics", "evaluate_regression"]
