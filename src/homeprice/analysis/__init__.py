"""Analysis module - model evaluation tools."""

from homeprice.analysis.metrics import RegressionMetrics, evaluate_regression

__all__ = ["RegressionMetrics", "evaluate_regression"]
