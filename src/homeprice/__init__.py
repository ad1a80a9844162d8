"""
homeprice - House price regression tutorial

Load houses, concatenate features, train linear regression by online
gradient descent, predict, save/reload the fitted stages, and retrain
on new data from the learned parameters.

Structure:
    data/      - Record models, schemas, in-memory loader
    features/  - Data preparation stages
    models/    - Stage interface, training algorithm, persistence
    pipeline/  - Trainer, model chain, prediction, end-to-end tutorial
    analysis/  - Regression metrics

Usage:
    from homeprice.pipeline import Tutorial
    Tutorial.run()
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
