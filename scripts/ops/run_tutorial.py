"""House price tutorial runner.

Trains, predicts, saves, reloads, and retrains, printing the two
predictions.

Usage:
    python scripts/ops/run_tutorial.py
"""

from homeprice.pipeline.runner import main


if __name__ == "__main__":
    main()
