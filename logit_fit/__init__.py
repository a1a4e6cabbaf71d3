"""
Binary logistic regression from first principles.

This package contains the sigmoid/cost/gradient core with a scipy-driven trainer,
data preparation and demo-data helpers, evaluation utilities and a decision
boundary plot used by main.py.
"""

from .constants import DEFAULT_METHOD, RANDOM_STATE
from .data_prep import (
    add_bias_column,
    drop_missing_rows,
    load_dataset,
    make_curve_clouds,
    make_train_test_split,
)
from .errors import DimensionMismatchError, EmptyInputError
from .logreg import (
    LogisticRegressionTNC,
    cost,
    gradient,
    minimize,
    predict_label,
    predict_probability,
    sigmoid,
    train,
)
from .metrics import compute_classification_metrics, summarize_coefficients
from .plotting import plot_decision_boundary

__all__ = [
    "DEFAULT_METHOD",
    "RANDOM_STATE",
    "add_bias_column",
    "drop_missing_rows",
    "load_dataset",
    "make_curve_clouds",
    "make_train_test_split",
    "DimensionMismatchError",
    "EmptyInputError",
    "LogisticRegressionTNC",
    "cost",
    "gradient",
    "minimize",
    "predict_label",
    "predict_probability",
    "sigmoid",
    "train",
    "compute_classification_metrics",
    "summarize_coefficients",
    "plot_decision_boundary",
]
