from __future__ import annotations

"""
Metric helpers for the fitted model (classification summary and coefficient dump).
"""

import numpy as np
import pandas as pd
from sklearn import metrics

from .logreg import predict_label


def compute_classification_metrics(y_true: np.ndarray | pd.Series, probs: np.ndarray):
    """Standard binary metrics; labels come from rounding the probabilities."""
    y_true = np.asarray(y_true).astype(int)
    preds = predict_label(probs)
    precision, recall, f1, _ = metrics.precision_recall_fscore_support(
        y_true, preds, average="binary", zero_division=0
    )
    try:
        roc_auc = metrics.roc_auc_score(y_true, probs)
    except ValueError:
        roc_auc = float("nan")

    return {
        "accuracy": metrics.accuracy_score(y_true, preds),
        "precision": precision,
        "recall": recall,
        "f1": f1,
        "roc_auc": roc_auc,
        "log_loss": metrics.log_loss(y_true, probs, labels=[0, 1]),
        "confusion_matrix": metrics.confusion_matrix(y_true, preds, labels=[0, 1]),
    }


def majority_baseline(y_train: np.ndarray | pd.Series, y_test: np.ndarray | pd.Series):
    """
    Predicts the training-set positive rate for every test row.
    """
    prob = float(np.mean(y_train))
    probs = np.full(len(y_test), prob, dtype=float)
    return compute_classification_metrics(y_test, probs)


def summarize_coefficients(theta: np.ndarray, feature_names: list[str]) -> pd.Series:
    """Label theta entries by feature name, bias first."""
    if len(feature_names) + 1 != len(theta):
        raise ValueError(
            f"Got {len(feature_names)} feature names for {len(theta)} coefficients"
        )
    return pd.Series(np.asarray(theta, dtype=float), index=["bias", *feature_names])
