from __future__ import annotations

"""
Data preparation for the logistic fit: missing-row removal, bias augmentation,
synthetic curve clouds for the demo, CSV loading and train/test splitting.
"""

from pathlib import Path
from typing import Sequence

import numpy as np
import pandas as pd
from sklearn.model_selection import train_test_split

from .constants import (
    DEFAULT_GAP,
    DEFAULT_LABEL_COL,
    DEFAULT_N_PER_CLASS,
    DEFAULT_NOISE,
    DEFAULT_TEST_SIZE,
    RANDOM_STATE,
)
from .errors import DimensionMismatchError


def drop_missing_rows(X, y=None):
    """
    Remove rows with missing values and return float ndarrays.

    When `y` is given the filter is joint: a row is dropped if any of its
    features or its label is missing, so X and y stay aligned.
    """
    X_df = pd.DataFrame(X)
    keep = X_df.notna().all(axis=1).to_numpy()
    X_arr = X_df.to_numpy(dtype=float)

    if y is None:
        return X_arr[keep]

    y_arr = np.asarray(y, dtype=float).ravel()
    if len(y_arr) != len(X_arr):
        raise DimensionMismatchError(
            f"X has {len(X_arr)} rows but y has {len(y_arr)} entries"
        )
    keep = keep & ~np.isnan(y_arr)
    return X_arr[keep], y_arr[keep]


def add_bias_column(X: np.ndarray) -> np.ndarray:
    """Prepend the constant intercept column."""
    return np.hstack([np.ones((X.shape[0], 1)), X])


def make_curve_clouds(
    n_per_class: int = DEFAULT_N_PER_CLASS,
    noise: float = DEFAULT_NOISE,
    gap: float = DEFAULT_GAP,
    random_state: int | None = RANDOM_STATE,
) -> tuple[np.ndarray, np.ndarray]:
    """
    Two labelled point clouds scattered around the curve (t, sin(t) + t/2).

    Class 0 follows the curve itself, class 1 the same curve shifted up by `gap`.
    """
    rng = np.random.default_rng(random_state)
    clouds, labels = [], []
    for label, shift in ((0, 0.0), (1, gap)):
        t = rng.uniform(0.0, 2 * np.pi, size=n_per_class)
        x2 = np.sin(t) + 0.5 * t + shift + rng.normal(0.0, noise, size=n_per_class)
        clouds.append(np.column_stack([t, x2]))
        labels.append(np.full(n_per_class, label, dtype=float))
    return np.vstack(clouds), np.concatenate(labels)


def load_dataset(
    csv_path: Path,
    feature_cols: Sequence[str] | None = None,
    label_col: str = DEFAULT_LABEL_COL,
) -> tuple[pd.DataFrame, pd.Series]:
    """
    Read features and a 0/1 label column from CSV.
    Missing values are kept; the trainer drops incomplete rows itself.
    """
    df = pd.read_csv(csv_path)
    if label_col not in df.columns:
        raise ValueError(f"Label column {label_col!r} not found in {csv_path}")

    if feature_cols is None:
        feature_cols = [c for c in df.columns if c != label_col]
    missing = [c for c in feature_cols if c not in df.columns]
    if missing:
        raise ValueError(f"Feature columns not found in {csv_path}: {missing}")

    return df[list(feature_cols)].astype(float), df[label_col].astype(float)


def make_train_test_split(
    X,
    y,
    test_size: float = DEFAULT_TEST_SIZE,
    random_state: int | None = RANDOM_STATE,
    stratify: bool = True,
):
    """Random split, stratified on the label unless it has missing entries."""
    stratify_target = y if stratify and not pd.isna(np.asarray(y, dtype=float)).any() else None
    return train_test_split(
        X, y, test_size=test_size, random_state=random_state, stratify=stratify_target
    )
