from __future__ import annotations

"""
Scatter plot of the labelled points with the fitted decision regions and the
p = 0.5 boundary line on top.
"""

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import ListedColormap

from .constants import CLASS_COLORS, PLOT_GRID_STEPS
from .data_prep import drop_missing_rows
from .errors import DimensionMismatchError
from .logreg import predict_label, predict_probability


def plot_decision_boundary(
    X,
    y,
    theta: np.ndarray,
    path: Path | None = None,
    grid_steps: int = PLOT_GRID_STEPS,
    ax=None,
):
    """
    Draw both classes and the regions predicted by theta over a meshgrid.
    Only two-feature inputs can be drawn. Saves and closes the figure if `path` is given.
    """
    X_arr, y_arr = drop_missing_rows(X, y)
    theta = np.asarray(theta, dtype=float)
    if X_arr.shape[1] != 2 or theta.shape[0] != 3:
        raise DimensionMismatchError("Decision boundary plots need exactly two features.")

    pad = 0.5
    x1_min, x1_max = X_arr[:, 0].min() - pad, X_arr[:, 0].max() + pad
    x2_min, x2_max = X_arr[:, 1].min() - pad, X_arr[:, 1].max() + pad
    xx1, xx2 = np.meshgrid(
        np.linspace(x1_min, x1_max, grid_steps), np.linspace(x2_min, x2_max, grid_steps)
    )
    grid = np.column_stack([xx1.ravel(), xx2.ravel()])
    grid_labels = predict_label(predict_probability(theta, grid)).reshape(xx1.shape)

    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 6))
    else:
        fig = ax.figure

    ax.contourf(
        xx1,
        xx2,
        grid_labels,
        levels=[-0.5, 0.5, 1.5],
        cmap=ListedColormap(CLASS_COLORS),
        alpha=0.2,
    )
    for label, color in enumerate(CLASS_COLORS):
        mask = y_arr == label
        ax.scatter(
            X_arr[mask, 0], X_arr[mask, 1], c=color, edgecolors="k", s=25, label=f"y = {label}"
        )

    if theta[2] != 0:
        x1_line = np.array([x1_min, x1_max])
        x2_line = -(theta[0] + theta[1] * x1_line) / theta[2]
        ax.plot(x1_line, x2_line, "k--", lw=2, label="p = 0.5")

    ax.set_xlim(x1_min, x1_max)
    ax.set_ylim(x2_min, x2_max)
    ax.set_xlabel("x1")
    ax.set_ylabel("x2")
    ax.set_title("Logistic regression decision boundary")
    ax.legend(loc="best")
    fig.tight_layout()

    if path is not None:
        fig.savefig(path)
        plt.close(fig)
    return fig
