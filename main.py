from __future__ import annotations

"""
CLI entrypoint: fit unregularized logistic regression on the synthetic curve
clouds (default) or on a CSV file, report metrics and optionally plot the
decision boundary.
"""

import argparse
from pathlib import Path

import numpy as np
from sklearn.linear_model import LogisticRegression

from logit_fit import (
    LogisticRegressionTNC,
    compute_classification_metrics,
    drop_missing_rows,
    load_dataset,
    make_curve_clouds,
    make_train_test_split,
    plot_decision_boundary,
    summarize_coefficients,
)
from logit_fit.constants import (
    DEFAULT_GAP,
    DEFAULT_LABEL_COL,
    DEFAULT_MAX_ITER,
    DEFAULT_METHOD,
    DEFAULT_N_PER_CLASS,
    DEFAULT_NOISE,
    DEFAULT_TEST_SIZE,
    RANDOM_STATE,
)
from logit_fit.metrics import majority_baseline


def print_metrics(label: str, metrics: dict):
    """Nicely format the metric dict produced by compute_classification_metrics."""
    cm = metrics["confusion_matrix"]
    print(
        f"[{label}] Acc {metrics['accuracy']:.3f} | "
        f"Prec {metrics['precision']:.3f} | Rec {metrics['recall']:.3f} | "
        f"F1 {metrics['f1']:.3f} | ROC-AUC {metrics['roc_auc']:.3f} | "
        f"LogLoss {metrics['log_loss']:.4f}"
    )
    print(f"    Confusion matrix [[TN, FP], [FN, TP]]: {cm.tolist()}")


def build_arg_parser():
    """CLI parser with knobs for the data source, split, optimizer and plot."""
    parser = argparse.ArgumentParser(
        description="Fit binary logistic regression and draw its decision boundary."
    )
    parser.add_argument(
        "--csv-path",
        type=Path,
        default=None,
        help="CSV with feature columns and a 0/1 label; synthetic curve clouds if omitted.",
    )
    parser.add_argument("--label-col", type=str, default=DEFAULT_LABEL_COL)
    parser.add_argument(
        "--feature-cols",
        type=str,
        default=None,
        help="Comma-separated feature columns (default: every column but the label).",
    )
    parser.add_argument("--n-per-class", type=int, default=DEFAULT_N_PER_CLASS)
    parser.add_argument("--noise", type=float, default=DEFAULT_NOISE)
    parser.add_argument("--gap", type=float, default=DEFAULT_GAP, help="Offset between the two curves.")
    parser.add_argument("--random-state", type=int, default=RANDOM_STATE)
    parser.add_argument("--test-size", type=float, default=DEFAULT_TEST_SIZE)
    parser.add_argument(
        "--method",
        type=str,
        default=DEFAULT_METHOD,
        help="scipy.optimize.minimize method used to fit theta.",
    )
    parser.add_argument("--max-iter", type=int, default=DEFAULT_MAX_ITER)
    parser.add_argument("--plot-path", type=Path, default=None, help="Where to save the boundary plot.")
    parser.add_argument(
        "--compare-sklearn",
        action="store_true",
        help="Also fit an unpenalized sklearn LogisticRegression for reference.",
    )
    parser.add_argument("--verbose", action="store_true")
    return parser


def load_data(args: argparse.Namespace):
    """Return (X, y, feature_names) from the CSV or the synthetic generator."""
    if args.csv_path is None:
        X, y = make_curve_clouds(
            n_per_class=args.n_per_class,
            noise=args.noise,
            gap=args.gap,
            random_state=args.random_state,
        )
        print(f"Synthetic curve clouds: {len(y)} points, gap={args.gap}, noise={args.noise}")
        return X, y, ["x1", "x2"]

    feature_cols = None
    if args.feature_cols:
        feature_cols = [c.strip() for c in args.feature_cols.split(",") if c.strip()]
    X, y = load_dataset(args.csv_path, feature_cols=feature_cols, label_col=args.label_col)
    print(f"Loaded {len(X)} rows, {X.shape[1]} features from {args.csv_path}")
    return X, y, list(X.columns)


def main(args: argparse.Namespace | None = None):
    """Fit, evaluate and optionally plot; returns the fitted model and metrics."""
    args = args or build_arg_parser().parse_args()

    X, y, feature_names = load_data(args)
    X_train, X_test, y_train, y_test = make_train_test_split(
        X, y, test_size=args.test_size, random_state=args.random_state
    )
    print(f"Train size: {len(X_train)}, Test size: {len(X_test)}")

    model = LogisticRegressionTNC(method=args.method, max_iter=args.max_iter, verbose=args.verbose)
    model.fit(X_train, y_train)
    if not model.converged_:
        print(f"Warning: {args.method} did not report convergence after {model.n_iter_} iterations.")

    X_train_c, y_train_c = drop_missing_rows(X_train, y_train)
    X_test_c, y_test_c = drop_missing_rows(X_test, y_test)

    print_metrics("Majority baseline", majority_baseline(y_train_c, y_test_c))
    train_metrics = compute_classification_metrics(y_train_c, model.predict_proba(X_train_c))
    test_metrics = compute_classification_metrics(y_test_c, model.predict_proba(X_test_c))
    print_metrics("Logistic (train)", train_metrics)
    print_metrics("Logistic (test)", test_metrics)

    coefficients = summarize_coefficients(model.theta_, feature_names)
    print("\nFitted coefficients:")
    print(coefficients)

    results = {
        "model": model,
        "coefficients": coefficients,
        "train_metrics": train_metrics,
        "test_metrics": test_metrics,
    }

    if args.compare_sklearn:
        sk_model = LogisticRegression(C=np.inf, max_iter=5000)
        sk_model.fit(X_train_c, y_train_c)
        sk_probs = sk_model.predict_proba(X_test_c)[:, 1]
        sk_metrics = compute_classification_metrics(y_test_c, sk_probs)
        print_metrics("sklearn LogisticRegression (test)", sk_metrics)
        print(f"    sklearn intercept {sk_model.intercept_[0]:.4f}, coef {sk_model.coef_[0].tolist()}")
        results["sklearn_metrics"] = sk_metrics

    if args.plot_path is not None:
        if len(feature_names) == 2:
            plot_decision_boundary(X_train_c, y_train_c, model.theta_, path=args.plot_path)
            print(f"Saved decision boundary plot to {args.plot_path}")
        else:
            print(f"Skipping plot: need 2 features, got {len(feature_names)}")

    return results


if __name__ == "__main__":
    main()
