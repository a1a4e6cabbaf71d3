import numpy as np
import pandas as pd
import pytest

from logit_fit import (
    DimensionMismatchError,
    add_bias_column,
    drop_missing_rows,
    load_dataset,
    make_curve_clouds,
    make_train_test_split,
)


def test_drop_missing_rows_filters_x_and_y_jointly():
    X = [[1.0, 2.0], [np.nan, 3.0], [4.0, 5.0], [6.0, 7.0]]
    y = [0, 1, None, 1]
    X_clean, y_clean = drop_missing_rows(X, y)
    np.testing.assert_array_equal(X_clean, [[1.0, 2.0], [6.0, 7.0]])
    np.testing.assert_array_equal(y_clean, [0.0, 1.0])


def test_drop_missing_rows_accepts_pandas_with_any_index():
    X = pd.DataFrame({"a": [1.0, None, 3.0], "b": [4.0, 5.0, 6.0]}, index=[10, 20, 30])
    y = pd.Series([1, 0, 1], index=[7, 8, 9])
    X_clean, y_clean = drop_missing_rows(X, y)
    assert X_clean.shape == (2, 2)
    np.testing.assert_array_equal(y_clean, [1.0, 1.0])


def test_drop_missing_rows_without_labels():
    X_clean = drop_missing_rows(np.array([[1.0, np.nan], [2.0, 3.0]]))
    np.testing.assert_array_equal(X_clean, [[2.0, 3.0]])


def test_drop_missing_rows_rejects_length_mismatch():
    with pytest.raises(DimensionMismatchError):
        drop_missing_rows([[1.0], [2.0]], [1.0])


def test_add_bias_column():
    Xb = add_bias_column(np.array([[2.0, 3.0], [4.0, 5.0]]))
    np.testing.assert_array_equal(Xb, [[1.0, 2.0, 3.0], [1.0, 4.0, 5.0]])


def test_make_curve_clouds_shape_and_labels():
    X, y = make_curve_clouds(n_per_class=30, random_state=5)
    assert X.shape == (60, 2)
    assert sorted(np.unique(y).tolist()) == [0.0, 1.0]
    assert (y == 1).sum() == 30
    assert np.all((X[:, 0] >= 0) & (X[:, 0] <= 2 * np.pi))


def test_make_curve_clouds_is_reproducible():
    X_a, y_a = make_curve_clouds(random_state=11)
    X_b, y_b = make_curve_clouds(random_state=11)
    np.testing.assert_array_equal(X_a, X_b)
    np.testing.assert_array_equal(y_a, y_b)


def test_make_curve_clouds_gap_lifts_class_one():
    X, y = make_curve_clouds(noise=0.0, gap=2.5, random_state=0)
    residual = X[:, 1] - (np.sin(X[:, 0]) + 0.5 * X[:, 0])
    np.testing.assert_allclose(residual[y == 0], 0.0, atol=1e-12)
    np.testing.assert_allclose(residual[y == 1], 2.5, atol=1e-12)


def test_load_dataset(tmp_path):
    csv_path = tmp_path / "points.csv"
    pd.DataFrame(
        {"x1": [1.0, 2.0, None], "x2": [3.0, 4.0, 5.0], "extra": [0, 0, 0], "label": [0, 1, 1]}
    ).to_csv(csv_path, index=False)

    X, y = load_dataset(csv_path, feature_cols=["x1", "x2"])
    assert list(X.columns) == ["x1", "x2"]
    assert X["x1"].isna().sum() == 1
    assert y.tolist() == [0.0, 1.0, 1.0]

    X_all, _ = load_dataset(csv_path)
    assert list(X_all.columns) == ["x1", "x2", "extra"]


def test_load_dataset_missing_columns(tmp_path):
    csv_path = tmp_path / "points.csv"
    pd.DataFrame({"x1": [1.0], "target": [0]}).to_csv(csv_path, index=False)
    with pytest.raises(ValueError, match="Label column"):
        load_dataset(csv_path)
    with pytest.raises(ValueError, match="Feature columns"):
        load_dataset(csv_path, feature_cols=["x9"], label_col="target")


def test_make_train_test_split_sizes():
    X, y = make_curve_clouds(n_per_class=50)
    X_train, X_test, y_train, y_test = make_train_test_split(X, y, test_size=0.2)
    assert len(X_train) == 80 and len(X_test) == 20
    assert y_test.sum() == 10


def test_make_train_test_split_with_missing_labels():
    X = np.arange(20, dtype=float).reshape(10, 2)
    y = np.array([0, 1] * 4 + [np.nan, 1])
    X_train, X_test, _, _ = make_train_test_split(X, y, test_size=0.3)
    assert len(X_train) + len(X_test) == 10


def test_drop_missing_rows_on_dataframe_with_missing_label():
    X = pd.DataFrame({"a": [1.0, 2.0, 3.0, None], "b": [4.0, 5.0, 6.0, 7.0]})
    y = pd.Series([0.0, np.nan, 1.0, 1.0])
    X_clean, y_clean = drop_missing_rows(X, y)
    np.testing.assert_array_equal(X_clean, [[1.0, 4.0], [3.0, 6.0]])
    np.testing.assert_array_equal(y_clean, [0.0, 1.0])
    # inputs stay untouched
    assert X["a"].isna().sum() == 1
    assert y.isna().sum() == 1
