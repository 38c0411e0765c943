"""Load a CSV, move it through a matrix and label it again."""

import os
import tempfile

import numpy as np
import pandas as pd
import pyarrow as pa
import pytest

from databridge.bridge import matrix_to_vectors, standardize, table_to_matrix, table_to_vectors
from databridge.dataframe import Dataframe, write_csv


@pytest.fixture
def measures_csv():
    df = Dataframe.from_columns(
        {"height": [170.0, 165.0, 180.0, 175.0], "weight": [70, 60, 80, 75]}
    )
    with tempfile.NamedTemporaryFile(suffix=".csv", delete=False) as f:
        filename = f.name
    write_csv(df.to_arrow(), filename)
    yield filename
    os.unlink(filename)


def test_normalization_round_trip(measures_csv):
    table = Dataframe.open_csv(measures_csv).to_arrow()
    normalized = standardize(table_to_matrix(table))
    vectors = matrix_to_vectors(normalized, ["height_norm", "weight_norm"])

    assert list(vectors.columns) == ["height_norm", "weight_norm"]
    assert len(vectors) == 4
    for name in vectors.columns:
        assert vectors[name].mean() == pytest.approx(0.0, abs=1e-12)
        assert vectors[name].std() == pytest.approx(1.0)


def test_numeric_table_round_trip():
    df = Dataframe.from_columns(
        {"feature1": [1.0, 2.0, 3.0], "feature2": [4.0, 5.0, 6.0], "target": [0, 1, 0]}
    )
    matrix = df.to_matrix()
    vectors = matrix_to_vectors(matrix, df.column_names)
    pd.testing.assert_frame_equal(vectors, table_to_vectors(df.to_arrow()))
    assert vectors.shape == df.shape
    np.testing.assert_array_equal(vectors.to_numpy(), matrix)


def test_empty_table_round_trip():
    df = Dataframe.from_columns(
        {"a": [], "b": []}, types={"a": pa.float64(), "b": pa.int64()}
    )
    matrix = df.to_matrix()
    assert matrix.shape == (0, 2)

    vectors = matrix_to_vectors(standardize(matrix), df.column_names)
    assert list(vectors.columns) == ["a", "b"]
    assert len(vectors) == 0
