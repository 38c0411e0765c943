import datetime

import numpy as np
import pandas as pd
import pyarrow as pa
import pyarrow.compute as pc
import pytest

from databridge.bridge import ColumnKind, UnsupportedColumnKindError, UnsupportedKindPolicy
from databridge.dataframe import Dataframe


@pytest.fixture
def employees():
    """Create a mock employees Dataframe for testing."""
    return Dataframe.from_columns(
        {
            "id": [101, 102, 103, 104, 105, 106, 107, 108],
            "name": ["Alice", "Bob", "Charlie", "Diana", "Eve", "Frank", "Grace", "Henry"],
            "department": [
                "Engineering",
                "Sales",
                "Engineering",
                "Sales",
                "Engineering",
                "HR",
                "HR",
                "Sales",
            ],
            "salary": [75000.0, 55000.0, 82000.0, 60000.0, 78000.0, 50000.0, 52000.0, 58000.0],
            "years_experience": [5, 3, 7, 4, 6, 2, 3, 4],
        }
    )


def test_init_from_recordbatch():
    df = Dataframe(pa.record_batch({"a": [1, 2, 3]}))
    assert isinstance(df.to_arrow(), pa.Table)
    assert df.shape == (3, 1)


def test_init_invalid():
    with pytest.raises(ValueError):
        Dataframe({"a": [1, 2, 3]})


def test_from_columns_types():
    df = Dataframe.from_columns({"age": [20, 22]}, types={"age": pa.int32()})
    assert df.to_arrow().schema.field("age").type == pa.int32()


def test_from_columns_different_lengths():
    with pytest.raises(ValueError) as err:
        Dataframe.from_columns({"a": [1, 2, 3], "b": [1, 2]})
    assert "same length" in str(err.value)


def test_from_matrix():
    df = Dataframe.from_matrix(
        np.array([[1.5, 2.3, 3.1], [4.2, 5.1, 6.0], [7.3, 8.2, 9.1]]),
        ["feature_1", "feature_2", "feature_3"],
    )
    assert df.shape == (3, 3)
    assert df.column_names == ["feature_1", "feature_2", "feature_3"]
    assert df.to_arrow()["feature_2"].to_pylist() == [2.3, 5.1, 8.2]


def test_from_vectors():
    df = Dataframe.from_vectors(
        pd.DataFrame({"x": [1.0, 2.0], "label": pd.Categorical(["a", "b"])})
    )
    assert df.kinds() == {"x": ColumnKind.FLOAT, "label": ColumnKind.TEXT}


def test_shape_and_len(employees):
    assert employees.shape == (8, 5)
    assert employees.num_rows == 8
    assert employees.num_columns == 5
    assert len(employees) == 8


def test_kinds():
    df = Dataframe.from_columns(
        {
            "name": ["Alice"],
            "age": [25],
            "salary": [50000.0],
            "remote": [True],
            "hire_date": [datetime.date(2020, 1, 15)],
        }
    )
    assert df.kinds() == {
        "name": ColumnKind.TEXT,
        "age": ColumnKind.INTEGER,
        "salary": ColumnKind.FLOAT,
        "remote": ColumnKind.BOOLEAN,
        "hire_date": ColumnKind.DATE,
    }


def test_structure(employees):
    structure = employees.structure().to_arrow()
    assert structure.column_names == ["index", "column", "kind"]
    assert structure["column"].to_pylist() == employees.column_names
    assert structure["kind"].to_pylist() == ["integer", "text", "text", "float", "integer"]


def test_head_and_tail(employees):
    assert employees.head(3).to_arrow()["name"].to_pylist() == ["Alice", "Bob", "Charlie"]
    assert employees.tail(2).to_arrow()["name"].to_pylist() == ["Grace", "Henry"]
    assert employees.tail(100).num_rows == 8


def test_take(employees):
    assert employees.take([2, 3, 4]).to_arrow()["id"].to_pylist() == [103, 104, 105]


def test_select(employees):
    selected = employees.select("name", "salary")
    assert selected.column_names == ["name", "salary"]
    assert selected.num_rows == 8


def test_select_and_head(employees):
    selected = employees.select("name", "department").head(3)
    assert selected.shape == (3, 2)


@pytest.mark.parametrize(
    "expression, expected_names",
    [
        (pc.field("salary") > 60000, ["Alice", "Charlie", "Eve"]),
        (pc.field("department") == "Engineering", ["Alice", "Charlie", "Eve"]),
        (
            (pc.field("department") == "Engineering") & (pc.field("years_experience") > 5),
            ["Charlie", "Eve"],
        ),
        (
            (pc.field("salary") > 75000) | (pc.field("years_experience") > 6),
            ["Charlie", "Eve"],
        ),
        (
            ~(pc.field("department") == "Sales"),
            ["Alice", "Charlie", "Eve", "Frank", "Grace"],
        ),
    ],
)
def test_filter(employees, expression, expected_names):
    filtered = employees.filter(expression)
    assert filtered.to_arrow()["name"].to_pylist() == expected_names


def test_filter_does_not_modify_original(employees):
    employees.filter(pc.field("salary") > 60000)
    assert employees.num_rows == 8


def test_sort(employees):
    ascending = employees.sort("salary").to_arrow()["salary"].to_pylist()
    assert ascending == sorted(ascending)
    descending = employees.sort("salary", descending=True).to_arrow()["salary"].to_pylist()
    assert descending == sorted(descending, reverse=True)


def test_sort_multiple_keys(employees):
    result = employees.sort("department", "salary", descending=[False, True]).to_arrow()
    assert result["name"].to_pylist() == [
        "Charlie",
        "Eve",
        "Alice",
        "Grace",
        "Frank",
        "Diana",
        "Henry",
        "Bob",
    ]


def test_sort_invalid_descending(employees):
    with pytest.raises(ValueError):
        employees.sort("department", "salary", descending=[True])


def test_with_column(employees):
    salary = employees.to_arrow()["salary"]
    df = employees.with_column("salary_k", pc.divide(salary, 1000).combine_chunks())
    assert df.column_names[-1] == "salary_k"
    assert df.to_arrow()["salary_k"].to_pylist()[:2] == [75.0, 55.0]


def test_with_column_existing(employees):
    with pytest.raises(ValueError):
        employees.with_column("salary", [0] * 8)


def test_with_column_wrong_length(employees):
    with pytest.raises(ValueError):
        employees.with_column("bonus", [1, 2, 3])


def test_map_column(employees):
    def level(years):
        if years < 3:
            return "Junior"
        elif years < 6:
            return "Mid"
        return "Senior"

    df = employees.map_column("years_experience", level, "level")
    assert df.to_arrow()["level"].to_pylist() == [
        "Mid",
        "Mid",
        "Senior",
        "Mid",
        "Senior",
        "Junior",
        "Mid",
        "Mid",
    ]


def test_summarize(employees):
    result = employees.summarize("salary", ["mean", "sum", "count"], by=["department"])
    assert result.column_names == ["department", "salary_mean", "salary_sum", "salary_count"]
    data = result.to_arrow().to_pydict()
    assert data["department"] == ["Engineering", "Sales", "HR"]
    assert data["salary_sum"] == [235000.0, 173000.0, 102000.0]
    assert data["salary_count"] == [3, 3, 2]
    assert data["salary_mean"][2] == 51000.0


def test_summarize_multiple_keys(employees):
    bands = employees.map_column(
        "years_experience", lambda y: "0-3" if y < 4 else "4-6" if y < 7 else "7+", "exp_band"
    )
    result = bands.summarize("salary", ["mean"], by=["department", "exp_band"])
    assert result.column_names == ["department", "exp_band", "salary_mean"]
    rows = set(
        zip(
            result.to_arrow()["department"].to_pylist(),
            result.to_arrow()["exp_band"].to_pylist(),
            result.to_arrow()["salary_mean"].to_pylist(),
        )
    )
    assert ("Engineering", "7+", 82000.0) in rows
    assert ("HR", "0-3", 51000.0) in rows
    assert ("Sales", "4-6", 59000.0) in rows


def test_count_by(employees):
    result = employees.count_by("department").to_arrow()
    assert result.column_names == ["department", "count"]
    assert result.to_pydict() == {"department": ["Engineering", "Sales", "HR"], "count": [3, 3, 2]}


def test_missing_counts():
    df = Dataframe.from_columns({"a": [1, None, 3], "b": ["x", "y", None], "c": [1.0, 2.0, 3.0]})
    assert df.missing_counts() == {"a": 1, "b": 1, "c": 0}


def test_unique(employees):
    assert employees.unique("department") == ["Engineering", "Sales", "HR"]


def test_describe():
    df = Dataframe.from_columns(
        {"name": ["a", "b", "c"], "x": [1.0, 2.0, 3.0], "n": [10, None, 30]}
    )
    stats = df.describe().to_arrow().to_pydict()
    assert stats["column"] == ["x", "n"]
    assert stats["count"] == [3, 2]
    assert stats["missing"] == [0, 1]
    assert stats["mean"] == [2.0, 20.0]
    assert stats["std"][0] == pytest.approx(1.0)
    assert stats["min"] == [1.0, 10.0]
    assert stats["max"] == [3.0, 30.0]


def test_str(employees):
    text = str(employees.select("name", "salary").head(2))
    assert text.splitlines() == [
        "name  | salary",
        "----- | --------",
        "Alice | 75000.00",
        "Bob   | 55000.00",
    ]


def test_to_matrix(employees):
    matrix = employees.select("salary", "years_experience").to_matrix()
    assert matrix.shape == (8, 2)
    assert matrix[0].tolist() == [75000.0, 5.0]


def test_to_matrix_rejects_text(employees):
    with pytest.raises(UnsupportedColumnKindError):
        employees.to_matrix()


def test_to_vectors(employees):
    vectors = employees.to_vectors()
    assert vectors.shape == (8, 5)
    assert isinstance(vectors["department"].dtype, pd.CategoricalDtype)
    assert vectors["id"].dtype == np.float64


def test_to_vectors_coerce():
    df = Dataframe.from_columns({"remote": [True, False]})
    with pytest.raises(UnsupportedColumnKindError):
        df.to_vectors()
    assert df.to_vectors(UnsupportedKindPolicy.COERCE)["remote"].tolist() == [1.0, 0.0]
