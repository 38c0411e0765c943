"""Conversions between tables, matrices and labeled vectors.

Tables (:class:`pyarrow.Table`) can contain columns of any kind,
but numeric matrices (:class:`numpy.ndarray`) can only contain
floating point numbers and labeled vectors (:class:`pandas.DataFrame`)
can only contain numeric or nominal (categorical) vectors.

Each conversion declares a converter for each :class:`ColumnKind`.
For example converting a table to labeled vectors keeps numeric
columns as numeric vectors and turns text columns into nominal ones:

>>> import pyarrow as pa
>>> data = pa.table({"animal": ["Flamingo", "Horse"], "n_legs": [2, 4]})
>>> vectors = table_to_vectors(data)
>>> [str(dtype) for dtype in vectors.dtypes]
['category', 'float64']

Kinds that have no natural mapping, like booleans or dates, are rejected
unless the caller explicitly asks for them to be coerced to numbers
through :class:`UnsupportedKindPolicy`:

>>> data = pa.table({"remote": [True, False]})
>>> table_to_matrix(data, policy=UnsupportedKindPolicy.COERCE).tolist()
[[1.0], [0.0]]
"""

import enum
import logging
from collections import Counter
from typing import Any, Callable, Sequence

import numpy as np
import pandas as pd
import pyarrow as pa
import pyarrow.compute as pc

from .errors import DuplicateColumnError, ShapeMismatchError, UnsupportedColumnKindError
from .kinds import ColumnKind, column_kind

logger = logging.getLogger(__name__)

__all__ = (
    "UnsupportedKindPolicy",
    "table_to_vectors",
    "table_to_matrix",
    "matrix_to_vectors",
    "matrix_to_table",
    "vectors_to_table",
    "MATRIX_CONVERTERS",
    "VECTOR_CONVERTERS",
)

MATRIX = "a numeric matrix"
VECTORS = "labeled vectors"
TABLE = "a table"

_SECONDS_PER_UNIT = {"s": 1, "ms": 10**3, "us": 10**6, "ns": 10**9}
_MILLISECONDS_PER_DAY = 86_400_000


class UnsupportedKindPolicy(enum.Enum):
    """What to do with columns that have no natural numeric or nominal mapping.

    Applies to :attr:`ColumnKind.BOOLEAN`, :attr:`ColumnKind.DATE`
    and :attr:`ColumnKind.DATETIME` columns.

    * ``REJECT`` raises :class:`UnsupportedColumnKindError`.
    * ``COERCE`` converts booleans to ``0.0``/``1.0``, dates to
      days since the Unix epoch and datetimes to seconds since the Unix epoch.
    """

    REJECT = "reject"
    COERCE = "coerce"


def _float_values(column: pa.ChunkedArray) -> np.ndarray:
    """Widen a numeric column to float64, nulls become NaN."""
    widened = pc.cast(column, pa.float64())
    return np.asarray(widened.to_numpy(), dtype=np.float64)


def _epoch_values(column: pa.ChunkedArray) -> np.ndarray:
    """Express dates as days and timestamps as seconds since the epoch."""
    datatype = column.type
    if pa.types.is_timestamp(datatype):
        ticks = _float_values(pc.cast(column, pa.int64()))
        return ticks / _SECONDS_PER_UNIT[datatype.unit]
    elif pa.types.is_date64(datatype):
        return _float_values(pc.cast(column, pa.int64())) / _MILLISECONDS_PER_DAY
    return _float_values(pc.cast(column, pa.int32()))


def _plain(column: pa.ChunkedArray) -> pa.ChunkedArray:
    """Decode dictionary encoded columns, so that casts see the values."""
    if pa.types.is_dictionary(column.type):
        return pc.cast(column, column.type.value_type)
    return column


# A converter receives the column name, the column data and the policy
# and returns the converted values, or raises if the column can't be converted.
Converter = Callable[[str, pa.ChunkedArray, UnsupportedKindPolicy], Any]


def _numeric(
    name: str, column: pa.ChunkedArray, policy: UnsupportedKindPolicy
) -> np.ndarray:
    return _float_values(_plain(column))


def _rejected(kind: ColumnKind, target: str) -> Converter:
    def convert(
        name: str, column: pa.ChunkedArray, policy: UnsupportedKindPolicy
    ) -> np.ndarray:
        raise UnsupportedColumnKindError(name, kind, target)

    return convert


def _coerced(kind: ColumnKind, target: str, coerce: Callable) -> Converter:
    def convert(
        name: str, column: pa.ChunkedArray, policy: UnsupportedKindPolicy
    ) -> np.ndarray:
        if policy is not UnsupportedKindPolicy.COERCE:
            raise UnsupportedColumnKindError(name, kind, target)
        logger.info("Coercing %s column '%s' to numbers", kind.value, name)
        return coerce(_plain(column))

    return convert


def _nominal(
    name: str, column: pa.ChunkedArray, policy: UnsupportedKindPolicy
) -> pd.Categorical:
    return pd.Categorical(column.to_pylist())


MATRIX_CONVERTERS: dict[ColumnKind, Converter] = {
    ColumnKind.FLOAT: _numeric,
    ColumnKind.INTEGER: _numeric,
    ColumnKind.TEXT: _rejected(ColumnKind.TEXT, MATRIX),
    ColumnKind.BOOLEAN: _coerced(ColumnKind.BOOLEAN, MATRIX, _float_values),
    ColumnKind.DATE: _coerced(ColumnKind.DATE, MATRIX, _epoch_values),
    ColumnKind.DATETIME: _coerced(ColumnKind.DATETIME, MATRIX, _epoch_values),
}
"""How each kind of column becomes a column of a numeric matrix."""

VECTOR_CONVERTERS: dict[ColumnKind, Converter] = {
    ColumnKind.FLOAT: _numeric,
    ColumnKind.INTEGER: _numeric,
    ColumnKind.TEXT: _nominal,
    ColumnKind.BOOLEAN: _coerced(ColumnKind.BOOLEAN, VECTORS, _float_values),
    ColumnKind.DATE: _coerced(ColumnKind.DATE, VECTORS, _epoch_values),
    ColumnKind.DATETIME: _coerced(ColumnKind.DATETIME, VECTORS, _epoch_values),
}
"""How each kind of column becomes a labeled vector."""


def table_to_vectors(
    table: pa.Table, *, policy: UnsupportedKindPolicy = UnsupportedKindPolicy.REJECT
) -> pd.DataFrame:
    """Convert a table to a set of labeled vectors.

    Floating point and integer columns become ``float64`` vectors,
    text columns become ``category`` vectors with the same values.
    The order of the columns and the number of rows are preserved.

    :param table: The table to convert.
    :param policy: How to deal with boolean and date columns.
    """
    _ensure_unique(table.column_names)
    kinds = [column_kind(field) for field in table.schema]
    logger.debug(
        "Converting table of %d rows with kinds %s to labeled vectors",
        table.num_rows,
        [kind.value for kind in kinds],
    )

    vectors = {}
    for name, kind, column in zip(table.column_names, kinds, table.columns):
        values = VECTOR_CONVERTERS[kind](name, column, policy)
        vectors[name] = pd.Series(values, name=name)
    return pd.DataFrame(vectors, index=pd.RangeIndex(table.num_rows))


def table_to_matrix(
    table: pa.Table, *, policy: UnsupportedKindPolicy = UnsupportedKindPolicy.REJECT
) -> np.ndarray:
    """Convert a table to a numeric matrix.

    The resulting matrix has one row for each row of the table
    and one column for each column of the table, in the same order.
    Integer values are widened to floating point, missing values become NaN.

    The matrix is read-only, apply transformations by creating new matrices.

    >>> import pyarrow as pa
    >>> data = pa.table({"feature1": [1.0, 2.0], "target": [0, 1]})
    >>> table_to_matrix(data).tolist()
    [[1.0, 0.0], [2.0, 1.0]]

    :param table: The table to convert, must only contain numeric columns.
    :param policy: How to deal with boolean and date columns.
    """
    _ensure_unique(table.column_names)
    kinds = [column_kind(field) for field in table.schema]
    logger.debug(
        "Converting table of %d rows with kinds %s to a matrix",
        table.num_rows,
        [kind.value for kind in kinds],
    )

    # Convert all columns before allocating the matrix,
    # so that an unsupported column prevents any output.
    columns = [
        MATRIX_CONVERTERS[kind](name, column, policy)
        for name, kind, column in zip(table.column_names, kinds, table.columns)
    ]

    matrix = np.empty((table.num_rows, table.num_columns), dtype=np.float64)
    for idx, values in enumerate(columns):
        matrix[:, idx] = values
    matrix.flags.writeable = False
    return matrix


def matrix_to_vectors(matrix: Any, names: Sequence[str]) -> pd.DataFrame:
    """Convert a numeric matrix to a set of numeric labeled vectors.

    Each column of the matrix becomes a ``float64`` vector named
    after the name in the same position of ``names``.

    >>> import numpy as np
    >>> vectors = matrix_to_vectors(np.array([[1.5, 2.5], [4.5, 5.5]]), ["x1", "x2"])
    >>> vectors["x2"].tolist()
    [2.5, 5.5]

    :param matrix: Any 2-D array-like of numbers, regardless of how it was produced.
    :param names: The name for each column of the matrix.
    """
    matrix = _as_matrix(matrix, names)
    num_rows = matrix.shape[0]
    logger.debug("Converting %s matrix to labeled vectors", matrix.shape)
    return pd.DataFrame(
        {
            name: pd.Series(matrix[:, idx].copy(), name=name)
            for idx, name in enumerate(names)
        },
        index=pd.RangeIndex(num_rows),
    )


def matrix_to_table(matrix: Any, names: Sequence[str]) -> pa.Table:
    """Convert a numeric matrix to a table of floating point columns.

    >>> import numpy as np
    >>> matrix_to_table(np.array([[1.0, 2.0], [3.0, 4.0]]), ["a", "b"]).to_pydict()
    {'a': [1.0, 3.0], 'b': [2.0, 4.0]}

    :param matrix: Any 2-D array-like of numbers.
    :param names: The name for each column of the matrix.
    """
    matrix = _as_matrix(matrix, names)
    logger.debug("Converting %s matrix to a table", matrix.shape)
    return pa.table(
        {
            name: pa.array(matrix[:, idx], type=pa.float64())
            for idx, name in enumerate(names)
        },
        schema=pa.schema([(name, pa.float64()) for name in names]),
    )


def vectors_to_table(vectors: pd.DataFrame) -> pa.Table:
    """Convert a set of labeled vectors back to a table.

    Numeric vectors become ``float64`` columns and nominal vectors
    become ``string`` columns. Missing values become nulls.
    Categories that are not text, booleans and complex numbers
    raise :class:`UnsupportedColumnKindError`.

    :param vectors: Labeled vectors with numeric or ``category`` columns.
    """
    names = [str(name) for name in vectors.columns]
    _ensure_unique(names)
    logger.debug("Converting %d labeled vectors to a table", len(names))

    arrays = []
    for name, (_, series) in zip(names, vectors.items()):
        if isinstance(series.dtype, pd.CategoricalDtype) and _text_categories(series):
            values = pa.array(series.astype(object), type=pa.string(), from_pandas=True)
        elif _real_numeric(series):
            values = pa.array(
                series.to_numpy(dtype=np.float64), type=pa.float64(), from_pandas=True
            )
        else:
            raise UnsupportedColumnKindError(name, str(series.dtype), TABLE)
        arrays.append(values)
    return pa.Table.from_arrays(arrays, names=names)


def _text_categories(series: pd.Series) -> bool:
    return all(isinstance(category, str) for category in series.cat.categories)


def _real_numeric(series: pd.Series) -> bool:
    dtype = series.dtype
    return (
        pd.api.types.is_numeric_dtype(dtype)
        and not pd.api.types.is_bool_dtype(dtype)
        and not pd.api.types.is_complex_dtype(dtype)
    )


def _as_matrix(matrix: Any, names: Sequence[str]) -> np.ndarray:
    """Validate a matrix against the names of its columns."""
    matrix = np.asarray(matrix, dtype=np.float64)
    if matrix.ndim != 2:
        raise ShapeMismatchError(
            f"Expected a 2-D matrix, got {matrix.ndim} dimensions",
            expected=2,
            actual=matrix.ndim,
        )
    if len(names) != matrix.shape[1]:
        raise ShapeMismatchError(
            f"Got {len(names)} column names for a matrix of {matrix.shape[1]} columns",
            expected=matrix.shape[1],
            actual=len(names),
        )
    _ensure_unique(names)
    return matrix


def _ensure_unique(names: Sequence[str]) -> None:
    duplicates = [name for name, count in Counter(names).items() if count > 1]
    if duplicates:
        raise DuplicateColumnError(duplicates)
