"""The DataBridge conversion layer

The bridge knows three in-memory representations of data
and how to move from one to the other::

    pyarrow.Table --table_to_matrix--> numpy.ndarray --matrix_to_vectors--> pandas.DataFrame
          |                                                                      ^
          +----------------------------table_to_vectors--------------------------+

Each conversion is a pure function: it never modifies its input
and always allocates a new result, so it's safe to convert the same
data from multiple threads at the same time.

Columns of a table have a *kind* (see :class:`ColumnKind`),
each conversion knows how to handle every kind or rejects it
with an :class:`UnsupportedColumnKindError`. Nothing is ever
silently dropped or replaced by a default value.

A typical workflow loads a table, moves it to a matrix for
numerical transformations and then builds the labeled vectors
for a model:

>>> import pyarrow as pa
>>> from databridge.bridge import table_to_matrix, standardize, matrix_to_vectors
>>> data = pa.table({"height": [170.0, 165.0, 180.0, 175.0],
...                  "weight": [70.0, 60.0, 80.0, 75.0]})
>>> vectors = matrix_to_vectors(standardize(table_to_matrix(data)),
...                             ["height_norm", "weight_norm"])
>>> list(vectors.columns)
['height_norm', 'weight_norm']
>>> vectors.shape
(4, 2)
"""

from .conversion import (
    MATRIX_CONVERTERS,
    VECTOR_CONVERTERS,
    UnsupportedKindPolicy,
    matrix_to_table,
    matrix_to_vectors,
    table_to_matrix,
    table_to_vectors,
    vectors_to_table,
)
from .errors import (
    ConversionError,
    DuplicateColumnError,
    ShapeMismatchError,
    UnsupportedColumnKindError,
)
from .kinds import ColumnKind, column_kind, schema_kinds
from .normalize import standardize

__all__ = (
    "ColumnKind",
    "column_kind",
    "schema_kinds",
    "UnsupportedKindPolicy",
    "table_to_vectors",
    "table_to_matrix",
    "matrix_to_vectors",
    "matrix_to_table",
    "vectors_to_table",
    "standardize",
    "MATRIX_CONVERTERS",
    "VECTOR_CONVERTERS",
    "ConversionError",
    "DuplicateColumnError",
    "ShapeMismatchError",
    "UnsupportedColumnKindError",
)
