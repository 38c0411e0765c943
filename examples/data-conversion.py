"""Converting data between tables, matrices and labeled vectors.

* Table -> labeled vectors: after loading and cleaning, before modeling.
* Table -> matrix: before numerical transformations.
* Matrix -> labeled vectors: after numerical transformations, before modeling.
"""

import numpy as np

from databridge.bridge import (
    UnsupportedColumnKindError,
    UnsupportedKindPolicy,
    matrix_to_vectors,
    standardize,
    table_to_matrix,
    table_to_vectors,
)
from databridge.dataframe import Dataframe

print("--- Table -> labeled vectors ---")
data = Dataframe.from_columns(
    {"feature1": [1.0, 2.0, 3.0], "feature2": [4.0, 5.0, 6.0], "target": [0, 1, 0]}
)
print(f"Original table:\n{data}")
vectors = table_to_vectors(data.to_arrow())
print(f"\nLabeled vectors:\n{vectors}")
print(f"\nSchema:\n{vectors.dtypes.to_string()}\n")

print("--- Table -> matrix ---")
data = Dataframe.from_columns(
    {"col1": [1.0, 2.0, 3.0], "col2": [4.0, 5.0, 6.0], "col3": [7.0, 8.0, 9.0]}
)
print(f"Table:\n{data}")
matrix = table_to_matrix(data.to_arrow())
print(f"\nMatrix:\n{matrix}")
print(f"Shape: {matrix.shape}\n")

print("--- Matrix -> labeled vectors ---")
matrix = np.array([[1.5, 2.5, 3.5], [4.5, 5.5, 6.5]])
print(f"Matrix:\n{matrix}")
print(f"\nLabeled vectors:\n{matrix_to_vectors(matrix, ['x1', 'x2', 'x3'])}\n")

print("--- Unsupported columns ---")
flags = Dataframe.from_columns({"score": [0.5, 0.7], "remote": [True, False]})
try:
    flags.to_matrix()
except UnsupportedColumnKindError as e:
    print(f"Rejected: {e}")
print(f"Coerced:\n{flags.to_matrix(UnsupportedKindPolicy.COERCE)}\n")

print("--- Complete round trip ---")
print("Step 1: load the data as a table")
original = Dataframe.from_columns(
    {"height": [170.0, 165.0, 180.0, 175.0], "weight": [70.0, 60.0, 80.0, 75.0]}
)
print(original)

print("\nStep 2: convert to a matrix and standardize it")
normalized = standardize(original.to_matrix())
print(normalized)

print("\nStep 3: label the columns for modeling")
vectors = matrix_to_vectors(normalized, ["height_norm", "weight_norm"])
print(vectors)
print("\nReady for modeling!")
