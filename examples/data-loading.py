"""Loading data from CSV files.

Creates a small iris sample, then loads it back
with default and custom options and inspects it.
"""

import pyarrow.compute as pc

from databridge.dataframe import CSVOptions, Dataframe, write_csv

FILENAME = "iris_sample.csv"

sample = Dataframe.from_columns(
    {
        "sepal_length": [5.1, 4.9, 4.7, 4.6, 5.0, 5.4],
        "sepal_width": [3.5, 3.0, 3.2, 3.1, 3.6, 3.9],
        "petal_length": [1.4, 1.4, 1.3, 1.5, 1.4, 1.7],
        "petal_width": [0.2, 0.2, 0.2, 0.2, 0.2, 0.4],
        "species": ["setosa"] * 6,
    }
)
write_csv(sample.to_arrow(), FILENAME)
print(f"Created {FILENAME}\n")

print("--- Basic CSV loading ---")
data = Dataframe.open_csv(FILENAME)
print(f"Rows: {data.num_rows}")
print(f"Columns: {data.num_columns}")
print(f"\nFirst 3 rows:\n{data.head(3)}\n")

print("--- Configured loading ---")
options = CSVOptions(delimiter=",", header=True, null_values=("NA", "?", "null", ""))
data = Dataframe.open_csv(FILENAME, options)
print(f"Missing values marked as: {', '.join(repr(v) for v in options.null_values)}")
print(f"\n{data.head(3)}\n")

print("--- Data inspection ---")
rows, columns = data.shape
print(f"Shape: {rows} rows x {columns} columns")
print(f"\nColumn types:\n{data.structure()}")
print(f"\nFirst 2 rows:\n{data.head(2)}")
print(f"\nLast 2 rows:\n{data.tail(2)}")
print(f"\nSummary statistics:\n{data.describe()}")

missing = {name: count for name, count in data.missing_counts().items() if count}
print("\nMissing values:")
for name, count in missing.items():
    print(f"  {name}: {count} missing")
if not missing:
    print("  No missing values found")

print(f"\nUnique species: {data.unique('species')}")
wide_sepals = data.filter(pc.field("sepal_width") > 3.4)
print(f"\nSamples with sepal_width > 3.4: {wide_sepals.num_rows}")
