"""Creating tables programmatically with typed columns."""

import datetime

import numpy as np
import pyarrow as pa
import pyarrow.compute as pc

from databridge.dataframe import Dataframe

print("--- Simple creation ---")
students = Dataframe.from_columns(
    {"name": ["Alice", "Bob", "Charlie"], "age": [20, 22, 21]},
    types={"age": pa.int32()},
)
print(students)
rows, columns = students.shape
print(f"Shape: {rows} rows x {columns} columns\n")

print("--- Typed columns ---")
employees = Dataframe.from_columns(
    {
        "name": ["Alice", "Bob", "Charlie", "Diana"],
        "age": [25, 30, 35, 28],
        "salary": [50000.0, 65000.0, 75000.0, 60000.0],
        "remote": [True, False, True, False],
        "hire_date": [
            datetime.date(2020, 1, 15),
            datetime.date(2019, 6, 1),
            datetime.date(2021, 3, 22),
            datetime.date(2020, 11, 30),
        ],
    }
)
print(employees)
print("\nColumn kinds:")
for name, kind in employees.kinds().items():
    print(f"  {name}: {kind.value}")
print()

print("--- From arrays ---")
features = np.array([[1.5, 2.3, 3.1], [4.2, 5.1, 6.0], [7.3, 8.2, 9.1]])
data = Dataframe.from_matrix(features, ["feature_1", "feature_2", "feature_3"])
print(data)
print()

print("--- Real world e-commerce data ---")
orders = Dataframe.from_columns(
    {
        "order_id": [1001, 1002, 1003, 1004, 1005],
        "customer": ["Alice", "Bob", "Charlie", "Alice", "Diana"],
        "product": ["Laptop", "Mouse", "Keyboard", "Monitor", "Laptop"],
        "price": [999.99, 25.50, 89.99, 299.99, 1099.99],
        "quantity": [1, 2, 1, 1, 1],
        "order_date": [
            datetime.date(2025, 11, 1),
            datetime.date(2025, 11, 1),
            datetime.date(2025, 11, 2),
            datetime.date(2025, 11, 3),
            datetime.date(2025, 11, 3),
        ],
    }
)
table = orders.to_arrow()
orders = orders.with_column("total", pc.multiply(table["price"], table["quantity"]).combine_chunks())
print(orders)

totals = orders.to_arrow()["total"]
print("\nQuick statistics:")
print(f"  Total revenue: ${pc.sum(totals).as_py():.2f}")
print(f"  Average order: ${pc.mean(totals).as_py():.2f}")
print(f"  Number of orders: {orders.num_rows}")
