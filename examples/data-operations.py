"""Selecting, filtering, sorting, transforming and aggregating data."""

import pyarrow.compute as pc

from databridge.dataframe import Dataframe

employees = Dataframe.from_columns(
    {
        "id": [101, 102, 103, 104, 105, 106, 107, 108],
        "name": ["Alice", "Bob", "Charlie", "Diana", "Eve", "Frank", "Grace", "Henry"],
        "department": [
            "Engineering", "Sales", "Engineering", "Sales",
            "Engineering", "HR", "HR", "Sales",
        ],
        "salary": [75000.0, 55000.0, 82000.0, 60000.0, 78000.0, 50000.0, 52000.0, 58000.0],
        "years_experience": [5, 3, 7, 4, 6, 2, 3, 4],
    }
)

print("--- Selecting data ---")
print(f"Name and salary:\n{employees.select('name', 'salary')}\n")
print(f"First 3 employees:\n{employees.head(3)}\n")
print(f"Rows 2-4:\n{employees.take([2, 3, 4])}\n")
print(f"Name and department for first 3:\n{employees.select('name', 'department').head(3)}\n")

print("--- Filtering data ---")
print(f"Salary > 60000:\n{employees.filter(pc.field('salary') > 60000)}\n")
engineering = pc.field("department") == "Engineering"
print(f"Engineering only:\n{employees.filter(engineering)}\n")
print(
    "Engineering with more than 5 years of experience:\n"
    f"{employees.filter(engineering & (pc.field('years_experience') > 5))}\n"
)
print(
    "Salary > 75000 or more than 6 years of experience:\n"
    f"{employees.filter((pc.field('salary') > 75000) | (pc.field('years_experience') > 6))}\n"
)
print(f"Everyone except Sales:\n{employees.filter(~(pc.field('department') == 'Sales'))}\n")

print("--- Sorting data ---")
print(f"By salary ascending:\n{employees.sort('salary')}\n")
print(f"By salary descending:\n{employees.sort('salary', descending=True)}\n")
print(f"By department, then salary:\n{employees.sort('department', 'salary')}\n")

print("--- Transforming data ---")


def experience_level(years: int) -> str:
    if years < 3:
        return "Junior"
    elif years < 6:
        return "Mid"
    return "Senior"


salary = employees.to_arrow()["salary"]
transformed = (
    employees.with_column("salary_k", pc.divide(salary, 1000).combine_chunks())
    .map_column("years_experience", experience_level, "level")
    .with_column("bonus", pc.multiply(salary, 0.10).combine_chunks())
)
print(f"{transformed}\n")

print("--- Grouping and aggregating ---")
print(f"Salary by department:\n{employees.summarize('salary', ['mean', 'sum', 'count'], by=['department'])}\n")
print(f"Employees by department:\n{employees.count_by('department')}\n")


def experience_band(years: int) -> str:
    return "0-3" if years < 4 else "4-6" if years < 7 else "7+"


with_bands = employees.map_column("years_experience", experience_band, "exp_band")
print(
    "Average salary by department and experience:\n"
    f"{with_bands.summarize('salary', ['mean'], by=['department', 'exp_band'])}"
)
