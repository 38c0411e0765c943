import datetime

import pyarrow as pa

from databridge.utils.tabulate import format_value, tabulate


def test_tabulate_recordbatch():
    data = pa.record_batch(
        {"Product": ["Videogame", "Laptop"], "Quantity": [8, 7], "Price": [66.5, 77.46]}
    )
    assert tabulate(data).splitlines() == [
        "Product   | Quantity | Price",
        "--------- | -------- | -----",
        "Videogame | 8        | 66.50",
        "Laptop    | 7        | 77.46",
    ]


def test_tabulate_max_rows():
    data = pa.table({"n": list(range(25))})
    lines = tabulate(data, max_rows=3).splitlines()
    assert len(lines) == 6
    assert lines[-1] == "... and 22 more rows"


def test_tabulate_empty():
    data = pa.table({"a": pa.array([], type=pa.int64())})
    assert tabulate(data).splitlines() == ["a", "-"]


def test_format_value():
    assert format_value(None) == "null"
    assert format_value(True) == "true"
    assert format_value(False) == "false"
    assert format_value(1.0 / 3) == "0.33"
    assert format_value(42) == "42"
    assert format_value(datetime.date(2025, 11, 1)) == "2025-11-01"
    assert format_value("x" * 40) == "x" * 27 + "..."
