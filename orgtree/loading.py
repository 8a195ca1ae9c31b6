import math
import re
from pathlib import Path

import pandas as pd

from orgtree import log
from orgtree.config import DEFAULT_COLUMNS
from orgtree.errors import RecordLoadError

# JSON exports already use the record keys as column names
RECORD_COLUMNS = {key: key for key in DEFAULT_COLUMNS}

NULL_STRINGS = {"", "nan", "none", "null"}

# "2.0" as written by to_csv for a float column
WHOLE_FLOAT = re.compile(r"-?\d+\.0+")


def is_null(x):
    if x is None:
        return True
    if isinstance(x, float) and math.isnan(x):
        return True
    if isinstance(x, str) and x.strip().lower() in NULL_STRINGS:
        return True
    return False


def normalize_id(x):
    """
    '12' -> '12', 12 -> '12', 12.0 -> '12', '12.0' -> '12', NaN / '' / 'nan' -> None.
    pandas stores an integer column with gaps as float, so both the float
    and its CSV text form carry a trailing .0.
    """
    if is_null(x):
        return None
    if isinstance(x, float) and x.is_integer():
        x = int(x)
    s = str(x).strip()
    if WHOLE_FLOAT.fullmatch(s):
        s = s.split(".", 1)[0]
    return s


def _text(x):
    return "" if is_null(x) else str(x).strip()


def records_from_frame(df, columns=None):
    """Turn one row per person into record dicts."""
    columns = columns or DEFAULT_COLUMNS

    col_id = columns["id"]
    if col_id not in df.columns:
        raise RecordLoadError(f"Missing id column {col_id!r}; found {list(df.columns)}")

    records = []
    skipped = 0
    self_fixed = 0

    for _, row in df.iterrows():
        uid = normalize_id(row[col_id])
        if uid is None:
            skipped += 1
            continue

        parent = normalize_id(row.get(columns["parentId"]))
        if parent == uid:
            parent = None
            self_fixed += 1

        item = {"id": uid}
        if parent is not None:
            item["parentId"] = parent
        for key in ("name", "title", "imageUrl"):
            item[key] = _text(row.get(columns[key]))
        records.append(item)

    if skipped:
        log.warn(f"Skipped {skipped} row(s) without an id")
    if self_fixed:
        log.warn(f"{self_fixed} row(s) reported to themselves; treated as roots")

    return records


def load_records(path, sheet_name=0, columns=None):
    """Read an .xlsx/.xls, .csv or .json file into record dicts."""
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix in (".xlsx", ".xls"):
        df = pd.read_excel(path, sheet_name=sheet_name, dtype=str)
    elif suffix == ".csv":
        df = pd.read_csv(path, dtype=str)
    elif suffix == ".json":
        df = pd.read_json(path, dtype=False)
        columns = columns or RECORD_COLUMNS
    else:
        raise RecordLoadError(f"Unsupported input file type: {path.name}")

    records = records_from_frame(df, columns)
    log.info(f"Loaded {len(records)} record(s) from {path}")
    return records
