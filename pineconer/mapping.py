#pineconer/mapping.py
import json
import decimal
from collections.abc import Mapping
from datetime import date, datetime

from dateutil import parser as dateutil_parser

from .errors import InvalidArgument


class FlatTable:
    """Row-oriented table: every row carries every column, in column order."""

    def __init__(self, columns=(), rows=None):
        self.columns = tuple(columns)
        self.rows = [{c: row.get(c) for c in self.columns} for row in (rows or [])]

    def __len__(self):
        return len(self.rows)

    def __iter__(self):
        return iter(self.rows)

    def __getitem__(self, idx):
        return self.rows[idx]

    def __eq__(self, other):
        if not isinstance(other, FlatTable):
            return NotImplemented
        return self.columns == other.columns and self.rows == other.rows

    def __repr__(self):
        return f"FlatTable(columns={list(self.columns)}, rows={len(self.rows)})"

    def column(self, name):
        if name not in self.columns:
            raise KeyError(name)
        return [row[name] for row in self.rows]

    def to_records(self):
        return [dict(row) for row in self.rows]

    def cast(self, types):
        """Return a new table with the named columns cast, e.g. {"createdAt": "timestamp"}."""
        unknown = [c for c in types if c not in self.columns]
        if unknown:
            raise InvalidArgument(f"Unknown columns: {', '.join(unknown)}")
        rows = []
        for row in self.rows:
            new_row = dict(row)
            for col, col_type in types.items():
                new_row[col] = cast_value(row[col], col_type)
            rows.append(new_row)
        return FlatTable(self.columns, rows)


def flatten(items):
    """
    Flatten a list of records into a FlatTable.

    Nested mappings are widened one level into "<key>_<nestedKey>" columns;
    anything nested deeper stays as an opaque value in that column.
    """
    if not isinstance(items, (list, tuple)):
        raise InvalidArgument(f"flatten expects a list of records, got {type(items).__name__}")

    top_level = {}
    nested = {}
    for pos, item in enumerate(items):
        if not isinstance(item, Mapping):
            raise InvalidArgument(f"item {pos} is {type(item).__name__}, expected a mapping")
        for key, val in item.items():
            if isinstance(val, Mapping):
                group = nested.setdefault(key, {})
                for sub_key in val:
                    group.setdefault(f"{key}_{sub_key}", None)
            else:
                top_level.setdefault(key, None)

    # A parent that is only ever a mapping (or null) gets no column of its own
    for key in nested:
        if key in top_level and all(
            isinstance(item.get(key), Mapping) or item.get(key) is None for item in items
        ):
            del top_level[key]

    # Top-level keys win over a widened name that collides with them
    columns = list(top_level)
    for group in nested.values():
        columns += [c for c in group if c not in top_level and c not in columns]

    rows = []
    for item in items:
        row = dict.fromkeys(columns)
        for key, val in item.items():
            if isinstance(val, Mapping):
                for sub_key, sub_val in val.items():
                    name = f"{key}_{sub_key}"
                    if name not in top_level:
                        row[name] = sub_val
            elif key in top_level:
                row[key] = val
        rows.append(row)
    return FlatTable(columns, rows)


def normalize_items(content, key):
    """
    Items stored under ``key``: a list as-is, or the values of an id-keyed map.
    Returns None when there is nothing list-like under the key.
    """
    val = content.get(key) if isinstance(content, Mapping) else None
    if isinstance(val, Mapping):
        return list(val.values())
    if isinstance(val, list):
        return val
    return None


def ensure_json(val):
    """Coerce raw values into JSON-friendly objects."""
    if val is None:
        return None
    if isinstance(val, str):
        try:
            return json.loads(val)
        except ValueError:
            return {"value": val}
    return val


def cast_value(val, col_type=None):
    """Cast a flattened cell into the Python object matching ``col_type``."""
    if val is None or val == "":
        return None

    t = (col_type or "").lower()
    try:
        if "json" in t:
            return json.dumps(ensure_json(val))
        if "bool" in t:
            return val if isinstance(val, bool) else str(val).lower() in ("true", "t", "yes", "1")
        if "int" in t:
            return int(val)
        if any(x in t for x in ("decimal", "numeric")):
            return decimal.Decimal(str(val))
        if any(x in t for x in ("float", "double", "real")):
            return float(val)
        if "timestamp" in t:
            return val if isinstance(val, datetime) else dateutil_parser.parse(str(val))
        if "date" in t:
            return val if isinstance(val, date) else dateutil_parser.parse(str(val)).date()
        if t in ("str", "text", "string"):
            return str(val)
        return val
    except (TypeError, ValueError, OverflowError, decimal.InvalidOperation):
        return val
