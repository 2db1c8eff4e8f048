"""Shared serialization utilities for sinks."""

from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any


def to_dict(obj: Any) -> dict:
    """Convert object to dictionary."""
    if is_dataclass(obj) and not isinstance(obj, type):
        return dataclass_to_dict(obj)
    elif isinstance(obj, dict):
        return obj
    else:
        return {"value": str(obj)}


def dataclass_to_dict(obj: Any, drop_empty: bool = True) -> dict:
    """Convert dataclass to dict, recursing into nested dataclasses.

    ``None`` values are dropped when ``drop_empty`` is set so that sparse
    address records stay readable.
    """
    result = {}
    for f in fields(obj):
        value = serialize_value(getattr(obj, f.name))
        if drop_empty and value is None:
            continue
        result[f.name] = value
    return result


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if is_dataclass(value) and not isinstance(value, type):
        return dataclass_to_dict(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value
