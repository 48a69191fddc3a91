"""
Uniform field access over mapping and attribute records.
"""

from typing import Any, Iterable, Mapping


class _Missing:
    """Marker for a field the record does not carry."""

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


def get_field(record: Any, field: str) -> Any:
    """Read ``field`` from a dict-like or attribute record, ``MISSING`` if absent."""
    if isinstance(record, Mapping):
        return record.get(field, MISSING)
    return getattr(record, field, MISSING)


def has_field(records: Iterable[Any], field: str) -> bool:
    """True when at least one record carries ``field``."""
    for record in records:
        model_fields = getattr(type(record), "model_fields", None)
        if model_fields is not None:
            return field in model_fields or isinstance(getattr(type(record), field, None), property)
        if get_field(record, field) is not MISSING:
            return True
    return False
