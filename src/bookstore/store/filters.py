"""
Exact-match filtering over book records.

A filter is a partial record: every key present must equal the record's field,
absent keys are wildcards. A patch is a partial record applied as a field-level
overwrite. Both may be given as plain mappings or as any object exposing the
fields as attributes (e.g. Strawberry input types); ``None`` means "absent".
"""

from collections.abc import Iterable, Mapping
from typing import Any

from ..errors import InvalidInputError
from .models import BookRecord

FILTER_FIELDS = ("id", "title", "author")
PATCH_FIELDS = ("title", "author")


def _present_fields(source: Any, fields: tuple[str, ...], kind: str) -> dict[str, Any]:
    if source is None:
        return {}

    if isinstance(source, Mapping):
        unknown = sorted(set(source) - set(fields))
        if unknown:
            raise InvalidInputError(f"Unknown {kind} field(s): {', '.join(unknown)}")
        items = source.items()
    else:
        items = ((name, getattr(source, name, None)) for name in fields)

    return {name: value for name, value in items if value is not None}


def normalize_filter(filter: Any) -> dict[str, Any]:
    """Return the present, non-null filter fields as a dict."""
    return _present_fields(filter, FILTER_FIELDS, "filter")


def normalize_patch(values: Any) -> dict[str, Any]:
    """Return the present, non-null patch fields as a dict."""
    patch = _present_fields(values, PATCH_FIELDS, "patch")
    empty = [name for name, value in patch.items() if value == ""]
    if empty:
        raise InvalidInputError(f"Field(s) must not be empty: {', '.join(empty)}")
    return patch


def matches(record: BookRecord, filter: Mapping[str, Any]) -> bool:
    """True when every field present in the filter equals the record's field."""
    return all(getattr(record, name) == value for name, value in filter.items())


def select(records: Iterable[BookRecord], filter: Any = None) -> list[BookRecord]:
    """Records matching the filter, in their original order."""
    criteria = normalize_filter(filter)
    if not criteria:
        return list(records)
    return [record for record in records if matches(record, criteria)]
