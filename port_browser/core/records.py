from __future__ import annotations

from typing import Any, Dict, Iterator, Mapping, Optional, Sequence, Tuple, Union

# A port record is the JSON object of one port as delivered by the data source.
# Values are strings, numbers, nested records or sequences (e.g. alternate UN/LOCODEs).
Scalar = Union[str, int, float, bool, None]
FieldValue = Union[Scalar, Mapping[str, Any], Sequence[Any]]
PortRecord = Mapping[str, FieldValue]
RecordCollection = Tuple[PortRecord, ...]

DISPLAY_SEPARATOR = ", "


def _is_container(value: Any) -> bool:
    if isinstance(value, (str, bytes)):
        return False
    return isinstance(value, (Mapping, list, tuple))


def iter_leaves(value: Any, prefix: str = "") -> Iterator[Tuple[str, Scalar]]:
    """
    Walk a record depth-first and yield (dotted_path, leaf) pairs.

    Mappings recurse on their keys, sequences on their indices, so an array
    of codes yields one leaf per element rather than a single atom.
    """
    if isinstance(value, Mapping):
        items = ((str(k), v) for k, v in value.items())
    else:
        items = ((str(i), v) for i, v in enumerate(value))

    for key, child in items:
        path = f"{prefix}.{key}" if prefix else key
        if _is_container(child):
            yield from iter_leaves(child, path)
        else:
            yield path, child


def flatten(record: PortRecord) -> Dict[str, Scalar]:
    """Flatten a nested record into an ordered {dotted.path: leaf} mapping."""
    return dict(iter_leaves(record))


def scalar_text(value: Scalar) -> Optional[str]:
    """
    String form of a leaf used for matching. None has no text.

    Integral floats print without the trailing ".0" so that 12.0 and 12
    match the same query.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def value_text(value: FieldValue) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, Mapping):
        return DISPLAY_SEPARATOR.join(
            t for t in (value_text(v) for v in value.values()) if t is not None
        )
    if _is_container(value):
        return DISPLAY_SEPARATOR.join(
            t for t in (value_text(v) for v in value) if t is not None
        )
    return scalar_text(value)


def field_text(record: PortRecord, column: str) -> Optional[str]:
    """Text of a top-level field, or None when the field is missing or null."""
    return value_text(record.get(column))


def display_text(record: PortRecord, column: str) -> str:
    # Missing fields render as empty cells.
    return field_text(record, column) or ""


def records_from_payload(payload: Mapping[str, Any]) -> Tuple[RecordCollection, int]:
    """
    Build the record collection from the values of a JSON object.

    Returns the collection and the number of entries skipped because they
    were not objects.
    """
    records = tuple(v for v in payload.values() if isinstance(v, Mapping))
    return records, len(payload) - len(records)
