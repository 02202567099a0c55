from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from port_browser.core.columns import FILTERABLE_COLUMNS
from port_browser.core.records import PortRecord, field_text, iter_leaves, scalar_text


# ---------------------------------------------------------
# Search (case-insensitive, any flattened leaf)
# ---------------------------------------------------------
def matches_search(record: PortRecord, term: str) -> bool:
    needle = term.lower()
    for _, leaf in iter_leaves(record):
        text = scalar_text(leaf)
        if text is not None and needle in text.lower():
            return True
    return False


def search(records: Iterable[PortRecord], term: str) -> List[PortRecord]:
    if not term:
        return list(records)
    return [r for r in records if matches_search(r, term)]


# ---------------------------------------------------------
# Column filters (case-sensitive substring, AND-composed)
# ---------------------------------------------------------
def matches_filter(record: PortRecord, column: str, pattern: str) -> bool:
    text = field_text(record, column)
    return text is not None and pattern in text


def apply_filters(
        records: Iterable[PortRecord],
        filters: Mapping[str, str],
) -> List[PortRecord]:
    filtered = list(records)
    for column, pattern in filters.items():
        if not pattern:
            continue
        filtered = [r for r in filtered if matches_filter(r, column, pattern)]
    return filtered


# ---------------------------------------------------------
# Filter dropdown options
# ---------------------------------------------------------
def distinct_values(records: Iterable[PortRecord], column: str) -> List[str]:
    """Distinct field texts in first-seen order. Missing values count as ""."""
    return list(dict.fromkeys(field_text(r, column) or "" for r in records))


def options_for(
        column: str,
        records: Sequence[PortRecord],
        filters: Mapping[str, str],
        active_column: Optional[str],
) -> List[str]:
    """
    Candidate values for a column's dropdown.

    The dropdown being interacted with sees every value in the collection so
    it can still switch away from its own selection; every other dropdown is
    narrowed by all active filters, its own included.
    """
    if column == active_column:
        return distinct_values(records, column)
    return distinct_values(apply_filters(records, filters), column)


def resolve_filter_options(
        records: Sequence[PortRecord],
        filters: Mapping[str, str],
        active_column: Optional[str],
) -> Dict[str, List[str]]:
    return {
        column: options_for(column, records, filters, active_column)
        for column in FILTERABLE_COLUMNS
    }
