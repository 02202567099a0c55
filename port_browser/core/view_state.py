from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Optional, Tuple

from port_browser.core.columns import DISPLAY_COLUMNS, is_display_column, is_filterable_column
from port_browser.core.exceptions import UnknownColumnError
from port_browser.core.pagination import has_next, has_previous

ROWS_PER_PAGE = 10


def toggle_column(visible: Tuple[str, ...], column: str) -> Tuple[str, ...]:
    """
    Hide a visible column, or show a hidden one at the END of the order.

    A column toggled off and back on does not return to its original slot.
    """
    if not is_display_column(column):
        raise UnknownColumnError(column)
    if column in visible:
        return tuple(c for c in visible if c != column)
    return visible + (column,)


@dataclass(frozen=True)
class ViewState:
    """
    Everything the user has chosen for the ports table.

    Fields:

    - search_term: free text matched case-insensitively against every leaf value
    - filters: column -> substring, only for the filterable columns, never empty strings
    - visible_columns: rendered columns in display order (may be empty)
    - active_filter_column: dropdown currently being interacted with, if any
    - current_page: 1-based page; not clamped when the result set shrinks

    Every transition returns a new ViewState.
    """

    search_term: str = ""
    filters: Dict[str, str] = field(default_factory=dict)
    visible_columns: Tuple[str, ...] = DISPLAY_COLUMNS
    active_filter_column: Optional[str] = None
    current_page: int = 1
    rows_per_page: int = field(default=ROWS_PER_PAGE, init=False)

    # ---------------------------------------------------------
    # Transitions
    # ---------------------------------------------------------
    def with_search(self, term: Optional[str]) -> ViewState:
        return replace(self, search_term=term or "")

    def with_filter(self, column: str, value: Optional[str]) -> ViewState:
        if not is_filterable_column(column):
            raise UnknownColumnError(column)
        filters = dict(self.filters)
        if value:
            filters[column] = str(value)
        else:
            filters.pop(column, None)
        return replace(self, filters=filters, active_filter_column=column)

    def reset_filter(self, column: str) -> ViewState:
        filters = {k: v for k, v in self.filters.items() if k != column}
        return replace(self, filters=filters)

    def with_active_filter_column(self, column: Optional[str]) -> ViewState:
        if column is not None and not is_filterable_column(column):
            raise UnknownColumnError(column)
        return replace(self, active_filter_column=column)

    def toggle_column(self, column: str) -> ViewState:
        return replace(self, visible_columns=toggle_column(self.visible_columns, column))

    def go_to_page(self, page: int) -> ViewState:
        return replace(self, current_page=max(1, int(page)))

    def next_page(self, total_pages: int) -> ViewState:
        if not has_next(self.current_page, total_pages):
            return self
        return replace(self, current_page=self.current_page + 1)

    def previous_page(self) -> ViewState:
        if not has_previous(self.current_page):
            return self
        return replace(self, current_page=self.current_page - 1)

    # ---------------------------------------------------------
    # Serialisation (dcc.Store)
    # ---------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "search_term": self.search_term,
            "filters": dict(self.filters),
            "visible_columns": list(self.visible_columns),
            "active_filter_column": self.active_filter_column,
            "current_page": self.current_page,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ViewState:
        raw_filters = data.get("filters") or {}
        filters = {
            str(k): str(v)
            for k, v in raw_filters.items()
            if is_filterable_column(k) and v
        }

        raw_columns = data.get("visible_columns")
        if raw_columns is None:
            visible = DISPLAY_COLUMNS
        else:
            visible = tuple(dict.fromkeys(c for c in raw_columns if is_display_column(c)))

        active = data.get("active_filter_column")
        if not is_filterable_column(active):
            active = None

        try:
            page = max(1, int(data.get("current_page", 1)))
        except (TypeError, ValueError):
            page = 1

        return cls(
            search_term=str(data.get("search_term") or ""),
            filters=filters,
            visible_columns=visible,
            active_filter_column=active,
            current_page=page,
        )
