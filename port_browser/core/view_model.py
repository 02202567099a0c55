from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Sequence, Tuple

from port_browser.core.pagination import has_next, has_previous, paginate, pagination_window
from port_browser.core.pipeline import apply_filters, resolve_filter_options, search
from port_browser.core.records import PortRecord, display_text
from port_browser.core.view_state import ViewState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TableView:
    """
    Everything the table, pagination bar and filter popup need for one render.
    """
    rows: List[PortRecord]
    columns: Tuple[str, ...]
    current_page: int
    total_pages: int
    filtered_count: int
    page_window: List[int]
    has_previous: bool
    has_next: bool
    filter_options: Dict[str, List[str]] = field(default_factory=dict)

    def cells(self) -> List[List[str]]:
        return [[display_text(row, c) for c in self.columns] for row in self.rows]


def filtered_records(records: Sequence[PortRecord], state: ViewState) -> List[PortRecord]:
    # Search narrows first, then the column filters.
    return apply_filters(search(records, state.search_term), state.filters)


def build_table_view(records: Sequence[PortRecord], state: ViewState) -> TableView:
    """
    Run the full pipeline for one ViewState: search -> filters -> page,
    plus the filter dropdown options. Nothing is cached between calls.
    """
    matched = filtered_records(records, state)
    page = paginate(matched, state.current_page, state.rows_per_page)
    options = resolve_filter_options(records, state.filters, state.active_filter_column)

    logger.debug(
        "table_view_built",
        extra={
            "n_records": len(records),
            "n_matched": len(matched),
            "page": state.current_page,
            "total_pages": page.total_pages,
        },
    )

    return TableView(
        rows=page.rows,
        columns=state.visible_columns,
        current_page=state.current_page,
        total_pages=page.total_pages,
        filtered_count=len(matched),
        page_window=pagination_window(state.current_page, page.total_pages),
        has_previous=has_previous(state.current_page),
        has_next=has_next(state.current_page, page.total_pages),
        filter_options=options,
    )
