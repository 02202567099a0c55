from __future__ import annotations

from typing import Iterable, List, Optional

from port_browser.core.view_model import TableView


def filter_dropdown_options(values: Iterable[str], selected: Optional[str] = None) -> List[dict]:
    """
    Dropdown options from resolved values. Empty values never become options.

    The current selection is kept as an option even when other filters have
    narrowed it away, so the dropdown never drops its own value.
    """
    kept = [v for v in values if v]
    if selected and selected not in kept:
        kept.append(selected)
    return [{"label": v, "value": v} for v in kept]


def status_text(view: TableView) -> str:
    noun = "port" if view.filtered_count == 1 else "ports"
    if view.total_pages == 0:
        return f"0 {noun}"
    return f"{view.filtered_count} {noun} · page {view.current_page} of {view.total_pages}"


def column_label(column: str) -> str:
    return column.upper()
