from __future__ import annotations

__all__ = ["IDs", "filter_select_id", "filter_wrapper_id", "filter_reset_id", "page_button_id"]


class IDs:
    class Store:
        VIEW_STATE = "view-state"
        POPUP_STATE = "popup-state"

    class Control:
        # Toolbar
        SEARCH_INPUT = "search-input"
        COLUMN_SELECTOR_BTN = "column-selector-btn"
        FILTER_POPUP_BTN = "filter-popup-btn"

        # Popups
        POPUP_BACKDROP = "popup-backdrop"
        COLUMN_SELECTOR_POPUP = "column-selector-popup"
        COLUMN_CHECKLIST = "column-checklist"
        FILTER_POPUP = "filter-popup"

        # Table + pagination
        PORTS_TABLE = "ports-table"
        PREV_PAGE_BTN = "prev-page-btn"
        NEXT_PAGE_BTN = "next-page-btn"
        PAGE_BUTTONS = "page-buttons"

        # Status bar
        STATUS_BAR = "status-bar"

    class Pattern:
        # pattern-matching "type" strings
        PAGE_BUTTON = "page-button"


def filter_select_id(column: str) -> str:
    return f"filter-select-{column}"


def filter_wrapper_id(column: str) -> str:
    return f"filter-wrapper-{column}"


def filter_reset_id(column: str) -> str:
    return f"filter-reset-{column}"


def page_button_id(page: int) -> dict:
    return {"type": IDs.Pattern.PAGE_BUTTON, "index": page}
