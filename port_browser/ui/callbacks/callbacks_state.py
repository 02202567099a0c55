from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Iterable, Optional, Sequence, Tuple

import dash
from dash import ALL, Input, Output, State, exceptions

from port_browser.core.columns import DISPLAY_COLUMNS, FILTERABLE_COLUMNS
from port_browser.core.pagination import total_pages
from port_browser.core.records import PortRecord
from port_browser.core.view_model import filtered_records
from port_browser.core.view_state import ViewState
from port_browser.ui.callbacks.callbacks_utils import view_state_or_default
from port_browser.ui.ids import IDs, filter_reset_id, filter_select_id, filter_wrapper_id

if TYPE_CHECKING:
    from port_browser.ui.context import AppContext

logger = logging.getLogger(__name__)


def toggled_column(previous: Iterable[str], current: Optional[Iterable[str]]) -> Optional[str]:
    """The single column whose checkbox changed between two checklist values."""
    before, after = set(previous), set(current or [])
    changed = [c for c in DISPLAY_COLUMNS if (c in before) != (c in after)]
    return changed[0] if changed else None


def apply_ui_event(
        state: ViewState,
        triggered_id: Any,
        records: Sequence[PortRecord],
        *,
        triggered_value: Any = None,
        search_value: Optional[str] = None,
        filter_values: Optional[Dict[str, Optional[str]]] = None,
        checklist_value: Optional[Iterable[str]] = None,
) -> ViewState:
    """
    Pure transition: map the control that fired to a new ViewState.

    Nothing here resets current_page; only the pagination controls move it.
    """
    if triggered_id == IDs.Control.SEARCH_INPUT:
        return state.with_search(search_value)

    if triggered_id == IDs.Control.COLUMN_CHECKLIST:
        column = toggled_column(state.visible_columns, checklist_value)
        return state.toggle_column(column) if column else state

    if triggered_id == IDs.Control.PREV_PAGE_BTN:
        return state.previous_page()

    if triggered_id == IDs.Control.NEXT_PAGE_BTN:
        n_pages = total_pages(len(filtered_records(records, state)), state.rows_per_page)
        return state.next_page(n_pages)

    if isinstance(triggered_id, dict) and triggered_id.get("type") == IDs.Pattern.PAGE_BUTTON:
        # Freshly rendered page buttons report n_clicks=0; only real clicks move.
        if not triggered_value:
            return state
        return state.go_to_page(triggered_id["index"])

    for column in FILTERABLE_COLUMNS:
        if triggered_id == filter_select_id(column):
            return state.with_filter(column, (filter_values or {}).get(column))
        if triggered_id == filter_reset_id(column):
            return state.reset_filter(column)
        if triggered_id == filter_wrapper_id(column):
            return state.with_active_filter_column(column)

    return state


def _is_wrapper_click(event_id: Any) -> bool:
    return any(event_id == filter_wrapper_id(c) for c in FILTERABLE_COLUMNS)


def apply_ui_events(
        state: ViewState,
        triggered: Sequence[Tuple[Any, Any]],
        records: Sequence[PortRecord],
        **values: Any,
) -> ViewState:
    """
    Apply every (component_id, value) that fired in one callback.

    Clicking a dropdown option fires both its wrapper (n_clicks) and the
    dropdown (value) together. Wrapper clicks are applied first so the
    selected value always lands; with_filter marks the column active anyway.
    """
    ordered = sorted(triggered, key=lambda event: not _is_wrapper_click(event[0]))
    for event_id, event_value in ordered:
        state = apply_ui_event(state, event_id, records, triggered_value=event_value, **values)
    return state


def register_state_callbacks(app: dash.Dash, ctx: AppContext) -> None:
    # ---------------------------------------------------------
    # UI -> ViewState (canonical)
    # ---------------------------------------------------------
    @app.callback(
        output=dict(
            view_state=Output(IDs.Store.VIEW_STATE, "data"),
            filter_values={c: Output(filter_select_id(c), "value") for c in FILTERABLE_COLUMNS},
        ),
        inputs=dict(
            search_value=Input(IDs.Control.SEARCH_INPUT, "value"),
            filter_values={c: Input(filter_select_id(c), "value") for c in FILTERABLE_COLUMNS},
            resets={c: Input(filter_reset_id(c), "n_clicks") for c in FILTERABLE_COLUMNS},
            wrappers={c: Input(filter_wrapper_id(c), "n_clicks") for c in FILTERABLE_COLUMNS},
            checklist_value=Input(IDs.Control.COLUMN_CHECKLIST, "value"),
            prev_clicks=Input(IDs.Control.PREV_PAGE_BTN, "n_clicks"),
            next_clicks=Input(IDs.Control.NEXT_PAGE_BTN, "n_clicks"),
            page_clicks=Input({"type": IDs.Pattern.PAGE_BUTTON, "index": ALL}, "n_clicks"),
        ),
        state=dict(view_data=State(IDs.Store.VIEW_STATE, "data")),
        prevent_initial_call=True,
    )
    def sync_view_state(
            search_value, filter_values, resets, wrappers, checklist_value,
            prev_clicks, next_clicks, page_clicks, view_data,
    ):
        triggered_id = dash.ctx.triggered_id
        if triggered_id is None:
            raise exceptions.PreventUpdate

        values_by_prop = {t["prop_id"]: t["value"] for t in dash.ctx.triggered}
        triggered = [
            (component_id, values_by_prop.get(prop_id))
            for prop_id, component_id in dash.ctx.triggered_prop_ids.items()
        ]

        state = view_state_or_default(view_data)
        new_state = apply_ui_events(
            state,
            triggered,
            ctx.records,
            search_value=search_value,
            filter_values=filter_values,
            checklist_value=checklist_value,
        )

        logger.debug(
            "view_state_updated",
            extra={"trigger": [str(i) for i, _ in triggered], "page": new_state.current_page},
        )

        return dict(
            view_state=new_state.to_dict(),
            filter_values={c: new_state.filters.get(c) for c in FILTERABLE_COLUMNS},
        )
