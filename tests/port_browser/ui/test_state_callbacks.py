from __future__ import annotations

from port_browser.core.columns import DISPLAY_COLUMNS
from port_browser.core.view_state import ViewState
from port_browser.ui.callbacks.callbacks_state import apply_ui_event, apply_ui_events, toggled_column
from port_browser.ui.callbacks.callbacks_utils import try_parse_view_state, view_state_or_default
from port_browser.ui.ids import (
    IDs,
    filter_reset_id,
    filter_select_id,
    filter_wrapper_id,
    page_button_id,
)


def _make_records(n: int = 25):
    return tuple(
        {"name": f"Port {i}", "country": "US" if i < 15 else "CA"}
        for i in range(n)
    )


def test_toggled_column_finds_the_changed_checkbox():
    visible = list(DISPLAY_COLUMNS)
    assert toggled_column(visible, [c for c in visible if c != "code"]) == "code"
    assert toggled_column(["name"], ["name", "city"]) == "city"
    assert toggled_column(["name"], ["name"]) is None
    assert toggled_column(["name"], None) == "name"


def test_search_event_updates_term_only():
    state = ViewState().go_to_page(3)

    new_state = apply_ui_event(state, IDs.Control.SEARCH_INPUT, _make_records(), search_value="Port 1")

    assert new_state.search_term == "Port 1"
    assert new_state.current_page == 3


def test_checklist_event_appends_reshown_column():
    state = ViewState().toggle_column("city")

    new_state = apply_ui_event(
        state,
        IDs.Control.COLUMN_CHECKLIST,
        _make_records(),
        checklist_value=list(DISPLAY_COLUMNS),
    )

    assert new_state.visible_columns[-1] == "city"


def test_filter_events():
    records = _make_records()
    state = ViewState()

    state = apply_ui_event(state, filter_wrapper_id("city"), records)
    assert state.active_filter_column == "city"

    state = apply_ui_event(
        state, filter_select_id("country"), records, filter_values={"country": "CA"},
    )
    assert state.filters == {"country": "CA"}
    assert state.active_filter_column == "country"

    state = apply_ui_event(state, filter_reset_id("country"), records)
    assert state.filters == {}


def test_next_page_stops_at_last_filtered_page():
    records = _make_records()
    state = ViewState().with_filter("country", "US")

    state = apply_ui_event(state, IDs.Control.NEXT_PAGE_BTN, records)
    assert state.current_page == 2

    state = apply_ui_event(state, IDs.Control.NEXT_PAGE_BTN, records)
    assert state.current_page == 2

    state = apply_ui_event(state, IDs.Control.PREV_PAGE_BTN, records)
    assert state.current_page == 1


def test_page_button_only_moves_on_real_click():
    records = _make_records()

    unchanged = apply_ui_event(ViewState(), page_button_id(3), records, triggered_value=0)
    assert unchanged.current_page == 1

    moved = apply_ui_event(ViewState(), page_button_id(3), records, triggered_value=1)
    assert moved.current_page == 3


def test_unknown_trigger_keeps_state():
    state = ViewState().with_search("x")
    assert apply_ui_event(state, "something-else", _make_records()) == state


def test_view_state_parsing_falls_back_to_default():
    assert try_parse_view_state(None) is None
    assert try_parse_view_state("nope") is None
    assert view_state_or_default(None) == ViewState()

    state = ViewState().with_filter("city", "Port")
    assert try_parse_view_state(state.to_dict()) == state


def test_option_click_fires_wrapper_and_value_together():
    records = _make_records()

    state = apply_ui_events(
        ViewState(),
        [(filter_wrapper_id("country"), 1), (filter_select_id("country"), "CA")],
        records,
        filter_values={"country": "CA"},
    )

    assert state.filters == {"country": "CA"}
    assert state.active_filter_column == "country"


def test_clear_button_then_wrapper_click_removes_filter():
    records = _make_records()
    state = ViewState().with_filter("country", "CA").with_active_filter_column("city")

    state = apply_ui_events(
        state,
        [(filter_select_id("country"), None), (filter_wrapper_id("country"), 2)],
        records,
        filter_values={"country": None},
    )

    assert state.filters == {}
    assert state.active_filter_column == "country"


def test_single_wrapper_click_keeps_existing_filter():
    records = _make_records()
    state = ViewState().with_filter("country", "CA")

    state = apply_ui_events(
        state,
        [(filter_wrapper_id("city"), 1)],
        records,
        filter_values={"country": "CA"},
    )

    assert state.filters == {"country": "CA"}
    assert state.active_filter_column == "city"
