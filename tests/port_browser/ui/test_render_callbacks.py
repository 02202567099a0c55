from __future__ import annotations

from port_browser.core.columns import FILTERABLE_COLUMNS
from port_browser.core.popups import PopupState
from port_browser.core.view_model import build_table_view
from port_browser.core.view_state import ViewState
from port_browser.ui.callbacks.callbacks_popups import apply_popup_event
from port_browser.ui.callbacks.callbacks_render import render_outputs
from port_browser.ui.helpers import filter_dropdown_options, status_text
from port_browser.ui.ids import IDs, page_button_id
from port_browser.ui.layout.build_controls import BACKDROP_STYLE, HIDDEN, build_controls, popup_styles
from port_browser.ui.layout.build_pagination import build_pagination


def _make_records():
    return (
        {"name": "Ajman", "city": "Ajman", "country": "UAE", "unlocs": ["AEAJM", "AEQAJ"]},
        {"name": "Abu Dhabi", "city": "Abu Dhabi", "country": "UAE", "province": ""},
        {"name": "Halifax", "city": "Halifax", "country": "Canada", "province": "Nova Scotia"},
    )


def test_filter_dropdown_options_drop_empty_values():
    assert filter_dropdown_options(["UAE", "", "Canada"]) == [
        {"label": "UAE", "value": "UAE"},
        {"label": "Canada", "value": "Canada"},
    ]


def test_render_outputs_for_initial_state():
    outputs = render_outputs(_make_records(), ViewState())

    assert outputs["prev_disabled"] is True
    assert outputs["next_disabled"] is True
    assert outputs["status"] == "3 ports · page 1 of 1"
    assert len(outputs["page_buttons"]) == 1
    assert set(outputs["options"]) == set(FILTERABLE_COLUMNS)
    assert outputs["options"]["province"] == [{"label": "Nova Scotia", "value": "Nova Scotia"}]
    assert all(style == HIDDEN for style in outputs["reset_styles"].values())


def test_render_outputs_show_reset_for_active_filters():
    state = ViewState().with_filter("country", "Canada")

    outputs = render_outputs(_make_records(), state)

    assert outputs["reset_styles"]["country"] == {}
    assert outputs["reset_styles"]["city"] == HIDDEN
    assert outputs["options"]["city"] == [{"label": "Halifax", "value": "Halifax"}]
    assert [o["value"] for o in outputs["options"]["country"]] == ["UAE", "Canada"]


def test_rendered_table_has_upper_case_headers_and_joined_arrays():
    state = ViewState()
    for column in ("city", "country", "province", "timezone", "coordinates", "code"):
        state = state.toggle_column(column)

    table = render_outputs(_make_records(), state)["table"]
    header, body = table.children

    assert [th.children for th in header.children.children] == ["NAME", "UNLOCS"]
    assert [td.children for td in body.children[0].children] == ["Ajman", "AEAJM, AEQAJ"]


def test_status_text_for_empty_result():
    view = build_table_view((), ViewState())
    assert status_text(view) == "0 ports"


def test_popup_events_and_backdrop():
    popups = apply_popup_event(PopupState(), IDs.Control.FILTER_POPUP_BTN)
    backdrop, columns, filters = popup_styles(popups)
    assert backdrop != HIDDEN
    assert columns == HIDDEN
    assert filters != HIDDEN

    popups = apply_popup_event(popups, IDs.Control.POPUP_BACKDROP)
    assert popups == PopupState()
    assert popup_styles(popups) == (HIDDEN, HIDDEN, HIDDEN)

    popups = apply_popup_event(popups, IDs.Control.COLUMN_SELECTOR_BTN)
    assert popups.column_selector is True


def test_selected_filter_value_stays_in_its_dropdown():
    state = (
        ViewState()
        .with_filter("city", "Halifax")
        .with_filter("country", "UAE")
    )

    outputs = render_outputs(_make_records(), state)

    assert outputs["options"]["city"] == [{"label": "Halifax", "value": "Halifax"}]
    assert filter_dropdown_options(["UAE"], "Canada")[-1] == {"label": "Canada", "value": "Canada"}


def test_paging_clicks_close_open_popups():
    open_filters = PopupState(filter_popup=True)

    assert apply_popup_event(open_filters, IDs.Control.NEXT_PAGE_BTN, 1) == PopupState()
    assert apply_popup_event(open_filters, IDs.Control.PREV_PAGE_BTN, 1) == PopupState()
    assert apply_popup_event(open_filters, page_button_id(3), 1) == PopupState()

    # Page buttons re-rendered after a page change fire without a click
    assert apply_popup_event(open_filters, page_button_id(3), None) == open_filters
    assert apply_popup_event(open_filters, page_button_id(3), 0) == open_filters


def test_toolbar_and_pagination_sit_above_backdrop():
    toolbar = build_controls(ViewState()).children[1]
    pagination = build_pagination()

    assert toolbar.style["zIndex"] > BACKDROP_STYLE["zIndex"]
    assert pagination.style["zIndex"] > BACKDROP_STYLE["zIndex"]
