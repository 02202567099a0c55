from __future__ import annotations

from port_browser.core.columns import FILTERABLE_COLUMNS
from port_browser.core.pipeline import (
    apply_filters,
    distinct_values,
    options_for,
    resolve_filter_options,
    search,
)
from port_browser.core.records import flatten


def _make_records():
    return [
        {
            "name": "Alpha",
            "city": "Austin",
            "country": "US",
            "province": "Texas",
            "timezone": "America/Chicago",
            "coordinates": [-97.7, 30.2],
            "unlocs": ["USAUS"],
            "code": "1001",
        },
        {
            "name": "Bravo",
            "city": "Boston",
            "country": "US",
            "province": "Massachusetts",
            "timezone": "America/New_York",
            "unlocs": ["USBOS"],
        },
        {
            "name": "Charlie",
            "city": "Calgary",
            "country": "CA",
            "province": "Alberta",
            "timezone": "America/Edmonton",
            "unlocs": [],
        },
        {
            "name": "Delta",
            "city": "Atlanta",
            "country": "US",
            "timezone": "America/New_York",
            "meta": {"aliases": ["Peach Port"]},
        },
    ]


# ---------------------------------------------------------
# search
# ---------------------------------------------------------
def test_search_empty_term_returns_records_unchanged():
    records = _make_records()
    assert search(records, "") == records


def test_search_finds_record_by_every_leaf_value():
    for record in _make_records():
        for leaf in flatten(record).values():
            if leaf is None:
                continue
            assert search([record], str(leaf)) == [record]


def test_search_is_case_insensitive_substring():
    records = _make_records()
    assert [r["name"] for r in search(records, "new_york")] == ["Bravo", "Delta"]
    assert [r["name"] for r in search(records, "ALGAR")] == ["Charlie"]


def test_search_reaches_nested_arrays():
    records = _make_records()
    assert [r["name"] for r in search(records, "peach")] == ["Delta"]
    assert [r["name"] for r in search(records, "usbos")] == ["Bravo"]


def test_search_matches_numbers():
    records = _make_records()
    assert [r["name"] for r in search(records, "-97.7")] == ["Alpha"]


# ---------------------------------------------------------
# apply_filters
# ---------------------------------------------------------
def test_filters_compose_as_intersection():
    records = _make_records()

    both = apply_filters(records, {"country": "US", "city": "A"})
    by_country = apply_filters(records, {"country": "US"})
    by_city = apply_filters(records, {"city": "A"})

    assert both == [r for r in by_country if r in by_city]
    assert [r["name"] for r in both] == ["Alpha", "Delta"]


def test_filter_is_case_sensitive_but_search_is_not():
    records = [{"country": "USA"}]

    assert apply_filters(records, {"country": "usa"}) == []
    assert search(records, "usa") == records


def test_filter_excludes_missing_values():
    records = _make_records()
    result = apply_filters(records, {"province": "a"})
    assert "Delta" not in [r["name"] for r in result]


def test_empty_filter_patterns_are_ignored():
    records = _make_records()
    assert apply_filters(records, {"country": ""}) == records
    assert apply_filters(records, {}) == records


# ---------------------------------------------------------
# options
# ---------------------------------------------------------
def test_distinct_values_keep_first_seen_order():
    records = _make_records()
    assert distinct_values(records, "country") == ["US", "CA"]
    assert distinct_values(records, "province") == ["Texas", "Massachusetts", "Alberta", ""]


def test_active_column_options_come_from_unfiltered_collection():
    records = _make_records()
    filters = {"country": "US"}

    assert options_for("country", records, filters, "country") == ["US", "CA"]


def test_inactive_column_options_are_narrowed_by_all_filters():
    records = _make_records()
    filters = {"country": "US"}

    assert options_for("city", records, filters, "country") == ["Austin", "Boston", "Atlanta"]
    # An inactive column is also narrowed by its own filter
    assert options_for("country", records, filters, None) == ["US"]


def test_resolve_filter_options_covers_every_filterable_column():
    records = _make_records()

    options = resolve_filter_options(records, {"city": "Calgary"}, "city")

    assert list(options) == list(FILTERABLE_COLUMNS)
    assert options["city"] == ["Austin", "Boston", "Calgary", "Atlanta"]
    assert options["country"] == ["CA"]
    assert options["timezone"] == ["America/Edmonton"]


def test_options_on_empty_collection_are_empty():
    options = resolve_filter_options([], {"country": "US"}, "country")
    assert all(values == [] for values in options.values())
