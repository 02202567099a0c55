from __future__ import annotations

from typing import Tuple

# Display order of the table when nothing has been toggled.
DISPLAY_COLUMNS: Tuple[str, ...] = (
    "name",
    "city",
    "country",
    "province",
    "timezone",
    "coordinates",
    "code",
    "unlocs",
)

# Columns that get a dropdown in the filter popup, in popup order.
FILTERABLE_COLUMNS: Tuple[str, ...] = ("country", "city", "province", "timezone")


def is_display_column(column: object) -> bool:
    return column in DISPLAY_COLUMNS


def is_filterable_column(column: object) -> bool:
    return column in FILTERABLE_COLUMNS
