from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class PopupState:
    """
    Which control popups are open. Independent of the data pipeline.

    While any popup is open a page-wide backdrop is mounted underneath it;
    a click that lands on the backdrop (i.e. outside the popup) dismisses
    every popup and unmounts the backdrop again. The toolbar and pagination
    sit above the backdrop so their clicks still act, and also dismiss.
    """

    column_selector: bool = False
    filter_popup: bool = False

    @property
    def any_open(self) -> bool:
        return self.column_selector or self.filter_popup

    # Opening one popup closes the other.
    def toggle_column_selector(self) -> PopupState:
        return PopupState(column_selector=not self.column_selector)

    def toggle_filter_popup(self) -> PopupState:
        return PopupState(filter_popup=not self.filter_popup)

    def dismiss_all(self) -> PopupState:
        return PopupState()

    def to_dict(self) -> Dict[str, Any]:
        return {"column_selector": self.column_selector, "filter_popup": self.filter_popup}

    @classmethod
    def from_dict(cls, data: Dict[str, Any] | None) -> PopupState:
        data = data or {}
        return cls(
            column_selector=bool(data.get("column_selector", False)),
            filter_popup=bool(data.get("filter_popup", False)),
        )
