"""Filter selection model held in the UI's session state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from gallery_ui.config import DEFAULT_PAGE_SIZE


@dataclass
class FilterSelection:
    """
    Filters the user picked, keyed by category.

    Each category maps display labels to upstream identifiers, e.g.
    {"medium": {"oil": 2028390, "acrylic": 54321}}. Categories keep the
    order in which they were first selected.
    """

    size: int = DEFAULT_PAGE_SIZE
    categories: dict[str, dict[str, int]] = field(default_factory=dict)

    def select(self, category: str, label: str, identifier: int) -> None:
        self.categories.setdefault(category, {})[label] = identifier

    def deselect(self, category: str, label: str) -> None:
        """Drop one value; the category goes away with its last value."""
        values = self.categories.get(category)
        if not values:
            return
        values.pop(label, None)
        if not values:
            del self.categories[category]

    def set_category(self, category: str, values: dict[str, int]) -> None:
        """Replace all values of a category at once (e.g. from a multiselect)."""
        if values:
            self.categories[category] = dict(values)
        else:
            self.categories.pop(category, None)

    def clear(self) -> None:
        self.categories.clear()

    def to_dict(self) -> dict[str, Any]:
        """Plain mapping form, "size" first, as consumed by the query encoder."""
        selection: dict[str, Any] = {"size": self.size}
        for category, values in self.categories.items():
            selection[category] = dict(values)
        return selection
