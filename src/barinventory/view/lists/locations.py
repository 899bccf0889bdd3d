from __future__ import annotations

from barinventory.config import PLACEHOLDERS
from barinventory.view.lists.base import EntityListPanel
from barinventory.view.lists.registry import register_list


@register_list
class LocationListPanel(EntityListPanel):
    """All locations, ordered by name."""
    KEY = "locations"
    TITLE = "Locations"
    PLACEHOLDER = PLACEHOLDERS["locations"]
