from __future__ import annotations

from barinventory.config import PLACEHOLDERS
from barinventory.view.lists.base import EntityListPanel
from barinventory.view.lists.registry import register_list


@register_list
class CounterListPanel(EntityListPanel):
    """Counters of one location, ordered by name."""
    KEY = "counters"
    TITLE = "Counters"
    PLACEHOLDER = PLACEHOLDERS["counters"]
