from __future__ import annotations

from barinventory.config import PLACEHOLDERS
from barinventory.view.lists.base import EntityListPanel
from barinventory.view.lists.registry import register_list


@register_list
class AreaListPanel(EntityListPanel):
    """Areas of one counter, ordered by display order and then by name."""
    KEY = "areas"
    TITLE = "Areas"
    PLACEHOLDER = PLACEHOLDERS["areas"]
    SHOW_RANK = True
