"""
Configuration & Constants
=========================
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It keeps user-facing texts and identifiers out of the widgets.
2. Environment: Logging can be tuned without touching the code
   (BARINVENTORY_LOG_LEVEL=DEBUG, BARINVENTORY_LOG_FILE=app.log).

Exports:
    PLACEHOLDERS (dict): Empty-list message per list kind.
    LOG_LEVEL (int): Logging level for the 'barinventory' namespace.
    LOG_FILE (str | None): Optional log file path.
"""
import logging
import os

ORG_ID = "barinventory"
APP_ID = "barinventory"
VISIBLE_APP_NAME = "Bar Inventory"

PLACEHOLDERS: dict[str, str] = {
    "locations": "No locations yet. Add a new location.",
    "counters": "No counters recorded for this location yet.",
    "areas": "No areas recorded for this counter yet.",
}


def get_log_level(default: int = logging.INFO) -> int:
    """Resolve BARINVENTORY_LOG_LEVEL (name or number); unknown values fall back to `default`."""
    raw = os.environ.get("BARINVENTORY_LOG_LEVEL", "").strip()
    if not raw:
        return default
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    return level if isinstance(level, int) else default


LOG_LEVEL: int = get_log_level()
LOG_FILE: str | None = os.environ.get("BARINVENTORY_LOG_FILE") or None
