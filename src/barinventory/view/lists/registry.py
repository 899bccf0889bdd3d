from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtWidgets import QWidget

if TYPE_CHECKING:
    from barinventory.view.lists.base import EntityListPanel

_REGISTRY: dict[str, type[EntityListPanel]] = {}


def register_list(cls: type[EntityListPanel]) -> type[EntityListPanel]:
    """Class decorator to register a list panel by its KEY."""
    key = getattr(cls, "KEY", None)
    if not key or key == "base":
        raise ValueError(f"{cls.__name__} must define KEY")
    _REGISTRY[key] = cls
    return cls


def create_list(key: str, parent: QWidget | None = None) -> EntityListPanel:
    cls = _REGISTRY.get(key)
    if not cls:
        raise KeyError(f"No list registered for key '{key}'")
    return cls(parent)


def list_keys() -> list[str]:
    return list(_REGISTRY.keys())
