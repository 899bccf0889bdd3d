from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from PySide6.QtCore import QObject, Signal

logger = logging.getLogger(__name__)


class ListStore(QObject):
    """
    In-memory store for one kind of entity, with signals for list panels.

    Entities are any objects with an ``id`` attribute. The store keeps them
    unordered; ordering is the business of the list that displays them.
    """
    records_reset = Signal(object)   # list of entities
    record_added = Signal(object)
    record_updated = Signal(object)
    record_removed = Signal(str)

    def __init__(self, name: str = "store", parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self.name = name
        self._items: dict[str, Any] = {}

    def items(self) -> list[Any]:
        return list(self._items.values())

    def get(self, entity_id: str) -> Optional[Any]:
        return self._items.get(entity_id)

    def __len__(self) -> int:
        return len(self._items)

    def reset(self, entities: Optional[Iterable[Any]]) -> None:
        self._items = {e.id: e for e in entities or []}
        logger.info(f"{self.name}: reset with {len(self._items)} item(s)")
        self.records_reset.emit(self.items())

    def add(self, entity: Any) -> None:
        if entity.id in self._items:
            raise ValueError(f"Entity with id '{entity.id}' already exists.")
        self._items[entity.id] = entity
        self.record_added.emit(entity)

    def update(self, entity: Any) -> None:
        if entity.id not in self._items:
            raise ValueError(f"Entity with id '{entity.id}' not found.")
        self._items[entity.id] = entity
        self.record_updated.emit(entity)

    def remove(self, entity_id: str) -> None:
        if self._items.pop(entity_id, None) is None:
            raise ValueError(f"Entity with id '{entity_id}' not found.")
        self.record_removed.emit(entity_id)
