from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QWidget, QVBoxLayout, QGroupBox

from barinventory.app.state import ListStore
from barinventory.controller.synchronizer import ViewSynchronizer
from barinventory.model.records import Record
from barinventory.view.widgets.record_item import RecordItemWidget
from barinventory.view.widgets.record_list import RecordListWidget

logger = logging.getLogger(__name__)


class EntityListPanel(QWidget):
    """
    Base class for a sorted entity list (locations, counters, areas).

    Subclasses set KEY, TITLE and PLACEHOLDER and may override `to_record`.
    The panel owns its own synchronizer, so several lists never share
    representations.
    """
    KEY: str = "base"  # Override in subclass
    TITLE: str = "Entries"
    PLACEHOLDER: str = "No entries yet."
    SHOW_RANK: bool = False

    edit_requested = Signal(object)      # entity
    delete_requested = Signal(str, str)  # (entity id, label)

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._store: Optional[ListStore] = None

        box = QGroupBox(self.tr(self.TITLE), self)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(box)

        inner = QVBoxLayout(box)
        self.list_widget = RecordListWidget(self.tr(self.PLACEHOLDER), box)
        inner.addWidget(self.list_widget)

        self.sync = ViewSynchronizer(self.list_widget, self._create_item, name=self.KEY)

    # ---- entity -> record ----

    def to_record(self, entity: Any) -> Record:
        return entity.to_record()

    def _create_item(self, record: Record) -> RecordItemWidget:
        item = RecordItemWidget(record, show_rank=self.SHOW_RANK)
        item.edit_requested.connect(lambda r: self.edit_requested.emit(r.payload))
        item.delete_requested.connect(self.delete_requested)
        return item

    # ---- list operations ----

    def set_entities(self, entities: Optional[Iterable[Any]]) -> None:
        self.sync.set_records([self.to_record(e) for e in entities or []])

    def add_entity(self, entity: Any) -> None:
        self.sync.add_record(self.to_record(entity))

    def update_entity(self, entity: Any) -> None:
        self.sync.update_record(self.to_record(entity))

    def remove_entity(self, entity_id: str) -> None:
        self.sync.remove_by_id(entity_id)

    def item_widgets(self) -> list[RecordItemWidget]:
        return self.list_widget.mounted_widgets()

    # ---- store binding ----

    def bind_store(self, store: ListStore) -> None:
        """Follow `store`: its signals drive this list from now on."""
        if self._store is not None:
            self.unbind_store()
        self._store = store
        store.records_reset.connect(self.set_entities)
        store.record_added.connect(self.add_entity)
        store.record_updated.connect(self.update_entity)
        store.record_removed.connect(self.remove_entity)
        self.set_entities(store.items())
        logger.debug(f"{self.KEY}: bound to store '{store.name}'")

    def unbind_store(self) -> None:
        if self._store is None:
            return
        self._store.records_reset.disconnect(self.set_entities)
        self._store.record_added.disconnect(self.add_entity)
        self._store.record_updated.disconnect(self.update_entity)
        self._store.record_removed.disconnect(self.remove_entity)
        self._store = None
