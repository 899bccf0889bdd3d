"""
Main Application Window
=======================
Demo shell around the three entity lists.

Why is this file needed?
------------------------
1. Layout: It puts the location, counter and area lists side by side.
2. Routing: It connects list item actions (edit / delete) and the add buttons
   to the stores; the stores in turn drive the lists through their signals.

Only the first location and its first counter are drilled into.
"""
from __future__ import annotations

import logging
import uuid
from typing import Callable, Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QSplitter,
    QPushButton, QInputDialog, QMessageBox
)

from barinventory.app.state import ListStore
from barinventory.config import VISIBLE_APP_NAME
from barinventory.model.inventory import Area, Counter, Location
from barinventory.view.lists import registry
from barinventory.view.lists.base import EntityListPanel

logger = logging.getLogger(__name__)


def sample_location() -> Location:
    return Location.from_dict({
        "id": "loc-1",
        "name": "Harbour Bar",
        "address": "Pier 4",
        "counters": [
            {"id": "ctr-1", "name": "Main Bar", "areas": [
                {"id": "area-1", "name": "Top Shelf", "display_order": 2},
                {"id": "area-2", "name": "Speed Rail", "display_order": 1},
                {"id": "area-3", "name": "Fridge"},
            ]},
            {"id": "ctr-2", "name": "Cocktail Station", "areas": []},
        ],
    })


class MainWindow(QMainWindow):
    def __init__(self, location: Optional[Location] = None) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1100, 600)

        location = location or sample_location()
        first_counter = location.counters[0] if location.counters else None

        self.stores: dict[str, ListStore] = {
            "locations": ListStore("locations", self),
            "counters": ListStore("counters", self),
            "areas": ListStore("areas", self),
        }
        self.panels: dict[str, EntityListPanel] = {}

        main_widget = QWidget()
        self.setCentralWidget(main_widget)
        main_layout = QVBoxLayout(main_widget)

        splitter = QSplitter(Qt.Horizontal)
        main_layout.addWidget(splitter)

        for key in ("locations", "counters", "areas"):
            splitter.addWidget(self._build_column(key))

        self.stores["locations"].reset([location])
        self.stores["counters"].reset(location.counters)
        self.stores["areas"].reset(first_counter.areas if first_counter else [])

    def _build_column(self, key: str) -> QWidget:
        column = QWidget()
        layout = QVBoxLayout(column)

        panel = registry.create_list(key, column)
        panel.bind_store(self.stores[key])
        panel.edit_requested.connect(self._make_edit_handler(key))
        panel.delete_requested.connect(self._make_delete_handler(key))
        self.panels[key] = panel
        layout.addWidget(panel, 1)

        buttons = QHBoxLayout()
        btn_add = QPushButton(self.tr("Add..."))
        btn_add.clicked.connect(lambda: self._on_add(key))
        buttons.addWidget(btn_add)
        buttons.addStretch()
        layout.addLayout(buttons)
        return column

    # ---- actions ----

    def _on_add(self, key: str) -> None:
        name, ok = QInputDialog.getText(self, self.tr("Add"), self.tr("Name:"))
        if not ok or not name.strip():
            return

        entity_id = f"{key}-{uuid.uuid4().hex[:8]}"
        if key == "locations":
            entity = Location(id=entity_id, name=name.strip())
        elif key == "counters":
            entity = Counter(id=entity_id, name=name.strip())
        else:
            order, ok = QInputDialog.getInt(self, self.tr("Add"), self.tr("Display order (0 = none):"), 0, 0, 999)
            entity = Area(id=entity_id, name=name.strip(), display_order=(order or None) if ok else None)

        self.stores[key].add(entity)
        logger.info(f"Added {key} entry '{entity.name}'")

    def _make_edit_handler(self, key: str) -> Callable[[object], None]:
        def handler(entity) -> None:
            name, ok = QInputDialog.getText(self, self.tr("Edit"), self.tr("Name:"), text=entity.name)
            if not ok or not name.strip():
                return
            entity.name = name.strip()
            if isinstance(entity, Area):
                order, ok = QInputDialog.getInt(
                    self, self.tr("Edit"), self.tr("Display order (0 = none):"),
                    entity.display_order or 0, 0, 999
                )
                if ok:
                    entity.display_order = order or None
            self.stores[key].update(entity)
        return handler

    def _make_delete_handler(self, key: str) -> Callable[[str, str], None]:
        def handler(entity_id: str, label: str) -> None:
            answer = QMessageBox.question(
                self, self.tr("Delete"), self.tr("Really delete '{0}'?").format(label)
            )
            if answer == QMessageBox.StandardButton.Yes:
                self.stores[key].remove(entity_id)
        return handler
