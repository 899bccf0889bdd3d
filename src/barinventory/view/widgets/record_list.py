"""
Record List Widget
==================
Qt host surface for a View Synchronizer.

Layout:
    root QVBoxLayout
      - placeholder QLabel          (visible while the list is EMPTY)
      - container QWidget + layout  (exists only while POPULATED)
      - stretch

Representations are plain QWidgets placed into the container layout.
Unmounting detaches the widget and schedules it for deletion.
"""
from __future__ import annotations

from typing import Optional

from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel


class RecordListWidget(QWidget):
    def __init__(self, placeholder_text: str = "", parent: QWidget | None = None) -> None:
        super().__init__(parent)

        self._root = QVBoxLayout(self)
        self._root.setContentsMargins(0, 0, 0, 0)

        self.placeholder = QLabel(placeholder_text, self)
        self.placeholder.setWordWrap(True)
        self._root.addWidget(self.placeholder)
        self._root.addStretch(1)

        self.container: Optional[QWidget] = None
        self._list_layout: Optional[QVBoxLayout] = None

    # ---- host surface contract ----

    def create_container(self) -> None:
        if self.container is not None:
            return
        self.container = QWidget(self)
        self.container.setObjectName("record-list")
        self._list_layout = QVBoxLayout(self.container)
        self._list_layout.setContentsMargins(0, 0, 0, 0)
        self._list_layout.setSpacing(2)
        # Keep the container above the trailing stretch
        self._root.insertWidget(self._root.count() - 1, self.container)

    def destroy_container(self) -> None:
        if self.container is None:
            return
        self._root.removeWidget(self.container)
        self.container.setParent(None)
        self.container.deleteLater()
        self.container = None
        self._list_layout = None

    def mount_append(self, handle: QWidget) -> None:
        self._require_container().addWidget(handle)

    def mount_before(self, handle: QWidget, before: QWidget) -> None:
        layout = self._require_container()
        index = layout.indexOf(before)
        if index < 0:
            raise ValueError("Reference widget is not mounted in this list")
        layout.insertWidget(index, handle)

    def unmount(self, handle: QWidget) -> None:
        if self._list_layout is not None:
            self._list_layout.removeWidget(handle)
        handle.setParent(None)
        handle.deleteLater()

    def show_placeholder(self) -> None:
        self.placeholder.setVisible(True)

    def hide_placeholder(self) -> None:
        self.placeholder.setVisible(False)

    # ---- inspection ----

    def has_container(self) -> bool:
        return self.container is not None

    def placeholder_visible(self) -> bool:
        # isVisible() depends on the parent being shown; isHidden() does not
        return not self.placeholder.isHidden()

    def mounted_widgets(self) -> list[QWidget]:
        """Mounted representations in layout order."""
        if self._list_layout is None:
            return []
        widgets = []
        for i in range(self._list_layout.count()):
            w = self._list_layout.itemAt(i).widget()
            if w is not None:
                widgets.append(w)
        return widgets

    def _require_container(self) -> QVBoxLayout:
        if self._list_layout is None:
            raise RuntimeError("No list container; call create_container() first")
        return self._list_layout
