"""
Record Item Widget
Live representation of a single record: label, order and action buttons.
"""
from __future__ import annotations

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QWidget, QHBoxLayout, QLabel, QPushButton

from barinventory.model.records import Record


def format_rank(rank: float | None) -> str:
    if rank is None:
        return "N/A"
    return f"{rank:g}"


class RecordItemWidget(QWidget):
    """One row of an entity list. Emits signals instead of acting on the store."""
    edit_requested = Signal(object)      # Record
    delete_requested = Signal(str, str)  # (record id, label)

    def __init__(self, record: Record, show_rank: bool = True, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.record = record
        self.show_rank = show_rank
        self.setObjectName(f"record-{record.id}")

        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 2, 4, 2)

        self.lbl_text = QLabel(self)
        layout.addWidget(self.lbl_text, 1)

        self.btn_edit = QPushButton(self.tr("Edit"), self)
        self.btn_edit.clicked.connect(lambda: self.edit_requested.emit(self.record))
        layout.addWidget(self.btn_edit)

        self.btn_delete = QPushButton(self.tr("Delete"), self)
        self.btn_delete.clicked.connect(lambda: self.delete_requested.emit(self.record.id, self.record.label))
        layout.addWidget(self.btn_delete)

        self._render()

    @property
    def record_id(self) -> str:
        return self.record.id

    def text(self) -> str:
        return self.lbl_text.text()

    def refresh(self, record: Record) -> None:
        self.record = record
        self._render()

    def _render(self) -> None:
        if self.show_rank:
            self.lbl_text.setText(f"{self.record.label} (Order: {format_rank(self.record.rank)})")
        else:
            self.lbl_text.setText(self.record.label)
        self.btn_edit.setAccessibleName(self.tr("Edit {0}").format(self.record.label))
        self.btn_delete.setAccessibleName(self.tr("Delete {0}").format(self.record.label))
