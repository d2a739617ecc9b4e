"""
NamesPage — the only page of the names GUI.

Shows every stored name with a delete button, and a form to add a new one.
The page never touches the store itself: it emits insert_requested /
delete_requested and re-renders whenever show_snapshot() is called.

Layout
──────
  ┌─────────────────────────────────────────┐
  │ ┌─────────────────────────────────────┐ │
  │ │ Ada                            [🗑] │ │
  │ │ ID: 1                               │ │
  │ │ Grace                          [🗑] │ │
  │ │ ID: 2                               │ │
  │ └─────────────────────────────────────┘ │
  │ ─────────────────────────────────────── │
  │ Name: [New name______________________]  │
  │ [                 Add                 ] │
  └─────────────────────────────────────────┘
"""

import logging
from functools import partial

from PyQt6.QtCore import QSize, Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QStyle,
    QToolButton,
    QVBoxLayout,
    QWidget,
)

from namestore.gui.viewmodels import NameListViewModel
from namestore.store.models import Name, Snapshot

__all__ = ["NamesPage"]

logger = logging.getLogger(__name__)


class NamesPage(QWidget):
    """
    List of names plus an entry form.

    Signals emitted by this page (connected by MainWindow):
      • insert_requested(str)     — user pressed Add
      • delete_requested(object)  — user pressed a row's delete button (Name)
    """

    insert_requested = pyqtSignal(str)
    delete_requested = pyqtSignal(object)

    def __init__(self, parent: QWidget = None) -> None:
        super().__init__(parent)
        self._vm = NameListViewModel()
        self._delete_buttons: list[QToolButton] = []
        self._build_ui()

    # ── UI construction ────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(6, 6, 6, 6)
        layout.setSpacing(4)

        # Names list
        self._list_widget = QListWidget()
        self._list_widget.setSpacing(2)
        layout.addWidget(self._list_widget, stretch=1)

        self._empty_label = QLabel("No names yet.")
        self._empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._empty_label)

        # Divider
        divider = QFrame()
        divider.setFrameShape(QFrame.Shape.HLine)
        divider.setFrameShadow(QFrame.Shadow.Sunken)
        layout.addWidget(divider)

        # Entry field
        entry_row = QHBoxLayout()
        entry_row.addWidget(QLabel("Name:"))
        self._name_edit = QLineEdit()
        self._name_edit.setPlaceholderText("New name")
        self._name_edit.textChanged.connect(self._on_text_changed)
        self._name_edit.returnPressed.connect(self._on_add_clicked)
        entry_row.addWidget(self._name_edit)
        layout.addLayout(entry_row)

        # Add button
        self._add_btn = QPushButton("Add")
        self._add_btn.clicked.connect(self._on_add_clicked)
        layout.addWidget(self._add_btn)

    def _make_row(self, record: Name) -> QWidget:
        row = QWidget()
        row_layout = QHBoxLayout(row)
        row_layout.setContentsMargins(4, 4, 4, 4)

        title = QLabel(self._vm.row_title(record))
        title.setTextFormat(Qt.TextFormat.PlainText)
        font = title.font()
        font.setBold(True)
        title.setFont(font)

        text_col = QVBoxLayout()
        text_col.addWidget(title)
        text_col.addWidget(QLabel(self._vm.row_subtitle(record)))
        row_layout.addLayout(text_col)
        row_layout.addStretch()

        delete_btn = QToolButton()
        delete_btn.setIcon(self.style().standardIcon(QStyle.StandardPixmap.SP_TrashIcon))
        delete_btn.setToolTip("Delete")
        delete_btn.clicked.connect(partial(self._on_delete_clicked, record))
        row_layout.addWidget(delete_btn)
        self._delete_buttons.append(delete_btn)
        return row

    # ── Slots ──────────────────────────────────────────────────────────────

    def _on_text_changed(self, text: str) -> None:
        self._vm.new_name = text

    def _on_add_clicked(self) -> None:
        self.insert_requested.emit(self._vm.submit())

    def _on_delete_clicked(self, record: Name, _checked: bool = False) -> None:
        self.delete_requested.emit(record)

    def _refresh_list(self) -> None:
        self._list_widget.clear()
        self._delete_buttons.clear()
        for record in self._vm.records:
            row = self._make_row(record)
            item = QListWidgetItem(self._list_widget)
            item.setSizeHint(row.sizeHint().expandedTo(QSize(0, 48)))
            self._list_widget.setItemWidget(item, row)
        self._empty_label.setHidden(not self._vm.is_empty)

    # ── Public API ─────────────────────────────────────────────────────────

    def show_snapshot(self, snapshot: Snapshot) -> None:
        """Re-render the list from *snapshot* (tuple[Name, ...])."""
        self._vm.apply_snapshot(snapshot)
        self._refresh_list()
