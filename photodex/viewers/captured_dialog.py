# -*- coding: utf-8 -*-
"""
Captured Dialog - Scrollable list of captured entities.

Lists every entity with at least one real image as ``"<id>: <name>"``.
Selecting a row clears the name filter and scrolls the grid to that
entity. A toggle switches between a short preview and the full list.

Dependencies
------------
PyQt6

License
-------
MIT License
Copyright (c) 2026 PhotoDex contributors
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

# Standard library
from typing import Any, List, Optional

try:
    from PyQt6.QtWidgets import (
        QDialog,
        QHBoxLayout,
        QListWidget,
        QListWidgetItem,
        QPushButton,
        QVBoxLayout,
    )
    from PyQt6.QtCore import Qt

    _QT_AVAILABLE = True
except ImportError:
    _QT_AVAILABLE = False

# PhotoDex internal
from photodex.core.state import CloseCaptured, JumpTo, PhotoDexApp, ToggleShowAll
from photodex.core.summary import CapturedEntry, show_all_label


if _QT_AVAILABLE:

    class CapturedDialog(QDialog):
        """List of captured entities with show-all toggle.

        Parameters
        ----------
        app : PhotoDexApp
        parent : Optional[QWidget]
        """

        def __init__(self, app: PhotoDexApp, parent: Optional[Any] = None) -> None:
            super().__init__(parent)
            self._app = app
            self._entries: List[CapturedEntry] = []
            self._syncing = False

            self.setWindowTitle("Captured")

            layout = QVBoxLayout(self)
            self._list = QListWidget(self)
            self._list.itemClicked.connect(self._on_item_clicked)
            layout.addWidget(self._list)

            buttons = QHBoxLayout()
            self._toggle_button = QPushButton(show_all_label(False), self)
            self._toggle_button.clicked.connect(
                lambda: self._app.send(ToggleShowAll())
            )
            buttons.addWidget(self._toggle_button)

            close_button = QPushButton("Close", self)
            close_button.clicked.connect(lambda: self._app.send(CloseCaptured()))
            buttons.addWidget(close_button)
            layout.addLayout(buttons)

        def sync(self) -> None:
            """Project the app state: visibility, entries, toggle text."""
            state = self._app.state
            self._toggle_button.setText(show_all_label(state.show_all))

            entries = self._app.captured()
            if entries != self._entries:
                self._entries = entries
                self._list.clear()
                for entry in entries:
                    item = QListWidgetItem(entry.label)
                    item.setData(Qt.ItemDataRole.UserRole, entry.entity_id)
                    self._list.addItem(item)

            self._syncing = True
            try:
                if state.captured_open and not self.isVisible():
                    self.show()
                elif not state.captured_open and self.isVisible():
                    self.hide()
            finally:
                self._syncing = False

        def rows(self) -> List[str]:
            return [self._list.item(i).text() for i in range(self._list.count())]

        def closeEvent(self, event: Any) -> None:
            if not self._syncing and self._app.state.captured_open:
                self._app.send(CloseCaptured())
            super().closeEvent(event)

        def _on_item_clicked(self, item: Any) -> None:
            self._app.send(JumpTo(item.data(Qt.ItemDataRole.UserRole)))

else:

    class CapturedDialog:  # type: ignore[no-redef]
        """Stub when Qt is unavailable."""

        def __init__(self, *args: Any, **kwargs: Any) -> None:
            raise ImportError("Qt is required for CapturedDialog")
