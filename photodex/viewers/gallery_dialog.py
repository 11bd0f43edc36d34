# -*- coding: utf-8 -*-
"""
Gallery Dialog - Modal viewer for an entity's images.

Displays a GalleryView produced by ``photodex.core.gallery`` and turns
button clicks, arrow/escape key presses, and clicks outside the image
into events on the PhotoDexApp. The dialog holds no navigation state of
its own.

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
import logging
from typing import Any, Optional

logger = logging.getLogger(__name__)

try:
    from PyQt6.QtWidgets import (
        QDialog,
        QHBoxLayout,
        QLabel,
        QPushButton,
        QVBoxLayout,
    )
    from PyQt6.QtCore import Qt, pyqtSignal

    _QT_AVAILABLE = True
except ImportError:
    _QT_AVAILABLE = False

# PhotoDex internal
from photodex.core.gallery import GalleryAction, GalleryView
from photodex.core.state import CloseGallery, ImageFailed, Navigate, PhotoDexApp
from photodex.viewers.grid_view import bytes_to_pixmap

IMAGE_SIZE = 480


if _QT_AVAILABLE:

    _KEY_NAMES = {
        Qt.Key.Key_Left: "ArrowLeft",
        Qt.Key.Key_Right: "ArrowRight",
        Qt.Key.Key_Escape: "Escape",
    }

    class GalleryDialog(QDialog):
        """Modal gallery with previous/next/close controls.

        Parameters
        ----------
        app : PhotoDexApp
        pool : Optional[FetchPool]
            Background fetcher for gallery images.
        parent : Optional[QWidget]
        """

        image_ready = pyqtSignal(str, object)

        def __init__(
            self,
            app: PhotoDexApp,
            pool: Optional[Any] = None,
            parent: Optional[Any] = None,
        ) -> None:
            super().__init__(parent)
            self._app = app
            self._pool = pool
            self._view: Optional[GalleryView] = None

            self.setWindowTitle("Gallery")
            self.setModal(True)

            layout = QVBoxLayout(self)

            self._image_label = QLabel(self)
            self._image_label.setFixedSize(IMAGE_SIZE, IMAGE_SIZE)
            self._image_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
            layout.addWidget(self._image_label, alignment=Qt.AlignmentFlag.AlignCenter)

            self._caption = QLabel(self)
            self._caption.setAlignment(Qt.AlignmentFlag.AlignCenter)
            layout.addWidget(self._caption)

            controls = QHBoxLayout()
            self._prev_button = QPushButton("◀", self)
            self._prev_button.clicked.connect(
                lambda: self._app.send(Navigate(GalleryAction.PREVIOUS))
            )
            controls.addWidget(self._prev_button)

            self._counter = QLabel(self)
            self._counter.setAlignment(Qt.AlignmentFlag.AlignCenter)
            controls.addWidget(self._counter)

            self._next_button = QPushButton("▶", self)
            self._next_button.clicked.connect(
                lambda: self._app.send(Navigate(GalleryAction.NEXT))
            )
            controls.addWidget(self._next_button)

            self._close_button = QPushButton("Close", self)
            self._close_button.clicked.connect(
                lambda: self._app.send(CloseGallery())
            )
            controls.addWidget(self._close_button)
            layout.addLayout(controls)

            # Buttons must not steal arrow keys from the dialog.
            for button in (self._prev_button, self._next_button, self._close_button):
                button.setFocusPolicy(Qt.FocusPolicy.NoFocus)

            self.image_ready.connect(self._on_image_ready)

        @property
        def view(self) -> Optional[GalleryView]:
            return self._view

        def set_view(self, view: Optional[GalleryView]) -> None:
            """Display a gallery view; None hides the dialog."""
            if view is None:
                self._view = None
                self.hide()
                return

            changed = view != self._view
            self._view = view
            self._caption.setText(view.caption)
            self._counter.setText(view.counter)
            self._prev_button.setEnabled(view.can_navigate)
            self._next_button.setEnabled(view.can_navigate)
            self._image_label.setStyleSheet(
                f"background-color: {view.background};" if view.background else ""
            )

            if changed:
                self._show_image()
            if not self.isVisible():
                self.show()

        def keyPressEvent(self, event: Any) -> None:
            """Arrow keys navigate, Escape closes; consumed keys stop here."""
            key = _KEY_NAMES.get(event.key())
            if key is not None and self._app.press_key(key):
                event.accept()
                return
            super().keyPressEvent(event)

        def mousePressEvent(self, event: Any) -> None:
            """A click outside the image closes the gallery."""
            point = event.position().toPoint()
            if not self._image_label.geometry().contains(point):
                self._app.send(CloseGallery(backdrop=True))
                event.accept()
                return
            super().mousePressEvent(event)

        def closeEvent(self, event: Any) -> None:
            if self._view is not None:
                self._app.send(CloseGallery())
            super().closeEvent(event)

        def _show_image(self) -> None:
            view = self._view
            self._image_label.clear()
            if view.missing or self._pool is None:
                self._image_label.setText("missing" if view.missing else "")
                return
            key = f"{view.entity_id}:{view.index}"
            future = self._pool.submit_image(view.locator)
            future.add_done_callback(
                lambda f, key=key: self.image_ready.emit(
                    key, None if f.cancelled() or f.exception() else f.result(),
                )
            )

        def _on_image_ready(self, key: str, data: Optional[bytes]) -> None:
            view = self._view
            if view is None or key != f"{view.entity_id}:{view.index}":
                return
            pixmap = bytes_to_pixmap(data, IMAGE_SIZE, view.fit, view.position)
            if pixmap is None:
                logger.info("Gallery image unavailable: %s", view.locator)
                self._app.send(ImageFailed(view.entity_id, in_gallery=True))
                return
            self._image_label.setPixmap(pixmap)

else:

    class GalleryDialog:  # type: ignore[no-redef]
        """Stub when Qt is unavailable."""

        def __init__(self, *args: Any, **kwargs: Any) -> None:
            raise ImportError("Qt is required for GalleryDialog")
