# -*- coding: utf-8 -*-
"""
Dex Grid Widget - Scrollable grid of entity cells.

Projects the grid cells computed by ``photodex.core.grid`` onto Qt
frames. Each cell shows its entity's first resolved image, or the
entity name on a muted background when it has none. Images are fetched
in the background the first time a cell scrolls into view; a failed
fetch degrades that cell to its text fallback.

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
from typing import Any, Callable, Dict, List, Optional, Set

logger = logging.getLogger(__name__)

try:
    from PyQt6.QtWidgets import (
        QFrame,
        QGridLayout,
        QLabel,
        QScrollArea,
        QVBoxLayout,
        QWidget,
    )
    from PyQt6.QtGui import QImage, QPixmap
    from PyQt6.QtCore import QRect, Qt, QTimer, pyqtSignal

    _QT_AVAILABLE = True
except ImportError:
    _QT_AVAILABLE = False

# PhotoDex internal
from photodex.core.filtering import FilterResult, LayoutMode
from photodex.core.grid import Cell

THUMB_SIZE = 120

_EMPTY_STYLE = "EntityCell { border: 1px solid #666; background: #444; color: #ccc; }"
_CELL_STYLE = "EntityCell { border: 1px solid #666; }"
_HIGHLIGHT_STYLE = "EntityCell { border: 3px solid #facc15; }"


def _alignment_for(position: str) -> Any:
    """Map a CSS-like object-position (``"center top"``) to Qt alignment."""
    words = position.lower().split()
    horizontal = Qt.AlignmentFlag.AlignHCenter
    vertical = Qt.AlignmentFlag.AlignVCenter
    for word in words:
        if word == 'left':
            horizontal = Qt.AlignmentFlag.AlignLeft
        elif word == 'right':
            horizontal = Qt.AlignmentFlag.AlignRight
        elif word == 'top':
            vertical = Qt.AlignmentFlag.AlignTop
        elif word == 'bottom':
            vertical = Qt.AlignmentFlag.AlignBottom
    return horizontal | vertical


def bytes_to_pixmap(
    data: Optional[bytes],
    size: int,
    fit: str = "contain",
    position: str = "center",
) -> Any:
    """Decode image bytes and scale them per the fit hint.

    Parameters
    ----------
    data : Optional[bytes]
        Encoded image (PNG, JPEG, ...).
    size : int
        Target box size in pixels.
    fit : str
        ``"contain"`` keeps the whole image, ``"cover"`` fills the box
        and crops around ``position``, ``"fill"`` stretches.
    position : str
        Crop anchor for ``"cover"``.

    Returns
    -------
    Optional[QPixmap]
        None if Qt is unavailable or the bytes are not a valid image.
    """
    if not _QT_AVAILABLE or not data:
        return None

    image = QImage.fromData(data)
    if image.isNull():
        return None
    pixmap = QPixmap.fromImage(image)

    if fit == "fill":
        return pixmap.scaled(size, size, Qt.AspectRatioMode.IgnoreAspectRatio)
    if fit != "cover":
        return pixmap.scaled(size, size, Qt.AspectRatioMode.KeepAspectRatio)

    scaled = pixmap.scaled(
        size, size, Qt.AspectRatioMode.KeepAspectRatioByExpanding,
    )
    align = _alignment_for(position)
    x = (scaled.width() - size) // 2
    y = (scaled.height() - size) // 2
    if align & Qt.AlignmentFlag.AlignLeft:
        x = 0
    elif align & Qt.AlignmentFlag.AlignRight:
        x = scaled.width() - size
    if align & Qt.AlignmentFlag.AlignTop:
        y = 0
    elif align & Qt.AlignmentFlag.AlignBottom:
        y = scaled.height() - size
    return scaled.copy(QRect(x, y, size, size))


if _QT_AVAILABLE:

    class EntityCell(QFrame):
        """A single grid cell: image or name fallback.

        Parameters
        ----------
        cell : Cell
        on_clicked : Optional[Callable]
            Called with the entity id when a clickable cell is pressed.
        size : int
        parent : Optional[QWidget]
        """

        def __init__(
            self,
            cell: Cell,
            on_clicked: Optional[Callable] = None,
            size: int = THUMB_SIZE,
            parent: Optional[Any] = None,
        ) -> None:
            super().__init__(parent)
            self.cell = cell
            self.requested = False
            self._on_clicked = on_clicked
            self._size = size

            self.setFrameShape(QFrame.Shape.Box)
            self.setFixedSize(size + 8, size + 8)

            layout = QVBoxLayout(self)
            layout.setContentsMargins(4, 4, 4, 4)
            self._label = QLabel(self)
            self._label.setWordWrap(True)
            layout.addWidget(self._label)

            if cell.empty:
                self.show_fallback()
            else:
                self._label.setToolTip(cell.alt)
                self._label.setAlignment(_alignment_for(cell.image.position))
                self.setCursor(Qt.CursorShape.PointingHandCursor)
                self.setStyleSheet(_CELL_STYLE)

        @property
        def entity_id(self) -> str:
            return self.cell.entity_id

        def set_image(self, data: Optional[bytes]) -> bool:
            """Show fetched image bytes.

            Returns
            -------
            bool
                False if the image could not be decoded.
            """
            pixmap = bytes_to_pixmap(
                data, self._size, self.cell.image.fit, self.cell.image.position,
            )
            if pixmap is None:
                return False
            self._label.setPixmap(pixmap)
            return True

        def show_fallback(self) -> None:
            """Degrade to the text fallback (no click-through)."""
            if not self.cell.empty:
                self.cell = self.cell.degrade()
            self._label.clear()
            self._label.setText(self.cell.text)
            self._label.setAlignment(Qt.AlignmentFlag.AlignCenter)
            self.unsetCursor()
            self.setStyleSheet(_EMPTY_STYLE)

        def set_highlighted(self, highlighted: bool) -> None:
            if highlighted:
                self.setStyleSheet(_HIGHLIGHT_STYLE)
            else:
                self.setStyleSheet(_EMPTY_STYLE if self.cell.empty else _CELL_STYLE)

        def mousePressEvent(self, event: Any) -> None:
            """Open the gallery for cells that have an image."""
            if self.cell.clickable and self._on_clicked:
                self._on_clicked(self.cell.entity_id)

    class DexGridWidget(QScrollArea):
        """Scrollable grid of entity cells with live filtering.

        Parameters
        ----------
        pool : Optional[FetchPool]
            Background fetcher for cell images. Without one, cells keep
            their text until :meth:`set_cell_image` is called.
        columns : int
        thumb_size : int
        on_cell_clicked : Optional[Callable]
            Called with the entity id of a clicked cell.
        on_image_failed : Optional[Callable]
            Called with the entity id of a cell whose image failed.
        parent : Optional[QWidget]
        """

        image_ready = pyqtSignal(str, object)

        def __init__(
            self,
            pool: Optional[Any] = None,
            columns: int = 8,
            thumb_size: int = THUMB_SIZE,
            on_cell_clicked: Optional[Callable] = None,
            on_image_failed: Optional[Callable] = None,
            parent: Optional[Any] = None,
        ) -> None:
            super().__init__(parent)
            self._pool = pool
            self._columns = columns
            self._thumb_size = thumb_size
            self._on_cell_clicked = on_cell_clicked
            self._on_image_failed = on_image_failed
            self._cells: Dict[str, EntityCell] = {}
            self._order: List[str] = []
            self._rows: Dict[str, int] = {}
            self._hidden: Set[str] = set()
            self._layout_mode = LayoutMode.GRID
            self._highlighted: Optional[str] = None
            self._applied: Optional[FilterResult] = None

            self.setWidgetResizable(True)
            self._container = QWidget()
            self._grid = QGridLayout(self._container)
            self._grid.setSpacing(8)
            self._grid.setAlignment(Qt.AlignmentFlag.AlignTop)
            self.setWidget(self._container)

            self.image_ready.connect(self.set_cell_image)
            self.verticalScrollBar().valueChanged.connect(self._load_visible)

        @property
        def layout_mode(self) -> 'LayoutMode':
            return self._layout_mode

        def cell(self, entity_id: str) -> 'EntityCell':
            return self._cells[entity_id]

        def visible_ids(self) -> List[str]:
            return [eid for eid in self._order if eid not in self._hidden]

        def set_cells(self, cells: List[Cell]) -> None:
            """Replace displayed cells.

            Parameters
            ----------
            cells : List[Cell]
            """
            self.clear()
            for cell in cells:
                widget = EntityCell(
                    cell,
                    on_clicked=self._on_cell_clicked,
                    size=self._thumb_size,
                    parent=self._container,
                )
                widget.setVisible(True)
                self._cells[cell.entity_id] = widget
                self._order.append(cell.entity_id)
            self._relayout()
            self._schedule_load()

        def apply_filter(self, result: Optional[FilterResult]) -> None:
            """Hide non-matching cells and switch layout mode."""
            if result is None or result is self._applied:
                return
            self._applied = result
            for eid, shown in zip(result.ids, result.visible):
                widget = self._cells.get(eid)
                if widget is None:
                    continue
                widget.setVisible(bool(shown))
                if shown:
                    self._hidden.discard(eid)
                else:
                    self._hidden.add(eid)
            self._layout_mode = result.layout
            self._relayout()
            self._schedule_load()

        def highlight(self, entity_id: Optional[str]) -> None:
            """Scroll to and highlight a cell; None clears the highlight."""
            if entity_id == self._highlighted:
                return
            previous = self._cells.get(self._highlighted or "")
            if previous is not None:
                previous.set_highlighted(False)
            self._highlighted = entity_id
            widget = self._cells.get(entity_id or "")
            if widget is not None:
                widget.set_highlighted(True)
                self.ensureWidgetVisible(widget)

        def set_cell_image(self, entity_id: str, data: Optional[bytes]) -> None:
            """Show fetched bytes in a cell, degrading it on failure."""
            widget = self._cells.get(entity_id)
            if widget is None or widget.cell.empty:
                return
            if not widget.set_image(data):
                logger.info("Image unavailable for %s; showing fallback", entity_id)
                widget.show_fallback()
                if self._on_image_failed:
                    self._on_image_failed(entity_id)

        def clear(self) -> None:
            """Remove all cells."""
            for widget in self._cells.values():
                widget.setParent(None)
                widget.deleteLater()
            self._cells.clear()
            self._order.clear()
            self._rows.clear()
            self._hidden.clear()
            self._highlighted = None
            self._applied = None

        def resizeEvent(self, event: Any) -> None:
            super().resizeEvent(event)
            self._load_visible()

        def showEvent(self, event: Any) -> None:
            super().showEvent(event)
            self._schedule_load()

        def _relayout(self) -> None:
            """Place visible cells; single column in the compact layout."""
            for widget in self._cells.values():
                self._grid.removeWidget(widget)
            columns = 1 if self._layout_mode is LayoutMode.FLEX else self._columns
            position = 0
            for eid in self._order:
                if eid in self._hidden:
                    continue
                widget = self._cells[eid]
                self._rows[eid] = position // columns
                self._grid.addWidget(widget, position // columns, position % columns)
                position += 1

        def _schedule_load(self) -> None:
            # Qt places new cells on the next event loop pass.
            QTimer.singleShot(0, self._load_visible)

        def _row_band(self, row: int) -> QRect:
            """Vertical extent of a grid row in container coordinates."""
            height = self._thumb_size + 8
            top = (
                self._grid.contentsMargins().top()
                + row * (height + self._grid.verticalSpacing())
            )
            return QRect(0, top, 1, height)

        def _load_visible(self, *_: Any) -> None:
            """Request images for cells that intersect the viewport."""
            if self._pool is None or not self.isVisible():
                return
            top = self.verticalScrollBar().value()
            viewport = QRect(0, top, 1, self.viewport().height())
            for eid in self._order:
                widget = self._cells[eid]
                if widget.requested or widget.cell.empty or eid in self._hidden:
                    continue
                if not viewport.intersects(self._row_band(self._rows[eid])):
                    continue
                widget.requested = True
                future = self._pool.submit_image(widget.cell.image.locator)
                future.add_done_callback(
                    lambda f, eid=eid: self.image_ready.emit(
                        eid, None if f.cancelled() or f.exception() else f.result(),
                    )
                )

else:

    class EntityCell:  # type: ignore[no-redef]
        """Stub when Qt is unavailable."""

        def __init__(self, *args: Any, **kwargs: Any) -> None:
            raise ImportError("Qt is required for EntityCell")

    class DexGridWidget:  # type: ignore[no-redef]
        """Stub when Qt is unavailable."""

        def __init__(self, *args: Any, **kwargs: Any) -> None:
            raise ImportError("Qt is required for DexGridWidget")
