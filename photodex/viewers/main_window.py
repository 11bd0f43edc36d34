# -*- coding: utf-8 -*-
"""
PhotoDexWindow - Top-level application window for the catalog browser.

Standalone QMainWindow assembling the theme toggle, name filter and
captured-count control with the entity grid, the gallery dialog and
the captured list. Every widget is a projection of PhotoDexApp state;
user input is sent back to the app as events. Provides a ``main()``
entry point for command-line invocation.

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
import argparse
import logging
import sys
from typing import Any, Optional

_log = logging.getLogger("photodex.main_window")

try:
    from PyQt6.QtWidgets import (
        QApplication,
        QLineEdit,
        QMainWindow,
        QPushButton,
        QToolBar,
    )
    from PyQt6.QtCore import pyqtSignal

    _QT_AVAILABLE = True
except ImportError:
    _QT_AVAILABLE = False


def _build_arg_parser() -> argparse.ArgumentParser:
    """Build the argument parser for photodex-viewer."""
    parser = argparse.ArgumentParser(
        prog="photodex-viewer",
        description="PhotoDex — browse the catalog grid, filter by name "
        "and view each entry's image variants.",
    )
    parser.add_argument(
        "data",
        nargs="?",
        default=None,
        help="Path or URL of the catalog document (default: PHOTODEX_DATA, "
        "then ~/.photodex/config.json, then data.json).",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging level (default: WARNING).",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        metavar="PATH",
        help="Write log output to a file (in addition to stderr).",
    )
    return parser


if _QT_AVAILABLE:
    from photodex.catalog.pool import FetchPool
    from photodex.catalog.resolver import resolve_data_source
    from photodex.core.config import load_config
    from photodex.core.preferences import Theme
    from photodex.core.state import (
        AppState,
        OpenCaptured,
        OpenGallery,
        PhotoDexApp,
        SetQuery,
        ToggleTheme,
        ImageFailed,
    )
    from photodex.core.summary import count_label
    from photodex.viewers.captured_dialog import CapturedDialog
    from photodex.viewers.gallery_dialog import GalleryDialog
    from photodex.viewers.grid_view import DexGridWidget

    _THEME_STYLES = {
        Theme.DARK: (
            "QMainWindow, QDialog, QScrollArea > QWidget > QWidget "
            "{ background: #1f1f1f; color: #eeeeee; }"
            "QLineEdit, QListWidget { background: #2b2b2b; color: #eeeeee; }"
        ),
        Theme.LIGHT: (
            "QMainWindow, QDialog, QScrollArea > QWidget > QWidget "
            "{ background: #f5f5f5; color: #111111; }"
            "QLineEdit, QListWidget { background: #ffffff; color: #111111; }"
        ),
    }

    class PhotoDexWindow(QMainWindow):
        """Top-level catalog browser window.

        Parameters
        ----------
        app : Optional[PhotoDexApp]
            Application model. One with the loaded config is created if
            omitted.
        pool : Optional[FetchPool]
            Background fetcher for the catalog and images.
        parent : QWidget, optional
            Parent widget.
        """

        catalog_fetched = pyqtSignal(object)
        catalog_failed = pyqtSignal(object)

        def __init__(
            self,
            app: Optional[PhotoDexApp] = None,
            pool: Optional[Any] = None,
            parent: Optional[Any] = None,
        ) -> None:
            super().__init__(parent)
            self.app = app or PhotoDexApp(config=load_config())
            config = self.app.config
            self._pool = pool or FetchPool(
                fetcher=self.app.fetcher, max_workers=config.max_workers,
            )
            self._rendered_grid = False

            self.setWindowTitle("PhotoDex")
            self.resize(1100, 800)

            toolbar = QToolBar("Controls", self)
            toolbar.setMovable(False)
            self.addToolBar(toolbar)

            self.theme_button = QPushButton(self)
            self.theme_button.clicked.connect(lambda: self.app.send(ToggleTheme()))
            toolbar.addWidget(self.theme_button)

            self.search_edit = QLineEdit(self)
            self.search_edit.setPlaceholderText("Search by name...")
            self.search_edit.textChanged.connect(
                lambda text: self.app.send(SetQuery(text))
            )
            toolbar.addWidget(self.search_edit)

            self.captured_button = QPushButton(count_label(0), self)
            self.captured_button.clicked.connect(lambda: self.app.send(OpenCaptured()))
            toolbar.addWidget(self.captured_button)

            self.grid = DexGridWidget(
                pool=self._pool,
                columns=config.columns,
                thumb_size=config.thumb_size,
                on_cell_clicked=lambda eid: self.app.send(OpenGallery(eid)),
                on_image_failed=lambda eid: self.app.send(ImageFailed(eid)),
                parent=self,
            )
            self.setCentralWidget(self.grid)

            self.gallery = GalleryDialog(self.app, pool=self._pool, parent=self)
            self.captured_dialog = CapturedDialog(self.app, parent=self)

            self.catalog_fetched.connect(self.app.install_document)
            self.catalog_failed.connect(self.app.fail_load)
            self.app.subscribe(self.render)
            self.render(self.app.state)

        def load(self, source: Optional[str] = None) -> None:
            """Fetch the catalog in the background and render it once loaded."""
            source = resolve_data_source(source)
            future = self._pool.submit_catalog_load(source)
            future.add_done_callback(self._on_catalog_future)

        def render(self, state: AppState) -> None:
            """Project the app state onto every widget."""
            self.setStyleSheet(_THEME_STYLES[state.theme])
            self.theme_button.setText(state.theme.toggle_text)

            if self.app.load_error:
                self.statusBar().showMessage(
                    f"Failed to load catalog: {self.app.load_error}"
                )

            if self.app.loaded and not self._rendered_grid:
                self._rendered_grid = True
                self.grid.set_cells(self.app.cells())
                self.captured_button.setText(count_label(self.app.captured_count()))
                self.statusBar().showMessage(f"{len(self.app.catalog)} entries")

            if self.search_edit.text() != state.query:
                self.search_edit.blockSignals(True)
                self.search_edit.setText(state.query)
                self.search_edit.blockSignals(False)

            self.grid.apply_filter(state.filter_result)
            self.grid.highlight(state.highlighted)
            self.gallery.set_view(self.app.gallery_view())
            self.captured_dialog.sync()

        def closeEvent(self, event: Any) -> None:
            """Stop background fetches on close."""
            self._pool.shutdown(wait=False)
            super().closeEvent(event)

        def _on_catalog_future(self, future: Any) -> None:
            # Runs on a worker thread; signals hand the result to the GUI thread.
            error = future.exception()
            if error is not None:
                self.catalog_failed.emit(error)
            else:
                self.catalog_fetched.emit(future.result())


    def main() -> None:
        """Entry point for the photodex-viewer command."""
        args = _build_arg_parser().parse_args()

        # Configure logging
        log_level = getattr(logging, args.log_level, logging.WARNING)
        log_fmt = "%(asctime)s %(name)s %(levelname)s: %(message)s"
        log_datefmt = "%H:%M:%S"

        handlers: list = [logging.StreamHandler()]
        if args.log_file is not None:
            handlers.append(logging.FileHandler(args.log_file))

        logging.basicConfig(
            level=log_level,
            format=log_fmt,
            datefmt=log_datefmt,
            handlers=handlers,
        )

        _log.info("photodex-viewer starting, log level=%s", args.log_level)

        app = QApplication(sys.argv)
        window = PhotoDexWindow()
        window.load(args.data)
        window.show()
        sys.exit(app.exec())

else:

    class PhotoDexWindow:  # type: ignore[no-redef]
        """Stub when Qt is unavailable."""

        def __init__(self, *args: Any, **kwargs: Any) -> None:
            raise ImportError("Qt is required for PhotoDexWindow")

    def main() -> None:
        """Stub entry point."""
        _build_arg_parser().parse_args()
        print("Error: PyQt6 is required. Install with: pip install PyQt6")
        sys.exit(1)
