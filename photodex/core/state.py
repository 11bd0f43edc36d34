# -*- coding: utf-8 -*-
"""
Application State - Explicit state and event dispatch for PhotoDex.

All interaction state (gallery position, filter query, theme, captured
list visibility, highlighted cell) lives in one immutable AppState.
``dispatch`` is a pure reducer from (state, event) to a new state;
PhotoDexApp owns the catalog, applies events, persists the theme and
notifies listeners, which re-render from the new state.

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
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, FrozenSet, List, Optional

logger = logging.getLogger(__name__)

# PhotoDex internal
from photodex.catalog.fetcher import CatalogLoadError, ResourceFetcher
from photodex.catalog.models import Catalog
from photodex.catalog.resolver import resolve_data_source
from photodex.catalog.store import load_catalog
from photodex.core.config import PhotoDexConfig
from photodex.core.filtering import FilterIndex, FilterResult
from photodex.core.gallery import (
    CLOSED,
    GalleryAction,
    GalleryState,
    GalleryView,
    handle_key,
    render_gallery,
    transition,
)
from photodex.core.grid import Cell, render_grid
from photodex.core.preferences import DEFAULT_THEME, PreferenceStore, Theme
from photodex.core.summary import CapturedEntry, captured_count, captured_list


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class OpenGallery:
    entity_id: str


@dataclass(frozen=True)
class Navigate:
    action: GalleryAction


@dataclass(frozen=True)
class CloseGallery:
    backdrop: bool = False


@dataclass(frozen=True)
class KeyPress:
    key: str


@dataclass(frozen=True)
class SetQuery:
    query: str


@dataclass(frozen=True)
class ToggleTheme:
    pass


@dataclass(frozen=True)
class ToggleShowAll:
    pass


@dataclass(frozen=True)
class OpenCaptured:
    pass


@dataclass(frozen=True)
class CloseCaptured:
    pass


@dataclass(frozen=True)
class JumpTo:
    """Select an entry of the captured list."""

    entity_id: str


@dataclass(frozen=True)
class ImageFailed:
    """An image could not be displayed.

    ``in_gallery`` distinguishes the gallery view from a grid cell.
    """

    entity_id: str
    in_gallery: bool = False


# ---------------------------------------------------------------------------
# State
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class AppState:
    """Complete interaction state of the browser.

    Attributes
    ----------
    gallery : GalleryState
    query : str
        Active filter text.
    filter_result : Optional[FilterResult]
        Visibility for ``query``. None until the catalog is loaded.
    theme : Theme
    captured_open : bool
        Whether the captured list is shown.
    show_all : bool
        Whether the captured list is expanded.
    highlighted : Optional[str]
        Cell to scroll to and highlight.
    failed_cells : FrozenSet[str]
        Cells whose image failed to load.
    """

    gallery: GalleryState = CLOSED
    query: str = ""
    filter_result: Optional[FilterResult] = None
    theme: Theme = DEFAULT_THEME
    captured_open: bool = False
    show_all: bool = False
    highlighted: Optional[str] = None
    failed_cells: FrozenSet[str] = field(default_factory=frozenset)


def dispatch(
    state: AppState,
    event: Any,
    catalog: Catalog,
    index: FilterIndex,
) -> AppState:
    """Compute the state that follows ``event``.

    Parameters
    ----------
    state : AppState
    event : Any
        One of the event classes of this module.
    catalog : Catalog
    index : FilterIndex
        Index built over ``catalog``.

    Returns
    -------
    AppState
    """
    if isinstance(event, OpenGallery):
        if event.entity_id in state.failed_cells:
            return state
        gallery = transition(
            state.gallery, GalleryAction.OPEN, catalog, event.entity_id,
        )
        return replace(state, gallery=gallery)

    if isinstance(event, Navigate):
        return replace(
            state, gallery=transition(state.gallery, event.action, catalog),
        )

    if isinstance(event, CloseGallery):
        action = (
            GalleryAction.BACKDROP_CLICK if event.backdrop
            else GalleryAction.CLOSE
        )
        return replace(state, gallery=transition(state.gallery, action, catalog))

    if isinstance(event, KeyPress):
        gallery, _ = handle_key(state.gallery, event.key, catalog)
        return replace(state, gallery=gallery)

    if isinstance(event, SetQuery):
        return replace(
            state,
            query=event.query,
            filter_result=index.apply(event.query),
            highlighted=None,
        )

    if isinstance(event, ToggleTheme):
        return replace(state, theme=state.theme.toggled())

    if isinstance(event, ToggleShowAll):
        return replace(state, show_all=not state.show_all)

    if isinstance(event, OpenCaptured):
        return replace(state, captured_open=True)

    if isinstance(event, CloseCaptured):
        return replace(state, captured_open=False)

    if isinstance(event, JumpTo):
        if event.entity_id not in catalog:
            logger.warning("Cannot jump to unknown entity %r", event.entity_id)
            return state
        return replace(
            state,
            query="",
            filter_result=index.apply(""),
            captured_open=False,
            highlighted=event.entity_id,
        )

    if isinstance(event, ImageFailed):
        if event.in_gallery:
            if state.gallery.entity_id != event.entity_id:
                return state
            return replace(
                state,
                gallery=transition(state.gallery, GalleryAction.IMAGE_FAILED, catalog),
            )
        return replace(
            state, failed_cells=state.failed_cells | {event.entity_id},
        )

    raise TypeError(f"Unknown event: {event!r}")


# ---------------------------------------------------------------------------
# Application
# ---------------------------------------------------------------------------

class PhotoDexApp:
    """Owns the catalog and the interaction state.

    Parameters
    ----------
    config : Optional[PhotoDexConfig]
    preferences : Optional[PreferenceStore]
    fetcher : Optional[ResourceFetcher]
    """

    def __init__(
        self,
        config: Optional[PhotoDexConfig] = None,
        preferences: Optional[PreferenceStore] = None,
        fetcher: Optional[ResourceFetcher] = None,
    ) -> None:
        self.config = config or PhotoDexConfig()
        self.preferences = preferences or PreferenceStore()
        self.fetcher = fetcher or ResourceFetcher(
            timeout=self.config.request_timeout,
        )
        self.catalog = Catalog()
        self.index = FilterIndex(catalog=self.catalog)
        self.load_error: Optional[str] = None
        self._cells: List[Cell] = []
        self._loaded = False
        self._listeners: List[Callable[[AppState], None]] = []
        self.state = AppState(theme=self.preferences.load_theme())

    @property
    def loaded(self) -> bool:
        return self._loaded

    # --- Loading ---

    def load(self, source: Optional[str] = None) -> bool:
        """Load the catalog synchronously.

        Parameters
        ----------
        source : Optional[str]
            Path or URL. Resolved through the usual priority chain when
            omitted.

        Returns
        -------
        bool
            True on success. On failure the app stays unpopulated.
        """
        source = resolve_data_source(source or None)
        try:
            catalog = load_catalog(source, self.fetcher)
        except CatalogLoadError as e:
            self.fail_load(e)
            return False
        self.install(catalog)
        return True

    def install(self, catalog: Catalog) -> None:
        """Adopt a freshly loaded catalog. Only the first one is kept."""
        if self.loaded:
            logger.warning("Catalog already loaded; ignoring reload")
            return
        self.catalog = catalog
        self.index = FilterIndex(
            catalog=catalog, compact_threshold=self.config.compact_threshold,
        )
        self._cells = render_grid(catalog)
        self._loaded = True
        self.load_error = None
        self._set_state(replace(
            self.state, filter_result=self.index.apply(self.state.query),
        ))

    def install_document(self, data: Dict[str, Any]) -> None:
        """Adopt a document fetched in the background."""
        self.install(Catalog.from_document(data))

    def fail_load(self, error: Exception) -> None:
        """Record a catalog load failure. No retry is attempted."""
        logger.error("Error loading catalog: %s", error)
        self.load_error = str(error)
        self._notify()

    # --- Events ---

    def subscribe(self, listener: Callable[[AppState], None]) -> None:
        """Register a render callback invoked after every state change."""
        self._listeners.append(listener)

    def send(self, event: Any) -> AppState:
        """Apply an event and return the new state."""
        new_state = dispatch(self.state, event, self.catalog, self.index)
        if new_state.theme is not self.state.theme:
            self._save_theme(new_state.theme)
        self._set_state(new_state)
        return new_state

    def press_key(self, key: str) -> bool:
        """Apply a key press.

        Returns
        -------
        bool
            True if the key was consumed by the gallery.
        """
        _, consumed = handle_key(self.state.gallery, key, self.catalog)
        if consumed:
            self.send(KeyPress(key))
        return consumed

    # --- Views ---

    def cells(self) -> List[Cell]:
        """Grid cells, with failed images degraded."""
        failed = self.state.failed_cells
        return [c.degrade() if c.entity_id in failed else c for c in self._cells]

    def captured(self) -> List[CapturedEntry]:
        """Captured entries shown in the list, honouring show-all."""
        entries = captured_list(self.catalog)
        if self.state.show_all:
            return entries
        return entries[:self.config.captured_preview]

    def captured_count(self) -> int:
        return captured_count(self.catalog)

    def gallery_view(self) -> Optional[GalleryView]:
        return render_gallery(self.state.gallery, self.catalog)

    # --- Internals ---

    def _save_theme(self, theme: Theme) -> None:
        try:
            self.preferences.save_theme(theme)
        except OSError as e:
            logger.error("Failed to save theme preference: %s", e)

    def _set_state(self, state: AppState) -> None:
        self.state = state
        self._notify()

    def _notify(self) -> None:
        for listener in self._listeners:
            listener(self.state)
