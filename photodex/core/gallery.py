# -*- coding: utf-8 -*-
"""
Gallery Navigator - Modal state machine over an entity's images.

The gallery is either closed or open on (entity, index), where index
points into ``resolve_images(entity)``. Navigation is circular: next
and previous wrap modulo the number of resolved images and are no-ops
for entities with a single image. An entity without real images still
opens, on a "missing" stand-in.

``transition`` is a pure function of (state, action); ``render_gallery``
projects a state onto what the modal displays.

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
from dataclasses import dataclass, replace
from enum import Enum
from typing import Dict, Optional, Tuple

logger = logging.getLogger(__name__)

# PhotoDex internal
from photodex.catalog.models import DEFAULT_FIT, Catalog
from photodex.core.images import (
    alt_text,
    first_resolved_index,
    missing_image,
    resolve_images,
)

_CONTAIN_BACKGROUND = "#000"


class GalleryAction(Enum):
    """Events the gallery reacts to."""

    OPEN = "open"
    NEXT = "next"
    PREVIOUS = "previous"
    CLOSE = "close"
    BACKDROP_CLICK = "backdrop_click"
    IMAGE_FAILED = "image_failed"


KEY_BINDINGS: Dict[str, GalleryAction] = {
    "ArrowLeft": GalleryAction.PREVIOUS,
    "ArrowRight": GalleryAction.NEXT,
    "Escape": GalleryAction.CLOSE,
}


@dataclass(frozen=True)
class GalleryState:
    """Gallery state. Closed when ``entity_id`` is None.

    Attributes
    ----------
    entity_id : Optional[str]
        Entity being viewed.
    index : int
        Index into the entity's resolved images.
    failed : bool
        The current image failed to load and the stand-in is shown.
    """

    entity_id: Optional[str] = None
    index: int = 0
    failed: bool = False

    @property
    def is_open(self) -> bool:
        return self.entity_id is not None


CLOSED = GalleryState()


@dataclass(frozen=True)
class GalleryView:
    """What the open gallery displays."""

    entity_id: str
    index: int
    locator: str
    caption: str
    position: str
    fit: str
    background: str
    missing: bool
    can_navigate: bool
    counter: str


def _image_count(catalog: Catalog, entity_id: str) -> int:
    return len(resolve_images(catalog[entity_id]))


def transition(
    state: GalleryState,
    action: GalleryAction,
    catalog: Catalog,
    entity_id: Optional[str] = None,
) -> GalleryState:
    """Apply one action to the gallery state.

    Parameters
    ----------
    state : GalleryState
    action : GalleryAction
    catalog : Catalog
    entity_id : Optional[str]
        Entity to open. Required for ``GalleryAction.OPEN``.

    Returns
    -------
    GalleryState
        The new state. ``state`` itself is never modified.
    """
    if action is GalleryAction.OPEN:
        if entity_id is None or entity_id not in catalog:
            logger.warning("Cannot open gallery for unknown entity %r", entity_id)
            return state
        index = first_resolved_index(catalog[entity_id])
        return GalleryState(entity_id=entity_id, index=index or 0)

    if not state.is_open:
        return state

    if action in (GalleryAction.CLOSE, GalleryAction.BACKDROP_CLICK):
        return CLOSED

    if action is GalleryAction.IMAGE_FAILED:
        return replace(state, failed=True)

    count = _image_count(catalog, state.entity_id)
    if count <= 1:
        # No other image to move to; a failure stays shown.
        return state
    step = 1 if action is GalleryAction.NEXT else -1
    return GalleryState(
        entity_id=state.entity_id,
        index=(state.index + step) % count,
    )


def handle_key(
    state: GalleryState,
    key: str,
    catalog: Catalog,
) -> Tuple[GalleryState, bool]:
    """Apply a key press while the gallery may be open.

    Returns
    -------
    Tuple[GalleryState, bool]
        The new state, and whether the key was consumed. A consumed key
        must not trigger default scrolling or navigation.
    """
    if not state.is_open or key not in KEY_BINDINGS:
        return state, False
    return transition(state, KEY_BINDINGS[key], catalog), True


def render_gallery(
    state: GalleryState,
    catalog: Catalog,
) -> Optional[GalleryView]:
    """Project the gallery state onto its display.

    Parameters
    ----------
    state : GalleryState
    catalog : Catalog

    Returns
    -------
    Optional[GalleryView]
        None while the gallery is closed.
    """
    if not state.is_open:
        return None

    entity = catalog[state.entity_id]
    images = resolve_images(entity)
    if images and not state.failed:
        image = images[state.index]
    else:
        image = missing_image(entity)

    fit = image.fit or DEFAULT_FIT
    return GalleryView(
        entity_id=entity.entity_id,
        index=state.index,
        locator=image.locator,
        caption=alt_text(entity.display_name, image),
        position=image.position,
        fit=fit,
        background=_CONTAIN_BACKGROUND if fit == "contain" else "",
        missing=image.missing,
        can_navigate=len(images) > 1,
        counter=f"{state.index + 1} / {len(images)}" if images else "0 / 0",
    )
