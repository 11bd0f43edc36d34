# -*- coding: utf-8 -*-
"""
Grid Model - One display cell per catalog entity.

Computes, without any GUI, what each grid cell shows: the entity's
first resolved image with its alt text and position/fit hints, or a
textual fallback flagged as empty. The Qt grid widget only projects
these cells.

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
from dataclasses import dataclass, replace
from typing import List, Optional

# PhotoDex internal
from photodex.catalog.models import Catalog, Entity, ResolvedImage
from photodex.core.images import alt_text, first_resolved_index, resolve_images


@dataclass(frozen=True)
class Cell:
    """Display state of one grid cell.

    Attributes
    ----------
    entity_id : str
    name : str
        Entity name; also the filter key.
    image : Optional[ResolvedImage]
        Image shown in the cell, None for empty cells.
    alt : str
        Alt text for the image, or the fallback text for empty cells.
    empty : bool
        True when the cell has no image to show.
    gallery_index : Optional[int]
        Resolved index the gallery opens at when the cell is clicked.
    """

    entity_id: str
    name: str
    image: Optional[ResolvedImage]
    alt: str
    empty: bool
    gallery_index: Optional[int] = None

    @property
    def clickable(self) -> bool:
        return not self.empty

    @property
    def text(self) -> str:
        """Fallback text shown in place of an image."""
        return self.name or self.entity_id

    def degrade(self) -> 'Cell':
        """Cell to show after the image failed to load."""
        return replace(
            self, image=None, alt=self.text, empty=True, gallery_index=None,
        )


def render_cell(entity: Entity) -> Cell:
    """Build the cell for a single entity.

    Parameters
    ----------
    entity : Entity

    Returns
    -------
    Cell
    """
    index = first_resolved_index(entity)
    if index is None:
        return Cell(
            entity_id=entity.entity_id,
            name=entity.name,
            image=None,
            alt=entity.display_name,
            empty=True,
        )
    image = resolve_images(entity)[index]
    return Cell(
        entity_id=entity.entity_id,
        name=entity.name,
        image=image,
        alt=alt_text(entity.display_name, image),
        empty=False,
        gallery_index=index,
    )


def render_grid(catalog: Catalog) -> List[Cell]:
    """Build one cell per entity, in identifier order.

    Parameters
    ----------
    catalog : Catalog

    Returns
    -------
    List[Cell]
    """
    return [render_cell(entity) for entity in catalog.values()]
