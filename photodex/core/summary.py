# -*- coding: utf-8 -*-
"""
Capture Summary - Count and list the entities that have a real image.

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
from dataclasses import dataclass
from typing import List

# PhotoDex internal
from photodex.catalog.models import Catalog, Entity
from photodex.core.images import first_resolved_index


@dataclass(frozen=True)
class CapturedEntry:
    """One row of the captured list."""

    entity_id: str
    name: str

    @property
    def label(self) -> str:
        return f"{self.entity_id}: {self.name}"


def is_captured(entity: Entity) -> bool:
    """Whether the entity has at least one resolved image."""
    return first_resolved_index(entity) is not None


def captured_count(catalog: Catalog) -> int:
    """Number of entities with at least one resolved image."""
    return sum(1 for entity in catalog.values() if is_captured(entity))


def captured_list(catalog: Catalog) -> List[CapturedEntry]:
    """Captured entities in identifier order.

    Parameters
    ----------
    catalog : Catalog

    Returns
    -------
    List[CapturedEntry]
    """
    return [
        CapturedEntry(entity_id=entity.entity_id, name=entity.display_name)
        for entity in catalog.values()
        if is_captured(entity)
    ]


def count_label(count: int) -> str:
    """Text of the captured-count control."""
    return f"Captured: {count}"


def show_all_label(show_all: bool) -> str:
    """Text of the show-all / show-less toggle."""
    return "Show Less" if show_all else "Show All"
