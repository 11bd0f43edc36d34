# -*- coding: utf-8 -*-
"""
Filter Index - Live name filter over the grid.

Holds every entity name case-folded in a numpy string array so that a
query is a single vectorised substring search. Filtering only changes
visibility; cell membership and order are unaffected. When few cells
remain visible the grid switches to a compact single-column layout.

Dependencies
------------
numpy

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
from enum import Enum
from typing import List

# Third-party
import numpy as np

# PhotoDex internal
from photodex.catalog.models import Catalog

COMPACT_THRESHOLD = 2


class LayoutMode(Enum):
    """Arrangement of the visible cells."""

    GRID = "grid"
    FLEX = "flex"


@dataclass(frozen=True, eq=False)
class FilterResult:
    """Outcome of applying a query.

    Attributes
    ----------
    query : str
        The query as typed.
    ids : List[str]
        Every entity id, in grid order.
    visible : np.ndarray
        Boolean mask parallel to ``ids``.
    layout : LayoutMode
    """

    query: str
    ids: List[str]
    visible: np.ndarray
    layout: LayoutMode

    @property
    def visible_count(self) -> int:
        return int(np.count_nonzero(self.visible))

    @property
    def visible_ids(self) -> List[str]:
        return [eid for eid, shown in zip(self.ids, self.visible) if shown]

    def is_visible(self, entity_id: str) -> bool:
        return bool(self.visible[self.ids.index(entity_id)])


class FilterIndex:
    """Case-insensitive substring index over entity names.

    Parameters
    ----------
    catalog : Catalog
    compact_threshold : int
        Visible-cell count at or below which the layout is compact.
    """

    def __init__(
        self,
        catalog: Catalog,
        compact_threshold: int = COMPACT_THRESHOLD,
    ) -> None:
        self._ids = catalog.ids
        self._names = np.array(
            [(e.name or "").casefold() for e in catalog.values()],
            dtype=str,
        )
        self._compact_threshold = compact_threshold

    def __len__(self) -> int:
        return len(self._ids)

    def apply(self, query: str) -> FilterResult:
        """Match the query against every name.

        Parameters
        ----------
        query : str
            Text typed by the user. An empty query matches everything.

        Returns
        -------
        FilterResult
        """
        needle = (query or "").casefold()
        if needle and len(self._names):
            visible = np.char.find(self._names, needle) >= 0
        else:
            visible = np.ones(len(self._ids), dtype=bool)

        count = int(np.count_nonzero(visible))
        layout = (
            LayoutMode.FLEX if count <= self._compact_threshold
            else LayoutMode.GRID
        )
        return FilterResult(
            query=query or "",
            ids=list(self._ids),
            visible=visible,
            layout=layout,
        )
