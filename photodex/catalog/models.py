# -*- coding: utf-8 -*-
"""
Catalog Models - Data models for catalog entities and their images.

Defines the Variant, Entity and ResolvedImage records and the immutable
Catalog mapping that holds every entity keyed by its zero-padded
identifier.

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
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Union

logger = logging.getLogger(__name__)


PLACEHOLDER_URL = "https://your-image-url-here.jpg"
MISSING_LOCATOR = "missing"

DEFAULT_POSITION = "center"
DEFAULT_FIT = "contain"


def is_placeholder(ref: Any) -> bool:
    """Whether an image reference carries no real image.

    The placeholder sentinel, empty strings and non-string values are
    all treated as "no image available".

    Parameters
    ----------
    ref : Any
        Image reference taken from a variant.

    Returns
    -------
    bool
    """
    if not isinstance(ref, str):
        return True
    ref = ref.strip()
    return not ref or ref == PLACEHOLDER_URL


def format_entity_id(ordinal: int) -> str:
    """Zero-pad an ordinal to an entity identifier (``7`` -> ``"007"``)."""
    return str(ordinal).zfill(3)


def parse_entity_id(entity_id: str) -> Optional[int]:
    """Parse an identifier back to its ordinal.

    Only canonical identifiers parse: ``"007"`` is 7, while ``"7"``,
    ``"0007"`` and ``"0_7"`` are None. Each ordinal therefore has exactly
    one identifier.
    """
    if not isinstance(entity_id, str) or not (entity_id.isascii() and entity_id.isdigit()):
        return None
    ordinal = int(entity_id)
    if ordinal <= 0 or format_entity_id(ordinal) != entity_id:
        return None
    return ordinal


class Variant:
    """A named sub-form of an entity holding one or more images.

    Parameters
    ----------
    label : str
        Variant label (e.g. ``"Shiny"``).
    image : Union[str, List[str], None]
        A single image locator, or an ordered list of locators.
    position : Union[str, List[str], None]
        Shared position hint, or a list parallel to ``image``.
    fit : Union[str, List[str], None]
        Shared fit hint, or a list parallel to ``image``.
    """

    def __init__(
        self,
        label: str,
        image: Union[str, List[str], None] = None,
        position: Union[str, List[str], None] = None,
        fit: Union[str, List[str], None] = None,
    ) -> None:
        self.label = label
        self.is_multi = isinstance(image, (list, tuple))
        if self.is_multi:
            self.images: List[Any] = list(image)
        elif image is None:
            self.images = []
        else:
            self.images = [image]
        self.position = position
        self.fit = fit

    @property
    def has_real_image(self) -> bool:
        return any(not is_placeholder(ref) for ref in self.images)

    def to_dict(self) -> dict:
        """Serialize to the document form.

        Returns
        -------
        dict
        """
        data: Dict[str, Any] = {'label': self.label}
        if self.is_multi:
            data['image'] = list(self.images)
        elif self.images:
            data['image'] = self.images[0]
        if self.position is not None:
            data['position'] = self.position
        if self.fit is not None:
            data['fit'] = self.fit
        return data

    @classmethod
    def from_dict(cls, data: dict) -> 'Variant':
        """Deserialize from the document form.

        Parameters
        ----------
        data : dict

        Returns
        -------
        Variant
        """
        return cls(
            label=str(data.get('label', '')),
            image=data.get('image'),
            position=data.get('position'),
            fit=data.get('fit'),
        )

    def __repr__(self) -> str:
        return f"Variant(label={self.label!r}, images={len(self.images)})"


class Entity:
    """One catalog record.

    Parameters
    ----------
    entity_id : str
        Zero-padded ordinal identifier (``"001"`` .. ``"1025"``).
    name : str
        Display name.
    variants : Optional[List[Variant]]
        Variants in declared order.
    """

    def __init__(
        self,
        entity_id: str,
        name: str = "",
        variants: Optional[List[Variant]] = None,
    ) -> None:
        self.entity_id = entity_id
        self.name = name
        self.variants = variants or []

    @property
    def ordinal(self) -> Optional[int]:
        return parse_entity_id(self.entity_id)

    @property
    def display_name(self) -> str:
        """Name to show in text fallbacks; the identifier if unnamed."""
        return self.name or self.entity_id

    def to_dict(self) -> dict:
        return {
            'name': self.name,
            'variants': [v.to_dict() for v in self.variants],
        }

    @classmethod
    def from_dict(cls, entity_id: str, data: Any) -> 'Entity':
        """Deserialize one document entry.

        Missing or malformed variant data yields an entity without
        variants rather than an error.

        Parameters
        ----------
        entity_id : str
        data : Any
            Document value for ``entity_id``.

        Returns
        -------
        Entity
        """
        if not isinstance(data, dict):
            logger.warning("Entry %s is not an object; treating as empty", entity_id)
            return cls(entity_id)

        raw_variants = data.get('variants')
        variants: List[Variant] = []
        if isinstance(raw_variants, list):
            for raw in raw_variants:
                if isinstance(raw, dict):
                    variants.append(Variant.from_dict(raw))
                else:
                    logger.debug("Skipping malformed variant in %s: %r", entity_id, raw)
        elif raw_variants is not None:
            logger.warning("Entry %s has malformed variants: %r", entity_id, raw_variants)

        name = data.get('name')
        return cls(
            entity_id=entity_id,
            name=name if isinstance(name, str) else "",
            variants=variants,
        )

    def __repr__(self) -> str:
        return f"Entity({self.entity_id!r}, name={self.name!r})"


@dataclass(frozen=True)
class ResolvedImage:
    """A flattened, placeholder-free image ready for display.

    Attributes
    ----------
    entity_id : str
        Owning entity identifier.
    variant_label : str
        Label of the owning variant.
    locator : str
        Image URL or path.
    position : str
        Object-position hint.
    fit : str
        Object-fit hint.
    missing : bool
        True only for the "missing" stand-in.
    """

    entity_id: str
    variant_label: str
    locator: str
    position: str = DEFAULT_POSITION
    fit: str = DEFAULT_FIT
    missing: bool = False


class Catalog(Mapping):
    """Read-only mapping of identifier -> Entity, in ordinal order.

    Parameters
    ----------
    entities : Optional[List[Entity]]
        Entities to hold. Sorted by ordinal on construction.
    """

    def __init__(self, entities: Optional[List[Entity]] = None) -> None:
        ordered = sorted(
            entities or [],
            key=lambda e: (e.ordinal is None, e.ordinal or 0, e.entity_id),
        )
        self._entities: Dict[str, Entity] = {e.entity_id: e for e in ordered}

    def __getitem__(self, entity_id: str) -> Entity:
        return self._entities[entity_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entities)

    def __len__(self) -> int:
        return len(self._entities)

    @property
    def ids(self) -> List[str]:
        return list(self._entities)

    def entities(self) -> List[Entity]:
        return list(self._entities.values())

    @classmethod
    def from_document(cls, data: dict) -> 'Catalog':
        """Build a catalog from the structured document.

        Keys that are not canonical identifiers (positive, zero-padded to
        three digits) are skipped with a warning.

        Parameters
        ----------
        data : dict
            Mapping of zero-padded identifier to entry.

        Returns
        -------
        Catalog
        """
        entities = []
        for key, value in data.items():
            if parse_entity_id(key) is None:
                logger.warning("Skipping non-canonical catalog key %r", key)
                continue
            entities.append(Entity.from_dict(key, value))
        return cls(entities)

    def to_document(self) -> dict:
        return {eid: e.to_dict() for eid, e in self._entities.items()}

    def __repr__(self) -> str:
        return f"Catalog(entities={len(self)})"
