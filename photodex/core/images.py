# -*- coding: utf-8 -*-
"""
Image Resolver - Flatten an entity's variants into displayable images.

Single-image and multi-image variants go through the same path: each
declared image becomes one ResolvedImage carrying its variant's label
and position/fit hints, with placeholder entries dropped. The grid and
the gallery both pick their initial image from this list.

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

# PhotoDex internal
from photodex.catalog.models import (
    DEFAULT_FIT,
    DEFAULT_POSITION,
    MISSING_LOCATOR,
    Entity,
    ResolvedImage,
    is_placeholder,
)

_MISSING_CAPTION = "missing"
_LABEL_SEPARATORS = " -:_,"


def _hint_for(hint: Any, index: int, default: str) -> str:
    """Pick the hint for the image at ``index``.

    A list is parallel to the variant's images and is right-padded with
    ``default``; a plain string applies to every image.
    """
    if isinstance(hint, (list, tuple)):
        if index < len(hint) and isinstance(hint[index], str) and hint[index]:
            return hint[index]
        return default
    if isinstance(hint, str) and hint:
        return hint
    return default


def resolve_images(entity: Entity) -> List[ResolvedImage]:
    """Resolve every real image of an entity, in declaration order.

    Parameters
    ----------
    entity : Entity

    Returns
    -------
    List[ResolvedImage]
        One record per non-placeholder image, ordered by variant and
        then by position within the variant. Empty if the entity has
        no real images.
    """
    resolved: List[ResolvedImage] = []
    for variant in entity.variants:
        for i, ref in enumerate(variant.images):
            if is_placeholder(ref):
                continue
            resolved.append(ResolvedImage(
                entity_id=entity.entity_id,
                variant_label=variant.label,
                locator=ref.strip(),
                position=_hint_for(variant.position, i, DEFAULT_POSITION),
                fit=_hint_for(variant.fit, i, DEFAULT_FIT),
            ))
    return resolved


def first_resolved_index(entity: Entity) -> Optional[int]:
    """Index into ``resolve_images(entity)`` of the first real image.

    Returns
    -------
    Optional[int]
        0 when the entity has any real image, None otherwise.
    """
    for variant in entity.variants:
        if variant.has_real_image:
            return 0
    return None


def first_real_variant_index(entity: Entity) -> Optional[int]:
    """Index of the first variant that carries a real image, or None."""
    for i, variant in enumerate(entity.variants):
        if variant.has_real_image:
            return i
    return None


def missing_image(entity: Entity) -> ResolvedImage:
    """The stand-in shown when an entity has no image to display."""
    return ResolvedImage(
        entity_id=entity.entity_id,
        variant_label=_MISSING_CAPTION,
        locator=MISSING_LOCATOR,
        missing=True,
    )


def display_label(name: str, variant_label: str) -> str:
    """Strip a redundant leading copy of the entity name from a label.

    ``display_label("Vulpix", "Vulpix Alolan")`` -> ``"Alolan"``.
    A label that merely starts with the same letters
    (``"Vulpixian"``) is left alone.
    """
    label = variant_label.strip()
    if not name:
        return label
    if label.casefold().startswith(name.casefold()):
        rest = label[len(name):]
        if not rest or rest[0] in _LABEL_SEPARATORS:
            return rest.strip(_LABEL_SEPARATORS)
    return label


def alt_text(name: str, image: ResolvedImage) -> str:
    """Alt text / caption for a resolved image.

    Parameters
    ----------
    name : str
        Entity display name.
    image : ResolvedImage

    Returns
    -------
    str
        ``"<name> - <label>"``, ``"<name>"`` when the label only repeats
        the name, or ``"<name> - missing"`` for the stand-in.
    """
    if image.missing:
        return f"{name} - {_MISSING_CAPTION}"
    label = display_label(name, image.variant_label)
    return f"{name} - {label}" if label else name
