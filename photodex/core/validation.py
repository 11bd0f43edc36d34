# -*- coding: utf-8 -*-
"""
Catalog Validation - Integrity checks over the catalog document.

Checks that the document holds the expected number of entries, that
identifiers are contiguous from 001, that no entity repeats a variant
label, and that a fixed set of identifiers carry their expected names.
Failures are collected as discrepancies; the document is never
modified.

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
import json
import logging
from collections import Counter
from enum import Enum
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

# PhotoDex internal
from photodex.catalog.models import format_entity_id, parse_entity_id

EXPECTED_COUNT = 1025

# Names compared by exact Unicode equality.
DEFAULT_SPOT_CHECKS: Dict[str, str] = {
    '001': 'Bulbasaur',
    '029': 'Nidoran♀',
    '032': 'Nidoran♂',
    '122': 'Mr. Mime',
    '144': 'Articuno',
    '145': 'Zapdos',
    '146': 'Moltres',
    '150': 'Mewtwo',
    '151': 'Mew',
    '243': 'Raikou',
    '244': 'Entei',
    '245': 'Suicune',
    '377': 'Regirock',
    '378': 'Regice',
    '379': 'Registeel',
    '380': 'Latias',
    '381': 'Latios',
    '382': 'Kyogre',
    '383': 'Groudon',
    '384': 'Rayquaza',
    '385': 'Jirachi',
    '386': 'Deoxys',
    '479': 'Rotom',
    '480': 'Uxie',
    '481': 'Mesprit',
    '482': 'Azelf',
    '483': 'Dialga',
    '484': 'Palkia',
    '485': 'Heatran',
    '486': 'Regigigas',
    '487': 'Giratina',
    '488': 'Cresselia',
    '489': 'Phione',
    '490': 'Manaphy',
    '491': 'Darkrai',
    '492': 'Shaymin',
    '493': 'Arceus',
    '494': 'Victini',
    '638': 'Cobalion',
    '639': 'Terrakion',
    '640': 'Virizion',
    '641': 'Tornadus',
    '642': 'Thundurus',
    '643': 'Reshiram',
    '644': 'Zekrom',
    '645': 'Landorus',
    '646': 'Kyurem',
    '647': 'Keldeo',
    '648': 'Meloetta',
    '649': 'Genesect',
    '716': 'Xerneas',
    '717': 'Yveltal',
    '718': 'Zygarde',
    '719': 'Diancie',
    '720': 'Hoopa',
    '721': 'Volcanion',
    '782': 'Jangmo-o',
    '785': 'Tapu Koko',
    '789': 'Cosmog',
    '790': 'Cosmoem',
    '791': 'Solgaleo',
    '792': 'Lunala',
    '800': 'Necrozma',
    '807': 'Zeraora',
    '808': 'Meltan',
    '809': 'Melmetal',
    '849': 'Toxtricity',
    '893': 'Zarude',
    '894': 'Regieleki',
    '895': 'Regidrago',
    '896': 'Glastrier',
    '897': 'Spectrier',
    '898': 'Calyrex',
    '905': 'Enamorus',
    '1001': 'Wo-Chien',
    '1002': 'Chien-Pao',
    '1003': 'Ting-Lu',
    '1004': 'Chi-Yu',
    '1005': 'Roaring Moon',
    '1006': 'Iron Valiant',
    '1007': 'Koraidon',
    '1008': 'Miraidon',
    '1009': 'Walking Wake',
    '1010': 'Iron Leaves',
    '1011': 'Dipplin',
    '1012': 'Poltchageist',
    '1013': 'Sinistcha',
    '1014': 'Okidogi',
    '1015': 'Munkidori',
    '1016': 'Fezandipiti',
    '1017': 'Ogerpon',
    '1018': 'Archaludon',
    '1019': 'Hydrapple',
    '1020': 'Gouging Fire',
    '1021': 'Raging Bolt',
    '1022': 'Iron Boulder',
    '1023': 'Iron Crown',
    '1024': 'Terapagos',
    '1025': 'Pecharunt',
}


class DiscrepancyKind(Enum):
    """Category of an integrity failure."""

    COUNT = "count"
    MISSING = "missing"
    DUPLICATE_LABEL = "duplicate_label"
    NAME_MISMATCH = "name_mismatch"


class Discrepancy:
    """A single integrity failure.

    Parameters
    ----------
    kind : DiscrepancyKind
    message : str
        Human-readable description.
    entity_id : Optional[str]
        Entry concerned, if any.
    """

    def __init__(
        self,
        kind: DiscrepancyKind,
        message: str,
        entity_id: Optional[str] = None,
    ) -> None:
        self.kind = kind
        self.message = message
        self.entity_id = entity_id

    def __repr__(self) -> str:
        return f"Discrepancy({self.kind.value}: {self.message})"


class ValidationReport:
    """Outcome of validating a document.

    Parameters
    ----------
    discrepancies : List[Discrepancy]
    checked : int
        Number of entries in the document.
    """

    def __init__(
        self,
        discrepancies: Optional[List[Discrepancy]] = None,
        checked: int = 0,
    ) -> None:
        self.discrepancies = discrepancies or []
        self.checked = checked

    @property
    def ok(self) -> bool:
        return not self.discrepancies

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1

    def of_kind(self, kind: DiscrepancyKind) -> List[Discrepancy]:
        return [d for d in self.discrepancies if d.kind is kind]

    def __repr__(self) -> str:
        return (
            f"ValidationReport(checked={self.checked}, "
            f"discrepancies={len(self.discrepancies)})"
        )


def check_count(data: dict, expected_count: int) -> List[Discrepancy]:
    """Check (a): exactly ``expected_count`` entries."""
    if len(data) == expected_count:
        return []
    return [Discrepancy(
        DiscrepancyKind.COUNT,
        f"Expected {expected_count} entries, got {len(data)}",
    )]


def check_contiguous(data: dict, expected_count: int) -> List[Discrepancy]:
    """Check (b): identifiers 001..N with no gaps.

    N is ``expected_count``, or the highest canonical identifier when the
    document extends beyond it. Each gap inside 1..``expected_count`` is
    its own discrepancy; a run of gaps in the extension range is reported
    once, so a single stray key cannot flood the report.
    """
    found = [
        Discrepancy(
            DiscrepancyKind.MISSING,
            f"Missing entry: {format_entity_id(i)}",
            entity_id=format_entity_id(i),
        )
        for i in range(1, expected_count + 1)
        if format_entity_id(i) not in data
    ]

    extension = sorted(
        o for o in (parse_entity_id(k) for k in data)
        if o is not None and o > expected_count
    )
    previous = expected_count
    for ordinal in extension:
        if ordinal > previous + 1:
            first, last = previous + 1, ordinal - 1
            if first == last:
                message = f"Missing entry: {format_entity_id(first)}"
            else:
                message = (
                    f"Missing entries: {format_entity_id(first)}"
                    f"..{format_entity_id(last)}"
                )
            found.append(Discrepancy(
                DiscrepancyKind.MISSING, message,
                entity_id=format_entity_id(first),
            ))
        previous = ordinal
    return found


def _label_key(label: Any) -> str:
    # Labels are compared by their JSON text so lists and objects count too.
    if isinstance(label, str):
        return label
    return json.dumps(label, sort_keys=True, ensure_ascii=False, default=str)


def check_duplicate_labels(data: dict) -> List[Discrepancy]:
    """Check (c): no entity has two variants with the same label."""
    found: List[Discrepancy] = []
    for key, entry in data.items():
        if not isinstance(entry, dict):
            continue
        variants = entry.get('variants')
        if not isinstance(variants, list):
            continue
        labels = [_label_key(v.get('label')) for v in variants if isinstance(v, dict)]
        duplicates = sorted(label for label, n in Counter(labels).items() if n > 1)
        if duplicates:
            found.append(Discrepancy(
                DiscrepancyKind.DUPLICATE_LABEL,
                f"{key}: {entry.get('name')} has duplicate variants: "
                f"{', '.join(duplicates)}",
                entity_id=key,
            ))
    return found


def check_names(data: dict, spot_checks: Dict[str, str]) -> List[Discrepancy]:
    """Check (d): spot-checked identifiers carry their expected names.

    Identifiers absent from the document are skipped; absence is
    reported by :func:`check_contiguous`.
    """
    found: List[Discrepancy] = []
    for key, expected in spot_checks.items():
        entry = data.get(key)
        if not isinstance(entry, dict):
            continue
        actual = entry.get('name')
        if actual != expected:
            found.append(Discrepancy(
                DiscrepancyKind.NAME_MISMATCH,
                f"{key}: Expected {expected}, got {actual}",
                entity_id=key,
            ))
    return found


def validate_document(
    data: dict,
    expected_count: int = EXPECTED_COUNT,
    spot_checks: Optional[Dict[str, str]] = None,
) -> ValidationReport:
    """Run every integrity check over a catalog document.

    Parameters
    ----------
    data : dict
        Parsed catalog document. Not modified.
    expected_count : int
        Number of entries the document must hold.
    spot_checks : Optional[Dict[str, str]]
        Identifier -> expected name. Defaults to DEFAULT_SPOT_CHECKS.

    Returns
    -------
    ValidationReport
    """
    if spot_checks is None:
        spot_checks = DEFAULT_SPOT_CHECKS

    discrepancies = (
        check_count(data, expected_count)
        + check_contiguous(data, expected_count)
        + check_duplicate_labels(data)
        + check_names(data, spot_checks)
    )
    for d in discrepancies:
        logger.debug("Validation: %s", d.message)
    return ValidationReport(discrepancies=discrepancies, checked=len(data))
