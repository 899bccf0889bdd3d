"""
Ranking Policy
==============
Defines the total order used by every entity list.

Rules:
1. Both ranks defined and different -> ascending numeric rank.
2. Only one rank defined -> the ranked record comes first.
3. Otherwise -> label in natural reading order.

Label collation folds case and accents first (so "apple" sorts before
"Banana" and "Äpfel" next to "Apfel"), then falls back to the case-folded
and finally the raw label so that the order is total and repeatable.
"""
from __future__ import annotations

import unicodedata
from typing import Iterable, Optional

from barinventory.model.records import Record

# (unranked flag, rank, label key). Unranked records get flag 1 and rank 0,
# so they sort after every ranked record regardless of its value.
SortKey = tuple[int, float, tuple[str, str, str]]


def label_key(label: Optional[str]) -> tuple[str, str, str]:
    """Collation key for a label."""
    label = label or ""
    decomposed = unicodedata.normalize("NFKD", label)
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    return stripped.casefold(), label.casefold(), label


def sort_key(record: Record) -> SortKey:
    if record.rank is None:
        return 1, 0.0, label_key(record.label)
    return 0, record.rank, label_key(record.label)


def compare(a: Record, b: Record) -> int:
    """Three-way comparison of two records: -1, 0 or 1."""
    ka, kb = sort_key(a), sort_key(b)
    if ka < kb:
        return -1
    if ka > kb:
        return 1
    return 0


def sorted_records(records: Optional[Iterable[Record]]) -> list[Record]:
    """Stable sorted copy; equal keys keep their input order."""
    if records is None:
        return []
    return sorted(records, key=sort_key)


def is_sorted(records: list[Record]) -> bool:
    return all(compare(records[i], records[i + 1]) <= 0 for i in range(len(records) - 1))
