"""
Records
=======
The unit of data tracked by every entity list.

A Record carries only what the list needs to order and identify an entry:
an id, an optional numeric rank and a label. Everything else travels along
untouched in ``payload``.

Classes:
    Record: Immutable record with input normalisation helpers.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Union

RankValue = Optional[float]

# Alternative spellings accepted when records arrive as plain mappings
_RANK_KEYS = ("rank", "display_order", "displayOrder")
_LABEL_KEYS = ("label", "name")


def normalize_rank(value: Any) -> RankValue:
    """Return a usable numeric rank, or None when the value carries no rank."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        if isinstance(value, float) and math.isnan(value):
            return None
        return value
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return None if math.isnan(number) else number


def normalize_label(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class Record:
    id: str
    rank: RankValue = None
    label: str = ""
    payload: Any = field(default=None, compare=False)

    def __post_init__(self) -> None:
        # frozen: go through object.__setattr__ to store the normalised values
        object.__setattr__(self, "id", str(self.id))
        object.__setattr__(self, "rank", normalize_rank(self.rank))
        object.__setattr__(self, "label", normalize_label(self.label))

    def sort_fields(self) -> tuple[RankValue, str]:
        """The (rank, label) pair that determines the position of the record."""
        return self.rank, self.label

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> Record:
        """
        Build a Record from a plain mapping.

        Missing rank/label are defaulted. A missing id raises ValueError,
        since the id is what joins a record to its on-screen representation.
        """
        if data.get("id") is None:
            raise ValueError(f"Record data without an 'id': {dict(data)!r}")

        rank = next((data[k] for k in _RANK_KEYS if k in data), None)
        label = next((data[k] for k in _LABEL_KEYS if k in data), None)
        return Record(id=data["id"], rank=rank, label=label, payload=data.get("payload"))

    @staticmethod
    def coerce(obj: Union[Record, Mapping[str, Any]]) -> Record:
        """Accept either a Record or a mapping and return a Record."""
        if isinstance(obj, Record):
            return obj
        if isinstance(obj, Mapping):
            return Record.from_dict(obj)
        raise TypeError(f"Cannot build a Record from {type(obj).__name__}")
