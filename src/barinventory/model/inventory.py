"""
Inventory Entities
==================
The bar-inventory entities that are shown as sorted lists.

    Location  -> has Counters   (listed by name)
    Counter   -> has Areas      (listed by name)
    Area      -> shelf/fridge/speed rail inside a counter
                 (listed by display order, then name)

Each entity converts itself into a Record for its list. The entity itself
rides along as the record payload, so list item widgets can hand it back to
edit handlers unchanged.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from barinventory.model.records import Record


@dataclass
class InventoryEntry:
    """Counted stock of one product in one area (start and end of a shift)."""
    product_id: str
    start_crates: Optional[int] = None
    start_bottles: Optional[int] = None
    start_open_volume_ml: Optional[float] = None
    end_crates: Optional[int] = None
    end_bottles: Optional[int] = None
    end_open_volume_ml: Optional[float] = None


@dataclass
class Area:
    id: str
    name: str
    description: str = ""
    display_order: Optional[int] = None
    inventory_items: List[InventoryEntry] = field(default_factory=list)

    def to_record(self) -> Record:
        return Record(id=self.id, rank=self.display_order, label=self.name, payload=self)


@dataclass
class Counter:
    id: str
    name: str
    description: str = ""
    areas: List[Area] = field(default_factory=list)

    def to_record(self) -> Record:
        # Counters carry no display order; the name alone decides
        return Record(id=self.id, rank=None, label=self.name, payload=self)

    def find_area(self, area_id: str) -> Optional[Area]:
        return next((a for a in self.areas if a.id == area_id), None)


@dataclass
class Location:
    id: str
    name: str
    address: str = ""
    counters: List[Counter] = field(default_factory=list)

    def to_record(self) -> Record:
        return Record(id=self.id, rank=None, label=self.name, payload=self)

    def find_counter(self, counter_id: str) -> Optional[Counter]:
        return next((c for c in self.counters if c.id == counter_id), None)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> Location:
        counters = []
        for c in data.get("counters", []):
            areas = [
                Area(
                    id=a["id"],
                    name=a.get("name", ""),
                    description=a.get("description", ""),
                    display_order=a.get("display_order", a.get("displayOrder")),
                    inventory_items=[InventoryEntry(**e) for e in a.get("inventory_items", [])],
                )
                for a in c.get("areas", [])
            ]
            counters.append(Counter(id=c["id"], name=c.get("name", ""),
                                    description=c.get("description", ""), areas=areas))
        return Location(id=data["id"], name=data.get("name", ""),
                        address=data.get("address", ""), counters=counters)
