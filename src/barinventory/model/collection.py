"""
Canonical Collection
====================
The authoritative, always-sorted sequence of records behind one list.

Only insertion by sort position is supported; the order in which records were
added carries no meaning. Ids are expected to be unique, but this class does
not enforce it: ``insert`` keeps both entries when an id repeats. Callers that
need uniqueness check ``find_index_by_id`` first (the View Synchronizer does).
"""
from __future__ import annotations

import bisect
from typing import Iterable, Iterator, Optional

from barinventory.model.ranking import sort_key, sorted_records
from barinventory.model.records import Record


class CanonicalCollection:
    def __init__(self, records: Optional[Iterable[Record]] = None) -> None:
        self._records: list[Record] = []
        if records is not None:
            self.replace_all(records)

    def replace_all(self, records: Optional[Iterable[Record]]) -> None:
        """Discard the current sequence and store a sorted copy of `records`."""
        self._records = sorted_records(records)

    def insert(self, record: Record) -> int:
        """
        Splice `record` into its sorted position and return that index.

        The record goes after every existing record with an equal key, which
        is where a stable re-sort after appending would have put it.
        """
        index = bisect.bisect_right(self._records, sort_key(record), key=sort_key)
        self._records.insert(index, record)
        return index

    def remove_by_id(self, record_id: str) -> Optional[Record]:
        """Remove the record with `record_id`. Returns it, or None if absent."""
        index = self.find_index_by_id(record_id)
        if index == -1:
            return None
        return self._records.pop(index)

    def find_index_by_id(self, record_id: str) -> int:
        for i, record in enumerate(self._records):
            if record.id == record_id:
                return i
        return -1

    def replace_at(self, index: int, record: Record) -> Record:
        """Overwrite the record at `index` without moving it. Returns the old record."""
        old = self._records[index]
        self._records[index] = record
        return old

    def resort(self) -> None:
        """Re-establish sort order in place (stable)."""
        self._records.sort(key=sort_key)

    def get(self, record_id: str) -> Optional[Record]:
        index = self.find_index_by_id(record_id)
        return None if index == -1 else self._records[index]

    def ids(self) -> list[str]:
        return [r.id for r in self._records]

    def snapshot(self) -> list[Record]:
        return list(self._records)

    @property
    def is_empty(self) -> bool:
        return not self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(list(self._records))

    def __contains__(self, record_id: object) -> bool:
        return any(r.id == record_id for r in self._records)

    def __getitem__(self, index: int) -> Record:
        return self._records[index]
