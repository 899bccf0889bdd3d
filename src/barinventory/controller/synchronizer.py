"""
View Synchronizer
=================
Keeps a rendered list consistent with its Canonical Collection.

Why is this file needed?
------------------------
Every entity list (locations, counters, areas) shows its records sorted and
must follow add/update/remove without rebuilding the whole list each time.
This class decides, per mutation, between a full rebuild and a minimal patch,
and tells the host surface where to place each representation.

The view is an explicit two-state machine:

    EMPTY      no container, placeholder shown, nothing mounted
    POPULATED  container present, one mounted handle per record, in order

Only ``set_records`` (and ``add_record`` on an EMPTY view) rebuilds. All
other calls patch a single representation.

Failure semantics:
    Odd input (None collections, missing rank or label, repeated ids) is
    normalised. Exceptions raised by the renderer or by the host surface are
    not caught: they reach the caller, and bookkeeping reflects the last step
    that completed. There is no rollback; ``set_records`` recovers a clean
    state.

Classes:
    ViewState: EMPTY / POPULATED.
    ViewSynchronizer: The state machine.
"""
from __future__ import annotations

import logging
from enum import StrEnum
from typing import Any, Iterable, Mapping, Optional, Union

from barinventory.controller.contracts import HostSurface, LiveRepresentation, Renderer
from barinventory.model.collection import CanonicalCollection
from barinventory.model.ranking import is_sorted
from barinventory.model.records import Record
from barinventory.model.registry import RepresentationRegistry

logger = logging.getLogger(__name__)

RecordLike = Union[Record, Mapping[str, Any]]


class ViewState(StrEnum):
    EMPTY = "empty"
    POPULATED = "populated"


class ViewSynchronizer:
    """
    Owns one Canonical Collection and one Representation Registry, and drives
    one host surface.

    Args:
        host: Surface that places representations and owns the placeholder.
        renderer: Creates a live representation for a record.
        records: Optional initial records; rendered immediately.
        name: Used in log messages to tell lists apart.
    """
    def __init__(
        self,
        host: HostSurface,
        renderer: Renderer,
        records: Optional[Iterable[RecordLike]] = None,
        name: str = "list",
    ) -> None:
        self.host = host
        self.renderer = renderer
        self.name = name

        self._collection = CanonicalCollection()
        self._registry: RepresentationRegistry[LiveRepresentation] = RepresentationRegistry()
        self._state = ViewState.EMPTY

        self.set_records(records)

    # ---- public API ----

    @property
    def state(self) -> ViewState:
        return self._state

    def set_records(self, records: Optional[Iterable[RecordLike]]) -> None:
        """Replace every record and rebuild the view from scratch."""
        unique = self._unique_by_id([Record.coerce(r) for r in records or []])
        logger.debug(f"[{self.name}] set_records: {len(unique)} record(s)")

        self._unmount_all()
        self._collection.replace_all(unique)
        self._render_full()

    def add_record(self, record: RecordLike) -> None:
        """Insert one record at its sorted position."""
        record = Record.coerce(record)

        if record.id in self._collection:
            # Same id again: overwrite in place instead of keeping two entries
            logger.debug(f"[{self.name}] add_record: '{record.id}' exists, updating instead")
            self.update_record(record)
            return

        was_empty = self._state is ViewState.EMPTY
        index = self._collection.insert(record)

        if was_empty:
            self._rebuild()
            return

        self._mount_at(index, record)

    def update_record(self, record: RecordLike) -> None:
        """Refresh a record in place; move it if its rank or label changed."""
        record = Record.coerce(record)

        index = self._collection.find_index_by_id(record.id)
        if index == -1:
            self.add_record(record)
            return

        old = self._collection.replace_at(index, record)
        needs_resort = old.sort_fields() != record.sort_fields()
        # Collection is sorted again before any collaborator is called
        if needs_resort:
            self._collection.resort()

        handle = self._registry.get(record.id)
        if handle is None:
            # Only reachable after an earlier renderer/host failure
            logger.warning(f"[{self.name}] '{record.id}' has no mounted representation, rebuilding")
            self._rebuild()
            return

        handle.refresh(record)

        if not needs_resort:
            return

        self.host.unmount(handle)
        self._registry.pop(record.id)
        self._mount_at(self._collection.find_index_by_id(record.id), record)

    def remove_by_id(self, record_id: str) -> None:
        """Remove a record and its representation. Unknown ids are ignored."""
        record_id = str(record_id)
        self._collection.remove_by_id(record_id)

        handle = self._registry.get(record_id)
        if handle is not None:
            self.host.unmount(handle)
            self._registry.pop(record_id)

        if self._collection.is_empty:
            self._enter_empty()

    # ---- inspection ----

    def records(self) -> list[Record]:
        return self._collection.snapshot()

    def get(self, record_id: str) -> Optional[Record]:
        return self._collection.get(str(record_id))

    def handle_for(self, record_id: str) -> Optional[LiveRepresentation]:
        return self._registry.get(str(record_id))

    def mounted_ids(self) -> list[str]:
        """Ids with a registered representation, in collection order."""
        return [rid for rid in self._collection.ids() if rid in self._registry]

    def check_consistency(self) -> list[str]:
        """Describe every broken invariant. An empty list means consistent."""
        problems: list[str] = []
        records = self._collection.snapshot()
        ids = [r.id for r in records]

        if not is_sorted(records):
            problems.append("collection is not sorted")
        if len(set(ids)) != len(ids):
            problems.append("collection contains duplicate ids")

        registered = self._registry.ids()
        missing = set(ids) - registered
        orphans = registered - set(ids)
        if missing:
            problems.append(f"records without representation: {sorted(missing)}")
        if orphans:
            problems.append(f"representations without record: {sorted(orphans)}")

        expected = ViewState.EMPTY if not records else ViewState.POPULATED
        if self._state is not expected:
            problems.append(f"state is {self._state} but should be {expected}")
        return problems

    def __len__(self) -> int:
        return len(self._collection)

    def __contains__(self, record_id: object) -> bool:
        return str(record_id) in self._collection

    # ---- internals ----

    def _rebuild(self) -> None:
        self._unmount_all()
        self._render_full()

    def _render_full(self) -> None:
        """Mount every record in collection order. Collection must already be sorted."""
        if self._collection.is_empty:
            self._enter_empty()
            return

        self._enter_populated()
        for record in self._collection:
            handle = self.renderer(record)
            self.host.mount_append(handle)
            self._registry.register(record.id, handle)

    def _mount_at(self, index: int, record: Record) -> None:
        """Mount `record` (sitting at `index`) before its successor, or append."""
        handle = self.renderer(record)

        before = None
        if index + 1 < len(self._collection):
            before = self._registry.get(self._collection[index + 1].id)

        if before is not None:
            self.host.mount_before(handle, before)
        else:
            self.host.mount_append(handle)
        self._registry.register(record.id, handle)

    def _unmount_all(self) -> None:
        for record_id in self._registry:
            self.host.unmount(self._registry.get(record_id))
            self._registry.pop(record_id)

    def _enter_empty(self) -> None:
        self._unmount_all()
        if self._state is ViewState.POPULATED:
            self.host.destroy_container()
            logger.debug(f"[{self.name}] POPULATED -> EMPTY")
        self._state = ViewState.EMPTY
        self.host.show_placeholder()

    def _enter_populated(self) -> None:
        if self._state is ViewState.POPULATED:
            return
        self.host.hide_placeholder()
        self.host.create_container()
        self._state = ViewState.POPULATED
        logger.debug(f"[{self.name}] EMPTY -> POPULATED")

    def _unique_by_id(self, records: list[Record]) -> list[Record]:
        """Keep the last occurrence of each id, at that occurrence's position."""
        seen: set[str] = set()
        kept: list[Record] = []
        for record in reversed(records):
            if record.id in seen:
                logger.warning(f"[{self.name}] duplicate id '{record.id}' dropped, keeping the last one")
                continue
            seen.add(record.id)
            kept.append(record)
        kept.reverse()
        return kept
