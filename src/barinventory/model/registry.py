from __future__ import annotations

from typing import Generic, Iterator, Optional, TypeVar

H = TypeVar("H")


class RepresentationRegistry(Generic[H]):
    """
    Maps record id -> currently mounted live representation.

    One registry belongs to exactly one list, so independent lists never see
    each other's handles.
    """
    def __init__(self) -> None:
        self._handles: dict[str, H] = {}

    def register(self, record_id: str, handle: H) -> None:
        self._handles[record_id] = handle

    def get(self, record_id: str) -> Optional[H]:
        return self._handles.get(record_id)

    def pop(self, record_id: str) -> Optional[H]:
        return self._handles.pop(record_id, None)

    def ids(self) -> set[str]:
        return set(self._handles)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._handles

    def __len__(self) -> int:
        return len(self._handles)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._handles))
