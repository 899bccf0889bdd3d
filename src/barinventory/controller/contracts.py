"""
Collaborator contracts consumed by the View Synchronizer.

The synchronizer never looks inside a handle. It only hands handles back to
the host surface, and asks a handle to refresh itself when its record changes.
"""
from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable

from barinventory.model.records import Record


@runtime_checkable
class LiveRepresentation(Protocol):
    def refresh(self, record: Record) -> None:
        """Redraw in place with the new record data."""
        ...


Renderer = Callable[[Record], LiveRepresentation]


@runtime_checkable
class HostSurface(Protocol):
    """Places and removes live representations. Owns the placeholder state."""

    def create_container(self) -> None: ...

    def destroy_container(self) -> None: ...

    def mount_append(self, handle: LiveRepresentation) -> None: ...

    def mount_before(self, handle: LiveRepresentation, before: LiveRepresentation) -> None: ...

    def unmount(self, handle: LiveRepresentation) -> None:
        """Remove `handle` from the surface and release it."""
        ...

    def show_placeholder(self) -> None: ...

    def hide_placeholder(self) -> None: ...
