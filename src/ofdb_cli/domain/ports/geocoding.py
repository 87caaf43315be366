"""Port for resolving postal addresses to coordinates."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ofdb_cli.domain.model import Address, Coordinates


@runtime_checkable
class GeoCoder(Protocol):
    def resolve(self, address: Address) -> Coordinates | None:
        """Return ``(lat, lng)`` for ``address`` or ``None`` if it cannot be found."""
        ...
