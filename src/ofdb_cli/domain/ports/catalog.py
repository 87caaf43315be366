"""Port for the remote place catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ofdb_cli.domain.model import DuplicateCandidate, NewPlace, Place, PlaceId, Review


@runtime_checkable
class PlaceCatalog(Protocol):
    """Blocking operations offered by the catalog service.

    Implementations raise on remote rejections and transport failures; the
    submission drivers turn those into per-record outcomes.
    """

    def create_place(self, place: NewPlace) -> PlaceId: ...

    def read_places(self, ids: Sequence[PlaceId]) -> list[Place]: ...

    def update_place(self, place_id: PlaceId, place: Place) -> PlaceId: ...

    def search_duplicates(self, place: NewPlace) -> list[DuplicateCandidate]: ...

    def review_places(self, ids: Sequence[PlaceId], review: Review) -> None: ...
