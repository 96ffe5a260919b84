"""Vector store port - point persistence and nearest-neighbour search."""

from typing import Protocol
from uuid import UUID

from docsearch.domain.entities import Point, ScoredPoint, StoredPoint


class VectorStore(Protocol):
    """Port for the collection of chunk points."""

    async def ensure_collection(self) -> None: ...

    async def upsert(self, points: list[Point]) -> None: ...

    async def list_points(self, limit: int) -> list[StoredPoint]: ...

    async def exists(self, point_id: UUID) -> bool: ...

    async def delete(self, point_id: UUID) -> None: ...

    async def search(self, vector: list[float], limit: int) -> list[ScoredPoint]: ...

    async def close(self) -> None: ...
