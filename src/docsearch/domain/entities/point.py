"""Point entities - units persisted in and returned by the vector store."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any
from uuid import UUID

from docsearch.domain.entities.chunk import Chunk


@dataclass(frozen=True)
class PointPayload:
    """Non-vector metadata stored alongside each chunk vector."""

    text: str
    chunk_number: int
    timestamp: datetime
    source_id: UUID
    character_length: int

    @classmethod
    def from_chunk(cls, chunk: Chunk, timestamp: datetime) -> "PointPayload":
        return cls(
            text=chunk.text,
            chunk_number=chunk.chunk_number,
            timestamp=timestamp,
            source_id=chunk.source_id,
            character_length=chunk.character_length,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the payload shape stored in the collection and sent to clients."""
        return {
            "text": self.text,
            "chunkNumber": self.chunk_number,
            "timestamp": self.timestamp.isoformat(),
            "sourceId": str(self.source_id),
            "characterLength": self.character_length,
        }


@dataclass(frozen=True)
class Point:
    """Point - id, embedding vector and payload."""

    id: UUID
    vector: list[float]
    payload: PointPayload


@dataclass(frozen=True)
class StoredPoint:
    """Point as read back from the store, without its vector."""

    id: str
    payload: dict[str, Any]


@dataclass(frozen=True)
class ScoredPoint:
    """Search hit: stored point plus similarity score (higher is closer)."""

    id: str
    payload: dict[str, Any]
    score: float
