"""Chunk entity - ordered text segment of a submitted document."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class Chunk:
    """Chunk - text segment with its position in the source document."""

    text: str
    chunk_number: int
    source_id: UUID

    @property
    def character_length(self) -> int:
        return len(self.text)
