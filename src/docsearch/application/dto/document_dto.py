"""Document DTOs."""

from dataclasses import dataclass
from uuid import UUID

from docsearch.domain.entities import StoredPoint
from docsearch.domain.value_objects import ChunkingStrategy


@dataclass
class DocumentCreateInput:
    """Input for ingesting a document."""

    content: str


@dataclass
class IngestionOutput:
    """Output DTO for an ingested document: created points without vectors."""

    source_id: UUID
    strategy: ChunkingStrategy
    points: list[StoredPoint]

    @property
    def chunks_created(self) -> int:
        return len(self.points)
