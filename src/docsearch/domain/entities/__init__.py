"""Domain entities."""

from docsearch.domain.entities.chunk import Chunk
from docsearch.domain.entities.corpus_config import CorpusConfig
from docsearch.domain.entities.point import Point, PointPayload, ScoredPoint, StoredPoint

__all__ = [
    "Chunk",
    "CorpusConfig",
    "Point",
    "PointPayload",
    "ScoredPoint",
    "StoredPoint",
]
