"""Corpus configuration entity - chunking settings applied to new documents."""

from dataclasses import dataclass

from docsearch.domain.exceptions import ValidationError
from docsearch.domain.value_objects import ChunkingStrategy


@dataclass(frozen=True)
class CorpusConfig:
    """Immutable chunking settings snapshot.

    Instances are validated on construction, so any ``CorpusConfig`` that
    exists satisfies ``chunk_size > 0`` and ``0 <= chunk_overlap < chunk_size``.
    """

    chunk_size: int
    chunk_overlap: int
    strategy: ChunkingStrategy = ChunkingStrategy.RECURSIVE

    def __post_init__(self) -> None:
        for name in ("chunk_size", "chunk_overlap"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValidationError(f"{name} must be an integer")
        if self.chunk_size <= 0:
            raise ValidationError("chunk_size must be greater than 0")
        if self.chunk_overlap < 0:
            raise ValidationError("chunk_overlap must not be negative")
        if self.chunk_overlap >= self.chunk_size:
            raise ValidationError("chunk_overlap must be smaller than chunk_size")
        if not isinstance(self.strategy, ChunkingStrategy):
            raise ValidationError(f"Unsupported chunking strategy: {self.strategy}")
