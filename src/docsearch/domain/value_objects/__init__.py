"""Domain value objects."""

from docsearch.domain.value_objects.chunking_strategy import ChunkingStrategy

__all__ = [
    "ChunkingStrategy",
]
