"""Search DTOs."""

from dataclasses import dataclass


@dataclass
class SearchInput:
    """Input for semantic search."""

    query: str
