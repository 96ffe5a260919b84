"""Corpus configuration DTOs."""

from dataclasses import dataclass
from typing import Any


@dataclass
class CorpusConfigUpdateInput:
    """Raw update values as received from the client; validated by the use case."""

    chunk_size: Any
    chunk_overlap: Any
    strategy: Any = None
