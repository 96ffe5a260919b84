"""Chunker port - text splitting strategies."""

from typing import Protocol

from docsearch.domain.entities import CorpusConfig


class Chunker(Protocol):
    """Port for splitting text into ordered chunks."""

    def chunk(self, text: str, config: CorpusConfig) -> list[str]: ...
