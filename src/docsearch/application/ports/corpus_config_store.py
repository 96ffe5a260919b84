"""Corpus configuration store port."""

from typing import Protocol

from docsearch.domain.entities import CorpusConfig


class CorpusConfigStore(Protocol):
    """Port holding the current corpus configuration snapshot."""

    def get(self) -> CorpusConfig: ...

    def set(self, config: CorpusConfig) -> CorpusConfig: ...
