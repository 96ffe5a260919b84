"""In-process corpus configuration store."""

from docsearch.domain.entities import CorpusConfig


class InMemoryCorpusConfigStore:
    """Holds the current CorpusConfig for the lifetime of the process.

    The config is immutable and replaced wholesale, so a reader always sees
    either the old or the new snapshot, never a mix of both.
    """

    def __init__(self, initial: CorpusConfig) -> None:
        self._current = initial

    def get(self) -> CorpusConfig:
        return self._current

    def set(self, config: CorpusConfig) -> CorpusConfig:
        self._current = config
        return config
