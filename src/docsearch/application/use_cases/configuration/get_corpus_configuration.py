"""Get corpus configuration use case."""

from docsearch.application.ports import CorpusConfigStore
from docsearch.domain.entities import CorpusConfig


class GetCorpusConfigurationUseCase:
    """Return the current corpus configuration snapshot."""

    def __init__(self, corpus_config_store: CorpusConfigStore) -> None:
        self._config_store = corpus_config_store

    def execute(self) -> CorpusConfig:
        return self._config_store.get()
