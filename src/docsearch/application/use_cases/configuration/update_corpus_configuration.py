"""Update corpus configuration use case."""

import logging

from docsearch.application.dto.corpus_config_dto import CorpusConfigUpdateInput
from docsearch.application.ports import CorpusConfigStore
from docsearch.domain.entities import CorpusConfig
from docsearch.domain.exceptions import ValidationError
from docsearch.domain.value_objects import ChunkingStrategy

logger = logging.getLogger(__name__)


class UpdateCorpusConfigurationUseCase:
    """Validate and swap in a new corpus configuration.

    Only documents ingested afterwards are affected; stored points are
    never re-chunked.
    """

    def __init__(self, corpus_config_store: CorpusConfigStore) -> None:
        self._config_store = corpus_config_store

    def execute(self, input_data: CorpusConfigUpdateInput) -> CorpusConfig:
        """Raise ValidationError for out-of-range values; otherwise store and return the new config."""
        if input_data.strategy is None:
            strategy = self._config_store.get().strategy
        else:
            try:
                strategy = ChunkingStrategy(input_data.strategy)
            except ValueError as e:
                raise ValidationError(
                    f"Unsupported chunking strategy: {input_data.strategy}"
                ) from e

        config = CorpusConfig(
            chunk_size=input_data.chunk_size,
            chunk_overlap=input_data.chunk_overlap,
            strategy=strategy,
        )
        self._config_store.set(config)
        logger.info(
            "Corpus configuration updated: size=%d overlap=%d strategy=%s",
            config.chunk_size,
            config.chunk_overlap,
            config.strategy.value,
        )
        return config
