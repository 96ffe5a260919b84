"""Application ports - interfaces for external adapters."""

from docsearch.application.ports.chunker import Chunker
from docsearch.application.ports.corpus_config_store import CorpusConfigStore
from docsearch.application.ports.embedding_provider import EmbeddingProvider
from docsearch.application.ports.vector_store import VectorStore

__all__ = [
    "Chunker",
    "CorpusConfigStore",
    "EmbeddingProvider",
    "VectorStore",
]
