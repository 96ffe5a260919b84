"""Fixtures for API tests."""

import pytest

from docsearch.application.use_cases.configuration.get_corpus_configuration import (
    GetCorpusConfigurationUseCase,
)
from docsearch.application.use_cases.configuration.update_corpus_configuration import (
    UpdateCorpusConfigurationUseCase,
)
from docsearch.application.use_cases.document.delete_document import DeleteDocumentUseCase
from docsearch.application.use_cases.document.ingest_document import IngestDocumentUseCase
from docsearch.application.use_cases.document.list_documents import ListDocumentsUseCase
from docsearch.application.use_cases.search.semantic_search import SemanticSearchUseCase
from docsearch.infrastructure.chunking.text_chunker import TextChunker
from docsearch.interfaces.api.app import create_app
from docsearch.interfaces.api.middleware.cors import CORSMiddleware
from docsearch.interfaces.api.middleware.store_lifespan import VectorStoreLifespanMiddleware
from docsearch.interfaces.api.resources.corpus_configuration import CorpusConfigurationResource
from docsearch.interfaces.api.resources.documents import DocumentResource, DocumentsResource
from docsearch.interfaces.api.resources.health import HealthResource
from docsearch.interfaces.api.resources.search import SearchResource


@pytest.fixture
def embedding_provider(mock_embedding_provider):
    """Embedding provider used by the app; tests may swap its side effect."""
    return mock_embedding_provider


@pytest.fixture
def app(fake_vector_store, embedding_provider, corpus_config_store):
    """Falcon ASGI app wired to in-memory fakes."""
    ingest_document = IngestDocumentUseCase(
        chunker=TextChunker(),
        embedding_provider=embedding_provider,
        vector_store=fake_vector_store,
        corpus_config_store=corpus_config_store,
    )
    semantic_search = SemanticSearchUseCase(
        embedding_provider=embedding_provider,
        vector_store=fake_vector_store,
    )
    return create_app(
        documents_resource=DocumentsResource(
            ingest_document, ListDocumentsUseCase(fake_vector_store)
        ),
        document_resource=DocumentResource(DeleteDocumentUseCase(fake_vector_store)),
        corpus_configuration_resource=CorpusConfigurationResource(
            GetCorpusConfigurationUseCase(corpus_config_store),
            UpdateCorpusConfigurationUseCase(corpus_config_store),
        ),
        search_resource=SearchResource(semantic_search),
        health_resource=HealthResource(),
        middleware=[
            CORSMiddleware(["*"]),
            VectorStoreLifespanMiddleware(fake_vector_store),
        ],
    )


@pytest.fixture
def client(app):
    """Falcon ASGI test client."""
    from falcon.testing import TestClient
    return TestClient(app)
