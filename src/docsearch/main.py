"""Application entry point and composition root."""

import logging

from docsearch import __version__
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
from docsearch.config import Settings, get_settings
from docsearch.domain.entities import CorpusConfig
from docsearch.infrastructure.chunking.text_chunker import TextChunker
from docsearch.infrastructure.corpus_config.in_memory_store import InMemoryCorpusConfigStore
from docsearch.infrastructure.embedding.openai_provider import OpenAIEmbeddingProvider
from docsearch.infrastructure.vector_store.qdrant_store import QdrantVectorStore
from docsearch.interfaces.api.app import create_app
from docsearch.interfaces.api.middleware.cors import CORSMiddleware
from docsearch.interfaces.api.middleware.store_lifespan import VectorStoreLifespanMiddleware
from docsearch.interfaces.api.resources.corpus_configuration import CorpusConfigurationResource
from docsearch.interfaces.api.resources.documents import DocumentResource, DocumentsResource
from docsearch.interfaces.api.resources.health import HealthResource
from docsearch.interfaces.api.resources.search import SearchResource
from docsearch.log_config import configure_logging

logger = logging.getLogger(__name__)


def create_docsearch_app(settings: Settings | None = None):
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()

    vector_store = QdrantVectorStore.from_url(
        url=settings.qdrant_url,
        api_key=settings.qdrant_api_key,
        collection_name=settings.qdrant_collection,
    )
    embedding_provider = OpenAIEmbeddingProvider(
        base_url=settings.resolved_embedding_api_url,
        api_key=settings.embedding_api_key,
        model=settings.embedding_model,
        dimensions=settings.embedding_dimensions,
    )
    corpus_config_store = InMemoryCorpusConfigStore(
        CorpusConfig(
            chunk_size=settings.default_chunk_size,
            chunk_overlap=settings.default_chunk_overlap,
            strategy=settings.default_chunking_strategy,
        )
    )
    chunker = TextChunker()

    ingest_document = IngestDocumentUseCase(
        chunker=chunker,
        embedding_provider=embedding_provider,
        vector_store=vector_store,
        corpus_config_store=corpus_config_store,
    )
    list_documents = ListDocumentsUseCase(vector_store=vector_store)
    delete_document = DeleteDocumentUseCase(vector_store=vector_store)
    semantic_search = SemanticSearchUseCase(
        embedding_provider=embedding_provider,
        vector_store=vector_store,
    )
    get_configuration = GetCorpusConfigurationUseCase(corpus_config_store)
    update_configuration = UpdateCorpusConfigurationUseCase(corpus_config_store)

    cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]

    return create_app(
        documents_resource=DocumentsResource(ingest_document, list_documents),
        document_resource=DocumentResource(delete_document),
        corpus_configuration_resource=CorpusConfigurationResource(
            get_configuration, update_configuration
        ),
        search_resource=SearchResource(semantic_search),
        health_resource=HealthResource(),
        middleware=[
            CORSMiddleware(cors_origins),
            VectorStoreLifespanMiddleware(vector_store),
        ],
    )


def main() -> None:
    """CLI entry point - run uvicorn server."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings.effective_log_level)
    logger.info("docsearch v%s starting on http://localhost:%d", __version__, settings.port)

    app = create_docsearch_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
