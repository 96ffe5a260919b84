"""Ingest document use case."""

import logging
from datetime import UTC, datetime
from uuid import uuid4

from docsearch.application.dto.document_dto import DocumentCreateInput, IngestionOutput
from docsearch.application.ports import (
    Chunker,
    CorpusConfigStore,
    EmbeddingProvider,
    VectorStore,
)
from docsearch.domain.entities import Chunk, Point, PointPayload, StoredPoint
from docsearch.domain.exceptions import (
    DependencyError,
    EmbeddingCountMismatch,
    ValidationError,
)

logger = logging.getLogger(__name__)


class IngestDocumentUseCase:
    """Ingest free text: chunking, batch embedding, one upsert of all points.

    Not idempotent: every call creates a new source id and new point ids,
    so submitting the same text twice stores it twice.
    """

    def __init__(
        self,
        chunker: Chunker,
        embedding_provider: EmbeddingProvider,
        vector_store: VectorStore,
        corpus_config_store: CorpusConfigStore,
    ) -> None:
        self._chunker = chunker
        self._embedding_provider = embedding_provider
        self._vector_store = vector_store
        self._config_store = corpus_config_store

    async def execute(self, input_data: DocumentCreateInput) -> IngestionOutput:
        """Chunk, embed and store the document; return created points without vectors."""
        content = input_data.content
        if not isinstance(content, str) or not content.strip():
            raise ValidationError("Text is required and must be a string.")

        # One snapshot per request, later config updates do not leak in
        config = self._config_store.get()
        source_id = uuid4()
        submitted_at = datetime.now(UTC)

        try:
            texts = self._chunker.chunk(content, config)
        except ValueError as e:
            raise DependencyError(f"Chunking failed: {e}") from e
        if not texts:
            raise DependencyError("Chunker produced no chunks for non-empty text")

        chunks = [
            Chunk(text=text, chunk_number=i, source_id=source_id)
            for i, text in enumerate(texts)
        ]
        embeddings = await self._embedding_provider.embed([c.text for c in chunks])
        if len(embeddings) != len(chunks):
            raise EmbeddingCountMismatch(expected=len(chunks), actual=len(embeddings))

        points = [
            Point(
                id=uuid4(),
                vector=embedding,
                payload=PointPayload.from_chunk(chunk, submitted_at),
            )
            for chunk, embedding in zip(chunks, embeddings, strict=True)
        ]
        await self._vector_store.upsert(points)

        logger.info(
            "Ingested source %s: %d chunks (%s, size=%d, overlap=%d)",
            source_id,
            len(points),
            config.strategy.value,
            config.chunk_size,
            config.chunk_overlap,
        )
        return IngestionOutput(
            source_id=source_id,
            strategy=config.strategy,
            points=[StoredPoint(id=str(p.id), payload=p.payload.to_dict()) for p in points],
        )
