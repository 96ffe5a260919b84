"""Semantic search use case - query embedding + nearest neighbours."""

from docsearch.application.dto.search_dto import SearchInput
from docsearch.application.ports import EmbeddingProvider, VectorStore
from docsearch.domain.entities import ScoredPoint
from docsearch.domain.exceptions import EmbeddingCountMismatch, ValidationError

SEARCH_LIMIT = 5


class SemanticSearchUseCase:
    """Top-``SEARCH_LIMIT`` cosine search; ranking is left to the vector store."""

    def __init__(
        self,
        embedding_provider: EmbeddingProvider,
        vector_store: VectorStore,
    ) -> None:
        self._embedding_provider = embedding_provider
        self._vector_store = vector_store

    async def execute(self, input_data: SearchInput) -> list[ScoredPoint]:
        """Execute semantic search."""
        query = input_data.query
        if not isinstance(query, str) or not query:
            raise ValidationError("Query is required and must be a string.")

        query_embedding = await self._embedding_provider.embed([query])
        if len(query_embedding) != 1:
            raise EmbeddingCountMismatch(expected=1, actual=len(query_embedding))

        return await self._vector_store.search(query_embedding[0], limit=SEARCH_LIMIT)
