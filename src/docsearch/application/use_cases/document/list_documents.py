"""List documents use case."""

from docsearch.application.ports import VectorStore
from docsearch.domain.entities import StoredPoint

LIST_LIMIT = 100


class ListDocumentsUseCase:
    """List stored chunk points (payload only), at most ``LIST_LIMIT``."""

    def __init__(self, vector_store: VectorStore) -> None:
        self._vector_store = vector_store

    async def execute(self) -> list[StoredPoint]:
        return await self._vector_store.list_points(limit=LIST_LIMIT)
