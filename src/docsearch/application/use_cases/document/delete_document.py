"""Delete document use case."""

import logging
from uuid import UUID

from docsearch.application.ports import VectorStore
from docsearch.domain.exceptions import NotFound, ValidationError

logger = logging.getLogger(__name__)


class DeleteDocumentUseCase:
    """Delete a single chunk point by id."""

    def __init__(self, vector_store: VectorStore) -> None:
        self._vector_store = vector_store

    async def execute(self, point_id: str) -> UUID:
        """Delete the point; unknown ids raise NotFound rather than succeeding silently."""
        if not point_id:
            raise ValidationError("ID is required.")
        try:
            pid = UUID(point_id)
        except ValueError as e:
            raise ValidationError("ID must be a valid UUID.") from e

        if not await self._vector_store.exists(pid):
            raise NotFound(f"Point {pid} not found")

        await self._vector_store.delete(pid)
        logger.info("Deleted point %s", pid)
        return pid
