"""Vector store lifespan middleware - prepares the collection on startup, closes on shutdown."""

import logging
from typing import Any

from docsearch.application.ports import VectorStore

logger = logging.getLogger(__name__)


class VectorStoreLifespanMiddleware:
    """Middleware that ensures the collection exists on startup and closes the client on shutdown.

    A failure during startup propagates, so the ASGI server refuses to start.
    """

    def __init__(self, vector_store: VectorStore) -> None:
        self._vector_store = vector_store

    async def process_startup(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Create the collection when ASGI server starts."""
        try:
            await self._vector_store.ensure_collection()
        except Exception:
            logger.exception("Vector store setup failed")
            raise

    async def process_shutdown(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Close store client when ASGI server shuts down."""
        await self._vector_store.close()
