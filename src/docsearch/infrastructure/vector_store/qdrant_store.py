"""Qdrant implementation of the vector store port."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from uuid import UUID

import httpx
from qdrant_client import AsyncQdrantClient, models
from qdrant_client.http.exceptions import ResponseHandlingException, UnexpectedResponse

from docsearch.domain.entities import Point, ScoredPoint, StoredPoint
from docsearch.domain.exceptions import DependencyError

logger = logging.getLogger(__name__)

VECTOR_SIZE = 768

_QDRANT_ERRORS = (UnexpectedResponse, ResponseHandlingException, httpx.HTTPError)


@contextmanager
def _store_errors(action: str) -> Iterator[None]:
    """Re-raise transport and server failures as DependencyError."""
    try:
        yield
    except _QDRANT_ERRORS as e:
        raise DependencyError(f"Vector store {action} failed: {e}") from e


class QdrantVectorStore:
    """Fixed-size cosine collection of chunk points in Qdrant.

    Parameters
    ----------
    client:
        Connected ``AsyncQdrantClient``.
    collection_name:
        Name of the collection; created by :meth:`ensure_collection` if absent.
    """

    def __init__(self, client: AsyncQdrantClient, collection_name: str) -> None:
        self._client = client
        self.collection_name = collection_name

    @classmethod
    def from_url(cls, url: str, api_key: str, collection_name: str) -> "QdrantVectorStore":
        client = AsyncQdrantClient(url=url, api_key=api_key or None)
        return cls(client, collection_name)

    async def ensure_collection(self) -> None:
        """Create the collection (768 dims, cosine) unless it already exists."""
        with _store_errors("setup"):
            if await self._client.collection_exists(self.collection_name):
                logger.info("Collection '%s' already exists", self.collection_name)
                return
            await self._client.create_collection(
                collection_name=self.collection_name,
                vectors_config=models.VectorParams(
                    size=VECTOR_SIZE,
                    distance=models.Distance.COSINE,
                ),
            )
        logger.info("Collection '%s' created", self.collection_name)

    async def upsert(self, points: list[Point]) -> None:
        """Upsert all points as one batch and wait for acknowledgement."""
        with _store_errors("upsert"):
            await self._client.upsert(
                collection_name=self.collection_name,
                points=[
                    models.PointStruct(
                        id=str(p.id),
                        vector=p.vector,
                        payload=p.payload.to_dict(),
                    )
                    for p in points
                ],
                wait=True,
            )

    async def list_points(self, limit: int) -> list[StoredPoint]:
        with _store_errors("scroll"):
            records, _ = await self._client.scroll(
                collection_name=self.collection_name,
                limit=limit,
                with_payload=True,
                with_vectors=False,
            )
        return [StoredPoint(id=str(r.id), payload=r.payload or {}) for r in records]

    async def exists(self, point_id: UUID) -> bool:
        with _store_errors("retrieve"):
            records = await self._client.retrieve(
                collection_name=self.collection_name,
                ids=[str(point_id)],
                with_payload=False,
                with_vectors=False,
            )
        return bool(records)

    async def delete(self, point_id: UUID) -> None:
        with _store_errors("delete"):
            await self._client.delete(
                collection_name=self.collection_name,
                points_selector=models.PointIdsList(points=[str(point_id)]),
                wait=True,
            )

    async def search(self, vector: list[float], limit: int) -> list[ScoredPoint]:
        """Nearest neighbours of *vector*, best first, payload included."""
        with _store_errors("search"):
            response = await self._client.query_points(
                collection_name=self.collection_name,
                query=vector,
                limit=limit,
                with_payload=True,
                with_vectors=False,
            )
        return [
            ScoredPoint(id=str(p.id), payload=p.payload or {}, score=p.score)
            for p in response.points
        ]

    async def close(self) -> None:
        await self._client.close()
