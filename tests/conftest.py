"""Pytest fixtures for docsearch tests."""

from __future__ import annotations

import math
import re
import zlib
from uuid import UUID

import pytest

from docsearch.domain.entities import CorpusConfig, Point, ScoredPoint, StoredPoint
from docsearch.domain.value_objects import ChunkingStrategy
from docsearch.infrastructure.corpus_config.in_memory_store import InMemoryCorpusConfigStore

DIMENSIONS = 768


def bag_of_words_vector(text: str) -> list[float]:
    """Deterministic toy embedding: word counts hashed into 768 buckets."""
    vec = [0.0] * DIMENSIONS
    for word in re.findall(r"\w+", text.lower()):
        vec[zlib.crc32(word.encode()) % DIMENSIONS] += 1.0
    return vec


def _cosine(a: list[float], b: list[float]) -> float:
    dot = sum(x * y for x, y in zip(a, b))
    norm = math.sqrt(sum(x * x for x in a)) * math.sqrt(sum(y * y for y in b))
    return dot / norm if norm else 0.0


# --- Fake adapters ---


class FakeVectorStore:
    """In-memory vector store with cosine ranking."""

    def __init__(self) -> None:
        self._points: dict[str, Point] = {}
        self.ensured = False
        self.closed = False
        self.upsert_calls = 0

    async def ensure_collection(self) -> None:
        self.ensured = True

    async def upsert(self, points: list[Point]) -> None:
        self.upsert_calls += 1
        for p in points:
            self._points[str(p.id)] = p

    async def list_points(self, limit: int) -> list[StoredPoint]:
        return [
            StoredPoint(id=pid, payload=p.payload.to_dict())
            for pid, p in list(self._points.items())[:limit]
        ]

    async def exists(self, point_id: UUID) -> bool:
        return str(point_id) in self._points

    async def delete(self, point_id: UUID) -> None:
        self._points.pop(str(point_id), None)

    async def search(self, vector: list[float], limit: int) -> list[ScoredPoint]:
        scored = [
            ScoredPoint(id=pid, payload=p.payload.to_dict(), score=_cosine(vector, p.vector))
            for pid, p in self._points.items()
        ]
        scored.sort(key=lambda s: s.score, reverse=True)
        return scored[:limit]

    async def close(self) -> None:
        self.closed = True

    def __len__(self) -> int:
        return len(self._points)


# --- Fixtures ---


@pytest.fixture
def fake_vector_store() -> FakeVectorStore:
    """Fresh in-memory vector store for each test."""
    return FakeVectorStore()


@pytest.fixture
def corpus_config() -> CorpusConfig:
    """Default corpus config used by tests."""
    return CorpusConfig(
        chunk_size=100,
        chunk_overlap=20,
        strategy=ChunkingStrategy.RECURSIVE,
    )


@pytest.fixture
def corpus_config_store(corpus_config: CorpusConfig) -> InMemoryCorpusConfigStore:
    return InMemoryCorpusConfigStore(corpus_config)


@pytest.fixture
def mock_embedding_provider():
    """AsyncMock for EmbeddingProvider - bag-of-words vector per text."""

    async def _embed(texts: list[str]) -> list[list[float]]:
        return [bag_of_words_vector(t) for t in texts]

    from unittest.mock import AsyncMock

    mock = AsyncMock()
    mock.embed = AsyncMock(side_effect=_embed)
    return mock
