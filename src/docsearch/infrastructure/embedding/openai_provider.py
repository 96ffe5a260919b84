"""OpenAI-compatible embedding provider."""

import logging

from openai import AsyncOpenAI, OpenAIError

from docsearch.domain.exceptions import DependencyError

logger = logging.getLogger(__name__)


class OpenAIEmbeddingProvider:
    """Embedding provider using OpenAI-compatible API (OpenAI, Ollama, ...)."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        model: str,
        dimensions: int | None = None,
    ) -> None:
        self._client = AsyncOpenAI(base_url=base_url, api_key=api_key)
        self._model = model
        self._dimensions = dimensions

    async def embed(self, texts: list[str]) -> list[list[float]]:
        """Generate embeddings for texts, one vector per text in input order."""
        if not texts:
            return []
        kwargs = {"dimensions": self._dimensions} if self._dimensions else {}
        try:
            response = await self._client.embeddings.create(
                model=self._model,
                input=texts,
                **kwargs,
            )
        except OpenAIError as e:
            raise DependencyError(f"Embedding request failed: {e}") from e
        data = sorted(response.data, key=lambda d: d.index)
        logger.debug("Embedded %d texts with %s", len(data), self._model)
        return [d.embedding for d in data]
