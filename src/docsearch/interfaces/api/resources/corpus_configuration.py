"""Corpus configuration API resource."""

import falcon.asgi

from docsearch.application.dto.corpus_config_dto import CorpusConfigUpdateInput
from docsearch.application.use_cases.configuration.get_corpus_configuration import (
    GetCorpusConfigurationUseCase,
)
from docsearch.application.use_cases.configuration.update_corpus_configuration import (
    UpdateCorpusConfigurationUseCase,
)
from docsearch.domain.entities import CorpusConfig
from docsearch.domain.exceptions import ValidationError


class CorpusConfigurationResource:
    """GET/POST /api/documents/corpus-configuration - read and replace chunking settings."""

    def __init__(
        self,
        get_configuration: GetCorpusConfigurationUseCase,
        update_configuration: UpdateCorpusConfigurationUseCase,
    ) -> None:
        self._get_configuration = get_configuration
        self._update_configuration = update_configuration

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Current configuration."""
        resp.media = {"config": _config_to_dict(self._get_configuration.execute())}
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Validate and apply a new configuration."""
        body = await req.get_media(default_when_empty={})
        raw = body.get("config") if isinstance(body, dict) else None
        if not isinstance(raw, dict):
            resp.status = falcon.HTTP_400
            resp.media = {"error": "Config is required."}
            return

        try:
            config = self._update_configuration.execute(
                CorpusConfigUpdateInput(
                    chunk_size=raw.get("chunkingSize"),
                    chunk_overlap=raw.get("overlapSize"),
                    strategy=raw.get("strategy"),
                )
            )
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        resp.media = {
            "message": "Corpus configuration updated.",
            "config": _config_to_dict(config),
        }
        resp.status = falcon.HTTP_200


def _config_to_dict(c: CorpusConfig) -> dict:
    return {
        "chunkingSize": c.chunk_size,
        "overlapSize": c.chunk_overlap,
        "strategy": c.strategy.value,
    }
