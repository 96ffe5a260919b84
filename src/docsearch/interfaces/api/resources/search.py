"""Search API resource."""

import logging

import falcon.asgi

from docsearch.application.dto.search_dto import SearchInput
from docsearch.application.use_cases.search.semantic_search import SemanticSearchUseCase
from docsearch.domain.exceptions import DependencyError, ValidationError

logger = logging.getLogger(__name__)


class SearchResource:
    """POST /api/search - top-5 semantic search."""

    def __init__(self, semantic_search: SemanticSearchUseCase) -> None:
        self._semantic_search = semantic_search

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Execute semantic search."""
        body = await req.get_media(default_when_empty={})
        query = body.get("query") if isinstance(body, dict) else None

        try:
            results = await self._semantic_search.execute(SearchInput(query=query))
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        except DependencyError:
            logger.exception("Error searching documents")
            resp.status = falcon.HTTP_500
            resp.media = {"error": "Failed to search documents."}
            return

        resp.media = [
            {"id": r.id, "payload": r.payload, "score": r.score}
            for r in results
        ]
        resp.status = falcon.HTTP_200
