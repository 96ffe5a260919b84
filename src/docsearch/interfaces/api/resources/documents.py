"""Document API resources."""

import logging

import falcon.asgi

from docsearch.application.dto.document_dto import DocumentCreateInput, IngestionOutput
from docsearch.application.use_cases.document.delete_document import DeleteDocumentUseCase
from docsearch.application.use_cases.document.ingest_document import IngestDocumentUseCase
from docsearch.application.use_cases.document.list_documents import ListDocumentsUseCase
from docsearch.domain.entities import StoredPoint
from docsearch.domain.exceptions import DependencyError, NotFound, ValidationError

logger = logging.getLogger(__name__)


class DocumentsResource:
    """GET/POST /api/documents - list stored chunks, ingest a new document."""

    def __init__(
        self,
        ingest_document: IngestDocumentUseCase,
        list_documents: ListDocumentsUseCase,
    ) -> None:
        self._ingest_document = ingest_document
        self._list_documents = list_documents

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List up to 100 stored points, payload only."""
        try:
            points = await self._list_documents.execute()
        except DependencyError:
            logger.exception("Error retrieving documents")
            resp.status = falcon.HTTP_500
            resp.media = {"error": "Failed to retrieve documents."}
            return

        resp.media = [_point_to_dict(p) for p in points]
        resp.status = falcon.HTTP_200

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Chunk, embed and store a document."""
        body = await req.get_media(default_when_empty={})
        text = body.get("text") if isinstance(body, dict) else None

        try:
            result = await self._ingest_document.execute(DocumentCreateInput(content=text))
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        except DependencyError:
            logger.exception("Error creating document")
            resp.status = falcon.HTTP_500
            resp.media = {"error": "Failed to create document."}
            return

        resp.media = _ingestion_to_dict(result)
        resp.status = falcon.HTTP_201


class DocumentResource:
    """DELETE /api/documents/{point_id} - delete one stored chunk."""

    def __init__(self, delete_document: DeleteDocumentUseCase) -> None:
        self._delete_document = delete_document

    async def on_delete(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        point_id: str,
    ) -> None:
        """Delete point by id."""
        try:
            deleted_id = await self._delete_document.execute(point_id)
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        except NotFound:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "Document not found."}
            return
        except DependencyError:
            logger.exception("Error deleting document %s", point_id)
            resp.status = falcon.HTTP_500
            resp.media = {"error": "Failed to delete document."}
            return

        resp.media = {"success": True, "id": str(deleted_id)}
        resp.status = falcon.HTTP_200


def _point_to_dict(p: StoredPoint) -> dict:
    return {"id": p.id, "payload": p.payload}


def _ingestion_to_dict(result: IngestionOutput) -> dict:
    count = result.chunks_created
    return {
        "message": f"Document split into {count} chunk{'s' if count != 1 else ''} and stored.",
        "chunksCreated": count,
        "sourceId": str(result.source_id),
        "strategy": result.strategy.value,
        "points": [_point_to_dict(p) for p in result.points],
    }
