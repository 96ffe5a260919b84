"""Falcon ASGI application."""

import logging
from pathlib import Path

import falcon.asgi
from falcon.asgi import App

from docsearch.interfaces.api.resources.corpus_configuration import CorpusConfigurationResource
from docsearch.interfaces.api.resources.documents import DocumentResource, DocumentsResource
from docsearch.interfaces.api.resources.health import HealthResource
from docsearch.interfaces.api.resources.search import SearchResource
from docsearch.interfaces.api.resources.static import IndexResource

logger = logging.getLogger(__name__)

PUBLIC_DIR = Path(__file__).resolve().parents[2] / "public"


async def _handle_http_error(req, resp, ex, params) -> None:
    """Answer Falcon's own errors (bad JSON, unknown route) in the {error} shape."""
    resp.status = ex.status
    resp.media = {"error": ex.title}
    if ex.headers:
        resp.set_headers(ex.headers)


async def _handle_unexpected(req, resp, ex, params) -> None:
    """Log anything the resources did not map and answer with a generic 500."""
    logger.exception("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"error": "Internal server error."}


def create_app(
    documents_resource: DocumentsResource,
    document_resource: DocumentResource,
    corpus_configuration_resource: CorpusConfigurationResource,
    search_resource: SearchResource,
    health_resource: HealthResource,
    middleware: list | None = None,
    public_dir: Path = PUBLIC_DIR,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, _handle_unexpected)
    app.add_error_handler(falcon.HTTPError, _handle_http_error)

    app.add_route("/api/health", health_resource)
    # Literal segment wins over the {point_id} field in Falcon's router
    app.add_route("/api/documents/corpus-configuration", corpus_configuration_resource)
    app.add_route("/api/documents", documents_resource)
    app.add_route("/api/documents/{point_id}", document_resource)
    app.add_route("/api/search", search_resource)

    app.add_route("/", IndexResource(public_dir))
    app.add_static_route("/", str(public_dir))
    return app
