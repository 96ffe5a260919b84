"""Browser client entry page."""

from pathlib import Path

import falcon.asgi


class IndexResource:
    """GET / - serve the browser client's index.html."""

    def __init__(self, public_dir: Path) -> None:
        self._index = public_dir / "index.html"

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        if not self._index.is_file():
            raise falcon.HTTPNotFound()
        resp.content_type = falcon.MEDIA_HTML
        resp.data = self._index.read_bytes()
        resp.status = falcon.HTTP_200
