"""CORS middleware for the review frontend."""

import falcon
import falcon.asgi

ALLOWED_METHODS = ("GET", "POST", "OPTIONS")


class CORSMiddleware:
    """Echo allowed origins and answer preflight requests.

    Requests from origins outside the allow-list get no CORS headers, so the
    browser blocks them.
    """

    def __init__(self, origins: list[str], max_age: int = 86400) -> None:
        self._origins = frozenset(origins)
        self._max_age = str(max_age)

    def _allowed_origin(self, req: falcon.asgi.Request) -> str | None:
        origin = req.get_header("Origin")
        return origin if origin in self._origins else None

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        if req.method != "OPTIONS" or not req.get_header("Access-Control-Request-Method"):
            return
        origin = self._allowed_origin(req)
        if origin:
            resp.set_header("Access-Control-Allow-Methods", ", ".join(ALLOWED_METHODS))
            resp.set_header("Access-Control-Allow-Headers", "Content-Type")
            resp.set_header("Access-Control-Max-Age", self._max_age)
        resp.status = falcon.HTTP_204
        resp.complete = True

    async def process_response(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, resource, req_succeeded
    ) -> None:
        resp.vary = ("Origin",)
        origin = self._allowed_origin(req)
        if origin:
            resp.set_header("Access-Control-Allow-Origin", origin)
