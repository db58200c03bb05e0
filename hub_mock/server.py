"""HTTP server and routing for the HUB mock.

- Registers COA search, the six import endpoints and /health.
- Ensures no request results in an unhandled exception (no 500 propagation).
- Applies permissive CORS, hardening headers and a request body size limit.
- Writes a combined-format access log outside production.
"""

from __future__ import annotations

import logging
from datetime import datetime

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.cors import CORSMiddleware

from . import __version__
from .config import Settings, load_settings
from .errors import (
    NOT_FOUND_MESSAGE,
    PAYLOAD_TOO_LARGE_MESSAGE,
    UNEXPECTED_ERROR_MESSAGE,
    error_from_exception,
)
from .headers import apply_security_headers
from .known_routes import register_known_routes
from .responses import failure
from .stamps import now_fds


log = logging.getLogger("hub_mock.server")
access_log = logging.getLogger("hub_mock.access")

_BODY_METHODS = {"POST", "PUT", "PATCH"}


def _declared_length(request: Request) -> int | None:
    raw = request.headers.get("content-length")
    if raw is None:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def _combined_line(request: Request, status_code: int, length: str | None) -> str:
    """Apache "combined" log line."""

    client = request.client.host if request.client else "-"
    stamp = datetime.now().astimezone().strftime("%d/%b/%Y:%H:%M:%S %z")
    target = request.url.path
    if request.url.query:
        target = f"{target}?{request.url.query}"
    version = request.scope.get("http_version", "1.1")
    referer = request.headers.get("referer", "-")
    agent = request.headers.get("user-agent", "-")
    return (
        f'{client} - - [{stamp}] "{request.method} {target} HTTP/{version}" '
        f'{status_code} {length or "-"} "{referer}" "{agent}"'
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or load_settings()

    app = FastAPI(
        title="STX-HUB Mock Server",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.settings = settings  # type: ignore[attr-defined]

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException):
        # Routing errors (404/405) still answer with an envelope.
        message = NOT_FOUND_MESSAGE if exc.status_code == 404 else str(exc.detail)
        payload = failure(message, error_message=f"{request.method} {request.url.path}")
        return JSONResponse(payload, status_code=exc.status_code, headers=getattr(exc, "headers", None))

    @app.middleware("http")
    async def _exception_guard(request: Request, call_next):
        """Enforce the body limit and keep unexpected exceptions from escaping as 500s."""

        if request.method in _BODY_METHODS:
            declared = _declared_length(request)
            too_large = declared is not None and declared > settings.body_limit
            if not too_large:
                # Cache body bytes once; handlers re-read them from the request.
                try:
                    body_bytes = await request.body()
                except Exception:  # noqa: BLE001
                    body_bytes = b""
                too_large = len(body_bytes) > settings.body_limit
            if too_large:
                return JSONResponse(failure(PAYLOAD_TOO_LARGE_MESSAGE), status_code=413)

        try:
            response: Response = await call_next(request)
        except Exception as exc:  # noqa: BLE001
            log.exception("unhandled error on %s %s", request.method, request.url.path)
            # Stable envelope with HTTP 200; callers treat non-2xx as transport failure.
            response = JSONResponse(
                failure(UNEXPECTED_ERROR_MESSAGE, error_message=error_from_exception(exc)),
                status_code=200,
            )
        return response

    if settings.access_log:

        @app.middleware("http")
        async def _access_log(request: Request, call_next):
            response: Response = await call_next(request)
            access_log.info(_combined_line(request, response.status_code, response.headers.get("content-length")))
            return response

    # Allow browser callers during internal testing.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Registered last so it wraps CORS preflight answers too.
    @app.middleware("http")
    async def _security_headers(request: Request, call_next):
        response: Response = await call_next(request)
        apply_security_headers(response.headers)
        return response

    @app.get("/health")
    async def health():
        return {"status": "ok", "timestamp": now_fds()}

    register_known_routes(app)

    return app


app = create_app()
