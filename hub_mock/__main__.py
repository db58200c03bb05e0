"""Module entrypoint for the mock server.

Starts the FastAPI app under uvicorn, bound to all interfaces by default.

Environment:
- PORT            listen port (default 4000)
- MOCK_HOST       bind address (default 0.0.0.0)
- MOCK_ENV        "production" disables the access log (NODE_ENV also honoured)
- MOCK_LOG_LEVEL  log level (default info)
- MOCK_RELOAD=1   restart on source changes
- MOCK_BODY_LIMIT max request body in bytes (default 2 MiB)
"""

from __future__ import annotations

import logging

import uvicorn

from .config import Settings, load_settings


log = logging.getLogger("hub_mock")

APP_TARGET = "hub_mock.server:app"


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


class ListeningServer(uvicorn.Server):
    """uvicorn server that announces itself once the socket is bound."""

    async def startup(self, sockets=None) -> None:
        await super().startup(sockets=sockets)
        if self.started:
            log.info("[stx-hub-mock] listening at http://%s:%s", self.config.host, self.config.port)


def _uvicorn_options(settings: Settings) -> dict:
    return {
        "host": settings.host,
        "port": settings.port,
        "log_level": settings.log_level,
        # The app writes its own combined-format access log.
        "access_log": False,
        "server_header": False,
    }


def main() -> None:
    settings = load_settings()
    configure_logging(settings.log_level)

    if settings.reload:
        # The reload supervisor builds its own server per worker process.
        uvicorn.run(APP_TARGET, reload=True, **_uvicorn_options(settings))
        return

    ListeningServer(uvicorn.Config(APP_TARGET, **_uvicorn_options(settings))).run()


if __name__ == "__main__":
    main()
