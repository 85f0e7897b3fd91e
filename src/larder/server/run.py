"""Run the Larder API under uvicorn."""

from __future__ import annotations

import logging

import uvicorn

APP_FACTORY = "larder.server.app:create_app"

logger = logging.getLogger(__name__)


def serve(host: str = "127.0.0.1", port: int = 8000, reload: bool = False) -> None:
    """Serve the app built by :func:`larder.server.app.create_app`.

    ``log_config=None`` keeps the handlers installed by
    :func:`larder.logging_utils.configure_logging`.
    """

    logger.info("Serving Larder API on http://%s:%s (reload=%s)", host, port, reload)
    uvicorn.run(
        APP_FACTORY,
        host=host,
        port=port,
        reload=reload,
        factory=True,
        log_config=None,
    )


__all__ = ["APP_FACTORY", "serve"]
