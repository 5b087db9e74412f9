"""Entry point for the HTTP server."""

from __future__ import annotations

import logging

from .config import load_settings
from .main import build_environment, create_app

logger = logging.getLogger(__name__)


def main():  # pragma: no cover - manual run
    settings = load_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    store, provider = build_environment(settings)
    app = create_app(settings, store=store, provider=provider)
    logger.info("Using %s quote provider", provider.name)
    logger.info("BRidge PoC server is running on port %s", settings.port)
    app.run(host=settings.host, port=settings.port, threaded=True)


if __name__ == "__main__":  # pragma: no cover
    main()
