"""Command-line entrypoint that serves the app with uvicorn."""

import uvicorn

from image_deck.app_logging import configure_logging
from image_deck.config import Settings


def main() -> None:
    """Run the server on the configured host and port."""
    settings = Settings()
    logger = configure_logging(settings.log_level)
    logger.info("Starting image deck on %s:%d", settings.host, settings.port)
    uvicorn.run(
        "image_deck.api.asgi:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
