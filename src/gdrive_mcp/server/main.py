"""Server entry point."""

import logging

import uvicorn

from ..core.config import get_settings
from .app import create_app

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def main() -> None:
    """Run the Google Drive MCP host with uvicorn."""
    settings = get_settings()
    configure_logging(settings.log_level)

    if not settings.can_refresh_tokens():
        logger.warning(
            "GOOGLE_CLIENT_ID/GOOGLE_CLIENT_SECRET not set; expired access tokens cannot be refreshed"
        )

    app = create_app(settings)
    logger.info(
        f"MCP Google Drive host listening on {settings.host}:{settings.port} (endpoint {settings.path})"
    )
    logger.info(f"Configuration: {settings.get_environment_summary()}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
