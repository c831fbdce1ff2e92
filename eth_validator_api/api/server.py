"""HTTP server entry point.

Usage:
    BEACON_NODE_URL=https://... python -m eth_validator_api.api.server
"""

import sys

import uvicorn

from eth_validator_api.api.app import create_app
from eth_validator_api.helpers.config import load_settings
from eth_validator_api.helpers.logging import get_logger, set_log_level


logger = get_logger(__name__)


def main() -> None:
    """Load settings and serve the API with uvicorn."""
    try:
        settings = load_settings()
    except ValueError as e:
        logger.error("Invalid configuration: %s", e)
        sys.exit(1)

    set_log_level(settings.log_level)
    app = create_app(settings)

    logger.info("Serving on %s:%d", settings.host, settings.port)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
