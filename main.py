#!/usr/bin/env python3
"""
Entry point for the MetalBaza cart and checkout API
"""

import logging

import uvicorn
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from metalbaza.infrastructure.configuration.config import get_config  # noqa: E402
from metalbaza.infrastructure.logging.logging_config import setup_logging  # noqa: E402
from metalbaza.presentation.api.app import create_app  # noqa: E402


def main() -> None:
    """Configure logging and serve the API"""
    config = get_config()
    setup_logging(config)
    logger = logging.getLogger(__name__)

    logger.info("🌍 Environment: %s", config.environment)
    logger.info("🗄️ Database: %s", config.database_url.split("@")[-1])
    if not config.notifications_enabled:
        logger.warning("⚠️ BOT_TOKEN or ADMIN_CHAT_ID not set - admin notifications disabled")

    uvicorn.run(create_app(), host=config.api_host, port=config.api_port, log_config=None)


if __name__ == "__main__":
    main()
