"""Logging configuration"""

import logging

from .config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure application logging"""
    level = getattr(logging, settings.log_level, logging.INFO)

    # force=True: uvicorn configures the root logger first
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )
