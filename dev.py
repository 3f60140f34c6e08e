#!/usr/bin/env python3
"""
Development server runner for local testing
Run with: python dev.py
"""
import logging

import uvicorn

from api.config import settings
from api.logging_setup import setup_logging

logger = logging.getLogger("dev")


def log_banner() -> None:
    base_url = f"http://localhost:{settings.port}"
    logger.info(f"🚀 Server is running on {base_url}")
    logger.info("Try these in your browser or an HTTP client:")
    for path in ("/todos", "/todos/1", "/todos/active"):
        logger.info(f"  GET  {base_url}{path}")


if __name__ == "__main__":
    # Configure logging once, here, before the app is imported by uvicorn
    setup_logging(settings.log_level)
    log_banner()
    uvicorn.run(
        "index:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level
    )
