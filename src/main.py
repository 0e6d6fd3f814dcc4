"""
Main entry point for the schedule dashboard web service
"""

import uvicorn
from src.config.settings import settings
from src.utils.logger import logger


def main():
    """Validate settings and serve the JSON API"""
    try:
        settings.validate()
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        raise

    logger.info(f"Starting schedule dashboard on port {settings.WEB_PORT}")
    uvicorn.run("src.web.main:app", host="0.0.0.0", port=settings.WEB_PORT)


if __name__ == "__main__":
    main()
