"""
Run the memwatch API with uvicorn.

    python -m memwatch
"""
import uvicorn

from memwatch.config.logging_config import logger
from memwatch.config.logging_utils import log_application_event
from memwatch.config.settings import settings


def main() -> None:
    log_application_event(f"Starting server on {settings.api_host}:{settings.api_port}")
    try:
        uvicorn.run(
            "memwatch.main:app",
            host=settings.api_host,
            port=settings.api_port,
            reload=False,
            workers=1,
            log_level=settings.log_level.lower(),
            access_log=settings.debug,
        )
    except SystemExit as e:
        # uvicorn exits non-zero when the port cannot be bound or the lifespan fails
        if e.code:
            logger.error(f"Server failed - exit code {e.code}")
        raise


if __name__ == "__main__":
    main()
