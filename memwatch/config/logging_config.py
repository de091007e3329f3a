import logging
import sys
from logging.handlers import RotatingFileHandler
import os
from memwatch.config.settings import settings

def setup_logging():
    """Configure logging for the application."""
    # Create logs directory if it doesn't exist
    log_dir = settings.log_dir
    if not os.path.exists(log_dir):
        os.makedirs(log_dir)

    logger = logging.getLogger("memwatch")
    logger.setLevel(settings.log_level.upper())

    # Module may be imported more than once under reloaders
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Console handler with UTF-8 encoding
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    if hasattr(console_handler.stream, 'reconfigure'):
        console_handler.stream.reconfigure(encoding='utf-8')
    logger.addHandler(console_handler)

    # File handler with rotation and UTF-8 encoding
    file_handler = RotatingFileHandler(
        os.path.join(log_dir, "memwatch.log"),
        maxBytes=10485760,  # 10MB
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    return logger

# Create and configure the logger
_base_logger = setup_logging()
logger = _base_logger
