"""
Logging configuration for the solmint service
"""
import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Union

LOG_DIR_ENV = "SOLMINT_LOG_DIR"
LOG_LEVEL_ENV = "SOLMINT_LOG_LEVEL"


def setup_logging(
    logger_name: str,
    log_level: Union[int, str, None] = None,
    log_dir: Union[str, Path, None] = None,
) -> logging.Logger:
    """
    Set up logging configuration for a specific logger

    Args:
        logger_name: Name of the logger to configure
        log_level: Logging level to use, defaults to SOLMINT_LOG_LEVEL or INFO
        log_dir: Directory for rotating log files, defaults to SOLMINT_LOG_DIR or ./logs

    Returns:
        logging.Logger: Configured logger instance
    """
    if log_level is None:
        log_level = os.getenv(LOG_LEVEL_ENV, "INFO")
    if isinstance(log_level, str):
        log_level = logging.getLevelName(log_level.upper())

    # Create logger
    logger = logging.getLogger(logger_name)
    logger.setLevel(log_level)

    # Remove any existing handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # Prevent propagation to root logger to avoid duplicate logs
    logger.propagate = False

    # Create logs directory if it doesn't exist
    log_dir = Path(log_dir or os.getenv(LOG_DIR_ENV, "logs"))
    log_dir.mkdir(parents=True, exist_ok=True)

    # Create file handler
    log_file = log_dir / f"{logger_name.replace('.', '_')}.log"
    file_handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=50*1024*1024,  # 50MB
        backupCount=10
    )
    file_handler.setLevel(log_level)

    # Create console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)

    # Create formatters
    file_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_formatter = logging.Formatter(
        '%(levelname)s: %(message)s'
    )

    # Add formatters to handlers
    file_handler.setFormatter(file_formatter)
    console_handler.setFormatter(console_formatter)

    # Add handlers to logger
    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    return logger


def configure_third_party_loggers() -> None:
    """Quiet chatty library loggers."""
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('httpcore').setLevel(logging.WARNING)
    logging.getLogger('uvicorn.access').setLevel(logging.WARNING)
