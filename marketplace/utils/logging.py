from loguru import logger
import logging
import sys
from pathlib import Path
from typing import Optional

from marketplace import config


class InterceptHandler(logging.Handler):
    """Forward standard library log records to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Walk back to the frame that issued the logging call
        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


class AppLogger:
    """Centralized logging configuration for the application"""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialize(config.LOG_LEVEL, config.LOG_DIR)
        return cls._instance

    def _initialize(self, level: str, log_dir: Optional[str]):
        self.level = level
        self.log_path = Path(log_dir) if log_dir else None

        # Remove default logger
        logger.remove()

        logger.add(
            sys.stdout,
            colorize=True,
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | <level>{message}</level>",
            level=level
        )

        if self.log_path is not None:
            self.log_path.mkdir(parents=True, exist_ok=True)

            logger.add(
                self.log_path / "app.log",
                rotation="500 MB",
                retention="10 days",
                compression="zip",
                format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}",
                level=level
            )

            logger.add(
                self.log_path / "error.log",
                rotation="100 MB",
                retention="30 days",
                compression="zip",
                format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}",
                level="ERROR"
            )

        # Route stdlib loggers (ours, uvicorn, sqlalchemy) through loguru
        logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)


def setup_logging() -> AppLogger:
    """Configure sinks from LOG_LEVEL / LOG_DIR on first call; later calls return the same instance."""
    return AppLogger()
