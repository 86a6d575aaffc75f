# utils/logger.py
import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from utils.config import settings


def setup_logger(log_dir: str | Path | None = None, level: str | None = None):
    """
    Configure the global logger for the cart system.

    Features:
    - Daily rotating log files (one file per day, 7 kept)
    - Console + file output
    - Unified log format with timestamp and level
    - Creates directories automatically

    Services log through child loggers ("cartshop.cart", ...) so everything
    ends up in the same handlers.
    """

    # Create log directory if not exists
    log_dir = Path(log_dir or settings.log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    log_file = log_dir / "cartshop.log"

    logger = logging.getLogger("cartshop")
    logger.setLevel(level or settings.log_level)

    # Avoid duplicate handlers if setup_logger() is called multiple times
    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    file_handler = TimedRotatingFileHandler(
        filename=log_file,
        when="midnight",
        interval=1,
        backupCount=7,
        encoding="utf-8"
    )
    file_handler.setFormatter(formatter)

    # Console handler
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)

    logger.info("Logger initialized (daily rotation enabled)")
    return logger
