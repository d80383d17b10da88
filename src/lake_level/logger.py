"""Logging setup for lake_level."""

import logging
import logging.handlers
from pathlib import Path
from typing import Any, Dict, Optional


DEFAULT_LOG_CONFIG: Dict[str, Any] = {
    'level': 'INFO',
    'file': None,
    'max_size_mb': 10,
    'backup_count': 5,
    'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
}


def setup_logging(log_config: Optional[Dict[str, Any]] = None) -> None:
    """
    Initialise the root logger from the ``logging`` section of config.yml.

    Args:
        log_config: logging section; missing keys fall back to DEFAULT_LOG_CONFIG
    """

    config = {**DEFAULT_LOG_CONFIG, **(log_config or {})}
    level = getattr(logging, str(config['level']).upper())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    formatter = logging.Formatter(config['format'])

    # console gets WARNING and above only
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(logging.WARNING)
    root_logger.addHandler(console_handler)

    if config['file']:
        log_path = Path(config['file'])
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=config['max_size_mb'] * 1024 * 1024,
            backupCount=config['backup_count'],
            encoding='utf-8',
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(level)
        root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Return a named logger. Handlers are only installed by ``setup_logging``.

    Args:
        name: logger name

    Returns:
        Logger: logger instance
    """
    return logging.getLogger(name)
