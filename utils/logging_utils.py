"""Logging setup driven by the ``logging`` configuration section."""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Optional


DEFAULT_FORMAT = '%(asctime)s %(levelname)s [%(name)s] %(message)s'
DEFAULT_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(logging_config: Optional[Dict[str, Any]] = None) -> logging.Logger:
    """Set up the root logger.

    Existing root handlers are replaced by a stdout handler and, when
    ``file`` is set, a rotating file handler.

    Args:
        logging_config: Logging configuration dictionary (the 'logging'
            section of the loaded config).

    Returns:
        The configured root logger.
    """
    logging_config = logging_config or {}
    log_file = logging_config.get('file')
    log_level = logging_config.get('level', 'INFO')
    max_bytes = logging_config.get('max_bytes', 10485760)
    backup_count = logging_config.get('backup_count', 5)
    log_format = logging_config.get('format', DEFAULT_FORMAT)
    date_format = logging_config.get('date_format', DEFAULT_DATE_FORMAT)
    formatter = logging.Formatter(log_format, date_format)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, str(log_level).upper(), logging.INFO))

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if log_file:
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8',
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    return root_logger
