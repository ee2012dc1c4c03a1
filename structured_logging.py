#!/usr/bin/env python3
"""Structured logging system for deocr"""

import logging
import json
import sys
from logging.handlers import RotatingFileHandler
from datetime import datetime
from pathlib import Path
from typing import Dict, Any, Optional, Union

ROOT_LOGGER_NAME = 'deocr'
LOG_FILE_NAME = 'deocr.log'


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging"""

    def format(self, record: logging.LogRecord) -> str:
        log_obj = {
            'timestamp': datetime.now().isoformat(),
            'level': record.levelname,
            'component': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        # Add extra fields if present
        if hasattr(record, 'extra'):
            log_obj['extra'] = record.extra

        if record.exc_info:
            log_obj['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_obj, default=str)


def configure_logging(level: Union[str, int] = "WARNING", log_dir: Optional[Path] = None) -> logging.Logger:
    """
    Attach handlers to the deocr logger hierarchy.

    Console output goes to stderr so it never mixes with the per-file
    status lines on stdout. A rotating JSON log file is only written
    when ``log_dir`` is given.

    Args:
        level: Logging level name or number
        log_dir: Directory for deocr.log, or None for console only

    Returns:
        The configured root deocr logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    # Prevent duplicate handlers on repeated configuration
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    ))
    logger.addHandler(console_handler)

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_dir / LOG_FILE_NAME,
            maxBytes=10*1024*1024,  # 10MB
            backupCount=5
        )
        file_handler.setFormatter(JSONFormatter())
        file_handler.setLevel(logging.DEBUG)
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger


class StructuredLogger:
    """Logger wrapper that attaches keyword data to records"""

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def _extra(self, kwargs: Dict[str, Any]) -> Dict[str, Any]:
        return {'extra': kwargs} if kwargs else {}

    def info(self, message: str, **kwargs):
        """Log info with optional extra data"""
        self.logger.info(message, extra=self._extra(kwargs))

    def log_event(self, event_type: str, data: Dict[str, Any]):
        """Log a structured event"""
        self.info(f"Event: {event_type}", event_type=event_type, data=data)

    def log_error_with_context(self, error: Exception, context: Dict[str, Any], level: int = logging.ERROR):
        """Log error with full context; the traceback is attached at ERROR and above"""
        self.logger.log(
            level,
            f"Error: {type(error).__name__}: {str(error)}",
            exc_info=level >= logging.ERROR,
            extra={'extra': {
                'error_type': type(error).__name__,
                'error_message': str(error),
                'context': context
            }}
        )
