"""
Structured logging for the goniometry tools.
Provides JSON logging and contextual logging.
"""

import logging
import json
import sys
from typing import Any, Dict, Optional
from datetime import datetime

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class JSONFormatter(logging.Formatter):
    """
    Custom JSON formatter for structured logging.

    Outputs logs as JSON for easy parsing and aggregation.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
            'timestamp': datetime.fromtimestamp(record.created).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno,
        }

        # Add exception info if present
        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        # Add custom fields from extras
        if hasattr(record, 'context'):
            log_data.update(record.context)

        return json.dumps(log_data, default=str)


class ContextLogger:
    """
    Logger with context support for structured logging.

    Allows adding contextual information to all subsequent logs.
    """

    def __init__(self, name: str):
        """
        Initialize context logger.

        Args:
            name: Logger name
        """
        self.logger = logging.getLogger(name)
        self.context: Dict[str, Any] = {}

    def set_context(self, **kwargs) -> None:
        """Set logging context."""
        self.context.update(kwargs)

    def clear_context(self) -> None:
        """Clear logging context."""
        self.context.clear()

    def _log(self, level: int, msg: str, **kwargs) -> None:
        """Internal logging method with context."""
        extra = {'context': {**self.context, **kwargs}}
        self.logger.log(level, msg, extra=extra)

    def debug(self, msg: str, **kwargs) -> None:
        self._log(logging.DEBUG, msg, **kwargs)

    def info(self, msg: str, **kwargs) -> None:
        self._log(logging.INFO, msg, **kwargs)

    def warning(self, msg: str, **kwargs) -> None:
        self._log(logging.WARNING, msg, **kwargs)

    def error(self, msg: str, **kwargs) -> None:
        self._log(logging.ERROR, msg, **kwargs)


def _make_handler(handler: logging.Handler, json_format: bool,
                  log_level: str) -> logging.Handler:
    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.setLevel(log_level)
    handler.set_name('goniometry')
    return handler


def setup_logging(log_level: str = "WARNING",
                  json_format: bool = False,
                  log_file: Optional[str] = None) -> ContextLogger:
    """
    Setup structured logging for the goniometry tools.

    Handlers installed by a previous call are replaced.

    Args:
        log_level: Logging level
        json_format: Use JSON format
        log_file: Optional log file path

    Returns:
        Configured context logger
    """
    root = logging.getLogger()

    for handler in list(root.handlers):
        if handler.get_name() == 'goniometry':
            root.removeHandler(handler)
            handler.close()

    # Console output goes to stderr so command results stay clean
    root.addHandler(_make_handler(logging.StreamHandler(sys.stderr), json_format, log_level))

    if log_file:
        root.addHandler(_make_handler(logging.FileHandler(log_file), json_format, log_level))

    root.setLevel(log_level)

    return ContextLogger('goniometry')
