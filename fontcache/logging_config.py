import logging
import sys

from .config import SERVER_NAME, LOG_LEVEL, LOG_FORMAT

# LogRecord attributes that are not user-supplied extras
_RESERVED_ATTRS = {
    'name', 'msg', 'args', 'levelname', 'levelno', 'pathname', 'filename',
    'module', 'exc_info', 'exc_text', 'stack_info', 'lineno', 'funcName',
    'created', 'msecs', 'relativeCreated', 'thread', 'threadName',
    'processName', 'process', 'message', 'taskName'
}

def setup_logging(level: str = LOG_LEVEL, format_type: str = LOG_FORMAT) -> logging.Logger:
    """Setup structured logging on stderr; stdout belongs to the stdio transport."""

    logger = logging.getLogger(SERVER_NAME)
    level_value = getattr(logging, level.upper(), None)
    if not isinstance(level_value, int):
        level_value = logging.INFO
    logger.setLevel(level_value)

    # Remove existing handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)

    if format_type == "json":
        import json
        import datetime

        class JSONFormatter(logging.Formatter):
            def format(self, record):
                log_entry = {
                    "timestamp": datetime.datetime.now(datetime.timezone.utc).isoformat(),
                    "level": record.levelname,
                    "logger": record.name,
                    "message": record.getMessage(),
                    "module": record.module,
                    "function": record.funcName,
                    "line": record.lineno
                }

                if record.exc_info:
                    log_entry["exception"] = self.formatException(record.exc_info)

                for key, value in record.__dict__.items():
                    if key not in _RESERVED_ATTRS:
                        log_entry[key] = value

                return json.dumps(log_entry, default=str)

        formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(module)s:%(funcName)s:%(lineno)d - %(message)s'
        )

    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger

# Global logger instance
logger = setup_logging()
