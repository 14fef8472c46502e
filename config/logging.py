import json
import logging
import sys
from datetime import UTC, datetime
from decimal import Decimal
from enum import Enum
from logging.handlers import RotatingFileHandler
from pathlib import Path


class CustomJSONEncoder(json.JSONEncoder):
    """Encodes rates, timestamps and directions carried in log payloads."""

    def default(self, o):
        if isinstance(o, Decimal):
            return str(o)
        if isinstance(o, datetime):
            return o.isoformat()
        if isinstance(o, Enum):
            return o.value
        return super().default(o)


class JSONFormatter(logging.Formatter):
    """One JSON line per record, as written to ``combined.log`` and ``error.log``."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            'timestamp': datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'source': f'{record.module}:{record.funcName}:{record.lineno}',
        }

        data = getattr(record, 'extra_data', None)
        if data:
            entry['data'] = data

        if record.exc_info:
            exc_type, exc, _ = record.exc_info
            entry['error'] = {
                'type': exc_type.__name__,
                'message': str(exc),
                'stack': self.formatException(record.exc_info),
            }

        return json.dumps(entry, ensure_ascii=False, cls=CustomJSONEncoder)


def setup_logging(
    log_directory: str = 'logs',
    console_level: str = 'INFO',
    max_file_size: int = 10 * 1024 * 1024,
    backup_count: int = 5,
) -> None:
    """Console output plus rotating combined and error logs under ``log_directory``."""
    log_dir = Path(log_directory)
    log_dir.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(logging.DEBUG)

    logging.getLogger('httpx').setLevel(logging.WARNING)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(getattr(logging, console_level.upper(), logging.INFO))
    console_handler.setFormatter(
        logging.Formatter('%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s', datefmt='%H:%M:%S')
    )
    root_logger.addHandler(console_handler)

    combined_handler = RotatingFileHandler(
        log_dir / 'combined.log', maxBytes=max_file_size, backupCount=backup_count, encoding='utf-8'
    )
    combined_handler.setLevel(logging.INFO)
    combined_handler.setFormatter(JSONFormatter())
    root_logger.addHandler(combined_handler)

    error_handler = RotatingFileHandler(
        log_dir / 'error.log', maxBytes=max_file_size, backupCount=backup_count, encoding='utf-8'
    )
    error_handler.setLevel(logging.WARNING)
    error_handler.setFormatter(JSONFormatter())
    root_logger.addHandler(error_handler)
