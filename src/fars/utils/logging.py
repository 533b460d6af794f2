"""Log formatting and handler setup for the ``fars`` command line."""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict

# Attributes every LogRecord carries; anything else came from ``extra=``.
_RECORD_ATTRS = frozenset({
    "msg", "args", "levelname", "levelno", "pathname", "filename",
    "module", "exc_info", "exc_text", "stack_info", "lineno",
    "funcName", "created", "msecs", "relativeCreated", "thread",
    "threadName", "processName", "process", "name", "message",
    "taskName",
})

_PLAIN_FORMAT = "%(levelname)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects.

    Fields passed via ``extra=`` (``year``, ``state_num``, ``path``...)
    are merged into the payload next to the standard keys.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRS:
                payload[key] = value

        # numpy ints and paths fall back to str()
        return json.dumps(payload, default=str)


def configure_logging(verbose: bool = False, json_logs: bool = False) -> None:
    """Attach a single stderr handler to the ``fars`` package logger.

    Args:
        verbose: Log at DEBUG instead of INFO.
        json_logs: Use ``JsonFormatter`` instead of the plain format.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter() if json_logs else logging.Formatter(_PLAIN_FORMAT))

    pkg_logger = logging.getLogger("fars")
    pkg_logger.handlers.clear()
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    pkg_logger.propagate = False
