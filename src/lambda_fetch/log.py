"""
JSON-lines logging for the Lambda adapter and CLI.

Library modules only log through ``logging.getLogger(__name__)``; the level and
format are chosen here, by whoever owns the process.
"""

import json
import logging
from typing import Any

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RESERVED = set(logging.LogRecord("", 0, "", 0, "", None, None).__dict__) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """One JSON object per record: level, logger, message and any extra fields.

    No timestamp is written; the host (CloudWatch, a terminal) stamps lines itself.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "level": record.levelname,
            "target": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RESERVED and not key.startswith("_"):
                entry[key] = value
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def configure_logging(level: str = "ERROR") -> None:
    """Route the root logger through a single JSON handler at ``level``."""
    root = logging.getLogger()
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    # The Lambda runtime installs its own handler; replace it so lines are not duplicated.
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)
    logging.getLogger(__name__).debug("logger has been set up")
