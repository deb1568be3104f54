"""
Logging setup for bookshelf.
Call setup_logging() once at process startup.
"""
import json
import logging
from datetime import datetime, timezone

logger = logging.getLogger(__name__)

CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """One JSON object per record; book_id is copied over when a caller passes it as extra."""
    def format(self, record):
        entry = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if hasattr(record, "book_id"):
            entry["book_id"] = record.book_id
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def setup_logging(level="INFO", json_logs=False):
    root = logging.getLogger()
    root.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    root.handlers.clear()

    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter() if json_logs else logging.Formatter(CONSOLE_FORMAT, "%H:%M:%S"))
    root.addHandler(handler)

    # sqlalchemy echoes every statement at INFO
    for name in ("sqlalchemy.engine", "aiosqlite"):
        logging.getLogger(name).setLevel(logging.WARNING)

    logger.debug("Logging initialized at %s", level)
