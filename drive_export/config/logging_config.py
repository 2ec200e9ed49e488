"""
Logging Configuration

Root logger setup. Records emitted by the export flow carry `doc_id` and
`user_id` through `extra=`; the filter below fills them in for every other
record so a single format string can be used.
"""

import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] [doc=%(doc_id)s user=%(user_id)s] %(message)s"


class CorrelationFilter(logging.Filter):
    """Default the correlation fields to '-' when a record has none."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "doc_id"):
            record.doc_id = "-"
        if not hasattr(record, "user_id") or record.user_id is None:
            record.user_id = "-"
        return True


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure the root logger.

    Args:
        level: Level name, defaults to the LOG_LEVEL environment variable or INFO
    """
    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()

    root = logging.getLogger()
    root.setLevel(getattr(logging, level_name, logging.INFO))

    # Avoid stacking handlers when create_app() runs more than once
    for handler in root.handlers:
        if getattr(handler, "_drive_export", False):
            return

    handler = logging.StreamHandler()
    handler._drive_export = True
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.addFilter(CorrelationFilter())
    root.addHandler(handler)
