# =============================================================================
# app/logging_config.py - Logging Setup
# =============================================================================
# Configures the root logger with three sinks:
# - console: human-readable lines
# - <LOG_DIR>/error.log: ERROR and above, one JSON object per line
# - <LOG_DIR>/combined.log: everything at the configured level, JSON lines
#
# Usage:
#   from app.logging_config import configure_logging
#   configure_logging(settings)
# =============================================================================

import json
import logging
from datetime import datetime, timezone
from pathlib import Path

from app.config import Settings
from lib.utils import isoformat_utc

CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Marks the handlers installed here so reconfiguring only replaces our own
_HANDLER_FLAG = "_stub_server_handler"


class JsonFormatter(logging.Formatter):
    """
    Render a log record as a single JSON line.

    Structured request data attached with `extra={"request": {...}}` is
    copied into the output under the "request" key.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": isoformat_utc(
                datetime.fromtimestamp(record.created, tz=timezone.utc)
            ),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }

        request = getattr(record, "request", None)
        if request is not None:
            entry["request"] = request

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


def _tag(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_FLAG, True)
    return handler


def build_handlers(settings: Settings) -> list[logging.Handler]:
    """Create the console, error-file and combined-file handlers."""
    log_dir = Path(settings.LOG_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)

    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))

    error_file = logging.FileHandler(settings.error_log_path, encoding="utf-8")
    error_file.setLevel(logging.ERROR)
    error_file.setFormatter(JsonFormatter())

    combined_file = logging.FileHandler(settings.combined_log_path, encoding="utf-8")
    combined_file.setFormatter(JsonFormatter())

    return [_tag(console), _tag(error_file), _tag(combined_file)]


def reset_logging() -> None:
    """Detach and close the handlers installed by configure_logging()."""
    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_FLAG, False):
            root.removeHandler(handler)
            handler.close()


def configure_logging(settings: Settings) -> None:
    """
    Install the application's log handlers on the root logger.

    Safe to call more than once: handlers from a previous call are closed
    and replaced; handlers installed by anything else are left in place.
    """
    reset_logging()

    root = logging.getLogger()
    root.setLevel(settings.log_level)
    for handler in build_handlers(settings):
        root.addHandler(handler)

    logging.getLogger(__name__).debug(
        f"Logging configured (level={logging.getLevelName(settings.log_level)}, "
        f"dir={settings.LOG_DIR})"
    )
