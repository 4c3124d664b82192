from __future__ import annotations

import json
import logging
import os


class JsonFormatter(logging.Formatter):
    """Very small JSON formatter for structured logs."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401 - short
        payload = {
            "level": record.levelname.lower(),
            "message": record.getMessage(),
            "event_type": getattr(record, "event_type", record.getMessage()),
            "category": getattr(record, "category", None),
            "name": getattr(record, "id_name", None),
            "path": getattr(record, "path", None),
            "entries": getattr(record, "entries", None),
            "exit_code": getattr(record, "exit_code", None),
            "error": None,
        }
        if record.exc_info and record.exc_info[1] is not None:
            payload["error"] = {
                "type": type(record.exc_info[1]).__name__,
                "message": str(record.exc_info[1]),
            }
        return json.dumps(payload, default=str)


def configure_logging(level: str | int | None = None) -> None:
    """Configure logging.

    Logs always go to stderr so they never mix with ids printed on stdout.
    The default level is ``WARNING``; ``LOG_LEVEL`` overrides it and
    ``LOG_FORMAT=json`` switches to structured JSON lines.
    """

    if level is None:
        level = os.getenv("LOG_LEVEL", "WARNING").upper()

    fmt = os.getenv("LOG_FORMAT", "plain").lower()
    if fmt == "json":
        handler = logging.StreamHandler()
        handler.setFormatter(JsonFormatter())
        logging.basicConfig(level=level, handlers=[handler], force=True)
    else:
        logging.basicConfig(
            level=level,
            format="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%H:%M:%S",
            force=True,
        )
