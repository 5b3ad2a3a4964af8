"""Structured event logging for todolist."""

import json
import logging
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any

# Preferred key order per event; remaining keys follow alphabetically.
EVENT_KEY_ORDER: dict[str, list[str]] = {
    "app_start": ["ts", "level", "database", "log_file", "debug"],
    "app_stop": ["ts", "level", "reason", "uptime_ms", "error_type", "error"],
    "entity_created": ["ts", "level", "kind", "id", "name"],
    "entity_updated": ["ts", "level", "kind", "id", "fields"],
    "entity_deleted": ["ts", "level", "kind", "id", "name"],
    "todo_status_toggled": ["ts", "level", "id", "old_status", "new_status"],
    "filters_changed": ["ts", "level", "status", "project_id", "category_id"],
    "persistence_error": ["ts", "level", "operation", "error_type", "error"],
    "integrity_error": ["ts", "level", "error"],
}
DEFAULT_EVENT_KEY_ORDER = ["ts", "level"]


def _to_log_safe(value: Any) -> Any:
    """Reduce event field values to JSON types."""
    if isinstance(value, Enum):
        return value.value
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_to_log_safe(v) for v in value]
    return str(value)


def _one_line(value: Any) -> str:
    return str(value).replace("\n", "\\n")


def log_event(event: str, level: int = logging.INFO, **fields: Any) -> None:
    """Emit a structured log event.

    The message is the JSON payload; the same dict rides on the record as
    ``payload`` for StructuredTextFormatter.
    """
    payload = {
        "ts": datetime.now().astimezone().isoformat(),
        "event": event,
    }
    for key, value in fields.items():
        payload[key] = _to_log_safe(value)
    logging.log(
        level,
        json.dumps(payload, ensure_ascii=False, separators=(",", ":")),
        extra={"payload": payload},
    )


class StructuredTextFormatter(logging.Formatter):
    """Render each record as a ``=== event ===`` block and a blank line."""

    def format(self, record: logging.LogRecord) -> str:
        data = dict(getattr(record, "payload", None) or {})
        event_name = str(data.pop("event", record.name))
        if not data:
            data["message"] = record.getMessage()
        data["level"] = record.levelname

        preferred = EVENT_KEY_ORDER.get(event_name, DEFAULT_EVENT_KEY_ORDER)
        keys = [k for k in preferred if k in data]
        keys += sorted(k for k in data if k not in preferred)

        lines = [f"=== {event_name} ==="]
        lines.extend(f"{k}: {_one_line(data[k])}" for k in keys if data[k] is not None)
        if record.exc_info:
            lines.append("traceback:")
            lines.append(self.formatException(record.exc_info))
        return "\n".join(lines) + "\n"


def setup_logging(log_file: str | None = None) -> None:
    """Set up logging configuration.

    Without a log file logging is disabled entirely: the TUI owns the
    terminal and stray log lines would corrupt the screen.
    """
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(str(log_path), encoding="utf-8")
        handler.setFormatter(StructuredTextFormatter())
        logging.disable(logging.NOTSET)
        logging.basicConfig(level=logging.INFO, handlers=[handler], force=True)
    else:
        logging.disable(logging.CRITICAL)
