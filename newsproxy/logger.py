"""
newsproxy.logger
~~~~~~~~~~~~~~~~
Human-readable *and* JSON trace of cache and permission events,
with daily rotation.
"""

from __future__ import annotations

import json
import logging
import logging.handlers
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict

_ISO = "%Y-%m-%dT%H:%M:%SZ"

def _now() -> str:  # RFC-3339 without microseconds
    return datetime.now(tz=timezone.utc).strftime(_ISO)


class _PlainFormatter(logging.Formatter):
    """ e.g. 2026-10-17T15:07:02Z Inga cache_hit id=1 """

    def format(self, record):  # type: ignore[override]
        d: Dict[str, Any] = record.msg if isinstance(record.msg, dict) else {}
        if not d:
            return super().format(record)

        parts = [d.get("ts", _now()), d.get("user", "-"), d.get("event", "-")]
        if d.get("event") == "deny":
            parts.append(f'op={d.get("operation", "-")}')
        elif "id" in d:
            parts.append(f'id={d["id"]}')
        if "entries" in d:
            parts.append(f'entries={d["entries"]}')
        return " ".join(parts)


class _JSONFormatter(logging.Formatter):
    def format(self, record):  # type: ignore[override]
        return json.dumps(record.msg, separators=(",", ":"))


class ProxyLogger:
    def __init__(self, basename: str | Path | None, console: bool = False):
        # each instance writes through its own child of "newsproxy"
        log = logging.getLogger(f"newsproxy.trace.{id(self):x}")
        log.setLevel(logging.INFO)
        log.propagate = False  # don't spam the root logger
        self._handlers: list[logging.Handler] = []

        if basename:
            basename = Path(basename).with_suffix("")  # news_proxy
            jsonl_file = basename.with_suffix(".jsonl")

            # json lines
            h = logging.handlers.TimedRotatingFileHandler(
                jsonl_file, when="midnight", backupCount=7, encoding="utf-8"
            )
            h.setFormatter(_JSONFormatter())
            self._handlers.append(h)
            self.path: Path | None = jsonl_file
        else:
            self.path = None

        if console:
            c = logging.StreamHandler()
            c.setFormatter(_PlainFormatter())
            self._handlers.append(c)

        if not self._handlers:
            self._handlers.append(logging.NullHandler())

        for h in self._handlers:
            log.addHandler(h)
        self.log = log

    def close(self) -> None:
        for h in self._handlers:
            self.log.removeHandler(h)
            h.close()
        self._handlers.clear()

    def cache_hit(self, user: str, message_id: int):
        self.log.info(
            {"event": "cache_hit", "ts": _now(), "user": user, "id": message_id}
        )

    def cache_miss(self, user: str, message_id: int):
        self.log.info(
            {"event": "cache_miss", "ts": _now(), "user": user, "id": message_id}
        )

    def invalidate(self, user: str, message_id: int):
        self.log.info(
            {"event": "invalidate", "ts": _now(), "user": user, "id": message_id}
        )

    def clear(self, user: str, entries: int):
        self.log.info(
            {"event": "clear", "ts": _now(), "user": user, "entries": entries}
        )

    def deny(self, user: str, role: str, operation: str):
        self.log.warning(
            {
                "event": "deny",
                "ts": _now(),
                "user": user,
                "role": role,
                "operation": operation,
            }
        )
