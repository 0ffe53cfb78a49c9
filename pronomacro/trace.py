"""
The Conversion Trace.

Records what the converter decided for every marked word, plus running
counters, so a front end can show a debug panel or a user can download the
log. Nothing here is global: whoever wants a log creates a ConversionLog and
passes it in.
"""
from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field, fields
from datetime import date, datetime, timezone
from enum import Enum
from pathlib import Path
from typing import List, Optional

logger = logging.getLogger(__name__)


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z')


class Severity(Enum):
    INFO = "info"
    PROCESSING = "processing"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"

    @property
    def log_level(self) -> int:
        return _LOG_LEVELS[self]


_LOG_LEVELS = {
    Severity.INFO: logging.DEBUG,
    Severity.PROCESSING: logging.DEBUG,
    Severity.SUCCESS: logging.INFO,
    Severity.WARNING: logging.WARNING,
    Severity.ERROR: logging.ERROR,
}


@dataclass(frozen=True)
class ConversionEvent:
    """A single log line: when, what, how serious."""
    timestamp: str
    message: str
    severity: Severity = Severity.INFO

    def to_line(self) -> str:
        return f"[{self.timestamp}] {self.severity.value.upper()}: {self.message}"

    def to_dict(self) -> dict:
        return {
            "timestamp": self.timestamp,
            "message": self.message,
            "severity": self.severity.value,
        }


@dataclass
class ConversionStats:
    """Running counters. A single run's delta uses the same shape."""
    conversions: int = 0
    pronouns: int = 0
    ambiguous: int = 0
    last_time: Optional[str] = None

    def merge(self, delta: "ConversionStats") -> None:
        """Add a run's counts and take its timestamp."""
        self.conversions += delta.conversions
        self.pronouns += delta.pronouns
        self.ambiguous += delta.ambiguous
        if delta.last_time is not None:
            self.last_time = delta.last_time


STATS_FIELDS = tuple(f.name for f in fields(ConversionStats))


def coerce_severity(severity) -> Severity:
    if isinstance(severity, Severity):
        return severity
    try:
        return Severity(str(severity).lower())
    except ValueError:
        raise ValueError(
            f"Unknown severity {severity!r}; expected one of "
            f"{', '.join(s.value for s in Severity)}"
        ) from None


class ConversionLog:
    """
    Append-only diagnostic log with running statistics.

    Events accumulate across conversions until clear() is called.
    """

    def __init__(self):
        self.events: List[ConversionEvent] = []
        self.stats = ConversionStats()

    def log(self, message: str, severity=Severity.INFO) -> None:
        """
        Append one event.

        Args:
            message: Human-readable description of the step.
            severity: A Severity or its string value ("info", "warning", ...).
        """
        event = ConversionEvent(utc_timestamp(), message, coerce_severity(severity))
        self.append(event)

    def append(self, event: ConversionEvent) -> None:
        self.events.append(event)

    def extend(self, events) -> None:
        for event in events:
            self.append(event)

    def update_stats(self, **changes) -> None:
        """
        Overwrite some of the counters, leaving the rest alone.

        Raises:
            ValueError: If a key is not a stats field.
        """
        unknown = set(changes) - set(STATS_FIELDS)
        if unknown:
            raise ValueError(f"Unknown stats fields: {', '.join(sorted(unknown))}")
        for name, value in changes.items():
            setattr(self.stats, name, value)

    def record(self, events, stats: ConversionStats) -> None:
        """Take in one conversion run's events and stats delta."""
        self.extend(events)
        self.stats.merge(stats)

    def clear(self) -> None:
        """Drop all events and reset the counters."""
        self.events = []
        self.stats = ConversionStats()
        logger.debug("Conversion log cleared")

    def __len__(self) -> int:
        return len(self.events)

    def to_text(self) -> str:
        """Plain-text export, one ``[timestamp] SEVERITY: message`` per line."""
        return "\n".join(event.to_line() for event in self.events)

    def to_json(self, indent=2) -> str:
        return json.dumps(
            {
                "events": [event.to_dict() for event in self.events],
                "stats": asdict(self.stats),
            },
            indent=indent,
            ensure_ascii=False,
        )

    @staticmethod
    def default_filename(day: Optional[date] = None) -> str:
        day = day or datetime.now(timezone.utc).date()
        return f"pronoun-converter-debug-{day.isoformat()}.txt"

    def save(self, path=None) -> Path:
        """
        Write the plain-text export to disk.

        Args:
            path: Target file or directory. A directory (or None, meaning the
                current directory) gets the default dated file name.

        Returns:
            The path written.
        """
        target = Path(path) if path is not None else Path.cwd()
        if target.is_dir():
            target = target / self.default_filename()
        target.write_text(self.to_text(), encoding='utf-8')
        logger.info(f"Saved {len(self.events)} log entries to {target}")
        return target
