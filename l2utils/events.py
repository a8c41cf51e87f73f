"""Calendar events and an in-memory, thread-safe store for them."""

from __future__ import annotations

import datetime as dt
import re
import threading
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class EventError(Exception):
    """Raised when an operation breaks the calendar's business rules."""


def _decode_int(name: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"cannot decode {name}: expected an integer, got {value!r}")
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"cannot decode {name}: {value} overflows a 64-bit integer")
    return value


def _decode_str(name: str, value: Any) -> str:
    if not isinstance(value, str):
        raise ValueError(f"cannot decode {name}: expected a string, got {value!r}")
    return value


def _decode_date(value: Any) -> dt.date:
    if not isinstance(value, str) or not _DATE_PATTERN.fullmatch(value):
        raise ValueError(f"cannot decode date: expected YYYY-MM-DD, got {value!r}")
    try:
        return dt.date.fromisoformat(value)
    except ValueError as error:
        raise ValueError(f"cannot decode date: {error}") from error


@dataclass(frozen=True)
class Event:
    """One calendar event of one user, on one day."""

    event_id: int = 0
    user_id: int = 0
    name: str = ""
    description: str = ""
    date: dt.date = dt.date.min

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Event:
        """Build an event from decoded JSON; absent or null fields keep their defaults.

        Raises ``ValueError`` when a field has the wrong type or form.
        """
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise ValueError(f"cannot decode event from {type(data).__name__}")
        values: dict[str, Any] = {}
        for name in ("event_id", "user_id"):
            if data.get(name) is not None:
                values[name] = _decode_int(name, data[name])
        for name in ("name", "description"):
            if data.get(name) is not None:
                values[name] = _decode_str(name, data[name])
        if data.get("date") is not None:
            values["date"] = _decode_date(data["date"])
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """Return the event in its JSON form, with the date as YYYY-MM-DD."""
        return {
            "event_id": self.event_id,
            "user_id": self.user_id,
            "name": self.name,
            "description": self.description,
            "date": f"{self.date.year:04d}-{self.date.month:02d}-{self.date.day:02d}",
        }


class EventStore:
    """Events kept in memory per user, safe to use from several threads."""

    def __init__(self) -> None:
        self._events: dict[int, list[Event]] = {}
        self._lock = threading.RLock()

    def _user_events(self, user_id: int, missing: str) -> list[Event]:
        try:
            return self._events[user_id]
        except KeyError:
            raise EventError(missing) from None

    @staticmethod
    def _position(events: list[Event], event_id: int) -> int:
        for index, stored in enumerate(events):
            if stored.event_id == event_id:
                return index
        raise EventError("event does not exist")

    def create_event(self, event: Event) -> None:
        """Add the event; its id must be new for its user."""
        with self._lock:
            events = self._events.setdefault(event.user_id, [])
            if any(stored.event_id == event.event_id for stored in events):
                raise EventError("event already exist")
            events.append(event)

    def update_event(self, event: Event) -> None:
        """Replace the user's event that has the same id."""
        with self._lock:
            events = self._user_events(event.user_id, "user does not find")
            events[self._position(events, event.event_id)] = event

    def delete_event(self, user_id: int, event_id: int) -> Event:
        """Remove and return an event; the user's last event takes its place."""
        with self._lock:
            events = self._user_events(user_id, "user does not exist")
            index = self._position(events, event_id)
            deleted = events[index]
            events[index] = events[-1]
            events.pop()
            return deleted

    def _select(self, user_id: int, belongs) -> list[Event]:
        with self._lock:
            events = self._user_events(user_id, "user does not exist")
            return [event for event in events if belongs(event.date)]

    def events_for_day(self, user_id: int, day: dt.date) -> list[Event]:
        """Return the user's events on ``day``."""
        return self._select(user_id, lambda date: date == day)

    def events_for_week(self, user_id: int, day: dt.date) -> list[Event]:
        """Return the user's events in the ISO week that holds ``day``."""
        week = day.isocalendar()[:2]
        return self._select(user_id, lambda date: date.isocalendar()[:2] == week)

    def events_for_month(self, user_id: int, day: dt.date) -> list[Event]:
        """Return the user's events in the month that holds ``day``."""
        return self._select(
            user_id, lambda date: (date.year, date.month) == (day.year, day.month)
        )