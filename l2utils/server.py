"""An HTTP server for a calendar of events, answering in JSON."""

from __future__ import annotations

import argparse
import datetime as dt
import json
import logging
import re
from collections.abc import Callable
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from typing import Any
from urllib.parse import parse_qs, urlsplit

from l2utils.events import Event, EventError, EventStore

logger = logging.getLogger(__name__)

DEFAULT_PORT = 8080

_INTEGER = re.compile(r"[+-]?[0-9]+")
_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

Payload = dict[str, Any]
Reply = tuple[int, Payload]


def _error(error: Exception, status: HTTPStatus) -> Reply:
    return int(status), {"error": str(error)}


def _result(message: str, events: list[Event]) -> Reply:
    return int(HTTPStatus.OK), {"result": message, "events": [e.to_dict() for e in events]}


def _decode_event(body: bytes | str) -> Event:
    text = body.decode("utf-8") if isinstance(body, bytes) else body
    text = text.lstrip()
    if not text:
        raise ValueError("EOF")
    data, _ = json.JSONDecoder().raw_decode(text)
    return Event.from_dict(data)


def _atoi(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(f'strconv.Atoi: parsing "{text}": invalid syntax')
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f'strconv.Atoi: parsing "{text}": value out of range')
    return value


def _parse_day(text: str) -> dt.date:
    message = f'parsing time "{text}" as "YYYY-MM-DD": cannot parse'
    if not _DATE.fullmatch(text):
        raise ValueError(message)
    try:
        return dt.date.fromisoformat(text)
    except ValueError as error:
        raise ValueError(f"{message}: {error}") from error


class CalendarServer:
    """Routes calendar requests to an event store; independent of the HTTP layer."""

    def __init__(self, store: EventStore | None = None) -> None:
        self.store = store if store is not None else EventStore()
        self._routes: dict[str, Callable[[str, bytes], Reply]] = {
            "/create_event": self._create,
            "/update_event": self._update,
            "/delete_event": self._delete,
            "/events_for_day": self._lookup(self.store.events_for_day, HTTPStatus.SERVICE_UNAVAILABLE),
            "/events_for_week": self._lookup(self.store.events_for_week, HTTPStatus.SERVICE_UNAVAILABLE),
            "/events_for_month": self._lookup(self.store.events_for_month, HTTPStatus.BAD_REQUEST),
        }

    def handle(
        self, method: str, path: str, query: str = "", body: bytes | str = b""
    ) -> tuple[int, Payload | None]:
        """Answer one request with a status and a JSON payload.

        An unknown path gives 404 and no payload. Bad input gives 400, a broken
        business rule 503 (400 for the monthly listing).
        """
        route = self._routes.get(path)
        if route is None:
            return int(HTTPStatus.NOT_FOUND), None
        uri = f"{path}?{query}" if query else path
        logger.info("Request:\nMethod: %s\nURI: %s\nBody: %r", method, uri, body)
        status, payload = route(query, body if isinstance(body, bytes) else body.encode("utf-8"))
        logger.info("Response: %s %s\n", status, payload)
        return status, payload

    def _create(self, query: str, body: bytes) -> Reply:
        try:
            event = _decode_event(body)
        except ValueError as error:
            return _error(error, HTTPStatus.BAD_REQUEST)
        try:
            self.store.create_event(event)
        except EventError as error:
            return _error(error, HTTPStatus.SERVICE_UNAVAILABLE)
        return _result("Event is created", [event])

    def _update(self, query: str, body: bytes) -> Reply:
        try:
            event = _decode_event(body)
        except ValueError as error:
            return _error(error, HTTPStatus.BAD_REQUEST)
        try:
            self.store.update_event(event)
        except EventError as error:
            return _error(error, HTTPStatus.SERVICE_UNAVAILABLE)
        return _result("Event is updated", [event])

    def _delete(self, query: str, body: bytes) -> Reply:
        try:
            event = _decode_event(body)
        except ValueError as error:
            return _error(error, HTTPStatus.BAD_REQUEST)
        try:
            deleted = self.store.delete_event(event.user_id, event.event_id)
        except EventError as error:
            return _error(error, HTTPStatus.SERVICE_UNAVAILABLE)
        return _result("Event has been deleted", [deleted])

    @staticmethod
    def _lookup(
        find: Callable[[int, dt.date], list[Event]], failure: HTTPStatus
    ) -> Callable[[str, bytes], Reply]:
        def route(query: str, body: bytes) -> Reply:
            params = parse_qs(query, keep_blank_values=True)
            try:
                user_id = _atoi(params.get("user_id", [""])[0])
                day = _parse_day(params.get("date", [""])[0])
            except ValueError as error:
                return _error(error, HTTPStatus.BAD_REQUEST)
            try:
                events = find(user_id, day)
            except EventError as error:
                return _error(error, failure)
            return _result("Events foud", events)

        return route

    def run(self, host: str = "", port: int = DEFAULT_PORT) -> None:
        """Serve HTTP on ``host:port`` until interrupted."""
        with ThreadingHTTPServer((host, port), _make_handler(self)) as httpd:
            logger.info("Listening on %s:%s", host or "*", port)
            httpd.serve_forever()


def _make_handler(calendar: CalendarServer) -> type[BaseHTTPRequestHandler]:
    class Handler(BaseHTTPRequestHandler):
        def _dispatch(self) -> None:
            parts = urlsplit(self.path)
            length = int(self.headers.get("Content-Length") or 0)
            body = self.rfile.read(length) if length > 0 else b""
            status, payload = calendar.handle(self.command, parts.path, parts.query, body)
            if payload is None:
                data = b"404 page not found\n"
                content_type = "text/plain; charset=utf-8"
            else:
                data = json.dumps(payload, ensure_ascii=False).encode("utf-8")
                content_type = "application/json"
            self.send_response(status)
            self.send_header("Content-Type", content_type)
            self.send_header("Content-Length", str(len(data)))
            self.end_headers()
            self.wfile.write(data)

        do_GET = do_POST = do_PUT = do_DELETE = do_PATCH = _dispatch

        def log_message(self, format: str, *args: Any) -> None:
            logger.debug(format, *args)

    return Handler


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="calendar-server", description="HTTP calendar server.")
    parser.add_argument("--host", default="")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    try:
        CalendarServer().run(args.host, args.port)
    except KeyboardInterrupt:
        return 0
    except OSError as error:
        logger.error("%s", error)
        return 1
    return 0