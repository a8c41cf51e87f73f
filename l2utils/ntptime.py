"""Exact time from an NTP server."""

from __future__ import annotations

import argparse
import socket
import struct
import sys
import time
from datetime import datetime, timedelta

DEFAULT_SERVER = "0.beevik-ntp.pool.ntp.org"
DEFAULT_PORT = 123
DEFAULT_TIMEOUT = 5.0

_NTP_EPOCH_OFFSET = 2208988800
_PACKET_SIZE = 48
_MODE_SERVER = 4
_LEAP_UNSYNCHRONIZED = 3
_FRACTION = 2**32


class NTPError(Exception):
    """Raised when the server cannot be queried or its answer is unusable."""


def _to_ntp(timestamp: float) -> bytes:
    seconds = int(timestamp)
    fraction = int((timestamp - seconds) * _FRACTION)
    return struct.pack("!II", (seconds + _NTP_EPOCH_OFFSET) & 0xFFFFFFFF, fraction)


def _from_ntp(data: bytes) -> float:
    seconds, fraction = struct.unpack("!II", data)
    return seconds - _NTP_EPOCH_OFFSET + fraction / _FRACTION


def _split_address(server: str) -> tuple[str, int]:
    host, port = server, str(DEFAULT_PORT)
    if server.startswith("["):
        host, _, rest = server[1:].partition("]")
        if rest.startswith(":"):
            port = rest[1:]
    elif server.count(":") == 1:
        host, port = server.split(":")
    try:
        return host, int(port)
    except ValueError as error:
        raise NTPError(f"invalid port in address {server!r}") from error


def query_offset(server: str, timeout: float = DEFAULT_TIMEOUT) -> float:
    """Return how many seconds the server's clock is ahead of the local one."""
    if not server:
        raise NTPError("server address is empty")
    host, port = _split_address(server)
    try:
        family, kind, proto, _, address = socket.getaddrinfo(
            host, port, type=socket.SOCK_DGRAM
        )[0]
    except (socket.gaierror, IndexError) as error:
        raise NTPError(f"cannot resolve {host!r}: {error}") from error

    request = bytearray(_PACKET_SIZE)
    request[0] = 0x23  # leap 0, version 4, client mode
    with socket.socket(family, kind, proto) as sock:
        sock.settimeout(timeout)
        sent_at = time.time()
        request[40:48] = _to_ntp(sent_at)
        try:
            sock.sendto(request, address)
            reply, _ = sock.recvfrom(1024)
        except OSError as error:
            raise NTPError(f"query to {server} failed: {error}") from error
        received_at = time.time()

    if len(reply) < _PACKET_SIZE:
        raise NTPError("response too short")
    if reply[0] & 0x07 != _MODE_SERVER:
        raise NTPError("invalid mode in response")
    if reply[0] >> 6 == _LEAP_UNSYNCHRONIZED:
        raise NTPError("server clock not synchronized")
    if reply[1] == 0:
        raise NTPError("kiss of death received")
    if reply[24:32] != request[40:48]:
        raise NTPError("server response mismatch")

    server_received = _from_ntp(reply[32:40])
    server_sent = _from_ntp(reply[40:48])
    return ((server_received - sent_at) + (server_sent - received_at)) / 2


def accurate_time(server: str = DEFAULT_SERVER) -> datetime:
    """Return the local time corrected by the server's clock offset."""
    offset = query_offset(server)
    return datetime.now().astimezone() + timedelta(seconds=offset)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="ntptime", description="Print the exact time.")
    parser.add_argument("server", nargs="?", default=DEFAULT_SERVER)
    args = parser.parse_args(argv)
    try:
        now = accurate_time(args.server)
    except NTPError as error:
        print(f"Got error: \n{error}", file=sys.stderr, end="")
        return 1
    print(now)
    return 0