"""A primitive telnet client: standard input to a TCP socket, the socket to standard output."""

from __future__ import annotations

import argparse
import queue
import signal
import socket
import sys
import threading


class ConnectionClosedError(ConnectionError):
    """Raised when the server closes the connection."""


def _join_host_port(host: str, port: str) -> str:
    if ":" in host:
        return f"[{host}]:{port}"
    return f"{host}:{port}"


def _send(conn: socket.socket, outcomes: queue.Queue) -> None:
    try:
        for line in sys.stdin:
            if not line.endswith("\n"):
                break
            conn.sendall((line + "\n").encode("utf-8"))
    except (OSError, ValueError) as error:
        outcomes.put(error)
        return
    outcomes.put(None)


def _receive(conn: socket.socket, outcomes: queue.Queue) -> None:
    try:
        with conn.makefile("rb") as reader:
            for raw in reader:
                if not raw.endswith(b"\n"):
                    break
                print(raw.decode("utf-8", errors="replace"), end="", flush=True)
    except (OSError, ValueError) as error:
        outcomes.put(error)
        return
    outcomes.put(ConnectionClosedError("connection closed by foreign host"))


def connect(timeout: float, host: str, port: str | int) -> None:
    """Connect to ``host:port`` within ``timeout`` seconds (0 waits forever) and relay data.

    Returns when standard input ends or the process is interrupted. Raises
    ``OSError`` when the connection cannot be made, and
    ``ConnectionClosedError`` when the server closes it.
    """
    port = str(port)
    address = _join_host_port(host, port)
    try:
        conn = socket.create_connection((host, port), timeout=timeout or None)
    except OSError as error:
        print(error, end="")
        raise

    stopped = False

    def stop(*_: object) -> None:
        nonlocal stopped
        stopped = True

    previous = None
    in_main = threading.current_thread() is threading.main_thread()
    outcomes: queue.Queue = queue.Queue()
    outcome: BaseException | None = None
    with conn:
        conn.settimeout(None)
        print(f"Connected to {address}", flush=True)
        threading.Thread(target=_send, args=(conn, outcomes), daemon=True).start()
        threading.Thread(target=_receive, args=(conn, outcomes), daemon=True).start()
        if in_main:
            previous = signal.signal(signal.SIGTERM, stop)
        try:
            while not stopped:
                try:
                    outcome = outcomes.get(timeout=0.2)
                    break
                except queue.Empty:
                    continue
        except KeyboardInterrupt:
            outcome = None
        finally:
            if in_main:
                signal.signal(signal.SIGTERM, previous)
            try:
                conn.shutdown(socket.SHUT_RDWR)
            except OSError:
                pass
    if outcome is not None:
        raise outcome


def _non_negative(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"invalid non-negative value: {text!r}")
    return value


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="go-telnet", usage="go-telnet [--timeout] host port")
    parser.add_argument("--timeout", type=_non_negative, default=10, help="--timeout=10")
    parser.add_argument("address", nargs="*")
    args = parser.parse_args(argv)
    print(args.timeout)
    if len(args.address) != 2:
        print("Must be host and port")
        return 1
    host, port = args.address
    print(host, port)
    try:
        connect(args.timeout, host, port)
    except ConnectionClosedError as error:
        print(error, file=sys.stderr)
        return 1
    except OSError:
        return 1
    return 0