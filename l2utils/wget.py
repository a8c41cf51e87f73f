"""Downloading a whole site, in the manner of ``wget``."""

from __future__ import annotations

import argparse
import posixpath
import sys
from collections import deque
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from urllib.parse import urldefrag, urljoin, urlsplit

import requests
from bs4 import BeautifulSoup

_TIMEOUT = 30
_LINK_ATTRIBUTES = (("a", "href"), ("link", "href"), ("script", "src"))


def create_folder(name: str | Path) -> None:
    """Create the directory and its parents unless something already exists there."""
    path = Path(name)
    if path.exists():
        return
    path.mkdir(parents=True, exist_ok=True)


def local_path(host: str, url_path: str) -> str:
    """Return where the page at ``url_path`` is saved; pages without an extension become index.html."""
    full = host + url_path
    if not posixpath.splitext(url_path)[1]:
        if not full.endswith("/"):
            full += "/"
        full += "index.html"
    return full


def _links(response: requests.Response) -> list[str]:
    soup = BeautifulSoup(response.content, "html.parser")
    found = []
    for tag, attribute in _LINK_ATTRIBUTES:
        for element in soup.find_all(tag):
            value = element.get(attribute)
            if value:
                found.append(urldefrag(urljoin(response.url, value)).url)
    return found


def _prepare_folders(full: str) -> None:
    try:
        if not posixpath.splitext(full)[1]:
            create_folder(full)
        else:
            last = full.rfind("/")
            if last > 0:
                create_folder(full[:last])
    except OSError as error:
        print(error, file=sys.stderr)


def mirror(link: str) -> list[str]:
    """Download every page reachable from ``link`` on the same host.

    Returns the paths of the saved files. Raises ``ValueError`` for a link
    that is not an absolute URL and ``requests.RequestException`` when the
    first page cannot be fetched.
    """
    link = link.rstrip("/")
    parsed = urlsplit(link)
    if not parsed.scheme or not parsed.netloc or not parsed.hostname:
        raise ValueError(f"invalid URI for request: {link!r}")
    create_folder(parsed.netloc)
    host = parsed.hostname
    allowed = {host, "www." + host}

    saved: list[str] = []
    seen = {link}
    pending = deque([link])
    with requests.Session() as session:
        while pending:
            url = pending.popleft()
            is_start = url == link
            try:
                response = session.get(url, timeout=_TIMEOUT)
            except requests.RequestException:
                if is_start:
                    raise
                continue
            seen.add(response.url)
            if response.status_code >= 203:
                if is_start:
                    raise requests.HTTPError(
                        f"{response.status_code} {response.reason}", response=response
                    )
                continue

            entry = urlsplit(response.url).path
            _prepare_folders(host + entry)
            target = local_path(host, entry)
            try:
                Path(target).parent.mkdir(parents=True, exist_ok=True)
                Path(target).write_bytes(response.content)
            except OSError as error:
                print(error, file=sys.stderr)
            else:
                print("saved:", host + entry)
                saved.append(target)

            if "html" not in response.headers.get("Content-Type", ""):
                continue
            for found in _links(response):
                parts = urlsplit(found)
                if parts.scheme not in ("http", "https") or parts.hostname not in allowed:
                    continue
                if found not in seen:
                    seen.add(found)
                    pending.append(found)
    return saved


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="wget", description="wget - скачивает весь сайт")
    parser.add_argument("urls", nargs="+", metavar="URL")
    args = parser.parse_args(argv)
    failed = False
    with ThreadPoolExecutor() as pool:
        futures = [pool.submit(mirror, url) for url in args.urls]
        for future in futures:
            try:
                future.result()
            except (ValueError, OSError, requests.RequestException) as error:
                print(error, file=sys.stderr)
                failed = True
    return 1 if failed else 0