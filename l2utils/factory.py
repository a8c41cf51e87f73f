"""Storages for a user record, chosen by a factory method."""

from __future__ import annotations

import contextlib
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, ClassVar

import yaml

USER_FILE = "user.yaml"


class Storage(str, Enum):
    """The kinds of storage the factory can make."""

    CACHE = "cache"
    YAML = "yaml"


@dataclass
class User:
    id: int = 0
    name: str = ""


class Keeper(ABC):
    """A place a user can be stored in and taken out of."""

    name: ClassVar[str]

    @abstractmethod
    def load(self, user: User) -> None:
        """Store ``user``."""

    @abstractmethod
    def unload(self) -> User | None:
        """Return the stored user."""


@dataclass
class CacheKeeper(Keeper):
    """Keeps the user's fields in memory; entries never expire."""

    name: ClassVar[str] = "Cache"
    _entries: dict[str, Any] | None = field(default=None, repr=False)

    def load(self, user: User) -> None:
        if self._entries is None:
            self._entries = {}
        self._entries["Id"] = user.id
        self._entries["Name"] = user.name

    def unload(self) -> User | None:
        """Return the stored user, or ``None`` when nothing was ever loaded."""
        if self._entries is None:
            return None
        return User(id=self._entries["Id"], name=self._entries["Name"])


@dataclass
class FileKeeper(Keeper):
    """Keeps the user in a YAML file inside ``directory``."""

    name: ClassVar[str] = "YAML File"
    directory: Path = field(default_factory=lambda: Path("../L2"))

    @property
    def path(self) -> Path:
        return (Path(self.directory) / USER_FILE).resolve()

    def read(self) -> bytes:
        """Return the file's bytes, or nothing when it cannot be read."""
        try:
            return self.path.read_bytes()
        except OSError:
            return b""

    def load(self, user: User) -> None:
        data = yaml.safe_dump(
            {"id": user.id, "username": user.name},
            sort_keys=False,
            allow_unicode=True,
        )
        # Write failures are ignored, as a storage that cannot be written is empty.
        with contextlib.suppress(OSError):
            self.path.write_text(data, encoding="utf-8")

    def unload(self) -> User:
        """Return the user read from the file; missing fields keep their defaults."""
        user = User()
        try:
            data = yaml.safe_load(self.read())
        except yaml.YAMLError:
            data = None
        if isinstance(data, dict):
            user_id = data.get("id")
            if isinstance(user_id, int) and not isinstance(user_id, bool):
                user.id = user_id
            username = data.get("username")
            if isinstance(username, str):
                user.name = username
        print("File unload is OK")
        return user


@dataclass
class Memory:
    """Makes a keeper for the requested kind of storage."""

    directory: Path = field(default_factory=lambda: Path("../L2"))

    def keeper(self, storage: Storage | str) -> Keeper:
        """Return a new keeper; raise ``ValueError`` for an unknown storage."""
        kind = Storage(storage)
        if kind is Storage.CACHE:
            return CacheKeeper()
        return FileKeeper(directory=self.directory)