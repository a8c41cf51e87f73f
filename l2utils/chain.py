"""Loading a profile from a file through a chain of validators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml


@dataclass
class Profile:
    username: str = ""


@dataclass
class Validator(ABC):
    """One link of the chain; passes its result on to ``successor``."""

    successor: Validator | None = None

    @abstractmethod
    def validate(self, profile: Profile, param: Any) -> None:
        """Check ``param`` and hand the result on; raise ``ValueError`` on failure."""

    def _forward(self, profile: Profile, value: Any) -> None:
        if self.successor is not None:
            self.successor.validate(profile, value)


@dataclass
class ExistValidator(Validator):
    """Checks that the named file exists under ``base_dir``."""

    base_dir: Path = field(default_factory=lambda: Path("."))

    def validate(self, profile: Profile, param: Any) -> None:
        path = (Path(self.base_dir) / str(param)).resolve()
        if not path.exists():
            raise ValueError("[Exist] Can't locate file, aborting")
        print("ExistValidator is OK")
        self._forward(profile, path)


@dataclass
class ContentValidator(Validator):
    """Reads the file's bytes."""

    def validate(self, profile: Profile, param: Any) -> None:
        try:
            contents = Path(param).read_bytes()
        except OSError as error:
            raise ValueError("[Content] Can't read file, aborting") from error
        print("ContentValidator is OK")
        self._forward(profile, contents)


@dataclass
class YamlValidator(Validator):
    """Parses the bytes as YAML and fills in the profile."""

    def validate(self, profile: Profile, param: Any) -> None:
        message = "[Yaml] Can't unmarshal file, aborting"
        try:
            data = yaml.safe_load(param)
        except yaml.YAMLError as error:
            raise ValueError(message) from error
        if data is not None:
            if not isinstance(data, dict):
                raise ValueError(message)
            username = data.get("username")
            if isinstance(username, (dict, list)):
                raise ValueError(message)
            if username is not None:
                profile.username = str(username)
        print("YamlValidator is OK")
        self._forward(profile, profile)


def run_chain(base_dir: str | Path) -> Profile:
    """Fill a profile from ``chain.yaml`` in ``base_dir`` and report progress."""
    profile = Profile()
    print(f"Object before file validation : {profile}")
    chain = ExistValidator(
        successor=ContentValidator(successor=YamlValidator()),
        base_dir=Path(base_dir),
    )
    try:
        chain.validate(profile, "chain.yaml")
    except ValueError as error:
        print(error)
    print(f"Object after file validation : {profile}")
    return profile