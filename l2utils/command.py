"""Filesystem commands run through an executor that keeps a history."""

from __future__ import annotations

import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar


class Command(ABC):
    """A named action that an executor can run."""

    name: ClassVar[str]

    @abstractmethod
    def execute(self, executor: Executor, *args: str) -> None:
        """Run the command with ``args`` on behalf of ``executor``."""


def _run_quietly(program: str, target: str) -> None:
    try:
        subprocess.run([program, target], capture_output=True, check=False)
    except OSError:
        pass


class _PathCommand(Command):
    def execute(self, executor: Executor, *args: str) -> None:
        if not args:
            raise ValueError(f"{self.name}: missing operand")
        _run_quietly(self.name, args[0])
        executor.history.append(self.name)


class MakeDirectory(_PathCommand):
    """Create a directory; failures of the program are ignored."""

    name = "mkdir"

    def execute(self, executor: Executor, *args: str) -> None:
        super().execute(executor, *args)


class Touch(_PathCommand):
    """Create an empty file or update its time; failures are ignored."""

    name = "touch"

    def execute(self, executor: Executor, *args: str) -> None:
        super().execute(executor, *args)


class ShowHistory(Command):
    """Print the names of the commands run so far."""

    name = "history"

    def execute(self, executor: Executor, *args: str) -> None:
        print("History")
        for entry in executor.history:
            print(entry)
        executor.history.append(self.name)


@dataclass
class Executor:
    """Runs commands and remembers which ones were run."""

    history: list[str] = field(default_factory=list)

    def execute(self, command: Command, *args: str) -> None:
        command.execute(self, *args)


def run_command(base: str | Path) -> Executor:
    """Create a folder and a file under ``base``, then print the history."""
    base = Path(base)
    executor = Executor()
    executor.execute(MakeDirectory(), str(base / "folder"))
    executor.execute(Touch(), str(base / "file.empty"))
    executor.execute(ShowHistory())
    return executor