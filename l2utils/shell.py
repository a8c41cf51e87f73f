"""A small interactive shell with built-in cd, pwd, echo, exec, fork, kill and ps."""

from __future__ import annotations

import cmd
import os
import shlex
import signal
import subprocess
import sys
from collections.abc import Sequence
from typing import IO

import psutil

_KILL_SIGNAL = getattr(signal, "SIGKILL", signal.SIGTERM)


def _tabulate(rows: Sequence[Sequence[str]], min_width: int = 5, padding: int = 5) -> str:
    """Align every cell but the last of each row into padded columns."""
    columns = max((len(row) for row in rows), default=0)
    widths = []
    for index in range(columns - 1):
        cells = [row[index] for row in rows if len(row) > index + 1]
        widths.append(max(min_width, max((len(cell) for cell in cells), default=0) + padding))
    lines = []
    for row in rows:
        aligned = "".join(cell.ljust(widths[i]) for i, cell in enumerate(row[:-1]))
        lines.append(aligned + (row[-1] if row else ""))
    return "\n".join(lines) + "\n"


class Shell(cmd.Cmd):
    """The ``msh`` command interpreter."""

    intro = ""
    prompt = "msh> "

    def __init__(
        self,
        stdin: IO[str] | None = None,
        stdout: IO[str] | None = None,
        stderr: IO[str] | None = None,
    ) -> None:
        super().__init__(stdin=stdin, stdout=stdout)
        self.stderr = stderr if stderr is not None else sys.stderr
        self.use_rawinput = stdin is None

    def _out(self, text: str = "") -> None:
        self.stdout.write(text + "\n")

    def _err(self, text: object) -> None:
        self.stderr.write(f"{text}\n")

    def _split(self, arg: str) -> list[str] | None:
        try:
            return shlex.split(arg)
        except ValueError as error:
            self._err(error)
            return None

    def _leave(self) -> bool:
        """Flush pending output and tell the command loop to stop."""
        self.stdout.flush()
        self.stderr.flush()
        return True

    def emptyline(self) -> bool:
        return False

    def default(self, line: str) -> None:
        name = line.split(maxsplit=1)[0] if line.strip() else line
        self._err(f"unknown command {name!r} for \"msh\"")

    def do_cd(self, arg: str) -> None:
        """cd [DIR]: change the current directory, or show it when no DIR is given."""
        args = self._split(arg)
        if args is None:
            return
        if not args:
            self.do_pwd("")
            return
        try:
            os.chdir(args[0])
        except OSError as error:
            self._err(error)

    def do_pwd(self, arg: str) -> None:
        """pwd: print the absolute path of the current directory."""
        try:
            self._out(os.getcwd())
        except OSError as error:
            self._err(error)

    def do_echo(self, arg: str) -> None:
        """echo [ARG...]: print the arguments separated by single spaces."""
        args = self._split(arg)
        if args is not None:
            self._out(" ".join(args))

    def do_exec(self, arg: str) -> None:
        """exec PROGRAM [ARG...]: run another program and show its output."""
        args = self._split(arg)
        if args is None:
            return
        if not args:
            self._err("exec: not enough arguments")
            return
        try:
            completed = subprocess.run(args, capture_output=True, text=True, check=False)
        except OSError as error:
            self._err(error)
            return
        self.stdout.write(completed.stdout)
        self.stderr.write(completed.stderr)
        if completed.returncode != 0:
            self._err(f"exit status {completed.returncode}")

    def do_fork(self, arg: str) -> None:
        """fork: create a new process."""
        if not hasattr(os, "fork"):
            self._err("fork: not supported on this platform")
            return
        try:
            pid = os.fork()
        except OSError as error:
            self._err(error)
            return
        if pid == 0:
            os._exit(0)
        os.waitpid(pid, 0)

    def do_kill(self, arg: str) -> None:
        """kill PID: terminate a process."""
        args = self._split(arg)
        if args is None:
            return
        if not args:
            self._err("kill: not enough arguments")
            return
        try:
            pid = int(args[0])
        except ValueError:
            self._err(f"kill: invalid process id: {args[0]}")
            return
        try:
            os.kill(pid, _KILL_SIGNAL)
        except OSError as error:
            self._err(error)

    def do_ps(self, arg: str) -> None:
        """ps: list processes with their names, ids and parent ids."""
        rows = [["NAME", "PID", "PPID"]]
        try:
            for process in psutil.process_iter(["name", "pid", "ppid"]):
                info = process.info
                rows.append(
                    [info.get("name") or "", str(info.get("pid")), str(info.get("ppid") or 0)]
                )
        except psutil.Error as error:
            self._err(error)
        self.stdout.write(_tabulate(rows))

    def do_exit(self, arg: str) -> bool:
        """exit: leave the shell."""
        return self._leave()

    def do_EOF(self, arg: str) -> bool:
        self._out()
        return self._leave()


def main(argv: list[str] | None = None) -> int:
    """Run one command given on the command line, or start the interactive shell."""
    args = sys.argv[1:] if argv is None else list(argv)
    shell = Shell()
    if args:
        shell.onecmd(shlex.join(args))
    else:
        shell.cmdloop()
    return 0