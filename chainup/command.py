"""Running a tool of the selected toolchain in place of this process."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Iterable
from dataclasses import dataclass, field

from chainup.errors import RunningCommandError


@dataclass
class Command:
    """A program to run, its arguments and the environment variables it gets."""

    program: str | os.PathLike
    args: list[str] = field(default_factory=list)
    env: dict[str, str] = field(default_factory=dict)

    @property
    def argv(self) -> list[str]:
        return [os.fspath(self.program), *(os.fspath(arg) for arg in self.args)]

    def environment(self) -> dict[str, str]:
        """The process environment with this command's variables applied."""
        merged = dict(os.environ)
        merged.update(self.env)
        return merged


if sys.platform == "win32":

    def _exec(cmd: Command) -> int:
        return subprocess.run(cmd.argv, env=cmd.environment(), check=False).returncode

else:

    def _exec(cmd: Command) -> int:
        argv = cmd.argv
        sys.stdout.flush()
        sys.stderr.flush()
        os.execvpe(argv[0], argv, cmd.environment())
        raise AssertionError("exec returned")


def run_command_for_dir(cmd: Command, arg0: str, args: Iterable) -> int:
    """Run ``cmd`` with ``args`` appended.

    Where the platform allows it the current process is replaced, so this
    only returns (with the child's exit code) on platforms that cannot.
    """
    cmd.args.extend(os.fspath(arg) for arg in args)
    try:
        return _exec(cmd)
    except OSError as error:
        raise RunningCommandError(arg0) from error