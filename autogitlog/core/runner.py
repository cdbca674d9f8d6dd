"""Run external commands and capture their output without raising."""

from __future__ import annotations

import logging
import pathlib
import subprocess
from dataclasses import dataclass
from typing import Optional, Sequence, Union

_LOG = logging.getLogger(__name__)

Command = Union[str, Sequence[str]]


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a single command: trimmed stdout on success, a reason on failure."""

    ok: bool
    stdout: str = ""
    reason: str = ""

    @classmethod
    def success(cls, stdout: str) -> "CommandResult":
        return cls(ok=True, stdout=stdout)

    @classmethod
    def failure(cls, reason: str) -> "CommandResult":
        return cls(ok=False, reason=reason)

    def value(self, default: str = "") -> str:
        """Return stdout when the command succeeded, ``default`` otherwise."""

        return self.stdout if self.ok else default


def run_command(
    command: Command,
    cwd: str | pathlib.Path | None = None,
    timeout: Optional[float] = None,
) -> CommandResult:
    """Execute *command* in *cwd*.

    A string runs through the shell (custom field commands are free-form),
    a sequence runs directly. Non-zero exits, missing executables, missing
    working directories and timeouts all come back as a failed result.
    """

    shell = isinstance(command, str)
    try:
        completed = subprocess.run(
            command if shell else list(command),
            cwd=cwd,
            shell=shell,
            check=True,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
        )
    except subprocess.CalledProcessError as exc:
        reason = (exc.stderr or "").strip() or f"exit status {exc.returncode}"
        _LOG.debug("Command failed: %s (%s)", _describe(command), reason)
        return CommandResult.failure(reason)
    except subprocess.TimeoutExpired:
        _LOG.debug("Command timed out after %ss: %s", timeout, _describe(command))
        return CommandResult.failure("timeout")
    except OSError as exc:
        _LOG.debug("Command could not be started: %s (%s)", _describe(command), exc)
        return CommandResult.failure(str(exc))
    return CommandResult.success((completed.stdout or "").strip())


def run_git(args: Sequence[str], cwd: str | pathlib.Path | None = None) -> CommandResult:
    return run_command(["git", *args], cwd=cwd)


def _describe(command: Command) -> str:
    if isinstance(command, str):
        return command
    return " ".join(command)
