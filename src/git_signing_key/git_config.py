"""Read and write single git config values."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Protocol

from .errors import ConfigWriteError
from .types import Scope

logger = logging.getLogger(__name__)

SIGNING_KEY = "user.signingkey"
GPG_PROGRAM = "gpg.program"


class ConfigStore(Protocol):
    """Single-value get/set access to an external configuration."""

    def get(self, name: str) -> str | None:
        ...

    def set(self, name: str, value: str) -> None:
        ...


class GitConfigStore:
    """ConfigStore backed by ``git config``.

    Local scope runs plain ``git config``, so reads see the effective value
    for the working directory and writes land in the repository config.
    Global scope adds ``--global``.

    Args:
        scope: Which config file to target.
        cwd: Directory to run git in (defaults to the process cwd).
    """

    def __init__(self, scope: Scope = Scope.LOCAL, cwd: Path | None = None):
        self.scope = scope
        self.cwd = cwd

    def _command(self, *args: str) -> list[str]:
        cmd = ["git", "config"]
        if self.scope.git_flag:
            cmd.append(self.scope.git_flag)
        cmd.extend(args)
        return cmd

    def _run(self, cmd: list[str]) -> subprocess.CompletedProcess:
        logger.debug(f"Running {' '.join(cmd)}")
        return subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            cwd=str(self.cwd) if self.cwd else None,
            timeout=30,
        )

    def get(self, name: str) -> str | None:
        """Return the configured value, or None if unset or unreadable."""
        try:
            result = self._run(self._command(name))
        except (OSError, subprocess.TimeoutExpired) as exc:
            logger.debug(f"git config {name} unavailable: {exc}")
            return None
        if result.returncode != 0:
            return None
        return result.stdout.strip() or None

    def set(self, name: str, value: str) -> None:
        """Store ``value`` under ``name``.

        Raises:
            ConfigWriteError: If git is missing or rejects the write.
        """
        try:
            result = self._run(self._command(name, value))
        except (OSError, subprocess.TimeoutExpired) as exc:
            raise ConfigWriteError(name, str(exc)) from exc
        if result.returncode != 0:
            raise ConfigWriteError(name, result.stderr.strip())
