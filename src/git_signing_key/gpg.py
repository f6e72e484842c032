"""List secret keys from the local GPG keyring.

Runs ``gpg --list-secret-keys --keyid-format long`` and turns its human
readable listing into KeyRecords:

    sec   rsa4096/ABCD1234EFGH5678 2023-01-01 [SC]
          0123456789ABCDEF0123456789ABCDEF01234567
    uid                 [ultimate] John Doe <john@example.com>
    ssb   rsa4096/1111222233334444 2023-01-01 [E]
"""

from __future__ import annotations

import logging
import subprocess
from typing import Protocol

from .errors import KeyListingError
from .types import KeyRecord

logger = logging.getLogger(__name__)

DEFAULT_GPG_PROGRAM = "gpg"


class KeyProvider(Protocol):
    """Source of selectable signing keys."""

    def list_keys(self) -> list[KeyRecord]:
        ...


def parse_secret_keys(output: str) -> list[KeyRecord]:
    """Parse a long-format secret key listing.

    Each ``sec`` line opens a key; the first uid line after it supplies the
    label. Keys with no uid line are skipped, and only the first uid of a
    key is used.
    """
    keys: list[KeyRecord] = []
    pending_id: str | None = None

    for line in output.splitlines():
        if line.startswith("sec"):
            parts = line.split()
            if len(parts) > 1 and "/" in parts[1]:
                key_id = parts[1].split("/")[1]
                if key_id:
                    pending_id = key_id

        if "uid" in line and "[" in line and pending_id is not None:
            _, _, after = line.partition("]")
            keys.append(KeyRecord(identifier=pending_id, label=after.strip()))
            pending_id = None

    return keys


class GpgKeyProvider:
    """KeyProvider that shells out to gpg.

    Args:
        program: gpg executable to run.
        timeout: Seconds to wait for gpg before giving up.
    """

    def __init__(self, program: str = DEFAULT_GPG_PROGRAM, timeout: float = 30):
        self.program = program
        self.timeout = timeout

    def list_keys(self) -> list[KeyRecord]:
        """Return the secret keys in keyring order.

        Raises:
            KeyListingError: If gpg is missing, times out or exits non-zero.
        """
        cmd = [self.program, "--list-secret-keys", "--keyid-format", "long"]
        logger.debug(f"Running {' '.join(cmd)}")
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                errors="replace",
                timeout=self.timeout,
            )
        except FileNotFoundError as exc:
            raise KeyListingError(f"{self.program} not found; is GnuPG installed?") from exc
        except subprocess.TimeoutExpired as exc:
            raise KeyListingError(f"{self.program} timed out after {self.timeout}s") from exc

        if result.returncode != 0:
            detail = result.stderr.strip() or f"exit status {result.returncode}"
            raise KeyListingError(f"{self.program} failed: {detail}")

        keys = parse_secret_keys(result.stdout)
        logger.debug(f"Found {len(keys)} secret key(s)")
        return keys
