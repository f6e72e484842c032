"""Errors raised by the gpg and git glue."""

from __future__ import annotations


class SigningKeyError(RuntimeError):
    """Base error for key listing and git config operations."""


class KeyListingError(SigningKeyError):
    """Raised when the secret keyring cannot be listed."""


class ConfigWriteError(SigningKeyError):
    """Raised when git refuses to store a config value."""

    def __init__(self, name: str, detail: str = ""):
        self.name = name
        self.detail = detail
        message = f"Failed to set {name}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
