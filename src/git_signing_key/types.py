"""Type definitions for git-signing-key.

Shared enums and dataclasses used by the picker and the git/gpg glue.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Scope(str, Enum):
    """Which git config file the signing key is written to."""

    LOCAL = "local"
    GLOBAL = "global"

    def __str__(self) -> str:
        return self.value

    @property
    def git_flag(self) -> str | None:
        """Extra ``git config`` flag for this scope (local needs none)."""
        if self == Scope.GLOBAL:
            return "--global"
        return None


class Command(str, Enum):
    """Abstract picker commands that raw key presses map onto."""

    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    CONFIRM = "confirm"
    CANCEL = "cancel"

    def __str__(self) -> str:
        return self.value


class SessionState(str, Enum):
    """Lifecycle of one picker session."""

    ACTIVE = "active"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self != SessionState.ACTIVE


class Outcome(str, Enum):
    SELECTED = "selected"
    CANCELLED = "cancelled"


class KeyEventKind(str, Enum):
    """Kind of a key event; only presses drive the picker."""

    PRESS = "press"
    REPEAT = "repeat"
    RELEASE = "release"


@dataclass(frozen=True)
class KeyRecord:
    """One selectable signing key.

    Attributes:
        identifier: Opaque key token (GPG long key id). Must be non-empty.
        label: Human-readable uid, e.g. ``"Jane Doe <jane@example.com>"``.
    """

    identifier: str
    label: str = ""

    def __post_init__(self):
        if not self.identifier:
            raise ValueError("KeyRecord identifier must be non-empty")


@dataclass(frozen=True)
class KeyEvent:
    """A single discrete input event read from the terminal."""

    key: str
    kind: KeyEventKind = KeyEventKind.PRESS

    @property
    def is_press(self) -> bool:
        return self.kind == KeyEventKind.PRESS


@dataclass(frozen=True)
class SelectionResult:
    """How a picker session ended."""

    outcome: Outcome
    identifier: str | None = None

    @classmethod
    def selected(cls, identifier: str) -> "SelectionResult":
        return cls(outcome=Outcome.SELECTED, identifier=identifier)

    @classmethod
    def cancelled(cls) -> "SelectionResult":
        return cls(outcome=Outcome.CANCELLED)

    @property
    def is_cancelled(self) -> bool:
        return self.outcome == Outcome.CANCELLED
