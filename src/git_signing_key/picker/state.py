"""Cursor state for the key picker."""

from __future__ import annotations

from collections.abc import Sequence

from ..types import Command, KeyRecord
from .errors import EmptyInputError


class SelectionState:
    """Ordered entries plus the configured and highlighted positions.

    The entry list and ``current_index`` are fixed for the session; only
    ``highlight_index`` moves, always wrapping so it stays in bounds.

    Args:
        entries: Keys in display order. Must not be empty.
        current_identifier: Identifier of the configured key, if any.
            With duplicate identifiers the first match is the current one.

    Raises:
        EmptyInputError: If ``entries`` is empty.
    """

    def __init__(self, entries: Sequence[KeyRecord], current_identifier: str | None = None):
        if not entries:
            raise EmptyInputError()

        self.entries: tuple[KeyRecord, ...] = tuple(entries)
        self.current_index: int | None = None
        if current_identifier is not None:
            for i, entry in enumerate(self.entries):
                if entry.identifier == current_identifier:
                    self.current_index = i
                    break

        self.highlight_index = self.current_index if self.current_index is not None else 0

    @classmethod
    def initialize(
        cls, entries: Sequence[KeyRecord], current_identifier: str | None = None
    ) -> "SelectionState":
        return cls(entries, current_identifier)

    def __len__(self) -> int:
        return len(self.entries)

    def move_up(self) -> None:
        """Move the highlight up one entry, wrapping to the last."""
        if self.highlight_index == 0:
            self.highlight_index = len(self.entries) - 1
        else:
            self.highlight_index -= 1

    def move_down(self) -> None:
        """Move the highlight down one entry, wrapping to the first."""
        if self.highlight_index >= len(self.entries) - 1:
            self.highlight_index = 0
        else:
            self.highlight_index += 1

    def apply(self, command: Command) -> None:
        """Apply a navigation command. Non-navigation commands are no-ops."""
        if command == Command.MOVE_UP:
            self.move_up()
        elif command == Command.MOVE_DOWN:
            self.move_down()

    def current_highlight(self) -> KeyRecord:
        return self.entries[self.highlight_index]

    def is_currently_configured(self, index: int) -> bool:
        return self.current_index is not None and self.current_index == index

    def is_highlighted(self, index: int) -> bool:
        return index == self.highlight_index
