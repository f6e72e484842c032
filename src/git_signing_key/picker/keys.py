"""Keyboard input helpers for the picker.

Small predicates for detecting key presses, plus the table that turns a
raw key into one of the picker's abstract commands.
"""

from __future__ import annotations

import readchar

from ..types import Command


def is_enter(key: str) -> bool:
    """Check if key is Enter/Return."""
    return key in (readchar.key.ENTER, "\r", "\n")


def is_exit(key: str) -> bool:
    """Check if key is the quit key (q only)."""
    return key == "q"


def is_interrupt(key: str) -> bool:
    """Check if key is Ctrl+C."""
    return key == readchar.key.CTRL_C


def is_up(key: str) -> bool:
    """Check if key is up arrow or vim 'k'."""
    return key == "k" or key == readchar.key.UP


def is_down(key: str) -> bool:
    """Check if key is down arrow or vim 'j'."""
    return key == "j" or key == readchar.key.DOWN


def to_command(key: str) -> Command | None:
    """Map a raw key to a picker command.

    Returns None for keys the picker ignores.
    """
    if is_exit(key) or is_interrupt(key):
        return Command.CANCEL
    if is_up(key):
        return Command.MOVE_UP
    if is_down(key):
        return Command.MOVE_DOWN
    if is_enter(key):
        return Command.CONFIRM
    return None
