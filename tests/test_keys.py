"""Tests for key press helpers."""

import pytest
import readchar

from git_signing_key.picker import keys
from git_signing_key.types import Command


@pytest.mark.parametrize(
    "key,command",
    [
        (readchar.key.UP, Command.MOVE_UP),
        ("k", Command.MOVE_UP),
        (readchar.key.DOWN, Command.MOVE_DOWN),
        ("j", Command.MOVE_DOWN),
        (readchar.key.ENTER, Command.CONFIRM),
        ("\r", Command.CONFIRM),
        ("\n", Command.CONFIRM),
        ("q", Command.CANCEL),
        (readchar.key.CTRL_C, Command.CANCEL),
    ],
)
def test_to_command_maps_bound_keys(key, command):
    assert keys.to_command(key) == command


@pytest.mark.parametrize(
    "key", ["x", " ", readchar.key.ESC, readchar.key.LEFT, "1", "", "Q", "K", "J"]
)
def test_to_command_ignores_other_keys(key):
    assert keys.to_command(key) is None


def test_interrupt_only_matches_ctrl_c():
    assert keys.is_interrupt("\x03")
    assert not keys.is_interrupt("c")
