"""Rich.Live-based single-select picker for signing keys.

Example:
    from git_signing_key.picker import select_key
    from git_signing_key.types import KeyRecord

    result = select_key(
        [KeyRecord("AAAA1111BBBB2222", "Jane <jane@example.com>")],
        current_identifier=None,
    )
"""

from .errors import EmptyInputError, PickerError, TerminalIOError
from .keys import is_down, is_enter, is_exit, is_interrupt, is_up, to_command
from .selector import InteractiveSelector, select_key
from .state import SelectionState
from .terminal import RichTerminal, TerminalSurface
from .theme import DEFAULT_THEME, Theme

__all__ = [
    # Main classes
    "InteractiveSelector",
    "SelectionState",
    "select_key",
    # Terminal
    "TerminalSurface",
    "RichTerminal",
    # Errors
    "PickerError",
    "EmptyInputError",
    "TerminalIOError",
    # Theming
    "Theme",
    "DEFAULT_THEME",
    # Key helpers
    "is_enter",
    "is_exit",
    "is_interrupt",
    "is_up",
    "is_down",
    "to_command",
]
