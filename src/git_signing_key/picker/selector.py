"""Interactive single-select list for signing keys.

Example:
    from git_signing_key.picker import InteractiveSelector

    selector = InteractiveSelector(keys, current_identifier="ABCD1234EFGH5678")
    result = selector.show()
    if not result.is_cancelled:
        print(result.identifier)
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from rich.text import Text

from ..types import Command, KeyEvent, KeyRecord, SelectionResult, SessionState
from .errors import TerminalIOError
from .keys import to_command
from .state import SelectionState
from .terminal import RichTerminal, TerminalSurface
from .theme import DEFAULT_THEME, Theme

logger = logging.getLogger(__name__)


def _call_surface(operation: str, func, *args):
    """Call a surface method, reporting OS-level failures as TerminalIOError."""
    try:
        return func(*args)
    except OSError as exc:
        raise TerminalIOError(operation, exc) from exc


class InteractiveSelector:
    """Inline key list with keyboard navigation.

    Draws one line per key, redrawn in place, and blocks until the user
    confirms or cancels. The terminal is always cleared and released when
    the session ends, however it ends.

    Keyboard controls:
        - Up/Down or k/j: Navigate (wraps around)
        - Enter: Choose the highlighted key
        - q or Ctrl+C: Cancel

    Args:
        entries: Keys to choose from, in display order.
        current_identifier: Identifier of the configured key, marked in the list.
        terminal: Surface to draw on (RichTerminal if not provided).
        theme: Visual theme for styling.

    Raises:
        EmptyInputError: If ``entries`` is empty. Nothing is drawn.
    """

    def __init__(
        self,
        entries: Sequence[KeyRecord],
        current_identifier: str | None = None,
        terminal: TerminalSurface | None = None,
        theme: Theme | None = None,
    ):
        self.state = SelectionState(entries, current_identifier)
        self.terminal = terminal if terminal is not None else RichTerminal()
        self.theme = theme or DEFAULT_THEME
        self.session_state = SessionState.ACTIVE

    def _render_line(self, index: int, entry: KeyRecord) -> Text:
        is_highlighted = self.state.is_highlighted(index)
        if is_highlighted:
            prefix = self.theme.cursor_icon
        else:
            prefix = " " * len(self.theme.cursor_icon)

        line = Text(prefix, no_wrap=True, overflow="ellipsis")
        line.append(entry.identifier)
        if entry.label:
            line.append(" ")
            line.append(entry.label, style=self.theme.label_style)
        if self.state.is_currently_configured(index):
            line.append(self.theme.current_marker, style=self.theme.current_style)
        if is_highlighted:
            line.stylize(self.theme.highlight_style)
        return line

    def render(self) -> Text:
        """Render the list as a Rich Text block, one line per entry.

        Lines never wrap; long ones are cut with an ellipsis so the block
        is always exactly as tall as the entry list.
        """
        lines = [self._render_line(i, entry) for i, entry in enumerate(self.state.entries)]
        return Text("\n", no_wrap=True, overflow="ellipsis").join(lines)

    def dispatch(self, command: Command) -> None:
        """Apply a command to an active session."""
        if self.session_state.is_terminal:
            return
        if command == Command.CONFIRM:
            self.session_state = SessionState.CONFIRMED
        elif command == Command.CANCEL:
            self.session_state = SessionState.CANCELLED
        else:
            self.state.apply(command)

    def _handle_event(self, event: KeyEvent) -> None:
        """Translate a key press into a command; everything else is ignored."""
        if not event.is_press:
            return
        command = to_command(event.key)
        if command is None:
            return
        logger.debug(f"Key {event.key!r} -> {command}")
        self.dispatch(command)

    def result(self) -> SelectionResult:
        """Outcome of a finished session."""
        if self.session_state == SessionState.CONFIRMED:
            return SelectionResult.selected(self.state.current_highlight().identifier)
        if self.session_state == SessionState.CANCELLED:
            return SelectionResult.cancelled()
        raise RuntimeError("Selection session is still active")

    def show(self) -> SelectionResult:
        """Display the list and block until the user chooses or cancels.

        Returns:
            ``SelectionResult.selected(identifier)`` on Enter,
            ``SelectionResult.cancelled()`` on q / Ctrl+C.

        Raises:
            TerminalIOError: If the terminal fails; it is restored first.
        """
        if self.session_state.is_terminal:
            return self.result()

        try:
            _call_surface("enter", self.terminal.enter)
            while not self.session_state.is_terminal:
                _call_surface("render", self.terminal.render, self.render())
                try:
                    event = _call_surface("read", self.terminal.read_event)
                except KeyboardInterrupt:
                    self.dispatch(Command.CANCEL)
                    continue
                self._handle_event(event)
        finally:
            try:
                _call_surface("clear", self.terminal.clear)
            finally:
                _call_surface("leave", self.terminal.leave)

        return self.result()


def select_key(
    entries: Sequence[KeyRecord],
    current_identifier: str | None = None,
    terminal: TerminalSurface | None = None,
    theme: Theme | None = None,
) -> SelectionResult:
    """Run one picker session and return its result."""
    return InteractiveSelector(entries, current_identifier, terminal=terminal, theme=theme).show()
