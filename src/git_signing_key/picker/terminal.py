"""Terminal surfaces the picker draws on and reads keys from.

``TerminalSurface`` is the contract the selector loop depends on;
``RichTerminal`` is the real implementation built on Rich.Live for
flicker-free in-place redraws and readchar for raw key reads.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, Protocol, TextIO

import readchar
from rich.console import Console, RenderableType
from rich.live import Live
from rich.text import Text

from ..types import KeyEvent
from .errors import TerminalIOError

if sys.platform != "win32":
    import termios
    import tty

logger = logging.getLogger(__name__)


class TerminalSurface(Protocol):
    """Anything the picker can render to and read key events from."""

    def enter(self) -> None:
        """Claim the terminal (raw input, hidden cursor, render region)."""
        ...

    def leave(self) -> None:
        """Give the terminal back in the mode it was found in."""
        ...

    def render(self, renderable: RenderableType) -> None:
        """Redraw the block in place."""
        ...

    def read_event(self) -> KeyEvent:
        """Block until the next key event."""
        ...

    def clear(self) -> None:
        """Erase the rendered block."""
        ...


class RichTerminal:
    """TerminalSurface backed by Rich.Live and readchar.

    The live region is transient, so it is erased when the surface is left
    and never scrolls the surrounding output. From ``enter()`` to ``leave()``
    stdin is held in cbreak mode with echo off, so keys typed during a redraw
    are never echoed into the list; readchar's per-read raw switch restores
    back to that mode. A Ctrl+C arrives as a ``KeyboardInterrupt`` which is
    turned back into a key event.

    Args:
        console: Rich Console to draw on (auto-created if not provided).
        stdin: Input stream whose tty mode is held (defaults to sys.stdin).
    """

    def __init__(self, console: Console | None = None, stdin: TextIO | None = None):
        self.console = console or Console()
        self.stdin = stdin if stdin is not None else sys.stdin
        self._live: Live | None = None
        self._saved_tty: list[Any] | None = None

    @property
    def active(self) -> bool:
        return self._live is not None

    def _stdin_is_tty(self) -> bool:
        if sys.platform == "win32":
            return False
        try:
            return self.stdin.isatty()
        except (AttributeError, ValueError):
            return False

    def _acquire_tty(self) -> None:
        """Save stdin's tty attributes and switch it to cbreak, no echo."""
        if self._saved_tty is not None or not self._stdin_is_tty():
            return
        try:
            fd = self.stdin.fileno()
            saved = termios.tcgetattr(fd)
            tty.setcbreak(fd)
        except (termios.error, OSError) as exc:
            raise TerminalIOError("enter", exc) from exc
        self._saved_tty = saved
        logger.debug("stdin switched to cbreak mode")

    def _restore_tty(self) -> None:
        """Put back the attributes saved by _acquire_tty, at most once."""
        saved, self._saved_tty = self._saved_tty, None
        if saved is None:
            return
        try:
            termios.tcsetattr(self.stdin.fileno(), termios.TCSADRAIN, saved)
        except (termios.error, OSError) as exc:
            raise TerminalIOError("leave", exc) from exc
        logger.debug("stdin mode restored")

    def enter(self) -> None:
        if self._live is not None:
            return
        self._acquire_tty()
        live = Live(
            Text(""),
            console=self.console,
            auto_refresh=False,
            transient=True,
        )
        try:
            live.start()
        except OSError as exc:
            raise TerminalIOError("enter", exc) from exc
        self._live = live

    def leave(self) -> None:
        live, self._live = self._live, None
        try:
            if live is not None:
                live.stop()
        except OSError as exc:
            raise TerminalIOError("leave", exc) from exc
        finally:
            self._restore_tty()

    def render(self, renderable: RenderableType) -> None:
        if self._live is None:
            raise TerminalIOError("render")
        try:
            self._live.update(renderable, refresh=True)
        except OSError as exc:
            raise TerminalIOError("render", exc) from exc

    def read_event(self) -> KeyEvent:
        try:
            key = readchar.readkey()
        except KeyboardInterrupt:
            logger.debug("Ctrl+C while reading key")
            return KeyEvent(readchar.key.CTRL_C)
        except OSError as exc:
            raise TerminalIOError("read", exc) from exc
        return KeyEvent(key)

    def clear(self) -> None:
        if self._live is None:
            return
        try:
            self._live.update(Text(""), refresh=True)
        except OSError as exc:
            raise TerminalIOError("clear", exc) from exc
