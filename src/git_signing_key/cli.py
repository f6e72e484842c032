"""Command-line entry point for git-signing-key.

Lists secret keys with gpg, shows the picker, and writes the chosen key to
git's ``user.signingkey``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from . import __version__, config
from .errors import SigningKeyError
from .git_config import SIGNING_KEY, ConfigStore, GitConfigStore
from .gpg import GpgKeyProvider, KeyProvider
from .picker import TerminalIOError, TerminalSurface, select_key
from .types import Scope

logger = logging.getLogger(__name__)

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="git-signing-key",
        description="Interactively select a GPG signing key for git commits",
    )
    parser.add_argument(
        "--version", action="version", version=f"git-signing-key {__version__}"
    )
    parser.add_argument(
        "--global",
        dest="global_scope",
        action="store_true",
        help="Set signing key in global git config instead of local",
    )
    parser.add_argument(
        "--local",
        dest="local_scope",
        action="store_true",
        help="Set signing key in local git config (default)",
    )
    parser.add_argument("--debug", action="store_true", help="Log gpg/git calls to stderr")
    return parser


def resolve_scope(args: argparse.Namespace, cfg: dict[str, Any]) -> Scope:
    """Pick the target scope; --local wins over --global."""
    if args.local_scope:
        return Scope.LOCAL
    if args.global_scope:
        return Scope.GLOBAL
    return config.get_default_scope(cfg)


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_time=False, show_path=False)],
        force=True,
    )


def run(
    args: argparse.Namespace,
    cfg: dict[str, Any],
    provider: KeyProvider | None = None,
    store: ConfigStore | None = None,
    terminal: TerminalSurface | None = None,
) -> int:
    """List keys, run the picker and store the choice. Returns an exit code."""
    scope = resolve_scope(args, cfg)
    if store is None:
        store = GitConfigStore(scope)
    if provider is None:
        provider = GpgKeyProvider(config.get_gpg_program(cfg, store))

    keys = provider.list_keys()
    if not keys:
        err_console.print("No GPG secret keys found.")
        return 0

    current = store.get(SIGNING_KEY)
    logger.debug(f"Current {scope} {SIGNING_KEY}: {current}")

    result = select_key(keys, current, terminal=terminal, theme=config.get_theme(cfg))
    if result.is_cancelled:
        console.print("Cancelled.")
        return 0

    store.set(SIGNING_KEY, result.identifier)
    console.print(f"Set {scope} {SIGNING_KEY} to [bold]{escape(result.identifier)}[/bold]")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    cfg = config.load_config()
    configure_logging(args.debug or config.is_debug(cfg))

    try:
        return run(args, cfg)
    except (SigningKeyError, TerminalIOError) as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
        return 1
    except KeyboardInterrupt:
        print()
        return 130
