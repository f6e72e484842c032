"""YAML configuration for git-signing-key.

Optional settings live in ``~/.config/git-signing-key/config.yaml``:

    scope: global          # default target when no flag is given
    gpg_program: gpg2      # binary used to list keys
    debug: false
    theme:
      cursor_icon: "› "
      current_marker: " (current)"

Environment variables take precedence over the file:
``GIT_SIGNING_KEY_GPG`` and ``GIT_SIGNING_KEY_DEBUG``.
"""

from __future__ import annotations

import copy
import logging
import os
from pathlib import Path
from typing import Any

import yaml

from .git_config import GPG_PROGRAM, ConfigStore
from .gpg import DEFAULT_GPG_PROGRAM
from .picker.theme import Theme
from .types import Scope

logger = logging.getLogger(__name__)

GPG_ENV = "GIT_SIGNING_KEY_GPG"
DEBUG_ENV = "GIT_SIGNING_KEY_DEBUG"

DEFAULT_CONFIG: dict[str, Any] = {
    "scope": "local",
    "gpg_program": None,
    "debug": False,
    "theme": {},
}


def get_config_dir() -> Path:
    """Get the git-signing-key config directory."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(xdg_config) / "git-signing-key"


def get_config_path() -> Path:
    """Get the path to the config file."""
    return get_config_dir() / "config.yaml"


def _deep_merge(base: dict, override: dict) -> dict:
    """Deep merge two dictionaries, with override taking precedence."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load the config file merged over defaults.

    A missing, unreadable or malformed file yields the defaults.
    """
    config_path = path or get_config_path()
    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        return copy.deepcopy(DEFAULT_CONFIG)
    except (yaml.YAMLError, OSError) as exc:
        logger.warning(f"Ignoring unreadable config {config_path}: {exc}")
        return copy.deepcopy(DEFAULT_CONFIG)

    if not isinstance(data, dict):
        return copy.deepcopy(DEFAULT_CONFIG)
    return _deep_merge(copy.deepcopy(DEFAULT_CONFIG), data)


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in ("1", "true", "yes", "on")


def is_debug(cfg: dict[str, Any]) -> bool:
    """Whether debug logging is requested by env or config."""
    return _env_flag(DEBUG_ENV) or bool(cfg.get("debug"))


def get_default_scope(cfg: dict[str, Any]) -> Scope:
    """Scope to use when neither --local nor --global is given."""
    raw = str(cfg.get("scope") or Scope.LOCAL.value).strip().lower()
    try:
        return Scope(raw)
    except ValueError:
        logger.warning(f"Unknown scope {raw!r} in config, using local")
        return Scope.LOCAL


def get_gpg_program(cfg: dict[str, Any], store: ConfigStore | None = None) -> str:
    """Resolve the gpg binary.

    Order: ``GIT_SIGNING_KEY_GPG``, config ``gpg_program``, git's own
    ``gpg.program`` setting, then plain ``gpg``.
    """
    env_program = os.environ.get(GPG_ENV, "").strip()
    if env_program:
        return env_program
    if cfg.get("gpg_program"):
        return str(cfg["gpg_program"])
    if store is not None:
        git_program = store.get(GPG_PROGRAM)
        if git_program:
            return git_program
    return DEFAULT_GPG_PROGRAM


def get_theme(cfg: dict[str, Any]) -> Theme:
    theme_cfg = cfg.get("theme")
    return Theme.from_config(theme_cfg if isinstance(theme_cfg, dict) else None)
