"""Configuration loading for telemdash.

Loads settings from TOML config files with sensible defaults.
Search order: explicit --config path → ~/.config/telemdash/config.toml → defaults only.
"""

from __future__ import annotations

import sys
import tomllib
from pathlib import Path
from typing import Any

DEFAULT_CONFIG: dict[str, Any] = {
    "interval": 0.05,
    "timeout": 2.0,
    "server": {
        "host": "localhost",
        "port": 80,
        "path": "/telemachus/datalink",
    },
}

_DEFAULT_PATH = Path.home() / ".config" / "telemdash" / "config.toml"


def _deep_merge(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """Merge overlay into base. Nested dicts are merged at the first level only."""
    merged = {k: dict(v) if isinstance(v, dict) else v for k, v in base.items()}
    for key, value in overlay.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = {**merged[key], **value}
        else:
            merged[key] = value
    return merged


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load configuration, merging user TOML over defaults.

    Args:
        path: Explicit config file path (from --config). If None, tries the
              default location ~/.config/telemdash/config.toml.

    Returns:
        Merged configuration dict.

    Raises:
        SystemExit: If an explicit path doesn't exist or can't be parsed.
    """
    if path is not None:
        if not path.is_file():
            print(f"telemdash: config file not found: {path}", file=sys.stderr)
            raise SystemExit(1)
        try:
            user_config = tomllib.loads(path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            print(f"telemdash: invalid TOML in {path}: {e}", file=sys.stderr)
            raise SystemExit(1) from e
        return _deep_merge(DEFAULT_CONFIG, user_config)

    if _DEFAULT_PATH.is_file():
        try:
            user_config = tomllib.loads(_DEFAULT_PATH.read_text(encoding="utf-8"))
            return _deep_merge(DEFAULT_CONFIG, user_config)
        except tomllib.TOMLDecodeError:
            print(
                f"telemdash: warning: ignoring invalid TOML in {_DEFAULT_PATH}",
                file=sys.stderr,
            )

    return _deep_merge(DEFAULT_CONFIG, {})


def apply_overrides(
    config: dict[str, Any],
    *,
    host: str | None = None,
    port: int | None = None,
    interval: float | None = None,
    timeout: float | None = None,
) -> dict[str, Any]:
    """Return a copy of *config* with command-line values laid over it."""
    overlay: dict[str, Any] = {}
    server = {k: v for k, v in (("host", host), ("port", port)) if v is not None}
    if server:
        overlay["server"] = server
    if interval is not None:
        overlay["interval"] = interval
    if timeout is not None:
        overlay["timeout"] = timeout
    return _deep_merge(config, overlay)


def base_url(config: dict[str, Any]) -> str:
    server = config["server"]
    path = "/" + str(server["path"]).lstrip("/")
    return f"http://{server['host']}:{server['port']}{path}"


def dump_default_config() -> str:
    """Return the default configuration as a TOML string."""
    server = DEFAULT_CONFIG["server"]
    lines = [
        "# telemdash configuration",
        "# Place this file at ~/.config/telemdash/config.toml",
        "",
        "# Seconds to wait between refreshes",
        f"interval = {DEFAULT_CONFIG['interval']}",
        "# Seconds before an unanswered request counts as no signal",
        f"timeout = {DEFAULT_CONFIG['timeout']}",
        "",
        "[server]",
        f'host = "{server["host"]}"',
        f"port = {server['port']}",
        f'path = "{server["path"]}"',
    ]
    return "\n".join(lines) + "\n"
