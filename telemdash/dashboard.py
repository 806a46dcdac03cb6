"""Live flight telemetry panel for the terminal.

Polls the simulator's datalink over HTTP and redraws a plain-text instrument
panel (mission clock, switches, attitude, orbit, propellant) every tick.
Nothing is ever sent back to the vehicle.

Usage:
    uv run telemdash
    uv run telemdash --host 192.168.1.20 --port 8085 --interval 0.5
"""

from __future__ import annotations

import argparse
import enum
import io
import logging
import sys
import time
from pathlib import Path
from typing import Any, TextIO

from telemdash.client import (
    DecodeError,
    TransportError,
    build_query,
    build_url,
    decode_snapshot,
    fetch,
)
from telemdash.config import apply_overrides, base_url, dump_default_config, load_config
from telemdash.logging import configure_logging
from telemdash.render import render_panel

LOGGER = logging.getLogger(__name__)

CLEAR = "\033[H\033[2J"
NO_SIGNAL = "no signal"


class PollState(enum.Enum):
    POLLING = "polling"
    NO_SIGNAL = "no_signal"


# ── One refresh cycle ──────────────────────────────────────────────────────


def _show(out: TextIO, text: str) -> None:
    out.write(CLEAR + text)
    out.flush()


def poll_once(url: str, timeout: float, out: TextIO = sys.stdout) -> PollState:
    """Fetch, decode and draw one frame.

    The frame is rendered off-screen first and written together with the
    clear sequence, so nothing from the previous frame survives.
    """
    try:
        snap = decode_snapshot(fetch(url, timeout))
    except TransportError as e:
        LOGGER.debug("transport failure: %s", e)
        _show(out, NO_SIGNAL + "\n")
        return PollState.NO_SIGNAL
    except DecodeError as e:
        LOGGER.debug("decode failure: %s", e)
        _show(out, f"{e}\n")
        return PollState.NO_SIGNAL

    frame = io.StringIO()
    render_panel(snap, frame)
    _show(out, frame.getvalue())
    return PollState.POLLING


def run(config: dict[str, Any], out: TextIO = sys.stdout, cycles: int | None = None) -> None:
    """Poll forever, or for *cycles* iterations when given."""
    url = build_url(base_url(config), build_query())
    interval = float(config["interval"])
    timeout = float(config["timeout"])
    LOGGER.info("polling %s every %.3fs", base_url(config), interval)
    LOGGER.debug("request url: %s", url)

    state = PollState.POLLING
    done = 0
    while cycles is None or done < cycles:
        new_state = poll_once(url, timeout, out)
        if new_state is not state:
            LOGGER.info("datalink %s -> %s", state.value, new_state.value)
            state = new_state
        done += 1
        time.sleep(interval)


# ── CLI entry point ────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Live flight telemetry panel fed by the simulator datalink.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        metavar="PATH",
        help="Path to TOML config file",
    )
    parser.add_argument("--host", default=None, help="Datalink host")
    parser.add_argument("--port", type=int, default=None, help="Datalink port")
    parser.add_argument(
        "--interval",
        type=float,
        default=None,
        help="Seconds between refreshes (default: 0.05)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Seconds before a request counts as no signal (default: 2.0)",
    )
    parser.add_argument(
        "--once", action="store_true",
        help="Draw a single frame and exit",
    )
    parser.add_argument(
        "--dump-config", action="store_true",
        help="Print the default configuration as TOML and exit",
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--log-file", type=Path, default=None, metavar="PATH",
        help="Write log records to this file instead of stderr",
    )
    args = parser.parse_args(argv)

    if args.dump_config:
        print(dump_default_config(), end="")
        return

    configure_logging(args.log_level, log_path=args.log_file)
    config = apply_overrides(
        load_config(args.config),
        host=args.host,
        port=args.port,
        interval=args.interval,
        timeout=args.timeout,
    )

    try:
        run(config, cycles=1 if args.once else None)
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    main()
