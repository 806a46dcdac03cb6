"""Instrument panel rendering.

Every printer reads one or more keys out of a :class:`Snapshot` and writes a
fixed-width line to *out*. A printer whose value is missing, or has a shape it
cannot draw, writes nothing; the vehicle legitimately lacks many channels.
"""

from __future__ import annotations

import math
import sys
from typing import TextIO

from telemdash.fields import lookup, max_key
from telemdash.snapshot import Number, Snapshot

# ── Constants ──────────────────────────────────────────────────────────────

BAR_WIDTH = 40
BAR_FILL = "█"
BAR_EMPTY = "-"
STATUS_INDENT = " " * 20
NOT_INSTALLED = -1.0

TOGGLES = ("SAS", "RCS", "LGT", "BRK", "GEAR")
RESOURCES = (
    "Elec", "Kero", "LOX", "Hydra", "Aero", "NTO",
    "MMH", "UDMH", "Xen", "Mono", "Solid",
)


# ── Formatting helpers ─────────────────────────────────────────────────────


def fmt_duration(seconds: float) -> str:
    """``T+0d 0h 02m 05s`` style mission clock.

    Every component wraps, days included: a 25 day burn reads as 1d.
    """
    pre = "T+"
    if seconds < 0:
        pre = "T-"
        seconds = -seconds
    s = math.fmod(seconds, 60)
    m = math.fmod(seconds / 60, 60)
    h = math.fmod(seconds / 60 / 60, 24)
    d = math.fmod(seconds / 60 / 60 / 24, 24)
    return f"{pre} {int(d)}d {int(h)}h {int(m):02d}m {int(s):02d}s"


def fmt_distance(meters: float) -> str:
    """Scale to m, km or Mm keeping the sign."""
    v = meters
    unit = "m"
    if abs(v) > 1_000_000:
        v /= 1_000_000
        unit = "Mm"
    elif abs(v) > 1000:
        v /= 1000
        unit = "km"
    return f"{v:10.2f} {unit}"


def draw_bar(v: float, vmax: float) -> str:
    # Filled and empty cells are rounded independently; the total can be 39.
    filled = BAR_WIDTH * (v / vmax)
    empty = BAR_WIDTH * (1 - v / vmax)
    if not (math.isfinite(filled) and math.isfinite(empty)):
        return ""
    ful = min(math.ceil(filled), BAR_WIDTH)
    emp = min(math.floor(empty), BAR_WIDTH)
    return BAR_FILL * ful + BAR_EMPTY * emp


def _with_unit(text: str, unit: str) -> str:
    return f"{text} {unit}" if unit else text


# ── Printers ───────────────────────────────────────────────────────────────


def print_time(snap: Snapshot, key: str, out: TextIO = sys.stdout) -> None:
    v = snap.number(key)
    if v is None:
        return
    out.write(f"{lookup(key).label:>20s}  {fmt_duration(v)}\n")


def print_value(snap: Snapshot, key: str, out: TextIO = sys.stdout) -> None:
    """Label, two-decimal value and unit.

    Only absence skips the line; a value of another shape is shown as-is.
    """
    value = snap.get(key)
    if value is None:
        return
    spec = lookup(key)
    if isinstance(value, Number):
        text = f"{value.value:10.2f}"
    else:
        text = f"{value.value!s:>10s}"
    out.write(_with_unit(f"{spec.label:>20s} {text}", spec.unit) + "\n")


def print_distance(snap: Snapshot, key: str, out: TextIO = sys.stdout) -> None:
    v = snap.number(key)
    if v is None:
        return
    out.write(f"{lookup(key).label:>20s} {fmt_distance(v)}\n")


def resource_capacity(snap: Snapshot, key: str) -> float:
    """Capacity for a resource, 1.0 when unknown."""
    if not lookup(key).has_capacity:
        return 1.0
    vmax = snap.number(max_key(key))
    if vmax is None or vmax == 0:
        return 1.0
    return vmax


def print_resource(snap: Snapshot, key: str, out: TextIO = sys.stdout) -> None:
    v = snap.number(key)
    if v is None or v == NOT_INSTALLED:
        return
    spec = lookup(key)
    vmax = resource_capacity(snap, key)
    pct = 100 * (v / vmax)
    out.write(
        f"{spec.label:>20s} {v:10.2f} {spec.unit:>3s}  {pct:6.2f}%  "
        f"{draw_bar(v, vmax)}\n"
    )


def print_percent(snap: Snapshot, key: str, out: TextIO = sys.stdout) -> None:
    v = snap.number(key)
    if v is None or not math.isfinite(v * 100):
        return
    out.write(f"{lookup(key).label:>20s} {int(v * 100)}%\n")


def print_bool(snap: Snapshot, key: str, out: TextIO = sys.stdout) -> None:
    b = snap.flag(key)
    if b is None:
        return
    label = lookup(key).label
    out.write(f"[{label}]" if b else f" {label} ")


def print_orient(snap: Snapshot, out: TextIO = sys.stdout) -> None:
    """Heading/pitch/roll and angle to prograde, all four or nothing."""
    h = snap.number("H")
    p = snap.number("P")
    r = snap.number("R")
    ang = snap.number("ToPro")
    if h is None or p is None or r is None or ang is None:
        return
    out.write(f"{'h p r':>20s} {h: 07.2f}° {p: 07.2f}° {r: 07.2f}°\n")
    out.write(f"{'Ang to prograde':>20s} {ang: 07.2f}°\n")


# ── Panel ──────────────────────────────────────────────────────────────────


def render_panel(snap: Snapshot, out: TextIO = sys.stdout) -> None:
    """Draw the whole instrument panel in its fixed layout."""
    # Mission clock
    print_time(snap, "T", out)
    out.write("\n")

    # Stage and switches
    print_value(snap, "St", out)
    out.write(STATUS_INDENT)
    for key in TOGGLES:
        print_bool(snap, key, out)
    out.write("\n")

    # Flight
    print_percent(snap, "Throt", out)
    print_orient(snap, out)
    print_value(snap, "Vel", out)
    print_value(snap, "OVel", out)
    print_value(snap, "G", out)
    print_distance(snap, "Alt", out)
    print_value(snap, "Atm", out)
    print_value(snap, "Q", out)
    out.write("\n")

    # Orbit
    print_distance(snap, "Ap", out)
    print_distance(snap, "Pe", out)
    print_time(snap, "TTAp", out)
    print_time(snap, "TTPe", out)
    print_value(snap, "Incl", out)
    print_value(snap, "Ecc", out)
    out.write("\n")

    # Propellant
    for key in RESOURCES:
        print_resource(snap, key, out)
