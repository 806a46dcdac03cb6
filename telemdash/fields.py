"""Registry of telemetry channels requested from the datalink.

Each entry maps a short field key (used in the query string and in the
decoded snapshot) to the locator the simulator understands, plus the label
and unit shown on the panel.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

MAX_SUFFIX = "max"


@dataclass(frozen=True)
class FieldSpec:
    key: str
    remote_path: str
    remote_max_path: str
    label: str
    unit: str

    @property
    def has_capacity(self) -> bool:
        return self.remote_max_path != ""


def max_key(key: str) -> str:
    """Snapshot key holding the capacity counterpart of *key*."""
    return key + MAX_SUFFIX


def _resource(key: str, name: str, label: str, unit: str) -> FieldSpec:
    return FieldSpec(key, f"r.resource[{name}]", f"r.resourceMax[{name}]", label, unit)


# ── Channel table ──────────────────────────────────────────────────────────

_TABLE: tuple[FieldSpec, ...] = (
    FieldSpec("Name",  "v.name",               "", "Name",             ""),
    FieldSpec("Throt", "f.throttle",           "", "Throttle",         ""),
    FieldSpec("H",     "n.heading",            "", "Heading",          "°"),
    FieldSpec("P",     "n.pitch",              "", "Pitch",            "°"),
    FieldSpec("R",     "n.roll",               "", "Roll",             "°"),
    FieldSpec("ToPro", "v.angleToPrograde",    "", "ToPrograde",       "°"),
    FieldSpec("Vel",   "v.surfaceVelocity",    "", "Surface velocity", "m/s"),
    FieldSpec("OVel",  "v.orbitalVelocity",    "", "Orbital velocity", "m/s"),
    FieldSpec("G",     "v.geeForce",           "", "Gee",              "G"),
    FieldSpec("Atm",   "v.atmosphericDensity", "", "Atmos density",    ""),
    FieldSpec("Q",     "v.dynamicPressure",    "", "Q",                ""),
    FieldSpec("Alt",   "v.altitude",           "", "Radar altitude",   ""),
    FieldSpec("Pe",    "o.PeA",                "", "Pe",               ""),
    FieldSpec("Ap",    "o.ApA",                "", "Ap",               ""),
    FieldSpec("TTPe",  "o.timeToPe",           "", "Time to Pe",       ""),
    FieldSpec("TTAp",  "o.timeToAp",           "", "Time to Ap",       ""),
    FieldSpec("Incl",  "o.inclination",        "", "Inclination",      "°"),
    FieldSpec("Ecc",   "o.eccentricity",       "", "Eccentricity",     ""),
    FieldSpec("St",    "mj.node",              "", "Stage",            ""),
    # Toggles
    FieldSpec("SAS",   "v.sasValue",           "", "SAS",              ""),
    FieldSpec("RCS",   "v.rcsValue",           "", "RCS",              ""),
    FieldSpec("LGT",   "v.lightValue",         "", "LIGHT",            ""),
    FieldSpec("BRK",   "v.brakeValue",         "", "BRK",              ""),
    FieldSpec("GEAR",  "v.gearValue",          "", "GEAR",             ""),
    # Resources
    _resource("Kero",  "Kerosene",       "Kerosene",        "L"),
    _resource("LOX",   "LqdOxygen",      "Liquid oxygen",   "L"),
    _resource("Hydra", "Hydrazine",      "Hydrazine",       "L"),
    _resource("Aero",  "Aerozine50",     "Aerozine 50",     "L"),
    _resource("NTO",   "NTO",            "NTO",             "L"),
    _resource("MMH",   "MMH",            "MMH",             "L"),
    _resource("Xen",   "XenonGas",       "Xenon gas",       "L"),
    _resource("UDMH",  "UDMH",           "UDMH",            "L"),
    _resource("Mono",  "MonoPropellant", "Monopropellant",  "L"),
    _resource("Elec",  "ElectricCharge", "Electric charge", "Wh"),
    _resource("Solid", "SolidFuel",      "Solid fuel",      "kg"),
    # Mission clock
    FieldSpec("T",     "v.missionTime",        "", "Time",             ""),
)

FIELDS: Mapping[str, FieldSpec] = MappingProxyType({f.key: f for f in _TABLE})


def lookup(key: str) -> FieldSpec:
    return FIELDS[key]
