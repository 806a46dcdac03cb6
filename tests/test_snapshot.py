"""Tests for telemdash.snapshot."""

from __future__ import annotations

import pytest

from telemdash.snapshot import Flag, Number, Raw, Snapshot, wrap


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (1.5, Number(1.5)),
        (3, Number(3.0)),
        (True, Flag(True)),
        (False, Flag(False)),
        ("Kerbal X", Raw("Kerbal X")),
        (None, Raw(None)),
    ],
)
def test_wrap(raw: object, expected: object) -> None:
    assert wrap(raw) == expected


def test_bool_is_not_a_number() -> None:
    snap = Snapshot.from_json({"SAS": True})
    assert snap.number("SAS") is None
    assert snap.flag("SAS") is True


def test_number_is_not_a_flag() -> None:
    snap = Snapshot.from_json({"Alt": 0})
    assert snap.flag("Alt") is None
    assert snap.number("Alt") == 0.0


def test_absent_key() -> None:
    snap = Snapshot()
    assert snap.get("Alt") is None
    assert snap.number("Alt") is None
    assert snap.flag("Alt") is None
    assert "Alt" not in snap


def test_mapping_protocol() -> None:
    snap = Snapshot.from_json({"Alt": 1, "SAS": False})
    assert len(snap) == 2
    assert sorted(snap) == ["Alt", "SAS"]


def test_snapshot_is_detached_from_source() -> None:
    source = {"Alt": Number(1.0)}
    snap = Snapshot(source)
    source["Pe"] = Number(2.0)
    assert "Pe" not in snap


@pytest.mark.parametrize("raw", [float("inf"), float("-inf"), float("nan"), 10**400])
def test_wrap_unrepresentable_number(raw: object) -> None:
    assert isinstance(wrap(raw), Raw)
