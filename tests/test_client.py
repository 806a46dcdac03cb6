"""Tests for telemdash.client."""

from __future__ import annotations

from types import MappingProxyType
from unittest.mock import MagicMock, patch

import pytest
import requests

from telemdash.client import (
    DecodeError,
    TransportError,
    build_query,
    build_url,
    decode_snapshot,
    fetch,
)
from telemdash.fields import FIELDS, FieldSpec
from telemdash.snapshot import Flag, Number, Raw

# ── build_query ────────────────────────────────────────────────────────────


class TestBuildQuery:
    def test_one_pair_per_plain_field(self) -> None:
        fields = MappingProxyType({"Alt": FieldSpec("Alt", "v.altitude", "", "Alt", "")})
        assert build_query(fields) == [("Alt", "v.altitude")]

    def test_capacity_field_adds_max_pair(self) -> None:
        fields = MappingProxyType(
            {"LOX": FieldSpec("LOX", "r.resource[LqdOxygen]", "r.resourceMax[LqdOxygen]", "LOX", "L")}
        )
        assert build_query(fields) == [
            ("LOX", "r.resource[LqdOxygen]"),
            ("LOXmax", "r.resourceMax[LqdOxygen]"),
        ]

    def test_full_registry(self) -> None:
        query = dict(build_query())
        capacity = [k for k, s in FIELDS.items() if s.has_capacity]
        assert len(query) == len(FIELDS) + len(capacity)
        assert query["T"] == "v.missionTime"
        assert query["Elecmax"] == "r.resourceMax[ElectricCharge]"
        assert "Altmax" not in query

    def test_deterministic(self) -> None:
        assert build_query() == build_query()


class TestBuildUrl:
    def test_paths_sent_verbatim(self) -> None:
        url = build_url(
            "http://localhost:80/telemachus/datalink",
            [("Alt", "v.altitude"), ("Mono", "r.resource[MonoPropellant]")],
        )
        assert url == (
            "http://localhost:80/telemachus/datalink"
            "?Alt=v.altitude&Mono=r.resource[MonoPropellant]"
        )


# ── fetch ──────────────────────────────────────────────────────────────────


class TestFetch:
    @patch("telemdash.client.requests.get")
    def test_returns_body(self, mock_get: MagicMock) -> None:
        mock_get.return_value = MagicMock(status_code=200, content=b'{"Alt": 1}')
        assert fetch("http://x/", 2.0) == b'{"Alt": 1}'
        mock_get.assert_called_once_with("http://x/", timeout=2.0)

    @patch("telemdash.client.requests.get", side_effect=requests.ConnectionError("refused"))
    def test_connection_refused(self, mock_get: MagicMock) -> None:
        with pytest.raises(TransportError, match="refused"):
            fetch("http://x/", 2.0)

    @patch("telemdash.client.requests.get", side_effect=requests.Timeout("slow"))
    def test_timeout_is_transport_error(self, mock_get: MagicMock) -> None:
        with pytest.raises(TransportError):
            fetch("http://x/", 0.1)

    @patch("telemdash.client.requests.get")
    def test_error_status_still_returns_body(self, mock_get: MagicMock) -> None:
        mock_get.return_value = MagicMock(status_code=404, content=b"<html>")
        assert fetch("http://x/", 2.0) == b"<html>"


# ── decode_snapshot ────────────────────────────────────────────────────────


class TestDecodeSnapshot:
    def test_value_kinds(self) -> None:
        snap = decode_snapshot(b'{"Alt": 1200.5, "St": 3, "SAS": true, "Name": "Kerbal X"}')
        assert snap.get("Alt") == Number(1200.5)
        assert snap.get("St") == Number(3.0)
        assert snap.get("SAS") == Flag(True)
        assert snap.get("Name") == Raw("Kerbal X")

    def test_missing_keys_absent(self) -> None:
        snap = decode_snapshot(b'{"Alt": 1}')
        assert "Pe" not in snap
        assert snap.get("Pe") is None

    def test_empty_object(self) -> None:
        assert len(decode_snapshot(b"{}")) == 0

    @pytest.mark.parametrize("body", [b"", b"not json", b'{"Alt": ', b"\xff\xfe"])
    def test_invalid_body(self, body: bytes) -> None:
        with pytest.raises(DecodeError):
            decode_snapshot(body)

    @pytest.mark.parametrize("body", [b"[1, 2]", b"42", b'"x"', b"null"])
    def test_not_an_object(self, body: bytes) -> None:
        with pytest.raises(DecodeError, match="expected a JSON object"):
            decode_snapshot(body)

    @pytest.mark.parametrize(
        ("body", "key"),
        [
            (b'{"T": 1e400}', "T"),
            (b'{"Throt": NaN}', "Throt"),
            (b'{"Elec": -Infinity}', "Elec"),
            (b'{"St": ' + b"9" * 400 + b"}", "St"),
        ],
    )
    def test_unrepresentable_numbers_are_not_numbers(self, body: bytes, key: str) -> None:
        snap = decode_snapshot(body)
        assert key in snap
        assert snap.number(key) is None
        assert isinstance(snap.get(key), Raw)
