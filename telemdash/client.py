"""Datalink client: query construction, HTTP transport and decoding."""

from __future__ import annotations

import json
import logging
from typing import Mapping

import requests

from telemdash.fields import FIELDS, FieldSpec, max_key
from telemdash.snapshot import Snapshot

LOGGER = logging.getLogger(__name__)


class TelemetryError(Exception):
    """Base class for failures of a single poll cycle."""


class TransportError(TelemetryError):
    """The datalink could not be reached or the request failed outright."""


class DecodeError(TelemetryError):
    """The response body is not a JSON object."""


# ── Query ──────────────────────────────────────────────────────────────────


def build_query(fields: Mapping[str, FieldSpec] = FIELDS) -> list[tuple[str, str]]:
    """Return ``(key, remote path)`` pairs for every registered field.

    Fields with a capacity counterpart contribute a second pair under
    ``key + "max"``.
    """
    pairs: list[tuple[str, str]] = []
    for key, spec in fields.items():
        pairs.append((key, spec.remote_path))
        if spec.has_capacity:
            pairs.append((max_key(key), spec.remote_max_path))
    return pairs


def build_url(base_url: str, query: list[tuple[str, str]]) -> str:
    # Locators go out verbatim; the datalink expects r.resource[Name] as-is.
    return base_url + "?" + "&".join(f"{k}={path}" for k, path in query)


# ── Transport ──────────────────────────────────────────────────────────────


def fetch(url: str, timeout: float) -> bytes:
    """GET *url* and return the raw body.

    Raises:
        TransportError: On connection failure, timeout or a broken read.
    """
    try:
        resp = requests.get(url, timeout=timeout)
        body = resp.content
    except requests.RequestException as e:
        raise TransportError(str(e)) from e
    LOGGER.debug("datalink answered %s with %d bytes", resp.status_code, len(body))
    return body


# ── Decoding ───────────────────────────────────────────────────────────────


def decode_snapshot(body: bytes) -> Snapshot:
    """Parse a datalink response into a :class:`Snapshot`.

    Raises:
        DecodeError: If the body is not valid JSON or not a JSON object.
    """
    try:
        payload = json.loads(body)
    except ValueError as e:
        raise DecodeError(str(e)) from e
    if not isinstance(payload, dict):
        raise DecodeError(f"expected a JSON object, got {type(payload).__name__}")
    return Snapshot.from_json(payload)
