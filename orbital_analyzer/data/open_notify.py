"""
ISS position fetcher (Open-Notify `iss-now.json`).

Response shape:
    {"message": "success", "timestamp": 1700000000,
     "iss_position": {"latitude": "12.3456", "longitude": "-45.6789"}}

Coordinates arrive as strings. Anything missing or unparsable raises TelemetryError;
nothing is defaulted to 0.
"""

from __future__ import annotations

import json
import logging
import time
from typing import Any, Optional

import requests

from orbital_analyzer.config.settings import (
    OPEN_NOTIFY_URL,
    HTTP_TIMEOUT_SEC,
    HTTP_RETRIES,
    HTTP_BACKOFF_SEC,
    USER_AGENT,
)
from orbital_analyzer.models.sample import GeoSample

logger = logging.getLogger(__name__)


class TelemetryError(RuntimeError):
    """Upstream telemetry could not be fetched or parsed into a GeoSample."""


# -----------------------
# Parsing
# -----------------------
def _coordinate(pos: dict, key: str) -> float:
    raw = pos.get(key)
    if raw is None or isinstance(raw, bool):
        raise TelemetryError(f"iss_position.{key} missing")
    try:
        return float(raw)
    except (TypeError, ValueError) as e:
        raise TelemetryError(f"iss_position.{key} not a number: {raw!r}") from e


def parse_iss_now(payload: Any) -> GeoSample:
    if not isinstance(payload, dict):
        raise TelemetryError("response is not a JSON object")

    message = payload.get("message")
    if message is not None and message != "success":
        raise TelemetryError(f"source reported failure: {message!r}")

    pos = payload.get("iss_position")
    if not isinstance(pos, dict):
        raise TelemetryError("iss_position missing")

    ts = payload.get("timestamp")
    if isinstance(ts, bool) or not isinstance(ts, int):
        raise TelemetryError(f"timestamp missing or not an integer: {ts!r}")

    lat = _coordinate(pos, "latitude")
    lon = _coordinate(pos, "longitude")

    try:
        return GeoSample(latitude=lat, longitude=lon, timestamp=ts)
    except ValueError as e:
        raise TelemetryError(f"invalid position: {e}") from e


# -----------------------
# Fetch (retry + backoff)
# -----------------------
def fetch_iss_position(
    session: Optional[requests.Session] = None,
    url: str = OPEN_NOTIFY_URL,
    timeout: float = HTTP_TIMEOUT_SEC,
    retries: int = HTTP_RETRIES,
    backoff: float = HTTP_BACKOFF_SEC,
) -> GeoSample:
    """
    GET the current ISS position.
    Network/HTTP errors are retried; a malformed payload is not (the next poll will try again).
    Raises TelemetryError when the source is unusable.
    """
    if session is None:
        session = requests.Session()
        session.headers.update({"User-Agent": USER_AGENT, "Accept": "application/json"})

    last_exc: Optional[Exception] = None
    for attempt in range(1, int(retries) + 1):
        try:
            resp = session.get(url, timeout=timeout)
            resp.raise_for_status()
            payload = resp.json()
        except requests.HTTPError as he:
            last_exc = he
            status = he.response.status_code if he.response is not None else None
            logger.warning("Open-Notify HTTP error %s (attempt %d/%d)", status, attempt, retries)
        except (requests.exceptions.JSONDecodeError, json.JSONDecodeError) as e:
            raise TelemetryError(f"Open-Notify returned non-JSON content: {e}") from e
        except requests.RequestException as e:
            last_exc = e
            logger.warning("Open-Notify request failed (attempt %d/%d): %s", attempt, retries, e)
        else:
            return parse_iss_now(payload)

        if attempt < retries:
            time.sleep(backoff * attempt)

    raise TelemetryError(f"Open-Notify unavailable after {retries} attempt(s): {last_exc}") from last_exc


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    try:
        print(fetch_iss_position())
    except TelemetryError as e:
        print("Fetch failed:", e)
