"""Shared test fixtures: canned Nominatim payloads and a fake HTTP session."""

import pytest
import requests

from src.geocoding import nominatim


class FakeResponse:
    def __init__(self, payload=None, status_code=200, json_error=None):
        self.payload = payload
        self.status_code = status_code
        self.json_error = json_error

    def json(self):
        if self.json_error is not None:
            raise self.json_error
        return self.payload


class FakeSession:
    """
    Stands in for requests.Session.

    Reverse calls are answered from `by_zoom` (zoom -> FakeResponse or
    exception), search calls from `search`. Every call is recorded.
    """

    def __init__(self, by_zoom=None, search=None, on_call=None):
        self.by_zoom = by_zoom or {}
        self.search = search
        self.on_call = on_call
        self.calls = []

    def get(self, url, params=None, headers=None, timeout=None):
        self.calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
        if self.on_call is not None:
            self.on_call(self)

        if url.endswith("/search"):
            answer = self.search
        else:
            answer = self.by_zoom.get(params["zoom"])

        if answer is None:
            return FakeResponse(status_code=404)
        if isinstance(answer, Exception):
            raise answer
        return answer


class ExplodingSession:
    """Fails the test if any request is made."""

    def get(self, *args, **kwargs):
        raise AssertionError("No network call expected")


# Kigali, Kimihurura: the detailed zoom has the sector but no usable district,
# the district-level zoom carries the county.
BUILDING_PAYLOAD = {
    "display_name": "KG 7 Avenue, Rugando, Kimihurura, Kigali, Rwanda",
    "address": {
        "road": "KG 7 Avenue",
        "quarter": "Rugando",
        "village": "Urugwiro",
        "suburb": "Kimihurura",
        "city": "Kigali",
        "country": "Rwanda",
        "country_code": "rw",
    },
    "boundingbox": ["-1.9510", "-1.9500", "30.0920", "30.0930"],
}

DISTRICT_PAYLOAD = {
    "display_name": "Kimihurura, Gasabo, Kigali City, Rwanda",
    "address": {
        "suburb": "Kimihurura",
        "county": "Gasabo",
        "city": "Kigali",
        "state": "Kigali City",
        "country": "Rwanda",
        "country_code": "rw",
    },
}

PROVINCE_PAYLOAD = {
    "display_name": "Kigali City, Rwanda",
    "address": {
        "state": "Kigali City",
        "country": "Rwanda",
        "country_code": "rw",
    },
}

CONGO_PAYLOAD = {
    "display_name": "Goma, Nord-Kivu, République démocratique du Congo",
    "address": {
        "city": "Goma",
        "state": "Nord-Kivu",
        "country_code": "cd",
    },
}

KIGALI = (-1.9441, 30.0619)


@pytest.fixture()
def kigali_session():
    return FakeSession(by_zoom={
        18: FakeResponse(BUILDING_PAYLOAD),
        14: FakeResponse(DISTRICT_PAYLOAD),
        10: FakeResponse(PROVINCE_PAYLOAD),
    })


@pytest.fixture()
def no_delay(monkeypatch):
    """Record sleeps instead of waiting."""
    sleeps = []
    monkeypatch.setattr(nominatim.time, "sleep", sleeps.append)
    monkeypatch.setattr(nominatim.nominatim_limiter, "min_interval", 0)
    return sleeps


@pytest.fixture()
def timeout_error():
    return requests.Timeout("read timed out")
