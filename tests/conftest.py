"""Shared fixtures: canned NREL payloads and real requests.Response objects."""

from __future__ import annotations

import json
from typing import Optional
from unittest.mock import MagicMock

import pytest
import requests

DNI = [4.1, 4.8, 5.9, 6.7, 7.2, 8.0, 7.6, 7.1, 6.8, 5.9, 4.7, 4.0]
GHI = [2.5, 3.3, 4.5, 5.6, 6.4, 7.1, 6.9, 6.1, 5.2, 3.9, 2.8, 2.3]
LAT_TILT = [4.6, 5.2, 5.9, 6.2, 6.3, 6.5, 6.4, 6.3, 6.2, 5.8, 4.9, 4.4]


def make_payload(dni=None, ghi=None, lat_tilt=None) -> dict:
    return {
        "version": "1.0.0",
        "errors": [],
        "inputs": {"lat": "40", "lon": "-105"},
        "outputs": {
            "avg_dni": {"annual": 6.07, "monthly": list(DNI if dni is None else dni)},
            "avg_ghi": {"annual": 4.72, "monthly": list(GHI if ghi is None else ghi)},
            "avg_lat_tilt": {"annual": 5.73, "monthly": list(LAT_TILT if lat_tilt is None else lat_tilt)},
        },
    }


def make_response(
    status_code: int = 200,
    body: object = None,
    content_type: Optional[str] = "application/json; charset=utf-8",
    reason: str = "OK",
    url: str = "https://developer.nrel.gov/api/solar/solar_resource/v1.json?api_key=SECRETKEY123&lat=40&lon=-105",
) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status_code
    resp.reason = reason
    resp.url = url
    resp.encoding = "utf-8"
    if content_type is not None:
        resp.headers["Content-Type"] = content_type
    if isinstance(body, (bytes, str)):
        resp._content = body.encode("utf-8") if isinstance(body, str) else body
    else:
        resp._content = json.dumps(body if body is not None else make_payload()).encode("utf-8")
    return resp


def session_returning(*responses: requests.Response) -> MagicMock:
    session = MagicMock(spec=requests.Session)
    session.get.side_effect = list(responses)
    return session


@pytest.fixture
def payload() -> dict:
    return make_payload()


@pytest.fixture
def queries() -> dict:
    return {"api_key": "SECRETKEY123", "lat": 40.0, "lon": -105.0}
