"""
Step 2: Ingest from the NREL solar resource API

One synchronous GET, two fail-loud gates, then the typed decode:
- Non-2xx status -> HTTPFailure (body is never decoded)
- Non-JSON Content-Type -> ContentTypeMismatch
- Bad JSON or wrong shape -> MalformedPayload
"""

from __future__ import annotations

import logging
from typing import Mapping, Optional, Union
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import pandas as pd
import requests

from .config import DEFAULT_BASE_URL
from .errors import ContentTypeMismatch, HTTPFailure, MalformedPayload
from .prepare import build_monthly_table, parse_monthly_outputs

logger = logging.getLogger(__name__)

QueryValue = Union[str, int, float]


def _sanitize_url(url: str) -> str:
    parts = urlsplit(url)
    q = [(k, v) for k, v in parse_qsl(parts.query, keep_blank_values=True) if k.lower() != "api_key"]
    return urlunsplit((parts.scheme, parts.netloc, parts.path, urlencode(q), parts.fragment))


def build_url(base_url: str, endpoint: str) -> str:
    return f"{base_url.rstrip('/')}/{endpoint.lstrip('/')}"


def create_session() -> requests.Session:
    """Plain session: no retry adapter, every failure surfaces on the first try"""
    return requests.Session()


def _decode_json(resp: requests.Response) -> object:
    try:
        return resp.json()
    except requests.exceptions.JSONDecodeError as e:
        content_preview = resp.text[:500] if resp.text else "(empty)"
        raise MalformedPayload(f"invalid JSON body. content_preview={content_preview}") from e


def fetch_solar_table(
    endpoint: str,
    queries: Mapping[str, QueryValue],
    *,
    base_url: str = DEFAULT_BASE_URL,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = None,
) -> pd.DataFrame:
    """
    Fetch monthly solar resource averages and reshape them into a table.

    Args:
        endpoint: API path appended to base_url (e.g. "api/solar/solar_resource/v1.json")
        queries: Query parameters, including api_key, lat and lon
        base_url: Scheme + host of the API
        session: Optional caller-owned session (left open); a fresh one is
            created and closed per call otherwise
        timeout: Request timeout in seconds (None = requests default)

    Returns:
        DataFrame with columns [month, avg_dni, avg_ghi, avg_lat_tilt], Jan..Dec

    Raises:
        HTTPFailure, ContentTypeMismatch, MalformedPayload
    """
    url = build_url(base_url, endpoint)
    owns_session = session is None
    if owns_session:
        session = create_session()

    try:
        resp = session.get(url, params=dict(queries), timeout=timeout)
    finally:
        if owns_session:
            session.close()

    safe_url = _sanitize_url(resp.url or url)
    logger.info("[nrel] status=%s url=%s", resp.status_code, safe_url)

    if not 200 <= resp.status_code < 300:
        raise HTTPFailure(resp.status_code, resp.reason, safe_url)

    content_type = resp.headers.get("Content-Type", "")
    if "json" not in content_type.lower():
        raise ContentTypeMismatch(content_type)

    payload = _decode_json(resp)
    df = build_monthly_table(parse_monthly_outputs(payload))
    logger.info("[nrel] parsed %d monthly rows", len(df))
    return df
