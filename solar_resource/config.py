"""
Step 1: Configuration + Secrets

Keep NREL_API_KEY in env (prod) / .env (local).
The key is read here, at the outermost layer, and passed explicitly
into the fetcher through Settings.queries().
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Union

from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://developer.nrel.gov"
DEFAULT_ENDPOINT = "api/solar/solar_resource/v1.json"


def mask_key(api_key: str) -> str:
    return api_key[:4] + "..." + api_key[-4:] if len(api_key) >= 8 else "***"


@dataclass(frozen=True)
class Settings:
    """Configuration for one solar resource request"""
    api_key: str
    lat: float
    lon: float
    endpoint: str = DEFAULT_ENDPOINT
    base_url: str = DEFAULT_BASE_URL
    timeout: Optional[float] = None

    def queries(self) -> dict[str, Union[str, float]]:
        return {"api_key": self.api_key, "lat": self.lat, "lon": self.lon}

    def __repr__(self) -> str:
        return (
            f"Settings(api_key={mask_key(self.api_key)!r}, lat={self.lat}, lon={self.lon}, "
            f"endpoint={self.endpoint!r}, base_url={self.base_url!r}, timeout={self.timeout})"
        )


def load_api_key() -> str:
    api_key = os.getenv("NREL_API_KEY")
    if not api_key:
        raise EnvironmentError(
            "NREL_API_KEY is missing. Add it to your environment or .env file."
        )
    return api_key


def load_settings(
    lat: float,
    lon: float,
    endpoint: str = DEFAULT_ENDPOINT,
    timeout: Optional[float] = None,
) -> Settings:
    """
    Load settings from environment.

    Reads NREL_API_KEY (and optionally NREL_BASE_URL) from .env file or
    environment variable.
    """
    load_dotenv()

    return Settings(
        api_key=load_api_key(),
        lat=lat,
        lon=lon,
        endpoint=endpoint,
        base_url=os.getenv("NREL_BASE_URL") or DEFAULT_BASE_URL,
        timeout=timeout,
    )
