from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlparse


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _required_env(name: str) -> str:
    value = (os.getenv(name) or "").strip()
    if not value:
        raise ValueError(f"Missing required configuration: {name}")
    return value


@dataclass(frozen=True, slots=True)
class GeocodingConfig:
    """Endpoint and credentials for the external geocoding provider.

    Env vars:
      - GEOCODING_SERVICE_URL: base URL of the geocode endpoint (http or https)
      - GEOCODING_API_KEY: key sent as the `apiKey` query parameter
    """

    url: str
    api_key: str

    def __post_init__(self) -> None:
        if not self.url.strip():
            raise ValueError("Geocoding service URL must not be blank")
        parsed = urlparse(self.url)
        if parsed.scheme not in {"http", "https"} or not parsed.netloc:
            raise ValueError(f"Invalid geocoding service URL: {self.url!r}")
        if not self.api_key.strip():
            raise ValueError("Geocoding API key must not be blank")

    def __repr__(self) -> str:
        return f"GeocodingConfig(url={self.url!r}, api_key='***')"

    @staticmethod
    def from_env() -> "GeocodingConfig":
        return GeocodingConfig(
            url=_required_env("GEOCODING_SERVICE_URL"),
            api_key=_required_env("GEOCODING_API_KEY"),
        )


@dataclass(frozen=True, slots=True)
class StopsDataConfig:
    """Location of the bundled stop batches.

    Env vars:
      - STOPS_DATA_PATH: directory holding the JSON batches (default data/stops)
    """

    base_path: Path

    @staticmethod
    def from_env() -> "StopsDataConfig":
        raw = (os.getenv("STOPS_DATA_PATH") or "").strip()
        return StopsDataConfig(base_path=Path(raw or "data/stops"))


def log_level() -> str:
    return (os.getenv("LOG_LEVEL") or "INFO").strip().upper()


def reveal_errors() -> bool:
    return _env_bool("ATM_STOPS_REVEAL_ERRORS", False)
