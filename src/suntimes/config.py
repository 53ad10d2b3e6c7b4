"""Runtime settings read from environment variables (optionally via a .env file)."""

import os
from dataclasses import dataclass
from pathlib import Path

_ROOT = Path(__file__).parent.parent.parent


@dataclass(frozen=True)
class Settings:
    env: str  # "development" → console logs, anything else → JSON logs
    log_level: str
    data_dir: Path  # Directory holding (or receiving) the skyfield ephemeris
    ephemeris: str  # JPL ephemeris file name
    locations_path: Path | None  # Override for the bundled location dataset
    nearby_limit: int
    nearby_max_km: float


def load_settings() -> Settings:
    """Build Settings from os.environ.

    Call ``dotenv.load_dotenv()`` before this at entry points so that a local
    .env file is honoured.
    """
    locations = os.environ.get("SUNTIMES_LOCATIONS")
    return Settings(
        env=os.environ.get("SUNTIMES_ENV", "development"),
        log_level=os.environ.get("SUNTIMES_LOG_LEVEL", "INFO").upper(),
        data_dir=Path(os.environ.get("SUNTIMES_DATA_DIR", str(_ROOT / "resources"))),
        ephemeris=os.environ.get("SUNTIMES_EPHEMERIS", "de440s.bsp"),
        locations_path=Path(locations) if locations else None,
        nearby_limit=int(os.environ.get("SUNTIMES_NEARBY_LIMIT", "8")),
        nearby_max_km=float(os.environ.get("SUNTIMES_NEARBY_MAX_KM", "500")),
    )


settings = load_settings()
