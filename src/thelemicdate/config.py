"""Runtime settings read from the environment (and `.env`, loaded by the entry point)."""

import math
import os
from dataclasses import dataclass
from pathlib import Path

from thelemicdate import __version__
from thelemicdate.errors import ConfigurationError

_PREFIX = "THELEMIC_DATE_"

DEFAULT_LOCATION = "Las Vegas, NV"
NOMINATIM_URL = "https://nominatim.openstreetmap.org/search"
EPHEMERIS_BACKENDS = ("meeus", "de421")


@dataclass(frozen=True)
class Settings:
    """Everything an invocation may tune. Defaults match the stock `tdate` command."""

    default_location: str = DEFAULT_LOCATION
    geocoder_url: str = NOMINATIM_URL
    user_agent: str = f"thelemicdate/{__version__}"  # Nominatim rejects anonymous clients
    http_timeout: float = 10.0  # Seconds
    ephemeris: str = "meeus"  # "meeus" (series, offline) or "de421" (skyfield + JPL kernel)
    ephemeris_dir: Path = Path.home() / ".cache" / "thelemicdate"
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "Settings":
        """Build settings from `THELEMIC_DATE_*` variables, falling back to defaults.

        Args:
            environ: Mapping to read instead of os.environ (tests).

        Raises:
            ConfigurationError: When a value cannot be parsed.
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        def get(name: str, default: str) -> str:
            value = env.get(_PREFIX + name, "").strip()
            return value or default

        timeout_raw = get("HTTP_TIMEOUT", str(defaults.http_timeout))
        try:
            http_timeout = float(timeout_raw)
        except ValueError as exc:
            raise ConfigurationError(
                f"{_PREFIX}HTTP_TIMEOUT must be a number of seconds, got {timeout_raw!r}"
            ) from exc
        if not math.isfinite(http_timeout) or http_timeout <= 0:
            raise ConfigurationError(f"{_PREFIX}HTTP_TIMEOUT must be a positive finite number, got {http_timeout}")

        ephemeris = get("EPHEMERIS", defaults.ephemeris).lower()
        if ephemeris not in EPHEMERIS_BACKENDS:
            raise ConfigurationError(
                f"{_PREFIX}EPHEMERIS must be one of {', '.join(EPHEMERIS_BACKENDS)}, got {ephemeris!r}"
            )

        log_level = get("LOG_LEVEL", defaults.log_level).upper()
        if log_level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ConfigurationError(f"{_PREFIX}LOG_LEVEL is not a logging level: {log_level!r}")

        return cls(
            default_location=get("DEFAULT_LOCATION", defaults.default_location),
            geocoder_url=get("GEOCODER_URL", defaults.geocoder_url),
            user_agent=get("USER_AGENT", defaults.user_agent),
            http_timeout=http_timeout,
            ephemeris=ephemeris,
            ephemeris_dir=Path(get("EPHEMERIS_DIR", str(defaults.ephemeris_dir))).expanduser(),
            log_level=log_level,
        )
