"""Configuration utilities.

Central place to load environment driven settings (route defaults, report format, etc.).
Avoids scattering os.getenv calls around the codebase.
"""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

# Load .env once on module import
load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass(slots=True)
class Settings:
    origin: str = field(default_factory=lambda: os.getenv("ROUTE_ORIGIN", "VVO"))
    destination: str = field(default_factory=lambda: os.getenv("ROUTE_DESTINATION", "TLV"))
    match_on: str = field(default_factory=lambda: os.getenv("ROUTE_MATCH_ON", "code"))
    report_format: str = field(default_factory=lambda: os.getenv("REPORT_FORMAT", "text"))
    strict_prices: bool = field(default_factory=lambda: _env_flag("STRICT_PRICES"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))


settings = Settings()
