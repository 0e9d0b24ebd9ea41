"""
Game configuration.
Static game constants live in DEFAULT_CONFIG; logging settings can be
overridden through environment variables.
"""

import logging
import os

from engine.models import Attribute

logger = logging.getLogger(__name__)


# Default configuration values
DEFAULT_CONFIG = {
    # Card input
    "name_max_length": 63,
    "population_max": 2**64 - 1,

    # Card display precision
    "area_decimals": 2,
    "money_decimals": 2,
    "derived_decimals": 4,

    # Tiers
    "fixed_attribute": Attribute.GDP,
    "master_picks": 2,
}


def _parse_level(raw: str, default: str) -> str:
    name = (raw or "").strip().upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    logger.warning("Invalid log level %r; falling back to default %s", raw, default)
    return default


class LogConfig:
    """Logging settings with environment variable overrides"""
    DEFAULT_LEVEL = "WARNING"
    LEVEL = _parse_level(os.getenv("TRUNFO_LOG_LEVEL", DEFAULT_LEVEL), DEFAULT_LEVEL)
    FORMAT = os.getenv("TRUNFO_LOG_FORMAT", "%(levelname)s %(name)s: %(message)s")

    @classmethod
    def resolve_level(cls, override: str = None) -> str:
        """Return the effective level name, preferring an explicit override."""
        if override:
            return _parse_level(override, cls.LEVEL)
        return cls.LEVEL
