"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field


def _parse_seed() -> int | None:
    """Parse RAY_SEED environment variable; unset or blank means unseeded."""
    seed = os.getenv("RAY_SEED", "").strip()
    return int(seed) if seed else None


@dataclass(frozen=True)
class ShoeConfig:
    """Shoe generation and output configuration."""

    seed: int | None = field(default_factory=_parse_seed)
    indent: int = 4
    comment_marker: str = "#"


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str = field(
        default_factory=lambda: os.getenv("RAY_LOG_LEVEL", "WARNING").upper()
    )


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    shoe: ShoeConfig = field(default_factory=ShoeConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Global configuration instance
config = AppConfig()
