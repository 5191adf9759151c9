"""
Logging configuration.
"""

from dataclasses import dataclass


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)8s %(message)s"
