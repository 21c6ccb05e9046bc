"""
SMS Length Configuration
========================
Configuration defaults and environment variables.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .exceptions import ConfigurationError

DEFAULT_SERVICE_NAME = "smsly-length"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_COST_PER_SEGMENT = 0.01

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


@dataclass
class LengthConfig:
    """Runtime configuration for services embedding the sizing engine."""
    service_name: str = DEFAULT_SERVICE_NAME
    log_level: str = DEFAULT_LOG_LEVEL
    json_logs: bool = True
    cost_per_segment: float = DEFAULT_COST_PER_SEGMENT
    
    def __post_init__(self):
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(f"Unknown log level: {self.log_level}")
        if self.cost_per_segment < 0:
            raise ConfigurationError("cost_per_segment must not be negative")
    
    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LengthConfig":
        """
        Load configuration from environment variables.
        
        Variables:
            SMS_LENGTH_SERVICE_NAME, SMS_LENGTH_LOG_LEVEL,
            SMS_LENGTH_LOG_JSON, SMS_COST_PER_SEGMENT
        """
        env = os.environ if environ is None else environ
        return cls(
            service_name=env.get("SMS_LENGTH_SERVICE_NAME", DEFAULT_SERVICE_NAME),
            log_level=env.get("SMS_LENGTH_LOG_LEVEL", DEFAULT_LOG_LEVEL),
            json_logs=_parse_bool(env.get("SMS_LENGTH_LOG_JSON", "true")),
            cost_per_segment=_parse_float(
                env.get("SMS_COST_PER_SEGMENT", str(DEFAULT_COST_PER_SEGMENT))
            ),
        )


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Expected a boolean, got {value!r}")


def _parse_float(value: str) -> float:
    try:
        return float(value)
    except ValueError as e:
        raise ConfigurationError(f"Expected a number, got {value!r}") from e
