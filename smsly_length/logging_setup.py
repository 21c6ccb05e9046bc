"""
Logging Setup
=============
Structured logging configuration for services using the sizing engine.

Usage:
    from smsly_length.logging_setup import setup_logging
    
    setup_logging(service_name="smsly-sms", level="DEBUG", json_output=False)
"""

import logging
import sys
from typing import Optional

import structlog

from .config import LengthConfig


def setup_logging(
    service_name: str,
    level: str = "INFO",
    json_output: bool = True,
) -> structlog.stdlib.BoundLogger:
    """
    Configure structlog and the stdlib root logger.
    
    Args:
        service_name: Name of the service, bound to every event
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: Render JSON (production) instead of console output
        
    Returns:
        Logger bound to the service name
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(handler)
    
    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()
    
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    
    logger = structlog.get_logger("smsly_length").bind(service=service_name)
    logger.info("logging.configured", level=level.upper())
    return logger


def setup_logging_from_config(
    config: Optional[LengthConfig] = None,
) -> structlog.stdlib.BoundLogger:
    """Configure logging from a LengthConfig (environment when omitted)."""
    config = config or LengthConfig.from_env()
    return setup_logging(
        service_name=config.service_name,
        level=config.log_level,
        json_output=config.json_logs,
    )
