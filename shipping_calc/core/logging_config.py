# shipping_calc/core/logging_config.py
"""
Centralized logging configuration for shipping-calc.

The library modules only create loggers; this is called by the CLI (or by an
application embedding the library) to route them somewhere useful.
"""

import logging
from typing import Optional

from shipping_calc.core.config import get_settings


def configure_logging(level: Optional[str] = None):
    """
    Configure logging for shipping-calc.

    Sets appropriate log levels for different modules:
    - shipping_calc: INFO (or whatever LOG_LEVEL / level says)
    - HTTP clients (urllib3, requests): WARNING only
    """
    log_level = (level or get_settings().LOG_LEVEL or "INFO").upper()

    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler()]
    )

    # Quiet noisy HTTP client loggers
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("urllib3.connectionpool").setLevel(logging.WARNING)
    logging.getLogger("requests").setLevel(logging.WARNING)

    logging.getLogger("shipping_calc").setLevel(getattr(logging, log_level, logging.INFO))

    logger = logging.getLogger(__name__)
    logger.debug(f"Logging configured at level: {log_level}")
    return log_level
