"""
Miscellaneous utilities shared across tiny-ion.
"""

from .logging import logger, setup_logging
from .config import config

__all__ = ["logger", "setup_logging", "config"]
