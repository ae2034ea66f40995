"""
Sentrel Core - Shared types, config and logging.

This package contains:
- Configuration settings
- Pydantic schemas for generated triples
- Logging setup for entry points
"""

from sentrel_core.config import settings
from sentrel_core.logger import setup_logging
from sentrel_core.schemas import Triple

__all__ = [
    "settings",
    "setup_logging",
    "Triple",
]
