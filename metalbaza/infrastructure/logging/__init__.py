"""
Logging Infrastructure

Structured logging setup and performance timing helpers.
"""

from .logging_config import (
    PerformanceLogger,
    ProductionLogger,
    get_structured_logger,
    setup_logging,
)

__all__ = [
    "PerformanceLogger",
    "ProductionLogger",
    "get_structured_logger",
    "setup_logging",
]
