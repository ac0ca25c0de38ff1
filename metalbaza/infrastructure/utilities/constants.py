"""
Application constants for MetalBaza

Centralizes magic numbers and hard-coded values.
"""

from typing import Final


class DatabaseSettings:
    """Database connection and pool configuration"""

    POOL_RECYCLE_SECONDS: Final[int] = 3600  # 1 hour
    CONNECTION_TIMEOUT_SECONDS: Final[int] = 30

    # Production settings
    PRODUCTION_POOL_SIZE: Final[int] = 20
    PRODUCTION_MAX_OVERFLOW: Final[int] = 30

    # Development settings
    DEVELOPMENT_POOL_SIZE: Final[int] = 5
    DEVELOPMENT_MAX_OVERFLOW: Final[int] = 10


class LoggingSettings:
    """Logging file sizes and rotation settings"""

    MAX_LOG_FILE_SIZE: Final[int] = 10 * 1024 * 1024  # 10MB
    MAIN_LOG_BACKUP_COUNT: Final[int] = 10
    ERROR_LOG_BACKUP_COUNT: Final[int] = 10


class FileSettings:
    """Log file names"""

    MAIN_LOG_FILE: Final[str] = "metalbaza.json.log"
    ERROR_LOG_FILE: Final[str] = "errors.log"


class PerformanceSettings:
    """Performance thresholds"""

    SLOW_QUERY_THRESHOLD_MS: Final[int] = 1000
    SLOW_REQUEST_THRESHOLD_MS: Final[int] = 2000


class BusinessSettings:
    """Business defaults"""

    DEFAULT_ORDER_LIST_LIMIT: Final[int] = 100
    MAX_ORDER_LIST_LIMIT: Final[int] = 500
    MAX_NOTES_LENGTH: Final[int] = 1000
    TELEGRAM_ID_HEADER: Final[str] = "X-Telegram-Id"
