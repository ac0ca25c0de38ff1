"""Outbound services"""

from .admin_notification_service import AdminNotificationService

__all__ = ["AdminNotificationService"]
