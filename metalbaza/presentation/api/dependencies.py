"""
API dependencies

Identity arrives as an opaque Telegram id header issued by the auth service
in front of this one; it is resolved to a stored user here.
"""

import logging
from typing import Optional

from fastapi import Depends, Header, Request

from metalbaza.container import Container, get_container
from metalbaza.domain.repositories.user_repository import UserInfo
from metalbaza.domain.value_objects.telegram_id import TelegramId
from metalbaza.infrastructure.utilities.constants import BusinessSettings
from metalbaza.infrastructure.utilities.exceptions import (
    AuthenticationError,
    AuthorizationError,
    UserNotFoundError,
)
from metalbaza.infrastructure.utilities.i18n import default_language, normalize_language

logger = logging.getLogger(__name__)


def request_language(request: Request) -> str:
    """Language for user-facing text: Accept-Language, stored user language, default"""
    return (
        getattr(request.state, "language", None)
        or normalize_language(request.headers.get("accept-language"))
        or default_language()
    )


async def get_current_user(
    request: Request,
    telegram_id: Optional[str] = Header(None, alias=BusinessSettings.TELEGRAM_ID_HEADER),
    container: Container = Depends(get_container),
) -> UserInfo:
    """Resolve the identity header into a registered user"""
    if not telegram_id:
        raise AuthenticationError("Missing identity header")

    try:
        identity = TelegramId(int(telegram_id))
    except ValueError as e:
        raise AuthenticationError(f"Invalid identity header: {telegram_id!r}") from e

    user = await container.get_user_repository().find_by_telegram_id(identity)
    if user is None:
        logger.warning("👤 UNKNOWN IDENTITY: %s", identity.value)
        raise UserNotFoundError(identity.value)

    request.state.language = normalize_language(
        request.headers.get("accept-language")
    ) or normalize_language(user.language)
    return user


async def require_admin(user: UserInfo = Depends(get_current_user)) -> UserInfo:
    """Require admin user"""
    if not user.is_admin:
        logger.warning("🚫 ADMIN ACCESS DENIED: user %s", user.id)
        raise AuthorizationError()
    return user
