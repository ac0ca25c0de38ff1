"""
Admin Notification Service

Sends a summary of every newly placed order to the admin Telegram chat.
"""

import logging
from html import escape

from telegram import Bot
from telegram.error import TelegramError

from metalbaza.domain.entities.order_entity import Order
from metalbaza.domain.repositories.user_repository import UserInfo
from metalbaza.infrastructure.utilities.i18n import tr


class AdminNotificationService:
    """Service for notifying administrators about new orders.

    Messages go to a single chat (a person or a group) configured through
    ``ADMIN_CHAT_ID``. Delivery is best effort: Telegram failures are logged
    and reported through the return value, never raised.
    """

    def __init__(self, bot: Bot, admin_chat_id: int, *, language: str = "uz"):
        self._bot = bot
        self._admin_chat_id = admin_chat_id
        self._language = language
        self._logger = logging.getLogger(self.__class__.__name__)

        self._logger.info("🏗️ ADMIN NOTIFICATION SERVICE INITIALIZED")
        self._logger.info("  🤖 Bot: %s", type(self._bot).__name__)
        self._logger.info("  👑 Admin chat: %s", self._admin_chat_id)

    async def notify_new_order(self, order: Order, customer: UserInfo | None = None) -> bool:
        """Send new order notification to the admin chat"""
        self._logger.info("📨 SENDING ADMIN NOTIFICATION: Order #%s", order.id)

        message = self.format_new_order_message(order, customer)
        self._logger.debug("📄 MESSAGE CONTENT:\n%s", message)

        try:
            result = await self._bot.send_message(
                chat_id=self._admin_chat_id, text=message, parse_mode="HTML"
            )
        except TelegramError as e:
            self._logger.error("❌ TELEGRAM ERROR: Order #%s, Error: %s", order.id, e)
            return False

        self._logger.info(
            "✅ NOTIFICATION SENT: Order #%s, Msg ID: %s", order.id, result.message_id
        )
        return True

    def format_new_order_message(self, order: Order, customer: UserInfo | None = None) -> str:
        """Build the HTML summary shown to administrators"""
        lang = self._language
        lines = [f"<b>{tr('ADMIN_NEW_ORDER_TITLE', lang, order_id=order.id)}</b>", ""]

        if customer is not None:
            lines.append(
                tr(
                    "ADMIN_CUSTOMER",
                    lang,
                    name=escape(customer.full_name),
                    phone=escape(customer.phone),
                )
            )

        if order.is_delivery:
            lines.append(tr("ADMIN_DELIVERY", lang, address=escape(order.delivery_address or "")))
        else:
            lines.append(tr("ADMIN_PICKUP", lang))

        if order.notes:
            lines.append(tr("ADMIN_NOTES", lang, notes=escape(order.notes)))

        lines.append("")
        lines.append(tr("ADMIN_ITEMS", lang))
        for item in order.items:
            lines.append(
                f"• {escape(item.product_name)} × {item.quantity} = {item.total_price.format_display()}"
            )

        lines.append("")
        lines.append(tr("ADMIN_TOTAL", lang, total=order.total_amount.format_display()))
        if order.is_delivery:
            lines.append(
                tr("ADMIN_DELIVERY_AMOUNT", lang, amount=order.delivery_amount.format_display())
            )
        lines.append(
            f"<b>{tr('ADMIN_GRAND_TOTAL', lang, amount=order.grand_total.format_display())}</b>"
        )

        return "\n".join(lines)
