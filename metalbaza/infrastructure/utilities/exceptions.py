"""
Custom exceptions for the MetalBaza cart and checkout

Every error carries a technical message for logs, a locale key for the
message shown to the user and a stable error code for API clients.
"""

import logging

from metalbaza.infrastructure.utilities.i18n import tr

logger = logging.getLogger(__name__)


class MetalBazaError(Exception):
    """Base exception for MetalBaza"""

    http_status = 500

    def __init__(self, message: str, user_message_key: str = None, error_code: str = None):
        super().__init__(message)
        self.user_message_key = user_message_key or "ERROR_GENERAL"
        self.error_code = error_code or "GENERAL_ERROR"

    def user_message(self, lang: str | None = None) -> str:
        """Localized message safe to show to the customer"""
        return tr(self.user_message_key, lang)


class ValidationError(MetalBazaError):
    """Input validation errors"""

    http_status = 400

    def __init__(self, message: str, user_message_key: str = None, field: str = None):
        super().__init__(message, user_message_key or "ERROR_VALIDATION", "VALIDATION_ERROR")
        self.field = field


class BusinessLogicError(MetalBazaError):
    """Business rule violations"""

    http_status = 400

    def __init__(self, message: str, user_message_key: str = None, error_code: str = None):
        super().__init__(message, user_message_key, error_code or "BUSINESS_ERROR")


class DatabaseError(MetalBazaError):
    """Database-related errors"""

    def __init__(self, message: str, operation: str = None, user_message_key: str = None):
        super().__init__(message, user_message_key or "ERROR_DATABASE", "DATABASE_ERROR")
        self.operation = operation


class InvalidQuantityError(ValidationError):
    """Quantity below one on add or update"""

    def __init__(self, quantity):
        super().__init__(
            f"Quantity must be a positive integer, got {quantity!r}",
            "ERROR_INVALID_QUANTITY",
            field="quantity",
        )
        self.error_code = "INVALID_QUANTITY"


class MissingDeliveryAddressError(ValidationError):
    """Delivery requested without an address"""

    def __init__(self):
        super().__init__(
            "Delivery address is required for delivery orders",
            "ERROR_MISSING_DELIVERY_ADDRESS",
            field="delivery_address",
        )
        self.error_code = "MISSING_DELIVERY_ADDRESS"


class EmptyCartError(BusinessLogicError):
    """Cart is empty when operation requires items"""

    def __init__(self):
        super().__init__("Cart is empty", "ERROR_EMPTY_CART", "EMPTY_CART")


class DeliveryUnavailableError(BusinessLogicError):
    """Delivery requested while the company has delivery switched off"""

    def __init__(self):
        super().__init__(
            "Delivery is currently disabled", "ERROR_DELIVERY_UNAVAILABLE", "DELIVERY_UNAVAILABLE"
        )


class ProductUnavailableError(BusinessLogicError):
    """Product exists but is not available for ordering"""

    def __init__(self, product_id: int):
        super().__init__(
            f"Product {product_id} is not available",
            "ERROR_PRODUCT_UNAVAILABLE",
            "PRODUCT_UNAVAILABLE",
        )
        self.product_id = product_id


class NotFoundError(BusinessLogicError):
    """Target row does not exist"""

    http_status = 404

    def __init__(self, message: str, user_message_key: str = None, error_code: str = None):
        super().__init__(message, user_message_key or "ERROR_NOT_FOUND", error_code or "NOT_FOUND")


class ProductNotFoundError(NotFoundError):
    """Product not found"""

    def __init__(self, product_id: int):
        super().__init__(f"Product not found: {product_id}", "ERROR_PRODUCT_NOT_FOUND", "PRODUCT_NOT_FOUND")
        self.product_id = product_id


class CartItemNotFoundError(NotFoundError):
    """No cart line for this user and product"""

    def __init__(self, user_id: int, product_id: int):
        super().__init__(
            f"Cart line not found: user={user_id} product={product_id}",
            "ERROR_CART_ITEM_NOT_FOUND",
            "CART_ITEM_NOT_FOUND",
        )


class OrderNotFoundError(NotFoundError):
    """Order not found"""

    def __init__(self, order_id: int):
        super().__init__(f"Order not found: {order_id}", "ERROR_ORDER_NOT_FOUND", "ORDER_NOT_FOUND")
        self.order_id = order_id


class UserNotFoundError(NotFoundError):
    """Identity does not match a registered user"""

    def __init__(self, telegram_id):
        super().__init__(f"User not found: {telegram_id}", "ERROR_USER_NOT_FOUND", "USER_NOT_FOUND")


class CartChangedError(BusinessLogicError):
    """Cart no longer matches what was priced"""

    http_status = 409

    def __init__(self, user_id: int):
        super().__init__(
            f"Cart of user {user_id} changed during checkout", "ERROR_CART_CHANGED", "CART_CHANGED"
        )


class InvalidStatusTransitionError(BusinessLogicError):
    """Order status move forbidden by the state machine"""

    http_status = 409

    def __init__(self, current: str, requested: str):
        super().__init__(
            f"Invalid status transition: {current} → {requested}",
            "ERROR_INVALID_STATUS_TRANSITION",
            "INVALID_STATUS_TRANSITION",
        )
        self.current = current
        self.requested = requested


class OrderCreationError(DatabaseError):
    """Order creation failed in the store"""

    def __init__(self, reason: str = None):
        super().__init__(
            f"Order creation failed: {reason}",
            "create_order",
            "ERROR_ORDER_CREATION",
        )
        self.error_code = "ORDER_CREATION_FAILED"


class AuthenticationError(MetalBazaError):
    """Request carries no usable identity"""

    http_status = 401

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, "ERROR_AUTH_REQUIRED", "AUTH_REQUIRED")


class AuthorizationError(MetalBazaError):
    """Identity lacks the role the operation needs"""

    http_status = 403

    def __init__(self, message: str = "Administrator role required"):
        super().__init__(message, "ERROR_FORBIDDEN", "FORBIDDEN")
