"""
Order status value object and its state machine
"""

from enum import Enum


class OrderStatus(str, Enum):
    """Lifecycle states of an order"""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    PROCESSING = "processing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return not STATUS_TRANSITIONS[self]

    def can_transition_to(self, new_status: "OrderStatus") -> bool:
        """Check whether an administrator may move an order to *new_status*"""
        return new_status in STATUS_TRANSITIONS[self]

    @classmethod
    def parse(cls, value: str) -> "OrderStatus":
        """Parse a status string, raising ValueError for unknown values"""
        try:
            return cls(value.strip().lower())
        except (AttributeError, ValueError) as e:
            allowed = ", ".join(status.value for status in cls)
            raise ValueError(f"Unknown order status '{value}'. Allowed: {allowed}") from e


STATUS_TRANSITIONS = {
    OrderStatus.PENDING: (OrderStatus.CONFIRMED, OrderStatus.CANCELLED),
    OrderStatus.CONFIRMED: (OrderStatus.PROCESSING, OrderStatus.CANCELLED),
    OrderStatus.PROCESSING: (OrderStatus.COMPLETED, OrderStatus.CANCELLED),
    OrderStatus.COMPLETED: (),  # Terminal state
    OrderStatus.CANCELLED: (),  # Terminal state
}
