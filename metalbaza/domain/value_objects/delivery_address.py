"""
Delivery Address value object
"""

from dataclasses import dataclass

MAX_ADDRESS_LENGTH = 500


@dataclass(frozen=True)
class DeliveryAddress:
    """Delivery address value object with validation"""

    value: str

    def __post_init__(self):
        """Validate delivery address"""
        if not self.value or not self.value.strip():
            raise ValueError("Delivery address cannot be empty")

        cleaned_address = self.value.strip()

        if len(cleaned_address) > MAX_ADDRESS_LENGTH:
            raise ValueError(f"Delivery address cannot exceed {MAX_ADDRESS_LENGTH} characters")

        object.__setattr__(self, "value", cleaned_address)

    @staticmethod
    def is_blank(value: str | None) -> bool:
        """True when no usable address was supplied"""
        return value is None or not value.strip()

    def __str__(self) -> str:
        return self.value
