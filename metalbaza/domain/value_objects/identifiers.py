"""Identifier value objects for users, products and orders"""

from dataclasses import dataclass


@dataclass(frozen=True)
class _PositiveIntId:
    value: int

    def __post_init__(self):
        if not isinstance(self.value, int) or isinstance(self.value, bool) or self.value <= 0:
            raise ValueError(f"{type(self).__name__} must be a positive integer")

    def __str__(self) -> str:
        return str(self.value)

    def __int__(self) -> int:
        return self.value


@dataclass(frozen=True)
class UserId(_PositiveIntId):
    """User identifier value object"""


@dataclass(frozen=True)
class ProductId(_PositiveIntId):
    """Product identifier value object"""


@dataclass(frozen=True)
class OrderId(_PositiveIntId):
    """Order identifier value object"""
