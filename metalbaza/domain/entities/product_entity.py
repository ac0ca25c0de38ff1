# pylint: disable=too-many-instance-attributes
"""
Product Entity - read-only view of a catalog product
"""

from dataclasses import dataclass

from metalbaza.domain.value_objects.money import Money


@dataclass(frozen=True)
class Product:
    """Catalog product as seen by the cart and checkout"""

    id: int
    name_uz: str
    price: Money
    delivery_price: Money
    free_delivery_threshold: Money | None = None
    name_ru: str | None = None
    unit: str = "dona"
    image_url: str | None = None
    is_available: bool = True
    is_rental: bool = False

    def display_name(self, lang: str = "uz") -> str:
        """Localized product name, falling back to Uzbek"""
        if lang == "ru" and self.name_ru:
            return self.name_ru
        return self.name_uz
