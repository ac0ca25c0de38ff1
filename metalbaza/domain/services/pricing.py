"""
Order pricing rules

Delivery is priced per line: every product carries its own delivery price and
free-delivery threshold, and the threshold is compared with that line's own
subtotal. There is no cart-wide threshold.
"""

from dataclasses import dataclass
from typing import Iterable

from metalbaza.domain.entities.cart_entity import CartLine
from metalbaza.domain.entities.order_entity import OrderLineDraft
from metalbaza.domain.entities.product_entity import Product
from metalbaza.domain.value_objects.money import Money


@dataclass(frozen=True)
class OrderQuote:
    """Priced cart: frozen lines plus the two order totals"""

    lines: tuple[OrderLineDraft, ...]
    total_amount: Money
    delivery_amount: Money

    @property
    def grand_total(self) -> Money:
        return self.total_amount + self.delivery_amount


def line_delivery_fee(product: Product, line_subtotal: Money, is_delivery: bool) -> Money:
    """Delivery fee for one line.

    No delivery means no fee. Otherwise the fee is waived when the line
    subtotal meets the product's threshold. An unset threshold counts as 0,
    so such a product always delivers free.
    """
    if not is_delivery:
        return Money.zero(line_subtotal.currency)

    threshold = product.free_delivery_threshold
    if threshold is None:
        threshold = Money.zero(line_subtotal.currency)
    if line_subtotal >= threshold:
        return Money.zero(line_subtotal.currency)

    return product.delivery_price


def price_line(line: CartLine, is_delivery: bool, lang: str = "uz") -> OrderLineDraft:
    """Freeze the current product price into an order line"""
    price_per_unit = line.product.price
    total_price = price_per_unit * line.quantity
    return OrderLineDraft(
        product_id=line.product_id,
        product_name=line.product.display_name(lang),
        quantity=line.quantity,
        price_per_unit=price_per_unit,
        total_price=total_price,
        delivery_fee=line_delivery_fee(line.product, total_price, is_delivery),
    )


def price_cart(lines: Iterable[CartLine], is_delivery: bool, currency: str, lang: str = "uz") -> OrderQuote:
    """Price every cart line and sum the order totals"""
    priced = tuple(price_line(line, is_delivery, lang) for line in lines)

    total_amount = Money.zero(currency)
    delivery_amount = Money.zero(currency)
    for line in priced:
        total_amount = total_amount + line.total_price
        delivery_amount = delivery_amount + line.delivery_fee

    return OrderQuote(lines=priced, total_amount=total_amount, delivery_amount=delivery_amount)
