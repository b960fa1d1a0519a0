"""
Order pricing

Pure computation: no I/O, deterministic for a given request and catalog.
"""
from dataclasses import dataclass, field
from typing import List, Mapping, Sequence

from shop.schemas.order import OrderItemCreate


@dataclass(frozen=True)
class PricedLine:
    """A requested line matched against the catalog"""
    product_id: int
    quantity: int
    unit_price: float
    line_total: float


@dataclass(frozen=True)
class PricedOrder:
    """Priced lines and their grand total"""
    lines: List[PricedLine] = field(default_factory=list)
    grand_total: float = 0.0


def price_order(
    requested_lines: Sequence[OrderItemCreate],
    catalog: Mapping[int, float]
) -> PricedOrder:
    """
    Price requested lines against current catalog prices
    
    Each requested line is priced on its own, so a product ID requested
    twice yields two lines. A line whose product is missing from the
    catalog is dropped from both the lines and the total; if nothing
    matches the result is an empty order with a zero total.
    
    Args:
        requested_lines: Lines with product_id and quantity
        catalog: Product ID to current unit price
    
    Returns:
        PricedOrder with the surviving lines in request order
    """
    lines = []
    for requested in requested_lines:
        unit_price = catalog.get(requested.product_id)
        if unit_price is None:
            continue
        lines.append(PricedLine(
            product_id=requested.product_id,
            quantity=requested.quantity,
            unit_price=unit_price,
            line_total=unit_price * requested.quantity
        ))
    
    return PricedOrder(
        lines=lines,
        grand_total=sum(line.line_total for line in lines)
    )
