"""
Insulated glass unit quoting.

A standalone order of sealed units, separate from window configuration.
Each line suggests a unit price from its two panes: the sum of both
glass prices per m2 times the unit area. An explicit unit_price wins.
Line total is unit price times quantity; the order total is the sum of
line totals. Spacer, gas and blind options are recorded, not priced.
"""

import logging

from .catalog.store import CatalogStore
from .layout_engine import round_half_up

logger = logging.getLogger(__name__)


def area_m2(item) -> float:
    return item.width * item.height / 1e6


def suggested_unit_price(item, store: CatalogStore = None) -> int:
    """Cost of both panes for one unit, rounded half-up."""
    store = store or CatalogStore()
    pane_prices = store.price("glass_types", item.outer_glass_key) + store.price(
        "glass_types", item.inner_glass_key
    )
    return round_half_up(pane_prices * area_m2(item))


def calculate_item(item, store: CatalogStore = None) -> dict:
    unit_price = item.unit_price
    if unit_price is None:
        unit_price = suggested_unit_price(item, store)
    return {
        "quantity": item.quantity,
        "width": item.width,
        "height": item.height,
        "area_m2": round(area_m2(item), 4),
        "unit_price": unit_price,
        "line_total": unit_price * item.quantity,
    }


def calculate_order(items: list, store: CatalogStore = None) -> dict:
    store = store or CatalogStore()
    lines = [calculate_item(item, store) for item in items]
    total = sum(line["line_total"] for line in lines)
    logger.debug("Insulated glass order: %d lines, total %s", len(lines), total)
    return {"items": lines, "total": total}
