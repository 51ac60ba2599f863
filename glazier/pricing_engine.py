"""
Unit price composition.

Pure math over catalog lookups. The price is an ordered sum of
independently priced factors:

1. Base price
2. Opening cost (per sash, line price replaces opening price when set)
3. Frame color (flat)
4. Glass (per m2 of the overall unit; legacy "triple" is flat)
5. Accessories (flat, grid bars per bar)
6. Size surcharges (small and large sashes)
7. Structural coupling (per joint)

Rounded half-up to a whole unit at the very end. Missing catalog data
falls back to the built-in defaults, never an exception.
"""

from .catalog.defaults import GRID_BARS, LEGACY_SINGLE, LEGACY_TRIPLE
from .catalog.store import CatalogStore
from .compatibility import LINE_SPECS, standard_glass_for
from .layout_engine import cell_dimensions, round_half_up
from .models import OpeningType


class PricingEngine:
    """
    Prices a UnitConfig against one family's catalog.

    store is optional; without one (or with a store for another family)
    the built-in defaults for the unit's family are used.
    """

    OPERABLE_SURCHARGE = 6590
    SMALL_SASH_THRESHOLD = 500
    SMALL_SASH_SURCHARGE = 6000
    LARGE_SASH_THRESHOLD = 1500
    LARGE_SASH_SURCHARGE = 12000
    COUPLING_JOINT_PRICE = 35000

    def __init__(self, store: CatalogStore = None):
        self.store = store

    def _store_for(self, config) -> CatalogStore:
        family = config.material_family.value
        if self.store is not None and self.store.family == family:
            return self.store
        return CatalogStore(family)

    def price(self, config) -> int:
        return self.build_breakdown(config)["total"]

    def build_breakdown(self, config) -> dict:
        """
        Every factor itemised, in composition order.

        Returns:
            {
                "items": [{"factor", "description", "amount"}, ...],
                "<factor>_subtotal": float per factor,
                "subtotal": float,
                "total": int,
            }
        """
        store = self._store_for(config)

        base = store.base_price()
        opening_items = self._calculate_opening_items(config, store)
        color_items = self._calculate_color_items(config, store)
        glass_items = self._calculate_glass_items(config, store)
        accessory_items = self._calculate_accessory_items(config, store)
        size_items = self._calculate_size_surcharges(config)
        structural_items = self._calculate_structural_items(config)

        items = [{"factor": "base", "description": "Base price", "amount": base}]
        items += opening_items + color_items + glass_items
        items += accessory_items + size_items + structural_items

        subtotal = sum(item["amount"] for item in items)
        return {
            "material_family": config.material_family.value,
            "items": items,
            "base_subtotal": base,
            "opening_subtotal": _sum(opening_items),
            "color_subtotal": _sum(color_items),
            "glass_subtotal": _sum(glass_items),
            "accessory_subtotal": _sum(accessory_items),
            "size_surcharge_subtotal": _sum(size_items),
            "structural_subtotal": _sum(structural_items),
            "subtotal": subtotal,
            "total": round_half_up(subtotal),
        }

    def build_project_quote(self, units: list, price_adjustment_pct: float = 0.0) -> dict:
        """
        Prices every unit of a project independently and applies the
        project-wide percentage adjustment to the sum. Unit prices are not
        adjusted individually.
        """
        unit_quotes = []
        for index, config in enumerate(units):
            breakdown = self.build_breakdown(config)
            unit_quotes.append({
                "index": index,
                "config": config,
                "breakdown": breakdown,
                "price": breakdown["total"],
            })
        subtotal = sum(q["price"] for q in unit_quotes)
        adjustment = round_half_up(subtotal * price_adjustment_pct / 100.0)
        return {
            "units": unit_quotes,
            "subtotal": subtotal,
            "adjustment_pct": price_adjustment_pct,
            "adjustment": adjustment,
            "total": subtotal + adjustment,
        }

    def _calculate_opening_items(self, config, store) -> list:
        """
        One item per sash. Per-sash types only count when there is exactly
        one per sash; otherwise every sash takes the unit type. A line with
        a catalog entry replaces the opening price but not the surcharge.
        """
        per_sash = config.per_sash_opening_type
        if per_sash and len(per_sash) == config.sash_count:
            types = [OpeningType(t) for t in per_sash]
        else:
            types = [config.opening_type] * config.sash_count

        line_key = config.line_key
        line_price = None
        if line_key and store.has_entry("profile_lines", line_key):
            line_price = store.price("profile_lines", line_key)

        items = []
        for index, opening in enumerate(types):
            if line_price is not None:
                price = line_price
                source = store.resolve("profile_lines", line_key).label
            else:
                price = store.price("opening_types", opening.value)
                source = store.resolve("opening_types", opening.value).label
            surcharge = self.OPERABLE_SURCHARGE if opening != OpeningType.FIXED else 0
            items.append({
                "factor": "opening",
                "description": f"Sash {index + 1}: {source}",
                "amount": price + surcharge,
            })
        return items

    def _calculate_color_items(self, config, store) -> list:
        entry = store.resolve("frame_colors", config.color_key)
        return [{"factor": "color", "description": f"Color: {entry.label}", "amount": entry.price}]

    def _calculate_glass_items(self, config, store) -> list:
        """
        Area-scaled by the overall unit size. The legacy triple glazing key is
        a flat price per unit unless an override supplied its price. Legacy
        single glazing takes the price of the line's standard glass.
        """
        key = config.glass_key
        area_m2 = config.overall_width * config.overall_height / 1e6
        entry = store.resolve("glass_types", key)

        if key == LEGACY_TRIPLE and not store.price_is_overridden("glass_types", key):
            amount = entry.price
            description = f"Glass: {entry.label} (per unit)"
        elif key == LEGACY_SINGLE and config.line_key in LINE_SPECS:
            standard = store.resolve("glass_types", standard_glass_for(config.line_key, store))
            amount = standard.price * area_m2
            description = f"Glass: {entry.label} as {standard.label}, {area_m2:.2f} m2"
        else:
            amount = entry.price * area_m2
            description = f"Glass: {entry.label}, {area_m2:.2f} m2"
        return [{"factor": "glass", "description": description, "amount": amount}]

    def _calculate_accessory_items(self, config, store) -> list:
        items = []
        for key in config.accessories:
            entry = store.resolve("accessories", key)
            if key == GRID_BARS:
                bars = self._count_grid_bars(config)
                items.append({
                    "factor": "accessory",
                    "description": f"{entry.label}: {bars} bars",
                    "amount": bars * entry.price,
                })
            else:
                items.append({"factor": "accessory", "description": entry.label, "amount": entry.price})
        return items

    def _count_grid_bars(self, config) -> int:
        """Horizontal + vertical bars over all sashes, per-sash counts first."""
        rows_per = config.grid_rows_per_sash
        cols_per = config.grid_cols_per_sash
        if rows_per is None and cols_per is None:
            return (config.grid_rows + config.grid_cols) * config.sash_count
        total = 0
        for index in range(config.sash_count):
            rows = rows_per[index] if rows_per and index < len(rows_per) else config.grid_rows
            cols = cols_per[index] if cols_per and index < len(cols_per) else config.grid_cols
            total += rows + cols
        return total

    def _calculate_size_surcharges(self, config) -> list:
        """Both surcharges can apply to the same unit."""
        dimensions = cell_dimensions(config)
        items = []
        if any(min(w, h) < self.SMALL_SASH_THRESHOLD for w, h in dimensions):
            items.append({
                "factor": "size",
                "description": f"Small sash surcharge (under {self.SMALL_SASH_THRESHOLD}mm)",
                "amount": self.SMALL_SASH_SURCHARGE,
            })
        if any(max(w, h) > self.LARGE_SASH_THRESHOLD for w, h in dimensions):
            items.append({
                "factor": "size",
                "description": f"Large sash surcharge (over {self.LARGE_SASH_THRESHOLD}mm)",
                "amount": self.LARGE_SASH_SURCHARGE,
            })
        return items

    def _calculate_structural_items(self, config) -> list:
        joints = config.sash_count - 1
        if not config.structural_coupling or joints <= 0:
            return []
        return [{
            "factor": "structural",
            "description": f"Structural coupling tube x{joints}",
            "amount": self.COUPLING_JOINT_PRICE * joints,
        }]


def _sum(items: list) -> float:
    return sum(item["amount"] for item in items)
