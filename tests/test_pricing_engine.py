"""
Price composition tests. Pure math over the built-in catalogs.

Default aluminum slider, 1000 x 1000, AL 25, white, clear 4mm:
    base 60000 + AL 25 line 75000 + operable 6590 + white 26000
    + clear 4mm 9500/m2 * 1.0 + small sash 6000 (460mm cells) = 183090

Tests:
1-4.   Full unit prices
5-9.   Opening cost
10-13. Glass cost and the legacy keys
14-15. Grid bars
16-18. Size and structural surcharges
19-21. Missing catalog data
22-23. Project quote
"""

import pytest

from glazier.catalog import CatalogStore
from glazier.layout_engine import apply_update, new_unit
from glazier.pricing_engine import PricingEngine
from glazier.schemas import UnitConfig


def _sample_slider():
    return new_unit("aluminum")


def _sample_sidelite_door():
    return apply_update(new_unit("aluminum"), {"opening_type": "door_with_sidelites"})


def _items(breakdown, factor):
    return [item for item in breakdown["items"] if item["factor"] == factor]


# ============================================================
# Full unit prices
# ============================================================

def test_default_slider_price():
    assert PricingEngine().price(_sample_slider()) == 183090


def test_breakdown_subtotals():
    breakdown = PricingEngine().build_breakdown(_sample_slider())
    assert breakdown["base_subtotal"] == 60000
    assert breakdown["opening_subtotal"] == 81590
    assert breakdown["color_subtotal"] == 26000
    assert breakdown["glass_subtotal"] == pytest.approx(9500)
    assert breakdown["accessory_subtotal"] == 0
    assert breakdown["size_surcharge_subtotal"] == 6000
    assert breakdown["structural_subtotal"] == 0
    assert breakdown["total"] == 183090
    assert [item["factor"] for item in breakdown["items"]] == [
        "base", "opening", "color", "glass", "size",
    ]


def test_pvc_slider_price():
    """PVC 58 CD carries a zero line price, which still replaces the opening price."""
    assert PricingEngine(CatalogStore("pvc")).price(new_unit("pvc")) == 271090


def test_sidelite_door_price():
    # base 60000, openings 45000 + (45000 + 6590) + 45000, white 26000,
    # clear 5mm 12500, grid bars 4 * 3000, small sash 6000
    assert PricingEngine().price(_sample_sidelite_door()) == 258090


# ============================================================
# Opening cost
# ============================================================

def test_opening_price_times_sash_count_without_line():
    config = UnitConfig(opening_type="projecting", sash_count=2, line_key=None)
    items = _items(PricingEngine().build_breakdown(config), "opening")
    assert [item["amount"] for item in items] == [36590, 36590]


def test_fixed_sash_has_no_surcharge():
    config = UnitConfig(opening_type="fixed", sash_count=2, line_key=None)
    breakdown = PricingEngine().build_breakdown(config)
    assert breakdown["opening_subtotal"] == 0


def test_per_sash_types_priced_per_cell():
    config = UnitConfig(
        opening_type="fixed", sash_count=2, line_key=None,
        per_sash_opening_type=["fixed", "awning"],
    )
    breakdown = PricingEngine().build_breakdown(config)
    assert breakdown["opening_subtotal"] == 34000 + 6590


def test_per_sash_types_ignored_when_length_differs():
    config = UnitConfig(
        opening_type="fixed", sash_count=3, line_key=None,
        per_sash_opening_type=["awning", "awning"],
    )
    assert PricingEngine().build_breakdown(config)["opening_subtotal"] == 0


def test_unknown_line_uses_opening_price():
    config = UnitConfig(opening_type="projecting", sash_count=1, line_key="mystery")
    assert PricingEngine().build_breakdown(config)["opening_subtotal"] == 36590


# ============================================================
# Glass
# ============================================================

def test_glass_is_area_scaled():
    config = UnitConfig(opening_type="fixed", line_key=None, glass_key="bronze_4",
                        overall_width=2000, overall_height=1500)
    assert PricingEngine().build_breakdown(config)["glass_subtotal"] == pytest.approx(19900 * 3.0)


def test_legacy_triple_is_flat_per_unit():
    small = UnitConfig(opening_type="fixed", line_key=None, glass_key="triple")
    large = small.model_copy(update={"overall_width": 2000, "overall_height": 2000})
    engine = PricingEngine()
    assert engine.build_breakdown(small)["glass_subtotal"] == 45000
    assert engine.build_breakdown(large)["glass_subtotal"] == 45000


def test_legacy_triple_with_override_price_is_area_scaled():
    store = CatalogStore("aluminum", {"glass_types": {"triple": {"price": 50000}}})
    config = UnitConfig(opening_type="fixed", line_key=None, glass_key="triple",
                        overall_width=2000, overall_height=1000)
    assert PricingEngine(store).build_breakdown(config)["glass_subtotal"] == pytest.approx(100000)


def test_legacy_single_uses_line_standard_glass():
    with_line = UnitConfig(glass_key="single", line_key="al_5000")
    without_line = UnitConfig(glass_key="single", line_key=None)
    engine = PricingEngine()
    assert engine.build_breakdown(with_line)["glass_subtotal"] == pytest.approx(7000)
    assert engine.build_breakdown(without_line)["glass_subtotal"] == pytest.approx(8200)


# ============================================================
# Grid bars
# ============================================================

def test_grid_bars_per_sash_only_on_outer_lites():
    """[2, 0, 2] on the sidelite template prices bars on sashes 0 and 2 only."""
    breakdown = PricingEngine().build_breakdown(_sample_sidelite_door())
    grid = _items(breakdown, "accessory")
    assert len(grid) == 1
    assert grid[0]["amount"] == 4 * 3000
    assert "4 bars" in grid[0]["description"]

    center_bars = apply_update(_sample_sidelite_door(), {"grid_rows_per_sash": [0, 3, 0]})
    grid = _items(PricingEngine().build_breakdown(center_bars), "accessory")
    assert grid[0]["amount"] == 3 * 3000


def test_grid_bars_global_counts():
    config = UnitConfig(opening_type="fixed", sash_count=2, line_key=None,
                        accessories=["grid_bars", "insect_screen"], grid_rows=1, grid_cols=2)
    items = _items(PricingEngine().build_breakdown(config), "accessory")
    assert [item["amount"] for item in items] == [6 * 3000, 50000]


# ============================================================
# Size and structural surcharges
# ============================================================

def test_small_and_large_surcharges_together():
    config = UnitConfig(opening_type="fixed", sash_count=2, line_key=None,
                        overall_width=3400, overall_height=500)
    items = _items(PricingEngine().build_breakdown(config), "size")
    assert [item["amount"] for item in items] == [6000, 12000]


def test_no_size_surcharge_in_normal_range():
    config = UnitConfig(opening_type="fixed", sash_count=1, line_key=None,
                        overall_width=1200, overall_height=1200)
    assert PricingEngine().build_breakdown(config)["size_surcharge_subtotal"] == 0


def test_structural_coupling_per_joint():
    coupled = UnitConfig(opening_type="fixed", sash_count=3, structural_coupling=True)
    single = UnitConfig(opening_type="fixed", sash_count=1, structural_coupling=True)
    engine = PricingEngine()
    assert engine.build_breakdown(coupled)["structural_subtotal"] == 2 * 35000
    assert engine.build_breakdown(single)["structural_subtotal"] == 0


# ============================================================
# Missing catalog data
# ============================================================

def test_unavailable_catalog_equals_builtin_defaults():
    config = _sample_sidelite_door()
    assert (
        PricingEngine(CatalogStore("aluminum", None)).price(config)
        == PricingEngine(CatalogStore("aluminum", {})).price(config)
        == PricingEngine().price(config)
    )


def test_unknown_keys_price_as_zero():
    config = UnitConfig(opening_type="fixed", line_key=None, color_key="neon",
                        glass_key="unobtainium", accessories=["jetpack"])
    breakdown = PricingEngine().build_breakdown(config)
    assert breakdown["color_subtotal"] == 0
    assert breakdown["glass_subtotal"] == 0
    assert breakdown["accessory_subtotal"] == 0
    assert breakdown["total"] >= 60000


@pytest.mark.parametrize("updates", [
    {},
    {"opening_type": "fixed"},
    {"opening_type": "awning", "sash_count": 3},
    {"material_family": "pvc"},
    {"overall_width": 320, "overall_height": 240},
])
def test_price_never_below_base(updates):
    config = apply_update(new_unit("aluminum"), updates)
    store = CatalogStore(config.material_family)
    assert PricingEngine(store).price(config) >= store.base_price()


def test_override_changes_price():
    store = CatalogStore("aluminum", {"base": {"base": {"price": 70000}}})
    assert PricingEngine(store).price(_sample_slider()) == 193090


def test_deleted_option_still_prices_from_default():
    store = CatalogStore("aluminum", {"glass_types": {"clear_4": {"deleted": True}}})
    assert PricingEngine(store).price(_sample_slider()) == 183090


# ============================================================
# Project quote
# ============================================================

def test_project_quote_applies_adjustment_to_total():
    units = [_sample_slider(), _sample_slider()]
    quote = PricingEngine().build_project_quote(units, 10)
    assert [u["price"] for u in quote["units"]] == [183090, 183090]
    assert quote["subtotal"] == 366180
    assert quote["adjustment"] == 36618
    assert quote["total"] == 402798


def test_project_quote_discount():
    quote = PricingEngine().build_project_quote([_sample_slider()], -5)
    assert quote["adjustment"] == -9154
    assert quote["total"] == 183090 - 9154
