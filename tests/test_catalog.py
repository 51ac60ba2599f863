"""
Catalog store tests: per-key override merge, fallback chain, override source.

Tests:
1-4.   merge_overrides
5-12.  CatalogStore lookups and fallbacks
13-15. Override source (catalog_overrides table)
"""

from unittest.mock import MagicMock

from sqlalchemy.exc import SQLAlchemyError

from glazier import models
from glazier.catalog import CatalogStore, merge_overrides, zero_entry
from glazier.catalog.defaults import ALUMINUM_DEFAULTS, PVC_DEFAULTS
from glazier.catalog.source import fetch_catalog_overrides, load_catalog


def _sample_defaults():
    return {
        "white": {"label": "White", "price": 100},
        "black": {"label": "Black", "price": 200},
    }


# ============================================================
# merge_overrides
# ============================================================

def test_merge_replaces_only_overridden_key():
    """An override for one key leaves the other defaults untouched."""
    merged = merge_overrides(_sample_defaults(), {"white": {"price": 150}})
    assert merged["white"]["price"] == 150
    assert merged["white"]["label"] == "White"
    assert merged["black"] == {"label": "Black", "price": 200}


def test_merge_partial_external_data_never_hides_defaults():
    """A category override with one key still exposes every built-in key."""
    merged = merge_overrides(_sample_defaults(), {"red": {"label": "Red", "price": 300}})
    assert set(merged) == {"white", "black", "red"}
    assert merged["red"]["overridden"] is True


def test_merge_none_label_keeps_default_label():
    merged = merge_overrides(_sample_defaults(), {"black": {"label": None, "price": 250}})
    assert merged["black"]["label"] == "Black"
    assert merged["black"]["price"] == 250


def test_merge_without_overrides_is_a_copy():
    defaults = _sample_defaults()
    merged = merge_overrides(defaults, None)
    assert merged == defaults
    merged["white"]["price"] = 1
    assert defaults["white"]["price"] == 100


# ============================================================
# CatalogStore
# ============================================================

def test_resolve_builtin_default():
    store = CatalogStore("aluminum")
    entry = store.resolve("glass_types", "clear_4")
    assert entry.price == 9500
    assert entry.label == "Clear 4mm"
    assert entry.attributes["thickness"] == 4


def test_resolve_unknown_key_is_zero_entry():
    """Unknown keys never raise: zero price, label is the key."""
    store = CatalogStore("aluminum")
    entry = store.resolve("frame_colors", "neon_pink")
    assert entry == zero_entry("neon_pink")
    assert entry.price == 0
    assert store.has_entry("frame_colors", "neon_pink") is False


def test_base_price_per_family():
    assert CatalogStore("aluminum").base_price() == ALUMINUM_DEFAULTS["base"]["base"]["price"]
    assert CatalogStore(models.MaterialFamily.PVC).base_price() == PVC_DEFAULTS["base"]["base"]["price"]


def test_unknown_family_falls_back_to_aluminum():
    store = CatalogStore("bamboo")
    assert store.family == "aluminum"
    assert store.base_price() == 60000


def test_override_price_and_attributes():
    store = CatalogStore("aluminum", {
        "glass_types": {"clear_4": {"price": 9900, "attributes": {"thickness": 4, "supplier": "Vitro"}}},
    })
    entry = store.resolve("glass_types", "clear_4")
    assert entry.price == 9900
    assert entry.attributes["supplier"] == "Vitro"
    assert entry.attributes["kind"] == "clear"
    assert store.is_overridden("glass_types", "clear_4")
    assert store.price_is_overridden("glass_types", "clear_4")


def test_override_with_same_price_is_not_a_price_override():
    store = CatalogStore("aluminum", {"glass_types": {"triple": {"label": "Triple DGU"}}})
    assert store.is_overridden("glass_types", "triple")
    assert store.price_is_overridden("glass_types", "triple") is False
    assert store.resolve("glass_types", "triple").label == "Triple DGU"


def test_deleted_key_hidden_but_still_resolves_to_default():
    """Explicit delete hides the option; saved units keep pricing from the default."""
    store = CatalogStore("aluminum", {"frame_colors": {"walnut": {"deleted": True, "price": 1}}})
    keys = [entry.key for entry in store.options("frame_colors")]
    assert "walnut" not in keys
    assert "white" in keys
    assert store.price("frame_colors", "walnut") == 33000
    assert store.has_entry("frame_colors", "walnut")
    assert store.is_overridden("frame_colors", "walnut") is False


def test_listing_marks_overridden_entries():
    store = CatalogStore("pvc", {"profile_lines": {"pvc_70cd": {"price": 18000}}})
    listing = {item["key"]: item for item in store.listing("profile_lines")}
    assert listing["pvc_70cd"]["overridden"] is True
    assert listing["pvc_70cd"]["price"] == 18000
    assert listing["pvc_58cd"]["overridden"] is False
    assert set(store.categories()) == {
        "base", "opening_types", "frame_colors", "glass_types", "accessories", "profile_lines",
    }


# ============================================================
# Override source
# ============================================================

def test_fetch_overrides_from_table(db):
    db.add(models.CatalogOverride(
        family="aluminum", category="frame_colors", key="white", label="Arctic white", price=27000,
    ))
    db.add(models.CatalogOverride(
        family="pvc", category="frame_colors", key="white", price=1,
    ))
    db.commit()

    overrides = fetch_catalog_overrides(db, models.MaterialFamily.ALUMINUM)
    assert overrides == {
        "frame_colors": {
            "white": {"label": "Arctic white", "price": 27000, "attributes": {}, "deleted": False},
        },
    }
    store = load_catalog(db, "aluminum")
    assert store.resolve("frame_colors", "white").label == "Arctic white"


def test_fetch_overrides_unavailable_returns_none():
    """A failing store yields None, never an exception."""
    session = MagicMock()
    session.query.side_effect = SQLAlchemyError("database is locked")
    assert fetch_catalog_overrides(session, "aluminum") is None


def test_load_catalog_unavailable_uses_defaults():
    session = MagicMock()
    session.query.side_effect = SQLAlchemyError("connection refused")
    store = load_catalog(session, "pvc")
    assert store.base_price() == 220000
    assert store.is_overridden("frame_colors", "white") is False
