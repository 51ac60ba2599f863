"""
Glass / profile-line compatibility tests.

Tests:
1-5.   is_compatible and the insulated class
6-9.   standard_glass_for
10-12. heal_glass
13-14. default_line_for
"""

import pytest

from glazier.catalog import CatalogStore
from glazier.compatibility import (
    LINE_SPECS,
    default_line_for,
    glass_thickness,
    heal_glass,
    is_compatible,
    is_insulated,
    standard_glass_for,
)
from glazier.schemas import UnitConfig


def _store_with_dgu(thickness):
    return CatalogStore("aluminum", {
        "glass_types": {
            "dgu": {"label": "DGU", "price": 40000, "attributes": {"kind": "insulated", "thickness": thickness}},
        },
    })


# ============================================================
# is_compatible
# ============================================================

def test_thickness_must_be_in_valid_set():
    assert is_compatible("clear_4", "al_25")
    assert is_compatible("laminated_6", "al_25")
    assert not is_compatible("clear_3", "al_25")
    assert not is_compatible("clear_8", "al_5000")


def test_unknown_line_accepts_anything():
    assert is_compatible("clear_10", "pvc_58cd")
    assert is_compatible("triple", None)
    assert is_compatible("no_such_glass", "mystery_line")


def test_legacy_double_is_insulated():
    assert is_insulated("double")
    assert glass_thickness("double") == 18
    assert is_compatible("double", "al_25")


def test_insulated_band_is_exclusive():
    assert is_insulated("dgu", _store_with_dgu(12))
    assert not is_insulated("dgu", _store_with_dgu(10))
    assert not is_insulated("dgu", _store_with_dgu(20))
    # 12mm is not a valid single-pane thickness, but the insulated class is allowed
    assert is_compatible("dgu", "al_42", _store_with_dgu(12))


def test_unknown_glass_is_four_mm():
    assert glass_thickness("mystery") == 4
    assert is_compatible("mystery", "al_25")


# ============================================================
# standard_glass_for
# ============================================================

def test_standard_glass_is_thinnest_clear():
    assert standard_glass_for("al_25") == "clear_4"
    assert standard_glass_for("al_5000") == "clear_3"
    assert standard_glass_for("am_35") == "clear_5"


def test_standard_glass_unknown_line_falls_back():
    assert standard_glass_for("pvc_70cd") == "clear_4"


@pytest.mark.parametrize("line_key", sorted(LINE_SPECS))
def test_standard_glass_always_compatible(line_key):
    assert is_compatible(standard_glass_for(line_key), line_key)


def test_standard_glass_skips_deleted_options():
    store = CatalogStore("aluminum", {"glass_types": {"clear_3": {"deleted": True}}})
    assert standard_glass_for("al_5000", store) == "clear_4"


# ============================================================
# heal_glass
# ============================================================

def test_heal_glass_substitutes_standard():
    config = UnitConfig(line_key="al_5000", glass_key="clear_6")
    healed = heal_glass(config)
    assert healed.glass_key == "clear_3"
    assert config.glass_key == "clear_6"


def test_heal_glass_keeps_compatible_glass():
    config = UnitConfig(line_key="al_25", glass_key="bronze_6")
    assert heal_glass(config) is config


def test_heal_glass_never_leaves_glass_unset():
    config = UnitConfig(line_key="al_42", glass_key="")
    assert heal_glass(config).glass_key == "clear_4"


# ============================================================
# default_line_for
# ============================================================

def test_aluminum_line_follows_opening_type():
    assert default_line_for("aluminum", "door_left") == "am_35"
    assert default_line_for("aluminum", "door_with_sidelites") == "am_35"
    assert default_line_for("aluminum", "slider") == "al_25"
    assert default_line_for("aluminum", "sliding_door") == "al_25"
    assert default_line_for("aluminum", "casement_right", "al_25") == "al_42"


def test_pvc_keeps_current_line():
    assert default_line_for("pvc", "fixed", "pvc_70cd") == "pvc_70cd"
    assert default_line_for("pvc", "fixed") == "pvc_58cd"
