"""
Project quote PDF tests.

Tests:
1-3. Unit summary text
4-5. Formatting helpers
6-8. PDF rendering
"""

from datetime import datetime

from glazier.catalog import CatalogStore
from glazier.cut_lists.registry import cut_list_for_unit
from glazier.layout_engine import apply_update, new_unit
from glazier.pdf_generator import _fmt, _safe, generate_project_pdf, generate_unit_summary
from glazier.pricing_engine import PricingEngine


def _sample_project():
    return {
        "project_number": "GZ-2026-0007",
        "name": "Casa Norte",
        "client_name": "Ana Ruiz",
        "client_address": "Av. Costanera 120",
        "notes": "Install after plastering \u2014 confirm sill height.",
        "material_family": "aluminum",
        "created_at": datetime(2026, 3, 2, 10, 30),
    }


def _sample_units():
    return [
        new_unit("aluminum"),
        apply_update(new_unit("aluminum"), {"opening_type": "door_with_sidelites"}),
    ]


def _sample_quote(units, pct=0.0):
    return PricingEngine(CatalogStore("aluminum")).build_project_quote(units, pct)


# ============================================================
# Unit summary
# ============================================================

def test_summary_with_labels():
    labels = {"al_25": "AL 25", "clear_4": "Clear 4mm", "white": "White"}
    summary = generate_unit_summary(new_unit("aluminum"), labels)
    assert summary == "1000 x 1000 mm slider, AL 25 line, Clear 4mm glass, White frame."


def test_summary_without_labels_uses_keys():
    summary = generate_unit_summary(_sample_units()[1])
    assert summary == (
        "1000 x 1000 mm door with sidelites, 3 sashes (horizontal), "
        "am_35 line, clear_5 glass, white frame."
    )


def test_summary_omits_missing_line():
    config = new_unit("aluminum").model_copy(update={"line_key": None})
    assert " line" not in generate_unit_summary(config)


# ============================================================
# Helpers
# ============================================================

def test_fmt_currency():
    assert _fmt(183090) == "$183,090"
    assert _fmt(None) == "$0"


def test_safe_replaces_typographic_chars():
    assert _safe("\u201cFixed\u201d \u2013 left") == '"Fixed" - left'
    assert _safe(None) == ""


# ============================================================
# Rendering
# ============================================================

def test_pdf_generates_valid_bytes():
    units = _sample_units()
    details = [{"summary": generate_unit_summary(u), "cut_list": cut_list_for_unit(u)} for u in units]
    pdf = bytes(generate_project_pdf(_sample_project(), _sample_quote(units), details))
    assert pdf[:4] == b"%PDF"
    assert len(pdf) > 1000


def test_pdf_with_adjustment_and_no_details():
    units = _sample_units()
    pdf = bytes(generate_project_pdf(_sample_project(), _sample_quote(units, -7.5)))
    assert pdf[:4] == b"%PDF"


def test_pdf_with_provisional_cut_list():
    unit = new_unit("aluminum", {"opening_type": "projecting", "line_key": "s38_rpt"})
    cut_list = cut_list_for_unit(unit)
    assert cut_list["provisional"] is True
    pdf = bytes(generate_project_pdf(
        {"project_number": "GZ-2026-0008", "name": "Taller"},
        _sample_quote([unit]),
        [{"summary": "S-38 projecting", "cut_list": cut_list}],
    ))
    assert pdf[:4] == b"%PDF"
