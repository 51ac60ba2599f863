"""
Glass / profile-line compatibility.

Each aluminum line accepts a fixed set of glass thicknesses. Insulated
units (the legacy "double" key, or anything between 10mm and 20mm) are a
separate class gated only by allows_insulated. Lines without a spec accept
any glass.

Conflicts are never reported to the caller: heal_glass() swaps in the line's
standard glass instead.
"""

import logging
from dataclasses import dataclass

from .catalog.defaults import (
    FALLBACK_GLASS_KEY,
    FAMILY_DEFAULT_LINE,
    GLASS_TYPES,
    LEGACY_DOUBLE,
    LEGACY_GLASS_THICKNESS,
)
from .models import OpeningType

logger = logging.getLogger(__name__)

DEFAULT_GLASS_THICKNESS = 4

# Insulated units sit strictly inside this band
INSULATED_MIN_MM = 10
INSULATED_MAX_MM = 20


@dataclass(frozen=True)
class LineSpec:
    line_key: str
    valid_thicknesses: frozenset
    allows_insulated: bool = True


LINE_SPECS = {
    "al_5000": LineSpec("al_5000", frozenset({3, 4})),
    "al_20": LineSpec("al_20", frozenset({3, 4})),
    "al_25": LineSpec("al_25", frozenset({4, 5, 6})),
    "al_32": LineSpec("al_32", frozenset({3, 4, 5})),
    "al_42": LineSpec("al_42", frozenset({4, 5, 6})),
    "am_35": LineSpec("am_35", frozenset({5, 6, 8})),
}

_DOOR_TYPES = (
    OpeningType.DOOR_LEFT,
    OpeningType.DOOR_RIGHT,
    OpeningType.DOOR_WITH_SIDELITES,
)


def _glass_options(store=None) -> list:
    """(key, attributes) pairs in catalog order."""
    if store is not None:
        return [(e.key, e.attributes) for e in store.options("glass_types")]
    return [(key, entry) for key, entry in GLASS_TYPES.items()]


def glass_thickness(glass_key: str, store=None) -> int:
    """Nominal thickness in mm. Unknown glass is treated as 4mm."""
    if glass_key in LEGACY_GLASS_THICKNESS:
        return LEGACY_GLASS_THICKNESS[glass_key]
    if store is not None:
        thickness = store.resolve("glass_types", glass_key).attributes.get("thickness")
        if thickness is not None:
            return int(thickness)
    entry = GLASS_TYPES.get(glass_key)
    if entry is not None:
        return entry["thickness"]
    return DEFAULT_GLASS_THICKNESS


def is_insulated(glass_key: str, store=None) -> bool:
    if glass_key == LEGACY_DOUBLE:
        return True
    thickness = glass_thickness(glass_key, store)
    return INSULATED_MIN_MM < thickness < INSULATED_MAX_MM


def is_compatible(glass_key: str, line_key: str, store=None) -> bool:
    spec = LINE_SPECS.get(line_key)
    if spec is None:
        return True
    if is_insulated(glass_key, store):
        return spec.allows_insulated
    return glass_thickness(glass_key, store) in spec.valid_thicknesses


def standard_glass_for(line_key: str, store=None) -> str:
    """
    Thinnest clear glass the line accepts. Ties keep catalog order.
    Falls back to clear 4mm when the line has no spec or no candidate.
    """
    spec = LINE_SPECS.get(line_key)
    if spec is None:
        return FALLBACK_GLASS_KEY
    best_key = None
    best_thickness = None
    for key, attributes in _glass_options(store):
        if attributes.get("kind") != "clear":
            continue
        thickness = attributes.get("thickness")
        if thickness not in spec.valid_thicknesses:
            continue
        if best_thickness is None or thickness < best_thickness:
            best_key, best_thickness = key, thickness
    return best_key or FALLBACK_GLASS_KEY


def heal_glass(config, store=None):
    """Return config with a glass the line accepts. Never leaves glass unset."""
    glass_key = config.glass_key
    if glass_key and is_compatible(glass_key, config.line_key, store):
        return config
    replacement = standard_glass_for(config.line_key, store)
    logger.debug(
        "Glass %r not valid for line %s, substituting %s",
        glass_key, config.line_key, replacement,
    )
    return config.model_copy(update={"glass_key": replacement})


def default_line_for(family, opening_type, current_line: str = None) -> str:
    """
    Line picked when the opening type changes.
    Aluminum hinged doors go on AM 35, sliders and sliding doors on AL 25,
    everything else on AL 42. PVC keeps its current line.
    """
    family = getattr(family, "value", family)
    if family != "aluminum":
        return current_line or FAMILY_DEFAULT_LINE.get(family)
    opening_type = OpeningType(opening_type)
    if opening_type in _DOOR_TYPES:
        return "am_35"
    if opening_type in (OpeningType.SLIDER, OpeningType.SLIDING_DOOR):
        return "al_25"
    return "al_42"
