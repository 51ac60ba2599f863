"""
Built-in catalog tables, one per material family.

These are the fallback prices used whenever no override exists for a key,
including when the override store is unreachable. Every key referenced by a
pricing or layout rule must exist here.

Glass prices are per square meter. Everything else is a flat price per unit,
except grid_bars which is priced per bar.
"""

# Shared glass table. "kind" drives standard-glass selection, "thickness"
# drives line compatibility.
GLASS_TYPES = {
    # Clear float
    "clear_3": {"label": "Clear 3mm", "price": 7000, "kind": "clear", "thickness": 3},
    "clear_4": {"label": "Clear 4mm", "price": 9500, "kind": "clear", "thickness": 4},
    "clear_5": {"label": "Clear 5mm", "price": 12500, "kind": "clear", "thickness": 5},
    "clear_6": {"label": "Clear 6mm", "price": 18000, "kind": "clear", "thickness": 6},
    "clear_8": {"label": "Clear 8mm", "price": 32000, "kind": "clear", "thickness": 8},
    "clear_10": {"label": "Clear 10mm", "price": 38000, "kind": "clear", "thickness": 10},
    # Tinted
    "bronze_4": {"label": "Bronze 4mm", "price": 19900, "kind": "bronze", "thickness": 4},
    "bronze_5": {"label": "Bronze 5mm", "price": 24650, "kind": "bronze", "thickness": 5},
    "bronze_6": {"label": "Bronze 6mm", "price": 29900, "kind": "bronze", "thickness": 6},
    "mirror_4": {"label": "Mirror 4mm", "price": 19900, "kind": "mirror", "thickness": 4},
    # Obscured / decorative
    "satin_4": {"label": "Satin 4mm", "price": 26950, "kind": "satin", "thickness": 4},
    "satin_5": {"label": "Satin 5mm", "price": 32450, "kind": "satin", "thickness": 5},
    "seed_4": {"label": "Seed 4mm", "price": 12000, "kind": "seed", "thickness": 4},
    "seed_bronze_4": {"label": "Seed Bronze 4mm", "price": 19900, "kind": "seed_bronze", "thickness": 4},
    "frosted_4": {"label": "Frosted 4mm", "price": 26950, "kind": "frosted", "thickness": 4},
    "frosted_5": {"label": "Frosted 5mm", "price": 32450, "kind": "frosted", "thickness": 5},
    # Safety
    "laminated_5": {"label": "Laminated 5mm", "price": 18000, "kind": "laminated", "thickness": 5},
    "laminated_6": {"label": "Laminated 6mm", "price": 22000, "kind": "laminated", "thickness": 6},
    "laminated_8": {"label": "Laminated 8mm", "price": 28000, "kind": "laminated", "thickness": 8},
    "laminated_10": {"label": "Laminated 10mm", "price": 49900, "kind": "laminated", "thickness": 10},
    "tempered_10": {"label": "Tempered 10mm", "price": 69900, "kind": "tempered", "thickness": 10},
    # Solar control
    "evergreen_4": {"label": "Evergreen 4mm", "price": 35000, "kind": "evergreen", "thickness": 4},
    "solar_cool_4": {"label": "Solar Cool Bronze 4mm", "price": 29900, "kind": "solar_cool", "thickness": 4},
    "solar_green_4": {"label": "Solar Green 4mm", "price": 50000, "kind": "solar_green", "thickness": 4},
    "reflex_bronze_4": {"label": "Reflex Bronze 4mm", "price": 29900, "kind": "reflex_bronze", "thickness": 4},
    "reflex_bronze_5": {"label": "Reflex Bronze 5mm", "price": 39900, "kind": "reflex_bronze", "thickness": 5},
    "bluegreen_6": {"label": "Bluegreen 6mm", "price": 39900, "kind": "bluegreen", "thickness": 6},
    # Acrylic panels for shower enclosures
    "acrylic_rain": {"label": "Acrylic Rain 3mm", "price": 15600, "kind": "acrylic", "thickness": 3},
    "acrylic_bubbles": {"label": "Acrylic Bubbles 3mm", "price": 15600, "kind": "acrylic", "thickness": 3},
    "acrylic_arabesque": {"label": "Acrylic Arabesque 3mm", "price": 15900, "kind": "acrylic", "thickness": 3},
    "acrylic_amazon": {"label": "Acrylic Amazon 3mm", "price": 15600, "kind": "acrylic", "thickness": 3},
    "acrylic_gulls": {"label": "Acrylic Gulls 3mm", "price": 15600, "kind": "acrylic", "thickness": 3},
}

# Legacy glazing keys kept for projects saved before the glass table existed.
# "double" is the insulated-unit marker; "triple" is priced flat per unit.
LEGACY_SINGLE = "single"
LEGACY_DOUBLE = "double"
LEGACY_TRIPLE = "triple"

LEGACY_GLASS_THICKNESS = {
    LEGACY_SINGLE: 4,
    LEGACY_DOUBLE: 18,
    LEGACY_TRIPLE: 24,
}

FALLBACK_GLASS_KEY = "clear_4"

GRID_BARS = "grid_bars"
BASE_RAIL = "base_rail"


def _glass_table(single: int, double: int, triple: int) -> dict:
    table = {key: dict(entry) for key, entry in GLASS_TYPES.items()}
    table[LEGACY_SINGLE] = {"label": "Single glazing", "price": single, "kind": "legacy", "thickness": 4}
    table[LEGACY_DOUBLE] = {"label": "Double glazing (insulated)", "price": double, "kind": "insulated", "thickness": 18}
    table[LEGACY_TRIPLE] = {"label": "Triple glazing", "price": triple, "kind": "insulated", "thickness": 24}
    return table


_OPENING_TYPES = {
    "fixed": {"label": "Fixed", "price": 0},
    "projecting": {"label": "Projecting", "price": 30000},
    "awning": {"label": "Awning", "price": 34000},
    "slider": {"label": "Slider", "price": 25000},
    "door_left": {"label": "Door (left hand)", "price": 45000},
    "door_right": {"label": "Door (right hand)", "price": 45000},
    "casement_left": {"label": "Casement (left)", "price": 34000},
    "casement_right": {"label": "Casement (right)", "price": 34000},
    "door_with_sidelites": {"label": "Door with sidelites", "price": 65000},
    "sliding_door": {"label": "Sliding door", "price": 45000},
    "tilt_turn": {"label": "Tilt & turn", "price": 55000},
}

ALUMINUM_DEFAULTS = {
    "base": {
        "base": {"label": "Base price", "price": 60000},
    },
    "opening_types": _OPENING_TYPES,
    "frame_colors": {
        "white": {"label": "White", "price": 26000},
        "golden_oak": {"label": "Golden oak", "price": 35000},
        "black": {"label": "Black", "price": 30000},
        "walnut": {"label": "Walnut", "price": 33000},
        "matte": {"label": "Matte anodized", "price": 20000},
        "titanium": {"label": "Titanium", "price": 28000},
    },
    "glass_types": _glass_table(single=8200, double=35000, triple=45000),
    "accessories": {
        GRID_BARS: {"label": "Grid bars (per bar)", "price": 3000},
        "insect_screen": {"label": "Insect screen", "price": 50000},
        "espagnolette": {"label": "Espagnolette lock", "price": 19000},
        BASE_RAIL: {"label": "Base rail", "price": 14000},
    },
    "profile_lines": {
        "al_5000": {"label": "AL 5000", "price": 35000},
        "al_20": {"label": "AL 20", "price": 55000},
        "al_25": {"label": "AL 25", "price": 75000},
        "s33_rpt": {"label": "S-33 RPT", "price": 85000},
        "al_32": {"label": "AL 32", "price": 29000},
        "al_42": {"label": "AL 42", "price": 40000},
        "s38_rpt": {"label": "S-38 RPT", "price": 60000},
        "am_35": {"label": "AM 35", "price": 45000},
        "l12_shower": {"label": "L-12 shower enclosure", "price": 45000},
    },
}

PVC_DEFAULTS = {
    "base": {
        "base": {"label": "Base price", "price": 220000},
    },
    "opening_types": _OPENING_TYPES,
    "frame_colors": {
        "white": {"label": "White", "price": 29000},
        "golden_oak": {"label": "Golden oak", "price": 34000},
        "black": {"label": "Black", "price": 33000},
        "walnut": {"label": "Walnut", "price": 35000},
        "anthracite": {"label": "Anthracite", "price": 30000},
    },
    "glass_types": _glass_table(single=10000, double=29000, triple=40000),
    "accessories": {
        GRID_BARS: {"label": "Grid bars (per bar)", "price": 3000},
        "insect_screen": {"label": "Insect screen", "price": 50000},
        "espagnolette": {"label": "Espagnolette lock", "price": 19000},
        BASE_RAIL: {"label": "Base rail", "price": 14000},
        "drip_cap": {"label": "Drip cap", "price": 8000},
    },
    "profile_lines": {
        "pvc_58cd": {"label": "PVC 58 CD", "price": 0},
        "pvc_70cd": {"label": "PVC 70 CD", "price": 15000},
        "pvc_58dj": {"label": "PVC 58 DJ", "price": 10000},
        "pvc_50dj": {"label": "PVC 50 DJ", "price": 8000},
        "pvc_pd10": {"label": "PVC PD10", "price": 12000},
    },
}

FAMILY_DEFAULTS = {
    "aluminum": ALUMINUM_DEFAULTS,
    "pvc": PVC_DEFAULTS,
}

# Line a new unit starts on, per family
FAMILY_DEFAULT_LINE = {
    "aluminum": "al_25",
    "pvc": "pvc_58cd",
}
