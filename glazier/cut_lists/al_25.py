"""AL 25 two-panel slider (one fixed panel, one sliding)."""

from .base import BaseCutList, GlassCut, H, HALF, HardwareLine, Linear, PER_METER, ProfileCut

PROFILES = (
    ProfileCut("2501", "Top rail", 1, Linear(w=1, c=-16)),
    ProfileCut("2502", "Bottom rail", 1, Linear(w=1, c=-16)),
    ProfileCut("2509", "Jamb", 2, H),
    ProfileCut("2504", "Sash head", 2, Linear(w=HALF)),
    ProfileCut("2505", "Sash sill", 2, Linear(w=HALF)),
    ProfileCut("2507", "Interlock", 2, Linear(h=1, c=-35)),
    ProfileCut("2510", "Sash stile", 2, Linear(h=1, c=-35)),
)

GLASS = GlassCut(2, Linear(w=HALF, c=-62), Linear(h=1, c=-127))

HARDWARE = (
    HardwareLine("Roller carriage AL-25", 4),
    HardwareLine("Inner guide AL-25", 4),
    HardwareLine("Latch HT E-25", 2),
    HardwareLine("Pile weatherstrip 7x6", Linear(w=4, h=6, scale=PER_METER), "m"),
    HardwareLine("Glazing gasket DVP 329/305", Linear(w=2, h=4, scale=PER_METER), "m"),
    HardwareLine("Self-tapping screw 8 x 3/4\"", 16),
)


class AL25SliderCutList(BaseCutList):
    LINE_KEY = "al_25"
    OPENING_TYPES = ("slider",)
    CELLS = 2
    PROFILES = PROFILES
    GLASS = GLASS
    HARDWARE = HARDWARE
