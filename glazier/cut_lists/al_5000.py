"""AL 5000 two-panel slider. Coefficients not yet confirmed against drawings."""

from .base import BaseCutList, GlassCut, HALF, HardwareLine, Linear, PER_METER, ProfileCut, W

PROFILES = (
    ProfileCut("5001", "Bottom rail", 1, W),
    ProfileCut("5002", "Top rail", 1, W),
    ProfileCut("5003", "Jamb", 2, Linear(h=1, c=-3)),
    ProfileCut("5004", "Sash sill", 2, Linear(w=HALF, c=-4)),
    ProfileCut("5005", "Sash head", 2, Linear(w=HALF, c=-4)),
    ProfileCut("5006", "Sash stile", 2, Linear(h=1, c=-19)),
    ProfileCut("5007", "Interlock", 2, Linear(h=1, c=-19)),
)

GLASS = GlassCut(2, Linear(w=HALF, c=-50), Linear(h=1, c=-86))

HARDWARE = (
    HardwareLine("Roller 5000", 4),
    HardwareLine("Roller bracket 5000", 4),
    HardwareLine("Top guide 5000", 4),
    HardwareLine("Latch 5000", 2),
    HardwareLine("Pile weatherstrip 5x5", Linear(w=4, h=6, scale=PER_METER), "m"),
    HardwareLine("Rubber stop", 4),
    HardwareLine("Self-tapping screw 8 x 3/4\"", 12),
)


class AL5000SliderCutList(BaseCutList):
    LINE_KEY = "al_5000"
    OPENING_TYPES = ("slider",)
    CELLS = 2
    PROVISIONAL = True
    PROFILES = PROFILES
    GLASS = GLASS
    HARDWARE = HARDWARE
