"""AL 20 two-panel slider."""

from .base import BaseCutList, GlassCut, H, HALF, HardwareLine, Linear, PER_METER, ProfileCut

PROFILES = (
    ProfileCut("2001", "Top rail", 1, Linear(w=1, c=-12)),
    ProfileCut("2002", "Bottom rail", 1, Linear(w=1, c=-12)),
    ProfileCut("2009", "Jamb", 2, H),
    ProfileCut("2004", "Sash head", 2, Linear(w=HALF, c=-4)),
    ProfileCut("2005", "Sash sill", 2, Linear(w=HALF, c=-4)),
    ProfileCut("2010", "Sash stile", 2, Linear(h=1, c=-28)),
    ProfileCut("2019", "Interlock", 2, Linear(h=1, c=-28)),
)

GLASS = GlassCut(2, Linear(w=HALF, c=-54), Linear(h=1, c=-100))

HARDWARE = (
    HardwareLine("Roller AL-20", 4),
    HardwareLine("Roller bracket AL-20", 4),
    HardwareLine("Top guide AL-20", 4),
    HardwareLine("Latch UDI 2411 / HT E-25", 2),
    HardwareLine("Pile weatherstrip 5x5", Linear(w=4, h=6, scale=PER_METER), "m"),
    HardwareLine("Glazing gasket DVP 1005/302", Linear(w=2, h=4, scale=PER_METER), "m"),
    HardwareLine("Self-tapping screw 8 x 3/4\"", 16),
)


class AL20SliderCutList(BaseCutList):
    LINE_KEY = "al_20"
    OPENING_TYPES = ("slider",)
    CELLS = 2
    PROFILES = PROFILES
    GLASS = GLASS
    HARDWARE = HARDWARE
