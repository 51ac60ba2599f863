"""AL 42 single projecting (top-hung) window."""

from .base import BaseCutList, GlassCut, HardwareLine, Linear, PER_METER, ProfileCut, W

PROFILES = (
    ProfileCut("4201", "Frame head", 1, W),
    ProfileCut("4231", "Frame sill (drainage chamber)", 1, Linear(w=1, c=40)),
    ProfileCut("4201", "Frame jamb", 2, Linear(h=1, c=-20)),
    ProfileCut("4202", "Sash horizontal", 2, Linear(w=1, c=-18)),
    ProfileCut("4202", "Sash vertical", 2, Linear(h=1, c=-38)),
    ProfileCut("4229", "Glazing bead horizontal", 2, Linear(w=1, c=-90)),
    ProfileCut("4229", "Glazing bead vertical", 2, Linear(h=1, c=-110)),
)

GLASS = GlassCut(1, Linear(w=1, c=-93), Linear(h=1, c=-113))

HARDWARE = (
    HardwareLine("Corner cleat 42", 8),
    HardwareLine("Projecting arm (pair)", 1, "pr"),
    HardwareLine("Handle Udinese 735", 1),
    HardwareLine("Gasket DVP base and wedge", Linear(w=2, h=2, scale=PER_METER), "m"),
    HardwareLine("Gasket DVP DC 142", Linear(w=4, h=4, scale=PER_METER), "m"),
)


class AL42ProjectingCutList(BaseCutList):
    LINE_KEY = "al_42"
    OPENING_TYPES = ("projecting",)
    PROFILES = PROFILES
    GLASS = GLASS
    HARDWARE = HARDWARE
