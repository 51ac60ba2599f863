"""L-12 two-panel sliding shower enclosure (acrylic or glass panels)."""

from .base import BaseCutList, GlassCut, HALF, HardwareLine, Linear, PER_METER, ProfileCut

PROFILES = (
    ProfileCut("1201", "Bottom rail", 1, Linear(w=1, c=-5)),
    ProfileCut("1203", "Top rail", 1, Linear(w=1, c=-5)),
    ProfileCut("1202", "Jamb", 2, Linear(h=1, c=-3)),
    ProfileCut("1204", "Panel frame width", 4, Linear(w=HALF, c=2)),
    ProfileCut("1204", "Panel frame height", 4, Linear(h=1, c=-65)),
)

GLASS = GlassCut(2, Linear(w=HALF, c=-24), Linear(h=1, c=-99))

HARDWARE = (
    HardwareLine("Roller 12 (0442)", 4),
    HardwareLine("Outer panel guide (0441)", 2),
    HardwareLine("Inner panel guide (0440)", 2),
    HardwareLine("Corner cleat 12 (0420)", 8),
    HardwareLine("Acrylic gasket (0421)", Linear(w=4, h=4, scale=PER_METER), "m"),
    HardwareLine("Screw CB 6 x 1/2\" (0422)", 16),
    HardwareLine("Screw CB 6 x 3/8\" (0423)", 8),
    HardwareLine("Screw cap (0424)", 6),
)


class L12ShowerCutList(BaseCutList):
    LINE_KEY = "l12_shower"
    OPENING_TYPES = ("slider",)
    CELLS = 2
    PROFILES = PROFILES
    GLASS = GLASS
    HARDWARE = HARDWARE
