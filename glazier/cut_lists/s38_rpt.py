"""
S-38 RPT thermal-break system: projecting window and fixed lite.

Coefficients not yet confirmed against drawings.
"""

from .base import BaseCutList, GlassCut, HardwareLine, Linear, PER_METER, ProfileCut, W

PROJECTING_PROFILES = (
    ProfileCut("53810", "Frame 810", 2, Linear(w=1, c=53)),
    ProfileCut("53820", "Sash 820", 2, Linear(w=1, c=53)),
    ProfileCut("53830", "Frame 830", 2, Linear(h=1, c=-53)),
    ProfileCut("53500", "Sash 500", 2, Linear(h=1, c=-62)),
)

PROJECTING_GLASS = GlassCut(1, Linear(w=1, c=-133), Linear(h=1, c=-133))

PROJECTING_HARDWARE = (
    HardwareLine("Hinge cleat 5-20", 8),
    HardwareLine("Projecting arm Advance (pair)", 1, "pr"),
    HardwareLine("Espagnolette XV T25 stainless", 1),
    HardwareLine("Projecting arm S-38 (pair)", 1, "pr"),
    HardwareLine("Outer keeper S-25", 1),
    HardwareLine("Inner keeper S-25", 1),
    HardwareLine("Bulb gasket T-4 (6x8mm)", Linear(w=2, h=2, scale=PER_METER), "m"),
    HardwareLine("Bulb gasket T-8 (8x27mm)", Linear(w=2, h=2, scale=PER_METER), "m"),
)

FIXED_PROFILES = (
    ProfileCut("53500", "Frame 500", 2, W),
    ProfileCut("53510", "Frame 510", 2, W),
    ProfileCut("53511", "Bead 511 + 910", 2, Linear(h=1, c=-60)),
    ProfileCut("53511", "Bead 511 + 820", 2, Linear(h=1, c=-60)),
)

FIXED_GLASS = GlassCut(1, Linear(w=1, c=-60), Linear(h=1, c=-60))

FIXED_HARDWARE = (
    HardwareLine("Corner angle L50", 4),
    HardwareLine("Joint L80 + angle S10", 4),
    HardwareLine("Tail bulb gasket 8x18", Linear(w=2, h=2, scale=PER_METER), "m"),
    HardwareLine("Tail bulb gasket 9x18", Linear(w=2, h=2, scale=PER_METER), "m"),
)


class S38ProjectingCutList(BaseCutList):
    LINE_KEY = "s38_rpt"
    OPENING_TYPES = ("projecting",)
    PROVISIONAL = True
    PROFILES = PROJECTING_PROFILES
    GLASS = PROJECTING_GLASS
    HARDWARE = PROJECTING_HARDWARE


class S38FixedCutList(BaseCutList):
    LINE_KEY = "s38_rpt"
    OPENING_TYPES = ("fixed",)
    PROVISIONAL = True
    PROFILES = FIXED_PROFILES
    GLASS = FIXED_GLASS
    HARDWARE = FIXED_HARDWARE
