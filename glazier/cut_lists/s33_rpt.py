"""S-33 RPT thermal-break two-panel slider. Coefficients not yet confirmed against drawings."""

from .base import BaseCutList, GlassCut, HALF, HardwareLine, Linear, PER_METER, ProfileCut, W

PROFILES = (
    ProfileCut("33010", "Rail 33010", 2, W),
    ProfileCut("53010", "Rail 53010", 2, W),
    ProfileCut("53030", "Sash rail 53030", 2, Linear(w=HALF, c=4)),
    ProfileCut("33030", "Sash stile 33030", 4, Linear(h=1, c=-64)),
    ProfileCut("3500", "Interlock 3500", 2, Linear(h=1, c=-64)),
)

GLASS = GlassCut(2, Linear(w=HALF, c=-108), Linear(h=1, c=-176))

HARDWARE = (
    HardwareLine("Hinge cleat 53020", 8),
    HardwareLine("Hinge cleat 5-23", 8),
    HardwareLine("Two-point espagnolette", 2),
    HardwareLine("Handle Aluslabe 608", 2),
    HardwareLine("Needle roller S-33", 4),
    HardwareLine("Outer guide S-33", 4),
    HardwareLine("Inner guide S-33", 4),
    HardwareLine("Damper stop S-33", 4),
    HardwareLine("Pile weatherstrip 7x8", Linear(w=6, h=8, scale=PER_METER), "m"),
    HardwareLine("Glazing gasket TP S-33", Linear(w=2, h=4, scale=PER_METER), "m"),
)


class S33SliderCutList(BaseCutList):
    LINE_KEY = "s33_rpt"
    OPENING_TYPES = ("slider",)
    CELLS = 2
    PROVISIONAL = True
    PROFILES = PROFILES
    GLASS = GLASS
    HARDWARE = HARDWARE
