"""
PVC 70 CD two-panel sliding window and sliding door.

Same layout as the 58 CD tables with the 70mm frame and its own glazing
bead ranges.
"""

from fractions import Fraction

from .base import BaseCutList, Ceil, GlassCut, H, HALF, HardwareLine, Linear, ProfileCut, W

GLAZING_BEADS = {
    4: "107.568",
    5: "107.568",
    6: "107.583",
    7: "107.583",
    8: "107.583",
    9: "107.567",
    10: "107.567",
    11: "107.591",
    12: "107.591",
    13: "107.591",
    14: "107.570",
    15: "107.570",
    16: "107.570",
    19: "107.571",
    20: "107.571",
    21: "107.571",
    23: "107.528",
    24: "107.528",
    25: "107.528",
}
DEFAULT_GLAZING_BEAD = "107.583"

FRAME_AND_SASH = (
    ProfileCut("105.351", "Main frame horizontal", 2, W),
    ProfileCut("105.351", "Main frame vertical", 2, H),
    ProfileCut("105.322", "Window sash horizontal", 4, Linear(w=HALF, c=-19.5)),
    ProfileCut("105.322", "Window sash vertical", 4, Linear(h=1, c=-112)),
)

BEAD_HORIZONTAL = Linear(w=HALF, c=-133.5)
BEAD_VERTICAL = Linear(h=1, c=-226)

REINFORCEMENTS = (
    ProfileCut("113.002", "Frame reinforcement horizontal", 2, Linear(w=1, c=-100)),
    ProfileCut("113.002", "Frame reinforcement vertical", 2, Linear(h=1, c=-100)),
    ProfileCut("113.034", "Sash reinforcement horizontal", 4, Linear(w=HALF, c=-119.5)),
    ProfileCut("113.034", "Sash reinforcement vertical", 4, Linear(h=1, c=-212)),
)

GLASS = GlassCut(2, Linear(w=HALF, c=-139.5), Linear(h=1, c=-232))

HARDWARE = (
    HardwareLine("Aluminum track (104.047)", 1),
    HardwareLine("Slot cover (109.043)", 2),
    # One drain cap every 500mm of width, plus one
    HardwareLine("Drain cap (109.053)", Ceil(Linear(w=Fraction(1, 500), c=1))),
    HardwareLine("Weather seal (109.639)", 4),
    HardwareLine("Glazing bridge (109.642)", 20),
    HardwareLine("Damper (112.009)", 4),
    HardwareLine("Center interlock hook (105.353)", 4),
    HardwareLine("Sash side cap (105.315)", 4),
    HardwareLine("Side cap trim (109.633)", 8),
    HardwareLine("Fixed panel spacer (105.119)", 10),
)


def glazing_bead_for(glass_thickness: int) -> str:
    return GLAZING_BEADS.get(glass_thickness, DEFAULT_GLAZING_BEAD)


DOOR_FRAME_AND_SASH = (
    ProfileCut("105.351", "Main frame horizontal", 2, W),
    ProfileCut("105.351", "Main frame vertical", 2, H),
    ProfileCut("105.135", "Door sash horizontal", 4, Linear(w=HALF, c=-12)),
    ProfileCut("105.135", "Door sash vertical", 4, Linear(h=1, c=-112)),
)

# The door sash takes two different steel sections
DOOR_REINFORCEMENTS = (
    ProfileCut("113.002", "Frame reinforcement horizontal", 2, Linear(w=1, c=-100)),
    ProfileCut("113.002", "Frame reinforcement vertical", 2, Linear(h=1, c=-100)),
    ProfileCut("113.031.2", "Sash reinforcement horizontal", 4, Linear(w=HALF, c=-112)),
    ProfileCut("113.043.2", "Sash reinforcement vertical", 4, Linear(h=1, c=-212)),
)

DOOR_GLASS = GlassCut(2, Linear(w=HALF, c=-162.5), Linear(h=1, c=-263))


class PVC70CDSliderCutList(BaseCutList):
    LINE_KEY = "pvc_70cd"
    OPENING_TYPES = ("slider",)
    CELLS = 2
    PROFILES = FRAME_AND_SASH
    REINFORCEMENTS = REINFORCEMENTS
    GLASS = GLASS
    HARDWARE = HARDWARE
    BEAD_HORIZONTAL = BEAD_HORIZONTAL
    BEAD_VERTICAL = BEAD_VERTICAL

    def profiles(self, glass_thickness: int) -> tuple:
        bead = glazing_bead_for(glass_thickness)
        return self.PROFILES + (
            ProfileCut(bead, f"Glazing bead horizontal ({glass_thickness}mm)", 4, self.BEAD_HORIZONTAL),
            ProfileCut(bead, f"Glazing bead vertical ({glass_thickness}mm)", 4, self.BEAD_VERTICAL),
        )


class PVC70CDSlidingDoorCutList(PVC70CDSliderCutList):
    OPENING_TYPES = ("sliding_door",)
    PROFILES = DOOR_FRAME_AND_SASH
    REINFORCEMENTS = DOOR_REINFORCEMENTS
    GLASS = DOOR_GLASS
    BEAD_HORIZONTAL = Linear(w=HALF, c=-157)
    BEAD_VERTICAL = Linear(h=1, c=-257)
