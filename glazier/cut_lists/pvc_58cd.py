"""
PVC 58 CD two-panel sliding window and sliding door.

The glazing bead profile depends on the glass thickness (GLAZING_BEADS);
reinforcements are galvanized steel cut to the listed lengths.
"""

from .base import BaseCutList, GlassCut, H, HALF, HardwareLine, Linear, ProfileCut, W

GLAZING_BEADS = {
    4: "107.711",
    6: "107.591",
    7: "107.591",
    9: "107.570",
    10: "107.570",
    11: "107.582",
    12: "107.582",
    14: "107.571",
    15: "107.571",
    18: "107.528",
    19: "107.528",
}
DEFAULT_GLAZING_BEAD = "107.591"

FRAME_AND_SASH = (
    ProfileCut("105.370", "Slider frame horizontal", 2, W),
    ProfileCut("105.370", "Slider frame vertical", 2, H),
    ProfileCut("105.373", "Window sash horizontal", 4, Linear(w=HALF, c=-6)),
    ProfileCut("105.373", "Window sash vertical", 4, Linear(h=1, c=-76)),
)

BEAD_HORIZONTAL = Linear(w=HALF, c=-100)
BEAD_VERTICAL = Linear(h=1, c=-170)

REINFORCEMENTS = (
    ProfileCut("113.020", "Frame reinforcement horizontal", 2, Linear(w=1, c=-100)),
    ProfileCut("113.020", "Frame reinforcement vertical", 2, Linear(h=1, c=-100)),
    ProfileCut("113.074", "Sash reinforcement horizontal", 4, Linear(w=HALF, c=-106)),
    ProfileCut("113.074", "Sash reinforcement vertical", 4, Linear(h=1, c=-176)),
)

GLASS = GlassCut(2, Linear(w=HALF, c=-108.5), Linear(h=1, c=-178))

HARDWARE = (
    HardwareLine("Aluminum track (104.047)", 2),
    HardwareLine("Slot cover (109.043)", 2),
    HardwareLine("Weather seal (109.036)", 4),
    HardwareLine("Damper (109.708)", 4),
    HardwareLine("Drain cap (109.053)", 2),
    HardwareLine("Pile 34mm (112.164)", 8),
    HardwareLine("Glazing bridge (109.641)", 20),
)


DOOR_FRAME_AND_SASH = (
    ProfileCut("105.370", "Slider frame horizontal", 2, W),
    ProfileCut("105.370", "Slider frame vertical", 2, H),
    ProfileCut("105.378", "Door sash horizontal", 4, Linear(w=HALF, c=-3)),
    ProfileCut("105.378", "Door sash vertical", 4, Linear(h=1, c=-76)),
)

DOOR_REINFORCEMENTS = (
    ProfileCut("113.020", "Frame reinforcement horizontal", 2, Linear(w=1, c=-100)),
    ProfileCut("113.020", "Frame reinforcement vertical", 2, Linear(h=1, c=-100)),
    ProfileCut("113.444", "Sash reinforcement horizontal", 4, Linear(w=HALF, c=-103)),
    ProfileCut("113.444", "Sash reinforcement vertical", 4, Linear(h=1, c=-176)),
)

DOOR_GLASS = GlassCut(2, Linear(w=HALF, c=-117.3), Linear(h=1, c=-190))


def glazing_bead_for(glass_thickness: int) -> str:
    return GLAZING_BEADS.get(glass_thickness, DEFAULT_GLAZING_BEAD)


class PVC58CDSliderCutList(BaseCutList):
    LINE_KEY = "pvc_58cd"
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


class PVC58CDSlidingDoorCutList(PVC58CDSliderCutList):
    """Two-leaf sliding door: heavier 105.378 sash, same track hardware."""
    OPENING_TYPES = ("sliding_door",)
    PROFILES = DOOR_FRAME_AND_SASH
    REINFORCEMENTS = DOOR_REINFORCEMENTS
    GLASS = DOOR_GLASS
    BEAD_HORIZONTAL = Linear(w=HALF, c=-111)
    BEAD_VERTICAL = Linear(h=1, c=-184)
