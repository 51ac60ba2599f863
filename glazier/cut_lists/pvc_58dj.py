"""
PVC 58 DJ single-sash inward opening window and door.

The 58 DJ line carries casement and tilt & turn sashes, so the window table
covers all three side-hinged window types. Beads come from their own
thickness table; insulated units sit in the 18-32mm range.
"""

from .base import BaseCutList, GlassCut, H, HardwareLine, Linear, ProfileCut, W

GLAZING_BEADS = {
    6: "107.569",
    7: "107.569",
    8: "107.569",
    11: "107.568",
    12: "107.568",
    13: "107.583",
    14: "107.583",
    15: "107.583",
    16: "107.567",
    17: "107.567",
    18: "107.591",
    19: "107.591",
    20: "107.591",
    21: "107.570",
    22: "107.570",
    23: "107.570",
    26: "107.571",
    27: "107.571",
    28: "107.571",
    30: "107.528",
    31: "107.528",
    32: "107.528",
}
DEFAULT_GLAZING_BEAD = "107.569"

FRAME = (
    ProfileCut("101.086", "Main frame horizontal", 2, W),
    ProfileCut("101.086", "Main frame vertical", 2, H),
)

FRAME_REINFORCEMENTS = (
    ProfileCut("113.025", "Frame reinforcement horizontal", 2, Linear(w=1, c=-100)),
    ProfileCut("113.025", "Frame reinforcement vertical", 2, Linear(h=1, c=-100)),
)

HARDWARE = (
    HardwareLine("Drain cap (109.053)", 2),
    HardwareLine("Weather bar (109.030)", 1),
    HardwareLine("Weather bar end cap (109.140)", 2),
    HardwareLine("Hardware channel cover (109.045)", 2),
    HardwareLine("Glazing bridge (109.243)", 12),
    HardwareLine("Glazing shim 3mm red (1420263)", 12),
    HardwareLine("Slot cover (112.380)", 1),
    HardwareLine("Contact gasket (112.030)", 2, "m"),
    HardwareLine("Sealing gasket (112.254)", 2, "m"),
    HardwareLine("Mini corner joint (116.217)", 4),
    HardwareLine("Quick-fix screw (108.016)", 20),
)


def glazing_bead_for(glass_thickness: int) -> str:
    return GLAZING_BEADS.get(glass_thickness, DEFAULT_GLAZING_BEAD)


class PVC58DJInwardWindowCutList(BaseCutList):
    LINE_KEY = "pvc_58dj"
    OPENING_TYPES = ("casement_left", "casement_right", "tilt_turn")
    PROFILES = FRAME + (
        ProfileCut("103.196", "Inward window sash horizontal", 2, Linear(w=1, c=-82)),
        ProfileCut("103.196", "Inward window sash vertical", 2, Linear(h=1, c=-82)),
    )
    REINFORCEMENTS = FRAME_REINFORCEMENTS + (
        ProfileCut("113.306", "Sash reinforcement horizontal", 2, Linear(w=1, c=-182)),
        ProfileCut("113.306", "Sash reinforcement vertical", 2, Linear(h=1, c=-182)),
    )
    GLASS = GlassCut(1, Linear(w=1, c=-217), Linear(h=1, c=-217))
    HARDWARE = HARDWARE
    BEAD_OFFSET = -211

    def profiles(self, glass_thickness: int) -> tuple:
        bead = glazing_bead_for(glass_thickness)
        return self.PROFILES + (
            ProfileCut(bead, f"Glazing bead horizontal ({glass_thickness}mm)", 2,
                       Linear(w=1, c=self.BEAD_OFFSET)),
            ProfileCut(bead, f"Glazing bead vertical ({glass_thickness}mm)", 2,
                       Linear(h=1, c=self.BEAD_OFFSET)),
        )


class PVC58DJInwardDoorCutList(PVC58DJInwardWindowCutList):
    OPENING_TYPES = ("door_left", "door_right")
    PROFILES = FRAME + (
        ProfileCut("103.198", "Inward door sash horizontal", 2, Linear(w=1, c=-82)),
        ProfileCut("103.198", "Inward door sash vertical", 2, Linear(h=1, c=-82)),
    )
    REINFORCEMENTS = FRAME_REINFORCEMENTS + (
        ProfileCut("113.147", "Sash reinforcement horizontal", 2, Linear(w=1, c=-182)),
        ProfileCut("113.147", "Sash reinforcement vertical", 2, Linear(h=1, c=-182)),
    )
    GLASS = GlassCut(1, Linear(w=1, c=-252), Linear(h=1, c=-252))
    BEAD_OFFSET = -246
