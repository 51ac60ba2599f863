"""
PVC PD10 sliding units: one moving leaf plus one, two or three fixed lites.

Each variant is its own table because the leaf width is a different share
of W (W/2, W/3, W/4). The glass dimensions are those of the moving lite.
Beads are picked by thickness band rather than an exact table.
"""

from fractions import Fraction

from .base import BaseCutList, GlassCut, H, HALF, HardwareLine, Linear, ProfileCut, W

THIRD = Fraction(1, 3)
QUARTER = Fraction(1, 4)

# (upper thickness bound in mm, bead code)
GLAZING_BEAD_BANDS = (
    (6, "BV76"),  # rigid 21 x 22
    (18, "BV81"),  # rigid 10 x 20
)
THICK_GLAZING_BEAD = "BV50-T"  # flexible 8 x 19

FRAME = (
    ProfileCut("PD1014", "Slider frame horizontal", 2, W),
    ProfileCut("PD1014", "Slider frame vertical", 2, H),
)

LEAF_VERTICAL = ProfileCut("SR1175", "Moving leaf vertical", 2, Linear(h=1, c=-56))
BEAD_VERTICAL = Linear(h=1, c=-132)
LEAF_REINFORCEMENT_VERTICAL = ProfileCut(
    "R.SR1175/76", "Moving leaf reinforcement vertical", 2, Linear(h=1, c=-150),
)
GLASS_HEIGHT = Linear(h=1, c=-144)


def glazing_bead_for(glass_thickness: int) -> str:
    for upper, code in GLAZING_BEAD_BANDS:
        if glass_thickness <= upper:
            return code
    return THICK_GLAZING_BEAD


def _interlocks(count: int) -> ProfileCut:
    return ProfileCut("SR1174", "Fixed interlock", count, H)


def _interlock_reinforcements(count: int) -> ProfileCut:
    return ProfileCut("R.113.040/45", "Fixed interlock reinforcement", count, Linear(h=1, c=-100))


def _hardware(shims: int, clips: int) -> tuple:
    return (
        HardwareLine("Pile 5x5mm (W33281)", 4, "m"),
        HardwareLine("Double-sided tape (CDC)", 4, "m"),
        HardwareLine("Hook latch (SMPD)", 1),
        HardwareLine("Double roller 80kg (GT-20/40-A)", 2),
        HardwareLine("Glazing shim (142.020)", shims),
        HardwareLine("Interlock clip (SR1177)", clips),
        HardwareLine("Aluminum rail (PDA1018)", 1),
    )


class PD10OneFixedCutList(BaseCutList):
    LINE_KEY = "pvc_pd10"
    OPENING_TYPES = ("slider",)
    CELLS = 2
    PROFILES = FRAME + (
        ProfileCut("SR1175", "Moving leaf horizontal", 2, Linear(w=HALF, c=24)),
        LEAF_VERTICAL,
        _interlocks(2),
    )
    REINFORCEMENTS = (
        ProfileCut("R.SR1175/76", "Moving leaf reinforcement horizontal", 2, Linear(w=HALF, c=-50)),
        LEAF_REINFORCEMENT_VERTICAL,
        _interlock_reinforcements(2),
    )
    GLASS = GlassCut(2, Linear(w=HALF, c=-63), GLASS_HEIGHT)
    HARDWARE = _hardware(shims=6, clips=1)
    BEAD_HORIZONTAL = Linear(w=HALF, c=-52)

    def profiles(self, glass_thickness: int) -> tuple:
        bead = glazing_bead_for(glass_thickness)
        return self.PROFILES + (
            ProfileCut(bead, f"Moving glazing bead horizontal ({glass_thickness}mm)", 2,
                       self.BEAD_HORIZONTAL),
            ProfileCut(bead, f"Moving glazing bead vertical ({glass_thickness}mm)", 2, BEAD_VERTICAL),
        )


class PD10TwoFixedCutList(PD10OneFixedCutList):
    CELLS = 3
    PROFILES = FRAME + (
        ProfileCut("SR1175", "Moving leaf horizontal", 2, Linear(w=THIRD, c=24)),
        LEAF_VERTICAL,
        _interlocks(4),
    )
    REINFORCEMENTS = (
        ProfileCut("R.SR1175/76", "Moving leaf reinforcement horizontal", 2, Linear(w=THIRD, c=-50)),
        LEAF_REINFORCEMENT_VERTICAL,
        _interlock_reinforcements(4),
    )
    GLASS = GlassCut(3, Linear(w=THIRD, c=-78), GLASS_HEIGHT)
    HARDWARE = _hardware(shims=8, clips=2)
    BEAD_HORIZONTAL = Linear(w=THIRD, c=-52)


class PD10ThreeFixedCutList(PD10OneFixedCutList):
    CELLS = 4
    PROFILES = FRAME + (
        ProfileCut("SR1175", "Moving leaf horizontal", 2, Linear(w=QUARTER, c=40)),
        LEAF_VERTICAL,
        _interlocks(6),
    )
    REINFORCEMENTS = (
        ProfileCut("R.SR1175/76", "Moving leaf reinforcement horizontal", 2, Linear(w=QUARTER, c=-35)),
        LEAF_REINFORCEMENT_VERTICAL,
        _interlock_reinforcements(6),
    )
    GLASS = GlassCut(4, Linear(w=QUARTER, c=-48), GLASS_HEIGHT)
    HARDWARE = _hardware(shims=8, clips=3)
    BEAD_HORIZONTAL = Linear(w=QUARTER, c=-36)
