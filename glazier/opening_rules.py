"""
Per-cell opening behavior.

OPENING_RULES maps a unit's opening type to a rule(cell_count, index) that
returns the concrete type of one cell. cell_count is the visual count, so a
single-sash slider arrives here as two cells. Types without an entry apply
to every cell unchanged.
"""

from .models import LayoutAxis, OpeningType, Side, SIDE_HINGED_TYPES

FIXED = OpeningType.FIXED
SLIDER = OpeningType.SLIDER

SLIDER_PATTERNS = {
    2: (FIXED, SLIDER),
    3: (SLIDER, FIXED, SLIDER),
    4: (SLIDER, FIXED, FIXED, SLIDER),
}

SIDELITE_PATTERN = (FIXED, OpeningType.DOOR_RIGHT, FIXED)


def _slider(cell_count: int, index: int) -> OpeningType:
    pattern = SLIDER_PATTERNS.get(cell_count)
    if pattern is None:
        return SLIDER
    return pattern[index]


def _casement(unit_type: OpeningType):
    def rule(cell_count: int, index: int) -> OpeningType:
        if cell_count < 2:
            return unit_type
        return OpeningType.CASEMENT_LEFT if index == 0 else OpeningType.CASEMENT_RIGHT
    return rule


def _door_with_sidelites(cell_count: int, index: int) -> OpeningType:
    if cell_count == len(SIDELITE_PATTERN):
        return SIDELITE_PATTERN[index]
    # Outer cells stay fixed lites once there is room for both sides
    if cell_count >= 3 and index in (0, cell_count - 1):
        return FIXED
    return OpeningType.DOOR_RIGHT


def _sliding_door(cell_count: int, index: int) -> OpeningType:
    # Every door leaf runs on the track
    return SLIDER


OPENING_RULES = {
    OpeningType.SLIDER: _slider,
    OpeningType.SLIDING_DOOR: _sliding_door,
    OpeningType.CASEMENT_LEFT: _casement(OpeningType.CASEMENT_LEFT),
    OpeningType.CASEMENT_RIGHT: _casement(OpeningType.CASEMENT_RIGHT),
    OpeningType.DOOR_WITH_SIDELITES: _door_with_sidelites,
}


def resolve_opening_type(unit_type, per_sash, cell_count: int, index: int) -> OpeningType:
    """Per-sash override if present, else the unit type's rule for this cell."""
    if per_sash and index < len(per_sash) and per_sash[index] is not None:
        return OpeningType(per_sash[index])
    unit_type = OpeningType(unit_type)
    rule = OPENING_RULES.get(unit_type)
    if rule is None:
        return unit_type
    return rule(cell_count, index)


def handle_side(opening_type: OpeningType, cell_count: int, index: int) -> Side:
    if opening_type == OpeningType.DOOR_RIGHT:
        return Side.LEFT
    if opening_type == OpeningType.DOOR_LEFT:
        return Side.RIGHT
    if cell_count == 1:
        if opening_type in (OpeningType.CASEMENT_RIGHT, OpeningType.TILT_TURN):
            return Side.LEFT
        return Side.RIGHT
    return Side.LEFT if index < cell_count / 2 else Side.RIGHT


def hinge_side(opening_type: OpeningType, handle: Side):
    """Opposite of the handle, for side-hinged types only."""
    if opening_type not in SIDE_HINGED_TYPES:
        return None
    return Side.RIGHT if handle == Side.LEFT else Side.LEFT


def slide_direction(opening_type: OpeningType, axis: LayoutAxis, index: int):
    """Arrow direction for sliding cells. Alternates by index parity."""
    if opening_type != SLIDER:
        return None
    if LayoutAxis(axis) == LayoutAxis.VERTICAL:
        return "up" if index % 2 == 0 else "down"
    return "right" if index % 2 == 0 else "left"
