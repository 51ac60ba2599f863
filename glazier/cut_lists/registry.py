"""
Cut-list registry - maps (line_key, opening_type, cells) to cut-list classes.

Only the combinations listed here have manufacturing formulas. A line can
carry several tables for the same opening type when they are drawn for a
different number of cells (PVC PD10 with one, two or three fixed lites).
Asking for anything else yields None rather than an error; callers check
has_cut_list() or is_applicable() first.
"""

import logging

from ..compatibility import glass_thickness
from ..layout_engine import visual_sash_count
from .al_20 import AL20SliderCutList
from .al_25 import AL25SliderCutList
from .al_42 import AL42ProjectingCutList
from .al_5000 import AL5000SliderCutList
from .base import BaseCutList
from .l12_shower import L12ShowerCutList
from .pvc_58cd import PVC58CDSlidingDoorCutList, PVC58CDSliderCutList
from .pvc_58dj import PVC58DJInwardDoorCutList, PVC58DJInwardWindowCutList
from .pvc_70cd import PVC70CDSlidingDoorCutList, PVC70CDSliderCutList
from .pvc_pd10 import PD10OneFixedCutList, PD10ThreeFixedCutList, PD10TwoFixedCutList
from .s33_rpt import S33SliderCutList
from .s38_rpt import S38FixedCutList, S38ProjectingCutList

logger = logging.getLogger(__name__)

CUT_LIST_CLASSES = (
    AL25SliderCutList,
    AL20SliderCutList,
    AL5000SliderCutList,
    AL42ProjectingCutList,
    L12ShowerCutList,
    S38ProjectingCutList,
    S38FixedCutList,
    S33SliderCutList,
    PVC58CDSliderCutList,
    PVC58CDSlidingDoorCutList,
    PVC70CDSliderCutList,
    PVC70CDSlidingDoorCutList,
    PVC58DJInwardWindowCutList,
    PVC58DJInwardDoorCutList,
    PD10OneFixedCutList,
    PD10TwoFixedCutList,
    PD10ThreeFixedCutList,
)

CUT_LIST_REGISTRY: dict[tuple, type] = {
    (cls.LINE_KEY, opening_type, cls.CELLS): cls
    for cls in CUT_LIST_CLASSES
    for opening_type in cls.OPENING_TYPES
}


def _opening(opening_type) -> str:
    return getattr(opening_type, "value", opening_type)


def _find(line_key, opening_type, cells=None) -> type:
    """Exact match when cells is given, else the table with the fewest cells."""
    opening_type = _opening(opening_type)
    if cells is not None:
        return CUT_LIST_REGISTRY.get((line_key, opening_type, cells))
    matches = [
        (key[2], cls) for key, cls in CUT_LIST_REGISTRY.items()
        if key[0] == line_key and key[1] == opening_type
    ]
    if not matches:
        return None
    return min(matches, key=lambda match: match[0])[1]


def has_cut_list(line_key, opening_type, cells: int = None) -> bool:
    """Check if formulas exist for a line and opening type (and cell count, if given)."""
    return _find(line_key, opening_type, cells) is not None


def get_cut_list(line_key, opening_type, cells: int = None) -> BaseCutList:
    """Returns an instance of the matching cut list, or None."""
    cls = _find(line_key, opening_type, cells)
    return cls(_opening(opening_type)) if cls else None


def list_cut_lists() -> list:
    """All registered (line_key, opening_type, cells) combinations."""
    return list(CUT_LIST_REGISTRY.keys())


def generate_cut_list(line_key, opening_type, width, height, glass_thickness_mm: int = 6,
                      cells: int = None) -> dict:
    """Evaluate the formulas for one combination, or None if it has none."""
    cut_list = get_cut_list(line_key, opening_type, cells)
    if cut_list is None:
        logger.debug("No cut list for %s / %s / %s cells", line_key, opening_type, cells)
        return None
    return cut_list.generate(width, height, glass_thickness_mm)


def is_applicable(config) -> bool:
    """
    Formulas exist for the unit's line and type at the unit's visual cell
    count (two cells for the slider tables).
    """
    return has_cut_list(config.line_key, config.opening_type, visual_sash_count(config))


def cut_list_for_unit(config, store=None) -> dict:
    """Cut list for a configured unit, or None when no table applies."""
    if not is_applicable(config):
        return None
    return generate_cut_list(
        config.line_key,
        config.opening_type,
        config.overall_width,
        config.overall_height,
        glass_thickness(config.glass_key, store),
        visual_sash_count(config),
    )
