"""
Sash layout engine.

Keeps a unit's sash partition consistent with its dimensions. Every edit
goes through apply_update() (or resize_cell() for a single-cell drag),
which returns a new UnitConfig and never raises for geometry. Out-of-range
input is clamped, not rejected.

Partition rules:
- visual cell count equals sash_count, except a single-sash slider which
  is always two cells (one fixed, one sliding)
- inner width = overall width - 2 * frame
- inner height = overall height - 2 * frame, minus 40mm with a base rail
- cells are at least 100mm and always sum to the inner dimension along the
  layout axis
- resizing the unit keeps each cell's proportion; changing the cell count,
  axis or collapsed-slider state resets to equal shares
"""

import logging
import math

from .catalog.defaults import BASE_RAIL, FAMILY_DEFAULT_LINE, GRID_BARS
from .compatibility import default_line_for, heal_glass
from .models import LayoutAxis, MaterialFamily, OpeningType
from .opening_rules import (
    SIDELITE_PATTERN,
    handle_side,
    hinge_side,
    resolve_opening_type,
    slide_direction,
)
from .schemas import Rect, SashCell, UnitConfig, UnitLayout

logger = logging.getLogger(__name__)

MIN_OVERALL_WIDTH = 320
MIN_OVERALL_HEIGHT = 240
MIN_FRAME_THICKNESS = 10
MAX_FRAME_THICKNESS = 120
MIN_SASH_COUNT = 1
MAX_SASH_COUNT = 4
MIN_SASH_SIZE = 100
MIN_GLASS_SIZE = 10
BASE_RAIL_ALLOWANCE = 40

SASH_THICKNESS_RATIO = 0.75
MIN_SASH_THICKNESS = 18
MAX_SASH_THICKNESS = 40

SIDELITE_SHARES = (0.25, 0.5, 0.25)
SIDELITE_GRID_ROWS = [2, 0, 2]
SIDELITE_GRID_COLS = [0, 0, 0]


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positives (Python's round() is banker's)."""
    return int(math.floor(value + 0.5))


def _clamp(value, low, high):
    return max(low, min(high, value))


# --- Derived dimensions ---

def sash_thickness(frame_thickness: int) -> int:
    return _clamp(
        round_half_up(frame_thickness * SASH_THICKNESS_RATIO),
        MIN_SASH_THICKNESS,
        MAX_SASH_THICKNESS,
    )


def is_collapsed_slider(config: UnitConfig) -> bool:
    return config.opening_type == OpeningType.SLIDER and config.sash_count == 1


def visual_sash_count(config: UnitConfig) -> int:
    if is_collapsed_slider(config):
        return 2
    return config.sash_count


def has_base_rail(config: UnitConfig) -> bool:
    return BASE_RAIL in config.accessories


def has_grid_bars(config: UnitConfig) -> bool:
    return GRID_BARS in config.accessories


def inner_width(config: UnitConfig) -> int:
    return max(0, config.overall_width - 2 * config.frame_thickness)


def inner_height(config: UnitConfig) -> int:
    height = config.overall_height - 2 * config.frame_thickness
    if has_base_rail(config):
        height -= BASE_RAIL_ALLOWANCE
    return max(0, height)


def inner_dimension(config: UnitConfig) -> int:
    """Inner dimension along the layout axis."""
    if config.layout_axis == LayoutAxis.VERTICAL:
        return inner_height(config)
    return inner_width(config)


# --- Partition helpers ---

def _distribute(weights: list, total: float) -> list:
    """
    Split total proportionally to weights with a MIN_SASH_SIZE floor.

    Cells that would fall under the floor are pinned to it and the rest is
    re-split among the others. When even the floor cannot be honored the
    result is equal shares.
    """
    count = len(weights)
    if count == 0:
        return []
    if count * MIN_SASH_SIZE > total:
        return [round(total / count, 2)] * count

    result = [None] * count
    free = list(range(count))
    remaining = float(total)
    while free:
        weight_sum = sum(max(weights[i], 0) for i in free)
        if weight_sum <= 0:
            shares = {i: remaining / len(free) for i in free}
        else:
            shares = {i: remaining * max(weights[i], 0) / weight_sum for i in free}
        pinned = [i for i in free if shares[i] < MIN_SASH_SIZE]
        if not pinned:
            for i in free:
                result[i] = shares[i]
            break
        for i in pinned:
            result[i] = float(MIN_SASH_SIZE)
            remaining -= MIN_SASH_SIZE
            free.remove(i)
    return [round(v, 2) for v in result]


def equal_shares(count: int, total: float) -> list:
    return _distribute([1] * count, total)


def _structure_changed(previous: UnitConfig, current: UnitConfig) -> bool:
    return (
        previous.sash_count != current.sash_count
        or previous.layout_axis != current.layout_axis
        or is_collapsed_slider(previous) != is_collapsed_slider(current)
    )


def _normalize_sizes(previous: UnitConfig, current: UnitConfig, explicit: bool) -> UnitConfig:
    count = visual_sash_count(current)
    inner = inner_dimension(current)
    sizes = current.sash_sizes

    if explicit and sizes and len(sizes) == count:
        fitted = _distribute(sizes, inner)
    elif sizes is None or len(sizes) != count or _structure_changed(previous, current):
        fitted = equal_shares(count, inner)
    else:
        old_inner = inner_dimension(previous)
        if old_inner > 0 and old_inner != inner:
            ratio = inner / old_inner
            sizes = [s * ratio for s in sizes]
        fitted = _distribute(sizes, inner)

    if fitted != sizes:
        logger.debug("Sash sizes normalized to %s (inner %s)", fitted, inner)
    return current.model_copy(update={"sash_sizes": fitted})


def _drop_mismatched_lists(config: UnitConfig) -> UnitConfig:
    count = visual_sash_count(config)
    update = {}
    for name in ("per_sash_opening_type", "grid_rows_per_sash", "grid_cols_per_sash"):
        values = getattr(config, name)
        if values is not None and len(values) != count:
            update[name] = None
    if update:
        return config.model_copy(update=update)
    return config


def _clamp_inputs(config: UnitConfig) -> UnitConfig:
    def non_negative(values):
        if values is None:
            return None
        return [max(0, int(v)) for v in values]

    return config.model_copy(update={
        "overall_width": max(MIN_OVERALL_WIDTH, config.overall_width),
        "overall_height": max(MIN_OVERALL_HEIGHT, config.overall_height),
        "frame_thickness": _clamp(config.frame_thickness, MIN_FRAME_THICKNESS, MAX_FRAME_THICKNESS),
        "sash_count": _clamp(config.sash_count, MIN_SASH_COUNT, MAX_SASH_COUNT),
        "grid_rows": max(0, config.grid_rows),
        "grid_cols": max(0, config.grid_cols),
        "grid_rows_per_sash": non_negative(config.grid_rows_per_sash),
        "grid_cols_per_sash": non_negative(config.grid_cols_per_sash),
        "accessories": list(dict.fromkeys(config.accessories)),
    })


def _apply_sidelite_template(config: UnitConfig) -> UnitConfig:
    """Door centered between two fixed lites, 25/50/25, grid bars on the lites."""
    inner = inner_width(config)
    accessories = list(config.accessories)
    if GRID_BARS not in accessories:
        accessories.append(GRID_BARS)
    return config.model_copy(update={
        "sash_count": len(SIDELITE_PATTERN),
        "layout_axis": LayoutAxis.HORIZONTAL,
        "per_sash_opening_type": list(SIDELITE_PATTERN),
        "sash_sizes": [inner * share for share in SIDELITE_SHARES],
        "accessories": accessories,
        "grid_rows_per_sash": list(SIDELITE_GRID_ROWS),
        "grid_cols_per_sash": list(SIDELITE_GRID_COLS),
    })


# --- Public operations ---

def apply_update(config: UnitConfig, updates: dict = None, store=None) -> UnitConfig:
    """
    Apply a set of field changes and re-derive everything that depends on them.

    Returns a new UnitConfig; the input is never modified. Unknown field
    names are ignored.
    """
    updates = dict(updates or {})
    unknown = [name for name in updates if name not in UnitConfig.model_fields]
    for name in unknown:
        logger.debug("Ignoring unknown unit field %s", name)
        updates.pop(name)

    data = config.model_dump()
    data.update(updates)
    current = _clamp_inputs(UnitConfig.model_validate(data))

    type_changed = current.opening_type != config.opening_type
    family_changed = current.material_family != config.material_family

    if (type_changed or family_changed) and "line_key" not in updates:
        line = current.line_key
        if family_changed:
            line = FAMILY_DEFAULT_LINE.get(current.material_family.value)
        current = current.model_copy(update={
            "line_key": default_line_for(current.material_family, current.opening_type, line),
        })

    explicit_sizes = updates.get("sash_sizes") is not None
    if type_changed:
        cleared = {}
        if "per_sash_opening_type" not in updates:
            cleared["per_sash_opening_type"] = None
        if config.opening_type == OpeningType.DOOR_WITH_SIDELITES:
            for name in ("grid_rows_per_sash", "grid_cols_per_sash"):
                if name not in updates:
                    cleared[name] = None
        if cleared:
            current = current.model_copy(update=cleared)
        if current.opening_type == OpeningType.DOOR_WITH_SIDELITES:
            current = _apply_sidelite_template(current)
            explicit_sizes = True

    current = heal_glass(current, store)
    current = _normalize_sizes(config, current, explicit_sizes)
    return _drop_mismatched_lists(current)


def new_unit(material_family=MaterialFamily.ALUMINUM, overrides: dict = None, store=None) -> UnitConfig:
    """A freshly added unit with family defaults, normalized like any other edit."""
    family = MaterialFamily(material_family)
    base = UnitConfig(
        material_family=family,
        line_key=FAMILY_DEFAULT_LINE.get(family.value),
    )
    return apply_update(base, overrides, store)


def resize_cell(config: UnitConfig, index: int, size: float) -> UnitConfig:
    """
    Set one cell's size along the axis; the other cells absorb the change in
    proportion to their current share.

    Raises IndexError for a cell that does not exist.
    """
    count = visual_sash_count(config)
    if not 0 <= index < count:
        raise IndexError(f"Cell {index} out of range for {count} cells")
    if count == 1:
        return config

    inner = inner_dimension(config)
    sizes = list(config.sash_sizes or equal_shares(count, inner))
    if len(sizes) != count:
        sizes = equal_shares(count, inner)
    max_size = inner - MIN_SASH_SIZE * (count - 1)
    if max_size < MIN_SASH_SIZE:
        return config.model_copy(update={"sash_sizes": equal_shares(count, inner)})

    target = round(_clamp(size, MIN_SASH_SIZE, max_size), 2)
    others = [i for i in range(count) if i != index]
    absorbed = _distribute([sizes[i] for i in others], inner - target)

    new_sizes = list(sizes)
    new_sizes[index] = target
    for i, value in zip(others, absorbed):
        new_sizes[i] = value
    return config.model_copy(update={"sash_sizes": new_sizes})


def _grid_count(per_sash, global_count: int, index: int) -> int:
    if per_sash and index < len(per_sash):
        return per_sash[index]
    return global_count


def cell_sizes(config: UnitConfig) -> list:
    """Current sizes along the axis, falling back to equal shares."""
    count = visual_sash_count(config)
    sizes = config.sash_sizes
    if sizes is None or len(sizes) != count:
        return equal_shares(count, inner_dimension(config))
    return list(sizes)


def cell_dimensions(config: UnitConfig) -> list:
    """(width, height) of each cell in mm."""
    if config.layout_axis == LayoutAxis.VERTICAL:
        return [(inner_width(config), size) for size in cell_sizes(config)]
    return [(size, inner_height(config)) for size in cell_sizes(config)]


def resolve_layout(config: UnitConfig) -> UnitLayout:
    """
    Everything a renderer needs to draw the unit without doing any geometry:
    frame, inner opening, base rail and one resolved cell per visual sash.
    """
    frame = config.frame_thickness
    thickness = sash_thickness(frame)
    width_in = inner_width(config)
    height_in = inner_height(config)
    count = visual_sash_count(config)
    vertical = config.layout_axis == LayoutAxis.VERTICAL
    grid = has_grid_bars(config)

    base_rail = None
    if has_base_rail(config):
        base_rail = Rect(x=frame, y=frame + height_in, width=width_in, height=BASE_RAIL_ALLOWANCE)

    cells = []
    offset = 0.0
    for index, size in enumerate(cell_sizes(config)):
        if vertical:
            rect = Rect(x=frame, y=frame + offset, width=width_in, height=size)
        else:
            rect = Rect(x=frame + offset, y=frame, width=size, height=height_in)
        offset += size

        glass_rect = Rect(
            x=rect.x + thickness,
            y=rect.y + thickness,
            width=max(MIN_GLASS_SIZE, rect.width - 2 * thickness),
            height=max(MIN_GLASS_SIZE, rect.height - 2 * thickness),
        )
        opening = resolve_opening_type(
            config.opening_type, config.per_sash_opening_type, count, index,
        )
        operable = opening != OpeningType.FIXED
        handle = handle_side(opening, count, index) if operable else None

        cells.append(SashCell(
            index=index,
            rect=rect,
            glass_rect=glass_rect,
            opening_type=opening,
            show_handle=operable,
            handle_side=handle,
            hinge_side=hinge_side(opening, handle) if operable else None,
            slide_direction=slide_direction(opening, config.layout_axis, index),
            grid_rows=_grid_count(config.grid_rows_per_sash, config.grid_rows, index) if grid else 0,
            grid_cols=_grid_count(config.grid_cols_per_sash, config.grid_cols, index) if grid else 0,
        ))

    return UnitLayout(
        overall_width=config.overall_width,
        overall_height=config.overall_height,
        frame_thickness=frame,
        sash_thickness=thickness,
        layout_axis=config.layout_axis,
        frame=Rect(x=0, y=0, width=config.overall_width, height=config.overall_height),
        inner=Rect(x=frame, y=frame, width=width_in, height=height_in),
        base_rail=base_rail,
        cells=cells,
    )
