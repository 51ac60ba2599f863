"""
Unit configuration endpoints. Stateless: the client holds the UnitConfig
and sends it back with every edit.

POST /api/units/new          - defaults for a new unit
POST /api/units/update       - apply field changes, re-derive layout and price
POST /api/units/resize-cell  - drag one sash to a new size
POST /api/units/layout       - resolved cells for the preview
POST /api/units/price        - itemised price
POST /api/units/cut-list     - manufacturing cut list (404 when the line has none)
GET  /api/units/compatibility/{line_key}
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from .. import models, schemas
from ..catalog.source import load_catalog
from ..compatibility import LINE_SPECS, glass_thickness, is_compatible, standard_glass_for
from ..config import settings
from ..cut_lists.registry import cut_list_for_unit
from ..database import get_db
from ..layout_engine import apply_update, new_unit, resize_cell, resolve_layout
from ..pricing_engine import PricingEngine

router = APIRouter(prefix="/units", tags=["units"])


def unit_response(config: schemas.UnitConfig, store) -> dict:
    return {
        "config": config,
        "layout": resolve_layout(config),
        "price": PricingEngine(store).price(config),
    }


@router.post("/new", response_model=schemas.UnitResponse)
def create_unit(request: schemas.NewUnitRequest, db: Session = Depends(get_db)):
    family = request.material_family or models.MaterialFamily(settings.DEFAULT_MATERIAL_FAMILY)
    store = load_catalog(db, family)
    config = new_unit(family, request.overrides, store)
    return unit_response(config, store)


@router.post("/update", response_model=schemas.UnitResponse)
def update_unit(request: schemas.UnitUpdateRequest, db: Session = Depends(get_db)):
    family = request.updates.get("material_family", request.config.material_family)
    store = load_catalog(db, family)
    config = apply_update(request.config, request.updates, store)
    return unit_response(config, store)


@router.post("/resize-cell", response_model=schemas.UnitResponse)
def resize_unit_cell(request: schemas.ResizeCellRequest, db: Session = Depends(get_db)):
    try:
        config = resize_cell(request.config, request.index, request.size)
    except IndexError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return unit_response(config, load_catalog(db, config.material_family))


@router.post("/layout", response_model=schemas.UnitLayout)
def get_layout(config: schemas.UnitConfig):
    return resolve_layout(config)


@router.post("/price")
def get_price(config: schemas.UnitConfig, db: Session = Depends(get_db)):
    store = load_catalog(db, config.material_family)
    return PricingEngine(store).build_breakdown(config)


@router.post("/cut-list")
def get_cut_list(config: schemas.UnitConfig, db: Session = Depends(get_db)):
    store = load_catalog(db, config.material_family)
    cut_list = cut_list_for_unit(config, store)
    if cut_list is None:
        raise HTTPException(
            status_code=404,
            detail=f"No cut list for line {config.line_key} with opening {config.opening_type.value}",
        )
    return cut_list


@router.get("/compatibility/{line_key}")
def get_compatibility(
    line_key: str,
    family: models.MaterialFamily = models.MaterialFamily.ALUMINUM,
    db: Session = Depends(get_db),
):
    """Which glass options a line accepts, and its standard glass."""
    store = load_catalog(db, family)
    spec = LINE_SPECS.get(line_key)
    return {
        "line_key": line_key,
        "constrained": spec is not None,
        "valid_thicknesses": sorted(spec.valid_thicknesses) if spec else None,
        "allows_insulated": spec.allows_insulated if spec else True,
        "standard_glass": standard_glass_for(line_key, store),
        "compatible_glass": [
            {"key": entry.key, "label": entry.label, "thickness": glass_thickness(entry.key, store)}
            for entry in store.options("glass_types")
            if is_compatible(entry.key, line_key, store)
        ],
    }
