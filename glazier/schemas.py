from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Any
from datetime import datetime
from .models import MaterialFamily, OpeningType, LayoutAxis, Side


# --- Unit configuration ---

class UnitConfig(BaseModel):
    """One configurable window/door unit. Plain data, replaced wholesale on every edit."""
    material_family: MaterialFamily = MaterialFamily.ALUMINUM
    overall_width: int = 1000
    overall_height: int = 1000
    frame_thickness: int = 40
    opening_type: OpeningType = OpeningType.SLIDER
    sash_count: int = 1
    layout_axis: LayoutAxis = LayoutAxis.HORIZONTAL
    sash_sizes: Optional[List[float]] = None
    per_sash_opening_type: Optional[List[OpeningType]] = None
    color_key: str = "white"
    glass_key: str = "clear_4"
    line_key: Optional[str] = "al_25"
    accessories: List[str] = Field(default_factory=list)
    grid_rows: int = 0
    grid_cols: int = 0
    grid_rows_per_sash: Optional[List[int]] = None
    grid_cols_per_sash: Optional[List[int]] = None
    structural_coupling: bool = False


class NewUnitRequest(BaseModel):
    material_family: Optional[MaterialFamily] = None
    overrides: Dict[str, Any] = Field(default_factory=dict)


class UnitUpdateRequest(BaseModel):
    config: UnitConfig
    updates: Dict[str, Any] = Field(default_factory=dict)


class UnitEditRequest(BaseModel):
    updates: Dict[str, Any] = Field(default_factory=dict)


class ResizeCellRequest(BaseModel):
    config: UnitConfig
    index: int
    size: float


# --- Resolved layout (rendering contract) ---

class Rect(BaseModel):
    x: float
    y: float
    width: float
    height: float


class SashCell(BaseModel):
    index: int
    rect: Rect
    glass_rect: Rect
    opening_type: OpeningType
    show_handle: bool
    handle_side: Optional[Side] = None
    hinge_side: Optional[Side] = None
    slide_direction: Optional[str] = None  # right | left | up | down
    grid_rows: int = 0
    grid_cols: int = 0


class UnitLayout(BaseModel):
    overall_width: int
    overall_height: int
    frame_thickness: int
    sash_thickness: int
    layout_axis: LayoutAxis
    frame: Rect
    inner: Rect
    base_rail: Optional[Rect] = None
    cells: List[SashCell]


class UnitResponse(BaseModel):
    config: UnitConfig
    layout: UnitLayout
    price: int


# --- Insulated glass units ---

class InsulatedGlassItem(BaseModel):
    """One line of an insulated glass order. Two panes around a spacer."""
    quantity: int = Field(1, ge=0)
    width: int = Field(0, ge=0)  # mm
    height: int = Field(0, ge=0)  # mm
    outer_glass_key: str = "clear_4"
    inner_glass_key: str = "clear_4"
    spacer_mm: int = 10
    spacer_color: str = "silver"
    gas_fill: bool = False
    internal_blinds: bool = False
    grid_bars: bool = False
    unit_price: Optional[int] = None  # None takes the suggested glass cost


class InsulatedGlassQuoteRequest(BaseModel):
    material_family: MaterialFamily = MaterialFamily.ALUMINUM
    items: List[InsulatedGlassItem] = Field(default_factory=list)


# --- Catalog ---

class CatalogEntryOut(BaseModel):
    key: str
    label: str
    price: float
    attributes: Dict[str, Any] = Field(default_factory=dict)
    overridden: bool = False


class CatalogOverrideUpdate(BaseModel):
    label: Optional[str] = None
    price: Optional[float] = None
    attributes: Optional[Dict[str, Any]] = None


# --- Projects ---

class ProjectBase(BaseModel):
    name: str
    client_name: Optional[str] = None
    client_address: Optional[str] = None
    client_phone: Optional[str] = None
    notes: Optional[str] = None
    material_family: MaterialFamily = MaterialFamily.ALUMINUM
    price_adjustment_pct: float = 0.0

class ProjectCreate(ProjectBase):
    pass

class ProjectUpdate(BaseModel):
    name: Optional[str] = None
    client_name: Optional[str] = None
    client_address: Optional[str] = None
    client_phone: Optional[str] = None
    notes: Optional[str] = None
    price_adjustment_pct: Optional[float] = None

class Project(ProjectBase):
    id: int
    project_number: str
    units: List[UnitConfig] = []
    created_at: datetime
    updated_at: datetime
