from sqlalchemy import Column, Integer, String, Float, DateTime, Text, Boolean, JSON, UniqueConstraint
from datetime import datetime
from .database import Base
import enum


# --- Enums ---

class MaterialFamily(str, enum.Enum):
    ALUMINUM = "aluminum"
    PVC = "pvc"


class OpeningType(str, enum.Enum):
    FIXED = "fixed"
    SLIDER = "slider"
    PROJECTING = "projecting"
    AWNING = "awning"
    CASEMENT_LEFT = "casement_left"
    CASEMENT_RIGHT = "casement_right"
    TILT_TURN = "tilt_turn"
    DOOR_LEFT = "door_left"
    DOOR_RIGHT = "door_right"
    DOOR_WITH_SIDELITES = "door_with_sidelites"
    SLIDING_DOOR = "sliding_door"


class LayoutAxis(str, enum.Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class Side(str, enum.Enum):
    LEFT = "left"
    RIGHT = "right"


class CatalogCategory(str, enum.Enum):
    # BASE holds the single global base-price entry, keyed "base"
    BASE = "base"
    OPENING_TYPES = "opening_types"
    FRAME_COLORS = "frame_colors"
    GLASS_TYPES = "glass_types"
    ACCESSORIES = "accessories"
    PROFILE_LINES = "profile_lines"


# Side-hinged types get a hinge side opposite the handle
SIDE_HINGED_TYPES = (
    OpeningType.CASEMENT_LEFT,
    OpeningType.CASEMENT_RIGHT,
    OpeningType.TILT_TURN,
    OpeningType.DOOR_LEFT,
    OpeningType.DOOR_RIGHT,
)


# --- Tables ---

class CatalogOverride(Base):
    """Admin edits layered over the built-in catalog, one row per key."""
    __tablename__ = "catalog_overrides"
    __table_args__ = (
        UniqueConstraint("family", "category", "key", name="uq_catalog_override_key"),
    )

    id = Column(Integer, primary_key=True, index=True)
    family = Column(String, nullable=False, index=True)  # MaterialFamily value
    category = Column(String, nullable=False)  # CatalogCategory value
    key = Column(String, nullable=False)
    label = Column(String, nullable=True)  # None keeps the default label
    price = Column(Float, nullable=True)  # None keeps the default price
    attributes = Column(JSON, nullable=True)
    deleted = Column(Boolean, default=False)  # explicit delete, hides the option
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class Project(Base):
    """A customer quote holding any number of independent units."""
    __tablename__ = "projects"

    id = Column(Integer, primary_key=True, index=True)
    project_number = Column(String, unique=True, nullable=False)
    name = Column(String, nullable=False)
    client_name = Column(String, nullable=True)
    client_address = Column(Text, nullable=True)
    client_phone = Column(String, nullable=True)
    notes = Column(Text, nullable=True)
    material_family = Column(String, default=MaterialFamily.ALUMINUM.value)
    price_adjustment_pct = Column(Float, default=0.0)
    units_json = Column(JSON, default=list)  # list of UnitConfig dumps
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
