"""
Insulated glass unit quotes.

POST /api/insulated-glass/quote  - priced lines and order total
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from .. import schemas
from ..catalog.source import load_catalog
from ..database import get_db
from ..insulated_glass import calculate_order

router = APIRouter(prefix="/insulated-glass", tags=["insulated-glass"])


@router.post("/quote")
def quote_insulated_glass(request: schemas.InsulatedGlassQuoteRequest, db: Session = Depends(get_db)):
    """Glass prices come from the merged catalog of the requested family."""
    store = load_catalog(db, request.material_family)
    return calculate_order(request.items, store)
