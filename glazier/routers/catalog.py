"""
Catalog endpoints.

GET    /api/catalog/{family}                           - every category, merged
GET    /api/catalog/{family}/{category}                - one category, merged
PUT    /api/catalog/{family}/{category}/{key}          - set label/price override
DELETE /api/catalog/{family}/{category}/{key}          - explicit delete (hides the option)
POST   /api/catalog/{family}/{category}/{key}/restore  - drop the override, back to default
"""

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from .. import models, schemas
from ..catalog.defaults import FAMILY_DEFAULTS
from ..catalog.source import load_catalog
from ..database import get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/catalog", tags=["catalog"])


def _get_override(db: Session, family, category, key: str):
    return db.query(models.CatalogOverride).filter(
        models.CatalogOverride.family == family.value,
        models.CatalogOverride.category == category.value,
        models.CatalogOverride.key == key,
    ).first()


@router.get("/{family}")
def get_catalog(family: models.MaterialFamily, db: Session = Depends(get_db)):
    store = load_catalog(db, family)
    return {category: store.listing(category) for category in store.categories()}


@router.get("/{family}/{category}", response_model=list[schemas.CatalogEntryOut])
def get_category(
    family: models.MaterialFamily,
    category: models.CatalogCategory,
    db: Session = Depends(get_db),
):
    return load_catalog(db, family).listing(category)


@router.put("/{family}/{category}/{key}", response_model=schemas.CatalogEntryOut)
def set_override(
    family: models.MaterialFamily,
    category: models.CatalogCategory,
    key: str,
    update: schemas.CatalogOverrideUpdate,
    db: Session = Depends(get_db),
):
    """Create or replace the override for one key. Also undoes an earlier delete."""
    override = _get_override(db, family, category, key)
    if not override:
        override = models.CatalogOverride(family=family.value, category=category.value, key=key)
        db.add(override)
    override.label = update.label
    override.price = update.price
    override.attributes = update.attributes
    override.deleted = False
    db.commit()
    logger.info("Catalog override set: %s/%s/%s", family.value, category.value, key)

    store = load_catalog(db, family)
    entry = store.resolve(category, key)
    return {
        "key": entry.key,
        "label": entry.label,
        "price": entry.price,
        "attributes": entry.attributes,
        "overridden": store.is_overridden(category, key),
    }


@router.delete("/{family}/{category}/{key}")
def delete_option(
    family: models.MaterialFamily,
    category: models.CatalogCategory,
    key: str,
    db: Session = Depends(get_db),
):
    """
    Explicitly remove an option from the selectable list.
    Saved units that still reference it keep pricing from the built-in default.
    """
    override = _get_override(db, family, category, key)
    known = key in FAMILY_DEFAULTS[family.value].get(category.value, {})
    if not override and not known:
        raise HTTPException(status_code=404, detail="Catalog option not found")
    if not override:
        override = models.CatalogOverride(family=family.value, category=category.value, key=key)
        db.add(override)
    override.deleted = True
    db.commit()
    logger.info("Catalog option deleted: %s/%s/%s", family.value, category.value, key)
    return {"ok": True, "deleted": key}


@router.post("/{family}/{category}/{key}/restore")
def restore_option(
    family: models.MaterialFamily,
    category: models.CatalogCategory,
    key: str,
    db: Session = Depends(get_db),
):
    """Remove the stored override so the built-in default applies again."""
    override = _get_override(db, family, category, key)
    if not override:
        raise HTTPException(status_code=404, detail="No override for this option")
    db.delete(override)
    db.commit()
    return {"ok": True, "restored": key}
