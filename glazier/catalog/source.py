"""
Override source backed by the catalog_overrides table.

The core engines never wait on this: if the query fails the caller gets
None and the built-in defaults apply.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .. import models
from .store import CatalogStore

logger = logging.getLogger(__name__)


def fetch_catalog_overrides(db: Session, family) -> dict:
    """
    Returns {category: {key: {label, price, attributes, deleted}}} for a family,
    or None when the store cannot be read.
    """
    family = getattr(family, "value", family)
    try:
        rows = db.query(models.CatalogOverride).filter(
            models.CatalogOverride.family == family
        ).all()
    except SQLAlchemyError as e:
        logger.warning("Catalog overrides unavailable for %s: %s", family, e)
        return None

    overrides = {}
    for row in rows:
        overrides.setdefault(row.category, {})[row.key] = {
            "label": row.label,
            "price": row.price,
            "attributes": row.attributes or {},
            "deleted": bool(row.deleted),
        }
    return overrides


def load_catalog(db: Session, family) -> CatalogStore:
    """CatalogStore for a family with whatever overrides could be read."""
    return CatalogStore(family, fetch_catalog_overrides(db, family))
