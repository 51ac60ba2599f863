"""
Catalog lookup with fallback chain:
1. Overrides stored by an admin (CatalogOverride rows), merged per key
2. Built-in family defaults from defaults.py
3. A zero-price entry for keys nobody knows about

Lookups never raise. Price computation must stay total even when the
override store is unreachable or a saved unit references a retired key.
"""

import logging
from dataclasses import dataclass, field

from .defaults import FAMILY_DEFAULTS

logger = logging.getLogger(__name__)

_ENTRY_FIELDS = ("label", "price", "deleted")


@dataclass(frozen=True)
class CatalogEntry:
    key: str
    label: str
    price: float
    attributes: dict = field(default_factory=dict)


def zero_entry(key: str) -> CatalogEntry:
    """Documented fallback for unknown keys: no price, no effect."""
    return CatalogEntry(key=key, label=key, price=0, attributes={})


def _category_name(category) -> str:
    return getattr(category, "value", category)


def merge_overrides(defaults: dict, overrides: dict = None) -> dict:
    """
    Merge one category's overrides over its defaults, key by key.

    An override replaces label and price only when it sets them, and its
    attributes are layered over the default attributes. Default keys with no
    override pass through unchanged. Overrides for unknown keys add entries.
    A category is never replaced as a whole.
    """
    merged = {key: dict(entry) for key, entry in defaults.items()}
    for key, override in (overrides or {}).items():
        entry = dict(merged.get(key, {"label": key, "price": 0}))
        if override.get("label") is not None:
            entry["label"] = override["label"]
        if override.get("price") is not None:
            entry["price"] = override["price"]
        entry.update(override.get("attributes") or {})
        entry["deleted"] = bool(override.get("deleted", False))
        entry["overridden"] = True
        merged[key] = entry
    return merged


def _to_entry(key: str, data: dict) -> CatalogEntry:
    attributes = {
        k: v for k, v in data.items() if k not in _ENTRY_FIELDS and k != "overridden"
    }
    return CatalogEntry(
        key=key,
        label=data.get("label") or key,
        price=data.get("price") or 0,
        attributes=attributes,
    )


class CatalogStore:
    """
    Merged view of one material family's catalogs.

    overrides: {category: {key: {"label", "price", "attributes", "deleted"}}}
    or None when the override source is unavailable.
    """

    def __init__(self, family="aluminum", overrides: dict = None):
        self.family = _category_name(family)
        if self.family not in FAMILY_DEFAULTS:
            logger.warning("Unknown material family %s, using aluminum catalog", self.family)
            self.family = "aluminum"
        self._defaults = FAMILY_DEFAULTS[self.family]
        overrides = overrides or {}
        self._merged = {
            category: merge_overrides(table, overrides.get(category))
            for category, table in self._defaults.items()
        }
        # Categories only known through overrides still merge per key
        for category, table in overrides.items():
            if category not in self._merged:
                self._merged[category] = merge_overrides({}, table)

    def resolve(self, category, key: str) -> CatalogEntry:
        """Entry for a key. Explicitly deleted keys resolve to their built-in default."""
        category = _category_name(category)
        if not key:
            return zero_entry(key or "")
        data = self._merged.get(category, {}).get(key)
        if data is not None and not data.get("deleted"):
            return _to_entry(key, data)
        default = self._defaults.get(category, {}).get(key)
        if default is not None:
            return _to_entry(key, default)
        logger.debug("No catalog entry for %s/%s, using zero entry", category, key)
        return zero_entry(key)

    def price(self, category, key: str) -> float:
        return self.resolve(category, key).price

    def base_price(self) -> float:
        return self.price("base", "base")

    def has_entry(self, category, key: str) -> bool:
        """True when resolve() would return something other than the zero entry."""
        category = _category_name(category)
        data = self._merged.get(category, {}).get(key)
        if data is not None and not data.get("deleted"):
            return True
        return key in self._defaults.get(category, {})

    def is_overridden(self, category, key: str) -> bool:
        data = self._merged.get(_category_name(category), {}).get(key)
        return bool(data and data.get("overridden") and not data.get("deleted"))

    def price_is_overridden(self, category, key: str) -> bool:
        """True when the price in effect came from an override, not a built-in default."""
        if not self.is_overridden(category, key):
            return False
        category = _category_name(category)
        default = self._defaults.get(category, {}).get(key)
        merged = self._merged[category][key]
        return default is None or merged.get("price") != default.get("price")

    def options(self, category) -> list:
        """Selectable entries in catalog order, without explicitly deleted keys."""
        category = _category_name(category)
        return [
            _to_entry(key, data)
            for key, data in self._merged.get(category, {}).items()
            if not data.get("deleted")
        ]

    def listing(self, category) -> list:
        """options() plus whether each entry carries an override."""
        return [
            {
                "key": entry.key,
                "label": entry.label,
                "price": entry.price,
                "attributes": entry.attributes,
                "overridden": self.is_overridden(category, entry.key),
            }
            for entry in self.options(category)
        ]

    def categories(self) -> list:
        return list(self._merged.keys())
