"""
Option catalogs: opening types, frame colors, glass, accessories and profile
lines, plus the global base price. Built-in defaults per material family,
merged per key with stored overrides.
"""

from .store import CatalogEntry, CatalogStore, merge_overrides, zero_entry

__all__ = ["CatalogEntry", "CatalogStore", "merge_overrides", "zero_entry"]
