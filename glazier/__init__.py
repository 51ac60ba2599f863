"""
Window and door unit configurator.

Derives price, sash layout and manufacturing cut lists from a single
UnitConfig record.
"""
