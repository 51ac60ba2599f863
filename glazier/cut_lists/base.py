"""
Base class and formula types for per-line cut lists.

Each profile line module declares its tables as constants built from
Linear formulas, so they can be checked against the manufacturer's
drawings without reading any logic:

    Linear(w=1, c=-16)              ->  W - 16
    Linear(w=Fraction(1, 2), c=-62) ->  W/2 - 62
    Linear(w=4, h=6, scale=Fraction(1, 1000))  ->  (4W + 6H)/1000

W is the overall unit width, H the overall height, both in mm.
"""

import logging
import math
from abc import ABC
from dataclasses import dataclass
from fractions import Fraction

logger = logging.getLogger(__name__)


def _fmt_number(value: Fraction) -> str:
    if value.denominator == 1:
        return str(value.numerator)
    return f"{float(value):g}"


def _fmt_term(coef: Fraction, symbol: str) -> str:
    coef = abs(coef)
    if coef.denominator == 1:
        return symbol if coef == 1 else f"{coef.numerator}{symbol}"
    numerator = "" if coef.numerator == 1 else str(coef.numerator)
    return f"{numerator}{symbol}/{coef.denominator}"


@dataclass(frozen=True)
class Linear:
    """scale * (w*W + h*H + c), exact rational coefficients."""
    w: Fraction = Fraction(0)
    h: Fraction = Fraction(0)
    c: Fraction = Fraction(0)
    scale: Fraction = Fraction(1)

    def __post_init__(self):
        for name in ("w", "h", "c", "scale"):
            object.__setattr__(self, name, Fraction(getattr(self, name)))

    def evaluate(self, width, height) -> float:
        value = self.scale * (self.w * Fraction(width) + self.h * Fraction(height) + self.c)
        return float(value)

    def __str__(self):
        parts = []
        for coef, symbol in ((self.w, "W"), (self.h, "H")):
            if coef == 0:
                continue
            sign = "-" if coef < 0 else "+"
            parts.append((sign, _fmt_term(coef, symbol)))
        if self.c != 0 or not parts:
            sign = "-" if self.c < 0 else "+"
            parts.append((sign, _fmt_number(abs(self.c))))

        first_sign, first = parts[0]
        text = ("-" if first_sign == "-" else "") + first
        for sign, term in parts[1:]:
            text += f" {sign} {term}"

        if self.scale == 1:
            return text
        if self.scale.numerator == 1:
            return f"({text})/{self.scale.denominator}"
        return f"{_fmt_number(self.scale)} * ({text})"


@dataclass(frozen=True)
class Ceil:
    """Whole-piece count: ceil of a linear formula."""
    formula: Linear

    def evaluate(self, width, height) -> int:
        return math.ceil(self.formula.evaluate(width, height))

    def __str__(self):
        return f"ceil({self.formula})"


W = Linear(w=1)
H = Linear(h=1)
HALF = Fraction(1, 2)
PER_METER = Fraction(1, 1000)  # mm of perimeter -> meters of gasket/pile


@dataclass(frozen=True)
class ProfileCut:
    code: str
    description: str
    quantity: int
    length: Linear


@dataclass(frozen=True)
class GlassCut:
    count: int
    width: Linear
    height: Linear


@dataclass(frozen=True)
class HardwareLine:
    description: str
    quantity: object  # int, Linear or Ceil
    unit: str = "pcs"


class BaseCutList(ABC):
    """
    One profile line cut list, drawn for a fixed number of cells.

    Subclasses set the class-level tables. OPENING_TYPES lists every unit
    type the table covers; the first one is reported when none is given.
    PROVISIONAL marks tables whose coefficients have not been checked
    against engineering drawings yet.
    """

    LINE_KEY: str = ""
    OPENING_TYPES: tuple = ()
    CELLS: int = 1  # visual cell count the table is drawn for
    PROVISIONAL: bool = False

    PROFILES: tuple = ()
    REINFORCEMENTS: tuple = ()
    GLASS: GlassCut = None
    HARDWARE: tuple = ()

    def __init__(self, opening_type: str = None):
        self.opening_type = opening_type or self.OPENING_TYPES[0]

    def profiles(self, glass_thickness: int) -> tuple:
        """Profile table; lines whose glazing bead depends on the glass override this."""
        return self.PROFILES

    def generate(self, width, height, glass_thickness: int = 6) -> dict:
        """Evaluate every table for one unit. Pure: same input, same output."""
        profiles = [
            self.make_profile_item(cut, width, height)
            for cut in self.profiles(glass_thickness)
        ]
        reinforcements = [
            self.make_profile_item(cut, width, height)
            for cut in self.REINFORCEMENTS
        ]
        hardware = [
            self.make_hardware_item(line, width, height)
            for line in self.HARDWARE
        ]
        return self.make_cut_list(
            width=width,
            height=height,
            profiles=profiles,
            reinforcements=reinforcements,
            glass_panes=self.make_glass_spec(self.GLASS, width, height, glass_thickness),
            hardware=hardware,
        )

    # --- Helper methods for all cut lists ---

    def make_profile_item(self, cut: ProfileCut, width, height) -> dict:
        return {
            "code": cut.code,
            "description": cut.description,
            "quantity": cut.quantity,
            "length_mm": round(cut.length.evaluate(width, height), 1),
            "formula": str(cut.length),
        }

    def make_glass_spec(self, glass: GlassCut, width, height, glass_thickness: int) -> dict:
        return {
            "count": glass.count,
            "width_mm": round(glass.width.evaluate(width, height), 1),
            "height_mm": round(glass.height.evaluate(width, height), 1),
            "width_formula": str(glass.width),
            "height_formula": str(glass.height),
            "thickness_mm": glass_thickness,
        }

    def make_hardware_item(self, line: HardwareLine, width, height) -> dict:
        quantity = line.quantity
        formula = None
        if isinstance(quantity, (Linear, Ceil)):
            formula = str(quantity)
            quantity = quantity.evaluate(width, height)
            if line.unit == "m":
                quantity = round(quantity, 2)
        return {
            "description": line.description,
            "quantity": quantity,
            "unit": line.unit,
            "formula": formula,
        }

    def make_cut_list(self, width, height, profiles: list, reinforcements: list,
                      glass_panes: dict, hardware: list) -> dict:
        return {
            "line_key": self.LINE_KEY,
            "opening_type": self.opening_type,
            "cells": self.CELLS,
            "width": width,
            "height": height,
            "profiles": profiles,
            "reinforcements": reinforcements,
            "glass_panes": glass_panes,
            "hardware": hardware,
            "provisional": self.PROVISIONAL,
        }
