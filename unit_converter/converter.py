"""Table-driven linear unit conversion.

Every unit carries a factor relative to the base unit of its category
(millimeters, grams, milliliters). A conversion goes through the base unit:

    base   = value × factor(from_unit)
    result = base ÷ factor(to_unit)

Both units must belong to the same category.
"""

import math
from numbers import Number, Real
from typing import Optional

from unit_converter.config import CATEGORIES, CONVERSION_RATES, DISPLAY_DECIMALS
from unit_converter.models import ConversionResult, Unit


class ConversionError(ValueError):
    """Base class for errors reported to the caller of convert()."""
    default_message = "Conversion failed."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)


class MissingInput(ConversionError):
    """The value is missing or non-numeric, or a unit was not selected."""
    default_message = "Please fill all fields."


class IncompatibleUnits(ConversionError):
    """The two units are not members of the same category."""
    default_message = "Incompatible unit types selected."


def validate_table(rates=CONVERSION_RATES) -> None:
    """Check the conversion table invariants.

    - each category has at least one unit
    - every factor is a strictly positive number
    - every unit label appears in exactly one category
    """
    seen = {}
    for category, units in rates.items():
        if not units:
            raise ValueError(f"Category '{category}' has no units")
        for label, factor in units.items():
            if isinstance(factor, bool) or not isinstance(factor, Real) or not factor > 0:
                raise ValueError(f"Unit '{label}' has a non-positive factor: {factor!r}")
            if label in seen:
                raise ValueError(
                    f"Unit '{label}' belongs to both '{seen[label]}' and '{category}'"
                )
            seen[label] = category


validate_table()


def get_categories() -> list:
    """Return category names in display order."""
    return [c for c in CATEGORIES if c in CONVERSION_RATES]


def get_units(category: Optional[str] = None) -> list:
    """Return Unit objects, optionally limited to one category."""
    categories = [category] if category else get_categories()
    units = []
    for cat in categories:
        for label, factor in CONVERSION_RATES.get(cat, {}).items():
            units.append(Unit(label=label, category=cat, factor=factor))
    return units


def category_of(unit: str) -> Optional[str]:
    if not isinstance(unit, str):
        return None
    for category in get_categories():
        if unit in CONVERSION_RATES[category]:
            return category
    return None


def find_category(from_unit: str, to_unit: str) -> Optional[str]:
    """Return the category containing both units, or None."""
    if not isinstance(from_unit, str) or not isinstance(to_unit, str):
        return None
    for category in get_categories():
        units = CONVERSION_RATES[category]
        if from_unit in units and to_unit in units:
            return category
    return None


def resolve_unit(name: str) -> Optional[str]:
    """Map a label or abbreviation ("m", "fl oz") to its full label."""
    if not name:
        return None
    wanted = name.strip().lower()
    for unit in get_units():
        if wanted in (unit.label.lower(), unit.abbreviation.lower(), unit.name.lower()):
            return unit.label
    return None


def parse_value(raw) -> float:
    """Turn a form or command-line value into a float.

    None, empty text, text that is not a number, NaN and infinity all
    count as a missing value.
    """
    if raw is None or isinstance(raw, bool):
        raise MissingInput()
    if isinstance(raw, str):
        try:
            value = float(raw.strip())
        except ValueError:
            raise MissingInput() from None
    elif isinstance(raw, Number) and not isinstance(raw, complex):
        value = float(raw)
    else:
        raise MissingInput()
    if not math.isfinite(value):
        raise MissingInput()
    return value


def _check_inputs(value, from_unit, to_unit) -> tuple:
    number = parse_value(value)
    if not from_unit or not to_unit:
        raise MissingInput()
    category = find_category(from_unit, to_unit)
    if category is None:
        raise IncompatibleUnits()
    return number, category


def convert(value, from_unit: str, to_unit: str) -> float:
    """Convert value from one unit to another in the same category.

    Raises MissingInput when the value or either unit is absent and
    IncompatibleUnits when the units do not share a category. No rounding
    is applied.
    """
    number, category = _check_inputs(value, from_unit, to_unit)
    if from_unit == to_unit:
        # x * f / f is not always exactly x in floating point
        return number
    rates = CONVERSION_RATES[category]
    base = number * rates[from_unit]
    return base / rates[to_unit]


def convert_detailed(value, from_unit: str, to_unit: str) -> ConversionResult:
    number, category = _check_inputs(value, from_unit, to_unit)
    return ConversionResult(
        value=number,
        from_unit=from_unit,
        to_unit=to_unit,
        category=category,
        result=convert(number, from_unit, to_unit),
    )


def convert_to_all(value, from_unit: str) -> list:
    """Express value in every unit of from_unit's category, in table order."""
    number = parse_value(value)
    if not from_unit:
        raise MissingInput()
    category = category_of(from_unit)
    if category is None:
        raise IncompatibleUnits()
    return [convert_detailed(number, from_unit, unit.label) for unit in get_units(category)]


def format_result(result: float, decimals: int = DISPLAY_DECIMALS) -> str:
    """Format a converted value for display."""
    return f"{result:.{decimals}f}"
