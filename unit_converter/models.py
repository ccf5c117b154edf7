"""Data models for the unit converter."""

from dataclasses import dataclass

from unit_converter.config import DISPLAY_DECIMALS


@dataclass(frozen=True)
class Unit:
    """A named unit and its factor relative to the category base unit."""
    label: str  # e.g. "Meters (m)"
    category: str  # length, weight, volume
    factor: float

    @property
    def abbreviation(self) -> str:
        """Text inside the trailing parentheses, or the whole label."""
        if self.label.endswith(")") and "(" in self.label:
            return self.label[self.label.rindex("(") + 1:-1]
        return self.label

    @property
    def name(self) -> str:
        return self.label.split(" (")[0]


@dataclass
class ConversionResult:
    """A completed conversion."""
    value: float
    from_unit: str
    to_unit: str
    category: str
    result: float

    def formatted(self, decimals: int = DISPLAY_DECIMALS) -> str:
        """Return the result with its unit, e.g. "1000.00 Millimeters (mm)"."""
        return f"{self.result:.{decimals}f} {self.to_unit}"
