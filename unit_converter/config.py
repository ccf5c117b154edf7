"""Application configuration and constants."""

from types import MappingProxyType

# Display
PAGE_TITLE = "Unit Converter"
PAGE_ICON = "📏"
DISPLAY_DECIMALS = 2

# Categories, in the order they are searched and displayed
CATEGORIES = ("length", "weight", "volume")

# Conversion factors relative to each category's base unit (factor 1)
CONVERSION_RATES = MappingProxyType({
    "length": MappingProxyType({
        "Millimeters (mm)": 1,
        "Centimeters (cm)": 10,
        "Meters (m)": 1000,
        "Kilometers (km)": 1000000,
        "Inches (in)": 25.4,
        "Feet (ft)": 304.8,
        "Yards (yd)": 914.4,
        "Miles (mi)": 1609344,
    }),
    "weight": MappingProxyType({
        "Grams (g)": 1,
        "Kilograms (kg)": 1000,
        "Ounces (oz)": 28.3495,
        "Pounds (lb)": 453.592,
    }),
    "volume": MappingProxyType({
        "Milliliters (ml)": 1,
        "Liters (l)": 1000,
        "Fluid Ounces (fl oz)": 29.5735,
        "Cups (cup)": 240,
        "Pints (pt)": 473.176,
        "Quarts (qt)": 946.353,
        "Gallons (gal)": 3785.41,
    }),
})
