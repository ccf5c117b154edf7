"""Result display components for Streamlit pages."""

from typing import Optional

import streamlit as st
from unit_converter.converter import format_result
from unit_converter.models import ConversionResult


def result_labels(conversion: Optional[ConversionResult], selected_unit: Optional[str] = None) -> tuple:
    """Return the (value, unit) text shown in the result area.

    The value is "0" until a conversion succeeds. The unit follows the
    current "To" selection, falling back to "Unit" when nothing is selected.
    """
    value_text = "0" if conversion is None else format_result(conversion.result)
    return value_text, selected_unit or "Unit"


def render_result(conversion: Optional[ConversionResult], selected_unit: Optional[str] = None):
    """Render the converted value and the selected target unit.

    Args:
        conversion: Latest successful conversion, or None
        selected_unit: Unit currently chosen in the "To" field, or None
    """
    value_text, unit_text = result_labels(conversion, selected_unit)

    st.markdown(
        f"<div style='text-align: center; font-size: 2.5rem; font-weight: 700;'>{value_text}</div>"
        f"<div style='text-align: center; color: gray;'>{unit_text}</div>",
        unsafe_allow_html=True,
    )

    if conversion is not None:
        st.caption(
            f"{conversion.value:g} {conversion.from_unit} = "
            f"{conversion.result:g} {conversion.to_unit}"
        )
