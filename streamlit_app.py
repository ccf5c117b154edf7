"""Streamlit frontend for the Unit Converter.

Main entry point for the multi-page Streamlit application.
"""

import streamlit as st

from unit_converter.config import PAGE_ICON, PAGE_TITLE
from unit_converter.converter import ConversionError, category_of, convert_detailed, get_units
from pages.components.charts import create_all_units_chart
from pages.components.result_display import render_result

st.set_page_config(
    page_title=PAGE_TITLE,
    page_icon=PAGE_ICON,
    layout="centered",
)

# Initialize session state variables
if 'conversion' not in st.session_state:
    st.session_state.conversion = None

st.title(f"{PAGE_ICON} Unit Converter")
st.caption("Convert values between different units.")

unit_labels = [u.label for u in get_units()]


def _option_label(label: str) -> str:
    """Show the category next to each unit, as the dropdown has no groups."""
    return f"{category_of(label).capitalize()}: {label}"


with st.form("converter_form"):
    col1, col2 = st.columns(2)
    with col1:
        from_unit = st.selectbox(
            "From",
            unit_labels,
            index=None,
            placeholder="Select unit",
            format_func=_option_label,
        )
    with col2:
        to_unit = st.selectbox(
            "To",
            unit_labels,
            index=None,
            placeholder="Select unit",
            format_func=_option_label,
        )

    value = st.number_input("Value", value=None, placeholder="Enter value")

    submitted = st.form_submit_button("Convert", use_container_width=True)

    if submitted:
        try:
            st.session_state.conversion = convert_detailed(value, from_unit, to_unit)
        except ConversionError as e:
            st.session_state.conversion = None
            st.error(f"⚠️ {e}")

conversion = st.session_state.conversion
render_result(conversion, to_unit)

if conversion:
    st.markdown("---")
    st.markdown(f"### {conversion.value:g} {conversion.from_unit} in every {conversion.category} unit")
    fig = create_all_units_chart(conversion.value, conversion.from_unit)
    st.plotly_chart(fig, use_container_width=True)

st.markdown("---")
st.caption("💡 **Tip:** See the **Reference** page for every unit and its conversion factor.")
