"""Conversion Reference Page.

Browse every unit and its factor relative to the category base unit.
"""

import pandas as pd
import streamlit as st

from unit_converter.config import PAGE_ICON
from unit_converter.converter import get_categories, get_units
from pages.components.charts import create_factor_chart

st.set_page_config(page_title="Reference | Unit Converter", page_icon=PAGE_ICON, layout="wide")
st.title("📚 Conversion Reference")

st.markdown(
    "Each unit is stored as a factor of its category's **base unit**. "
    "A conversion multiplies by the source factor and divides by the target factor."
)

tabs = st.tabs([c.capitalize() for c in get_categories()])

for tab, category in zip(tabs, get_categories()):
    with tab:
        units = get_units(category)
        base = next(u for u in units if u.factor == 1)

        st.caption(f"Base unit: **{base.label}**")
        df = pd.DataFrame({
            'Unit': [u.name for u in units],
            'Abbreviation': [u.abbreviation for u in units],
            f'In {base.abbreviation}': [u.factor for u in units],
        })
        st.dataframe(df, use_container_width=True, hide_index=True)

        fig = create_factor_chart(units)
        st.plotly_chart(fig, use_container_width=True)
