"""Chart components using Plotly for data visualization."""

import pandas as pd
import plotly.express as px

from unit_converter.converter import convert_to_all


def conversions_frame(value: float, from_unit: str) -> pd.DataFrame:
    """Return a DataFrame of value expressed in every unit of its category."""
    results = convert_to_all(value, from_unit)
    return pd.DataFrame({
        'Unit': [r.to_unit for r in results],
        'Value': [r.result for r in results],
    })


def create_all_units_chart(value: float, from_unit: str):
    """Create bar chart of one value in every unit of its category.

    Args:
        value: Value entered by the user
        from_unit: Unit label the value is expressed in

    Returns:
        Plotly figure
    """
    df = conversions_frame(value, from_unit)
    df['Selected'] = df['Unit'] == from_unit

    fig = px.bar(
        df,
        x='Unit',
        y='Value',
        color='Selected',
        color_discrete_map={True: '#FF6B6B', False: '#4ECDC4'},
        text=df['Value'].map(lambda v: f"{v:.4g}"),
    )

    # Factors span several orders of magnitude
    if (df['Value'] > 0).all():
        fig.update_yaxes(type='log')

    fig.update_layout(
        xaxis_title="",
        yaxis_title="Value",
        showlegend=False,
        height=400,
    )

    return fig


def create_factor_chart(units: list):
    """Create bar chart of unit factors relative to the base unit.

    Args:
        units: List of Unit objects from one category

    Returns:
        Plotly figure
    """
    fig = px.bar(
        x=[u.label for u in units],
        y=[u.factor for u in units],
        labels={'x': '', 'y': 'Base units'},
        color_discrete_sequence=['#4ECDC4'],
    )
    fig.update_yaxes(type='log')
    fig.update_layout(height=350)
    return fig
