"""
Autosomal Recessive Genetic Calculator v1.0
===========================================
Offspring outcome probabilities when each parent has a different
probability of carrying a recessive allele.

Run with: streamlit run app.py
"""

import logging

import streamlit as st
import pandas as pd
import plotly.express as px

from inheritance import (
    InheritanceInputError,
    InputMode,
    calculate_outcomes,
    format_fraction,
    format_percent,
    make_input,
)

# Page configuration
st.set_page_config(
    page_title="Autosomal Recessive Calculator",
    page_icon="🧬",
    layout="centered"
)

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    force=True
)
logger = logging.getLogger(__name__)

OUTCOME_COLORS = {
    'Normal': '#4ade80',
    'Carrier': '#fbbf24',
    'Affected': '#f87171'
}
INPUT_TYPES = {
    'Percentage': InputMode.PERCENTAGE,
    'Fraction': InputMode.FRACTION
}
DEFAULT_PERCENTAGE = 25
DEFAULT_FRACTION = '1/4'

# Custom CSS
st.markdown("""
<style>
    .main-header {
        font-size: 2rem;
        color: #1E88E5;
        text-align: center;
        margin-bottom: 0;
    }
    .sub-header {
        font-size: 1.1rem;
        color: #666;
        text-align: center;
        margin-top: 0;
    }
</style>
""", unsafe_allow_html=True)

# ============================================
# RENDER FUNCTIONS
# ============================================

def render_parent_inputs(input_mode):
    """
    Draw the two parent inputs for the selected mode and return raw values
    """
    raw_values = []
    for parent in (1, 2):
        if input_mode is InputMode.PERCENTAGE:
            value = st.slider(
                f"Parent {parent} Carrier Probability (%)",
                min_value=0,
                max_value=100,
                value=DEFAULT_PERCENTAGE,
                key=f"parent{parent}_percentage"
            )
            st.caption(f"{value}% (p{parent} = {format_fraction(value / 100)})")
        else:
            value = st.text_input(
                f"Parent {parent} Carrier Fraction",
                value=DEFAULT_FRACTION,
                placeholder="Enter fraction (e.g., 1/4)",
                key=f"parent{parent}_fraction"
            )
            st.caption(f"p{parent} = {value}")
        raw_values.append(value)
    return raw_values


def build_outcome_figure(outcomes):
    """
    Pie chart of normal / carrier / affected offspring
    """
    chart_data = pd.DataFrame({
        'Outcome': list(OUTCOME_COLORS),
        'Probability': [outcomes.normal, outcomes.carrier, outcomes.affected]
    })
    chart_data['Label'] = [
        f"{name}: {format_percent(value)}"
        for name, value in zip(chart_data['Outcome'], chart_data['Probability'])
    ]

    fig = px.pie(
        chart_data,
        names='Outcome',
        values='Probability',
        color='Outcome',
        color_discrete_map=OUTCOME_COLORS
    )
    fig.update_traces(text=chart_data['Label'].tolist(), textinfo='text', sort=False)
    fig.update_layout(height=300, showlegend=True)
    return fig


def render_outcomes(outcomes):
    st.markdown("### Outcomes")
    st.plotly_chart(build_outcome_figure(outcomes))

    st.markdown(f"Normal: {format_percent(outcomes.normal)} = {format_fraction(outcomes.normal)}")
    st.markdown(f"Carrier: {format_percent(outcomes.carrier)} = {format_fraction(outcomes.carrier)}")
    st.markdown(f"Affected: {format_percent(outcomes.affected)} = {format_fraction(outcomes.affected)}")


def render_equations(breakdown, p1_text, p2_text):
    """
    Worked equations, every term shown as a fraction
    """
    outcomes = breakdown.outcomes
    lines = [
        f"p1 = probability of parent 1 being a carrier = {p1_text}",
        f"p2 = probability of parent 2 being a carrier = {p2_text}",
        f"q1 = 1 - p1 = {format_fraction(breakdown.q1)}",
        f"q2 = 1 - p2 = {format_fraction(breakdown.q2)}",
        f"1. Probability of both parents being carriers: p1 × p2 = {format_fraction(breakdown.both_carriers)}",
        f"2. Probability of only parent 1 being a carrier: p1 × q2 = {format_fraction(breakdown.only_parent1)}",
        f"3. Probability of only parent 2 being a carrier: q1 × p2 = {format_fraction(breakdown.only_parent2)}",
        f"4. Probability of no parents being carriers: q1 × q2 = {format_fraction(breakdown.no_carriers)}",
        f"5. Probability of affected child: (p1 × p2) × 1/4 = {format_fraction(outcomes.affected)}",
        f"6. Probability of carrier child: (p1 × p2 × 1/2) + (p1 × q2 × 1/2) + (q1 × p2 × 1/2) = {format_fraction(outcomes.carrier)}",
        f"7. Probability of normal child: 1 - (affected + carrier) = {format_fraction(outcomes.normal)}",
    ]

    st.markdown("### Calculations and Equations (Autosomal Recessive)")
    with st.container(border=True):
        for line in lines:
            st.markdown(line)


# ============================================
# STREAMLIT APP
# ============================================

# Header
st.markdown('<h1 class="main-header">🧬 Autosomal Recessive Genetic Calculator</h1>', unsafe_allow_html=True)
st.markdown('<p class="sub-header">Different carrier probabilities for each parent</p>', unsafe_allow_html=True)
st.markdown("---")

# Sidebar
with st.sidebar:
    st.markdown("## About This Tool")
    st.markdown("""
    Each parent carries one copy of the recessive allele with its own
    probability. Parents are treated as independent.

    **Mendelian ratios:**
    - Carrier × carrier: 1/4 affected, 1/2 carrier, 1/4 normal
    - Carrier × non-carrier: 1/2 carrier, 1/2 normal
    """)

    st.markdown("---")
    st.markdown("### Input Format Examples")
    st.code("Percentage: 25")
    st.code("Fraction: 1/4")

    st.markdown("---")
    st.markdown("### Debug Mode")
    debug_mode = st.checkbox("Show raw calculation values")

input_label = st.selectbox("Input Type:", list(INPUT_TYPES))
input_mode = INPUT_TYPES[input_label]

raw_parent1, raw_parent2 = render_parent_inputs(input_mode)

breakdown = None
try:
    breakdown = calculate_outcomes(
        make_input(input_mode, raw_parent1),
        make_input(input_mode, raw_parent2)
    )
except InheritanceInputError as e:
    logger.warning("Rejected parent input (%s): %s", input_mode.value, e)
    st.error(f"Invalid input: {e}")

if breakdown is not None:
    st.markdown("---")
    render_outcomes(breakdown.outcomes)

    if input_mode is InputMode.PERCENTAGE:
        p1_text = format_fraction(breakdown.p1)
        p2_text = format_fraction(breakdown.p2)
    else:
        p1_text = raw_parent1.strip()
        p2_text = raw_parent2.strip()

    st.markdown("---")
    render_equations(breakdown, p1_text, p2_text)

    if debug_mode:
        st.markdown("#### Raw Calculation Values:")
        st.json(breakdown.as_dict())

# Footer
st.markdown("---")
st.markdown("<p style='text-align: center; color: #666;'>For education only. Not for clinical decisions.</p>", unsafe_allow_html=True)
