"""
Streamlit UI for the Employee Salary Predictor.

Features:
- Profile form with validated selections and a skills field
- Result card with expected salary, low/high band and range bar
- Per-factor breakdown table and CSV export
- Resolution trace for the estimate
"""
import streamlit as st
import pandas as pd
from datetime import datetime

from pydantic import ValidationError

from salary_tool.api.payload import profile_from_payload
from salary_tool.engine import explain_salary
from salary_tool.engine.errors import SalaryToolError
from salary_tool.engine.tables import EDUCATION_LEVELS, LOCATION_TIERS, ROLES
from salary_tool.ui.form import (
    DEFAULT_FORM,
    MAX_FORM_YEARS,
    SalaryForm,
    format_currency,
    range_position,
)
from salary_tool.utils.logger import get_logger

logger = get_logger("salary_tool.ui")

st.set_page_config(
    page_title="Employee Salary Predictor",
    layout="wide",
)

st.markdown("""
    <style>
        .block-container {
            padding-top: 2rem;
            padding-bottom: 2rem;
        }
        h1 {
            font-family: 'Helvetica Neue', Helvetica, Arial, sans-serif;
            font-weight: 700;
        }
        .stMetric {
            background-color: #f0f2f6;
            padding: 10px;
            border-radius: 5px;
            border-left: 5px solid #c026d3;
        }
    </style>
""", unsafe_allow_html=True)


st.title("✨ Employee Salary Predictor")
st.caption(f"v1.0 | Salary Engine Active | {datetime.now().strftime('%Y-%m-%d')}")

if 'result' not in st.session_state:
    st.session_state.result = None

col1, col2 = st.columns([1, 1], gap="large")

# ============================================================================
# FORM
# ============================================================================
with col1:
    with st.form("salary_form", border=True):
        role = st.selectbox("Role", ROLES, index=ROLES.index(DEFAULT_FORM["role"]))

        c1, c2 = st.columns(2)
        with c1:
            years = st.number_input(
                "Years Experience",
                min_value=0,
                max_value=MAX_FORM_YEARS,
                value=DEFAULT_FORM["years_experience"],
                step=1,
            )
            education = st.selectbox(
                "Education",
                EDUCATION_LEVELS,
                index=EDUCATION_LEVELS.index(DEFAULT_FORM["education"]),
            )
        with c2:
            location_tier = st.selectbox(
                "Location Tier",
                LOCATION_TIERS,
                index=LOCATION_TIERS.index(DEFAULT_FORM["location_tier"]),
            )

        skills_csv = st.text_input(
            "Skills (comma-separated)",
            value=DEFAULT_FORM["skills_csv"],
            placeholder="e.g. TypeScript, React, AWS",
        )

        submitted = st.form_submit_button("Predict Salary →", type="primary", use_container_width=True)

    if submitted:
        st.session_state.result = None
        try:
            form = SalaryForm(
                role=role,
                years_experience=years,
                location_tier=location_tier,
                education=education,
                skills_csv=skills_csv,
            )
            profile = profile_from_payload(form.to_payload())
            st.session_state.result = explain_salary(profile)
        except (ValidationError, SalaryToolError) as e:
            logger.warning("Prediction failed: %s", e)
            st.error("Failed to predict salary. Please try again.")


# ============================================================================
# RESULT CARD
# ============================================================================
with col2:
    explanation = st.session_state.result
    if explanation is None:
        with st.container(border=True):
            st.info("Your prediction will appear here.")
    else:
        result = explanation.result
        with st.container(border=True):
            st.caption("PREDICTED SALARY")
            st.markdown(f"## {format_currency(result.expected, result.currency)}")

            m1, m2 = st.columns(2)
            m1.metric("Low", format_currency(result.low, result.currency))
            m2.metric("High", format_currency(result.high, result.currency))

            st.progress(int(range_position(result.expected, result.low, result.high)))

        breakdown = result.breakdown
        breakdown_df = pd.DataFrame([
            {'Factor': 'Base (role)', 'Amount': breakdown.base_by_role},
            {'Factor': 'Experience', 'Amount': breakdown.experience_adjustment},
            {'Factor': 'Location', 'Amount': breakdown.location_adjustment},
            {'Factor': 'Education', 'Amount': breakdown.education_adjustment},
            {'Factor': 'Skills', 'Amount': breakdown.skills_adjustment},
        ])

        with st.expander("📊 Breakdown"):
            st.dataframe(breakdown_df, use_container_width=True, hide_index=True)
            st.caption("Adjustments are relative to the role base and do not add up to the total.")

        with st.expander("🔍 Resolution Details"):
            for t in explanation.trace:
                if t.value:
                    st.caption(f"**{t.step}**: {t.description} = `{t.value}`")
                else:
                    st.caption(f"**{t.step}**: {t.description}")

        export_df = pd.DataFrame([{
            'Currency': result.currency,
            'Expected': result.expected,
            'Low': result.low,
            'High': result.high,
            **breakdown.to_dict(),
        }])
        st.download_button(
            "📥 CSV",
            data=export_df.to_csv(index=False),
            file_name="salary_estimate.csv",
            mime="text/csv",
            use_container_width=True
        )
