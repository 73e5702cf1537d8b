import logging

import streamlit as st

from components import (
    booking_link_button, faq_block, reselect_model_callback, reset_form_callback, result_box,
)
from constants import (
    BIKE_WEIGHT_INPUT, BRANDS, COMPONENT_LABELS, COMPONENT_TYPES, RIDER_LEVEL_LABELS,
    RIDER_LEVELS, RIDER_WEIGHT_INPUT, RIDING_STYLES, STYLE_DATA,
)
from logic import (
    UserInput, booking_url, default_model, generate_service_pdf, model_options, recommend,
    style_comparison,
)

logger = logging.getLogger(__name__)

# ==========================================================
# 1. CONFIGURATION & SESSION DEFAULTS
# ==========================================================
st.set_page_config(page_title="SSC - Suspension Service Calculator", page_icon="⚙️", layout="centered")

if 'type_select' not in st.session_state:
    st.session_state.type_select = "fork"
if 'brand_select' not in st.session_state:
    st.session_state.brand_select = BRANDS[0]
if 'model_select' not in st.session_state:
    st.session_state.model_select = default_model(st.session_state.brand_select, st.session_state.type_select)

# ==========================================================
# 2. UI MAIN
# ==========================================================
col_title, col_reset = st.columns([0.8, 0.2])
with col_title: st.title("Suspension Service Calculator")
with col_reset:
    if st.button("Reset", on_click=reset_form_callback, type="secondary", use_container_width=True): st.rerun()

st.markdown("Get a recommendation for when to service your fork or rear shock, based on the manufacturer, "
            "model, riding style and total weight.")
faq_block()

# --- COMPONENT ---
st.header("1. Component")
col_c1, col_c2, col_c3 = st.columns(3)
with col_c1:
    component_type = st.radio("Product Type", COMPONENT_TYPES, key='type_select',
                              format_func=lambda t: COMPONENT_LABELS[t].capitalize(),
                              on_change=reselect_model_callback)
with col_c2:
    brand = st.selectbox("Brand", BRANDS, key='brand_select', on_change=reselect_model_callback)
with col_c3:
    model = st.selectbox("Model", model_options(brand, component_type), key='model_select')

# --- RIDER PROFILE ---
st.header("2. Rider Profile")
col_r1, col_r2 = st.columns(2)
with col_r1:
    style = st.selectbox("Riding Style", RIDING_STYLES, index=RIDING_STYLES.index("Trail"),
                         format_func=lambda s: f"{s} – {STYLE_DATA[s]['desc']}")
    rider_level = st.selectbox("Rider Level", RIDER_LEVELS, format_func=lambda l: RIDER_LEVEL_LABELS[l])
    is_ebike = st.toggle("E-Bike", value=False)
with col_r2:
    rider_kg = st.number_input("Rider Weight (kg)", *RIDER_WEIGHT_INPUT)
    bike_kg = st.number_input("Bike Weight (kg)", *BIKE_WEIGHT_INPUT)
    km_since = st.number_input("Km Since Last Service", min_value=0, value=0, step=1)

# --- CALCULATIONS ---
user_input = UserInput(
    component_type=component_type,
    brand=brand,
    model=model or "",
    style=style,
    rider_level=rider_level,
    bike_weight_kg=bike_kg,
    rider_weight_kg=rider_kg,
    km_since_service=km_since,
    is_ebike=is_ebike,
)
result = recommend(user_input)
logger.debug("Recommendation for %s: %s", user_input, result)

# --- RESULTS ---
st.divider(); st.header("Results")
result_box(result)
booking_link_button(booking_url(brand, model, component_type), brand, model, component_type)

st.markdown("### Interval by Riding Style")
st.dataframe(style_comparison(user_input), hide_index=True, use_container_width=True)

st.download_button("Export Results to PDF", data=generate_service_pdf(user_input, result),
                   file_name="suspension_service_report.pdf", mime="application/pdf")

st.caption("* This calculator provides a general estimate only and is used at your own risk. "
           "ShocKing is not liable for any damage caused by use of or reliance on its results.")
st.caption("© ShocKing Suspension - SSC")
