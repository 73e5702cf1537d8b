# components.py
import streamlit as st
from constants import COMPONENT_LABELS
from logic import default_model, format_number, format_price, model_options

FAQ = [
    ("My shock hasn't been serviced for over a year and still feels fine. Should I service it?",
     "Yes. Even when the suspension feels fine, oil and seals age over time and lose their effectiveness. "
     "Servicing at least once a year prevents expensive wear and future damage."),
    ("Why is my recommendation shorter than the manufacturer's?",
     "The personal recommendation accounts for riding style, rider level, combined weight and e-bike use. "
     "Harder riding and heavier loads wear suspension faster."),
    ("Do you charge for removing and installing the component?",
     "No. The estimated price covers the service itself; removal and installation are not charged."),
]


def reset_form_callback():
    """Clears all session state variables."""
    for key in list(st.session_state.keys()):
        del st.session_state[key]


def reselect_model_callback():
    """Keeps the selected model valid when brand or component type changes."""
    brand = st.session_state.get("brand_select")
    component_type = st.session_state.get("type_select")
    if st.session_state.get("model_select") not in model_options(brand, component_type):
        st.session_state.model_select = default_model(brand, component_type)


def result_box(result):
    """Renders the manufacturer and personal recommendation side by side."""
    with st.container(border=True):
        st.caption("Manufacturer recommendation")
        if result.manufacturer_hours_text:
            st.markdown(f"**{result.manufacturer_hours_text}**")
        if result.manufacturer_time_text:
            st.markdown(result.manufacturer_time_text)

        col_km, col_price = st.columns(2)
        col_km.metric(
            "Personal recommendation",
            f"~{format_number(result.recommended_km)} km",
            help="Weighted by riding style, rider level, weight and e-bike use.",
        )
        col_price.metric("Estimated service price", format_price(result.service_price))
        st.caption("* No removal or installation fee is charged")

        remaining = f"{format_number(result.km_remaining)} km remaining"
        if result.is_due:
            st.warning(f"Service due now ({remaining})")
        else:
            st.info(f"{remaining} · roughly every {result.cadence_months} months")


def booking_link_button(url, brand, model, component_type):
    st.link_button(
        f"Book a service for my {brand} {model} {COMPONENT_LABELS.get(component_type, component_type)}",
        url,
        type="primary",
        use_container_width=True,
    )


def faq_block():
    """Renders the static FAQ sidebar."""
    st.sidebar.header("FAQ")
    for question, answer in FAQ:
        with st.sidebar.expander(question):
            st.write(answer)
