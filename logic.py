# logic.py
import datetime
import logging
import math
from dataclasses import dataclass, replace
from typing import NamedTuple, Optional
from urllib.parse import quote

import pandas as pd
from fpdf import FPDF
from fpdf.enums import XPos, YPos

from constants import (
    BASE_INTERVAL_KM, BASE_SERVICE_PRICE, BOOKING_RECIPIENT, BOOKING_URL_TEMPLATE,
    CADENCE_BOUNDS, COMPONENT_LABELS, CURRENCY_SYMBOL, DEFAULT_AVG_KPH, EBIKE_FACTOR,
    KM_PER_CADENCE_BLOCK, LENIENCY_FACTOR, MANUFACTURER_TEXT, MFG_POLICY,
    MIN_RECOMMENDED_KM, MODEL_OFFSETS_KM, MODELS, MONTHS_PER_CADENCE_BLOCK,
    REFERENCE_WEIGHT_KG, RESERVOIR_SERVICE_PRICE, RIDER_LEVEL_LABELS,
    RIDER_LEVEL_MULTIPLIER, RIDING_STYLES, SHOCK_PIGGYBACK, STYLE_DATA,
    WEIGHT_FACTOR_BOUNDS,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UserInput:
    """One snapshot of the calculator form. Built fresh on every edit."""
    component_type: str
    brand: str
    model: str
    style: str
    rider_level: str
    bike_weight_kg: float = 15.0
    rider_weight_kg: float = 80.0
    km_since_service: float = 0
    is_ebike: bool = False


@dataclass(frozen=True)
class Recommendation:
    base_km: int
    recommended_km: int
    km_remaining: int
    cadence_months: int
    manufacturer_hours_text: Optional[str]
    manufacturer_time_text: Optional[str]
    service_price: int

    @property
    def is_due(self) -> bool:
        return self.km_remaining == 0


class ManufacturerText(NamedTuple):
    hours_text: Optional[str]
    time_text: Optional[str]


# --- Numeric helpers ---

def clamp(n, low, high):
    return max(low, min(high, n))


def round_half_up(x: float) -> int:
    """Rounds .5 away from zero for positive values, like a display counter would."""
    return int(math.floor(x + 0.5))


def _to_number(value) -> float:
    """Coerces form values to a finite float; anything unusable becomes 0."""
    try:
        n = float(value)
    except (TypeError, ValueError):
        return 0.0
    return n if math.isfinite(n) else 0.0


# --- Reference table lookups (total over arbitrary keys) ---

def model_options(brand: str, component_type: str) -> list:
    return list(MODELS.get(brand, {}).get(component_type, []))


def default_model(brand: str, component_type: str) -> str:
    options = model_options(brand, component_type)
    return options[0] if options else ""


def lookup_base_km(brand: str, component_type: str) -> int:
    by_brand = BASE_INTERVAL_KM.get(brand)
    if by_brand is None:
        logger.debug("Unknown brand %r, using %s base interval", brand, next(iter(BASE_INTERVAL_KM)))
        by_brand = next(iter(BASE_INTERVAL_KM.values()))
    return by_brand["fork"] if component_type == "fork" else by_brand["shock"]


def full_service_hours(brand: str, component_type: str) -> Optional[float]:
    """Single full-service hours value, the low end of an hour range, or None."""
    policy = MFG_POLICY.get(brand, {}).get(component_type, {})
    if "full_hours" in policy:
        return policy["full_hours"]
    if "full_hours_range" in policy:
        return policy["full_hours_range"][0]
    return None


def lookup_style_factor(style: str) -> float:
    if style not in STYLE_DATA:
        logger.debug("Unknown riding style %r, using multiplier 1.0", style)
    return STYLE_DATA.get(style, {}).get("multiplier", 1.0)


def lookup_average_speed(style: str) -> float:
    if style not in STYLE_DATA:
        logger.debug("Unknown riding style %r, assuming %s km/h", style, DEFAULT_AVG_KPH)
    return STYLE_DATA.get(style, {}).get("avg_kph", DEFAULT_AVG_KPH)


def lookup_level_factor(rider_level: str) -> float:
    if rider_level not in RIDER_LEVEL_MULTIPLIER:
        logger.debug("Unknown rider level %r, using multiplier 1.0", rider_level)
    return RIDER_LEVEL_MULTIPLIER.get(rider_level, 1.0)


def lookup_model_offset(model: str) -> int:
    if model not in MODEL_OFFSETS_KM:
        logger.debug("No km offset for model %r", model)
    return MODEL_OFFSETS_KM.get(model, 0)


def has_reservoir(model: str) -> bool:
    return SHOCK_PIGGYBACK.get(model, False)


# --- Factors ---

def weight_factor(bike_weight_kg, rider_weight_kg) -> float:
    """Heavier than the 95 kg reference shortens the interval, lighter extends it."""
    total_kg = _to_number(bike_weight_kg) + _to_number(rider_weight_kg)
    return clamp(REFERENCE_WEIGHT_KG / max(total_kg, 1), *WEIGHT_FACTOR_BOUNDS)


def manufacturer_text(brand: str, component_type: str) -> ManufacturerText:
    """Looks up the manufacturer's published service recommendation."""
    entry = MANUFACTURER_TEXT.get((brand, component_type)) or MANUFACTURER_TEXT.get((brand, "*"))
    if entry is None:
        return ManufacturerText(None, None)
    return ManufacturerText(*entry)


def service_price(component_type: str, model: str) -> int:
    if component_type == "fork":
        return BASE_SERVICE_PRICE
    return RESERVOIR_SERVICE_PRICE if has_reservoir(model) else BASE_SERVICE_PRICE


def cadence_months(recommended_km: int) -> int:
    months = round_half_up((recommended_km / KM_PER_CADENCE_BLOCK) * MONTHS_PER_CADENCE_BLOCK)
    return clamp(months, *CADENCE_BOUNDS)


# --- Recommendation ---

def recommend(user_input: UserInput) -> Recommendation:
    """
    Computes the personal service interval, calendar cadence and price.

    The base interval comes from the manufacturer's full-service hours
    converted to km at the riding style's average speed, or from the brand
    table when the manufacturer only publishes a time-based cadence. Wear
    factors multiply the base, the model offset is added, and the 600 km
    floor is applied last.
    """
    brand, component_type = user_input.brand, user_input.component_type

    hours = full_service_hours(brand, component_type)
    avg_kph = lookup_average_speed(user_input.style)
    if hours is not None:
        base_km = round_half_up(hours * avg_kph)
    else:
        base_km = lookup_base_km(brand, component_type)

    raw_km = (
        base_km
        * lookup_style_factor(user_input.style)
        * lookup_level_factor(user_input.rider_level)
        * weight_factor(user_input.bike_weight_kg, user_input.rider_weight_kg)
        * (EBIKE_FACTOR if user_input.is_ebike else 1.0)
        * LENIENCY_FACTOR
        + lookup_model_offset(user_input.model)
    )
    recommended_km = max(MIN_RECOMMENDED_KM, round_half_up(raw_km))
    km_since = int(math.floor(max(0.0, _to_number(user_input.km_since_service))))
    km_remaining = max(0, recommended_km - km_since)

    text = manufacturer_text(brand, component_type)
    return Recommendation(
        base_km=base_km,
        recommended_km=recommended_km,
        km_remaining=km_remaining,
        cadence_months=cadence_months(recommended_km),
        manufacturer_hours_text=text.hours_text,
        manufacturer_time_text=text.time_text,
        service_price=service_price(component_type, user_input.model),
    )


def style_comparison(user_input: UserInput) -> pd.DataFrame:
    """Recomputes the same input under every riding style."""
    rows = []
    for style in RIDING_STYLES:
        result = recommend(replace(user_input, style=style))
        rows.append({
            "Riding Style": style,
            "Recommended (km)": result.recommended_km,
            "Cadence (months)": result.cadence_months,
            "Selected": style == user_input.style,
        })
    return pd.DataFrame(rows)


# --- Formatting ---

def format_number(n) -> str:
    return f"{round_half_up(_to_number(n)):,}"


def format_price(n) -> str:
    return f"{CURRENCY_SYMBOL}{format_number(n)}"


# --- Booking link ---

def build_booking_message(brand: str, model: str, component_type: str) -> str:
    label = COMPONENT_LABELS.get(component_type, component_type)
    return (f"Hi, I'd like to book a suspension service for my {brand} {model} ({label}).\n"
            "When can I bring it in?")


def booking_url(brand: str, model: str, component_type: str) -> str:
    message = build_booking_message(brand, model, component_type)
    return BOOKING_URL_TEMPLATE.format(recipient=BOOKING_RECIPIENT, text=quote(message, safe=""))


# --- PDF report ---

def _pdf_text(text) -> str:
    """Reduces text to what the core PDF fonts can draw."""
    text = str(text).replace("–", "-").replace(CURRENCY_SYMBOL, "NIS ")
    return text.encode("latin-1", "replace").decode("latin-1")


def generate_service_pdf(user_input: UserInput, result: Recommendation) -> bytes:
    """Constructs a binary PDF service report for download."""
    pdf = FPDF()
    pdf.add_page()
    pdf.set_font("Helvetica", "B", 16)
    pdf.cell(0, 10, "Suspension Service Report", new_x=XPos.LMARGIN, new_y=YPos.NEXT, align="C")
    pdf.set_font("Helvetica", size=9)
    pdf.cell(0, 6, f"Generated {datetime.date.today().isoformat()}", new_x=XPos.LMARGIN, new_y=YPos.NEXT, align="C")
    pdf.ln(8)

    def section(title, lines):
        pdf.set_font("Helvetica", "B", 12)
        pdf.cell(0, 10, _pdf_text(title), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.set_font("Helvetica", size=10)
        for line in lines:
            pdf.cell(0, 8, _pdf_text(line), new_x=XPos.LMARGIN, new_y=YPos.NEXT)
        pdf.ln(4)

    level_label = RIDER_LEVEL_LABELS.get(user_input.rider_level, user_input.rider_level)
    section("1. Component", [
        f"Component: {user_input.brand} {user_input.model} ({COMPONENT_LABELS.get(user_input.component_type, user_input.component_type)})",
        f"Riding Style: {user_input.style} | Rider Level: {level_label}",
        f"Bike: {_to_number(user_input.bike_weight_kg):.1f} kg | Rider: {_to_number(user_input.rider_weight_kg):.1f} kg"
        f" | E-Bike: {'Yes' if user_input.is_ebike else 'No'}",
        f"Since Last Service: {format_number(user_input.km_since_service)} km",
    ])

    mfg_lines = [t for t in (result.manufacturer_hours_text, result.manufacturer_time_text) if t]
    section("2. Manufacturer Recommendation", mfg_lines or ["No published interval"])

    section("3. Personal Recommendation", [
        f"Service Interval: ~{format_number(result.recommended_km)} km",
        f"Remaining: {format_number(result.km_remaining)} km" + (" (service due)" if result.is_due else ""),
        f"Calendar Cadence: every {result.cadence_months} months",
        f"Estimated Price: {format_price(result.service_price)} (no removal/installation fee)",
    ])

    pdf.set_font("Helvetica", "I", 9)
    pdf.multi_cell(0, 5, "Disclaimer: This calculator provides a general estimate only. Actual service needs depend on "
                         "riding conditions, maintenance and component condition. Use at your own discretion.")
    return bytes(pdf.output())
