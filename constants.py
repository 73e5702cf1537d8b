# constants.py

# --- Algorithm Constants ---
REFERENCE_WEIGHT_KG = 95  # 15 kg bike + 80 kg rider
WEIGHT_FACTOR_BOUNDS = (0.8, 1.2)
EBIKE_FACTOR = 0.85
LENIENCY_FACTOR = 1.1
MIN_RECOMMENDED_KM = 600
DEFAULT_AVG_KPH = 14
KM_PER_CADENCE_BLOCK, MONTHS_PER_CADENCE_BLOCK = 1000, 7
CADENCE_BOUNDS = (1, 24)

# --- Pricing ---
CURRENCY_SYMBOL = "₪"
BASE_SERVICE_PRICE = 550
RESERVOIR_SERVICE_PRICE = 650

# --- Component Types ---
COMPONENT_TYPES = ["fork", "shock"]
COMPONENT_LABELS = {"fork": "fork", "shock": "rear shock"}

# --- Brand Defaults (km, used when no hour-based policy exists) ---
BASE_INTERVAL_KM = {
    "FOX": {"fork": 1500, "shock": 1000},
    "ROCKSHOX": {"fork": 1200, "shock": 800},
    "PUSH": {"fork": 1000, "shock": 700},
    "ÖHLINS": {"fork": 1000, "shock": 800},
}
BRANDS = list(BASE_INTERVAL_KM.keys())

# --- Riding Style Definitions ---
STYLE_DATA = {
    "XC": {"multiplier": 1.25, "avg_kph": 18, "desc": "Cross country"},
    "Trail": {"multiplier": 1.05, "avg_kph": 14, "desc": "Trail"},
    "All Mountain": {"multiplier": 0.90, "avg_kph": 12, "desc": "All mountain"},
    "Enduro": {"multiplier": 0.92, "avg_kph": 10, "desc": "Enduro"},
    "Downhill": {"multiplier": 0.65, "avg_kph": 8, "desc": "Downhill"},
}
RIDING_STYLES = list(STYLE_DATA.keys())

# --- Rider Level Modifiers ---
RIDER_LEVEL_MULTIPLIER = {
    "חובבן": 1.2,
    "חובבן פלוס": 1.1,
    "מקצוען": 0.95,
    "מתחרה": 0.85,
}
RIDER_LEVELS = list(RIDER_LEVEL_MULTIPLIER.keys())
RIDER_LEVEL_LABELS = {
    "חובבן": "Amateur",
    "חובבן פלוס": "Amateur plus",
    "מקצוען": "Professional",
    "מתחרה": "Racer",
}

# --- Manufacturer Service Policy ---
# full_hours is a single value, full_hours_range a [low, high] pair,
# time the calendar cadence quoted in MANUFACTURER_TEXT
MFG_POLICY = {
    "FOX": {
        "fork": {"full_hours": 125, "time": "1 year"},
        "shock": {"full_hours": 125, "time": "1 year"},
    },
    "ROCKSHOX": {
        "fork": {"full_hours": 100},
        "shock": {"full_hours_range": [100, 200]},
    },
    "ÖHLINS": {
        "fork": {"full_hours": 100, "time": "1 year"},
        "shock": {"full_hours": 100, "time": "1 year (damper up to 2 years)"},
    },
    "PUSH": {
        "fork": {"time": "1 year (full service)"},
        "shock": {"time": "1 year (full service)"},
    },
}

# --- Manufacturer Display Text (hours text, time text) ---
# "*" matches either component type
MANUFACTURER_TEXT = {
    ("FOX", "*"): ("Full service: 125 hours", "or 1 year (whichever first)"),
    ("ROCKSHOX", "fork"): ("Lower leg service: 50 hours · Full service: 100 hours", None),
    ("ROCKSHOX", "shock"): ("Air can service: 50 hours · Full service: 100–200 hours (model-dependent)", None),
    ("ÖHLINS", "fork"): ("Lower leg cleaning: 50 hours · Full service: 100 hours", "or 1 year"),
    ("ÖHLINS", "shock"): ("Air spring service: 100 hours · Damper service: 100 hours", "or 1 year (damper up to 2 years)"),
    ("PUSH", "*"): (None, "1 year (full service)"),
}

# --- Model Catalogue ---
MODELS = {
    "FOX": {"fork": ["34", "36", "38", "40"], "shock": ["Float X", "DHX", "DHX2"]},
    "ROCKSHOX": {"fork": ["SID", "Pike", "Lyrik", "Zeb"], "shock": ["Deluxe", "Super Deluxe", "Vivid"]},
    "PUSH": {"fork": ["ACS3", "HC97"], "shock": ["ElevenSix", "SV EIGHT", "VT/X"]},
    "ÖHLINS": {"fork": ["RXF34", "RXF36", "DH38"], "shock": ["TTX Air"]},
}

MODEL_OFFSETS_KM = {
    "Float X": -50,
    "DHX": -80,
    "DHX2": -120,
    "Deluxe": -40,
    "Super Deluxe": -80,
    "Vivid": -100,
    "ElevenSix": -150,
    "SV EIGHT": -120,
    "VT/X": -120,
    "TTX Air": -60,
    "ACS3": 0,
    "HC97": 0,
}

# Piggyback reservoir shocks cost more to service
SHOCK_PIGGYBACK = {
    "Float X": True,
    "DHX": True,
    "DHX2": True,
    "Deluxe": False,
    "Super Deluxe": True,
    "Vivid": True,
    "ElevenSix": True,
    "SV EIGHT": True,
    "VT/X": True,
    "TTX Air": True,
}

# --- Booking ---
BOOKING_RECIPIENT = "972522567888"
BOOKING_URL_TEMPLATE = "https://wa.me/{recipient}?text={text}"

# --- Page Inputs (min, max, default, step) ---
BIKE_WEIGHT_INPUT = (8.0, 35.0, 15.0, 0.1)
RIDER_WEIGHT_INPUT = (35.0, 140.0, 80.0, 0.5)
