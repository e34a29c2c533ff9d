# calculators/config.py
"""
Policy constants shared by the calculators.

Operator-level overrides are read from the environment (a local .env file is
honoured). Everything else is a fixed policy value.
"""
import os
from dotenv import load_dotenv

load_dotenv()


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return float(value)


# ---------- Environment ----------
LOG_LEVEL = (os.getenv("CALCULATORS_LOG_LEVEL") or "INFO").upper()
CURRENCY_SYMBOL = os.getenv("CALCULATORS_CURRENCY_SYMBOL") or "$"

# ---------- Debt payoff ----------
# Floor applied to percentage-of-balance minimum payments.
MIN_PAYMENT_FLOOR = _env_float("CALCULATORS_MIN_PAYMENT_FLOOR", 25.0)
MAX_SIMULATION_MONTHS = 360  # 30 years

# ---------- Housing ----------
HOUSING_INCOME_RATIO = 0.28
PMI_DOWN_PAYMENT_THRESHOLD = 20.0  # percent
LOCATION_FACTORS = {
    "low": 0.8,
    "average": 1.0,
    "high": 1.2,
    "veryHigh": 1.4,
}

# ---------- VA funding fee (percent of base loan) ----------
# service type -> (first use, subsequent use)
VA_FUNDING_FEE_SCHEDULE = {
    "regular": (2.3, 3.6),
    "reserves": (2.3, 3.6),
}

# ---------- Pension ----------
PENSION_DISCOUNT_RATE = 0.04

# ---------- Social Security ----------
PIA_BEND_POINTS = (1174.0, 7078.0)  # 2024 monthly AIME thresholds
PIA_RATES = (0.90, 0.32, 0.15)
EARLY_REDUCTION_PER_MONTH = 0.00555556       # 5/9 of 1%, first 36 months
VERY_EARLY_REDUCTION_PER_MONTH = 0.00416667  # 5/12 of 1% beyond 36 months
DELAYED_CREDIT_PER_MONTH = 0.00666667        # 2/3 of 1% (8% per year)
EARLY_REDUCTION_MONTHS = 36
SPOUSE_REFERENCE_AGE = 67
COLA_ESTIMATE = 0.027
PROJECTION_END_AGE = 95
BREAK_EVEN_MONTHS = 360
# claiming multiplier and first month of benefits for the break-even series
BREAK_EVEN_CLAIMS = {
    "early": (0.70, 0),
    "normal": (1.00, 60),
    "delayed": (1.24, 96),
}
