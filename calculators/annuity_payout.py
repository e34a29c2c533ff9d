# calculators/annuity_payout.py
import logging
from .schemas import AnnuityPayoutInputs, AnnuityPayoutResult
from .amortization import level_payment, amortization_schedule

logger = logging.getLogger(__name__)

PERIODS_PER_YEAR = {
    "annually": 1,
    "semi-annually": 2,
    "quarterly": 4,
    "monthly": 12,
}


def calculate_annuity_payout(inputs: AnnuityPayoutInputs) -> AnnuityPayoutResult:
    freq = PERIODS_PER_YEAR[inputs.payment_frequency]
    rate = inputs.interest_rate / 100.0 / freq
    periods = inputs.payout_years * freq

    payment = level_payment(inputs.lump_sum, rate, periods)
    if inputs.annuity_type == "due":
        payment *= (1 + rate)

    schedule = amortization_schedule(inputs.lump_sum, rate, periods, payment, floor_balance=True)
    inflation = inputs.inflation_rate / 100.0 if inputs.include_inflation else 0.0
    for row in schedule:
        # payments step up once per payout year
        row.payment = payment * (1 + inflation) ** ((row.period - 1) // freq)

    after_tax = payment * (1 - inputs.tax_rate / 100.0) if inputs.include_tax else payment
    total_income = sum(r.payment for r in schedule)
    logger.debug("annuity payout: %d periods of %.2f", periods, payment)
    return AnnuityPayoutResult(periods_per_year=freq, periodic_payment=payment, after_tax_payment=after_tax,
                               total_income=total_income, schedule=schedule)
