# calculators/social_security.py
"""
Social Security retirement benefit estimate.

The PIA comes from the bend-point formula applied to average monthly
earnings, then is reduced for claiming before full retirement age or
increased by delayed retirement credits after it.
"""
from typing import List
from . import config
from .schemas import SocialSecurityInputs, SocialSecurityResult, BenefitYear, BreakEvenSeries


def full_retirement_age(birth_year: int) -> float:
    """Full retirement age in years (fractional for the phased-in cohorts)."""
    if birth_year <= 1937:
        return 65.0
    if birth_year <= 1943:
        return 65 + (birth_year - 1937) * 2 / 12
    if birth_year <= 1954:
        return 66.0
    if birth_year <= 1960:
        return 66 + (birth_year - 1954) * 2 / 12
    return 67.0


def primary_insurance_amount(aime: float) -> float:
    first, second = config.PIA_BEND_POINTS
    r1, r2, r3 = config.PIA_RATES
    if aime <= first:
        return aime * r1
    if aime <= second:
        return first * r1 + (aime - first) * r2
    return first * r1 + (second - first) * r2 + (aime - second) * r3


def claiming_adjustment(claim_age: float, fra: float) -> float:
    """Multiplier applied to the PIA for claiming at `claim_age`."""
    months_diff = (claim_age - fra) * 12
    if months_diff < 0:
        early = min(-months_diff, config.EARLY_REDUCTION_MONTHS)
        very_early = max(-months_diff - config.EARLY_REDUCTION_MONTHS, 0)
        return (1 - early * config.EARLY_REDUCTION_PER_MONTH
                - very_early * config.VERY_EARLY_REDUCTION_PER_MONTH)
    if months_diff > 0:
        return 1 + months_diff * config.DELAYED_CREDIT_PER_MONTH
    return 1.0


def spousal_benefit(spouse_earnings: float, spouse_claim_age: int) -> float:
    pia = spouse_earnings / 12 * config.PIA_RATES[0]
    early_months = max(0, (config.SPOUSE_REFERENCE_AGE - spouse_claim_age) * 12)
    return pia * (1 - early_months * config.EARLY_REDUCTION_PER_MONTH)


def break_even_series(pia: float) -> BreakEvenSeries:
    monthly_cola = config.COLA_ESTIMATE / 12
    series = {}
    for name, (multiplier, start_month) in config.BREAK_EVEN_CLAIMS.items():
        series[name] = [pia * multiplier * (1 + monthly_cola) ** month * max(0, month - start_month)
                        for month in range(config.BREAK_EVEN_MONTHS)]
    return BreakEvenSeries(**series)


def calculate_social_security(inputs: SocialSecurityInputs) -> SocialSecurityResult:
    fra = full_retirement_age(inputs.birth_year)
    aime = inputs.average_earnings / 12
    pia = primary_insurance_amount(aime)
    monthly = pia * claiming_adjustment(inputs.retirement_age, fra)
    spouse = spousal_benefit(inputs.spouse_earnings, inputs.spouse_retirement_age) if inputs.include_spouse else 0.0

    projections: List[BenefitYear] = []
    cumulative = 0.0
    for age in range(inputs.retirement_age, config.PROJECTION_END_AGE + 1):
        annual = monthly * 12 * (1 + config.COLA_ESTIMATE) ** (age - inputs.retirement_age)
        cumulative += annual
        projections.append(BenefitYear(age=age, benefit=annual, cumulative=cumulative))

    return SocialSecurityResult(
        full_retirement_age=fra,
        aime=aime,
        pia=pia,
        monthly_benefit=monthly,
        spouse_benefit=spouse,
        total_monthly_benefit=monthly + spouse,
        projections=projections,
        break_even=break_even_series(pia),
    )
