# calculators/va_mortgage.py
from . import config
from .schemas import VAMortgageInputs, VAMortgageResult, HousingPaymentBreakdown
from .amortization import level_payment, amortization_schedule


def funding_fee_percentage(service_type: str, first_time_use: bool, disability_exempt: bool = False) -> float:
    if disability_exempt:
        return 0.0
    fees = config.VA_FUNDING_FEE_SCHEDULE.get(service_type)
    if fees is None:
        return 0.0
    first, subsequent = fees
    return first if first_time_use else subsequent


def calculate_va_mortgage(inputs: VAMortgageInputs) -> VAMortgageResult:
    fee_pct = funding_fee_percentage(inputs.service_type, inputs.first_time_use, inputs.disability_exempt)
    fee = inputs.loan_amount * fee_pct / 100.0
    financed = inputs.loan_amount + fee

    monthly_rate = inputs.interest_rate / 100.0 / 12.0
    n = inputs.loan_term_years * 12
    pi = level_payment(financed, monthly_rate, n)

    breakdown = HousingPaymentBreakdown(
        principal_and_interest=pi,
        property_tax=inputs.loan_amount * inputs.property_tax_rate / 100.0 / 12.0,
        insurance=inputs.loan_amount * inputs.insurance_rate / 100.0 / 12.0,
        hoa=inputs.hoa_fees if inputs.include_hoa else 0.0,
    )
    schedule = amortization_schedule(financed, monthly_rate, n, pi)
    return VAMortgageResult(
        funding_fee_percent=fee_pct,
        funding_fee=fee,
        total_loan_amount=financed,
        monthly_payment=breakdown.total,
        breakdown=breakdown,
        total_interest=sum(r.interest for r in schedule),
        schedule=schedule,
        yearly_balances=[r.balance for r in schedule[::12]],
    )
