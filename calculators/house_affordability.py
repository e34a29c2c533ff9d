# calculators/house_affordability.py
"""
Maximum affordable home price from income, using the 28% front-end housing
ratio scaled by a cost-of-living location factor.
"""
from . import config
from .schemas import HouseAffordabilityInputs, HouseAffordabilityResult, HousingPaymentBreakdown
from .amortization import payment_factor


def _pmi_applies(inputs: HouseAffordabilityInputs) -> bool:
    return inputs.include_pmi and inputs.down_payment_percent < config.PMI_DOWN_PAYMENT_THRESHOLD


def calculate_house_affordability(inputs: HouseAffordabilityInputs) -> HouseAffordabilityResult:
    total_expenses = sum(inputs.monthly_expenses.values())
    available_income = inputs.monthly_income - inputs.monthly_debts - total_expenses

    max_housing_payment = (inputs.monthly_income * config.HOUSING_INCOME_RATIO
                           * config.LOCATION_FACTORS[inputs.location])
    monthly_rate = inputs.interest_rate / 100.0 / 12.0
    n = inputs.loan_term_years * 12
    pi_factor = payment_factor(monthly_rate, n)

    # tax and insurance are folded into the loan-sized denominator here but are
    # charged on the full price in the breakdown below
    denominator = (pi_factor
                   + inputs.property_tax_rate / 100.0 / 12.0
                   + inputs.insurance_rate / 100.0 / 12.0
                   + (inputs.pmi_rate / 100.0 / 12.0 if _pmi_applies(inputs) else 0.0))
    max_loan = max_housing_payment / denominator
    financed_share = 1 - inputs.down_payment_percent / 100.0
    max_price = max_loan / financed_share
    loan_amount = max_price * financed_share

    breakdown = HousingPaymentBreakdown(
        principal_and_interest=loan_amount * pi_factor,
        property_tax=max_price * inputs.property_tax_rate / 100.0 / 12.0,
        insurance=max_price * inputs.insurance_rate / 100.0 / 12.0,
        pmi=loan_amount * inputs.pmi_rate / 100.0 / 12.0 if _pmi_applies(inputs) else 0.0,
        hoa=inputs.hoa_fees if inputs.include_hoa else 0.0,
    )
    total = breakdown.total
    return HouseAffordabilityResult(
        max_home_price=max_price,
        loan_amount=loan_amount,
        down_payment=max_price - loan_amount,
        monthly_payment=total,
        breakdown=breakdown,
        front_end_dti=total / inputs.monthly_income * 100.0,
        back_end_dti=(total + inputs.monthly_debts) / inputs.monthly_income * 100.0,
        total_expenses=total_expenses,
        available_income=available_income,
    )
