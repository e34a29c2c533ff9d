# calculators/schemas.py
from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Optional, List, Dict, Literal

Strategy = Literal["snowball", "avalanche"]


class InputModel(BaseModel):
    # inputs must be finite numbers; Infinity/NaN are rejected at validation
    model_config = ConfigDict(allow_inf_nan=False)


class Debt(InputModel):
    """
    One card or loan.

    apr is a percent value (18.99 means 18.99%). The minimum payment rule is
    either a fixed currency amount or a percentage of the current balance:
     - min_payment_type="fixed": min_payment_value is the amount
     - min_payment_type="percentage": min_payment_value is the percent (e.g. 2)
    """
    id: str
    name: Optional[str] = None
    balance: float = Field(ge=0.0)
    apr: float = Field(default=0.0, ge=0.0)
    min_payment_type: Literal["fixed", "percentage"] = "percentage"
    min_payment_value: float = Field(default=2.0, ge=0.0)

    @model_validator(mode="after")
    def default_name(self) -> "Debt":
        if not self.name:
            self.name = self.id
        return self


class SimulationConfig(InputModel):
    debts: List[Debt]
    extra_payment: float = Field(default=0.0, ge=0.0)
    strategy: Strategy = "avalanche"

    @model_validator(mode="after")
    def unique_ids(self) -> "SimulationConfig":
        ids = [d.id for d in self.debts]
        if len(ids) != len(set(ids)):
            raise ValueError("Debt ids must be unique within a simulation.")
        return self


# Month-by-month reporting
class DebtAllocation(BaseModel):
    debt_id: str
    interest: float
    minimum_paid: float
    extra_paid: float
    balance: float


class MonthlyRecord(BaseModel):
    month_index: int
    total_principal_paid: float
    total_interest_paid: float
    total_paid: float
    total_remaining_balance: float
    allocations: List[DebtAllocation]


class SimulationResult(BaseModel):
    strategy: Strategy
    months_to_payoff: int
    total_interest_paid: float
    initial_balance: float
    schedule: List[MonthlyRecord]

    @property
    def remaining_balance(self) -> float:
        if not self.schedule:
            return self.initial_balance
        return self.schedule[-1].total_remaining_balance

    @property
    def paid_off(self) -> bool:
        return self.remaining_balance <= 0

    @property
    def total_paid(self) -> float:
        return sum(m.total_paid for m in self.schedule)


# ---------- Amortization ----------
class AmortizationRow(BaseModel):
    period: int
    payment: float
    principal: float
    interest: float
    balance: float


# ---------- Annuity payout ----------
PaymentFrequency = Literal["annually", "semi-annually", "quarterly", "monthly"]


class AnnuityPayoutInputs(InputModel):
    lump_sum: float = Field(default=500000.0, gt=0.0)
    interest_rate: float = Field(default=5.0, ge=0.0)
    payout_years: int = Field(default=20, gt=0)
    payment_frequency: PaymentFrequency = "monthly"
    annuity_type: Literal["ordinary", "due"] = "ordinary"
    inflation_rate: float = Field(default=2.5, ge=0.0)
    tax_rate: float = Field(default=25.0, ge=0.0, le=100.0)
    include_inflation: bool = True
    include_tax: bool = True


class AnnuityPayoutResult(BaseModel):
    periods_per_year: int
    periodic_payment: float
    after_tax_payment: float
    total_income: float
    schedule: List[AmortizationRow]


# ---------- House affordability ----------
Location = Literal["low", "average", "high", "veryHigh"]


class HouseAffordabilityInputs(InputModel):
    monthly_income: float = Field(default=5000.0, gt=0.0)
    monthly_debts: float = Field(default=1000.0, ge=0.0)
    monthly_expenses: Dict[str, float] = Field(default_factory=lambda: {
        "groceries": 400.0,
        "transportation": 200.0,
        "utilities": 150.0,
        "insurance": 100.0,
        "entertainment": 200.0,
        "other": 200.0,
    })
    location: Location = "average"
    down_payment_percent: float = Field(default=20.0, ge=0.0, lt=100.0)
    interest_rate: float = Field(default=6.5, ge=0.0)
    loan_term_years: int = Field(default=30, gt=0)
    property_tax_rate: float = Field(default=1.2, ge=0.0)
    insurance_rate: float = Field(default=0.5, ge=0.0)
    include_hoa: bool = False
    hoa_fees: float = Field(default=250.0, ge=0.0)
    include_pmi: bool = False
    pmi_rate: float = Field(default=0.5, ge=0.0)


class HousingPaymentBreakdown(BaseModel):
    principal_and_interest: float
    property_tax: float
    insurance: float
    pmi: float = 0.0
    hoa: float = 0.0

    @property
    def total(self) -> float:
        return self.principal_and_interest + self.property_tax + self.insurance + self.pmi + self.hoa


class HouseAffordabilityResult(BaseModel):
    max_home_price: float
    loan_amount: float
    down_payment: float
    monthly_payment: float
    breakdown: HousingPaymentBreakdown
    front_end_dti: float
    back_end_dti: float
    total_expenses: float
    available_income: float


# ---------- Pension ----------
class PensionInputs(InputModel):
    years_of_service: float = Field(default=30.0, ge=0.0)
    current_age: int = Field(default=45, ge=0)
    retirement_age: int = Field(default=65, ge=0)
    current_salary: float = Field(default=60000.0, ge=0.0)
    salary_growth_rate: float = Field(default=2.0, ge=0.0)
    benefit_multiplier: float = Field(default=1.5, ge=0.0)
    include_cola: bool = True
    cola_rate: float = Field(default=2.0, ge=0.0)
    final_average_years: int = Field(default=3, ge=1)
    life_expectancy: int = Field(default=85, ge=0)

    @model_validator(mode="after")
    def check_ages(self) -> "PensionInputs":
        if self.retirement_age < self.current_age:
            raise ValueError("Retirement age cannot be earlier than current age.")
        return self


class PensionYear(BaseModel):
    age: int
    pension: float
    cumulative: float


class PensionResult(BaseModel):
    projected_final_salary: float
    final_average_salary: float
    annual_pension: float
    monthly_pension: float
    total_lifetime_benefit: float
    lump_sum_value: float
    projections: List[PensionYear]


# ---------- Social Security ----------
class SocialSecurityInputs(InputModel):
    birth_year: int = Field(default=1980, ge=1900)
    retirement_age: int = Field(default=67, ge=62, le=70)
    average_earnings: float = Field(default=60000.0, ge=0.0)
    include_spouse: bool = False
    spouse_earnings: float = Field(default=45000.0, ge=0.0)
    spouse_retirement_age: int = Field(default=67, ge=62, le=70)


class BenefitYear(BaseModel):
    age: int
    benefit: float
    cumulative: float


class BreakEvenSeries(BaseModel):
    early: List[float]
    normal: List[float]
    delayed: List[float]


class SocialSecurityResult(BaseModel):
    full_retirement_age: float
    aime: float
    pia: float
    monthly_benefit: float
    spouse_benefit: float
    total_monthly_benefit: float
    projections: List[BenefitYear]
    break_even: BreakEvenSeries


# ---------- VA mortgage ----------
class VAMortgageInputs(InputModel):
    loan_amount: float = Field(default=300000.0, gt=0.0)
    interest_rate: float = Field(default=6.5, ge=0.0)
    loan_term_years: int = Field(default=30, gt=0)
    first_time_use: bool = True
    service_type: Literal["regular", "reserves", "other"] = "regular"
    disability_exempt: bool = False
    property_tax_rate: float = Field(default=1.2, ge=0.0)
    insurance_rate: float = Field(default=0.5, ge=0.0)
    include_hoa: bool = False
    hoa_fees: float = Field(default=250.0, ge=0.0)


class VAMortgageResult(BaseModel):
    funding_fee_percent: float
    funding_fee: float
    total_loan_amount: float
    monthly_payment: float
    breakdown: HousingPaymentBreakdown
    total_interest: float
    schedule: List[AmortizationRow]
    yearly_balances: List[float]
