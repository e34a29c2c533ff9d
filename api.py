import logging
from typing import List, Dict, Any
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import Field

from calculators.logging_config import configure_logging
from calculators.schemas import (
    InputModel,
    Debt,
    SimulationConfig,
    SimulationResult,
    Strategy,
    AnnuityPayoutInputs,
    AnnuityPayoutResult,
    HouseAffordabilityInputs,
    HouseAffordabilityResult,
    PensionInputs,
    PensionResult,
    SocialSecurityInputs,
    SocialSecurityResult,
    VAMortgageInputs,
    VAMortgageResult,
)
from calculators.optimization import simulate_payoff
from calculators.scenarios import compare_strategies, compare_extra_payment
from calculators.plan_utils import monthly_totals_dataframe, balance_series
from calculators.inputs import parse_debts, summarize_debts
from calculators.utils import money
from calculators.annuity_payout import calculate_annuity_payout
from calculators.house_affordability import calculate_house_affordability
from calculators.pension import calculate_pension
from calculators.social_security import calculate_social_security
from calculators.va_mortgage import calculate_va_mortgage

configure_logging()
logger = logging.getLogger("calculators.api")

# ======================================
# App + CORS
# ======================================
app = FastAPI(
    title="Finance Calculators",
    description="Debt payoff, annuity, housing and retirement calculators",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # tighten in prod
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ======================================
# Models
# ======================================
class PlanRequest(InputModel):
    debts: List[Dict[str, Any]]
    extra_payment: float = Field(default=0.0, ge=0.0)
    strategy: Strategy = "avalanche"


class CompareRequest(InputModel):
    debts: List[Dict[str, Any]]
    extra_payment: float = Field(default=0.0, ge=0.0)


class WhatIfRequest(InputModel):
    debts: List[Dict[str, Any]]
    extra_payment: float = Field(default=0.0, ge=0.0)
    additional_payment: float = Field(default=0.0, ge=0.0)
    strategy: Strategy = "avalanche"


# ======================================
# Helpers
# ======================================
def _load_debts(raw: List[Dict[str, Any]]) -> List[Debt]:
    debts, error = parse_debts(raw)
    if error:
        raise HTTPException(status_code=400, detail=error)
    if not debts:
        raise HTTPException(status_code=400, detail="No debts provided")
    return debts


def _plan_summary(result: SimulationResult) -> Dict[str, Any]:
    principal_total = result.total_paid - result.total_interest_paid
    return {
        "strategy": result.strategy,
        "months_to_payoff": result.months_to_payoff,
        "total_interest": result.total_interest_paid,
        "total_payments": result.total_paid,
        "principal_total": principal_total,
        "paid_off": result.paid_off,
        "remaining_balance": result.remaining_balance,
        "formatted": {
            "months_to_payoff": f"{result.months_to_payoff} months ({result.months_to_payoff / 12:.1f} years)",
            "total_interest": money(result.total_interest_paid),
            "total_payments": money(result.total_paid),
            "principal_total": money(principal_total),
        },
    }


# ======================================
# Routes
# ======================================
@app.get("/api/health")
async def health():
    return {"status": "ok", "version": app.version}


@app.post("/api/debt-payoff/plan")
async def payoff_plan(request: PlanRequest):
    debts = _load_debts(request.debts)
    try:
        sim = SimulationConfig(debts=debts, extra_payment=request.extra_payment, strategy=request.strategy)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    result = simulate_payoff(sim)
    logger.info("plan: %s, %d debts, %d months", sim.strategy, len(debts), result.months_to_payoff)
    return {
        "success": True,
        **_plan_summary(result),
        "summary": summarize_debts(debts),
        "schedule": monthly_totals_dataframe(result).to_dict(orient="records"),
        "balance_series": balance_series(result),
    }


@app.post("/api/debt-payoff/compare")
async def compare_plans(request: CompareRequest):
    debts = _load_debts(request.debts)
    comparison = compare_strategies(debts, request.extra_payment)
    return {
        "success": True,
        "avalanche": _plan_summary(comparison["avalanche"]),
        "snowball": _plan_summary(comparison["snowball"]),
        "best_plan": comparison["best_plan"],
        "interest_savings": comparison["interest_savings"],
        "months_saved": comparison["months_saved"],
    }


@app.post("/api/debt-payoff/whatif")
async def whatif_analysis(request: WhatIfRequest):
    debts = _load_debts(request.debts)
    outcome = compare_extra_payment(debts, request.extra_payment, request.additional_payment,
                                    strategy=request.strategy)
    return {
        "success": True,
        "baseline": _plan_summary(outcome["baseline"]),
        "scenario": _plan_summary(outcome["scenario"]),
        "savings": {
            "months_saved": outcome["months_saved"],
            "interest_saved": outcome["interest_savings"],
        },
        "formatted": {
            "months_saved": f"{outcome['months_saved']} months",
            "interest_saved": money(outcome["interest_savings"]) + " saved",
        },
    }


def _with_formatted(result, **amounts: float) -> Dict[str, Any]:
    return {**result.model_dump(), "formatted": {k: money(v) for k, v in amounts.items()}}


@app.post("/api/calculators/annuity-payout")
async def annuity_payout(inputs: AnnuityPayoutInputs):
    result: AnnuityPayoutResult = calculate_annuity_payout(inputs)
    return _with_formatted(result,
                           periodic_payment=result.periodic_payment,
                           after_tax_payment=result.after_tax_payment,
                           total_income=result.total_income)


@app.post("/api/calculators/house-affordability")
async def house_affordability(inputs: HouseAffordabilityInputs):
    result: HouseAffordabilityResult = calculate_house_affordability(inputs)
    return _with_formatted(result,
                           max_home_price=result.max_home_price,
                           loan_amount=result.loan_amount,
                           down_payment=result.down_payment,
                           monthly_payment=result.monthly_payment)


@app.post("/api/calculators/pension")
async def pension(inputs: PensionInputs):
    result: PensionResult = calculate_pension(inputs)
    return _with_formatted(result,
                           annual_pension=result.annual_pension,
                           monthly_pension=result.monthly_pension,
                           total_lifetime_benefit=result.total_lifetime_benefit,
                           lump_sum_value=result.lump_sum_value)


@app.post("/api/calculators/social-security")
async def social_security(inputs: SocialSecurityInputs):
    result: SocialSecurityResult = calculate_social_security(inputs)
    return _with_formatted(result,
                           monthly_benefit=result.monthly_benefit,
                           spouse_benefit=result.spouse_benefit,
                           total_monthly_benefit=result.total_monthly_benefit)


@app.post("/api/calculators/va-mortgage")
async def va_mortgage(inputs: VAMortgageInputs):
    result: VAMortgageResult = calculate_va_mortgage(inputs)
    return _with_formatted(result,
                           funding_fee=result.funding_fee,
                           total_loan_amount=result.total_loan_amount,
                           monthly_payment=result.monthly_payment,
                           total_interest=result.total_interest)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
