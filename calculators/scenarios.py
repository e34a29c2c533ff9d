# calculators/scenarios.py
from typing import List, Dict, Any
from .schemas import Debt, SimulationConfig, Strategy
from .optimization import compute_avalanche_plan, compute_snowball_plan, simulate_payoff


def compare_strategies(debts: List[Debt], extra_payment: float = 0.0) -> Dict[str, Any]:
    aval = compute_avalanche_plan(debts, extra_payment)
    snow = compute_snowball_plan(debts, extra_payment)
    # pick best by total interest then months; avalanche wins ties
    best = min([aval, snow], key=lambda p: (p.total_interest_paid, p.months_to_payoff))
    return {
        "extra_payment": extra_payment,
        "avalanche": aval,
        "snowball": snow,
        "best_plan": best.strategy,
        "interest_savings": snow.total_interest_paid - aval.total_interest_paid,
        "months_saved": snow.months_to_payoff - aval.months_to_payoff,
    }


def compare_extra_payment(debts: List[Debt], extra_payment: float, additional: float,
                          strategy: Strategy = "avalanche") -> Dict[str, Any]:
    base = simulate_payoff(SimulationConfig(debts=debts, extra_payment=extra_payment, strategy=strategy))
    scenario = simulate_payoff(SimulationConfig(debts=debts, extra_payment=extra_payment + max(0.0, additional),
                                                strategy=strategy))
    return {
        "baseline": base,
        "scenario": scenario,
        "interest_savings": max(0.0, base.total_interest_paid - scenario.total_interest_paid),
        "months_saved": max(0, base.months_to_payoff - scenario.months_to_payoff),
    }
