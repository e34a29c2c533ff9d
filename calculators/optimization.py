# calculators/optimization.py
import logging
from typing import List, Dict, Optional
from . import config
from .schemas import Debt, SimulationConfig, SimulationResult, MonthlyRecord, DebtAllocation, Strategy

logger = logging.getLogger(__name__)


def _monthly_rate(apr: float) -> float:
    return max(0.0, apr) / 100.0 / 12.0


def resolve_minimum_payment(debt: Debt, balance: Optional[float] = None,
                            floor: Optional[float] = None) -> float:
    """Minimum owed this month before any extra allocation.

    Fixed rules return the configured amount as-is. Percentage rules take that
    share of `balance` (defaults to the debt's own balance) and never go below
    the policy floor. Neither is capped at the balance here.
    """
    if debt.min_payment_type == "fixed":
        return debt.min_payment_value
    bal = debt.balance if balance is None else balance
    floor = config.MIN_PAYMENT_FLOOR if floor is None else floor
    return max(bal * (debt.min_payment_value / 100.0), floor)


def strategy_order(debts: List[Debt], strategy: Strategy) -> List[Debt]:
    # stable: ties keep input order
    if strategy == "snowball":
        return sorted(debts, key=lambda d: d.balance)
    return sorted(debts, key=lambda d: -d.apr)


def _accrue_and_pay_minimums(debts: List[Debt], balances: Dict[str, float],
                             allocs: Dict[str, DebtAllocation], available: float,
                             floor: Optional[float]) -> float:
    """Interest then minimum payment on every open debt; returns what is left of the pool."""
    for d in debts:
        bal = balances[d.id]
        if bal <= 0:
            continue
        interest = bal * _monthly_rate(d.apr)
        bal += interest
        pay = min(resolve_minimum_payment(d, bal, floor), bal)
        balances[d.id] = bal - pay
        allocs[d.id].interest = interest
        allocs[d.id].minimum_paid = pay
        available -= pay
    return available


def _allocate_extra(ordered: List[Debt], balances: Dict[str, float],
                    allocs: Dict[str, DebtAllocation], available: float) -> float:
    for d in ordered:
        bal = balances[d.id]
        if bal <= 0:
            continue
        extra = min(available, bal)
        if extra > 0:
            balances[d.id] = bal - extra
            allocs[d.id].extra_paid += extra
            available -= extra
        if available <= 0:
            break
    return available


def simulate_payoff(sim: SimulationConfig, max_months: int = config.MAX_SIMULATION_MONTHS,
                    min_payment_floor: Optional[float] = None) -> SimulationResult:
    """Month-by-month paydown of every debt in `sim` under its strategy.

    The minimums and the extra payment are drawn from one pool of
    `extra_payment` per month. The strategy order is fixed from the initial
    balances/APRs. Stops when every balance is zero or at `max_months`.
    """
    debts = list(sim.debts)
    balances = {d.id: float(d.balance) for d in debts}
    ordered = strategy_order(debts, sim.strategy)
    initial_total = sum(balances.values())

    schedule: List[MonthlyRecord] = []
    total_interest = 0.0
    mi = 0

    while any(b > 0 for b in balances.values()) and mi < max_months:
        allocs = {d.id: DebtAllocation(debt_id=d.id, interest=0.0, minimum_paid=0.0,
                                       extra_paid=0.0, balance=0.0) for d in debts}
        available = _accrue_and_pay_minimums(debts, balances, allocs, sim.extra_payment, min_payment_floor)
        available = _allocate_extra(ordered, balances, allocs, available)

        for d in debts:
            allocs[d.id].balance = balances[d.id]
        month_interest = sum(a.interest for a in allocs.values())
        month_paid = sim.extra_payment - available
        total_interest += month_interest
        schedule.append(MonthlyRecord(
            month_index=mi,
            total_principal_paid=month_paid - month_interest,
            total_interest_paid=month_interest,
            total_paid=month_paid,
            total_remaining_balance=sum(balances.values()),
            allocations=[allocs[d.id] for d in debts],
        ))
        mi += 1

    result = SimulationResult(strategy=sim.strategy, months_to_payoff=mi, total_interest_paid=total_interest,
                              initial_balance=initial_total, schedule=schedule)
    if not result.paid_off:
        logger.warning("%s payoff not reached; stopped after %d months with %.2f still owed",
                       sim.strategy, mi, result.remaining_balance)
    logger.debug("%s payoff: %d debts, %d months, interest %.2f",
                 sim.strategy, len(debts), mi, total_interest)
    return result


def compute_snowball_plan(debts: List[Debt], extra_payment: float) -> SimulationResult:
    return simulate_payoff(SimulationConfig(debts=debts, extra_payment=extra_payment, strategy="snowball"))


def compute_avalanche_plan(debts: List[Debt], extra_payment: float) -> SimulationResult:
    return simulate_payoff(SimulationConfig(debts=debts, extra_payment=extra_payment, strategy="avalanche"))
