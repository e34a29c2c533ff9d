# calculators/amortization.py
from typing import List
from .schemas import AmortizationRow


def level_payment(principal: float, periodic_rate: float, periods: int) -> float:
    """Level payment that retires `principal` over `periods` at `periodic_rate`.

    PMT = P * r * (1+r)^n / ((1+r)^n - 1); a zero rate splits the principal evenly.
    """
    if periods <= 0:
        raise ValueError("Number of periods must be positive.")
    if periodic_rate == 0:
        return principal / periods
    growth = (1 + periodic_rate) ** periods
    return principal * (periodic_rate * growth) / (growth - 1)


def payment_factor(periodic_rate: float, periods: int) -> float:
    return level_payment(1.0, periodic_rate, periods)


def amortization_schedule(principal: float, periodic_rate: float, periods: int,
                          payment: float, floor_balance: bool = False) -> List[AmortizationRow]:
    rows: List[AmortizationRow] = []
    balance = principal
    for i in range(periods):
        interest = balance * periodic_rate
        principal_part = payment - interest
        balance -= principal_part
        if floor_balance:
            balance = max(0.0, balance)
        rows.append(AmortizationRow(period=i + 1, payment=payment, principal=principal_part,
                                    interest=interest, balance=max(0.0, balance)))
    return rows
