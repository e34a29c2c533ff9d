# calculators/plan_utils.py
from datetime import date
from typing import List, Optional
import pandas as pd
from .schemas import SimulationResult
from .utils import month_labels

SCHEDULE_COLUMNS = ["month", "period", "debt", "interest", "minimum_paid", "extra_paid", "balance"]
TOTALS_COLUMNS = ["month", "period", "principal", "interest", "paid", "remaining_balance"]


def schedule_to_dataframe(result: SimulationResult, start: Optional[date] = None) -> pd.DataFrame:
    labels = month_labels(len(result.schedule), start)
    rows = []
    for m, label in zip(result.schedule, labels):
        for a in m.allocations:
            rows.append({
                "month": m.month_index,
                "period": label,
                "debt": a.debt_id,
                "interest": a.interest,
                "minimum_paid": a.minimum_paid,
                "extra_paid": a.extra_paid,
                "balance": a.balance,
            })
    if not rows:
        return pd.DataFrame(columns=SCHEDULE_COLUMNS)
    return pd.DataFrame(rows, columns=SCHEDULE_COLUMNS)


def monthly_totals_dataframe(result: SimulationResult, start: Optional[date] = None) -> pd.DataFrame:
    labels = month_labels(len(result.schedule), start)
    rows = [{
        "month": m.month_index,
        "period": label,
        "principal": m.total_principal_paid,
        "interest": m.total_interest_paid,
        "paid": m.total_paid,
        "remaining_balance": m.total_remaining_balance,
    } for m, label in zip(result.schedule, labels)]
    if not rows:
        return pd.DataFrame(columns=TOTALS_COLUMNS)
    return pd.DataFrame(rows, columns=TOTALS_COLUMNS)


def balance_series(result: SimulationResult) -> List[float]:
    return [result.initial_balance] + [m.total_remaining_balance for m in result.schedule]
