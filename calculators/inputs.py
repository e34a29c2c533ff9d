# calculators/inputs.py
import json
from typing import List, Tuple, Optional, Any
from pydantic import ValidationError
from .schemas import Debt
from .optimization import resolve_minimum_payment
from .utils import money

# ---------- Parsing & Presentation ----------


def parse_debts(data: Any) -> Tuple[List[Debt], Optional[str]]:
    if not isinstance(data, list):
        return [], "Debts must be a list of objects."
    try:
        return [Debt(**d) for d in data], None
    except (TypeError, ValidationError) as e:
        return [], f"Invalid debts: {e}"


def parse_debts_json(text: str) -> Tuple[List[Debt], Optional[str]]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        return [], f"Invalid debts JSON: {e}"
    return parse_debts(data)


def summarize_debts(debts: List[Debt]) -> str:
    if not debts:
        return "No debts provided."
    total_bal = sum(d.balance for d in debts)
    total_min = sum(resolve_minimum_payment(d) for d in debts if d.balance > 0)
    w_apr = 0.0
    if total_bal > 0:
        w_apr = sum(d.apr * d.balance for d in debts) / total_bal
    lines = [
        f"Total debts: {money(total_bal)}",
        f"Weighted APR: {w_apr:.2f}%",
        f"Total minimums: {money(total_min)}/month",
    ]
    return "\n".join(lines)
