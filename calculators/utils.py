# calculators/utils.py
from datetime import date
from typing import Optional
from . import config

def money(x: float) -> str:
    sign = "-" if x < 0 else ""
    return f"{sign}{config.CURRENCY_SYMBOL}{abs(x):,.2f}"

def month_year_iter(start_month=1, start_year=2025, months=12):
    m, y = start_month, start_year
    for _ in range(months):
        yield m, y
        m += 1
        if m > 12:
            m = 1
            y += 1

def month_labels(months: int, start: Optional[date] = None):
    start = start or date.today()
    return [f"{y:04d}-{m:02d}" for m, y in month_year_iter(start.month, start.year, months)]
