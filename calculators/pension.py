# calculators/pension.py
from typing import List
from . import config
from .schemas import PensionInputs, PensionResult, PensionYear


def final_average_salary(final_salary: float, growth_rate: float, average_years: int) -> float:
    # steady growth: the average trails the final year by half the window
    return final_salary * (1 - (average_years - 1) * growth_rate / 2)


def calculate_pension(inputs: PensionInputs) -> PensionResult:
    g = inputs.salary_growth_rate / 100.0
    final_salary = inputs.current_salary * (1 + g) ** (inputs.retirement_age - inputs.current_age)
    fas = final_average_salary(final_salary, g, inputs.final_average_years)
    annual = inputs.years_of_service * (inputs.benefit_multiplier / 100.0) * fas

    cola = inputs.cola_rate / 100.0 if inputs.include_cola else 0.0
    retirement_years = max(0, inputs.life_expectancy - inputs.retirement_age)
    projections: List[PensionYear] = []
    total = 0.0
    for year in range(retirement_years):
        pension = annual * (1 + cola) ** year
        total += pension
        projections.append(PensionYear(age=inputs.retirement_age + year, pension=pension, cumulative=total))

    lump_sum = total / (1 + config.PENSION_DISCOUNT_RATE) ** (retirement_years / 2)
    return PensionResult(
        projected_final_salary=final_salary,
        final_average_salary=fas,
        annual_pension=annual,
        monthly_pension=annual / 12.0,
        total_lifetime_benefit=total,
        lump_sum_value=lump_sum,
        projections=projections,
    )
