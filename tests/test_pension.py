import pytest
from pydantic import ValidationError

from calculators.pension import calculate_pension, final_average_salary
from calculators.schemas import PensionInputs


def test_default_projection():
    result = calculate_pension(PensionInputs())
    final = 60000 * 1.02 ** 20
    assert result.projected_final_salary == pytest.approx(final)
    assert result.final_average_salary == pytest.approx(final * 0.98)
    assert result.annual_pension == pytest.approx(30 * 0.015 * final * 0.98)
    assert result.monthly_pension == pytest.approx(result.annual_pension / 12)
    assert len(result.projections) == 20
    assert result.projections[0].age == 65
    assert result.projections[1].pension == pytest.approx(result.annual_pension * 1.02)
    assert result.projections[-1].cumulative == pytest.approx(result.total_lifetime_benefit)
    assert result.lump_sum_value == pytest.approx(result.total_lifetime_benefit / 1.04 ** 10)


def test_without_cola_benefit_is_flat():
    result = calculate_pension(PensionInputs(include_cola=False))
    assert result.total_lifetime_benefit == pytest.approx(20 * result.annual_pension)
    assert {round(p.pension, 6) for p in result.projections} == {round(result.annual_pension, 6)}


def test_single_year_average_is_final_salary():
    assert final_average_salary(80000, 0.03, 1) == 80000


def test_no_retirement_years_after_life_expectancy():
    result = calculate_pension(PensionInputs(retirement_age=65, life_expectancy=60))
    assert result.projections == []
    assert result.total_lifetime_benefit == 0
    assert result.lump_sum_value == 0


def test_retirement_before_current_age_is_rejected():
    with pytest.raises(ValidationError):
        PensionInputs(current_age=50, retirement_age=45)
