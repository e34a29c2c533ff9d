import pytest

from calculators.amortization import level_payment, amortization_schedule, payment_factor


def test_level_payment_known_values():
    assert level_payment(200000, 0.06 / 12, 360) == pytest.approx(1199.10, abs=0.01)
    assert level_payment(300000, 0.065 / 12, 360) == pytest.approx(1896.20, abs=0.01)


def test_zero_rate_splits_principal_evenly():
    assert level_payment(12000, 0.0, 24) == 500.0


def test_periods_must_be_positive():
    with pytest.raises(ValueError):
        level_payment(1000, 0.01, 0)


def test_payment_factor_scales_linearly():
    assert payment_factor(0.005, 120) * 50000 == pytest.approx(level_payment(50000, 0.005, 120))


def test_schedule_retires_the_loan():
    pmt = level_payment(10000, 0.01, 12)
    rows = amortization_schedule(10000, 0.01, 12, pmt)
    assert len(rows) == 12
    assert rows[0].interest == pytest.approx(100.0)
    assert rows[0].principal == pytest.approx(pmt - 100.0)
    assert rows[-1].balance == pytest.approx(0.0, abs=1e-6)
    assert sum(r.principal for r in rows) == pytest.approx(10000)


def test_overpayment_balance_is_clamped():
    rows = amortization_schedule(1000, 0.01, 6, 400, floor_balance=True)
    assert all(r.balance >= 0 for r in rows)
    # once retired no further interest accrues on a floored balance
    assert rows[-1].interest == 0
    unfloored = amortization_schedule(1000, 0.01, 6, 400)
    assert unfloored[-1].balance == 0
    assert unfloored[-1].interest < 0
