import json

from calculators.inputs import parse_debts, parse_debts_json, summarize_debts
from calculators.schemas import Debt


def test_parse_valid_json():
    text = json.dumps([
        {"id": "1", "name": "Card 1", "balance": 5000, "apr": 18.99, "min_payment_value": 2},
        {"id": "2", "balance": 3000, "apr": 24.99, "min_payment_type": "fixed", "min_payment_value": 50},
    ])
    debts, error = parse_debts_json(text)
    assert error is None
    assert [d.name for d in debts] == ["Card 1", "2"]
    assert debts[1].min_payment_type == "fixed"


def test_malformed_json_reports_error():
    debts, error = parse_debts_json("[{")
    assert debts == []
    assert error.startswith("Invalid debts JSON")


def test_non_list_reports_error():
    debts, error = parse_debts_json('{"id": "1"}')
    assert debts == []
    assert "list" in error


def test_invalid_debt_reports_error():
    debts, error = parse_debts([{"id": "1", "balance": -5}])
    assert debts == []
    assert error.startswith("Invalid debts")


def test_summary_text():
    debts = [
        Debt(id="a", balance=1000, apr=10.0, min_payment_type="fixed", min_payment_value=30),
        Debt(id="b", balance=3000, apr=20.0, min_payment_value=2),
    ]
    text = summarize_debts(debts)
    assert "Total debts: $4,000.00" in text
    assert "Weighted APR: 17.50%" in text
    assert "Total minimums: $90.00/month" in text


def test_summary_without_debts():
    assert summarize_debts([]) == "No debts provided."
