from fastapi.testclient import TestClient

from api import app

client = TestClient(app)

DEFAULT_DEBTS = [
    {"id": "1", "name": "Card 1", "balance": 5000, "apr": 18.99, "min_payment_type": "percentage", "min_payment_value": 2},
    {"id": "2", "name": "Card 2", "balance": 3000, "apr": 24.99, "min_payment_type": "percentage", "min_payment_value": 3},
]


def test_health():
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_plan():
    resp = client.post("/api/debt-payoff/plan",
                       json={"debts": DEFAULT_DEBTS, "extra_payment": 200, "strategy": "avalanche"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["paid_off"] is True
    assert 0 < body["months_to_payoff"] < 360
    assert len(body["schedule"]) == body["months_to_payoff"]
    assert len(body["balance_series"]) == body["months_to_payoff"] + 1
    assert body["formatted"]["total_interest"].startswith("$")
    assert abs(body["principal_total"] - 8000) < 1e-6


def test_plan_rejects_bad_debts():
    resp = client.post("/api/debt-payoff/plan", json={"debts": [{"id": "1", "balance": -10}]})
    assert resp.status_code == 400


def test_plan_rejects_empty_debts():
    resp = client.post("/api/debt-payoff/plan", json={"debts": []})
    assert resp.status_code == 400


def test_plan_rejects_duplicate_ids():
    debts = [dict(DEFAULT_DEBTS[0]), dict(DEFAULT_DEBTS[1], id="1")]
    resp = client.post("/api/debt-payoff/plan", json={"debts": debts})
    assert resp.status_code == 400


def test_plan_rejects_unknown_strategy():
    resp = client.post("/api/debt-payoff/plan", json={"debts": DEFAULT_DEBTS, "strategy": "random"})
    assert resp.status_code == 422


def test_compare():
    resp = client.post("/api/debt-payoff/compare", json={"debts": DEFAULT_DEBTS, "extra_payment": 200})
    assert resp.status_code == 200
    body = resp.json()
    assert body["best_plan"] == "avalanche"
    assert body["avalanche"]["strategy"] == "avalanche"
    assert body["snowball"]["strategy"] == "snowball"


def test_whatif():
    resp = client.post("/api/debt-payoff/whatif",
                       json={"debts": DEFAULT_DEBTS, "extra_payment": 200, "additional_payment": 100})
    assert resp.status_code == 200
    body = resp.json()
    assert body["savings"]["months_saved"] > 0
    assert body["savings"]["interest_saved"] > 0


def test_annuity_payout_endpoint():
    resp = client.post("/api/calculators/annuity-payout", json={"include_inflation": False})
    assert resp.status_code == 200
    assert len(resp.json()["schedule"]) == 240


def test_house_affordability_endpoint():
    resp = client.post("/api/calculators/house-affordability", json={"monthly_income": 8000})
    assert resp.status_code == 200
    assert resp.json()["max_home_price"] > 0


def test_pension_endpoint_validates_ages():
    assert client.post("/api/calculators/pension", json={}).status_code == 200
    resp = client.post("/api/calculators/pension", json={"current_age": 70, "retirement_age": 65})
    assert resp.status_code == 422


def test_social_security_endpoint():
    resp = client.post("/api/calculators/social-security", json={"birth_year": 1957, "retirement_age": 66})
    assert resp.status_code == 200
    assert resp.json()["full_retirement_age"] == 66.5


def test_va_mortgage_endpoint():
    resp = client.post("/api/calculators/va-mortgage", json={"loan_amount": 250000, "first_time_use": False})
    assert resp.status_code == 200
    body = resp.json()
    assert body["funding_fee_percent"] == 3.6
    assert abs(body["funding_fee"] - 9000) < 1e-6


def test_calculator_routes_include_formatted_amounts():
    body = client.post("/api/calculators/annuity-payout", json={}).json()
    assert body["formatted"]["periodic_payment"].startswith("$")
    body = client.post("/api/calculators/house-affordability", json={}).json()
    assert body["formatted"]["max_home_price"].startswith("$")
    body = client.post("/api/calculators/pension", json={}).json()
    assert body["formatted"]["monthly_pension"].startswith("$")
    body = client.post("/api/calculators/social-security", json={}).json()
    assert body["formatted"]["total_monthly_benefit"].startswith("$")
    body = client.post("/api/calculators/va-mortgage", json={"loan_amount": 250000}).json()
    assert body["formatted"]["funding_fee"] == "$5,750.00"


def post_raw(path, content):
    # the JSON encoder refuses Infinity, so the body is sent as text
    return client.post(path, content=content, headers={"Content-Type": "application/json"})


def test_plan_rejects_infinite_balance():
    resp = post_raw("/api/debt-payoff/plan",
                    '{"debts": [{"id": "1", "balance": Infinity, "apr": 20}], "extra_payment": 100}')
    assert resp.status_code == 400


def test_payoff_routes_reject_infinite_extra_payment():
    debts = '[{"id": "1", "balance": 1000, "apr": 20}]'
    for path in ("/api/debt-payoff/plan", "/api/debt-payoff/compare", "/api/debt-payoff/whatif"):
        resp = post_raw(path, '{"debts": %s, "extra_payment": Infinity}' % debts)
        assert resp.status_code == 422


def test_calculator_routes_reject_non_finite_numbers():
    assert post_raw("/api/calculators/annuity-payout", '{"lump_sum": Infinity}').status_code == 422
    assert post_raw("/api/calculators/va-mortgage", '{"interest_rate": NaN}').status_code == 422
