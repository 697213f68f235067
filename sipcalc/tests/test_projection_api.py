from __future__ import annotations

import json

from flask.testing import FlaskClient


def projection_payload() -> dict:
    return {
        "initialInvestment": 100000,
        "monthlyContribution": 10000,
        "annualStepUpPercent": 10,
        "totalYears": 10,
        "annualReturnPercent": 12,
    }


def test_projection_endpoint_returns_schedule(client: FlaskClient):
    resp = client.post("/api/sip/projection", json=projection_payload())

    assert resp.status_code == 200
    body = resp.get_json()
    rows = body["schedule"]
    assert len(rows) == 10
    assert rows[0]["year"] == 1
    assert rows[0]["contributionThisYear"] == 10000
    assert rows[0]["cumulativeInvested"] == 220000
    assert rows[0]["cumulativeValue"] == 239508
    assert rows[0]["annualizedReturnRate"] == 8.87

    # summary and trend are derived from the final/full schedule
    assert body["summary"]["totalValue"] == rows[-1]["cumulativeValue"]
    assert body["summary"]["slices"][0]["name"] == "Total Invested"
    assert body["trend"]["years"] == list(range(1, 11))
    assert body["input"]["totalYears"] == 10


def test_missing_fields_fall_back_to_defaults(client: FlaskClient):
    explicit = client.post("/api/sip/projection", json=projection_payload()).get_json()
    defaulted = client.post("/api/sip/projection", json={}).get_json()

    assert defaulted == explicit


def test_defaults_endpoint(client: FlaskClient):
    resp = client.get("/api/sip/defaults")

    assert resp.status_code == 200
    assert resp.get_json() == {
        "initialInvestment": 100000.0,
        "monthlyContribution": 10000.0,
        "annualStepUpPercent": 10.0,
        "totalYears": 10,
        "annualReturnPercent": 12.0,
    }


def test_query_string_values_are_coerced(client: FlaskClient):
    resp = client.get(
        "/api/sip/projection",
        query_string={
            "initialInvestment": "0",
            "monthlyContribution": "5000",
            "annualStepUpPercent": "0",
            "totalYears": "3",
            "annualReturnPercent": "0",
        },
    )

    assert resp.status_code == 200
    rows = resp.get_json()["schedule"]
    assert [row["cumulativeInvested"] for row in rows] == [60000, 120000, 180000]
    assert [row["cumulativeValue"] for row in rows] == [60000, 120000, 180000]


def test_zero_years_returns_empty_schedule(client: FlaskClient):
    payload = projection_payload()
    payload["totalYears"] = 0

    resp = client.post("/api/sip/projection", json=payload)

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["schedule"] == []
    assert body["summary"]["totalInvested"] == 0


def test_negative_years_returns_422(client: FlaskClient):
    payload = projection_payload()
    payload["totalYears"] = -1

    resp = client.post("/api/sip/projection", json=payload)

    assert resp.status_code == 422
    body = resp.get_json()
    assert body["detail"][0]["loc"] == ["totalYears"]


def test_unknown_field_returns_422(client: FlaskClient):
    payload = projection_payload()
    payload["currency"] = "INR"

    resp = client.post("/api/sip/projection", json=payload)

    assert resp.status_code == 422


def test_non_numeric_query_value_returns_422(client: FlaskClient):
    resp = client.get("/api/sip/projection", query_string={"monthlyContribution": "lots"})

    assert resp.status_code == 422


def test_malformed_json_returns_400(client: FlaskClient):
    resp = client.post(
        "/api/sip/projection",
        data="{not json",
        content_type="application/json",
    )

    assert resp.status_code == 400
    assert "detail" in resp.get_json()


def test_non_object_json_returns_400(client: FlaskClient):
    resp = client.post("/api/sip/projection", json=[1, 2, 3])

    assert resp.status_code == 400


def _reject_constant(name: str):
    raise ValueError(f"non-standard JSON constant: {name}")


def test_overflowing_amount_returns_422(client: FlaskClient):
    payload = {"initialInvestment": 1.7e308, "totalYears": 1, "annualReturnPercent": 50}

    resp = client.post("/api/sip/projection", json=payload)

    assert resp.status_code == 422
    assert resp.get_json()["detail"][0]["loc"] == ["initialInvestment"]


def test_largest_accepted_plan_stays_valid_json(client: FlaskClient):
    payload = {
        "initialInvestment": 1e15,
        "monthlyContribution": 1e15,
        "annualStepUpPercent": 100,
        "totalYears": 100,
        "annualReturnPercent": 100,
    }

    resp = client.post("/api/sip/projection", json=payload)

    assert resp.status_code == 200
    # strict parse: Infinity/NaN would not be valid JSON
    body = json.loads(resp.get_data(as_text=True), parse_constant=_reject_constant)
    assert len(body["schedule"]) == 100
    assert body["summary"]["totalValue"] > body["summary"]["totalInvested"]
