import copy

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import text

from customers_api.application import create_app

ADA = {
    "firstName": "Ada",
    "lastName": "Lovelace",
    "billingAddress": {"line1": "1 Main St", "city": "London", "postCode": "AB1 2CD", "country": "UK"},
    "shippingAddress": {"line1": "2 Side St", "city": "London", "postCode": "AB1 2CD", "country": "UK"},
}


def _expected(customer_id, payload):
    expected = copy.deepcopy(payload)
    for key in ("billingAddress", "shippingAddress"):
        for line in ("line2", "line3", "line4"):
            expected[key].setdefault(line, None)
    return {"id": customer_id, **expected}


def test_create_then_get(client):
    created = client.post("/api/customers", json=ADA)
    assert created.status_code == 200
    assert created.json() == {"id": 1}

    fetched = client.get("/api/customers/1")
    assert fetched.status_code == 200
    assert fetched.json() == _expected(1, ADA)


@pytest.mark.parametrize("create_alt, get_alt", [(False, True), (True, False), (True, True)])
def test_alt_path_gives_same_result(client, create_alt, get_alt):
    payload = copy.deepcopy(ADA)
    payload["shippingAddress"]["line2"] = "Unit 4"
    new_id = client.post("/api/customers", params={"useAltPath": create_alt}, json=payload).json()["id"]
    via_primary = client.get(f"/api/customers/{new_id}").json()
    via_alt = client.get(f"/api/customers/{new_id}", params={"useAltPath": get_alt}).json()
    assert via_primary == via_alt == _expected(new_id, payload)


@pytest.mark.parametrize("data_access", ["orm", "sql"])
def test_configured_data_access(make_client, data_access):
    client = make_client(data_access=data_access, alt_path_enabled=False)
    assert client.post("/api/customers", json=ADA).json() == {"id": 1}
    assert client.get("/api/customers/1", params={"useAltPath": "true"}).json() == _expected(1, ADA)


def test_ids_increase(client):
    first = client.post("/api/customers", json=ADA).json()["id"]
    second = client.post("/api/customers", json=ADA).json()["id"]
    assert second > first


def test_unknown_customer_is_404(client):
    response = client.get("/api/customers/9999")
    assert response.status_code == 404
    assert response.json() == {"detail": "Customer not found"}


def test_non_integer_id_is_422(client):
    assert client.get("/api/customers/abc").status_code == 422


def test_missing_required_field_is_422(client):
    payload = copy.deepcopy(ADA)
    del payload["billingAddress"]["city"]
    response = client.post("/api/customers", json=payload)
    assert response.status_code == 422


def test_permissive_mode_accepts_blank_names(client):
    payload = {**ADA, "firstName": ""}
    assert client.post("/api/customers", json=payload).status_code == 200


def test_strict_mode_rejects_blank_and_oversized(make_client):
    client = make_client(strict_validation=True)
    payload = copy.deepcopy(ADA)
    payload["firstName"] = ""
    payload["shippingAddress"]["country"] = "U" * 51
    response = client.post("/api/customers", json=payload)
    assert response.status_code == 422
    assert response.json() == {
        "detail": [
            {"loc": ["first_name"], "msg": "must not be blank"},
            {"loc": ["shipping_address", "country"], "msg": "must be at most 50 characters"},
        ]
    }
    assert client.get("/api/customers/1").status_code == 404


def test_docs_hidden_outside_development(client):
    assert client.get("/docs").status_code == 404
    assert client.get("/openapi.json").status_code == 404


def test_docs_served_in_development(make_client):
    client = make_client(environment="Development")
    assert client.get("/docs").status_code == 200
    assert "/api/customers" in " ".join(client.get("/openapi.json").json()["paths"])


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


@pytest.mark.parametrize("use_alt_path", [False, True])
def test_id_beyond_integer_range_is_404(client, use_alt_path):
    client.post("/api/customers", json=ADA)
    response = client.get("/api/customers/99999999999999999999", params={"useAltPath": use_alt_path})
    assert response.status_code == 404
    assert response.json() == {"detail": "Customer not found"}


@pytest.mark.parametrize("use_alt_path", [False, True])
def test_database_fault_is_500(settings, use_alt_path):
    app = create_app(settings)
    with TestClient(app, raise_server_exceptions=False) as client:
        with app.state.engine.begin() as conn:
            conn.execute(text('DROP TABLE "Customer"'))
        params = {"useAltPath": use_alt_path}
        assert client.post("/api/customers", params=params, json=ADA).status_code == 500
        assert client.get("/api/customers/1", params=params).status_code == 500
