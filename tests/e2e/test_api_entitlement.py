"""
test_api_entitlement.py - GET /api/me/entitlement
"""

import pytest
from fastapi.testclient import TestClient


@pytest.mark.parametrize(
    ("account_id", "authorized", "reason"),
    [
        (1, True, "admin role"),
        (2, True, "active subscription"),
        (3, False, "subscription required"),
        (4, False, "subscription required"),
    ],
)
def test_entitlement_probe(client: TestClient, auth_headers, account_id, authorized, reason):
    response = client.get("/api/me/entitlement", headers=auth_headers(account_id))

    assert response.status_code == 200
    assert response.json() == {"authorized": authorized, "reason": reason}


def test_requires_authentication(client: TestClient):
    assert client.get("/api/me/entitlement").status_code == 401


def test_health(client: TestClient):
    assert client.get("/health").json()["status"] == "ok"
