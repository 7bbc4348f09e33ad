"""Integration tests for the rule authoring endpoints."""

from __future__ import annotations

import pytest

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient


def _create_rule(client: TestClient, headers: dict[str, str], **payload) -> dict:
    response = client.post("/rules/", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_rule_crud_flow(client: TestClient, admin_headers, user_headers) -> None:
    created = _create_rule(
        client,
        admin_headers,
        name="MRP Cap",
        target_field="mrp",
        kind="range",
        value_text="0-1000",
        description="Upper bound for listed prices",
    )
    rule_id = created["id"]
    assert created["value"] == {"min": 0, "max": 1000}
    assert created["value_text"] == "0-1000"
    assert created["created_by"] == "admin-1"
    assert created["is_active"] is True

    response = client.get(f"/rules/{rule_id}", headers=user_headers)
    assert response.status_code == 200
    assert response.json()["name"] == "MRP Cap"

    response = client.put(
        f"/rules/{rule_id}",
        json={"value": {"min": 10, "max": 500}},
        headers=admin_headers,
    )
    assert response.status_code == 200
    assert response.json()["value_text"] == "10-500"
    assert response.json()["updated_at"] is not None

    response = client.patch(
        f"/rules/{rule_id}/status", json={"is_active": False}, headers=admin_headers
    )
    assert response.status_code == 200
    assert response.json()["is_active"] is False

    response = client.get("/rules/", params={"active": True}, headers=user_headers)
    assert response.status_code == 200
    assert response.json() == []

    response = client.delete(f"/rules/{rule_id}", headers=admin_headers)
    assert response.status_code == 204

    response = client.get(f"/rules/{rule_id}", headers=user_headers)
    assert response.status_code == 404

    response = client.delete(f"/rules/{rule_id}", headers=admin_headers)
    assert response.status_code == 404


def test_presence_rule_defaults_its_value(client: TestClient, admin_headers) -> None:
    created = _create_rule(
        client, admin_headers, name="MRP Presence Check", target_field="mrp", kind="presence"
    )

    assert created["value"] == {"required": True}


def test_list_rules_filters_by_target_field(
    client: TestClient, admin_headers, user_headers
) -> None:
    _create_rule(client, admin_headers, name="MRP", target_field="mrp", kind="presence")
    _create_rule(
        client,
        admin_headers,
        name="Origin",
        target_field="country_of_origin",
        kind="list",
        value_text="India, Nepal",
    )

    response = client.get(
        "/rules/", params={"target_field": "country_of_origin"}, headers=user_headers
    )
    assert response.status_code == 200
    body = response.json()
    assert [rule["name"] for rule in body] == ["Origin"]
    assert body[0]["value"] == ["India", "Nepal"]

    response = client.get("/rules/", params={"target_field": "weight"}, headers=user_headers)
    assert response.status_code == 400


@pytest.mark.parametrize(
    "payload",
    [
        {"name": "Cap", "target_field": "mrp", "kind": "range", "value_text": "10-5"},
        {"name": "Fmt", "target_field": "net_quantity", "kind": "regex", "value_text": "["},
        {"name": "Cap", "target_field": "mrp", "kind": "range"},
        {"name": "Odd", "target_field": "mrp", "kind": "checksum"},
        {"name": "Where", "target_field": "weight", "kind": "presence"},
        {
            "name": "Both",
            "target_field": "mrp",
            "kind": "range",
            "value": {"min": 0, "max": 1},
            "value_text": "0-1",
        },
    ],
)
def test_invalid_rules_are_rejected(client: TestClient, admin_headers, payload) -> None:
    response = client.post("/rules/", json=payload, headers=admin_headers)

    assert response.status_code == 400


def test_changing_kind_requires_a_value(client: TestClient, admin_headers) -> None:
    created = _create_rule(
        client, admin_headers, name="MRP", target_field="mrp", kind="presence"
    )

    response = client.put(
        f"/rules/{created['id']}", json={"kind": "range"}, headers=admin_headers
    )
    assert response.status_code == 400

    response = client.put(
        f"/rules/{created['id']}",
        json={"kind": "range", "value_text": "1-99"},
        headers=admin_headers,
    )
    assert response.status_code == 200
    assert response.json()["value"] == {"min": 1, "max": 99}


def test_rule_writes_require_an_administrator(client: TestClient, user_headers) -> None:
    payload = {"name": "MRP", "target_field": "mrp", "kind": "presence"}

    assert client.post("/rules/", json=payload).status_code == 401
    assert client.post("/rules/", json=payload, headers=user_headers).status_code == 403
    assert client.delete("/rules/unknown", headers=user_headers).status_code == 403


def test_invalid_tokens_are_rejected(client: TestClient, token_factory) -> None:
    forged = token_factory("admin-1", role="admin", secret="other-secret")
    wrong_audience = token_factory("admin-1", role="admin", audience="anon")

    for token in (forged, wrong_audience, "not-a-token"):
        response = client.get("/rules/", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401


def test_preview_decodes_form_text(client: TestClient, user_headers) -> None:
    response = client.post(
        "/rules/preview",
        json={"kind": "list", "value_text": "India ,Nepal"},
        headers=user_headers,
    )
    assert response.status_code == 200
    assert response.json() == {
        "kind": "list",
        "value": ["India", "Nepal"],
        "value_text": "India, Nepal",
    }

    response = client.post(
        "/rules/preview", json={"kind": "range", "value_text": "10-5"}, headers=user_headers
    )
    assert response.status_code == 400
