"""Tests for the generation API."""
from fastapi.testclient import TestClient

from app.main import app

client = TestClient(app)


ACCOUNT = {
    "logical_name": "account",
    "schema_name": "Account",
    "primary_id_attribute": "accountid",
    "collection_name": "accounts",
    "attributes": [
        {"logical_name": "accountid", "attribute_type": "Uniqueidentifier", "is_primary_id": True},
        {"logical_name": "parentaccountid", "attribute_type": "Lookup"},
        {"logical_name": "revenue", "attribute_type": "Money"},
    ],
}


def test_health():
    response = client.get("/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_generate_with_custom_template():
    response = client.post("/v1/generate", json={
        "entities": [ACCOUNT],
        "template": "before{#rendered_content#}after",
        "namespace": "Crm",
    })
    assert response.status_code == 200

    body = response.json()
    assert body["entity_count"] == 1
    assert body["typescript"].startswith("before//** @description AUTO GENERATED CLASSES FOR Account")
    assert body["typescript"].endswith("after")
    assert "\t_parentaccountid_value?: string" in body["typescript"]
    assert "namespace Crm" in body["csharp"]
    assert "public decimal revenue;" in body["csharp"]


def test_generate_empty_selection():
    response = client.post("/v1/generate", json={
        "entities": [],
        "template": "before{#rendered_content#}after",
    })
    assert response.status_code == 200
    assert response.json()["typescript"] == "beforeafter"


def test_generate_with_packaged_template():
    response = client.post("/v1/generate", json={"entities": [ACCOUNT]})
    assert response.status_code == 200
    typescript = response.json()["typescript"]
    assert "export abstract class Entity" in typescript
    assert "export class Account extends Entity {" in typescript
    assert "namespace Xrm" in response.json()["csharp"]


def test_generate_rejects_missing_primary_id():
    payload = dict(ACCOUNT, primary_id_attribute="missingid")
    response = client.post("/v1/generate", json={"entities": [payload]})
    assert response.status_code == 400
    assert "missingid" in response.json()["detail"]


def test_generate_rejects_empty_logical_name():
    payload = dict(ACCOUNT, attributes=[{"logical_name": "", "attribute_type": "String"}])
    response = client.post("/v1/generate", json={"entities": [payload]})
    assert response.status_code == 422


def test_generate_without_schema_name_uses_display_cased_class():
    payload = {key: value for key, value in ACCOUNT.items() if key != "schema_name"}
    response = client.post("/v1/generate", json={"entities": [payload]})
    assert response.status_code == 200

    csharp = response.json()["csharp"]
    assert "public class Account" in csharp
    assert "public class account" not in csharp
