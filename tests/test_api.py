"""
API Endpoint Tests
==================
"""

import pytest

from variant_grouping.api import create_app


@pytest.fixture
def client():
    app = create_app()
    app.config["TESTING"] = True
    return app.test_client()


class TestHealth:

    def test_health(self, client):
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.get_json()["status"] == "healthy"


class TestParse:

    def test_parse(self, client):
        response = client.post("/api/variants/parse", json={"description": "VOYAGER DRYO JACKET - BLUE/GREY (L)"})
        assert response.status_code == 200
        assert response.get_json() == {
            "baseName": "VOYAGER DRYO JACKET",
            "optionValue": "BLUE/GREY (L)",
            "optionName": "Variant",
        }

    def test_missing_description_is_empty(self, client):
        response = client.post("/api/variants/parse", json={})
        assert response.get_json() == {"baseName": "", "optionValue": "Default", "optionName": "Title"}

    def test_non_string_description(self, client):
        response = client.post("/api/variants/parse", json={"description": 42})
        assert response.status_code == 400
        assert response.get_json()["ok"] is False

    def test_non_json_body(self, client):
        response = client.post("/api/variants/parse", data="not json", content_type="text/plain")
        assert response.status_code == 400


class TestDetect:

    def test_detect(self, client):
        response = client.post("/api/variants/detect", json={"descriptions": [
            "PRIORITY GTX JACKET - BLACK (S)",
            "PRIORITY GTX JACKET - BLACK (M)",
        ]})
        data = response.get_json()
        assert response.status_code == 200
        assert data["optionName"] == "Size"
        assert data["commonBaseName"] == "PRIORITY GTX JACKET - BLACK"
        assert [v["optionValue"] for v in data["variants"]] == ["S", "M"]

    def test_empty_list(self, client):
        response = client.post("/api/variants/detect", json={"descriptions": []})
        assert response.get_json() == {"optionName": "Option", "commonBaseName": "", "variants": []}

    @pytest.mark.parametrize("body", [{}, {"descriptions": "JACKET"}, {"descriptions": ["A", 1]}])
    def test_invalid_descriptions(self, client, body):
        response = client.post("/api/variants/detect", json=body)
        assert response.status_code == 400


class TestGroup:

    def test_group(self, client):
        response = client.post("/api/variants/group", json={"items": [
            {"sku": "G-S", "description": "GRIPS (S)", "price": "19.50", "stock": 4},
            {"sku": "G-M", "description": "GRIPS (M)"},
            {"sku": "P-1", "description": "SPARK PLUG"},
        ]})
        assert response.status_code == 200
        family, single = response.get_json()
        assert family["title"] == "GRIPS"
        assert family["optionName"] == "Size"
        assert family["variants"][0] == {"sku": "G-S", "optionValue": "S", "price": 19.5, "stock": 4}
        assert family["variants"][1]["price"] == 0.0
        assert single["title"] == "SPARK PLUG"

    @pytest.mark.parametrize("body", [
        {},
        {"items": "GRIPS"},
        {"items": ["GRIPS (S)"]},
        {"items": [{"sku": "X", "description": 5}]},
        {"items": [{"sku": "X", "description": "GRIPS", "price": "cheap"}]},
        {"items": [{"sku": "X", "description": "GRIPS", "stock": 1e400}]},
        {"items": [{"sku": "X", "description": "GRIPS", "price": "nan"}]},
        {"items": [{"sku": "X", "description": "GRIPS", "price": "inf"}]},
    ])
    def test_invalid_items(self, client, body):
        response = client.post("/api/variants/group", json=body)
        assert response.status_code == 400
        assert "error" in response.get_json()
