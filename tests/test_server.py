"""Tests for the HTTP API."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from json2sections.exceptions import PayloadError
from server.decode_processor import check_payload_size
from server.main import app
from server.models import DecodeOptionsModel

pytestmark = pytest.mark.server


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


class TestDecodeOptionsModel:
    """Tests for request option parsing."""

    def test_accepts_camel_case(self) -> None:
        model = DecodeOptionsModel.model_validate({"maxNestingLevel": 3, "enableQuotes": False})

        options = model.to_options()
        assert options.max_nesting_level == 3
        assert options.enable_quotes is False

    def test_accepts_snake_case(self) -> None:
        model = DecodeOptionsModel.model_validate({"max_nesting_level": 2})
        assert model.max_nesting_level == 2

    def test_skip_list_from_comma_string(self) -> None:
        model = DecodeOptionsModel.model_validate({"skipDecodingForElements": "raw, Module Type,"})
        assert model.skip_decoding_for_elements == ["raw", "Module Type"]


class TestCheckPayloadSize:
    """Tests for check_payload_size."""

    def test_returns_size(self) -> None:
        assert check_payload_size({"a": 1}, limit=100) == len('{"a": 1}')

    def test_rejects_large_payload(self) -> None:
        with pytest.raises(PayloadError):
            check_payload_size({"a": "x" * 50}, limit=10)


class TestDecodeEndpoint:
    """Tests for POST /api/decode."""

    def test_decode(self, client: TestClient) -> None:
        response = client.post(
            "/api/decode",
            json={
                "payload": {"Overview": "Strong growth. Weak retention."},
                "options": {"maxNestingLevel": 3, "customClassPrefix": "strategy"},
            },
        )

        assert response.status_code == 200
        data = response.json()
        section = data["sections"][0]
        assert section["heading"] == "Overview"
        assert section["type"] == "heading"
        assert section["class_prefix"] == "strategy"
        assert section["content"][0]["role"] == "paragraph"
        assert data["outline"].startswith("Sections:\nOverview")
        assert "Strong growth. Weak retention." in data["content"]

    def test_skip_list(self, client: TestClient) -> None:
        response = client.post(
            "/api/decode",
            json={"payload": {"raw": {"x": 1}}, "options": {"skipDecodingForElements": ["raw"]}},
        )

        sections = response.json()["sections"]
        assert len(sections) == 1
        assert sections[0]["content"][0]["style"] == "raw"

    def test_payload_too_large(self, client: TestClient, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr("server.decode_processor.MAX_PAYLOAD_BYTES", 10)

        response = client.post("/api/decode", json={"payload": {"a": "x" * 50}})

        assert response.status_code == 413
        assert "exceeds" in response.json()["error"]

    def test_invalid_options(self, client: TestClient) -> None:
        response = client.post("/api/decode", json={"payload": 1, "options": {"maxNestingLevel": -1}})

        assert response.status_code == 422


class TestAuxiliaryEndpoints:
    """Tests for format-count and health."""

    @pytest.mark.parametrize(("n", "expected"), [("1500", "1.5K"), ("42", "42")])
    def test_format_count(self, client: TestClient, n: str, expected: str) -> None:
        response = client.get("/api/format-count", params={"n": n})
        assert response.json() == {"formatted": expected}

    @pytest.mark.parametrize("n", ["nan", "inf"])
    def test_format_count_non_finite(self, client: TestClient, n: str) -> None:
        response = client.get("/api/format-count", params={"n": n})

        assert response.status_code == 200
        assert response.json() == {"formatted": "N/A"}

    def test_format_count_missing(self, client: TestClient) -> None:
        assert client.get("/api/format-count").json() == {"formatted": "N/A"}

    def test_health(self, client: TestClient) -> None:
        assert client.get("/health").json() == {"status": "ok"}
