"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from gildedrose.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="update_quality", data={"count": 6})
        assert result.ok is True
        assert result.op == "update_quality"
        assert result.data == {"count": 6}
        assert result.warnings == []
        assert result.error is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="E001", message="Not found")
        result = ServiceResult(ok=False, op="describe_rules", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "E001"
        assert result.error.detail == {}

    def test_json_serialization(self) -> None:
        result = ServiceResult(ok=True, op="test", data={"key": "value"})
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["key"] == "value"

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]
