"""Tests for ServiceResult and ServiceError."""

import json

import pytest
from pydantic import ValidationError

from tzctl.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="convert", data={"count": 1})
        assert result.ok is True
        assert result.op == "convert"
        assert result.data == {"count": 1}
        assert result.warnings == []
        assert result.error is None
        assert result.meta is None

    def test_error_construction(self) -> None:
        error = ServiceError(code="UNKNOWN_ZONE", message="Unknown timezone: 'Mars/Phobos'")
        result = ServiceResult(ok=False, op="convert", error=error)
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "UNKNOWN_ZONE"
        assert result.error.detail == {}

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="convert")
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]

    def test_json_serialization(self) -> None:
        result = ServiceResult(
            ok=True,
            op="convert",
            data={"source": "UTC"},
            warnings=["Mars/Phobos: Unknown timezone: 'Mars/Phobos'"],
        )
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"] == {"source": "UTC"}
        assert parsed["warnings"] == ["Mars/Phobos: Unknown timezone: 'Mars/Phobos'"]
        assert parsed["error"] is None
