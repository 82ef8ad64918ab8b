"""Tests for shared model utilities."""

import uuid
from datetime import UTC, date, datetime

from app.models.shared import UUIDType, generate_uuid, utc_now, utc_today


class TestGenerateUuid:
    def test_returns_uuid4(self):
        result = generate_uuid()
        assert isinstance(result, uuid.UUID)
        assert result.version == 4

    def test_returns_unique_values(self):
        assert len({generate_uuid() for _ in range(10)}) == 10


class TestUtcClock:
    def test_utc_now_is_aware(self):
        assert utc_now().tzinfo == UTC

    def test_utc_today(self):
        before = datetime.now(UTC).date()
        result = utc_today()
        after = datetime.now(UTC).date()
        assert isinstance(result, date)
        assert before <= result <= after


class TestUUIDType:
    def test_process_bind_param_none(self):
        assert UUIDType().process_bind_param(None, None) is None

    def test_process_bind_param_uuid(self):
        val = uuid.uuid4()
        assert UUIDType().process_bind_param(val, None) == str(val)

    def test_process_bind_param_string(self):
        val = "12345678-1234-5678-1234-567812345678"
        assert UUIDType().process_bind_param(val, None) == val

    def test_process_result_value_string(self):
        val = "12345678-1234-5678-1234-567812345678"
        result = UUIDType().process_result_value(val, None)
        assert isinstance(result, uuid.UUID)
        assert str(result) == val
