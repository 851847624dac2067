"""Tests for FormValidation.validate_record."""

import asyncio
from unittest.mock import AsyncMock, Mock

import pytest

from formvalidation import create_validation


def record_validator(succeeded: bool, default: str) -> Mock:
    """A record validator preferring the configured message override."""
    return Mock(
        side_effect=lambda ctx: {
            "type": "",
            "succeeded": succeeded,
            "message": ctx.message if ctx.message else default,
        }
    )


class TestValidateRecord:
    """Test record-level validation."""

    @pytest.mark.asyncio
    async def test_sync_function_fails(self) -> None:
        fn = Mock(return_value={"type": "", "succeeded": False, "message": "mymessageA"})
        validation = create_validation({"record": {"MY_RECORD_VALIDATION": [fn]}})

        result = await validation.validate_record({})

        fn.assert_called_once()
        assert result == {"recordErrors": {"MY_RECORD_VALIDATION": "mymessageA"}}

    @pytest.mark.asyncio
    async def test_async_function_fails(self) -> None:
        fn = AsyncMock(return_value={"type": "", "succeeded": False, "message": "mymessageA"})
        validation = create_validation({"record": {"MY_RECORD_VALIDATION": [fn]}})

        result = await validation.validate_record({})

        fn.assert_awaited_once()
        assert result == {"recordErrors": {"MY_RECORD_VALIDATION": "mymessageA"}}

    @pytest.mark.asyncio
    async def test_full_validator_async_message_override(self) -> None:
        async def validator(ctx):
            return {"succeeded": False, "message": ctx.message or "mymessageA"}

        validation = create_validation(
            {"record": {"MY_RECORD_VALIDATION": [{"validator": validator, "message": "My custom message"}]}}
        )

        result = await validation.validate_record({})

        assert result == {"recordErrors": {"MY_RECORD_VALIDATION": "My custom message"}}

    @pytest.mark.asyncio
    async def test_full_validator_sync_message_override(self) -> None:
        fn = record_validator(False, "mymessageA")
        validation = create_validation(
            {"record": {"MY_RECORD_VALIDATION": [{"validator": fn, "message": "My custom message"}]}}
        )

        result = await validation.validate_record({})

        fn.assert_called_once()
        assert result == {"recordErrors": {"MY_RECORD_VALIDATION": "My custom message"}}

    @pytest.mark.asyncio
    async def test_first_fails_second_skipped(self) -> None:
        """Chains within one record short-circuit."""
        fn1 = record_validator(False, "mymessageA")
        fn2 = record_validator(True, "mymessageB")
        validation = create_validation({"record": {"MY_RECORD_VALIDATION": [fn1, fn2]}})

        result = await validation.validate_record({})

        fn1.assert_called_once()
        fn2.assert_not_called()
        assert result == {"recordErrors": {"MY_RECORD_VALIDATION": "mymessageA"}}

    @pytest.mark.asyncio
    async def test_first_succeeds_second_fails(self) -> None:
        """The chain continues after a success."""
        fn1 = record_validator(True, "mymessageA")
        fn2 = record_validator(False, "mymessageB")
        validation = create_validation({"record": {"R": [fn1, fn2]}})

        result = await validation.validate_record({})

        fn1.assert_called_once()
        fn2.assert_called_once()
        assert result == {"recordErrors": {"R": "mymessageB"}}

    @pytest.mark.asyncio
    async def test_all_succeed_returns_none(self) -> None:
        fn1 = record_validator(True, "mymessageA")
        fn2 = record_validator(True, "mymessageB")
        validation = create_validation({"record": {"MY_RECORD_VALIDATION": [fn1, fn2]}})

        assert await validation.validate_record({}) is None
        fn1.assert_called_once()
        fn2.assert_called_once()

    @pytest.mark.asyncio
    async def test_records_are_independent(self) -> None:
        """A failing record does not stop the others."""
        fn1 = record_validator(False, "mymessageA")
        fn2 = record_validator(False, "mymessageB")
        validation = create_validation(
            {"record": {"MY_RECORD_VALIDATION1": [fn1], "MY_RECORD_VALIDATION2": [fn2]}}
        )

        result = await validation.validate_record({})

        fn1.assert_called_once()
        fn2.assert_called_once()
        assert result == {
            "recordErrors": {
                "MY_RECORD_VALIDATION1": "mymessageA",
                "MY_RECORD_VALIDATION2": "mymessageB",
            }
        }

    @pytest.mark.asyncio
    async def test_only_failing_keys_reported(self) -> None:
        """Passing records are left out of validate_record results."""
        validation = create_validation(
            {
                "record": {
                    "PASSING": [record_validator(True, "ok")],
                    "FAILING": [record_validator(False, "bad")],
                }
            }
        )

        assert await validation.validate_record({}) == {"recordErrors": {"FAILING": "bad"}}

    @pytest.mark.asyncio
    async def test_context_has_values_and_no_value(self) -> None:
        """Record validators read the whole value set."""
        fn = record_validator(True, "")
        values = {"password": "a", "confirm": "b"}
        validation = create_validation({"record": {"PASSWORDS_MATCH": [fn]}})

        await validation.validate_record(values)

        (context,), _ = fn.call_args
        assert context.value is None
        assert context.values is values
        assert context.name == "PASSWORDS_MATCH"
        assert context.custom_args == {}

    @pytest.mark.asyncio
    async def test_records_run_concurrently(self) -> None:
        """A slow record does not delay the start of another."""
        started: list[str] = []
        release = asyncio.Event()

        async def slow(ctx):
            started.append("slow")
            await release.wait()
            return {"succeeded": True}

        async def other(ctx):
            started.append("other")
            release.set()
            return {"succeeded": True}

        validation = create_validation({"record": {"SLOW": [slow], "OTHER": [other]}})

        assert await asyncio.wait_for(validation.validate_record({}), timeout=1) is None
        assert sorted(started) == ["other", "slow"]

    @pytest.mark.asyncio
    async def test_no_records_returns_none(self) -> None:
        validation = create_validation({"field": {"username": [record_validator(False, "x")]}})

        assert await validation.validate_record({}) is None

    @pytest.mark.asyncio
    async def test_validator_exception_propagates(self) -> None:
        """A raising record validator fails the whole call."""

        async def broken(ctx):
            raise RuntimeError("record fault")

        validation = create_validation(
            {"record": {"BROKEN": [broken], "OK": [record_validator(True, "")]}}
        )

        with pytest.raises(RuntimeError, match="record fault"):
            await validation.validate_record({})
