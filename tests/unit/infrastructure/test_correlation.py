"""Unit tests for correlation id management."""

import asyncio
import re

import pytest

from fhe_audit.infrastructure.observability.correlation import (
    correlation_id_processor,
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
    start_workflow_run,
)

UUID4 = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


class TestGenerateCorrelationId:
    def test_uuid4_format(self) -> None:
        assert UUID4.match(generate_correlation_id()) is not None

    def test_unique(self) -> None:
        assert len({generate_correlation_id() for _ in range(100)}) == 100

    def test_kind_prefixes_id(self) -> None:
        run_id = generate_correlation_id("upload")

        assert run_id.startswith("upload-")
        assert UUID4.match(run_id.removeprefix("upload-")) is not None


class TestStartWorkflowRun:
    def test_sets_and_returns_prefixed_id(self) -> None:
        run_id = start_workflow_run("decrypt")

        assert run_id.startswith("decrypt-")
        assert get_correlation_id() == run_id
        set_correlation_id("")

    def test_each_run_gets_a_new_id(self) -> None:
        first = start_workflow_run("upload")
        second = start_workflow_run("upload")

        assert first != second
        set_correlation_id("")


class TestCorrelationIdContext:
    """Tests for context variable handling."""

    def test_set_and_get(self) -> None:
        set_correlation_id("run-123")

        assert get_correlation_id() == "run-123"
        set_correlation_id("")

    @pytest.mark.asyncio
    async def test_tasks_keep_their_own_id(self) -> None:
        """Test that concurrent workflow runs do not share an id."""

        async def run(run_id: str) -> str:
            set_correlation_id(run_id)
            await asyncio.sleep(0)
            return get_correlation_id()

        results = await asyncio.gather(
            asyncio.create_task(run("decrypt-a")),
            asyncio.create_task(run("decrypt-b")),
        )

        assert results == ["decrypt-a", "decrypt-b"]


class TestCorrelationIdProcessor:
    def test_adds_id_when_set(self) -> None:
        set_correlation_id("run-1")

        result = correlation_id_processor(None, "info", {"event": "x"})

        assert result["correlation_id"] == "run-1"
        set_correlation_id("")

    def test_omits_id_when_unset(self) -> None:
        set_correlation_id("")

        result = correlation_id_processor(None, "info", {"event": "x"})

        assert "correlation_id" not in result
