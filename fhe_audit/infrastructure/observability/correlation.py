"""Correlation ids for workflow runs.

Every upload or decrypt run gets its own id, prefixed with the run
kind (``upload-…``, ``decrypt-…``), held in a context variable. Tasks
started with asyncio copy the context, so concurrent decrypts each keep
their own id across awaits.

Usage:
    run_id = start_workflow_run("decrypt")
    log = structlog.get_logger().bind(correlation_id=get_correlation_id())
"""

from contextvars import ContextVar
from typing import Any
from uuid import uuid4

# Empty string outside a workflow run
_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def generate_correlation_id(kind: str = "") -> str:
    """New correlation id: a UUID4, prefixed with ``kind-`` when given."""
    run_id = str(uuid4())
    return f"{kind}-{run_id}" if kind else run_id


def get_correlation_id() -> str:
    """Correlation id of the current run, or an empty string."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    _correlation_id.set(correlation_id)


def start_workflow_run(kind: str) -> str:
    """Open a new workflow run in the current context.

    Args:
        kind: Run kind, e.g. ``upload`` or ``decrypt``.

    Returns:
        The id now set for the run.
    """
    run_id = generate_correlation_id(kind)
    _correlation_id.set(run_id)
    return run_id


def correlation_id_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor adding correlation_id inside a run."""
    correlation_id = get_correlation_id()
    if correlation_id:
        event_dict["correlation_id"] = correlation_id
    return event_dict
