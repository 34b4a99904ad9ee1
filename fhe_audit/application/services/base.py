"""Structured logging for audit client services.

Every service logs through a structlog logger bound with its class name
and a component (``records``, ``fhe``, ``upload``, ``decrypt``,
``session``, ``client``). Operation loggers add the current workflow
run id.

Collaborator failures are logged by type and message only. Values
handed to a collaborator are never bound to a log line.
"""

import structlog

from fhe_audit.infrastructure.observability.correlation import get_correlation_id


class LoggingMixin:
    """Mixin giving a service its bound logger.

    Attributes:
        _log: Logger bound with ``service`` and ``component``.
    """

    _log: structlog.BoundLogger

    def _init_logger(self, component: str = "audit") -> None:
        """Bind the service logger; call at the end of ``__init__``."""
        self._log = structlog.get_logger().bind(
            service=self.__class__.__name__,
            component=component,
        )

    def _log_operation(self, operation: str, **context: object) -> structlog.BoundLogger:
        """Logger for one operation, carrying the run's correlation id.

        Args:
            operation: Operation name, e.g. ``encrypt_score``.
            **context: Identifiers to bind (record ids, addresses, hashes).
        """
        return self._log.bind(
            operation=operation,
            correlation_id=get_correlation_id(),
            **context,
        )

    @staticmethod
    def _log_failure(
        log: structlog.BoundLogger,
        event: str,
        error: BaseException,
        level: str = "warning",
        include_message: bool = True,
        **context: object,
    ) -> None:
        """Log a collaborator failure.

        Args:
            log: Operation logger.
            event: Event name, e.g. ``record_listing_failed``.
            error: The exception caught.
            level: Log method to use.
            include_message: False when the message may echo an input
                value; only the exception type is logged then.
            **context: Extra fields.
        """
        fields: dict[str, object] = {"error_type": type(error).__name__, **context}
        if include_message:
            fields["error"] = str(error)
        getattr(log, level)(event, **fields)
