"""Record store service.

Loads the full audit record set from the ledger. Every load is a full
refresh; nothing is patched incrementally. A record that cannot be
fetched or decoded is logged and left out so one bad record never
hides the rest.
"""

from __future__ import annotations

from pydantic import ValidationError

from fhe_audit.application.dtos.ledger_record import LedgerRecordFields
from fhe_audit.application.ports.ledger_reader import LedgerReaderProtocol
from fhe_audit.application.services.base import LoggingMixin
from fhe_audit.domain.errors.audit import ReadError
from fhe_audit.domain.models.audit_record import AuditRecord


class RecordStoreService(LoggingMixin):
    """Holds the record set last read from the ledger.

    Attributes:
        _reader: Ledger read port.
        _records: Records from the most recent successful load.
    """

    def __init__(self, reader: LedgerReaderProtocol) -> None:
        """Initialize the record store.

        Args:
            reader: Ledger read port.
        """
        self._reader = reader
        self._records: tuple[AuditRecord, ...] = ()
        self._init_logger(component="records")

    @property
    def records(self) -> tuple[AuditRecord, ...]:
        """Records from the most recent successful load."""
        return self._records

    async def load_all(self) -> tuple[AuditRecord, ...]:
        """Re-read every record from the ledger.

        Returns:
            The decoded records in ledger order.

        Raises:
            ReadError: If the record id listing cannot be fetched.
        """
        log = self._log_operation("load_all")

        try:
            record_ids = await self._reader.get_all_record_ids()
        except Exception as e:
            self._log_failure(log, "record_listing_failed", e, level="error")
            raise ReadError("Could not list audit records") from e

        records: list[AuditRecord] = []
        for record_id in record_ids:
            try:
                records.append(await self.load_record(record_id))
            except ReadError as e:
                log.warning(
                    "record_skipped",
                    record_id=record_id,
                    error=str(e.__cause__ or e),
                )

        self._records = tuple(records)
        log.info(
            "records_loaded",
            record_count=len(records),
            skipped_count=len(record_ids) - len(records),
        )
        return self._records

    async def load_record(self, record_id: str) -> AuditRecord:
        """Fetch and decode a single record straight from the ledger.

        Args:
            record_id: The record to read.

        Returns:
            The freshly decoded record.

        Raises:
            ReadError: If the record cannot be fetched or decoded.
        """
        try:
            fields = await self._reader.get_record(record_id)
        except Exception as e:
            raise ReadError("Could not fetch audit record", record_id=record_id) from e

        try:
            return LedgerRecordFields.model_validate(dict(fields)).to_record(record_id)
        except (ValidationError, ValueError, TypeError) as e:
            raise ReadError("Could not decode audit record", record_id=record_id) from e
