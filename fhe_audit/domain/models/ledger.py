"""Ledger value objects."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TransactionReceipt:
    """Receipt of a confirmed ledger transaction.

    Attributes:
        transaction_hash: Hash identifying the transaction.
        block_number: Block the transaction was included in, if reported.
        succeeded: Whether execution succeeded.
    """

    transaction_hash: str
    block_number: int | None = field(default=None)
    succeeded: bool = field(default=True)
