"""Ledger write errors and wallet rejection detection."""

from __future__ import annotations

from fhe_audit.domain.exceptions import AuditClientError

# EIP-1193 provider error code for "user rejected the request"
USER_REJECTED_CODE = 4001
# ethers-style error code for the same condition
ACTION_REJECTED_CODE = "ACTION_REJECTED"
USER_REJECTED_MARKER = "user rejected"


class SubmissionError(AuditClientError):
    """Raised when a ledger transaction is rejected.

    Attributes:
        user_rejected: True when the user cancelled in the wallet rather
            than the ledger refusing the transaction.
        record_id: The record the transaction targeted, if known.
    """

    def __init__(
        self,
        message: str = "Transaction rejected by ledger",
        user_rejected: bool = False,
        record_id: str | None = None,
    ) -> None:
        super().__init__(message)
        self.user_rejected = user_rejected
        self.record_id = record_id


def is_user_rejection(error: BaseException) -> bool:
    """Check whether an exception means the user cancelled the request.

    Recognises an explicit ``user_rejected`` attribute, the EIP-1193 and
    ethers rejection codes, and finally a "user rejected" message. The
    cause chain is followed so wrapped wallet errors are still detected.

    Args:
        error: The exception raised by a wallet or ledger collaborator.

    Returns:
        True if the failure was a user cancellation.
    """
    seen: set[int] = set()
    current: BaseException | None = error
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        if getattr(current, "user_rejected", False) is True:
            return True
        code = getattr(current, "code", None)
        if code == USER_REJECTED_CODE or code == ACTION_REJECTED_CODE:
            return True
        if USER_REJECTED_MARKER in str(current).lower():
            return True
        current = current.__cause__ or current.__context__
    return False
