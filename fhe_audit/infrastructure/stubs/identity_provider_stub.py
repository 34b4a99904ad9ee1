"""Identity provider stub: a wallet session that tests can connect and drop."""

from __future__ import annotations

from fhe_audit.infrastructure.stubs.ledger_stub import DEFAULT_SIGNER_ADDRESS


class IdentityProviderStub:
    """Stub implementation of IdentityProviderProtocol."""

    def __init__(self, address: str | None = DEFAULT_SIGNER_ADDRESS) -> None:
        self._address = address

    @property
    def address(self) -> str | None:
        return self._address

    @property
    def is_connected(self) -> bool:
        return self._address is not None

    def connect(self, address: str = DEFAULT_SIGNER_ADDRESS) -> None:
        self._address = address

    def disconnect(self) -> None:
        self._address = None
