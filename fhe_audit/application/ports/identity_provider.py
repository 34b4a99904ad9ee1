"""Identity provider port (wallet session)."""

from __future__ import annotations

from typing import Protocol


class IdentityProviderProtocol(Protocol):
    """Current wallet connection."""

    @property
    def address(self) -> str | None:
        """Connected address, or None."""
        ...

    @property
    def is_connected(self) -> bool:
        ...
