"""Service interfaces (ports) for the application layer.

Protocols define contracts for external collaborators (DIP).
"""

from __future__ import annotations

from typing import Any, Protocol


class IIdentityProvider(Protocol):
    """Protocol for the managed identity provider (accounts and custom claims).

    Implementations raise IdentityProviderError with a classified kind on
    provider failures.
    """

    async def create_account(
        self,
        email: str,
        password: str,
        display_name: str,
        phone_number: str | None = None,
    ) -> str:
        """Create an account and return its provider-assigned uid."""

    async def set_custom_claims(self, uid: str, claims: dict[str, Any]) -> None:
        """Replace the account's custom claims."""

    async def delete_account(self, uid: str) -> None:
        """Delete the account with the given uid."""
