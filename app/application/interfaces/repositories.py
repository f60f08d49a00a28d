"""Repository interfaces (ports) for the application layer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.application.dtos.account import ProfileData


class IProfileStore(Protocol):
    """Protocol for profile persistence (users/{uid} documents)."""

    async def save_profile(self, profile: ProfileData) -> None:
        """Create or overwrite the profile document keyed by profile.uid.

        The creation timestamp is assigned by the store, not the client clock.
        """
