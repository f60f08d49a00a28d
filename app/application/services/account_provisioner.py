"""Account provisioning: identity account + profile document + role claim.

The three remote steps run strictly in order and are not atomic. If the
profile write or the claim update fails after the account was created, the
account is left in place (no compensating delete).
"""

from __future__ import annotations

import logging

from app.application.dtos.account import (
    CallerContext,
    CreateAccountCommand,
    ProfileData,
    ProvisionResult,
)
from app.application.interfaces import IIdentityProvider, IProfileStore
from app.core.constants import (
    MIN_PASSWORD_LENGTH,
    MSG_CREATE_USER_FAILED,
    MSG_EMAIL_ALREADY_REGISTERED,
    MSG_MISSING_FIELDS,
    MSG_PASSWORD_TOO_SHORT,
    MSG_PASSWORD_TOO_WEAK,
    MSG_UNAUTHENTICATED,
    MSG_USER_CREATED,
    REQUIRED_ACCOUNT_FIELDS,
    ROLE_CLAIM,
)
from app.domain.enums import IdentityErrorKind
from app.domain.exceptions import (
    IdentityProviderError,
    InternalException,
    InvalidArgumentException,
    ProvisioningException,
    UnauthenticatedException,
)
from app.shared.telemetry import add_span_attributes, traced

logger = logging.getLogger(__name__)


def _missing_fields(command: CreateAccountCommand) -> list[str]:
    """Return required fields that are None or empty, in reporting order."""
    return [name for name in REQUIRED_ACCOUNT_FIELDS if not getattr(command, name)]


def _translate_error(exc: Exception) -> ProvisioningException:
    """Map a collaborator failure onto the caller-facing taxonomy."""
    if isinstance(exc, IdentityProviderError):
        if exc.kind is IdentityErrorKind.EMAIL_ALREADY_EXISTS:
            return InvalidArgumentException(MSG_EMAIL_ALREADY_REGISTERED, field="email")
        if exc.kind is IdentityErrorKind.WEAK_PASSWORD:
            return InvalidArgumentException(MSG_PASSWORD_TOO_WEAK, field="password")
    message = getattr(exc, "message", None) or str(exc)
    return InternalException(message or MSG_CREATE_USER_FAILED)


class AccountProvisioner:
    """Create an identity account and its matching profile (createUserAndProfile)."""

    def __init__(
        self,
        identity: IIdentityProvider,
        profiles: IProfileStore,
    ) -> None:
        self._identity = identity
        self._profiles = profiles

    @staticmethod
    def validate(
        command: CreateAccountCommand, caller: CallerContext | None
    ) -> None:
        """Raise before any remote call when the caller or input is not acceptable.

        Raises:
            UnauthenticatedException: No caller context.
            InvalidArgumentException: A required field is missing, or the
                password is shorter than MIN_PASSWORD_LENGTH.
        """
        if caller is None:
            raise UnauthenticatedException(MSG_UNAUTHENTICATED)
        missing = _missing_fields(command)
        if missing:
            raise InvalidArgumentException(MSG_MISSING_FIELDS, missing=missing)
        if len(command.password) < MIN_PASSWORD_LENGTH:
            raise InvalidArgumentException(MSG_PASSWORD_TOO_SHORT, field="password")

    @traced("account_provisioner.provision")
    async def provision(
        self,
        command: CreateAccountCommand,
        caller: CallerContext | None,
    ) -> ProvisionResult:
        """Validate, create the account, write the profile, set the role claim.

        Returns:
            ProvisionResult with success=True.

        Raises:
            UnauthenticatedException, InvalidArgumentException: see validate().
            InvalidArgumentException: Email already registered or password
                rejected as weak by the identity provider.
            InternalException: Any other collaborator failure.
        """
        self.validate(command, caller)

        try:
            uid = await self._identity.create_account(
                email=command.email,
                password=command.password,
                display_name=command.name,
                phone_number=command.phone_number or None,
            )
            add_span_attributes(uid=uid)
            await self._profiles.save_profile(
                ProfileData(
                    uid=uid,
                    name=command.name,
                    email=command.email,
                    phone_number=command.phone_number or "",
                    department=command.department,
                    role=command.role,
                )
            )
            await self._identity.set_custom_claims(uid, {ROLE_CLAIM: command.role})
        except Exception as e:
            logger.exception("Error creating user %s", command.email)
            raise _translate_error(e) from e

        logger.info("User created: %s (%s)", uid, command.email)
        return ProvisionResult(success=True, message=MSG_USER_CREATED)
