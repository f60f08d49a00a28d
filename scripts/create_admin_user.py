"""Create the first admin account + profile without going through the callable.

The callable endpoint requires an authenticated caller, so the very first
account has to be provisioned with the service account directly. Runs the
same AccountProvisioner as the endpoint (validation, profile, role claim).

Usage:
    python -m scripts.create_admin_user <email> <name> <department> [password] [role]
If password is omitted, a random one is printed. Role defaults to "admin".
"""

import asyncio
import secrets
import sys

from app.application.dtos.account import CallerContext, CreateAccountCommand
from app.application.services import AccountProvisioner
from app.core.config import get_settings
from app.domain.exceptions import ProvisioningException
from app.infrastructure.firebase import init_firebase_platform
from app.infrastructure.firebase.repositories import FirestoreProfileRepository
from app.shared.telemetry import setup_logging

BOOTSTRAP_CALLER = CallerContext(uid="system:create_admin_user")


async def main() -> int:
    """Provision one account; return a process exit code."""
    if len(sys.argv) < 4:
        print(
            "Usage: python -m scripts.create_admin_user <email> <name> <department> "
            "[password] [role]",
            file=sys.stderr,
        )
        return 1
    email, name, department = sys.argv[1:4]
    password = sys.argv[4] if len(sys.argv) > 4 else secrets.token_urlsafe(12)
    role = sys.argv[5] if len(sys.argv) > 5 else "admin"

    setup_logging()
    platform = init_firebase_platform(get_settings())
    if platform is None:
        print(
            "Firebase not configured: set FIREBASE_SERVICE_ACCOUNT_KEY or "
            "FIREBASE_SERVICE_ACCOUNT_PATH",
            file=sys.stderr,
        )
        return 1

    provisioner = AccountProvisioner(
        platform.identity, FirestoreProfileRepository(platform.firestore)
    )
    try:
        result = await provisioner.provision(
            CreateAccountCommand(
                name=name,
                email=email,
                password=password,
                department=department,
                role=role,
            ),
            BOOTSTRAP_CALLER,
        )
    except ProvisioningException as e:
        print(f"{e.error_code}: {e.message}", file=sys.stderr)
        return 1
    finally:
        await platform.aclose()

    print(f"{result.message} {email} (role={role})")
    if len(sys.argv) <= 4:
        print(f"Password: {password}")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
