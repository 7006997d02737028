"""Attach a credential to an existing user.

Credentials are provisioned outside the user API; until a user has one it is
hidden from listing and lookup.

Usage:
    python -m scripts.create_credential <user_id> <username> [password] [--admin]
If password is omitted, a random one is printed.
"""

import asyncio
import secrets
import sys
from pathlib import Path

from dotenv import load_dotenv

from user_service.domain.enums import RoleBasedAuthority
from user_service.infrastructure.persistence import database
from user_service.infrastructure.persistence.models import Credential
from user_service.infrastructure.persistence.repositories import (
    CredentialRepository,
    UserRepository,
)

_USAGE = "Usage: python -m scripts.create_credential <user_id> <username> [password] [--admin]"


async def main() -> None:
    """Create a credential linked to user_id."""
    load_dotenv(Path(__file__).resolve().parent.parent / ".env", override=True)
    args = [a for a in sys.argv[1:] if a != "--admin"]
    role = (
        RoleBasedAuthority.ROLE_ADMIN if "--admin" in sys.argv[1:] else RoleBasedAuthority.ROLE_USER
    )
    if len(args) < 2 or not args[0].isdigit():
        print(_USAGE, file=sys.stderr)
        sys.exit(1)
    user_id = int(args[0])
    username = args[1]
    password = args[2] if len(args) > 2 else secrets.token_urlsafe(12)

    database._ensure_engine()
    assert database.AsyncSessionLocal is not None
    try:
        async with database.AsyncSessionLocal() as session:
            async with session.begin():
                user = await UserRepository(session).get_by_id(user_id)
                if user is None:
                    print(f"User not found: {user_id}", file=sys.stderr)
                    sys.exit(1)
                if user.credential is not None:
                    print(
                        f"User {user_id} already has credential {user.credential.username}",
                        file=sys.stderr,
                    )
                    sys.exit(1)
                credential_repo = CredentialRepository(session)
                if await credential_repo.get_by_username(username) is not None:
                    print(f"Username already taken: {username}", file=sys.stderr)
                    sys.exit(1)
                credential = await credential_repo.save(
                    Credential(
                        username=username,
                        password=password,
                        role=role,
                        is_enabled=True,
                        is_account_non_expired=True,
                        is_account_non_locked=True,
                        is_credentials_non_expired=True,
                        user=user,
                    )
                )
                print(
                    f"Created credential {credential.credential_id} ({username}, {role.value}) for user {user_id}"
                )
                if len(args) <= 2:
                    print(f"Password: {password}")
    finally:
        await database.dispose_engine()


if __name__ == "__main__":
    asyncio.run(main())
