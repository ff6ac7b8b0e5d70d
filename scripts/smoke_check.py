#!/usr/bin/env python3
"""Manual smoke check against the live Identity Toolkit API.

Signs up a throwaway account and then verifies its password, using the
FIREBASE_WEB_API_KEY from the environment or .env.

Usage:
    python scripts/smoke_check.py [--password PASSWORD]
"""

import argparse
import asyncio
import sys
import time

from fbauth import (
    FirebaseAuthException,
    FirebaseAuthService,
    FirebaseError,
    SignUpNewUserRequest,
    VerifyPasswordRequest,
    get_settings,
)
from fbauth.utils.logging import configure_logging


async def run(password: str) -> int:
    """Sign up a fresh account and verify it. Returns a process exit code."""
    if not get_settings().firebase_web_api_key:
        print("❌ FIREBASE_WEB_API_KEY is not set")
        return 2

    email = f"{time.time_ns()}@validdomain.com"

    async with FirebaseAuthService() as service:
        print("\n" + "=" * 50)
        print(f"📝 signUp: {email}")
        print("=" * 50)
        try:
            signed_up = await service.sign_up_new_user(
                SignUpNewUserRequest(email=email, password=password)
            )
        except FirebaseAuthException as e:
            print(f"❌ Rejected: {e.message_type.name} ({e.error.message})")
            return 1
        except FirebaseError as e:
            print(f"❌ Failed: {e}")
            return 1
        print(f"✅ localId: {signed_up.localId}")
        print(f"   expiresIn: {signed_up.expiresIn}s")

        print("\n" + "=" * 50)
        print("🔑 signInWithPassword")
        print("=" * 50)
        try:
            verified = await service.verify_password(
                VerifyPasswordRequest(email=email, password=password)
            )
        except FirebaseAuthException as e:
            print(f"❌ Rejected: {e.message_type.name} ({e.error.message})")
            return 1
        except FirebaseError as e:
            print(f"❌ Failed: {e}")
            return 1
        print(f"✅ registered: {verified.registered}")
        print(f"   same account: {verified.localId == signed_up.localId}")

    return 0


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--password", default="testasdf32t23t23t1234")
    args = parser.parse_args()

    configure_logging()
    sys.exit(asyncio.run(run(args.password)))


if __name__ == "__main__":
    main()
