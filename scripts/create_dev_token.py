#!/usr/bin/env python3
"""
Development Token Utility

Mints HS256 bearer tokens accepted when AUTH_PROVIDER=jwt, so the API can
be exercised locally without a Firebase project.
"""

import argparse
import sys
from datetime import timedelta

from recruit_crm.auth.utils import create_access_token
from recruit_crm.core.config import settings


def main():
    """Main CLI interface."""
    parser = argparse.ArgumentParser(
        description="Create a development bearer token",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python create_dev_token.py u1
  python create_dev_token.py u1 --email recruiter@example.com --minutes 480
        """
    )
    parser.add_argument("tenant_id", help="Tenant (user) id to put in the token subject")
    parser.add_argument("--email", help="Email claim (optional)")
    parser.add_argument(
        "--minutes",
        type=int,
        default=settings.access_token_expire_minutes,
        help="Token lifetime in minutes"
    )

    args = parser.parse_args()

    if settings.auth_provider != "jwt":
        print(f"⚠️  AUTH_PROVIDER is '{settings.auth_provider}'; the API will reject this token", file=sys.stderr)

    claims = {"sub": args.tenant_id}
    if args.email:
        claims["email"] = args.email

    print(create_access_token(claims, expires_delta=timedelta(minutes=args.minutes)))


if __name__ == "__main__":
    main()
