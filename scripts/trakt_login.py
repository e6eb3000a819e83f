#!/usr/bin/env python3
"""Log in to Trakt from a terminal using the device code flow.

Prints the activation URL and code, waits for approval, then prints the
exported session as JSON (or writes it to --output):
    python scripts/trakt_login.py --client-id ID --client-secret SECRET

Credentials default to TRAKT_CLIENT_ID / TRAKT_CLIENT_SECRET from the
environment or .env file.
"""

import argparse
import asyncio
import sys
from pathlib import Path

from traktkit import Trakt, TraktError
from traktkit.logger import configure_logging, get_logger

logger = get_logger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Authorize a Trakt application via device code")
    parser.add_argument("--client-id", help="Trakt application client id")
    parser.add_argument("--client-secret", help="Trakt application client secret")
    parser.add_argument("--output", type=Path, help="Write the token JSON to this file")
    parser.add_argument("--log-level", help="Log level (default: from settings)")
    return parser.parse_args(argv)


async def login(client_id: str | None, client_secret: str | None) -> str:
    """Run the device flow and return the exported session as JSON."""
    async with Trakt(client_id=client_id, client_secret=client_secret) as trakt:
        codes = await trakt.auth.get_codes()
        print(f"Open {codes.verification_url} and enter code: {codes.user_code}")
        print(f"Or visit {codes.activation_url}")
        print(f"Waiting for approval (expires in {codes.expires_in // 60} minutes)...")

        await trakt.auth.poll_device_token(codes)
        return trakt.auth.export_token().model_dump_json(exclude={"state"}, indent=2)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)

    try:
        token_json = asyncio.run(login(args.client_id, args.client_secret))
    except TraktError as e:
        logger.error("trakt_login_failed", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.output:
        args.output.write_text(token_json + "\n")
        print(f"Token written to {args.output}")
    else:
        print(token_json)
    return 0


if __name__ == "__main__":
    sys.exit(main())
