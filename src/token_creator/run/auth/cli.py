#!/usr/bin/env python3
"""
Command line Firebase ID token generator.

Mints a custom token for a regular test user and for an admin test user,
exchanges each for an ID token and prints a report. The regular flow always
runs first; a failure in one flow does not stop the other.

Usage: firebase-token [--json] [--debug] [--env-file PATH]
"""

import argparse
import json
import logging
import os
import signal
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional

import jwt

from token_creator.run.config.exceptions import ConfigException
from token_creator.run.config.logging import bootstrap_logging
from token_creator.run.config.models import TokenGeneratorConfig
from token_creator.run.config.settings import load_dotenv_file, load_token_config
from .credentials import initialize_admin_context
from .exchanger import TokenExchanger
from .flows import (
    ADMIN_USER_FLOW,
    REGULAR_USER_FLOW,
    IdTokenResult,
    TokenFlow,
    create_id_token,
    current_millis,
)
from .minter import TokenMinter

logger = logging.getLogger(__name__)

RULE = "═" * 62
CURL_RULE = "─" * 80
TOKEN_PREVIEW_LENGTH = 50

# Fixed order: regular before admin
FLOWS: List[TokenFlow] = [REGULAR_USER_FLOW, ADMIN_USER_FLOW]
FLOW_STEPS = {
    REGULAR_USER_FLOW.key: "1️⃣  Creating regular user ID token...",
    ADMIN_USER_FLOW.key: "2️⃣  Creating admin user ID token...",
}


def _handle_interrupt(signum, frame):
    print("\n👋 Shutting down gracefully...")
    sys.exit(0)


def install_interrupt_handler():
    """Exit with status 0 on Ctrl+C without waiting for in-flight requests."""
    return signal.signal(signal.SIGINT, _handle_interrupt)


def _debug_enabled() -> bool:
    return os.getenv('DEBUG_TOKEN_GENERATION', 'false').lower() == 'true'


def print_header(config: TokenGeneratorConfig):
    print("🔥 Firebase ID Token Generator")
    print(RULE)
    print(f"📦 Project ID: {config.project_id}")
    print(f"🔑 Credentials: {config.credentials_file}")
    print(RULE)


def print_result(flow: TokenFlow, result: Optional[IdTokenResult], debug: bool = False):
    if result is None:
        print(f"❌ Failed to create {flow.key} user ID token")
        return

    print(f"\n{flow.icon} {flow.title}:")
    print(result.id_token)
    print(f"\n📝 User ID: {result.user_id}")
    print(f"📋 Claims: {json.dumps(result.claims, indent=2)}")

    if debug:
        print("🔍 TOKEN DEBUG INFO:")
        print(f"   Hash: {result.token_hash}")
        print(f"   Token Length: {len(result.id_token)}")
        try:
            payload = result.decoded_claims()
            print("   Decoded payload (signature NOT verified):")
            for key, value in payload.items():
                print(f"     {key}: {value}")
        except jwt.PyJWTError as e:
            print(f"   Could not decode token: {e}")


def print_footer(regular: Optional[IdTokenResult]):
    print("\n✨ ID token generation completed!")
    print("\n📚 Next steps:")
    print("   1. Use the ID tokens above to test your authentication endpoints")
    print('   2. Run "firebase-token-server" to start the HTML token generator')

    if regular is not None:
        print("\n🔧 Example usage with curl:")
        print(CURL_RULE)
        print('curl -X GET "http://your-api-endpoint" \\')
        print(f'  -H "Authorization: Bearer {regular.id_token[:TOKEN_PREVIEW_LENGTH]}..."')
        print(CURL_RULE)


def run_flows(minter: TokenMinter,
              exchanger: TokenExchanger,
              report: bool = True,
              debug: bool = False,
              clock: Callable[[], int] = current_millis) -> Dict[str, Optional[IdTokenResult]]:
    """
    Run every flow in order, one after the other.

    Args:
        minter: Custom token minter
        exchanger: Custom token to ID token exchanger
        report: Print the human readable progress for each flow
        debug: Also print the decoded payload of each ID token
        clock: Source of the epoch milliseconds used in user ids

    Returns:
        Mapping of flow key to its result (None for a failed flow)
    """
    results: Dict[str, Optional[IdTokenResult]] = {}
    for flow in FLOWS:
        if report:
            print(f"\n{FLOW_STEPS[flow.key]}")
        result = create_id_token(flow, minter, exchanger, clock=clock)
        results[flow.key] = result
        if report:
            print_result(flow, result, debug=debug)
    return results


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='firebase-token',
        description='Generate Firebase ID tokens for a regular and an admin test user.'
    )
    parser.add_argument('--json', action='store_true', dest='as_json',
                        help='Print the results as JSON instead of the report')
    parser.add_argument('--debug', action='store_true',
                        help='Print the decoded payload of each ID token (same as DEBUG_TOKEN_GENERATION=true)')
    parser.add_argument('--env-file', type=Path, default=None,
                        help='Path of the .env file to load (default: ./.env)')
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point.

    Returns:
        Process exit status: 0 on completion, 1 on configuration errors
    """
    args = _parse_args(argv)
    load_dotenv_file(args.env_file)
    bootstrap_logging(__name__)
    install_interrupt_handler()

    try:
        config = load_token_config()
        context = initialize_admin_context(config)
    except ConfigException as e:
        print(e.guidance, file=sys.stderr)
        return 1

    minter = TokenMinter(context)
    exchanger = TokenExchanger(config.api_key)

    if args.as_json:
        results = run_flows(minter, exchanger, report=False)
        output = {key: (result.to_dict() if result else None) for key, result in results.items()}
        print(json.dumps(output, indent=2))
        return 0

    print_header(config)
    results = run_flows(minter, exchanger, debug=args.debug or _debug_enabled())
    print_footer(results.get(REGULAR_USER_FLOW.key))
    return 0


if __name__ == '__main__':
    sys.exit(main())
