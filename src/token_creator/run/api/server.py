#!/usr/bin/env python3
"""
Entry point of the token generator web server.

Usage: firebase-token-server [--env-file PATH]
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import uvicorn

from token_creator.run.config.exceptions import ConfigException
from token_creator.run.config.logging import bootstrap_logging
from token_creator.run.config.models import ServerConfig
from token_creator.run.config.settings import load_dotenv_file, load_server_config
from .app import TokenCreatorAPI

logger = logging.getLogger(__name__)

RULE = "═" * 51


def print_banner(config: ServerConfig):
    base_url = f"http://localhost:{config.port}"
    print("🔥 Firebase Token Creator Server")
    print(RULE)
    print(f"🌐 Server running at: {base_url}")
    print(f"📦 Firebase Project: {config.firebase.project_id}")
    print(f"🏠 Auth Domain: {config.firebase.auth_domain}")
    print(RULE)
    print("\n📚 Available endpoints:")
    print(f"   • {base_url}/          - Token generator UI")
    print(f"   • {base_url}/health    - Health check")
    print(f"   • {base_url}/api/config - Firebase config (debug)")
    print("\n💡 Open the first URL in your browser to generate tokens")


def create_app(config: ServerConfig):
    return TokenCreatorAPI(config).app


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog='firebase-token-server',
        description='Serve the interactive Firebase token generator page.'
    )
    parser.add_argument('--env-file', type=Path, default=None,
                        help='Path of the .env file to load (default: ./.env)')
    args = parser.parse_args(argv)

    load_dotenv_file(args.env_file)
    bootstrap_logging(__name__)

    try:
        config = load_server_config()
    except ConfigException as e:
        print(e.guidance, file=sys.stderr)
        return 1

    app = create_app(config)
    print_banner(config)
    uvicorn.run(app, host=config.host, port=config.port, log_config=None)
    return 0


if __name__ == '__main__':
    sys.exit(main())
