"""
Tasks for running and checking the token generator web server locally.
"""

import os
import sys

import requests
from invoke import task

from token_creator.build.api_client import RemoteAPITestClient
from token_creator.run.api.server import main as server_main


@task(help={
    'port': 'Port to listen on (overrides PORT, default 3000)',
    'host': 'Interface to bind (overrides HOST, default 127.0.0.1)',
    'env_file': 'Path of the .env file to load (default: ./.env)'
})
def serve(ctx, port=None, host=None, env_file=None):
    """
    Start the token generator page.

    Examples:
        invoke serve
        invoke serve --port=8080
    """
    if port:
        os.environ['PORT'] = str(port)
    if host:
        os.environ['HOST'] = host

    argv = ['--env-file', env_file] if env_file else []
    exit_code = server_main(argv)
    if exit_code:
        sys.exit(exit_code)


@task(help={
    'url': 'Base URL of the running server (default: http://localhost:$PORT)'
})
def health(ctx, url=None):
    """Check that a running token generator server answers its health check."""
    if not url:
        url = f"http://localhost:{os.environ.get('PORT', '3000')}"

    client = RemoteAPITestClient(url)
    try:
        response = client.health()
    except requests.RequestException as e:
        print(f"❌ Server at {url} is not reachable: {e}", file=sys.stderr)
        sys.exit(1)

    if response.status_code != 200:
        print(f"❌ Health check failed with status {response.status_code}: {response.text}", file=sys.stderr)
        sys.exit(1)

    if not isinstance(response.data, dict):
        print(f"❌ Health check at {url} did not return JSON: {response.text[:200]}", file=sys.stderr)
        sys.exit(1)

    firebase = response.data.get('firebase', {})
    print(f"✅ Server at {url} is healthy")
    print(f"   Project: {firebase.get('projectId')}")
    print(f"   Auth Domain: {firebase.get('authDomain')}")
    print(f"   Timestamp: {response.data.get('timestamp')}")
    return True
