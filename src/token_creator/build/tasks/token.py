"""Token generation tasks.

Runs the same flow as the firebase-token console script from invoke.
"""

import sys
from invoke import task

from token_creator.run.auth.cli import main as token_cli_main


@task(help={
    'json': 'Print the results as JSON instead of the human readable report',
    'debug': 'Print the decoded payload of each ID token',
    'env_file': 'Path of the .env file to load (default: ./.env)'
})
def token(ctx, json=False, debug=False, env_file=None):
    """
    Generate ID tokens for the regular and the admin test user.

    Examples:
        invoke token                          # Human readable report
        invoke token --json                   # Machine readable output
        invoke token --env-file=staging.env   # Use another .env file
    """
    argv = []
    if json:
        argv.append('--json')
    if debug:
        argv.append('--debug')
    if env_file:
        argv.extend(['--env-file', env_file])

    exit_code = token_cli_main(argv)
    if exit_code:
        sys.exit(exit_code)
    return True
