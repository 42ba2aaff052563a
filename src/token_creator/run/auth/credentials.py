"""
Firebase Admin SDK initialization from a service-account file.
"""
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Union

import firebase_admin
from firebase_admin import credentials

from token_creator.run.config.exceptions import (
    CredentialsFileNotFoundException,
    CredentialsInitializationException,
)
from token_creator.run.config.models import TokenGeneratorConfig

logger = logging.getLogger(__name__)

ADMIN_APP_NAME = "token-creator"


@dataclass(frozen=True)
class AdminContext:
    """An authenticated firebase-admin app bound to one project."""
    app: firebase_admin.App
    project_id: str
    credentials_path: Path


def resolve_credentials_path(credentials_file: Union[str, Path], base_dir: Path = None) -> Path:
    """
    Resolve the configured credential path to an absolute path.

    Relative paths are taken relative to base_dir, which defaults to the
    current working directory (the project root the tool is run from), not
    the directory the package is installed in.
    """
    if base_dir is None:
        base_dir = Path.cwd()
    path = Path(credentials_file).expanduser()
    if not path.is_absolute():
        path = Path(base_dir) / path
    return path.resolve()


def _load_service_account(path: Path) -> dict:
    try:
        with open(path, 'r', encoding='utf-8') as f:
            info = json.load(f)
    except json.JSONDecodeError as e:
        raise CredentialsInitializationException(path, f"not valid JSON ({e})")
    except OSError as e:
        raise CredentialsInitializationException(path, f"cannot read file ({e})")
    if not isinstance(info, dict):
        raise CredentialsInitializationException(path, "expected a service-account JSON object")
    return info


def initialize_admin_context(config: TokenGeneratorConfig, base_dir: Path = None) -> AdminContext:
    """
    Load the service-account credential and initialize the admin SDK.

    Credential problems are configuration errors; nothing here is retried.

    Args:
        config: Token generator settings
        base_dir: Directory relative credential paths are resolved against

    Returns:
        AdminContext for the configured project

    Raises:
        CredentialsFileNotFoundException: If the file does not exist
        CredentialsInitializationException: If the file cannot be parsed or is rejected
    """
    credentials_path = resolve_credentials_path(config.credentials_file, base_dir)
    if not credentials_path.is_file():
        raise CredentialsFileNotFoundException(credentials_path)

    service_account_info = _load_service_account(credentials_path)

    try:
        cred = credentials.Certificate(service_account_info)
    except ValueError as e:
        raise CredentialsInitializationException(credentials_path, str(e))

    try:
        app = firebase_admin.get_app(ADMIN_APP_NAME)
        logger.debug(f"Reusing Firebase app '{ADMIN_APP_NAME}'")
    except ValueError:
        try:
            app = firebase_admin.initialize_app(cred, {'projectId': config.project_id}, name=ADMIN_APP_NAME)
        except ValueError as e:
            raise CredentialsInitializationException(credentials_path, str(e))

    logger.info(f"Firebase Admin SDK initialized for project {config.project_id}")
    return AdminContext(app=app, project_id=config.project_id, credentials_path=credentials_path)
