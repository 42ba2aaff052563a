"""
Runtime settings management.

Settings come from the process environment (optionally seeded from a .env
file). The packaged settings manifest enumerates every variable and which
entry point requires it, so each entry point validates against a fixed list
and reports every missing name at once.
"""
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence

import yaml
from dotenv import load_dotenv

from .exceptions import InvalidSettingException, MissingEnvironmentVariablesException
from .models import FirebaseClientConfig, ServerConfig, TokenGeneratorConfig

logger = logging.getLogger(__name__)

ENTRY_POINT_TOKEN = "token"
ENTRY_POINT_SERVER = "server"


@dataclass
class SettingDefinition:
    """Definition of an environment variable from the manifest."""
    name: str
    description: str
    required: bool = True
    default: Optional[str] = None
    entry_points: List[str] = field(default_factory=list)


# Global cache for the settings manifest
_settings_manifest: Optional[List[SettingDefinition]] = None


def _load_settings_manifest() -> List[SettingDefinition]:
    """Load and cache the settings manifest from YAML."""
    global _settings_manifest

    if _settings_manifest is not None:
        return _settings_manifest

    manifest_path = Path(__file__).parent / "settings_manifest.yaml"
    if not manifest_path.exists():
        raise FileNotFoundError(f"Settings manifest not found at {manifest_path}")

    with open(manifest_path, 'r', encoding='utf-8') as f:
        manifest_data = yaml.safe_load(f)

    if not isinstance(manifest_data, dict) or 'settings' not in manifest_data:
        raise ValueError(f"Invalid manifest format in {manifest_path}: missing 'settings' key")

    settings_list = []
    for setting_data in manifest_data['settings']:
        default = setting_data.get('default')
        settings_list.append(SettingDefinition(
            name=setting_data['name'],
            description=setting_data.get('description', ''),
            required=setting_data.get('required', True),
            default=str(default) if default is not None else None,
            entry_points=list(setting_data.get('entry-points', [])),
        ))

    _settings_manifest = settings_list
    logger.debug(f"Loaded {len(settings_list)} settings from manifest")
    return _settings_manifest


def get_setting_definition(name: str) -> SettingDefinition:
    """Look up a manifest entry by variable name."""
    for setting in _load_settings_manifest():
        if setting.name == name:
            return setting
    raise KeyError(f"Setting '{name}' is not defined in the settings manifest")


def required_env_names(entry_point: str) -> List[str]:
    """Names of the variables an entry point cannot start without, in manifest order."""
    return [
        setting.name
        for setting in _load_settings_manifest()
        if setting.required and entry_point in setting.entry_points
    ]


def load_dotenv_file(path: Optional[Path] = None) -> bool:
    """
    Seed the environment from a .env file.

    Values already exported in the process win over the file.

    Args:
        path: Explicit .env path, defaults to .env in the current working directory

    Returns:
        True if a file was found and loaded
    """
    dotenv_path = Path(path) if path is not None else Path.cwd() / ".env"
    if not dotenv_path.exists():
        logger.debug(f"No .env file at {dotenv_path}")
        return False
    logger.debug(f"Loading environment from {dotenv_path}")
    return load_dotenv(dotenv_path, override=False)


def require_env(names: Sequence[str], environ: Optional[Mapping[str, str]] = None) -> Mapping[str, str]:
    """
    Validate that every named variable is present and non-empty.

    Args:
        names: Variables to check, in reporting order
        environ: Mapping to read from, defaults to os.environ

    Returns:
        Read-only mapping of name to value, unmodified

    Raises:
        MissingEnvironmentVariablesException: listing every missing name
    """
    if environ is None:
        environ = os.environ

    values: Dict[str, str] = {}
    missing: List[str] = []
    for name in names:
        value = environ.get(name)
        if value is None or not value.strip():
            missing.append(name)
        else:
            values[name] = value

    if missing:
        raise MissingEnvironmentVariablesException(missing)

    return MappingProxyType(values)


def _optional_env(name: str, environ: Mapping[str, str]) -> str:
    value = environ.get(name)
    if value is None or not value.strip():
        return get_setting_definition(name).default
    return value


def _parse_port(value: str) -> int:
    try:
        port = int(value)
    except ValueError:
        raise InvalidSettingException("PORT", value, "PORT must be an integer, e.g. 3000")
    if not 0 < port < 65536:
        raise InvalidSettingException("PORT", value, "PORT must be between 1 and 65535")
    return port


def load_token_config(environ: Optional[Mapping[str, str]] = None) -> TokenGeneratorConfig:
    """Validate and load the settings of the firebase-token CLI."""
    values = require_env(required_env_names(ENTRY_POINT_TOKEN), environ)
    return TokenGeneratorConfig(
        project_id=values['FIREBASE_PROJECT_ID'],
        api_key=values['FIREBASE_API_KEY'],
        credentials_file=values['FIREBASE_CREDENTIALS_FILE'],
    )


def load_server_config(environ: Optional[Mapping[str, str]] = None) -> ServerConfig:
    """Validate and load the settings of the firebase-token-server process."""
    if environ is None:
        environ = os.environ

    values = require_env(required_env_names(ENTRY_POINT_SERVER), environ)
    firebase = FirebaseClientConfig(
        api_key=values['FIREBASE_API_KEY'],
        auth_domain=values['FIREBASE_AUTH_DOMAIN'],
        project_id=values['FIREBASE_PROJECT_ID'],
        storage_bucket=values['FIREBASE_STORAGE_BUCKET'],
        messaging_sender_id=values['FIREBASE_MESSAGING_SENDER_ID'],
        app_id=values['FIREBASE_APP_ID'],
    )
    return ServerConfig(
        host=_optional_env('HOST', environ).strip(),
        port=_parse_port(_optional_env('PORT', environ)),
        firebase=firebase,
    )
