"""
Configuration management.

Validates the environment against the settings manifest and builds the
config models each entry point passes to its components.
"""

from .exceptions import (
    ConfigException,
    MissingEnvironmentVariablesException,
    InvalidSettingException,
    CredentialsFileNotFoundException,
    CredentialsInitializationException,
)
from .models import TokenGeneratorConfig, FirebaseClientConfig, ServerConfig
from .settings import (
    ENTRY_POINT_TOKEN,
    ENTRY_POINT_SERVER,
    require_env,
    required_env_names,
    load_dotenv_file,
    load_token_config,
    load_server_config,
)

__all__ = [
    'ConfigException',
    'MissingEnvironmentVariablesException',
    'InvalidSettingException',
    'CredentialsFileNotFoundException',
    'CredentialsInitializationException',
    'TokenGeneratorConfig',
    'FirebaseClientConfig',
    'ServerConfig',
    'ENTRY_POINT_TOKEN',
    'ENTRY_POINT_SERVER',
    'require_env',
    'required_env_names',
    'load_dotenv_file',
    'load_token_config',
    'load_server_config',
]
