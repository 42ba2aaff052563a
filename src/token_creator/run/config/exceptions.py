"""
Exception classes with built-in guidance for configuration loading.

Every exception here is a startup error: the entry point prints ``guidance``
to stderr and exits with status 1 before any credential or network work.
"""
from pathlib import Path
from typing import List


ENV_EXAMPLE_HINT = "💡 Please copy env.example to .env and fill in your Firebase configuration"


class ConfigException(Exception):
    """Base exception for all configuration errors."""

    def __init__(self, message: str, variable_name: str = None):
        super().__init__(message)
        self.variable_name = variable_name

    @property
    def guidance(self) -> str:
        """Human readable explanation of the error. Override in subclasses."""
        return f"""❌ Configuration error: {self}
💡 Check your configuration and try again"""


class MissingEnvironmentVariablesException(ConfigException):
    """Raised when one or more required environment variables are unset or empty."""

    def __init__(self, missing: List[str]):
        self.missing = list(missing)
        super().__init__(f"Missing required environment variables: {', '.join(self.missing)}")

    @property
    def guidance(self) -> str:
        lines = ["❌ Missing required environment variables:"]
        lines.extend(f"   - {name}" for name in self.missing)
        lines.append("")
        lines.append(ENV_EXAMPLE_HINT)
        return "\n".join(lines)


class InvalidSettingException(ConfigException):
    """Raised when an environment variable is present but its value is unusable."""

    def __init__(self, variable_name: str, value: str, reason: str):
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid value '{value}' for {variable_name}: {reason}", variable_name=variable_name)

    @property
    def guidance(self) -> str:
        return f"""❌ Invalid value for {self.variable_name}: '{self.value}'
💡 {self.reason}"""


class CredentialsFileNotFoundException(ConfigException):
    """Raised when the service-account credential file does not exist."""

    def __init__(self, path: Path):
        self.path = Path(path)
        super().__init__(f"Firebase credentials file not found: {self.path}", variable_name="FIREBASE_CREDENTIALS_FILE")

    @property
    def guidance(self) -> str:
        return f"""❌ Firebase credentials file not found: {self.path}
💡 Please ensure your firebase-credentials.json file is in the correct location"""


class CredentialsInitializationException(ConfigException):
    """Raised when the credential file cannot be parsed or the admin SDK rejects it."""

    def __init__(self, path: Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to initialize Firebase Admin SDK from {self.path}: {reason}",
                         variable_name="FIREBASE_CREDENTIALS_FILE")

    @property
    def guidance(self) -> str:
        return f"""❌ Failed to initialize Firebase Admin SDK: {self.reason}
💡 Download a fresh service-account key for your project and point FIREBASE_CREDENTIALS_FILE at it"""
