"""
Injection of the Firebase client config into the token generator page.

The template carries one named placeholder; it is replaced exactly once.
"""
import json
from pathlib import Path

from token_creator.run.config.models import FirebaseClientConfig

CONFIG_PLACEHOLDER = "__FIREBASE_CONFIG__"
CONFIG_INDENT = 12


class TemplateRenderError(Exception):
    """Raised when the template does not contain exactly one config placeholder."""
    pass


def load_template(path: Path) -> str:
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def render_firebase_config(template: str, config: FirebaseClientConfig) -> str:
    """
    Replace the config placeholder with the JSON-serialized client config.

    Raises:
        TemplateRenderError: If the placeholder is missing or appears more than once
    """
    occurrences = template.count(CONFIG_PLACEHOLDER)
    if occurrences != 1:
        raise TemplateRenderError(
            f"Expected exactly one {CONFIG_PLACEHOLDER} placeholder in template, found {occurrences}"
        )
    config_json = json.dumps(config.as_client_dict(), indent=CONFIG_INDENT)
    return template.replace(CONFIG_PLACEHOLDER, config_json, 1)
