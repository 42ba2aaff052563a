"""
Web API for the interactive token generator page.
"""

from .app import TokenCreatorAPI, DEBUG_CONFIG_NOTE
from .templating import CONFIG_PLACEHOLDER, TemplateRenderError, render_firebase_config
