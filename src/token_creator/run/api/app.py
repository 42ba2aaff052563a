"""
Web API for the interactive token generator page.

Serves the page with the Firebase client config injected, a health check,
a debug dump of the client config, and the page's static assets.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict

from fastapi import FastAPI
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles

from token_creator.run.config.models import ServerConfig
from .templating import TemplateRenderError, load_template, render_firebase_config

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"
TEMPLATE_NAME = "test-auth.html"
DEBUG_CONFIG_NOTE = "This endpoint is for debugging. Remove in production."


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    print("\n👋 Shutting down server...")


def utc_timestamp() -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a Z suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class TokenCreatorAPI:
    """FastAPI application bound to one immutable server configuration."""

    def __init__(self, config: ServerConfig, template_path: Path = None, static_dir: Path = None):
        self.config = config
        self.static_dir = Path(static_dir) if static_dir is not None else STATIC_DIR
        self.template_path = Path(template_path) if template_path is not None else self.static_dir / TEMPLATE_NAME
        self.app = FastAPI(
            title="Firebase Token Creator",
            description="Generate Firebase ID tokens from the browser",
            version="1.0.0",
            lifespan=lifespan
        )
        self._setup_routes()

    def _setup_routes(self):
        """Set up page, health and debug routes, then static files for everything else."""

        @self.app.get('/', response_class=HTMLResponse)
        async def token_generator_page():
            """Token generator UI with the live Firebase config injected."""
            try:
                return HTMLResponse(self.render_page())
            except (OSError, TemplateRenderError) as e:
                logger.error(f"❌ Error serving HTML file: {e}")
                return PlainTextResponse("Internal Server Error", status_code=500)

        @self.app.get('/health')
        async def health_check():
            return self._health()

        @self.app.get('/api/config')
        async def get_config():
            """Full client config. Debug only, unauthenticated."""
            return {
                "firebase": self.config.firebase.as_client_dict(),
                "note": DEBUG_CONFIG_NOTE,
            }

        # The raw template holds the unrendered placeholder
        @self.app.get(f"/{self.template_path.name}", include_in_schema=False)
        async def raw_template():
            return RedirectResponse("/")

        # Registered last so the routes above take precedence
        if self.static_dir.is_dir():
            self.app.mount('/', StaticFiles(directory=str(self.static_dir)), name='static')
        else:
            logger.warning(f"Static directory {self.static_dir} not found, static files disabled")

    def render_page(self) -> str:
        """Read the template from disk and inject the client config."""
        template = load_template(self.template_path)
        return render_firebase_config(template, self.config.firebase)

    def _health(self) -> Dict[str, Any]:
        return {
            "status": "OK",
            "timestamp": utc_timestamp(),
            "firebase": {
                "projectId": self.config.firebase.project_id,
                "authDomain": self.config.firebase.auth_domain,
            },
        }
