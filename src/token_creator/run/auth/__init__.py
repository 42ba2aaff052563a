"""
This module provides the token pipeline shared by:
- The firebase-token CLI (via cli.py)
- invoke tasks (via build/tasks/token.py)
"""

from .credentials import AdminContext, initialize_admin_context, resolve_credentials_path
from .exchanger import SIGN_IN_WITH_CUSTOM_TOKEN_URL, TokenExchanger
from .flows import ADMIN_USER_FLOW, REGULAR_USER_FLOW, IdTokenResult, TokenFlow, create_id_token
from .minter import TokenMinter
