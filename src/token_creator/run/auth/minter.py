"""
Custom token minting through the Firebase Admin SDK.
"""
import logging
from typing import Any, Dict, Optional

from firebase_admin import auth
from firebase_admin.exceptions import FirebaseError

from .credentials import AdminContext
from .exceptions import TokenMintError

logger = logging.getLogger(__name__)


class TokenMinter:
    """Creates signed custom tokens with the admin credential of one project."""

    def __init__(self, context: AdminContext):
        self.context = context

    def create_custom_token(self, user_id: str, claims: Dict[str, Any]) -> str:
        """
        Ask the admin SDK for a custom token.

        Raises:
            TokenMintError: If the SDK rejects the claims or cannot sign
        """
        try:
            token = auth.create_custom_token(user_id, claims, app=self.context.app)
        except (ValueError, FirebaseError) as e:
            raise TokenMintError(f"Could not create custom token for {user_id}: {e}") from e
        if isinstance(token, bytes):
            token = token.decode('utf-8')
        return token

    def mint(self, user_id: str, claims: Dict[str, Any]) -> Optional[str]:
        """Create a custom token, or None if minting failed (the error is logged)."""
        try:
            return self.create_custom_token(user_id, claims)
        except TokenMintError as e:
            logger.error(f"❌ Error creating custom token: {e}")
            return None
