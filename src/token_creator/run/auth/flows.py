"""
The two fixed token flows (regular user, admin user) and their results.

A flow mints a custom token for a freshly named user and exchanges it for an
ID token. Nothing produced here is cached or reused across runs.
"""
import hashlib
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

import jwt

from .exchanger import TokenExchanger
from .minter import TokenMinter

logger = logging.getLogger(__name__)


def current_millis() -> int:
    """Milliseconds since the epoch."""
    return int(time.time() * 1000)


@dataclass(frozen=True)
class CustomTokenRequest:
    user_id: str
    claims: Dict[str, Any]


@dataclass(frozen=True)
class IdTokenResult:
    """An ID token together with the identity it was minted for."""
    id_token: str
    user_id: str
    claims: Dict[str, Any] = field(default_factory=dict)

    @property
    def token_hash(self) -> str:
        """Short fingerprint for telling tokens apart in logs."""
        return hashlib.sha256(self.id_token.encode()).hexdigest()[:16]

    def decoded_claims(self) -> Dict[str, Any]:
        """Payload of the ID token, decoded WITHOUT signature verification."""
        return jwt.decode(self.id_token, options={"verify_signature": False})

    def to_dict(self) -> Dict[str, Any]:
        return {
            "user_id": self.user_id,
            "claims": dict(self.claims),
            "hash": self.token_hash,
            "token": self.id_token,
        }


@dataclass(frozen=True)
class TokenFlow:
    """A fixed user shape to mint tokens for."""
    key: str
    title: str
    icon: str
    uid_prefix: str
    claims: Dict[str, Any]

    def build_request(self, now_ms: int) -> CustomTokenRequest:
        return CustomTokenRequest(user_id=f"{self.uid_prefix}{now_ms}", claims=dict(self.claims))


REGULAR_USER_FLOW = TokenFlow(
    key="regular",
    title="ID Token Generated",
    icon="🔑",
    uid_prefix="test-user-",
    claims={
        "admin": False,
        "email": "test@example.com",
        "name": "Test User",
    },
)

ADMIN_USER_FLOW = TokenFlow(
    key="admin",
    title="Admin ID Token Generated",
    icon="👑",
    uid_prefix="admin-user-",
    claims={
        "admin": True,
        "email": "admin@example.com",
        "name": "Admin User",
    },
)


def create_id_token(flow: TokenFlow,
                    minter: TokenMinter,
                    exchanger: TokenExchanger,
                    clock: Callable[[], int] = current_millis) -> Optional[IdTokenResult]:
    """
    Mint a custom token for the flow's user and exchange it for an ID token.

    Returns:
        IdTokenResult, or None if either step failed (already logged)
    """
    request = flow.build_request(clock())
    logger.debug(f"Minting custom token for {request.user_id}")

    custom_token = minter.mint(request.user_id, request.claims)
    if custom_token is None:
        return None

    id_token = exchanger.exchange(custom_token)
    if id_token is None:
        return None

    return IdTokenResult(id_token=id_token, user_id=request.user_id, claims=request.claims)
