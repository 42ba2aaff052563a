"""
Custom exceptions for the token pipeline.

These are operational errors: the minter and exchanger raise them internally
and turn them into a None result at their public boundary.
"""

class AuthError(Exception):
    """Base exception for all token generation errors."""
    pass

class TokenMintError(AuthError):
    """Raised when the admin SDK cannot produce a custom token."""
    pass

class TokenExchangeError(AuthError):
    """Raised when the identity endpoint does not return an ID token."""

    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.status_code = status_code
