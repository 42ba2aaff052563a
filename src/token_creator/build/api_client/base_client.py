"""
Base API client abstract class.

Provides consistent interface regardless of whether requests run in-memory
(tests) or over HTTP (a running firebase-token-server).
"""
from abc import ABC, abstractmethod


class APITestClient(ABC):
    """Abstract base class for token creator API clients."""

    @abstractmethod
    def get(self, path, headers=None):
        """Make GET request to API endpoint."""
        pass

    @abstractmethod
    def post(self, path, json=None, headers=None):
        """Make POST request to API endpoint."""
        pass

    def health(self):
        """Shortcut for the health check endpoint."""
        return self.get('/health')

    def firebase_config(self):
        """Shortcut for the debug config endpoint."""
        return self.get('/api/config')
