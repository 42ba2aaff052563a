"""
API Client package.

Provides consistent interface for in-memory tests and for checking a running server.
"""

from .base_client import APITestClient
from .in_memory_client import InMemoryAPITestClient
from .remote_client import RemoteAPITestClient
from .response import APIResponse

__all__ = [
    'APITestClient',
    'InMemoryAPITestClient',
    'RemoteAPITestClient',
    'APIResponse'
]
