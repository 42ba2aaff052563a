"""
Remote HTTP API client using requests library.

Used by the ``invoke health`` task to check a running firebase-token-server.
"""
import requests

from .base_client import APITestClient
from .response import wrap_response


class RemoteAPITestClient(APITestClient):
    """Remote HTTP API client using requests library."""

    def __init__(self, base_url):
        """Initialize with base URL for remote API.

        Args:
            base_url: Base URL of the server (e.g., http://localhost:3000)
        """
        self.base_url = base_url.rstrip('/')

    def get(self, path, headers=None):
        response = requests.get(f"{self.base_url}{path}", headers=headers)
        return wrap_response(response)

    def post(self, path, json=None, headers=None):
        response = requests.post(f"{self.base_url}{path}", json=json, headers=headers)
        return wrap_response(response)
