"""
In-memory API client using FastAPI TestClient.

Used by the test suite for fast, isolated testing of the web API.
"""
from .base_client import APITestClient
from .response import wrap_response


class InMemoryAPITestClient(APITestClient):
    """In-memory API client using FastAPI TestClient."""

    def __init__(self, fastapi_client, default_headers=None):
        """Initialize with FastAPI TestClient instance.

        Args:
            fastapi_client: FastAPI TestClient instance
            default_headers: Optional default headers to include in all requests
        """
        self.client = fastapi_client
        self.default_headers = default_headers or {}

    def _headers(self, headers):
        merged_headers = {**self.default_headers}
        if headers:
            merged_headers.update(headers)
        return merged_headers

    def get(self, path, headers=None):
        response = self.client.get(path, headers=self._headers(headers))
        return wrap_response(response)

    def post(self, path, json=None, headers=None):
        response = self.client.post(path, json=json, headers=self._headers(headers))
        return wrap_response(response)
