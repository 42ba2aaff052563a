"""
Pydantic models for the configuration handed to each component.

Instances are built once per process by the loaders in settings.py and
passed explicitly to the components that need them.
"""
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field


class TokenGeneratorConfig(BaseModel):
    """Settings used by the firebase-token CLI."""
    model_config = ConfigDict(frozen=True)

    project_id: str
    api_key: str
    credentials_file: str


class FirebaseClientConfig(BaseModel):
    """Public (non-secret) parameters a browser needs to initialize Firebase."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    api_key: str = Field(alias="apiKey")
    auth_domain: str = Field(alias="authDomain")
    project_id: str = Field(alias="projectId")
    storage_bucket: str = Field(alias="storageBucket")
    messaging_sender_id: str = Field(alias="messagingSenderId")
    app_id: str = Field(alias="appId")

    def as_client_dict(self) -> Dict[str, str]:
        """The six camelCase keys the Firebase JS SDK expects, in SDK order."""
        return self.model_dump(by_alias=True)


class ServerConfig(BaseModel):
    """Settings used by the firebase-token-server process."""
    model_config = ConfigDict(frozen=True)

    host: str = "127.0.0.1"
    port: int = 3000
    firebase: FirebaseClientConfig
