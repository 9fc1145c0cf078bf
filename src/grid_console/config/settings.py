"""
Console configuration for the data grid REST access layer.

Settings are read from the environment (prefix ``GRID_CONSOLE_``) or a ``.env``
file and cover the server location, the security mode and the Keycloak realm.
"""
from functools import lru_cache
from typing import Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConsoleSettings(BaseSettings):
    """Settings for a console session against one data grid server."""

    model_config = SettingsConfigDict(
        env_prefix="GRID_CONSOLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Server
    server_url: str = Field(default="http://localhost:11222")
    rest_path: str = Field(default="/rest/v2")
    request_timeout: float = Field(default=30.0, gt=0)
    verify_ssl: bool = Field(default=True)

    # Security
    security_enabled: bool = Field(default=True)
    digest_username: Optional[str] = Field(default=None)
    digest_password: Optional[SecretStr] = Field(default=None)

    # Keycloak
    keycloak_server_url: Optional[str] = Field(default=None)
    keycloak_realm: str = Field(default="infinispan")
    keycloak_client_id: str = Field(default="infinispan-console")
    keycloak_client_secret: Optional[SecretStr] = Field(default=None)

    @property
    def rest_endpoint(self) -> str:
        """Base URL of the REST API."""
        return self.server_url.rstrip("/") + "/" + self.rest_path.strip("/")

    @property
    def keycloak_enabled(self) -> bool:
        """Whether a Keycloak server is configured."""
        return bool(self.keycloak_server_url)


@lru_cache()
def get_settings() -> ConsoleSettings:
    """Get cached console settings."""
    return ConsoleSettings()
