"""Client configuration passed explicitly into the request executor."""

import os

from pydantic import BaseModel


class ClientConfig(BaseModel):
    """Base URL, API version and bearer token used by generated clients."""

    base: str = ""
    version: str = "1.0"
    token: str = ""

    @classmethod
    def from_env(cls) -> "ClientConfig":
        return cls(
            base=os.getenv("API_BASE_URL", ""),
            version=os.getenv("API_VERSION", "1.0"),
            token=os.getenv("API_TOKEN", ""),
        )
