"""Server settings."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_PORT = 8080


class ServerSettings(BaseModel):
    """Where the server listens and who may call it from a browser."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    host: str = Field("0.0.0.0", min_length=1)
    # 0 lets the OS pick a free port.
    port: int = Field(DEFAULT_PORT, ge=0, le=65535)
    cors_origins: List[str] = Field(
        default_factory=lambda: [
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ]
    )
    log_level: str = "INFO"
