"""Pydantic schema for the ping endpoint."""

from typing import Literal

from pydantic import BaseModel, ConfigDict


class PingResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    message: Literal["pong"]
