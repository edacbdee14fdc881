"""Ping utility used by the API health-check."""

PING_MESSAGE = "pong"


def get_ping_message() -> str:
    """Return a static ping message."""
    return PING_MESSAGE
