"""Errors raised while bringing the server up."""


class ListenBindFailure(Exception):
    """The listening socket could not be created, bound or put into listen mode.

    The underlying ``OSError`` is chained as ``__cause__``.
    """

    def __init__(self, host: str, port: int, reason: str):
        super().__init__(f"cannot listen on {host}:{port}: {reason}")
        self.host = host
        self.port = port
