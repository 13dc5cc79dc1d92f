"""Interface layer errors."""


class InterfaceError(Exception):
    """Base interface error."""

    pass


class RPCError(InterfaceError):
    """Error rendered verbatim into the RPC error envelope.

    Args:
        code: Machine-readable error code (e.g. ``"TIMEOUT"``)
        message: Human-readable message
        status: HTTP status of the response
        defined: Whether the procedure declares this error in its contract
    """

    def __init__(
        self, code: str, message: str, status: int = 500, defined: bool = False
    ):
        self.code = code
        self.message = message
        self.status = status
        self.defined = defined
        super().__init__(message)
