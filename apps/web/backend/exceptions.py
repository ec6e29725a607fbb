"""Menu backend API exceptions."""


class APIError(Exception):
    """
    Normalized failure from the menu backend.

    ``status_code`` is the HTTP status for server-reported errors and None
    when no response was received.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: str | None = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.response_body = response_body
        super().__init__(message)


class APINetworkError(APIError):
    """The backend could not be reached."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class APIValidationError(APIError):
    """Request rejected locally before anything was sent."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
