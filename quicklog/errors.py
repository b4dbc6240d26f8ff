# ---------------------------------
# TYPED EXCEPTIONS
# ---------------------------------


class QuicklogError(Exception):
    """Base class for every error raised by the quicklog client."""


class ConfigurationError(QuicklogError):
    """Raised when the client is missing project id, api key or api url."""
    pass


class ArgumentError(QuicklogError, ValueError):
    """Raised for invalid call arguments (empty trace id, empty tags)."""
    pass


class SerializationError(QuicklogError):
    pass


class TransportError(QuicklogError):
    """Raised when a request to the collector fails.

    The message carries the response body when the server sent one.
    """

    def __init__(self, message: str, *, status_code: int | None = None, body: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body
