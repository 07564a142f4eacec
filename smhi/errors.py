"""Error types raised by the SMHI forecast client."""


class SmhiError(Exception):
    """Base class for all errors raised by this package."""


class TransportError(SmhiError):
    """Raised when the forecast API cannot be reached."""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url


NetworkError = TransportError


class HTTPStatusError(SmhiError):
    """Raised when the forecast API answers with a non-200 status."""

    def __init__(self, status_code: int, body: str, url: str | None = None):
        super().__init__(f"status is not ok: HTTP {status_code}: {body}")
        self.status_code = status_code
        self.body = body
        self.url = url


class ParseError(SmhiError):
    """Raised when a document is not a valid forecast."""


class FileError(SmhiError):
    """Raised when a forecast file cannot be read or written."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path
