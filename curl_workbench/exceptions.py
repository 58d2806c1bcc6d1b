"""Custom exceptions for the curl-workbench library."""


class WorkbenchError(Exception):
    """Base exception for all curl-workbench errors."""
    pass


class HeaderFormatError(WorkbenchError):
    """Raised when request headers are not a flat JSON object of strings."""
    pass


class TransportError(WorkbenchError):
    """Raised when the network call itself fails (DNS, refused, bad URL)."""
    pass


class ConfigurationError(WorkbenchError):
    """Raised when configuration is invalid or incomplete."""
    pass


class ApiError(WorkbenchError):
    """Raised by ApiClient when the server answers with a non-2xx status."""

    def __init__(self, status_text: str, status_code: int = 0):
        super().__init__(status_text)
        self.status_text = status_text
        self.status_code = status_code
