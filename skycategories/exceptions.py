"""
Exception hierarchy for the Sky Categories client.

All custom exceptions inherit from SkyCategoriesError base class.
"""

from typing import Optional


class SkyCategoriesError(Exception):
    """Base exception for all Sky Categories client errors."""
    pass


# Configuration Errors
class ConfigurationError(SkyCategoriesError):
    """Base exception for configuration-related errors."""
    pass


class InvalidConfigurationError(ConfigurationError):
    """Raised when configuration is invalid or malformed."""
    pass


# SDK Errors
class SDKError(SkyCategoriesError):
    """Base exception for SDK-related errors."""
    pass


class SDKConfigurationError(SDKError):
    """Raised when SDK configuration is invalid."""
    pass


class RequestEncodingError(SDKError):
    """Raised when a request payload cannot be serialized to JSON."""
    pass


class RequestBuildError(SDKError):
    """Raised when an HTTP request cannot be constructed (bad URL or method)."""
    pass


class TransportError(SDKError):
    """Raised when the request cannot be delivered (connection error, timeout)."""
    pass


class UnexpectedStatusError(SDKError):
    """
    Raised when the service answers with a status code other than the one
    expected for the operation.

    Client and server errors are reported identically.
    """

    def __init__(
        self,
        status_code: int,
        expected_status: int,
        method: str = "",
        url: str = "",
        body: Optional[str] = None,
    ):
        self.status_code = status_code
        self.expected_status = expected_status
        self.method = method
        self.url = url
        self.body = body
        super().__init__(
            f"unexpected status code: got {status_code}, expected {expected_status}"
        )


class ResponseDecodeError(SDKError):
    """Raised when a response body is not JSON or does not match the expected shape."""
    pass
