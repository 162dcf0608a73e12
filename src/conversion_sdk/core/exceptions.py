"""Custom exceptions for the Conversion SDK."""

from typing import Optional, Any, Dict


class ConversionSDKError(Exception):
    """Base exception for all Conversion SDK errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(ConversionSDKError):
    """Configuration is invalid or missing."""
    pass


class ValidationError(ConversionSDKError):
    """Input validation failed."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, details)
        self.field = field
        self.value = value


class PathfindingError(ConversionSDKError):
    """Path discovery failed."""

    def __init__(
        self,
        message: str,
        source_token: Optional[str] = None,
        target_token: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, details)
        self.source_token = source_token
        self.target_token = target_token


class PathDepthExceededError(PathfindingError):
    """The search descended past the configured maximum depth."""

    def __init__(
        self,
        message: str,
        token: Optional[str] = None,
        max_depth: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, source_token=token, details=details)
        self.token = token
        self.max_depth = max_depth


class RegistryError(ConversionSDKError):
    """Registry lookup failed."""

    def __init__(
        self,
        message: str,
        token: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, details)
        self.token = token


class RPCError(ConversionSDKError):
    """RPC call failed."""

    def __init__(
        self,
        message: str,
        method: Optional[str] = None,
        status_code: Optional[int] = None,
        response_data: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, details)
        self.method = method
        self.status_code = status_code
        self.response_data = response_data


class NetworkError(ConversionSDKError):
    """Network connectivity issues."""
    pass


class TimeoutError(ConversionSDKError):
    """Operation timed out."""

    def __init__(
        self,
        message: str,
        timeout_duration: Optional[float] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, details)
        self.timeout_duration = timeout_duration


class RateLimitError(RPCError):
    """Rate limit exceeded."""

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        retry_after: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message, details=details)
        self.retry_after = retry_after
