"""
Unified error handling for the availability gateway.
"""

import json
from typing import Optional, Dict, Any

import httpx
from pydantic import ValidationError


class GatewayError(Exception):
    """Base exception for gateway errors."""

    def __init__(
        self,
        message: str,
        endpoint: Optional[str] = None,
        status_code: Optional[int] = None,
        error_type: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.endpoint = endpoint
        self.status_code = status_code
        self.error_type = error_type
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for diagnostics."""
        return {
            "error": {
                "type": self.error_type or "gateway_error",
                "message": self.message,
                "endpoint": self.endpoint,
                "status_code": self.status_code,
                "details": self.details,
            }
        }


class TransportError(GatewayError):
    """Network failure or non-success response from the availability service."""

    def __init__(
        self,
        message: str,
        endpoint: Optional[str] = None,
        status_code: Optional[int] = None,
        error_type: str = "transport_error",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            endpoint=endpoint,
            status_code=status_code,
            error_type=error_type,
            details=details,
        )


class InvalidRequestError(GatewayError):
    """Request rejected locally before anything was sent."""

    def __init__(self, message: str, field: Optional[str] = None):
        details = {}
        if field:
            details["field"] = field

        super().__init__(
            message=message,
            error_type="invalid_request",
            details=details,
        )


def _error_detail(response: httpx.Response) -> str:
    """Pull a short error description out of a failed response."""
    try:
        data = response.json()
    except ValueError:
        return response.text[:200]

    if isinstance(data, dict):
        detail = data.get("detail") or data.get("message") or data.get("error")
        if isinstance(detail, dict):
            detail = detail.get("message", json.dumps(detail))
        if detail:
            return str(detail)[:200]
    return json.dumps(data)[:200]


def convert_transport_error(error: Exception, endpoint: str) -> TransportError:
    """
    Convert httpx/pydantic errors into a TransportError.

    Args:
        error: Original exception raised while talking to the service
        endpoint: Endpoint path the request was made against

    Returns:
        TransportError instance
    """
    if isinstance(error, TransportError):
        return error

    if isinstance(error, httpx.HTTPStatusError):
        status = error.response.status_code
        return TransportError(
            f"HTTP {status}: {_error_detail(error.response)}",
            endpoint=endpoint,
            status_code=status,
            error_type="http_status",
        )

    if isinstance(error, httpx.TimeoutException):
        return TransportError(
            f"Request timed out: {error}", endpoint=endpoint, error_type="timeout"
        )

    if isinstance(error, (httpx.ConnectError, httpx.NetworkError)):
        return TransportError(
            f"Connection failed: {error}",
            endpoint=endpoint,
            error_type="connection_error",
        )

    if isinstance(error, (ValidationError, ValueError)):
        return TransportError(
            f"Invalid response body: {error}",
            endpoint=endpoint,
            error_type="invalid_response",
        )

    return TransportError(str(error) or type(error).__name__, endpoint=endpoint)
