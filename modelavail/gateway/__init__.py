"""
Gateway to the remote model availability service.
"""

from .client import AvailabilityGateway, reset_endpoint
from .errors import (
    GatewayError,
    TransportError,
    InvalidRequestError,
    convert_transport_error,
)

__all__ = [
    "AvailabilityGateway",
    "reset_endpoint",
    "GatewayError",
    "TransportError",
    "InvalidRequestError",
    "convert_transport_error",
]
