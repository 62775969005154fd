"""
ModelAvail - view and reset models that are unavailable to API clients.
"""

__version__ = "0.1.0"

# Export main components for easier imports
from .gateway import (
    AvailabilityGateway,
    GatewayError,
    TransportError,
    InvalidRequestError,
)
from .controller import AvailabilityController
from .models import (
    CompositeKey,
    Reason,
    ReasonKind,
    UnavailableModel,
    UnavailableModelsResponse,
    ResetModelAvailabilityResponse,
)
from .display import ReasonCategory, reason_category, reason_label, format_since
from .notifications import Notifier, Severity, ConsoleNotifier

__all__ = [
    "AvailabilityGateway",
    "GatewayError",
    "TransportError",
    "InvalidRequestError",
    "AvailabilityController",
    "CompositeKey",
    "Reason",
    "ReasonKind",
    "UnavailableModel",
    "UnavailableModelsResponse",
    "ResetModelAvailabilityResponse",
    "ReasonCategory",
    "reason_category",
    "reason_label",
    "format_since",
    "Notifier",
    "Severity",
    "ConsoleNotifier",
]
