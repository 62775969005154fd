"""
In-memory reference implementation of the model availability service.
"""

from .availability import ModelAvailabilityTracker
from .app import create_app

__all__ = ["ModelAvailabilityTracker", "create_app"]
