"""
Model availability tracking for the reference availability service.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional
import threading
import logging

from ..models import CompositeKey, ReasonKind, UnavailableModel

logger = logging.getLogger(__name__)


@dataclass
class _Entry:
    record: UnavailableModel
    until: Optional[datetime]


class ModelAvailabilityTracker:
    """
    Tracks which models are unavailable to which clients, and why.

    Quota and cooldown restrictions expire on their own; suspensions stay
    until they are reset.
    """

    def __init__(self, disable_duration_seconds: int = 300):
        """
        Initialize the availability tracker.

        Args:
            disable_duration_seconds: Default restriction length for expiring reasons
        """
        self.disable_duration_seconds = disable_duration_seconds
        self._entries: Dict[CompositeKey, _Entry] = {}
        self._lock = threading.Lock()

    def _purge_expired(self, now: datetime):
        expired = [
            key
            for key, entry in self._entries.items()
            if entry.until is not None and now >= entry.until
        ]
        for key in expired:
            del self._entries[key]
            logger.info(f"Model {key[0]} has been re-enabled for client {key[1]}")

    def mark_unavailable(
        self,
        model_id: str,
        client_id: str,
        reason: str = ReasonKind.COOLDOWN.value,
        reason_text: Optional[str] = None,
        model_name: Optional[str] = None,
        provider: Optional[str] = None,
        duration_seconds: Optional[int] = None,
    ) -> UnavailableModel:
        """
        Mark a model as unavailable to a client.

        Args:
            model_id: Model that is restricted
            client_id: Client the restriction applies to
            reason: quota_exceeded, suspended, cooldown or a free-form cause
            reason_text: Explanation shown for free-form causes
            model_name: Human readable model label
            provider: Upstream provider label
            duration_seconds: Override of the default restriction length

        Returns:
            The stored record
        """
        now = datetime.now(timezone.utc)
        record = UnavailableModel(
            model_id=model_id,
            model_name=model_name,
            provider=provider,
            client_id=client_id,
            reason=reason,
            reason_text=reason_text,
            since=now.isoformat().replace("+00:00", "Z"),
        )

        until = None
        if reason != ReasonKind.SUSPENDED.value:
            until = now + timedelta(
                seconds=duration_seconds or self.disable_duration_seconds
            )

        with self._lock:
            self._entries.pop((model_id, client_id), None)
            self._entries[(model_id, client_id)] = _Entry(record=record, until=until)

        logger.warning(
            f"Model {model_id} marked unavailable for client {client_id} ({reason})"
            + (f" until {until.isoformat()}" if until else "")
        )
        return record

    def is_available(self, model_id: str, client_id: str) -> bool:
        with self._lock:
            self._purge_expired(datetime.now(timezone.utc))
            return (model_id, client_id) not in self._entries

    def reset(self, model_id: str, client_id: str) -> bool:
        """
        Make a model available to a client again.

        Returns:
            False if there was no restriction to clear
        """
        with self._lock:
            self._purge_expired(datetime.now(timezone.utc))
            entry = self._entries.pop((model_id, client_id), None)

        if entry is None:
            return False
        logger.info(f"Model {model_id} has been reset to available for client {client_id}")
        return True

    def get_unavailable(self) -> List[UnavailableModel]:
        """
        Get the current restrictions, oldest first.

        Returns:
            List of unavailable-model records
        """
        with self._lock:
            self._purge_expired(datetime.now(timezone.utc))
            return [entry.record for entry in self._entries.values()]

    def clear_all(self):
        """Clear every restriction."""
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
        if count > 0:
            logger.info(f"Cleared {count} unavailable models")
