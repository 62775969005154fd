"""
State reconciliation for the model availability console.

The controller owns the list of unavailable-model records and the set of
(model_id, client_id) pairs with a reset in flight. Records are only ever
replaced by a full refetch; a reset never edits them locally.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import FrozenSet, Iterable, List, Optional

from .gateway import AvailabilityGateway, GatewayError
from .i18n import translate
from .display import display_name
from .models import CompositeKey, UnavailableModel
from .notifications import Notifier, Severity
from .utils import get_logger

logger = get_logger(__name__)

VIEW_LOADING = "loading"
VIEW_EMPTY = "empty"
VIEW_TABLE = "table"


class AvailabilityController:
    """Fetch, render state, reset and refetch cycle for unavailable models."""

    def __init__(
        self,
        gateway: AvailabilityGateway,
        notifier: Notifier,
        locale: Optional[str] = None,
    ):
        self.gateway = gateway
        self.notifier = notifier
        self.locale = locale
        self.records: List[UnavailableModel] = []
        self.is_loading = False
        self.last_refresh_failed = False
        self.reset_keys_in_flight: FrozenSet[CompositeKey] = frozenset()

    async def start(self):
        """Initial load."""
        await self.refresh()

    @property
    def unavailable_count(self) -> int:
        return len(self.records)

    @property
    def view_state(self) -> str:
        if self.is_loading:
            return VIEW_LOADING
        if not self.records:
            return VIEW_EMPTY
        return VIEW_TABLE

    def is_resetting(self, record: UnavailableModel) -> bool:
        return record.key in self.reset_keys_in_flight

    async def refresh(self) -> bool:
        """
        Replace ``records`` with the service's current list.

        On failure the previous records are kept and an error notification is
        emitted. Returns True if the fetch succeeded.
        """
        self.is_loading = True
        try:
            response = await self.gateway.list_unavailable()
        except GatewayError as e:
            logger.error(f"Failed to fetch unavailable models: {e}")
            self.last_refresh_failed = True
            self.notifier.notify(translate("fetch_error", self.locale), Severity.ERROR)
            return False
        finally:
            self.is_loading = False

        self.records = list(response.models)
        self.last_refresh_failed = False
        return True

    @asynccontextmanager
    async def _reset_marker(self, key: CompositeKey):
        # Always derive from the current attribute so concurrent resets on
        # other keys are never overwritten.
        self.reset_keys_in_flight = self.reset_keys_in_flight | {key}
        try:
            yield
        finally:
            self.reset_keys_in_flight = self.reset_keys_in_flight - {key}

    async def reset_one(self, record: UnavailableModel) -> bool:
        """
        Reset one model/client pair and refetch on success.

        Returns True if the service accepted the reset.
        """
        async with self._reset_marker(record.key):
            try:
                await self.gateway.reset_availability(record.model_id, record.client_id)
            except GatewayError as e:
                logger.error(
                    f"Failed to reset model availability for "
                    f"{record.model_id} (client {record.client_id}): {e}"
                )
                self.notifier.notify(translate("reset_error", self.locale), Severity.ERROR)
                return False

            await self.refresh()
            self.notifier.notify(
                translate("reset_success", self.locale, model=display_name(record)),
                Severity.SUCCESS,
            )
            return True

    async def reset_many(self, records: Iterable[UnavailableModel]) -> List[bool]:
        """Reset several pairs concurrently, skipping pairs already in flight."""
        pending = []
        seen = set(self.reset_keys_in_flight)
        for record in records:
            if record.key in seen:
                continue
            seen.add(record.key)
            pending.append(record)

        if not pending:
            return []
        return list(await asyncio.gather(*(self.reset_one(r) for r in pending)))
