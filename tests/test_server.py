#!/usr/bin/env python3
"""
Test the reference availability service, alone and behind the gateway.
"""

import asyncio
import time

import httpx
from fastapi.testclient import TestClient

from modelavail.config import GatewaySettings
from modelavail.controller import AvailabilityController
from modelavail.gateway import AvailabilityGateway, TransportError
from modelavail.notifications import Severity
from modelavail.server import ModelAvailabilityTracker, create_app


class RecordingNotifier:
    def __init__(self):
        self.messages = []

    def notify(self, message, severity):
        self.messages.append((message, severity))


def test_tracker_expiry_and_reset():
    """Expiring reasons clear themselves; suspensions wait for a reset."""
    tracker = ModelAvailabilityTracker(disable_duration_seconds=1)

    assert tracker.is_available("m1", "c1")

    tracker.mark_unavailable("m1", "c1", reason="cooldown")
    tracker.mark_unavailable("m1", "c2", reason="suspended")
    assert not tracker.is_available("m1", "c1")
    assert not tracker.is_available("m1", "c2")
    assert tracker.is_available("m1", "c3")
    assert [r.key for r in tracker.get_unavailable()] == [("m1", "c1"), ("m1", "c2")]

    time.sleep(1.1)
    assert tracker.is_available("m1", "c1")
    assert not tracker.is_available("m1", "c2")

    assert tracker.reset("m1", "c2") is True
    assert tracker.reset("m1", "c2") is False
    assert tracker.get_unavailable() == []


def test_tracker_remarking_moves_record_to_end():
    tracker = ModelAvailabilityTracker()
    tracker.mark_unavailable("a", "c1")
    tracker.mark_unavailable("b", "c1")
    tracker.mark_unavailable("a", "c1", reason="quota_exceeded")

    records = tracker.get_unavailable()
    assert [r.model_id for r in records] == ["b", "a"]
    assert records[1].reason == "quota_exceeded"
    assert records[1].since.endswith("Z")

    tracker.clear_all()
    assert tracker.get_unavailable() == []


def test_service_routes():
    client = TestClient(create_app())

    assert client.get("/model-availability").json() == {"models": [], "count": 0}

    response = client.post(
        "/model-availability/org%2Fmodel/disable",
        json={"client_id": "c1", "reason": "suspended", "model_name": "Org Model"},
    )
    assert response.status_code == 200
    assert response.json()["model_id"] == "org/model"

    listing = client.get("/model-availability").json()
    assert listing["count"] == 1
    assert listing["models"][0]["model_name"] == "Org Model"

    response = client.post("/model-availability/org%2Fmodel/reset", json={"client_id": "c9"})
    assert response.status_code == 404

    response = client.post("/model-availability/org%2Fmodel/reset", json={"client_id": "c1"})
    assert response.status_code == 200
    assert response.json() == {
        "status": "ok",
        "message": "Model org/model is available again",
        "model_id": "org/model",
        "client_id": "c1",
    }

    response = client.post("/model-availability/m1/reset", json={})
    assert response.status_code == 422


def test_controller_against_reference_service():
    """Full cycle: list, reset one pair, refetch shows the other pair only."""
    tracker = ModelAvailabilityTracker()
    tracker.mark_unavailable("vendor/model x", "c1", reason="quota_exceeded")
    tracker.mark_unavailable("vendor/model x", "c2", reason="suspended")
    app = create_app(tracker)

    async def scenario():
        client = httpx.AsyncClient(
            transport=httpx.ASGITransport(app=app), base_url="http://service"
        )
        gateway = AvailabilityGateway(
            GatewaySettings(base_url="http://service"), client=client
        )
        notifier = RecordingNotifier()
        async with gateway:
            controller = AvailabilityController(gateway, notifier, locale="en")
            await controller.start()
            assert [r.key for r in controller.records] == [
                ("vendor/model x", "c1"),
                ("vendor/model x", "c2"),
            ]

            assert await controller.reset_one(controller.records[0]) is True
            assert [r.key for r in controller.records] == [("vendor/model x", "c2")]

            # the record is gone server-side now, so a second reset fails
            stale = tracker.mark_unavailable("other", "c1")
            tracker.reset("other", "c1")
            assert await controller.reset_one(stale) is False

            try:
                await gateway.reset_availability("missing", "c1")
                assert False, "Expected TransportError"
            except TransportError as e:
                assert e.status_code == 404
        return controller, notifier

    controller, notifier = asyncio.run(scenario())
    assert controller.reset_keys_in_flight == frozenset()
    assert notifier.messages == [
        ("vendor/model x has been reset to available", Severity.SUCCESS),
        ("Failed to reset model availability", Severity.ERROR),
    ]
