"""
Reference model availability service.
"""

from fastapi import FastAPI, HTTPException

from ..config import DEFAULT_COOLDOWN_SECONDS, MODEL_AVAILABILITY_ENDPOINT
from ..models import (
    DisableModelRequest,
    ResetModelAvailabilityRequest,
    ResetModelAvailabilityResponse,
    UnavailableModel,
    UnavailableModelsResponse,
)
from ..utils import get_logger
from .availability import ModelAvailabilityTracker

logger = get_logger(__name__)


def create_app(tracker: ModelAvailabilityTracker = None) -> FastAPI:
    """Build the service around a tracker (a fresh one by default)."""
    tracker = tracker or ModelAvailabilityTracker(
        disable_duration_seconds=DEFAULT_COOLDOWN_SECONDS
    )

    app = FastAPI(
        title="ModelAvail reference service",
        description="In-memory model availability service",
        version="0.1.0",
    )
    app.state.tracker = tracker

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    @app.get(MODEL_AVAILABILITY_ENDPOINT, response_model=UnavailableModelsResponse)
    async def list_unavailable_models():
        """List all unavailable models."""
        models = tracker.get_unavailable()
        return UnavailableModelsResponse(models=models, count=len(models))

    @app.post(
        MODEL_AVAILABILITY_ENDPOINT + "/{model_id:path}/reset",
        response_model=ResetModelAvailabilityResponse,
    )
    async def reset_model_availability(
        model_id: str, request: ResetModelAvailabilityRequest
    ):
        """Make a model available to a client again."""
        if not tracker.reset(model_id, request.client_id):
            raise HTTPException(
                status_code=404,
                detail=f"Model {model_id} is not unavailable for client {request.client_id}",
            )
        return ResetModelAvailabilityResponse(
            status="ok",
            message=f"Model {model_id} is available again",
            model_id=model_id,
            client_id=request.client_id,
        )

    @app.post(
        MODEL_AVAILABILITY_ENDPOINT + "/{model_id:path}/disable",
        response_model=UnavailableModel,
    )
    async def disable_model(model_id: str, request: DisableModelRequest):
        """Mark a model unavailable to a client."""
        return tracker.mark_unavailable(
            model_id,
            request.client_id,
            reason=request.reason,
            reason_text=request.reason_text,
            model_name=request.model_name,
            provider=request.provider,
            duration_seconds=request.duration_seconds,
        )

    return app
