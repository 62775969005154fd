"""
Async HTTP client for the model availability service.
"""

from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from ..config import MODEL_AVAILABILITY_ENDPOINT, GatewaySettings
from ..models import (
    ResetModelAvailabilityRequest,
    ResetModelAvailabilityResponse,
    UnavailableModelsResponse,
)
from ..utils import get_logger, log_gateway_errors, log_request, log_response
from .errors import InvalidRequestError, TransportError, convert_transport_error

logger = get_logger(__name__)


def reset_endpoint(model_id: str) -> str:
    """Path of the reset endpoint; the model id is encoded as a single segment."""
    return f"{MODEL_AVAILABILITY_ENDPOINT}/{quote(model_id, safe='')}/reset"


class AvailabilityGateway:
    """Typed access to the list and reset operations of the availability service."""

    def __init__(
        self,
        settings: Optional[GatewaySettings] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.settings = settings or GatewaySettings()
        self.base_url = self.settings.base_url.rstrip("/")
        self.client = client or httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.settings.timeout,
            headers=self._get_headers(),
        )

    def _get_headers(self) -> Dict[str, str]:
        """Get headers for availability service requests."""
        headers = {"Accept": "application/json"}
        if self.settings.api_key:
            headers["Authorization"] = f"Bearer {self.settings.api_key}"
        return headers

    async def _request(
        self, method: str, endpoint: str, payload: Optional[Dict[str, Any]] = None
    ) -> Any:
        """Send a request and return the decoded JSON body of a 2xx response."""
        log_request(method, f"{self.base_url}{endpoint}", payload)
        try:
            response = await self.client.request(method, endpoint, json=payload)
        except httpx.HTTPError as e:
            log_response(endpoint, None, str(e))
            raise convert_transport_error(e, endpoint) from e

        try:
            response.raise_for_status()
            body = response.json()
        except (httpx.HTTPStatusError, ValueError) as e:
            log_response(endpoint, response.status_code, response.text)
            raise convert_transport_error(e, endpoint) from e

        log_response(endpoint, response.status_code, body)
        return body

    @log_gateway_errors("list unavailable models")
    async def list_unavailable(self) -> UnavailableModelsResponse:
        """
        Fetch every model currently unavailable to some client.

        Returns:
            UnavailableModelsResponse with the records in server order

        Raises:
            TransportError: on network failure, non-2xx status or a malformed body
        """
        body = await self._request("GET", MODEL_AVAILABILITY_ENDPOINT)
        try:
            result = UnavailableModelsResponse.model_validate(body)
        except ValueError as e:
            raise convert_transport_error(e, MODEL_AVAILABILITY_ENDPOINT) from e

        logger.debug(f"Fetched {len(result.models)} unavailable model records")
        return result

    @log_gateway_errors("reset model availability")
    async def reset_availability(
        self, model_id: str, client_id: str
    ) -> ResetModelAvailabilityResponse:
        """
        Ask the service to make ``model_id`` available to ``client_id`` again.

        Args:
            model_id: Model identifier, percent-encoded into the path
            client_id: Client whose restriction is cleared

        Returns:
            The service's acknowledgement (advisory, not authoritative)

        Raises:
            InvalidRequestError: if either identifier is empty
            TransportError: if the remote call fails for any reason
        """
        if not model_id:
            raise InvalidRequestError("model_id is required", field="model_id")
        if not client_id:
            raise InvalidRequestError("client_id is required", field="client_id")

        endpoint = reset_endpoint(model_id)
        payload = ResetModelAvailabilityRequest(client_id=client_id).model_dump()
        body = await self._request("POST", endpoint, payload)
        try:
            result = ResetModelAvailabilityResponse.model_validate(body)
        except ValueError as e:
            raise convert_transport_error(e, endpoint) from e

        logger.info(
            f"Reset availability for {model_id} (client {client_id}): "
            f"{result.status or 'ok'}"
        )
        return result

    async def close(self):
        """Close the HTTP client."""
        await self.client.aclose()

    async def __aenter__(self) -> "AvailabilityGateway":
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()


__all__ = ["AvailabilityGateway", "TransportError", "reset_endpoint"]
