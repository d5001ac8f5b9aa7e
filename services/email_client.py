import logging
from typing import Protocol

import httpx

from api.schemas.submissions import NotificationPayload
from services.errors import DeliveryError

logger = logging.getLogger(__name__)


class EmailClient(Protocol):
    async def send(self, payload: NotificationPayload) -> dict:
        ...


class BrevoEmailClient:
    """
    Sends transactional emails through the Brevo HTTP API.

    One POST per call; a non-2xx answer or a transport failure raises
    DeliveryError. There is no retry.
    """

    def __init__(self, api_url: str, api_key: str, timeout: float = 30.0):
        self.api_url = api_url
        self.api_key = api_key
        self.timeout = timeout

    def _headers(self) -> dict:
        return {
            "api-key": self.api_key,
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    @staticmethod
    def _error_detail(response):
        try:
            return response.json()
        except ValueError:
            return response.text

    async def send(self, payload: NotificationPayload) -> dict:
        body = payload.model_dump(by_alias=True)
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(self.api_url, json=body, headers=self._headers())
        except httpx.HTTPError as exc:
            raise DeliveryError(f"Email provider unreachable: {exc}", detail=str(exc)) from exc

        if response.status_code < 200 or response.status_code >= 300:
            raise DeliveryError(
                f"Email provider rejected message with status {response.status_code}",
                status_code=response.status_code,
                detail=self._error_detail(response),
            )

        logger.info("Email accepted by provider (status %s)", response.status_code)
        try:
            return response.json()
        except ValueError:
            return {}
