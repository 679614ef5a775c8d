"""WhatsApp Cloud API client for outbound text messages."""

import logging

import httpx

from src.gigwork.config import settings

logger = logging.getLogger(__name__)


class WhatsAppService:
    """
    Sends text messages through the WhatsApp Cloud API send-message endpoint.

    One POST per message with bearer-token auth. The client does not retry and,
    unless a timeout is configured, waits for the provider as long as it takes.

    Attributes:
        api_token: Bearer token for the Cloud API
        phone_number_id: Sender phone number resource ID
        base_url: Graph API base URL including version
        _http_client: Async HTTP client reused across sends

    Example:
        >>> service = WhatsAppService()
        >>> response = await service.send_text("+919876543210", "Hello")
        >>> response.is_success
        True
    """

    def __init__(
        self,
        api_token: str | None = None,
        phone_number_id: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ):
        """
        Initialize WhatsApp service.

        Args:
            api_token: Bearer token (default: settings.whatsapp_api_token)
            phone_number_id: Sender resource ID (default: settings.whatsapp_phone_number_id)
            base_url: API base URL (default: settings.whatsapp_api_base_url)
            timeout: Request timeout in seconds (default: settings.whatsapp_timeout_seconds)
        """
        self.api_token = api_token or settings.whatsapp_api_token
        self.phone_number_id = phone_number_id or settings.whatsapp_phone_number_id
        self.base_url = (base_url or settings.whatsapp_api_base_url).rstrip("/")
        self._http_client = httpx.AsyncClient(
            timeout=timeout if timeout is not None else settings.whatsapp_timeout_seconds
        )

    @property
    def messages_url(self) -> str:
        """Send-message endpoint for the configured sender."""
        return f"{self.base_url}/{self.phone_number_id}/messages"

    async def send_text(self, to: str, body: str) -> httpx.Response:
        """
        Send a plain text message.

        Non-2xx responses are returned, not raised; the caller decides how to
        treat them.

        Args:
            to: Recipient phone number, already carrying its country code
            body: Message text

        Returns:
            Raw provider response

        Raises:
            httpx.HTTPError: On network/transport failures
        """
        payload = {
            "messaging_product": "whatsapp",
            "to": to,
            "type": "text",
            "text": {"body": body},
        }

        logger.debug(f"POST {self.messages_url}", extra={"to": to})
        return await self._http_client.post(
            self.messages_url,
            headers={
                "Authorization": f"Bearer {self.api_token}",
                "Content-Type": "application/json",
            },
            json=payload,
        )

    async def close(self) -> None:
        """Close HTTP client. Should be called during application shutdown."""
        await self._http_client.aclose()
        logger.info("WhatsApp client closed")
