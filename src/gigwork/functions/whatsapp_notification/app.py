"""
send-whatsapp-notification: relays new-application alerts to the WhatsApp Cloud API.

Run standalone:
    uvicorn src.gigwork.functions.whatsapp_notification.app:app --port 8001

Every POST answers HTTP 200 with {"success": true, ...} so the application
flow is never blocked by notification problems. Real failures are reported
separately: logged at ERROR and captured as "whatsapp_notification_failed"
in PostHog.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Request, Response
from fastapi.responses import JSONResponse

from src.gigwork.config import settings
from src.gigwork.functions.whatsapp_notification.message import (
    compose_application_message,
    format_phone_number,
)
from src.gigwork.functions.whatsapp_notification.models import (
    NotificationRequest,
    NotificationResponse,
)
from src.gigwork.services import PostHogService, WhatsAppService

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}

# Shared WhatsApp client, owned by the lifespan
_whatsapp_service: WhatsAppService | None = None


async def get_whatsapp_service() -> AsyncIterator[WhatsAppService]:
    """
    Yield the WhatsApp client for a request.

    Uses the shared client when the lifespan has started; otherwise a
    request-scoped client is created and closed when the request finishes.
    """
    if _whatsapp_service is not None:
        yield _whatsapp_service
        return

    service = WhatsAppService()
    try:
        yield service
    finally:
        await service.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the WhatsApp client on startup and close it on shutdown."""
    global _whatsapp_service

    _whatsapp_service = WhatsAppService()
    if settings.whatsapp_phone_number_id == "YOUR_PHONE_NUMBER_ID":
        logger.warning(
            "WHATSAPP_PHONE_NUMBER_ID is not configured; every send will fail and "
            "responses will be in demo mode"
        )

    yield

    await _whatsapp_service.close()
    _whatsapp_service = None


app = FastAPI(
    title="send-whatsapp-notification",
    description="Relays job application alerts to manufacturers over WhatsApp",
    version="0.1.0",
    debug=settings.debug,
    lifespan=lifespan,
)


def _envelope(body: NotificationResponse) -> JSONResponse:
    return JSONResponse(
        content=body.model_dump(by_alias=True, exclude_none=True),
        status_code=200,
        headers=CORS_HEADERS,
    )


def _report_failure(stage: str, **properties) -> None:
    posthog_service = PostHogService()
    posthog_service.capture(
        distinct_id="send-whatsapp-notification",
        event="whatsapp_notification_failed",
        properties={"stage": stage, **properties},
    )


@app.options("/")
async def preflight() -> Response:
    """CORS preflight: empty body, CORS headers, no downstream call."""
    return Response(headers=CORS_HEADERS)


@app.post("/")
async def send_whatsapp_notification(
    request: Request,
    whatsapp: WhatsAppService = Depends(get_whatsapp_service),
) -> JSONResponse:
    """
    Send a new-application alert to a manufacturer.

    Request body:
        {"manufacturerPhone": str, "workerName": str, "jobTitle": str,
         "applicationMessage": str (optional)}

    Returns:
        Always HTTP 200:
        - sent: {"success": true, "message": ..., "whatsappResponse": {...}}
        - provider non-2xx: {"success": true, "message": ..., "demo": true}
        - any exception: {"success": true, "message": ..., "demo": true, "error": str}
    """
    try:
        payload = NotificationRequest.model_validate(await request.json())

        logger.info(f"Sending WhatsApp notification to: {payload.manufacturer_phone}")

        formatted_phone = format_phone_number(payload.manufacturer_phone)
        message = compose_application_message(
            payload.worker_name, payload.job_title, payload.application_message
        )

        whatsapp_response = await whatsapp.send_text(formatted_phone, message)

        if not whatsapp_response.is_success:
            logger.error(
                f"WhatsApp API error: {whatsapp_response.text}",
                extra={"status_code": whatsapp_response.status_code},
            )
            _report_failure("provider", status_code=whatsapp_response.status_code)
            return _envelope(
                NotificationResponse(
                    message="Notification queued (WhatsApp service unavailable)",
                    demo=True,
                )
            )

        whatsapp_data = whatsapp_response.json()
        logger.info(f"WhatsApp message sent successfully: {whatsapp_data}")

        return _envelope(
            NotificationResponse(
                message="WhatsApp notification sent successfully",
                whatsapp_response=whatsapp_data,
            )
        )

    except Exception as e:
        logger.error(f"Error in send-whatsapp-notification function: {e}", exc_info=True)
        _report_failure("exception", error=str(e))
        return _envelope(
            NotificationResponse(
                message="Notification processed (demo mode)",
                demo=True,
                error=str(e),
            )
        )
