"""Application side effects: manufacturer WhatsApp alert via the relay function."""

import logging

import httpx

from src.gigwork.config import settings
from src.gigwork.database import SupabaseQueryBuilder, get_query_builder
from src.gigwork.database.models import GigWorkerProfile, Job
from src.gigwork.services import PostHogService

logger = logging.getLogger(__name__)


def resolve_manufacturer_phone(job: Job, db: SupabaseQueryBuilder | None = None) -> str | None:
    """
    Phone number to alert for a job: the profile phone, else the setup contact phone.

    Returns:
        Phone string as stored, or None if the manufacturer has none
    """
    db = db or get_query_builder()
    manufacturer = db.get_by_id(
        "profiles", job.manufacturer_id, columns="phone, manufacturer_details(contact_phone)"
    )
    if not manufacturer:
        return None

    if manufacturer.get("phone"):
        return manufacturer["phone"]

    for details in manufacturer.get("manufacturer_details") or []:
        if details.get("contact_phone"):
            return details["contact_phone"]

    return None


def build_notification_payload(job: Job, worker: GigWorkerProfile, message: str | None) -> dict:
    """Relay request body; applicationMessage is omitted when there is none."""
    payload = {
        "workerName": worker.name or "A gig worker",
        "jobTitle": job.title,
    }
    if message:
        payload["applicationMessage"] = message
    return payload


async def notify_manufacturer(
    job: Job,
    worker: GigWorkerProfile,
    message: str | None,
    db: SupabaseQueryBuilder | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> bool:
    """
    Call the WhatsApp relay function for a new application.

    Failures are logged and reported to PostHog but never raised, so a
    notification problem cannot fail the application itself. The relay answers
    200 even when delivery failed; its "demo" flag is the only failure signal.

    Args:
        job: Job that received the application
        worker: Applying gig worker
        message: Optional application message
        db: Query builder (uses default if None)
        http_client: HTTP client (a short-lived one is created if None)

    Returns:
        True if the relay reported a real delivery, False otherwise
    """
    try:
        phone = resolve_manufacturer_phone(job, db)
        if not phone:
            logger.warning(
                f"No phone for manufacturer {job.manufacturer_id}, skipping WhatsApp alert",
                extra={"job_id": str(job.id)},
            )
            return False

        payload = {"manufacturerPhone": phone, **build_notification_payload(job, worker, message)}
        headers = {
            "Authorization": f"Bearer {settings.supabase_anon_key}",
            "apikey": settings.supabase_anon_key,
        }

        if http_client is None:
            async with httpx.AsyncClient(timeout=settings.notification_timeout_seconds) as client:
                response = await client.post(settings.notification_url, json=payload, headers=headers)
        else:
            response = await http_client.post(settings.notification_url, json=payload, headers=headers)

        response.raise_for_status()
        body = response.json()

        if body.get("demo"):
            logger.warning(
                f"Relay could not deliver WhatsApp alert for job {job.id}: {body.get('message')}",
                extra={"error": body.get("error")},
            )
            _report_failure(worker, job, stage="relay", error=body.get("error") or body.get("message"))
            return False

        logger.info(f"WhatsApp alert sent for job {job.id}")
        return True

    except Exception as e:
        logger.error(
            f"Failed to call {settings.whatsapp_function_name} for job {job.id}: {e}",
            exc_info=True,
            extra={"error_type": "notification_call_failed"},
        )
        _report_failure(worker, job, stage="call", error=str(e))
        return False


def _report_failure(worker: GigWorkerProfile, job: Job, stage: str, error: str | None) -> None:
    posthog_service = PostHogService()
    posthog_service.capture(
        distinct_id=str(worker.user_id),
        event="whatsapp_notification_failed",
        properties={"job_id": str(job.id), "stage": stage, "error": error},
    )
