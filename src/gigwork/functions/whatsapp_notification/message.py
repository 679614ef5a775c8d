"""Phone normalization and message composition for application alerts."""

from src.gigwork.config import settings

DEFAULT_APPLICATION_MESSAGE = "No additional message"

APPLICATION_ALERT_TEMPLATE = """🔔 New Job Application Alert!

👤 Worker: {worker_name}
📋 Job: {job_title}
💬 Message: {application_message}

Please check your dashboard to review this application."""


def format_phone_number(phone: str, country_code: str | None = None) -> str:
    """
    Ensure a phone number carries a country code.

    Numbers not starting with "+" get the default country code prepended.
    Nothing else is validated; malformed numbers are passed through.

    Example:
        >>> format_phone_number("9876543210")
        '+919876543210'
        >>> format_phone_number("+19876543210")
        '+19876543210'
    """
    if phone.startswith("+"):
        return phone
    return f"{country_code or settings.whatsapp_default_country_code}{phone}"


def compose_application_message(
    worker_name: str, job_title: str, application_message: str | None = None
) -> str:
    """Render the alert text; an empty or missing message uses the placeholder."""
    return APPLICATION_ALERT_TEMPLATE.format(
        worker_name=worker_name,
        job_title=job_title,
        application_message=application_message or DEFAULT_APPLICATION_MESSAGE,
    )
