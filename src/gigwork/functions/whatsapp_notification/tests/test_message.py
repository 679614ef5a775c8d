"""Tests for phone normalization and message composition."""

from src.gigwork.functions.whatsapp_notification.message import (
    compose_application_message,
    format_phone_number,
)


def test_format_phone_adds_country_code():
    """Test numbers without '+' get the default +91 prefix."""
    assert format_phone_number("9876543210") == "+919876543210"


def test_format_phone_keeps_prefixed_number():
    """Test numbers already starting with '+' are unchanged."""
    assert format_phone_number("+19876543210") == "+19876543210"


def test_format_phone_does_not_validate():
    """Test malformed numbers pass through apart from the prefix."""
    assert format_phone_number("12-ab") == "+9112-ab"
    assert format_phone_number("") == "+91"


def test_format_phone_custom_country_code():
    assert format_phone_number("7700900123", country_code="+44") == "+447700900123"


def test_compose_message_includes_fields():
    """Test worker name, job title and message are substituted."""
    text = compose_application_message("Ravi Kumar", "CNC machine operator", "Available Monday")

    assert text == (
        "🔔 New Job Application Alert!\n"
        "\n"
        "👤 Worker: Ravi Kumar\n"
        "📋 Job: CNC machine operator\n"
        "💬 Message: Available Monday\n"
        "\n"
        "Please check your dashboard to review this application."
    )


def test_compose_message_default_placeholder():
    """Test a missing or empty message uses the placeholder."""
    assert "💬 Message: No additional message" in compose_application_message("Ravi", "Welder")
    assert "No additional message" in compose_application_message("Ravi", "Welder", "")
