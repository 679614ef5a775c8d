"""Tests for database entity models."""

import pytest
from pydantic import ValidationError

from src.gigwork.database.models import (
    GigWorkerProfile,
    ManufacturerProfile,
    UserType,
    parse_profile,
)


def test_parse_profile_manufacturer(manufacturer_row: dict) -> None:
    """Test manufacturer rows parse into ManufacturerProfile."""
    profile = parse_profile(manufacturer_row)

    assert isinstance(profile, ManufacturerProfile)
    assert profile.user_type == UserType.MANUFACTURER
    assert profile.manufacturer_details[0].company_name == "Acme Fabrication Pvt Ltd"
    assert profile.needs_setup is False


def test_parse_profile_gig_worker(worker_row: dict) -> None:
    """Test gig worker rows parse into GigWorkerProfile."""
    profile = parse_profile(worker_row)

    assert isinstance(profile, GigWorkerProfile)
    assert profile.gig_worker_details[0].skills == ["welding", "cnc"]
    assert profile.needs_setup is False


def test_profile_without_details_needs_setup(manufacturer_row: dict) -> None:
    """Test a profile with both detail collections empty needs setup."""
    manufacturer_row["manufacturer_details"] = []

    profile = parse_profile(manufacturer_row)

    assert profile.needs_setup is True


def test_missing_detail_collections_default_to_empty(worker_row: dict) -> None:
    """Test rows fetched without embedded relations still parse."""
    del worker_row["manufacturer_details"]
    del worker_row["gig_worker_details"]

    profile = parse_profile(worker_row)

    assert profile.manufacturer_details == []
    assert profile.gig_worker_details == []
    assert profile.needs_setup is True


def test_unknown_user_type_rejected(worker_row: dict) -> None:
    """Test user_type outside the enum fails validation."""
    worker_row["user_type"] = "admin"

    with pytest.raises(ValidationError):
        parse_profile(worker_row)
