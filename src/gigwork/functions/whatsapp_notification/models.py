"""Request and response shapes of the WhatsApp notification function."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class NotificationRequest(BaseModel):
    """Body posted by the API after a job application is created."""

    model_config = ConfigDict(populate_by_name=True)

    manufacturer_phone: str = Field(alias="manufacturerPhone")
    worker_name: str = Field(alias="workerName")
    job_title: str = Field(alias="jobTitle")
    application_message: str | None = Field(None, alias="applicationMessage")


class NotificationResponse(BaseModel):
    """
    Envelope returned for every POST.

    success is always True; demo marks responses where delivery did not
    happen, error carries the exception text when one was raised.
    """

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str
    demo: bool | None = None
    error: str | None = None
    whatsapp_response: Any | None = Field(None, alias="whatsappResponse")
