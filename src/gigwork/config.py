"""Application configuration using Pydantic Settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # System Configuration
    api_v1_prefix: str = "/api/v1"
    debug: bool = False
    cors_origins: str = "http://localhost:5173,http://localhost:8080"
    rate_limit_enabled: bool = True

    # Client-side routes used for redirects
    login_route: str = "/auth"
    landing_route: str = "/"

    # Supabase Configuration
    supabase_url: str = "https://test.supabase.co"
    supabase_anon_key: str = "test-anon-key"
    supabase_service_role_key: str = "test-service-role-key"

    # WhatsApp Cloud API Configuration (used by the relay function)
    whatsapp_api_token: str = "test-whatsapp-token"
    whatsapp_api_base_url: str = "https://graph.facebook.com/v17.0"
    whatsapp_phone_number_id: str = "YOUR_PHONE_NUMBER_ID"  # Must be set before production use
    whatsapp_default_country_code: str = "+91"
    whatsapp_timeout_seconds: float | None = None  # None = wait for the provider indefinitely

    # Relay function endpoint (used by the API after an application is created)
    whatsapp_function_name: str = "send-whatsapp-notification"
    notification_function_url: str | None = None  # Defaults to the Supabase functions URL
    notification_timeout_seconds: float = 10.0

    # PostHog Configuration
    posthog_api_key: str | None = None
    posthog_host: str = "https://app.posthog.com"

    @property
    def notification_url(self) -> str:
        """Endpoint of the WhatsApp relay function."""
        return self.notification_function_url or (
            f"{self.supabase_url}/functions/v1/{self.whatsapp_function_name}"
        )


settings = Settings()
