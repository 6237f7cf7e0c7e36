from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration settings for the STEM notification functions"""

    # Application settings
    service_name: str = "stem-notifications"
    log_level: str = "INFO"
    environment: str = "dev"

    # Firebase settings
    firebase_secret: Optional[str] = None  # service account JSON, falls back to default credentials
    firebase_project_id: Optional[str] = None

    # Firestore collections
    users_collection: str = "users"
    notifications_collection: str = "notifications"
    events_collection: str = "events"

    # Push message defaults
    default_title: str = "STEM App Notification"
    default_body: str = "You have a new update."
    default_route: str = "/events"
    click_action: str = "FLUTTER_NOTIFICATION_CLICK"  # Flutter FCM routes taps on this marker
    android_channel_id: str = "high_importance_channel"

    # Event notification settings
    event_title_prefix: str = "🔔 NEW EVENT: "
    max_description_length: int = 150
    ellipsis: str = "..."
    ellipsis_only_when_truncated: bool = False
    placeholder_recipient_id: str = "stem-admin"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


# Create settings instance
settings = Settings()
