from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_SECRET_KEY = "change-me"


class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = "Aviary Catalog API"
    app_env: str = "development"
    app_port: int = 8000
    frontend_url: str = "http://localhost:3000"

    # Database (SQLite via aiosqlite for local dev)
    database_url: str = Field(
        default="sqlite+aiosqlite:///./aviary_dev.db",
        alias="DATABASE_URL",
    )

    # Admin sessions (signed cookie)
    secret_key: str = Field(default=DEFAULT_SECRET_KEY, alias="SECRET_KEY")
    session_cookie: str = "aviary_session"
    session_max_age_hours: int = Field(default=6, alias="SESSION_MAX_AGE_HOURS")

    # Optional first admin, created on startup when no admin exists yet
    bootstrap_admin_username: str | None = Field(
        default=None, alias="BOOTSTRAP_ADMIN_USERNAME",
    )
    bootstrap_admin_password: str | None = Field(
        default=None, alias="BOOTSTRAP_ADMIN_PASSWORD",
    )

    # Image uploads
    upload_dir: str = Field(default="uploads", alias="UPLOAD_DIR")
    max_upload_size_mb: int = 5
    max_images_per_bird: int = 4
    allowed_image_types: list[str] = ["image/jpeg", "image/png", "image/gif"]

    # Catalog listings
    catalog_page_size: int = Field(default=10, ge=1)

    # Outbound email (contact form)
    smtp_host: str = Field(default="smtp.office365.com", alias="SMTP_HOST")
    smtp_port: int = Field(default=587, alias="SMTP_PORT")
    smtp_username: str | None = Field(default=None, alias="EMAIL_ADDRESS")
    smtp_password: str | None = Field(default=None, alias="EMAIL_PASSWORD")
    smtp_starttls: bool = Field(default=True, alias="SMTP_STARTTLS")
    smtp_timeout: int = Field(default=30, alias="SMTP_TIMEOUT")
    contact_recipient: str = Field(
        default="inquiries@localhost", alias="CONTACT_RECIPIENT",
    )
    contact_subject: str = "New Bird Inquiry"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
    }

    @property
    def max_upload_size_bytes(self) -> int:
        return self.max_upload_size_mb * 1024 * 1024

    @property
    def session_max_age_seconds(self) -> int:
        return self.session_max_age_hours * 60 * 60

    @property
    def email_enabled(self) -> bool:
        """Email relay is available only when SMTP credentials are configured."""
        return bool(self.smtp_username and self.smtp_password)

settings = Settings()
