"""Pydantic Settings model for application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from release_notes_manager.utils import constants


class Settings(BaseSettings):
    """Environment variable settings for the application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Generic application-wide settings
    DEBUG: bool = False

    # Generator settings
    RELEASE_NOTES_PATH: str = constants.DEFAULT_RELEASE_NOTES_PATH
    MANIFEST_PATH: str = constants.DEFAULT_MANIFEST_PATH
    COMMIT_LIMIT: int = constants.COMMIT_LIMIT
    DAYS_THRESHOLD: int = constants.DAYS_THRESHOLD
    RELEASE_COMMIT_MESSAGE: str = constants.RELEASE_COMMIT_MESSAGE

    # Viewer settings
    VIEWER_SOURCE: str = "."
    VIEWER_OUTPUT_PATH: str = constants.DEFAULT_VIEWER_OUTPUT_PATH


settings = Settings()
