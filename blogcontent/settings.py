from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Content
    POSTS_DIR: str = "posts"
    POSTS_EXTENSION: str = ".mdx"
    WORDS_PER_MINUTE: int = 225

    # Site
    SITE_URL: str = "https://w11i.me"

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def posts_path(self) -> Path:
        """Posts directory resolved against the process working directory."""
        return Path.cwd() / self.POSTS_DIR


# Global settings instance (evaluated at import, but reads env on construction)
settings = Settings()
