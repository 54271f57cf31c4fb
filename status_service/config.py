"""Application settings loaded from environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # API
    port: int = 3000

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        # .env may carry keys for other tools; an empty PORT= means unset
        extra = "ignore"
        env_ignore_empty = True


settings = Settings()
