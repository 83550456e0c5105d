"""Application Settings"""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    アプリケーション設定

    12-Factor App の Config 原則に従い、
    すべての設定は環境変数から取得する。
    """

    model_config = SettingsConfigDict(
        env_prefix="RECIPES_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Service
    service_name: str = "recipe-skill"
    environment: str = "development"
    log_level: str = "INFO"

    # AWS
    aws_region: str = "us-east-1"

    # DynamoDB
    database_uri: str = ""
    database_name: str = "alexa"
    recipes_collection: str = "recipes"
    recipes_name_index: str = "name-index"
    connect_timeout_seconds: float = 10.0
    read_timeout_seconds: float = 3.0
    max_attempts: int = 2

    # Lambda
    deadline_margin_seconds: float = 0.25

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


@lru_cache()
def get_settings() -> Settings:
    """設定のシングルトンインスタンスを取得"""
    return Settings()
