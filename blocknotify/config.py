"""配置管理模块"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """应用配置"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Slack 配置
    slack_webhook_url: str = Field(default="", description="Slack Incoming Webhook URL")
    slack_timeout: float = Field(default=15, gt=0, description="Webhook 请求超时（秒）")

    # 告警级别：0=error, 1=info, 2=debug
    alert_level: int = Field(default=1, ge=0, le=2, description="告警推送级别")

    # 通用配置
    log_level: str = Field(default="INFO", description="日志级别")


@lru_cache
def get_settings() -> Settings:
    """获取配置单例"""
    return Settings()


settings = get_settings()
