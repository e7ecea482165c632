"""Slack 客户端

负责把构建好的消息推送到 Slack Incoming Webhook，并按告警级别过滤。
"""

from typing import Optional

import httpx
from loguru import logger

from blocknotify.config import settings

from .exceptions import InvalidInputError
from .level import AlertLevel, validate_level


class SlackAlerter:
    """Slack Webhook 客户端

    使用示例：
        alerter = SlackAlerter(level=AlertLevel.DEBUG)
        alerter.info(templates.notification(text="Deploy finished"))
    """

    def __init__(
        self,
        webhook_url: Optional[str] = None,
        level: Optional[int] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """初始化 Slack 客户端

        Args:
            webhook_url: Incoming Webhook URL，默认从配置读取
            level: 告警级别，默认从配置读取
            timeout: 请求超时（秒）
            transport: 自定义 httpx transport（测试用）
        """
        self.webhook_url = webhook_url or settings.slack_webhook_url
        self.timeout = timeout if timeout is not None else settings.slack_timeout
        self.transport = transport

        if not self.webhook_url:
            raise ValueError("Slack webhook URL is required")

        self._level = validate_level(settings.alert_level if level is None else level)
        logger.info(f"Slack alerter initialized with level: {self._level.name}")

    @property
    def level(self) -> AlertLevel:
        return self._level

    @level.setter
    def level(self, value: int) -> None:
        self._level = validate_level(value)

    def debug(self, content: dict) -> bool:
        """推送 debug 消息（仅在 DEBUG 级别）"""
        return self._send_at(AlertLevel.DEBUG, content)

    def info(self, content: dict) -> bool:
        """推送 info 消息（级别 >= INFO）"""
        return self._send_at(AlertLevel.INFO, content)

    def error(self, content: dict) -> bool:
        """推送 error 消息（总是推送）"""
        return self._send_at(AlertLevel.ERROR, content)

    def _send_at(self, message_level: AlertLevel, content: dict) -> bool:
        if self._level < message_level:
            logger.debug(
                f"Slack message suppressed: message={message_level.name}, level={self._level.name}"
            )
            return False
        return self.send(content)

    def send(self, content: dict) -> bool:
        """推送消息，不做级别过滤

        Returns:
            是否推送成功

        Raises:
            InvalidInputError: 消息为空或不是字典
        """
        if not isinstance(content, dict) or not content.get("blocks"):
            raise InvalidInputError("Message content cannot be empty")

        with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
            response = client.post(
                self.webhook_url,
                json=content,
                headers={"Content-Type": "application/json"},
            )

        if not response.is_success:
            logger.error(
                f"Slack send failed: status={response.status_code}, body={response.text}"
            )
            return False

        logger.debug(f"Slack send success: {len(content['blocks'])} blocks")
        return True
