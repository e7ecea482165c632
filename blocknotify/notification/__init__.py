"""通知模块

提供 Slack Block Kit 消息构建和推送功能。

模块结构：
- formatters: 统一的格式化工具函数和 Block Kit 限制
- blocks: 区块组件（Header / Divider / Section）
- builder: 消息构建器
- templates: 预定义消息模板
- level: 告警级别
- client: Slack Webhook 客户端

使用示例：
    from blocknotify.notification import SlackAlerter, templates

    message = templates.job_error(
        title="Nightly export",
        error="KeyError: 'order_id'",
        notify_user_ids=["U024BE7LH"],
    )
    SlackAlerter().error(message)
"""

from . import templates
from .blocks import Block, Divider, Header, Section, render_block
from .builder import MessageBuilder
from .client import SlackAlerter
from .exceptions import (
    BlockError,
    CapacityExceededError,
    InvalidInputError,
    MissingContentError,
    TextTooLongError,
)
from .formatters import TextType
from .level import AlertLevel, validate_level

__all__ = [
    # 客户端
    "SlackAlerter",
    "AlertLevel",
    "validate_level",
    # 构建器
    "MessageBuilder",
    "templates",
    # 区块组件
    "Block",
    "Header",
    "Divider",
    "Section",
    "TextType",
    "render_block",
    # 异常
    "BlockError",
    "MissingContentError",
    "CapacityExceededError",
    "TextTooLongError",
    "InvalidInputError",
]
