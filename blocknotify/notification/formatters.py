"""消息格式化工具

提供 Slack mrkdwn 的统一格式化函数，避免重复代码。
"""

from enum import Enum
from typing import Iterable, Union


# ==================== 常量 ====================

# Block Kit 限制
MAX_SECTION_TEXT_LENGTH = 3000
MAX_FIELD_TEXT_LENGTH = 2000
MAX_SECTION_FIELDS = 10

DEFAULT_MENTION_PREFIX = "Please look into this: "
DEFAULT_MENTION_DELIMITER = " | "

ALERT_EMOJI = ":rotating_light:"


class TextType(str, Enum):
    """文本对象类型"""

    MARKDOWN = "mrkdwn"
    PLAIN = "plain_text"


# ==================== 格式化函数 ====================


def text_object(value: str, text_type: Union[TextType, str] = TextType.MARKDOWN) -> dict:
    """构建 Block Kit 文本对象

    Args:
        value: 文本内容
        text_type: mrkdwn 或 plain_text

    Raises:
        ValueError: 未知的文本类型
    """
    return {"type": TextType(text_type).value, "text": value}


def format_mention(user_id: str) -> str:
    """格式化 @用户 标记"""
    return f"<@{user_id}>"


def format_mentions(
    user_ids: Iterable[str],
    prefix: str = DEFAULT_MENTION_PREFIX,
    delimiter: str = DEFAULT_MENTION_DELIMITER,
) -> str:
    """把用户 ID 列表拼接为提醒文本，如 ``Please look into this: <@U1> | <@U2>``"""
    return prefix + delimiter.join(format_mention(user_id) for user_id in user_ids)


def format_field_title(key: str, line_break: bool = True, bold: bool = True) -> str:
    """格式化键值字段的标题部分"""
    title = f"*{key}*" if bold else key
    return f"{title}\n" if line_break else title


def format_result(result: str) -> str:
    return f"*Result*: {result}"


def format_error_output(error: str) -> str:
    """错误输出放在代码块中"""
    return f"*Error Output*:\n```{error}```"
