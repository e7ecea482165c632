"""预定义消息模板

常见通知的现成布局，无需从头构建。大部分字段可选，为空时直接省略。

使用示例：
    message = templates.job_start(
        title="Nightly export",
        desc="Exports yesterday's orders to the warehouse",
        overview={"Job Type": "Refresh", "Action": "Update"},
    )
    SlackAlerter().info(message)
"""

from typing import Any, Iterable, Mapping, Optional, Union

from .blocks import Section
from .builder import MessageBuilder
from .formatters import ALERT_EMOJI, format_error_output, format_result

KeyValues = Union[Mapping[Any, Any], Iterable[tuple[Any, Any]]]


def _pairs(values: Optional[KeyValues]) -> list:
    """统一为 (key, value) 列表，保持原有顺序"""
    if values is None:
        return []
    if isinstance(values, Mapping):
        return list(values.items())
    return list(values)


def _add_key_values(builder: MessageBuilder, values: KeyValues) -> None:
    """分隔线 + 键值 Section"""
    builder.add_divider()
    builder.add_section(Section.from_mapping(values, bold_keys=True))


def notification(*, text: str, title: str = "") -> dict:
    """快速通知

    Args:
        text: 通知内容，支持 Markdown
        title: 可选标题
    """
    builder = MessageBuilder()
    if title:
        builder.add_header(title)
    builder.add_markdown_text(text)
    return builder.build()


def job_start(
    *,
    title: str = "",
    desc: str = "",
    overview: Optional[KeyValues] = None,
) -> dict:
    """任务开始通知

    Args:
        title: 标题，仅纯文本
        desc: 描述
        overview: 额外的键值字段，键默认加粗
    """
    overview = _pairs(overview)

    builder = MessageBuilder()
    if title:
        builder.add_header(title)
    if desc:
        builder.add_plain_text(desc)
    if overview:
        _add_key_values(builder, overview)
    return builder.build()


def job_finish(
    *,
    title: str = "",
    desc: str = "",
    result: str = "",
    stats: Optional[KeyValues] = None,
) -> dict:
    """任务结束通知

    标题、描述和结果总是添加（空标题/描述由构建器跳过）。

    Args:
        title: 标题，仅纯文本
        desc: 描述
        result: 执行结果，支持 Markdown
        stats: 执行统计键值字段
    """
    stats = _pairs(stats)

    builder = MessageBuilder()
    builder.add_header(title)
    builder.add_plain_text(desc)
    builder.add_markdown_text(format_result(result))
    if stats:
        _add_key_values(builder, stats)
    return builder.build()


def job_executed(
    *,
    title: str = "",
    desc: str = "",
    result: str = "",
    overview: Optional[KeyValues] = None,
    stats: Optional[KeyValues] = None,
) -> dict:
    """任务开始与结束合并为一条消息，适合耗时很短的任务

    所有字段都是可选的。
    """
    overview = _pairs(overview)
    stats = _pairs(stats)

    builder = MessageBuilder()
    if title:
        builder.add_header(title)
    if desc:
        builder.add_plain_text(desc)
    if result:
        builder.add_markdown_text(format_result(result))
    if overview:
        _add_key_values(builder, overview)
    if stats:
        _add_key_values(builder, stats)
    return builder.build()


def job_error(
    *,
    title: str,
    error: str,
    notify_user_ids: Optional[Iterable[str]] = None,
    extra: Optional[KeyValues] = None,
    add_alert_emoji: bool = True,
) -> dict:
    """任务出错通知，并 @提醒指定用户

    Args:
        title: 任务名称，仅纯文本
        error: 错误信息，放在代码块中
        notify_user_ids: 需要提醒的 Slack 成员 ID
        extra: 额外的键值字段
        add_alert_emoji: 标题前加告警 emoji
    """
    notify_user_ids = list(notify_user_ids or [])
    extra = _pairs(extra)

    header = f"Error while processing {title}"
    if add_alert_emoji:
        header = f"{ALERT_EMOJI} {header}"

    builder = MessageBuilder()
    builder.add_header(header)
    if notify_user_ids:
        builder.notify_users(notify_user_ids)
    builder.add_divider()
    builder.add_markdown_text(format_result("Fail"))
    builder.add_markdown_text(format_error_output(error))
    if extra:
        _add_key_values(builder, extra)
    return builder.build()
