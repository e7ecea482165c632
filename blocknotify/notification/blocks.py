"""消息区块组件

Slack Block Kit 区块：Header、Divider、Section。
区块集合是封闭的，统一通过 render_block 渲染为 Block Kit 字典。

参考: https://api.slack.com/reference/block-kit/blocks
"""

from copy import deepcopy
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Mapping, Optional, Union

from .exceptions import CapacityExceededError, MissingContentError, TextTooLongError
from .formatters import (
    MAX_FIELD_TEXT_LENGTH,
    MAX_SECTION_FIELDS,
    MAX_SECTION_TEXT_LENGTH,
    TextType,
    format_field_title,
    text_object,
)


@dataclass(frozen=True)
class Header:
    """标题区块，渲染为消息顶部的大号粗体文本（仅支持纯文本）"""

    text: str

    def render(self) -> dict:
        return render_block(self)


@dataclass(frozen=True)
class Divider:
    """分隔线区块"""

    def render(self) -> dict:
        return render_block(self)


@dataclass
class Section:
    """Section 区块

    可以包含一段主文本（最多 3000 字符）和最多 10 个字段（每个最多 2000 字符）。
    字段在桌面端以两列从左到右排列，移动端为单列。
    """

    text: Optional[dict] = field(default=None, init=False)
    fields: list[dict] = field(default_factory=list, init=False)

    @classmethod
    def from_mapping(
        cls,
        values: Union[Mapping[Any, Any], Iterable[tuple[Any, Any]]],
        line_break: bool = True,
        bold_keys: bool = True,
    ) -> "Section":
        """从键值对构建 Section，每一对生成一个字段

        字段顺序与输入顺序一致。

        Args:
            values: 字典或 (key, value) 序列
            line_break: 标题后换行，值显示在标题下方
            bold_keys: 标题加粗
        """
        pairs = values.items() if isinstance(values, Mapping) else values
        section = cls()
        for key, value in pairs:
            title = format_field_title(str(key), line_break=line_break, bold=bold_keys)
            section.add_field(f"{title}{value}")
        return section

    def set_text(self, value: str, text_type: Union[TextType, str] = TextType.MARKDOWN) -> None:
        """设置主文本，重复调用会覆盖之前的值

        Raises:
            TextTooLongError: 超过 3000 字符
        """
        if len(value) > MAX_SECTION_TEXT_LENGTH:
            raise TextTooLongError(
                f"Section text is limited to {MAX_SECTION_TEXT_LENGTH} characters, got {len(value)}"
            )
        self.text = text_object(value, text_type)

    def add_field(self, value: str, text_type: Union[TextType, str] = TextType.MARKDOWN) -> None:
        """追加一个字段

        Raises:
            CapacityExceededError: 已有 10 个字段
            TextTooLongError: 超过 2000 字符
        """
        if len(self.fields) >= MAX_SECTION_FIELDS:
            raise CapacityExceededError(
                f"Maximum of {MAX_SECTION_FIELDS} field text objects has been reached"
            )
        if len(value) > MAX_FIELD_TEXT_LENGTH:
            raise TextTooLongError(
                f"Field text is limited to {MAX_FIELD_TEXT_LENGTH} characters, got {len(value)}"
            )
        self.fields.append(text_object(value, text_type))

    def render(self) -> dict:
        return render_block(self)


Block = Union[Header, Divider, Section]


# ==================== 渲染 ====================


def _render_header(block: Header) -> dict:
    return {"type": "header", "text": text_object(block.text, TextType.PLAIN)}


def _render_divider(block: Divider) -> dict:
    return {"type": "divider"}


def _render_section(block: Section) -> dict:
    if not block.text and not block.fields:
        raise MissingContentError(
            "Either section text or field text needs to be filled in order to compose the section"
        )

    rendered: dict = {"type": "section"}
    if block.text:
        rendered["text"] = dict(block.text)
    if block.fields:
        rendered["fields"] = deepcopy(block.fields)
    return rendered


_RENDERERS: dict[type, Callable[[Any], dict]] = {
    Header: _render_header,
    Divider: _render_divider,
    Section: _render_section,
}


def render_block(block: Block) -> dict:
    """把区块渲染为 Block Kit 字典

    Raises:
        TypeError: 不支持的区块类型
        MissingContentError: 空 Section
    """
    renderer = _RENDERERS.get(type(block))
    if renderer is None:
        raise TypeError(f"Unsupported block type: {type(block).__name__}")
    return renderer(block)
