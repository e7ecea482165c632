"""消息构建器

逐步拼装 Slack 消息，最后通过 build() 生成可推送的字典。

使用示例：
    def layout(b):
        b.add_header("Nightly export")
        b.add_markdown_text("*Status*: running")

    message = MessageBuilder.compose(layout)
"""

from copy import deepcopy
from typing import Callable, Iterable

from .blocks import Block, Divider, Header, Section, render_block
from .formatters import (
    DEFAULT_MENTION_DELIMITER,
    DEFAULT_MENTION_PREFIX,
    TextType,
    format_mentions,
)


class MessageBuilder:
    """Slack 消息构建器

    空文本等可选输入会被静默跳过；Section 的结构错误会直接抛出。
    """

    def __init__(self):
        self._content: list[dict] = []

    def __len__(self) -> int:
        return len(self._content)

    @classmethod
    def compose(cls, callback: Callable[["MessageBuilder"], object]) -> dict:
        """在一个作用域内完成构建

        Args:
            callback: 接收新的构建器并添加区块

        Returns:
            构建好的消息
        """
        builder = cls()
        callback(builder)
        return builder.build()

    def add_header(self, text: str) -> None:
        """添加标题（仅纯文本）"""
        if not text:
            return
        self._content.append(Header(text).render())

    def add_divider(self) -> None:
        self._content.append(Divider().render())

    def add_markdown_text(self, text: str) -> None:
        """添加 Markdown 文本"""
        if not text:
            return

        section = Section()
        section.add_field(text)
        self.add_section(section)

    def add_plain_text(self, text: str) -> None:
        """添加纯文本"""
        if not text:
            return

        section = Section()
        section.set_text(text, TextType.PLAIN)
        self.add_section(section)

    def notify_users(
        self,
        user_ids: Iterable[str],
        prefix: str = DEFAULT_MENTION_PREFIX,
        delimiter: str = DEFAULT_MENTION_DELIMITER,
    ) -> None:
        """@提醒 Slack 用户

        Args:
            user_ids: Slack 成员 ID
            prefix: 提醒前的文字
            delimiter: 用户之间的分隔符
        """
        user_ids = list(user_ids)
        if not user_ids:
            return

        section = Section()
        section.set_text(format_mentions(user_ids, prefix=prefix, delimiter=delimiter))
        self.add_section(section)

    def add_section(self, section: Section) -> None:
        self._content.append(section.render())

    def prepend_section(self, section: Section) -> None:
        """把 Section 插入到消息最前面"""
        self._content.insert(0, section.render())

    def add_block(self, block: Block) -> None:
        """添加任意区块"""
        self._content.append(render_block(block))

    def build(self) -> dict:
        """生成消息

        返回的是快照，之后对构建器的修改不会影响已生成的消息。
        """
        return {"blocks": deepcopy(self._content)}
