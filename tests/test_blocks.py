"""区块组件测试"""

from __future__ import annotations

import pytest

from blocknotify.notification.blocks import Divider, Header, Section, render_block
from blocknotify.notification.exceptions import (
    BlockError,
    CapacityExceededError,
    MissingContentError,
    TextTooLongError,
)
from blocknotify.notification.formatters import TextType


class TestHeader:
    def test_render(self):
        assert Header("Deploy").render() == {
            "type": "header",
            "text": {"type": "plain_text", "text": "Deploy"},
        }

    def test_is_immutable(self):
        header = Header("Deploy")
        with pytest.raises(AttributeError):
            header.text = "Other"


class TestDivider:
    def test_render(self):
        assert Divider().render() == {"type": "divider"}


class TestSection:
    def test_empty_section_raises_missing_content(self):
        with pytest.raises(MissingContentError):
            Section().render()

    def test_missing_content_is_block_error(self):
        with pytest.raises(BlockError):
            Section().render()

    def test_text_only(self):
        section = Section()
        section.set_text("hello")
        assert section.render() == {
            "type": "section",
            "text": {"type": "mrkdwn", "text": "hello"},
        }

    def test_fields_only(self):
        section = Section()
        section.add_field("a")
        section.add_field("b", TextType.PLAIN)
        assert section.render() == {
            "type": "section",
            "fields": [
                {"type": "mrkdwn", "text": "a"},
                {"type": "plain_text", "text": "b"},
            ],
        }

    def test_text_and_fields(self):
        section = Section()
        section.set_text("lead", "plain_text")
        section.add_field("f")
        rendered = section.render()
        assert set(rendered) == {"type", "text", "fields"}
        assert rendered["text"] == {"type": "plain_text", "text": "lead"}

    def test_set_text_last_write_wins(self):
        section = Section()
        section.set_text("first")
        section.set_text("second", TextType.PLAIN)
        assert section.render()["text"] == {"type": "plain_text", "text": "second"}

    def test_unknown_text_type_raises(self):
        with pytest.raises(ValueError):
            Section().set_text("x", "html")

    def test_ten_fields_keep_order(self):
        section = Section()
        for i in range(10):
            section.add_field(str(i))
        assert [f["text"] for f in section.render()["fields"]] == [str(i) for i in range(10)]

    def test_eleventh_field_raises(self):
        section = Section()
        for i in range(10):
            section.add_field(str(i))
        with pytest.raises(CapacityExceededError):
            section.add_field("one too many")
        assert len(section.fields) == 10

    def test_section_text_limit(self):
        section = Section()
        section.set_text("A" * 3000)
        with pytest.raises(TextTooLongError):
            section.set_text("A" * 3001)
        assert section.text["text"] == "A" * 3000

    def test_field_text_limit(self):
        section = Section()
        section.add_field("x" * 2000)
        with pytest.raises(TextTooLongError):
            section.add_field("x" * 2001)
        assert len(section.fields) == 1

    def test_text_too_long_is_value_error(self):
        with pytest.raises(ValueError):
            Section().add_field("x" * 5000)

    def test_constructor_rejects_fields(self):
        with pytest.raises(TypeError):
            Section(fields=[{"type": "mrkdwn", "text": str(i)} for i in range(11)])

    def test_constructor_rejects_text(self):
        with pytest.raises(TypeError):
            Section(text={"type": "html", "text": "A" * 5000})

    def test_render_is_snapshot(self):
        section = Section()
        section.add_field("a")
        rendered = section.render()
        section.add_field("b")
        assert len(rendered["fields"]) == 1


class TestSectionFromMapping:
    def test_bold_keys_with_line_break(self):
        section = Section.from_mapping([("a", "1"), ("b", "2")], line_break=True, bold_keys=True)
        assert [f["text"] for f in section.fields] == ["*a*\n1", "*b*\n2"]

    def test_plain_keys_without_line_break(self):
        section = Section.from_mapping({"a": "1"}, line_break=False, bold_keys=False)
        assert section.fields == [{"type": "mrkdwn", "text": "a1"}]

    def test_dict_order_preserved(self):
        section = Section.from_mapping({"z": 1, "a": 2, "m": 3})
        assert [f["text"] for f in section.fields] == ["*z*\n1", "*a*\n2", "*m*\n3"]

    def test_non_string_values(self):
        section = Section.from_mapping({"Retries": 999})
        assert section.fields[0]["text"] == "*Retries*\n999"

    def test_more_than_ten_pairs_raises(self):
        with pytest.raises(CapacityExceededError):
            Section.from_mapping({str(i): i for i in range(11)})


class TestRenderBlock:
    @pytest.mark.parametrize(
        "block, allowed",
        [
            (Header("t"), {"type", "text"}),
            (Divider(), {"type"}),
        ],
    )
    def test_schema_keys(self, block, allowed):
        assert set(render_block(block)) == allowed

    def test_section_schema_keys(self):
        section = Section.from_mapping({"k": "v"})
        section.set_text("t")
        rendered = render_block(section)
        assert set(rendered) <= {"type", "text", "fields"}
        assert rendered["type"] == "section"
        for obj in [rendered["text"], *rendered["fields"]]:
            assert set(obj) == {"type", "text"}
            assert obj["type"] in ("mrkdwn", "plain_text")

    def test_unsupported_block_raises(self):
        with pytest.raises(TypeError, match="Unsupported block type"):
            render_block({"type": "image"})
