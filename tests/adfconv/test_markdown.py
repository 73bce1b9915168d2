"""Tests for the markdown front end."""

from adfconv.adf.models import BulletListNode, CodeBlockNode, TaskListNode, plain_text
from adfconv.config import Settings
from adfconv.markdown import create_parser, get_parser, markdown_to_adf, render_html


def to_doc(markdown: str, file_context: str = "notes/page.md"):
    return markdown_to_adf(markdown, file_context, settings=Settings())


class TestRenderHtml:
    def test_task_list_renders_checkboxes(self):
        html = render_html("- [ ] todo\n- [x] done\n")
        assert html.count('type="checkbox"') == 2
        assert 'checked="checked"' in html

    def test_tables_and_strikethrough_enabled(self):
        md = create_parser()
        assert "<table>" in md.render("| A | B |\n|---|---|\n| 1 | 2 |\n")
        assert "<s>gone</s>" in md.render("~~gone~~")

    def test_parser_is_singleton(self):
        assert get_parser() is get_parser()


class TestMarkdownToAdf:
    def test_mixed_task_list(self):
        doc = to_doc("- [ ] todo\n- [x] done\n- plain\n")
        assert [block.type for block in doc.content] == ["taskList", "bulletList"]
        tasks = doc.content[0]
        assert isinstance(tasks, TaskListNode)
        assert [item.checked for item in tasks.content] == [False, True]
        assert [plain_text(item.content) for item in tasks.content] == ["todo", "done"]

    def test_ordered_list_start(self):
        doc = to_doc("3. three\n4. four\n")
        assert doc.content[0].type == "orderedList"
        assert doc.content[0].attrs.order == 3

    def test_nested_tight_list(self):
        doc = to_doc("- parent\n  - child\n")
        item = doc.content[0].content[0]
        assert plain_text(item.content[:1]) == "parent"
        assert isinstance(item.content[1], BulletListNode)

    def test_loose_list_uses_paragraphs(self):
        doc = to_doc("- a\n\n- b\n")
        block = doc.content[0]
        assert [plain_text(item.content) for item in block.content] == ["a", "b"]

    def test_nested_task_list_under_bullet(self):
        doc = to_doc("- groceries\n  - [ ] milk\n  - [x] eggs\n")
        item = doc.content[0].content[0]
        nested = item.content[1]
        assert isinstance(nested, TaskListNode)
        assert [task.attrs.localId for task in nested.content] == ["milk", "eggs"]

    def test_fenced_code(self):
        doc = to_doc("```python\nprint(1)\n```\n")
        block = doc.content[0]
        assert isinstance(block, CodeBlockNode)
        assert block.attrs.language == "python"
        assert block.content[0].text == "print(1)"

    def test_relative_link_resolution(self):
        doc = to_doc("See [other](other.md).")
        link_node = doc.content[0].content[1]
        assert link_node.marks[0].attrs.href == "notes/other.md"
