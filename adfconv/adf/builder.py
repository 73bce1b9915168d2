"""Output accumulator and pure constructors for ADF nodes.

Converters append into an `ADFBuilder` they own; the module-level functions
build individual nodes and never touch any accumulator.
"""

from typing import Literal, cast

from adfconv.adf.models import (
    ADFNode,
    BlockNode,
    BulletListNode,
    CodeBlockAttrs,
    CodeBlockNode,
    DocNode,
    HardBreakNode,
    HeadingAttrs,
    HeadingNode,
    InlineNode,
    LinkAttrs,
    ListItemContent,
    ListItemNode,
    Mark,
    OrderedListAttrs,
    OrderedListNode,
    ParagraphNode,
    RuleNode,
    TaskItemAttrs,
    TaskItemContent,
    TaskItemNode,
    TaskListAttrs,
    TaskListNode,
    TextNode,
)


class ADFBuilder:
    """Ordered accumulator of converted nodes."""

    def __init__(self) -> None:
        self._items: list[ADFNode] = []

    def add_item(self, node: ADFNode) -> None:
        self._items.append(node)

    def build(self) -> list[ADFNode]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)


# === INLINE ===


def text(value: str, marks: list[Mark] | None = None) -> TextNode:
    return TextNode(text=value, marks=list(marks) if marks else None)


def hard_break() -> HardBreakNode:
    return HardBreakNode()


def mark(kind: str, href: str | None = None) -> Mark:
    if kind == "link":
        return Mark(type="link", attrs=LinkAttrs(href=href or ""))
    return Mark(type=cast(Literal["strong", "em", "code", "strike", "underline"], kind))


# === BLOCKS ===


def paragraph(content: list[InlineNode] | None = None) -> ParagraphNode:
    return ParagraphNode(content=list(content or []))


def paragraph_item(value: str) -> ParagraphNode:
    """Paragraph holding a single plain text node."""
    return ParagraphNode(content=[text(value)] if value else [])


def heading(level: int, content: list[InlineNode]) -> HeadingNode:
    level = min(max(level, 1), 6)
    return HeadingNode(attrs=HeadingAttrs(level=cast(Literal[1, 2, 3, 4, 5, 6], level)), content=list(content))


def code_block(value: str, language: str | None = None) -> CodeBlockNode:
    return CodeBlockNode(attrs=CodeBlockAttrs(language=language), content=[text(value)] if value else [])


def rule() -> RuleNode:
    return RuleNode()


def doc(content: list[BlockNode]) -> DocNode:
    return DocNode(content=list(content))


# === LISTS ===


def bullet_list_item(content: list[ListItemNode] | None = None) -> BulletListNode:
    return BulletListNode(content=list(content or []))


def ordered_list_item(content: list[ListItemNode] | None = None, order: int = 1) -> OrderedListNode:
    return OrderedListNode(attrs=OrderedListAttrs(order=order), content=list(content or []))


def task_list_item(content: list[TaskItemNode] | None = None, local_id: str = "") -> TaskListNode:
    return TaskListNode(attrs=TaskListAttrs(localId=local_id), content=list(content or []))


def list_item(content: list[ListItemContent]) -> ListItemNode:
    return ListItemNode(content=list(content))


def task_item_from_content(content: list[ADFNode], checked: bool, local_id: str) -> TaskItemNode:
    """Build a task item from resolved content.

    Paragraphs are unwrapped into their inline nodes since task items hold
    inline content directly; nested lists are kept as they are.
    """
    items: list[TaskItemContent] = []
    for node in content:
        if isinstance(node, ParagraphNode):
            items.extend(node.content)
        elif isinstance(node, (TextNode, HardBreakNode, BulletListNode, OrderedListNode, TaskListNode)):
            items.append(node)
    return TaskItemNode(
        attrs=TaskItemAttrs(localId=local_id, state="DONE" if checked else "TODO"),
        content=items,
    )
