"""ADF node models and builders."""

from adfconv.adf.builder import ADFBuilder
from adfconv.adf.models import (
    ADFNode,
    BlockNode,
    BulletListNode,
    CodeBlockNode,
    DocNode,
    HardBreakNode,
    HeadingNode,
    InlineNode,
    ListBlock,
    ListItemNode,
    Mark,
    OrderedListNode,
    ParagraphNode,
    RuleNode,
    TaskItemNode,
    TaskListNode,
    TextNode,
    plain_text,
    to_adf,
)

__all__ = [
    # Builder
    "ADFBuilder",
    # Models
    "ADFNode",
    "BlockNode",
    "InlineNode",
    "ListBlock",
    "DocNode",
    "TextNode",
    "HardBreakNode",
    "Mark",
    "ParagraphNode",
    "HeadingNode",
    "CodeBlockNode",
    "RuleNode",
    "BulletListNode",
    "OrderedListNode",
    "ListItemNode",
    "TaskListNode",
    "TaskItemNode",
    # Helpers
    "plain_text",
    "to_adf",
]
