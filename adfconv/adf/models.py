"""Data models for Atlassian Document Format (ADF) output.

Every node carries a `type` literal so a tree can be dumped straight to the
JSON shape the document API expects. Block containers reference each other,
so forward references are rebuilt at the bottom of the module.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field

# === MARKS ===


class LinkAttrs(BaseModel):
    href: str


class Mark(BaseModel):
    type: Literal["strong", "em", "code", "strike", "underline", "link"]
    attrs: LinkAttrs | None = None  # Only set for link marks


# === INLINE NODES ===


class TextNode(BaseModel):
    type: Literal["text"] = "text"
    text: str
    marks: list[Mark] | None = None


class HardBreakNode(BaseModel):
    type: Literal["hardBreak"] = "hardBreak"


InlineNode = TextNode | HardBreakNode


# === BLOCK NODES ===


class ParagraphNode(BaseModel):
    type: Literal["paragraph"] = "paragraph"
    content: list[InlineNode] = Field(default_factory=list)


class HeadingAttrs(BaseModel):
    level: Literal[1, 2, 3, 4, 5, 6]


class HeadingNode(BaseModel):
    type: Literal["heading"] = "heading"
    attrs: HeadingAttrs
    content: list[InlineNode] = Field(default_factory=list)


class CodeBlockAttrs(BaseModel):
    language: str | None = None


class CodeBlockNode(BaseModel):
    type: Literal["codeBlock"] = "codeBlock"
    attrs: CodeBlockAttrs = Field(default_factory=CodeBlockAttrs)
    content: list[TextNode] = Field(default_factory=list)


class RuleNode(BaseModel):
    type: Literal["rule"] = "rule"


# === LISTS ===


class ListItemNode(BaseModel):
    """A standard list item: paragraph first, nested lists after."""

    type: Literal["listItem"] = "listItem"
    content: list["ListItemContent"] = Field(default_factory=list)


class BulletListNode(BaseModel):
    type: Literal["bulletList"] = "bulletList"
    content: list[ListItemNode] = Field(default_factory=list)


class OrderedListAttrs(BaseModel):
    order: int = 1


class OrderedListNode(BaseModel):
    type: Literal["orderedList"] = "orderedList"
    attrs: OrderedListAttrs = Field(default_factory=OrderedListAttrs)
    content: list[ListItemNode] = Field(default_factory=list)


class TaskItemAttrs(BaseModel):
    localId: str
    state: Literal["TODO", "DONE"] = "TODO"


class TaskItemNode(BaseModel):
    """A checkbox item. Inline content first, nested lists after."""

    type: Literal["taskItem"] = "taskItem"
    attrs: TaskItemAttrs
    content: list["TaskItemContent"] = Field(default_factory=list)

    @property
    def checked(self) -> bool:
        return self.attrs.state == "DONE"


class TaskListAttrs(BaseModel):
    localId: str = ""


class TaskListNode(BaseModel):
    type: Literal["taskList"] = "taskList"
    attrs: TaskListAttrs = Field(default_factory=TaskListAttrs)
    content: list[TaskItemNode] = Field(default_factory=list)


ListBlock = BulletListNode | OrderedListNode | TaskListNode

ListItemContent = ParagraphNode | CodeBlockNode | BulletListNode | OrderedListNode | TaskListNode

TaskItemContent = TextNode | HardBreakNode | BulletListNode | OrderedListNode | TaskListNode

BlockNode = ParagraphNode | HeadingNode | CodeBlockNode | RuleNode | BulletListNode | OrderedListNode | TaskListNode

ADFNode = InlineNode | BlockNode | ListItemNode | TaskItemNode

# Update forward references
ListItemNode.model_rebuild()
BulletListNode.model_rebuild()
OrderedListNode.model_rebuild()
TaskItemNode.model_rebuild()
TaskListNode.model_rebuild()


# === DOCUMENT ===


class DocNode(BaseModel):
    """Root of an ADF document."""

    type: Literal["doc"] = "doc"
    version: int = 1
    content: list[BlockNode] = Field(default_factory=list)


def to_adf(node: BaseModel) -> dict[str, Any]:
    """Dump a node tree to the plain dict shape of the ADF JSON format."""
    return node.model_dump(exclude_none=True)


def plain_text(nodes: list[Any]) -> str:
    """Concatenate the text of all text nodes in a tree, in document order."""
    parts: list[str] = []

    def collect(node: Any) -> None:
        if isinstance(node, TextNode):
            parts.append(node.text)
        for child in getattr(node, "content", None) or []:
            collect(child)

    for node in nodes:
        collect(node)
    return "".join(parts)
