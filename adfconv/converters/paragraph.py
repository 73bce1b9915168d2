"""Convert paragraph-like HTML into ADF paragraph and inline nodes."""

import posixpath
import re
from urllib.parse import urlparse

from bs4 import Tag
from loguru import logger

from adfconv import dom
from adfconv.adf import builder
from adfconv.adf.builder import ADFBuilder
from adfconv.adf.models import CodeBlockNode, HardBreakNode, InlineNode, Mark, TextNode

_MARK_TAGS = {
    "strong": "strong",
    "b": "strong",
    "em": "em",
    "i": "em",
    "code": "code",
    "kbd": "code",
    "s": "strike",
    "del": "strike",
    "strike": "strike",
    "u": "underline",
    "ins": "underline",
}

# Elements whose content never reaches the output
_SKIP_TAGS = {"input", "script", "style", "template", "button"}

_WHITESPACE = re.compile(r"\s+")


def resolve_href(href: str, file_context: str) -> str:
    """Resolve a relative link target against the directory of file_context.

    Absolute URLs, rooted paths and fragment links are returned unchanged.
    """
    if not href or href.startswith(("#", "/")) or urlparse(href).scheme:
        return href
    base = posixpath.dirname(file_context) if file_context else ""
    return posixpath.normpath(posixpath.join(base, href))


def _code_language(pre: Tag) -> str | None:
    code = pre.find("code")
    classes = code.get("class", []) if isinstance(code, Tag) else []
    for cls in classes or []:
        if cls.startswith("language-"):
            return cls.removeprefix("language-") or None
    return None


def _rstrip_last(nodes: list[InlineNode]) -> None:
    while nodes and isinstance(nodes[-1], TextNode):
        stripped = nodes[-1].text.rstrip(" ")
        if stripped:
            nodes[-1] = nodes[-1].model_copy(update={"text": stripped})
            return
        nodes.pop()


def normalize_inline(nodes: list[InlineNode]) -> list[InlineNode]:
    """Collapse whitespace the way a browser renders it.

    Runs of whitespace become one space, spaces at the start/end of a line
    are dropped, empty text nodes disappear and neighbours with the same
    marks are merged.
    """
    result: list[InlineNode] = []
    for node in nodes:
        if not isinstance(node, TextNode):
            _rstrip_last(result)
            result.append(node)
            continue

        value = _WHITESPACE.sub(" ", node.text)
        prev = result[-1] if result else None
        if prev is None or isinstance(prev, HardBreakNode) or prev.text.endswith(" "):
            value = value.lstrip(" ")
        if not value:
            continue

        if isinstance(prev, TextNode) and prev.marks == node.marks:
            result[-1] = prev.model_copy(update={"text": prev.text + value})
        else:
            result.append(node.model_copy(update={"text": value}))

    _rstrip_last(result)
    return result


class ParagraphConverter:
    """Appends converted paragraph content into a caller-owned builder.

    In inline mode the paragraph is always emitted, even when empty, since
    list items need one; in block mode an empty paragraph is dropped.
    Preformatted blocks found inside the element follow the paragraph as
    separate codeBlock nodes.
    """

    def __init__(self, adf_builder: ADFBuilder):
        self.builder = adf_builder

    def add_items(self, element: Tag, file_context: str, inline: bool = True) -> None:
        inlines: list[InlineNode] = []
        blocks: list[CodeBlockNode] = []
        self._walk(element, file_context, [], inlines, blocks)

        content = normalize_inline(inlines)
        if content or inline:
            self.builder.add_item(builder.paragraph(content))
        for block in blocks:
            self.builder.add_item(block)

    def convert_inline(self, element: Tag, file_context: str) -> list[InlineNode]:
        """Inline nodes of element without wrapping them in a paragraph."""
        inlines: list[InlineNode] = []
        self._walk(element, file_context, [], inlines, [])
        return normalize_inline(inlines)

    def _walk(
        self,
        node: Tag,
        file_context: str,
        marks: list[Mark],
        inlines: list[InlineNode],
        blocks: list[CodeBlockNode],
    ) -> None:
        for child in dom.child_nodes(node):
            if dom.is_text(child):
                inlines.append(builder.text(str(child), marks))
            elif isinstance(child, Tag):
                self._walk_element(child, file_context, marks, inlines, blocks)

    def _walk_element(
        self,
        element: Tag,
        file_context: str,
        marks: list[Mark],
        inlines: list[InlineNode],
        blocks: list[CodeBlockNode],
    ) -> None:
        name = element.name
        if name in _SKIP_TAGS:
            return
        if name == "br":
            inlines.append(builder.hard_break())
        elif name == "img":
            alt = dom.get_attr(element, "alt")
            if alt:
                inlines.append(builder.text(alt, marks))
        elif name == "pre":
            language = _code_language(element)
            logger.debug(f"Paragraph: splitting out code block (language={language})")
            blocks.append(builder.code_block(element.get_text().rstrip("\n"), language))
        elif name == "a":
            href = dom.get_attr(element, "data-href") or dom.get_attr(element, "href") or ""
            link = builder.mark("link", resolve_href(href, file_context))
            self._walk(element, file_context, self._with_mark(marks, link), inlines, blocks)
        elif name in _MARK_TAGS:
            self._walk(element, file_context, self._with_mark(marks, builder.mark(_MARK_TAGS[name])), inlines, blocks)
        else:
            # Unknown elements are transparent: keep their content, drop the tag
            self._walk(element, file_context, marks, inlines, blocks)

    def _with_mark(self, marks: list[Mark], new: Mark) -> list[Mark]:
        if any(existing.type == new.type for existing in marks):
            return marks
        return [*marks, new]
