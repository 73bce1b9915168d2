"""Transform an HTML fragment into an ADF document.

Walks the top-level nodes of the fragment and dispatches each block element
to its handler. Runs of loose inline content between blocks are collected
into paragraphs.
"""

from bs4 import PageElement, Tag
from loguru import logger

from adfconv import dom
from adfconv.adf import builder
from adfconv.adf.builder import ADFBuilder
from adfconv.adf.models import DocNode
from adfconv.config import Settings, get_settings
from adfconv.converters.lists import ListConverter
from adfconv.converters.paragraph import ParagraphConverter

# Elements that only group other blocks; their children are converted in place
_CONTAINER_TAGS = {"html", "body", "div", "section", "article", "main", "header", "footer", "blockquote", "details"}

_HEADING_TAGS = {"h1", "h2", "h3", "h4", "h5", "h6"}


class DocumentConverter:
    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self.list_converter = ListConverter(settings=self.settings)

    def convert(self, html: str, file_context: str = "") -> DocNode:
        """Convert an HTML fragment to an ADF doc node."""
        fragment = dom.parse_fragment(html)
        adf_builder = ADFBuilder()
        self._convert_children(fragment, file_context, adf_builder)
        logger.debug(f"Document: converted {len(adf_builder)} top-level blocks")
        return builder.doc(adf_builder.build())  # type: ignore[arg-type]

    def _convert_children(self, node: Tag, file_context: str, adf_builder: ADFBuilder) -> None:
        pending = dom.create_paragraph()

        for child in dom.child_nodes(node):
            if isinstance(child, Tag) and self._is_block(child):
                self._flush(pending, file_context, adf_builder)
                pending = dom.create_paragraph()
                self._convert_node(child, file_context, adf_builder)
            elif dom.is_text(child) or isinstance(child, Tag):
                dom.append(pending, dom.clone(child))

        self._flush(pending, file_context, adf_builder)

    def _is_block(self, node: Tag) -> bool:
        return node.name in _CONTAINER_TAGS or node.name in _HEADING_TAGS or node.name in ("p", "ul", "ol", "hr", "pre")

    def _convert_node(self, node: Tag, file_context: str, adf_builder: ADFBuilder) -> None:
        handlers = {
            "p": self._convert_paragraph,
            "ul": self._convert_list,
            "ol": self._convert_list,
            "hr": self._convert_rule,
            "pre": self._convert_code,
        }

        handler = handlers.get(node.name)
        if handler:
            handler(node, file_context, adf_builder)
        elif node.name in _HEADING_TAGS:
            self._convert_heading(node, file_context, adf_builder)
        elif node.name in _CONTAINER_TAGS:
            self._convert_children(node, file_context, adf_builder)

    def _flush(self, pending: Tag, file_context: str, adf_builder: ADFBuilder) -> None:
        if dom.child_nodes(pending):
            ParagraphConverter(adf_builder).add_items(pending, file_context, inline=False)

    def _convert_paragraph(self, node: Tag, file_context: str, adf_builder: ADFBuilder) -> None:
        ParagraphConverter(adf_builder).add_items(node, file_context, inline=False)

    def _convert_list(self, node: Tag, file_context: str, adf_builder: ADFBuilder) -> None:
        self.list_converter.add_list(node, file_context, adf_builder)

    def _convert_heading(self, node: Tag, file_context: str, adf_builder: ADFBuilder) -> None:
        content = ParagraphConverter(adf_builder).convert_inline(node, file_context)
        adf_builder.add_item(builder.heading(int(node.name[1]), content))

    def _convert_rule(self, node: PageElement, file_context: str, adf_builder: ADFBuilder) -> None:
        adf_builder.add_item(builder.rule())

    def _convert_code(self, node: Tag, file_context: str, adf_builder: ADFBuilder) -> None:
        # The paragraph converter splits <pre> out as a code block; the wrapper paragraph is empty
        wrapper = dom.create_paragraph()
        dom.append(wrapper, dom.clone(node))
        ParagraphConverter(adf_builder).add_items(wrapper, file_context, inline=False)


def html_to_adf(html: str, file_context: str = "", settings: Settings | None = None) -> DocNode:
    """Convert an HTML fragment to an ADF document."""
    return DocumentConverter(settings=settings).convert(html, file_context)
