"""Convert rendered HTML lists into ADF list blocks.

A single <ul>/<ol> may interleave plain items and checkbox items. Each <li>
is classified on its own, and consecutive items of the same kind are grouped
into one block, so a mixed list becomes several sibling blocks in source
order (bullet/ordered runs for plain items, taskList runs for tasks).
"""

from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Literal

from bs4 import PageElement, Tag
from loguru import logger

from adfconv import dom
from adfconv.adf import builder
from adfconv.adf.builder import ADFBuilder
from adfconv.adf.models import (
    ADFNode,
    ListBlock,
    ListItemNode,
    ParagraphNode,
    TaskItemNode,
    TextNode,
)
from adfconv.config import Settings, get_settings
from adfconv.converters.paragraph import ParagraphConverter
from adfconv.exceptions import UnsupportedElementError
from adfconv.hashing import calculate_task_list_id

ItemKind = Literal["task", "standard"]

ParagraphConverterFactory = Callable[[ADFBuilder], ParagraphConverter]


@dataclass
class ConvertedItem:
    kind: ItemKind
    node: ListItemNode | TaskItemNode


def is_task_item(li: Tag) -> bool:
    """An item is a task if it carries a task-state marker or its own checkbox."""
    if dom.get_attr(li, "data-task"):
        return True
    return bool(dom.find_checkboxes(li, include_nested_lists=False))


def is_task_checked(li: Tag) -> bool:
    data_task = dom.get_attr(li, "data-task")
    if data_task:
        return data_task.strip().lower() == "x"

    checkboxes = dom.find_checkboxes(li, include_nested_lists=False)
    return bool(checkboxes) and dom.has_attr(checkboxes[0], "checked")


def _list_start(node: Tag) -> int:
    start = dom.get_attr(node, "start")
    try:
        return int(start) if start is not None else 1
    except ValueError:
        return 1


class ListConverter:
    """Builds ADF list blocks from <ul>/<ol> elements.

    Paragraph content of every item goes through a fresh ParagraphConverter
    writing into its own ADFBuilder, so items never share output state.
    """

    def __init__(
        self,
        paragraph_converter_factory: ParagraphConverterFactory | None = None,
        settings: Settings | None = None,
    ):
        self.paragraph_converter_factory = paragraph_converter_factory or ParagraphConverter
        self.settings = settings or get_settings()

    def add_list(self, node: Tag, file_context: str, adf_builder: ADFBuilder) -> None:
        """Convert node and append the resulting blocks into adf_builder."""
        for block in self.convert(node, file_context):
            adf_builder.add_item(block)

    def convert(self, node: Tag, file_context: str) -> list[ListBlock]:
        if not dom.is_list(node):
            raise UnsupportedElementError(getattr(node, "name", None))
        return self._build_lists(node, file_context, parallel=self.settings.max_workers > 1)

    def _build_lists(self, node: Tag, file_context: str, parallel: bool = False) -> list[ListBlock]:
        items = [child for child in dom.child_nodes(node) if dom.is_element(child, "li")]
        if parallel and len(items) > 1:
            with ThreadPoolExecutor(max_workers=self.settings.max_workers) as executor:
                converted = list(executor.map(lambda li: self._convert_item(li, file_context), items))
        else:
            converted = [self._convert_item(li, file_context) for li in items]

        blocks = self._group(node, converted)
        logger.debug(f"List: <{node.name}> with {len(items)} items -> {len(blocks)} blocks")
        return blocks

    def _group(self, node: Tag, converted: list[ConvertedItem]) -> list[ListBlock]:
        """Split items into maximal runs of one kind, preserving order."""
        ordered = node.name == "ol"
        start = _list_start(node)

        lists: list[ListBlock] = []
        current: ListBlock | None = None
        current_kind: ItemKind | None = None

        for index, item in enumerate(converted):
            if current is None or current_kind != item.kind:
                if current is not None:
                    lists.append(self._close(current))
                if item.kind == "task":
                    current = builder.task_list_item([])
                elif ordered:
                    current = builder.ordered_list_item([], order=start + index)
                else:
                    current = builder.bullet_list_item([])
                current_kind = item.kind
            current.content.append(item.node)  # type: ignore[arg-type]

        if current is not None:
            lists.append(self._close(current))

        return lists

    def _close(self, block: ListBlock) -> ListBlock:
        if block.type == "taskList":
            block.attrs.localId = calculate_task_list_id([item.attrs.localId for item in block.content])
        return block

    def _convert_item(self, li: Tag, file_context: str) -> ConvertedItem:
        if is_task_item(li):
            content = self._build_task_content(li, file_context)
            checked = is_task_checked(li)
            local_id = self._task_local_id(li, content)
            return ConvertedItem("task", builder.task_item_from_content(content, checked, local_id))
        return ConvertedItem("standard", self._build_standard_list_item(li, file_context))

    def _build_standard_list_item(self, li: Tag, file_context: str) -> ListItemNode:
        paragraph, sub_lists = self._split_item(li, file_context, strip_checkboxes=False)

        items_builder = ADFBuilder()
        self.paragraph_converter_factory(items_builder).add_items(paragraph, file_context, True)

        # Everything the paragraph converter produced is kept, not just the first paragraph
        list_item = builder.list_item(items_builder.build())  # type: ignore[arg-type]
        list_item.content.extend(sub_lists)
        return list_item

    def _build_task_content(self, li: Tag, file_context: str) -> list[ADFNode]:
        paragraph_el, sub_lists = self._split_item(li, file_context, strip_checkboxes=True)

        items_builder = ADFBuilder()
        self.paragraph_converter_factory(items_builder).add_items(paragraph_el, file_context, True)
        paragraph = next((item for item in items_builder.build() if isinstance(item, ParagraphNode)), None)

        if paragraph is None or not paragraph.content:
            fallback_text = (
                dom.text_content(paragraph_el).strip()
                or dom.text_content(li).strip()
                or self.settings.fallback_task_text
            )
            logger.debug(f"List: task item has no inline content, falling back to {fallback_text!r}")
            paragraph = builder.paragraph_item(fallback_text)

        return [paragraph, *sub_lists]

    def _split_item(self, li: Tag, file_context: str, strip_checkboxes: bool) -> tuple[Tag, list[ListBlock]]:
        """Separate an item into a scratch paragraph and its converted nested lists.

        The scratch paragraph is assembled from copies; li itself is untouched.
        """
        paragraph = dom.create_paragraph()
        has_content = False
        sub_lists: list[ListBlock] = []

        for child in dom.child_nodes(li):
            if dom.is_list(child):
                # Nested lists are converted sequentially, even under a parallel top level
                sub_lists.extend(self._build_lists(child, file_context))
                continue

            if strip_checkboxes and dom.is_checkbox(child):
                continue

            if dom.text_content(child) == "\n":
                continue

            copied = self._copy_child(child, strip_checkboxes)
            if copied is None:
                continue

            if dom.is_element(copied, "p"):
                if not has_content:
                    paragraph = copied
                else:
                    dom.append(paragraph, dom.create_line_break())
                    for grandchild in dom.child_nodes(copied):
                        dom.append(paragraph, grandchild.extract())
                has_content = True
                continue

            dom.append(paragraph, copied)
            if dom.has_content(copied):
                has_content = True

        return paragraph, sub_lists

    def _copy_child(self, child: PageElement, strip_checkboxes: bool) -> PageElement | None:
        if isinstance(child, Tag):
            return dom.clone_without_checkboxes(child) if strip_checkboxes else dom.clone(child)
        if dom.is_text(child):
            return dom.clone(child)
        return None

    def _task_local_id(self, li: Tag, task_content: list[ADFNode]) -> str:
        paragraph = next((item for item in task_content if isinstance(item, ParagraphNode)), None)
        content_text = ""
        if paragraph is not None:
            content_text = "".join(item.text for item in paragraph.content if isinstance(item, TextNode)).strip()

        return content_text or dom.text_content(li).strip() or self.settings.fallback_task_text


def convert_list(node: Tag, file_context: str = "", settings: Settings | None = None) -> list[ListBlock]:
    """Convert a <ul>/<ol> element into ADF list blocks."""
    return ListConverter(settings=settings).convert(node, file_context)
