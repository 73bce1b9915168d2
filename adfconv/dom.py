"""Minimal document-fragment helpers over BeautifulSoup trees.

Converters only read the source tree. Anything they need to reshape
(scratch paragraphs, checkbox-free clones) is built from copies.
"""

import copy

from bs4 import BeautifulSoup, NavigableString, PageElement, Tag
from bs4.element import PreformattedString

LIST_TAGS = ("ul", "ol")


def parse_fragment(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def create_paragraph() -> Tag:
    """Create a detached, empty <p> element."""
    return BeautifulSoup("", "html.parser").new_tag("p")


def create_line_break() -> Tag:
    return BeautifulSoup("", "html.parser").new_tag("br")


def is_element(node: PageElement, *names: str) -> bool:
    if not isinstance(node, Tag):
        return False
    return not names or node.name in names


def is_text(node: PageElement) -> bool:
    """True for character data; comments, doctypes and CDATA are not text."""
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def is_list(node: PageElement) -> bool:
    return is_element(node, *LIST_TAGS)


def is_checkbox(node: PageElement) -> bool:
    return is_element(node, "input") and str(node.get("type", "")).strip().lower() == "checkbox"


def child_nodes(node: Tag) -> list[PageElement]:
    """Snapshot of direct children, safe to iterate while building copies."""
    return list(node.contents)


def text_content(node: PageElement) -> str:
    if isinstance(node, Tag):
        return node.get_text()
    if is_text(node):
        return str(node)
    return ""


def has_content(node: PageElement) -> bool:
    """True when node contributes visible inline content: non-blank text, a <br> or an <img alt>."""
    if text_content(node).strip():
        return True
    if not isinstance(node, Tag):
        return False
    if is_element(node, "br") or (is_element(node, "img") and get_attr(node, "alt")):
        return True
    return node.find(lambda tag: tag.name == "br" or (tag.name == "img" and bool(tag.get("alt")))) is not None


def get_attr(node: Tag, name: str) -> str | None:
    value = node.get(name)
    if value is None:
        return None
    if isinstance(value, list):  # multi-valued attributes such as class
        return " ".join(value)
    return str(value)


def has_attr(node: Tag, name: str) -> bool:
    return node.has_attr(name)


def clone(node: PageElement) -> PageElement:
    """Deep copy detached from the source tree."""
    return copy.copy(node)


def find_checkboxes(node: Tag, include_nested_lists: bool = True) -> list[Tag]:
    """Checkbox controls under node, in document order.

    With include_nested_lists=False, checkboxes inside a nested <ul>/<ol>
    belong to that list's items and are skipped.
    """
    found: list[Tag] = []

    def walk(parent: Tag) -> None:
        for child in parent.children:
            if not isinstance(child, Tag):
                continue
            if is_checkbox(child):
                found.append(child)
            elif include_nested_lists or not is_list(child):
                walk(child)

    walk(node)
    return found


def clone_without_checkboxes(node: Tag) -> Tag:
    cloned = copy.copy(node)
    for checkbox in find_checkboxes(cloned):
        checkbox.decompose()
    return cloned


def append(parent: Tag, node: PageElement) -> None:
    parent.append(node)
