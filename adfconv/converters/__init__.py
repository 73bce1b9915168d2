"""HTML to ADF converters."""

from adfconv.converters.document import DocumentConverter, html_to_adf
from adfconv.converters.lists import ListConverter, convert_list, is_task_checked, is_task_item
from adfconv.converters.paragraph import ParagraphConverter, resolve_href

__all__ = [
    "DocumentConverter",
    "ListConverter",
    "ParagraphConverter",
    "convert_list",
    "html_to_adf",
    "is_task_checked",
    "is_task_item",
    "resolve_href",
]
