"""Convert rendered HTML and Markdown into Atlassian Document Format."""

from adfconv.adf import ADFBuilder, DocNode, ListBlock, to_adf
from adfconv.config import Settings, get_settings
from adfconv.converters import (
    DocumentConverter,
    ListConverter,
    ParagraphConverter,
    convert_list,
    html_to_adf,
)
from adfconv.exceptions import ADFConversionError, InputReadError, UnsupportedElementError
from adfconv.markdown import markdown_to_adf, render_html

__all__ = [
    # Converters
    "ListConverter",
    "ParagraphConverter",
    "DocumentConverter",
    "convert_list",
    "html_to_adf",
    "markdown_to_adf",
    "render_html",
    # Output
    "ADFBuilder",
    "DocNode",
    "ListBlock",
    "to_adf",
    # Config
    "Settings",
    "get_settings",
    # Errors
    "ADFConversionError",
    "InputReadError",
    "UnsupportedElementError",
]
