"""Markdown parsing using markdown-it-py.

Configures markdown-it with the plugins we need:
- CommonMark base
- GFM tables and strikethrough
- GFM task lists (rendered as <li> items with a checkbox <input>)
"""

from markdown_it import MarkdownIt
from mdit_py_plugins.tasklists import tasklists_plugin

from adfconv.adf.models import DocNode
from adfconv.config import Settings
from adfconv.converters.document import html_to_adf


def create_parser() -> MarkdownIt:
    """Create configured markdown-it parser."""
    md = MarkdownIt("commonmark")
    md.enable("table")
    md.enable("strikethrough")
    md.use(tasklists_plugin)
    return md


# Singleton parser instance
_parser: MarkdownIt | None = None


def get_parser() -> MarkdownIt:
    """Get or create the singleton parser instance."""
    global _parser
    if _parser is None:
        _parser = create_parser()
    return _parser


def render_html(text: str) -> str:
    """Render markdown text to HTML."""
    return get_parser().render(text)


def markdown_to_adf(text: str, file_context: str = "", settings: Settings | None = None) -> DocNode:
    """Render markdown and convert the result to an ADF document.

    Args:
        text: Markdown source
        file_context: Path of the source file, used to resolve relative links

    Returns:
        Root doc node
    """
    return html_to_adf(render_html(text), file_context, settings=settings)
