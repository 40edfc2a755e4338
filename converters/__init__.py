"""Converters package for note HTML to Markdown conversion."""

import logging

from .latex import unescape_latex
from .markdown_converter import (
    NoteMarkdownConverter,
    RenderContext,
    RendererRegistry,
    tag_type_for,
)
from .plugins import default_rules

logger = logging.getLogger('zendown_export.converters')


def convert_html(html_content, rules=None, config=None, logger=None):
    """
    Convenience function to convert note HTML to Markdown.

    Args:
        html_content: Note body HTML
        rules: Optional renderer rules (the shipped rules when omitted)
        config: Optional markdownify option overrides
        logger: Optional logger instance (uses module logger if not provided)

    Returns:
        str: Converted Markdown

    Example:
        >>> from converters import convert_html
        >>> convert_html('<div class="callout" data-callout="tip"><p>Hi</p></div>')
        '> [!tip]\\n> Hi\\n'
    """
    if logger is None:
        logger = logging.getLogger('zendown_export.converters')

    if rules is None:
        rules = default_rules()
    converter = NoteMarkdownConverter(rules=rules, logger=logger, config=config)
    return converter.to_markdown(html_content)


__all__ = [
    'convert_html',
    'unescape_latex',
    'default_rules',
    'NoteMarkdownConverter',
    'RenderContext',
    'RendererRegistry',
    'tag_type_for',
]
