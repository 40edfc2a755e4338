"""Renderer rules for the note editor's callout and equation markup."""

import logging
from typing import Tuple

from bs4 import Comment, NavigableString, Tag

from models import (
    Handled,
    Priority,
    RendererRule,
    RenderOutcome,
    TagType,
    TRY_NEXT,
)
from .latex import unescape_latex

logger = logging.getLogger('zendown_export.converters.plugins')

DEFAULT_CALLOUT_TYPE = 'note'


def get_class_string(node: Tag) -> str:
    """Return the raw class attribute as a single string."""
    classes = node.get('class', '')
    if isinstance(classes, (list, tuple)):
        return ' '.join(classes)
    return classes or ''


def class_contains(node: Tag, marker: str) -> bool:
    """Substring check against the class attribute, as the editor emits it."""
    return marker in get_class_string(node)


def _is_text(node) -> bool:
    return isinstance(node, NavigableString) and not isinstance(node, Comment)


def render_callout(node: Tag, context) -> RenderOutcome:
    """Render a callout container as an Obsidian-style ``> [!type]`` block."""
    if not class_contains(node, 'callout'):
        return TRY_NEXT

    callout_type = node.get('data-callout', DEFAULT_CALLOUT_TYPE)
    # Blank line first so the marker never joins a preceding line or quote
    parts = [f"\n\n> [!{callout_type}]\n"]

    for child in node.children:
        if _is_text(child):
            text = str(child).strip()
            if text:
                parts.append(f"> {text}\n")
        elif isinstance(child, Tag):
            if child.name == 'p':
                # Only the paragraph's direct text, inline markup is dropped
                text = ''.join(str(c) for c in child.children if _is_text(c)).strip()
                if text:
                    parts.append(f"> {text}\n")
            else:
                parts.append(context.render(child))

    logger.debug(f"Rendered callout of type '{callout_type}'")
    return Handled(''.join(parts))


def render_block_equation(node: Tag, context) -> RenderOutcome:
    """Render a block equation from its ``data-content`` LaTeX."""
    if not class_contains(node, 'block-equation'):
        return TRY_NEXT

    data_content = node.get('data-content')
    if not data_content:
        return TRY_NEXT

    # data-content already carries the $$ delimiters
    return Handled(f"\n{unescape_latex(data_content)}\n\n")


def render_inline_equation(node: Tag, context) -> RenderOutcome:
    """Inline equations are left to the baseline span rendering."""
    if not class_contains(node, 'inline-equation'):
        return TRY_NEXT
    return TRY_NEXT


def render_latex_paragraph(node: Tag, context) -> RenderOutcome:
    """Render a paragraph whose text carries escaped LaTeX."""
    has_latex = any(_is_text(child) and '\\' in child for child in node.children)
    if not has_latex:
        return TRY_NEXT

    parts = []
    for child in node.children:
        if _is_text(child):
            parts.append(unescape_latex(str(child)))
        elif isinstance(child, Tag):
            parts.append(context.render(child))

    text = ''.join(parts).strip()
    if '_inline' in context.parent_tags:
        return Handled(' ' + text + ' ')
    return Handled(f"\n\n{text}\n\n" if text else '')


CALLOUT_RULE = RendererRule(
    name='callout',
    target_tag='div',
    tag_type=TagType.BLOCK,
    handler=render_callout,
    priority=Priority.STANDARD,
)

BLOCK_EQUATION_RULE = RendererRule(
    name='block-equation',
    target_tag='div',
    tag_type=TagType.BLOCK,
    handler=render_block_equation,
    priority=Priority.STANDARD,
)

INLINE_EQUATION_RULE = RendererRule(
    name='inline-equation',
    target_tag='span',
    tag_type=TagType.INLINE,
    handler=render_inline_equation,
    priority=Priority.STANDARD,
)

LATEX_PARAGRAPH_RULE = RendererRule(
    name='text-processing',
    target_tag='p',
    tag_type=TagType.BLOCK,
    handler=render_latex_paragraph,
    priority=Priority.STANDARD,
)


def default_rules() -> Tuple[RendererRule, ...]:
    """Shipped rules in registration order."""
    return (
        CALLOUT_RULE,
        BLOCK_EQUATION_RULE,
        INLINE_EQUATION_RULE,
        LATEX_PARAGRAPH_RULE,
    )


__all__ = [
    'DEFAULT_CALLOUT_TYPE',
    'get_class_string',
    'class_contains',
    'render_callout',
    'render_block_equation',
    'render_inline_equation',
    'render_latex_paragraph',
    'CALLOUT_RULE',
    'BLOCK_EQUATION_RULE',
    'INLINE_EQUATION_RULE',
    'LATEX_PARAGRAPH_RULE',
    'default_rules',
]
