"""Markdown converter dispatching note HTML through renderer rules."""

import logging
import re
from typing import Any, Dict, Iterable, Optional, Set, Tuple

from bs4 import BeautifulSoup, Tag
from markdownify import ATX, MarkdownConverter as MarkdownifyConverter

from models import Handled, RendererRule, TagType

logger = logging.getLogger('zendown_export.converters.markdownconverter')

BLOCK_TAGS = frozenset({
    'address', 'article', 'aside', 'blockquote', 'dd', 'div', 'dl', 'dt',
    'fieldset', 'figcaption', 'figure', 'footer', 'form',
    'h1', 'h2', 'h3', 'h4', 'h5', 'h6', 'header', 'hr', 'li', 'main',
    'nav', 'ol', 'p', 'pre', 'section', 'table', 'tbody', 'td', 'tfoot',
    'th', 'thead', 'tr', 'ul',
})


def tag_type_for(tag_name: str) -> TagType:
    """Classify a tag name as block or inline."""
    return TagType.BLOCK if tag_name in BLOCK_TAGS else TagType.INLINE


class RendererRegistry:
    """Immutable, priority-ordered collection of renderer rules."""

    def __init__(self, rules: Iterable[RendererRule] = ()):
        # sorted() is stable, so equal priorities keep registration order
        self._rules: Tuple[RendererRule, ...] = tuple(sorted(rules, key=lambda rule: rule.priority))
        index: Dict[Tuple[str, TagType], Tuple[RendererRule, ...]] = {}
        for rule in self._rules:
            key = (rule.target_tag, rule.tag_type)
            index[key] = index.get(key, ()) + (rule,)
        self._index = index

    @property
    def rules(self) -> Tuple[RendererRule, ...]:
        return self._rules

    def rules_for(self, tag_name: str, tag_type: TagType) -> Tuple[RendererRule, ...]:
        return self._index.get((tag_name, tag_type), ())

    def __len__(self) -> int:
        return len(self._rules)


class RenderContext:
    """Traversal state handed to a rule for the node it is rendering."""

    def __init__(self, converter: 'NoteMarkdownConverter', parent_tags: Set[str]):
        self._converter = converter
        self.parent_tags = frozenset(parent_tags)

    def render(self, node) -> str:
        """Render a child node through the full dispatcher."""
        return self._converter.process_element(node, parent_tags=set(self.parent_tags))


class NoteMarkdownConverter(MarkdownifyConverter):
    """
    Converts note HTML to Markdown.

    Each element is first offered to the renderer rules registered for its
    tag and tag type, in priority order. The first rule returning ``Handled``
    owns the node. When every rule declines, markdownify's standard
    conversion renders it.
    """

    def __init__(self, rules: Iterable[RendererRule] = (), logger: logging.Logger = None,
                 config: Dict[str, Any] = None, **kwargs):
        """Initialize the converter with its rules and markdownify options."""
        self.config = config or {}

        markdownify_options = {
            'heading_style': self.config.get('heading_style', ATX),
            'bullets': self.config.get('bullets', '-'),
            'escape_asterisks': False,
            'escape_underscores': False,
            'escape_misc': False,
            'wrap': self.config.get('wrap', False),
            'wrap_width': self.config.get('wrap_width', 80),
            'code_language_callback': self._extract_code_language,
        }
        markdownify_options.update(kwargs)
        super().__init__(**markdownify_options)

        self.logger = logger or logging.getLogger('zendown_export.converters.markdownconverter')
        self.registry = rules if isinstance(rules, RendererRegistry) else RendererRegistry(rules)

    def to_markdown(self, html_content: str) -> str:
        """
        Convert a note's HTML content to Markdown.

        Args:
            html_content: Note body as stored by the editor

        Returns:
            Markdown text ending in a single newline, or an empty string
        """
        soup = self._parse_html(html_content)
        # lxml wraps fragments in <html><body>; only the body is note content
        root = soup.body or soup
        markdown = self.process_tag(root, parent_tags=set())
        return self._clean_markdown(markdown)

    def render(self, node: Tag, parent_tags: Optional[Set[str]] = None) -> str:
        """Render one element, trying rules before the baseline conversion."""
        if parent_tags is None:
            parent_tags = set()

        rules = self.registry.rules_for(node.name, tag_type_for(node.name))
        if rules:
            context = RenderContext(self, self._child_parent_tags(node, parent_tags))
            for rule in rules:
                outcome = rule.handler(node, context)
                if isinstance(outcome, Handled):
                    return outcome.output
                self.logger.debug(f"Rule '{rule.name}' declined <{node.name}>")

        return super().process_tag(node, parent_tags=parent_tags)

    def process_tag(self, node, parent_tags=None):
        # markdownify recurses through process_tag, so every element passes
        # through the rule registry
        return self.render(node, parent_tags)

    def _parse_html(self, html_content: str) -> BeautifulSoup:
        """Parse HTML content with BeautifulSoup."""
        return BeautifulSoup(html_content or '', 'lxml')

    @staticmethod
    def _child_parent_tags(node: Tag, parent_tags: Set[str]) -> Set[str]:
        tags = set(parent_tags)
        tags.add(node.name)
        if re.match(r'^h[1-6]$', node.name) or node.name in ('td', 'th'):
            tags.add('_inline')
        if node.name in ('pre', 'code', 'kbd', 'samp'):
            tags.add('_noformat')
        return tags

    def _clean_markdown(self, markdown: str) -> str:
        """Trim trailing whitespace and collapse runs of blank lines."""
        lines = [line.rstrip() for line in markdown.split('\n')]
        markdown = '\n'.join(lines)
        markdown = re.sub(r'\n{3,}', '\n\n', markdown)
        markdown = markdown.strip('\n')
        return markdown + '\n' if markdown else ''

    def _extract_code_language(self, element) -> str:
        """Extract programming language from a pre element's code child."""
        code_el = element.find('code') if element.name == 'pre' else element
        if code_el is None:
            return ''

        classes = code_el.get('class', [])
        for cls in classes:
            if str(cls).startswith('language-'):
                return str(cls).replace('language-', '')
            if str(cls).startswith('lang-'):
                return str(cls).replace('lang-', '')

        return code_el.get('data-language') or ''


__all__ = [
    'BLOCK_TAGS',
    'tag_type_for',
    'RendererRegistry',
    'RenderContext',
    'NoteMarkdownConverter',
]
