"""Tests for the callout and equation renderer rules."""

import unittest

from bs4 import BeautifulSoup

from converters.plugins import (
    BLOCK_EQUATION_RULE,
    CALLOUT_RULE,
    INLINE_EQUATION_RULE,
    LATEX_PARAGRAPH_RULE,
    class_contains,
    default_rules,
    render_block_equation,
    render_callout,
    render_inline_equation,
    render_latex_paragraph,
)
from models import Handled, Priority, TagType, TRY_NEXT


class StubContext:
    """Records nested render requests instead of dispatching them."""

    def __init__(self, output='<rendered>'):
        self.output = output
        self.parent_tags = frozenset()
        self.rendered = []

    def render(self, node):
        self.rendered.append(node)
        return self.output


def first(html, tag):
    return BeautifulSoup(html, 'lxml').find(tag)


class TestCalloutRule(unittest.TestCase):
    def test_warning_callout_with_paragraph(self):
        node = first('<div class="callout" data-callout="warning"><p>Hello</p></div>', 'div')
        outcome = render_callout(node, StubContext())
        self.assertEqual(outcome, Handled("\n\n> [!warning]\n> Hello\n"))

    def test_type_defaults_to_note(self):
        node = first('<div class="callout"><p>Remember this</p></div>', 'div')
        outcome = render_callout(node, StubContext())
        self.assertEqual(outcome.output, "\n\n> [!note]\n> Remember this\n")

    def test_empty_type_is_kept_empty(self):
        node = first('<div class="callout" data-callout=""><p>Hi</p></div>', 'div')
        outcome = render_callout(node, StubContext())
        self.assertEqual(outcome.output, "\n\n> [!]\n> Hi\n")

    def test_direct_text_is_trimmed_and_quoted(self):
        node = first('<div class="callout" data-callout="info">   Plain text   </div>', 'div')
        outcome = render_callout(node, StubContext())
        self.assertEqual(outcome.output, "\n\n> [!info]\n> Plain text\n")

    def test_multiple_paragraphs_each_get_a_line(self):
        html = '<div class="callout" data-callout="tip"><p>One</p><p>  Two  </p><p> </p></div>'
        outcome = render_callout(first(html, 'div'), StubContext())
        self.assertEqual(outcome.output, "\n\n> [!tip]\n> One\n> Two\n")

    def test_paragraph_uses_only_direct_text(self):
        html = '<div class="callout"><p>Hello <strong>bold</strong>world</p></div>'
        outcome = render_callout(first(html, 'div'), StubContext())
        self.assertEqual(outcome.output, "\n\n> [!note]\n> Hello world\n")

    def test_other_elements_are_rendered_unquoted(self):
        html = '<div class="callout" data-callout="info"><p>Intro</p><ul><li>Item</li></ul></div>'
        context = StubContext(output='\n\n- Item\n')
        outcome = render_callout(first(html, 'div'), context)
        self.assertEqual(outcome.output, "\n\n> [!info]\n> Intro\n\n\n- Item\n")
        self.assertEqual([n.name for n in context.rendered], ['ul'])

    def test_class_list_with_callout_marker(self):
        node = first('<div class="callout info" data-callout="info"><p>x</p></div>', 'div')
        self.assertIsInstance(render_callout(node, StubContext()), Handled)

    def test_declines_without_callout_class(self):
        node = first('<div class="panel" data-callout="warning"><p>Hello</p></div>', 'div')
        self.assertIs(render_callout(node, StubContext()), TRY_NEXT)

    def test_declines_without_class(self):
        node = first('<div><p>Hello</p></div>', 'div')
        self.assertIs(render_callout(node, StubContext()), TRY_NEXT)


class TestBlockEquationRule(unittest.TestCase):
    def test_renders_unescaped_latex_with_spacing(self):
        node = first(r'<div class="block-equation" data-content="$$\\frac{a}{b}$$"></div>', 'div')
        outcome = render_block_equation(node, StubContext())
        self.assertEqual(outcome, Handled("\n" + r"$$\frac{a}{b}$$" + "\n\n"))

    def test_declines_without_data_content(self):
        node = first('<div class="block-equation"><p>x</p></div>', 'div')
        self.assertIs(render_block_equation(node, StubContext()), TRY_NEXT)

    def test_declines_with_empty_data_content(self):
        node = first('<div class="block-equation" data-content=""></div>', 'div')
        self.assertIs(render_block_equation(node, StubContext()), TRY_NEXT)

    def test_declines_for_other_divs(self):
        node = first('<div class="callout" data-content="$$x$$"></div>', 'div')
        self.assertIs(render_block_equation(node, StubContext()), TRY_NEXT)


class TestInlineEquationRule(unittest.TestCase):
    def test_always_declines(self):
        equation = first('<span class="inline-equation">$x^2$</span>', 'span')
        plain = first('<span class="highlight">text</span>', 'span')
        self.assertIs(render_inline_equation(equation, StubContext()), TRY_NEXT)
        self.assertIs(render_inline_equation(plain, StubContext()), TRY_NEXT)


class TestLatexParagraphRule(unittest.TestCase):
    def test_unescapes_text_children(self):
        node = first(r'<p>Euler: e^{i\\pi} + 1 = 0</p>', 'p')
        outcome = render_latex_paragraph(node, StubContext())
        self.assertEqual(outcome.output, "\n\n" + r"Euler: e^{i\pi} + 1 = 0" + "\n\n")

    def test_renders_element_children_through_context(self):
        node = first(r'<p>Let \\alpha be <em>small</em></p>', 'p')
        context = StubContext(output='*small*')
        outcome = render_latex_paragraph(node, context)
        self.assertEqual(outcome.output, "\n\n" + r"Let \alpha be *small*" + "\n\n")
        self.assertEqual([n.name for n in context.rendered], ['em'])

    def test_declines_without_backslash(self):
        node = first('<p>No maths here</p>', 'p')
        self.assertIs(render_latex_paragraph(node, StubContext()), TRY_NEXT)

    def test_backslash_only_inside_child_element_declines(self):
        node = first(r'<p>Code: <code>C:\\temp</code></p>', 'p')
        self.assertIs(render_latex_paragraph(node, StubContext()), TRY_NEXT)


class TestRuleRegistration(unittest.TestCase):
    def test_default_rules_in_registration_order(self):
        self.assertEqual(
            default_rules(),
            (CALLOUT_RULE, BLOCK_EQUATION_RULE, INLINE_EQUATION_RULE, LATEX_PARAGRAPH_RULE),
        )

    def test_rules_target_expected_tags(self):
        self.assertEqual((CALLOUT_RULE.target_tag, CALLOUT_RULE.tag_type), ('div', TagType.BLOCK))
        self.assertEqual((BLOCK_EQUATION_RULE.target_tag, BLOCK_EQUATION_RULE.tag_type), ('div', TagType.BLOCK))
        self.assertEqual((INLINE_EQUATION_RULE.target_tag, INLINE_EQUATION_RULE.tag_type), ('span', TagType.INLINE))
        self.assertEqual((LATEX_PARAGRAPH_RULE.target_tag, LATEX_PARAGRAPH_RULE.tag_type), ('p', TagType.BLOCK))

    def test_all_shipped_rules_use_standard_priority(self):
        self.assertTrue(all(rule.priority == Priority.STANDARD for rule in default_rules()))

    def test_class_contains_is_substring_match(self):
        self.assertTrue(class_contains(first('<div class="my-callout-box"></div>', 'div'), 'callout'))
        self.assertFalse(class_contains(first('<div id="callout"></div>', 'div'), 'callout'))


if __name__ == '__main__':
    unittest.main()
