"""Tests for LaTeX unescaping of equation source."""

import unittest

from converters.latex import unescape_latex


class TestUnescapeLatex(unittest.TestCase):
    def test_command_names_lose_one_backslash(self):
        self.assertEqual(unescape_latex(r'\\phi'), r'\phi')
        self.assertEqual(unescape_latex(r'\\left( x \\right)'), r'\left( x \right)')

    def test_brackets(self):
        self.assertEqual(unescape_latex(r'\\{'), r'\{')
        self.assertEqual(unescape_latex(r'\\[ \\]'), r'\[ \]')
        self.assertEqual(unescape_latex(r'\\(\\)'), r'\(\)')

    def test_escaped_space_is_preserved(self):
        self.assertEqual(unescape_latex('\\\\ '), '\\\\ ')

    def test_other_symbols(self):
        self.assertEqual(unescape_latex(r'a \\& b \\% c'), r'a \& b \% c')
        self.assertEqual(unescape_latex(r'\\,'), r'\,')

    def test_line_break_is_untouched(self):
        self.assertEqual(unescape_latex('\\\\\\\\'), '\\\\\\\\')

    def test_line_break_followed_by_space_is_untouched(self):
        self.assertEqual(unescape_latex(r'a \\\\ b'), r'a \\\\ b')

    def test_matrix_rows(self):
        escaped = r'$$\\begin{matrix} a & b \\\\ c & d \\end{matrix}$$'
        expected = r'$$\begin{matrix} a & b \\\\ c & d \end{matrix}$$'
        self.assertEqual(unescape_latex(escaped), expected)

    def test_plain_text_unchanged(self):
        self.assertEqual(unescape_latex('x^2 + y^2 = z^2'), 'x^2 + y^2 = z^2')

    def test_single_backslashes_unchanged(self):
        self.assertEqual(unescape_latex(r'\frac{a}{b}'), r'\frac{a}{b}')

    def test_empty_and_none(self):
        self.assertEqual(unescape_latex(''), '')
        self.assertEqual(unescape_latex(None), '')


if __name__ == '__main__':
    unittest.main()
