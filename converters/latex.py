"""LaTeX unescaping for equation source stored with doubled backslashes."""

import re

# Passes run in this order; later passes rely on earlier ones having consumed
# command names and brackets.
_COMMAND_PATTERN = re.compile(r'\\\\([a-zA-Z]+)')
_BRACKET_PATTERN = re.compile(r'\\\\([{}\[\]()])')
_SPACE_PATTERN = re.compile(r'\\\\ ')
# A following backslash is excluded so "\\\\" line breaks survive.
_SYMBOL_PATTERN = re.compile(r'\\\\([^\\\s])')


def unescape_latex(content: str) -> str:
    """
    Turn doubled-backslash LaTeX back into its source form.

    Command names, brackets and other escaped symbols lose one backslash:
    ``\\\\phi`` becomes ``\\phi``, ``\\\\{`` becomes ``\\{`` and ``\\\\&``
    becomes ``\\&``. A doubled backslash before a space and runs of four
    backslashes (a LaTeX line break) are left as they are.

    Args:
        content: Escaped LaTeX source

    Returns:
        Unescaped LaTeX source
    """
    if not content:
        return content or ''

    content = _COMMAND_PATTERN.sub(r'\\\1', content)
    content = _BRACKET_PATTERN.sub(r'\\\1', content)
    # Escaped spaces keep both backslashes
    content = _SPACE_PATTERN.sub(r'\\\\ ', content)
    content = _SYMBOL_PATTERN.sub(r'\\\1', content)
    return content


__all__ = ['unescape_latex']
