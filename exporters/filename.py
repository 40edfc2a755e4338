"""Filename sanitizing for exported notes."""

UNSAFE_FILENAME_CHARS = ('/', '\\', ':', '*', '?', '"', '<', '>', '|')
DEFAULT_FILENAME = 'untitled'


def sanitize_filename(name: str) -> str:
    """
    Make a note title safe to use as a file name.

    Unsafe characters become underscores, surrounding whitespace and dots are
    removed, and an empty result falls back to ``untitled``.

    Args:
        name: Note title

    Returns:
        Safe file name stem (without extension)
    """
    result = name or ''
    for char in UNSAFE_FILENAME_CHARS:
        result = result.replace(char, '_')

    result = result.strip()
    result = result.strip('.')

    if not result:
        result = DEFAULT_FILENAME

    return result


__all__ = ['UNSAFE_FILENAME_CHARS', 'DEFAULT_FILENAME', 'sanitize_filename']
