"""Wrap text to a maximum line length, breaking at spaces.

    >>> from linewrap import wrap
    >>> wrap('one two three', 7)
    'one two\\nthree\\n'
"""

from linewrap.core.services.wrap import DEFAULT_MAX_LINE_LENGTH, wrap

__all__ = ['DEFAULT_MAX_LINE_LENGTH', 'wrap']
