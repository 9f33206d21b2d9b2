__docformat__ = 'google'

__all__ = [
    'require_text',
    'chain_operations',
    'squish',
    'capitalize_first',
    'collapse_hyphens'
]

from functools import reduce
from typing import Any, Callable, Iterable
from wordcase.patterns import (
    WHITESPACE_PATTERN,
    HYPHEN,
    REPEATED_HYPHENS_PATTERN,
    EDGE_HYPHENS_PATTERN
)

def require_text(value: Any) -> str:
    """
    Return value unchanged if it is a string, otherwise raise.

    Args:
        value: Any caller-supplied value

    Raises:
        TypeError: If value is not a string.

    Example:
        >>> require_text('hello')
        'hello'
        >>> require_text(123)
        Traceback (most recent call last):
        TypeError: Input must be a string
    """
    if not isinstance(value, str):
        raise TypeError('Input must be a string')
    return value

def chain_operations(value: Any, operations: Iterable[Callable[[Any], Any]]) -> Any:
    """
    Pass a value through a sequence of single-argument functions, in order.

    Example:
        >>> chain_operations(' a  b ', [str.upper, squish])
        'A B'
    """
    return reduce(lambda result, operation: operation(result), operations, value)

def squish(text: str) -> str:
    """
    Collapse internal whitespace runs to a single space and strip both ends.

    Example:
        >>> squish('  hello \\t  world ')
        'hello world'
    """
    return WHITESPACE_PATTERN.sub(' ', text).strip()

def capitalize_first(word: str) -> str:
    """
    Upper-case the first character of a word and leave the remainder unchanged.

    Unlike `str.capitalize`, the rest of the word is not lowercased.

    Example:
        >>> capitalize_first('world')
        'World'
        >>> capitalize_first('wORLD')
        'WORLD'
        >>> capitalize_first('')
        ''
    """
    return word[:1].upper() + word[1:]

def collapse_hyphens(text: str) -> str:
    """
    Collapse runs of hyphens to one hyphen and strip hyphens from both ends.

    Example:
        >>> collapse_hyphens('--hello---world--')
        'hello-world'
    """
    collapsed = REPEATED_HYPHENS_PATTERN.sub(HYPHEN, text)
    return EDGE_HYPHENS_PATTERN.sub('', collapsed)
