"""Word tokenization utilities.

This module splits arbitrary text into an ordered list of lowercase word
tokens. Words may be separated by whitespace, hyphens or underscores, or
joined in camelCase/PascalCase; punctuation and symbols are discarded.

All functions in this module accept a single string. Renderers that join
tokens back into a naming convention live in `wordcase.cases`.
"""

__docformat__ = 'google'

__all__ = [
    # Classes
    'WordString',
    # Functions
    'strip_disallowed',
    'split_compound',
    'split_words',
    'tokenize'
]

from dataclasses import dataclass
from functools import cached_property
from typing import List
from wordcase.functions import chain_operations, require_text, squish
from wordcase.patterns import (
    BOUNDARY,
    DISALLOWED_CHARACTERS_PATTERN,
    COMPOUND_BOUNDARY_PATTERN,
    COMPOUND_BOUNDARY_FORMAT,
    DELIMITER_PATTERN
)

def strip_disallowed(text: str) -> str:
    """
    Remove characters that are neither alphanumeric nor delimiters.

    Removed characters leave a word boundary behind, so text on either side
    of a symbol ends up in separate words.

    Args:
        text: Raw text

    Returns:
        Text containing only ASCII letters, digits, whitespace, hyphens and underscores

    Example:
        >>> strip_disallowed('hello@world!')
        'hello world '
        >>> strip_disallowed('@#$')
        ' '
        >>> strip_disallowed('snake_case-text')
        'snake_case-text'
    """
    return DISALLOWED_CHARACTERS_PATTERN.sub(BOUNDARY, text)

def split_compound(text: str) -> str:
    """
    Insert a word boundary wherever a lowercase letter is followed by an uppercase letter.

    Example:
        >>> split_compound('helloWorld')
        'hello World'
        >>> split_compound('HTTPServer')
        'HTTPServer'
    """
    return COMPOUND_BOUNDARY_PATTERN.sub(COMPOUND_BOUNDARY_FORMAT, text)

def split_words(text: str) -> List[str]:
    """
    Split text on runs of delimiters and drop empty pieces.

    Example:
        >>> split_words('-hello__big   world-')
        ['hello', 'big', 'world']
    """
    return list(filter(None, DELIMITER_PATTERN.split(text)))

def tokenize(text: str) -> List[str]:
    """
    Split text into an ordered list of lowercase words.

    Operations performed:
        1. Validate that the input is a string
        2. Strip leading and trailing whitespace and collapse internal runs
        3. Drop punctuation and symbols
        4. Split camelCase and PascalCase boundaries
        5. Split on whitespace, hyphens and underscores
        6. Lowercase every word

    Args:
        text: Any string

    Returns:
        List of lowercase words, empty if the input contains no letters or digits

    Raises:
        TypeError: If text is not a string.

    Example:
        >>> tokenize('  Mixed-Style_String here ')
        ['mixed', 'style', 'string', 'here']
        >>> tokenize('HelloWorld')
        ['hello', 'world']
        >>> tokenize('   ')
        []
    """
    trimmed = squish(require_text(text))
    if not trimmed:
        return []

    tokenizing_functions = [
        strip_disallowed
        , split_compound
        , split_words
    ]
    words = chain_operations(trimmed, tokenizing_functions)
    return [word.lower() for word in words]

@dataclass
class WordString:
    """
    Raw text together with its cached tokenization.

    Args:
        raw_string: Text to tokenize

    Example:
        >>> words = WordString('parseXML file')
        >>> words.tokens
        ['parse', 'xml', 'file']
        >>> words.normalized_string
        'parse xml file'
    """
    raw_string: str

    def __post_init__(self):
        require_text(self.raw_string)

    @cached_property
    def tokens(self) -> List[str]:
        return tokenize(self.raw_string)

    @cached_property
    def normalized_string(self) -> str:
        """Tokens joined by single spaces."""
        return ' '.join(self.tokens)

    @property
    def is_empty(self) -> bool:
        return len(self.tokens) == 0

    def __len__(self) -> int:
        return len(self.tokens)
