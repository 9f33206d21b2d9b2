"""Naming convention renderers.

This module converts arbitrary text into camelCase, kebab-case, dot.case,
snake_case and PascalCase. Every function validates its input, splits it
into words with `wordcase.tokens.tokenize`, and joins the words according
to a `wordcase.entities.ConventionRule`.

Input may already be in any of these conventions, or be plain text with
spaces. Punctuation and symbols are dropped.
"""

__docformat__ = 'google'

__all__ = [
    # Functions
    'rule_for',
    'render',
    'convert',
    'camel_case',
    'to_camel_case',
    'kebab_case',
    'to_kebab_case',
    'dot_case',
    'snake_case',
    'pascal_case'
]

import logging
from functools import cache
from typing import List, Union
from wordcase.entities import CaseConvention, ConventionRule, WordStyle
from wordcase.functions import capitalize_first, collapse_hyphens
from wordcase.tokens import tokenize

logger = logging.getLogger(__name__)

STYLES = {
    WordStyle.LOWER: str.lower,
    WordStyle.CAPITALIZE: lambda word: capitalize_first(word.lower())
}
"""@private"""

@cache
def rule_for(convention: Union[CaseConvention, str]) -> ConventionRule:
    """
    Look up the joining rule for a naming convention.

    Args:
        convention: A `CaseConvention` or its value, e.g. 'kebab'

    Raises:
        ValueError: If convention is not a known naming convention.

    Example:
        >>> rule_for('kebab').separator
        '-'
    """
    rule = ConventionRule(convention)
    logger.debug('Resolved %s convention: %r', rule.convention.value, rule)
    return rule

def render(tokens: List[str], convention: Union[CaseConvention, str]) -> str:
    """
    Join a list of words according to a naming convention.

    Args:
        tokens: Words, as produced by `wordcase.tokens.tokenize`
        convention: A `CaseConvention` or its value

    Returns:
        Joined string, or an empty string if there are no words

    Example:
        >>> render(['hello', 'big', 'world'], 'camel')
        'helloBigWorld'
        >>> render(['hello', 'world'], CaseConvention.DOT)
        'hello.world'
        >>> render([], 'kebab')
        ''
    """
    rule = rule_for(convention)
    if not tokens:
        return ''

    first, *rest = tokens
    words = [STYLES[rule.first](first)]
    words.extend(STYLES[rule.rest](word) for word in rest)
    return rule.separator.join(words)

def convert(text: str, convention: Union[CaseConvention, str]) -> str:
    """
    Convert text to a naming convention.

    Args:
        text: Any string
        convention: A `CaseConvention` or its value

    Raises:
        TypeError: If text is not a string.
        ValueError: If convention is not a known naming convention.

    Example:
        >>> convert('Mixed-Style_String here', 'camel')
        'mixedStyleStringHere'
        >>> convert('hello#world$', 'dot')
        'hello.world'
    """
    return render(tokenize(text), convention)

def camel_case(text: str) -> str:
    """
    Convert text to camelCase.

    The first word is lowercase and every following word starts with a
    capital letter.

    Args:
        text: Any string

    Raises:
        TypeError: If text is not a string.

    Example:
        >>> camel_case('hello world')
        'helloWorld'
        >>> camel_case('HelloWorld')
        'helloWorld'
        >>> camel_case('hello@world!')
        'helloWorld'
        >>> camel_case('@#$')
        ''
    """
    return convert(text, CaseConvention.CAMEL)

def to_camel_case(text: str) -> str:
    """
    Convert text to camelCase. Identical to `camel_case`.

    Example:
        >>> to_camel_case('convert-this-string')
        'convertThisString'
        >>> to_camel_case('another_test_string')
        'anotherTestString'
    """
    return camel_case(text)

def kebab_case(text: str) -> str:
    """
    Convert text to kebab-case.

    Example:
        >>> kebab_case('helloWorld')
        'hello-world'
    """
    return convert(text, CaseConvention.KEBAB)

def to_kebab_case(text: str) -> str:
    """
    Convert text to kebab-case, guaranteeing single hyphens between words.

    Runs of hyphens are collapsed and hyphens at either end are stripped
    after joining.

    Args:
        text: Any string

    Raises:
        TypeError: If text is not a string.

    Example:
        >>> to_kebab_case('  hello   world  ')
        'hello-world'
        >>> to_kebab_case('hello_world')
        'hello-world'
        >>> to_kebab_case('--hello--world--')
        'hello-world'
    """
    return collapse_hyphens(kebab_case(text))

def dot_case(text: str) -> str:
    """
    Convert text to dot.case.

    Args:
        text: Any string

    Raises:
        TypeError: If text is not a string.

    Example:
        >>> dot_case('HelloWorld')
        'hello.world'
        >>> dot_case('  hello   world  ')
        'hello.world'
    """
    return convert(text, CaseConvention.DOT)

def snake_case(text: str) -> str:
    return convert(text, CaseConvention.SNAKE)

def pascal_case(text: str) -> str:
    """
    Convert text to PascalCase.

    Example:
        >>> pascal_case('hello world')
        'HelloWorld'
    """
    return convert(text, CaseConvention.PASCAL)
