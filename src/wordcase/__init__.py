"""
Convert text between naming conventions.

    >>> from wordcase import camel_case, dot_case, to_kebab_case
    >>> camel_case('hello world')
    'helloWorld'
    >>> dot_case('HelloWorld')
    'hello.world'
    >>> to_kebab_case('  hello   world  ')
    'hello-world'

See individual module documentation for detailed information.
"""
import logging

from . import patterns
from . import tokens
from . import entities
from . import cases
from . import arithmetic
from . import frames
from .tokens import tokenize
from .cases import *
from .arithmetic import add_numbers

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'patterns',
    'tokens',
    'entities',
    'cases',
    'arithmetic',
    'frames',
    'tokenize',
    'add_numbers',
    *cases.__all__
]
