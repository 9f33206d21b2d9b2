"""
String manipulation utility functions for text processing.

This module provides functions for validating input, standardizing
whitespace, adjusting case and chaining text transformations.
"""

from .functions import __all__
from .functions import *

__all__ = __all__
