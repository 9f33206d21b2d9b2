"""Regex patterns and constants for splitting arbitrary text into words.
"""

__docformat__ = 'google'

import re
from typing import List

# Base character sets for patterns
ALPHA = "A-Za-z"
"""@private"""

ALNUM = ALPHA + "0-9"
"""@private"""

## Delimiters
# Constants
DELIMITERS: List[str] = [" ", "-", "_"]
"""Characters that separate words in raw input.

Any whitespace character is treated like a space."""

BOUNDARY: str = " "
"""Separator inserted wherever the pipeline detects an implicit word boundary.

Used in `wordcase.tokens.strip_disallowed` and `wordcase.tokens.split_compound`."""

# Building blocks
DELIMITER_CHARACTERS: str = f"\\s{''.join(map(re.escape, DELIMITERS[1:]))}"
ALLOWED_CHARACTERS: str = f"{ALNUM}{DELIMITER_CHARACTERS}"
LOWER_TO_UPPER: str = "(?P<lower>[a-z])(?P<upper>[A-Z])"

# Patterns
DISALLOWED_CHARACTERS_PATTERN: re.Pattern = re.compile(f"[^{ALLOWED_CHARACTERS}]+")
"""Matches runs of characters that can never be part of a word or a delimiter.

Letters and digits are ASCII only; everything else (punctuation, symbols,
accented letters) is dropped.

Used in `wordcase.tokens.strip_disallowed`."""

COMPOUND_BOUNDARY_PATTERN: re.Pattern = re.compile(LOWER_TO_UPPER)
"""Matches a lowercase letter immediately followed by an uppercase letter.

Capture groups:
    * lower
    * upper

Runs of capitals are not split, so 'HTTPServer' contains no boundary
while 'parseHTTP' contains one.

Used in `wordcase.tokens.split_compound`."""

COMPOUND_BOUNDARY_FORMAT: str = f"\\g<lower>{BOUNDARY}\\g<upper>"
"""Replacement applied to every `COMPOUND_BOUNDARY_PATTERN` match."""

DELIMITER_PATTERN: re.Pattern = re.compile(f"[{DELIMITER_CHARACTERS}]+")
"""Matches one or more consecutive delimiter characters.

Used in `wordcase.tokens.split_words`."""

WHITESPACE_PATTERN: re.Pattern = re.compile("\\s+")
"""Matches runs of whitespace.

Used in `wordcase.functions.squish`."""

## Kebab cleanup
HYPHEN: str = "-"

REPEATED_HYPHENS_PATTERN: re.Pattern = re.compile(f"{HYPHEN}{{2,}}")
"""Matches two or more consecutive hyphens.

Used in `wordcase.functions.collapse_hyphens`."""

EDGE_HYPHENS_PATTERN: re.Pattern = re.compile(f"^{HYPHEN}+|{HYPHEN}+$")
"""Matches hyphens at the start or end of a string.

Used in `wordcase.functions.collapse_hyphens`."""
