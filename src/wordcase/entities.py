from dataclasses import dataclass
from wordcase import lookups
from functools import cache
from enum import Enum

@cache
def convention_lookup() -> lookups.ConventionData:
    """
    @private
    """
    return lookups.ConventionData()

class CaseConvention(Enum):
    """
    Enumeration of naming conventions understood by `wordcase.cases.render`.
    """
    CAMEL = "camel"
    KEBAB = "kebab"
    DOT = "dot"
    SNAKE = "snake"
    PASCAL = "pascal"

class WordStyle(Enum):
    """
    Enumeration of the ways a single word can be cased before joining.
    """
    LOWER = "lower"
    CAPITALIZE = "capitalize"

@dataclass(frozen=True)
class ConventionRule:
    """
    An object describing how a list of words is joined into one string.

    Args:
        convention: The naming convention this rule renders
        separator: String placed between words
        first: Style applied to the first word
        rest: Style applied to every following word

    Can be initiated with only a convention. Missing attributes are
    populated from the packaged convention table. Rules are immutable once
    built, so cached rules can be shared safely.

    Raises:
        ValueError: If a style is not a valid `WordStyle`.
    """
    convention: CaseConvention
    separator: str = None
    first: WordStyle = None
    rest: WordStyle = None

    def __post_init__(self):
        object.__setattr__(self, 'convention', CaseConvention(self.convention))
        self._assign_missing_attributes()
        self._normalize_types()

    def _assign_missing_attributes(self):
        l = convention_lookup()
        name = self.convention.value
        if self.separator is None: object.__setattr__(self, 'separator', l.name_to_separator.get(name, ''))
        if self.first is None: object.__setattr__(self, 'first', l.name_to_first.get(name, WordStyle.LOWER))
        if self.rest is None: object.__setattr__(self, 'rest', l.name_to_rest.get(name, WordStyle.LOWER))

    def _normalize_types(self):
        object.__setattr__(self, 'separator', str(self.separator))
        object.__setattr__(self, 'first', WordStyle(self.first))
        object.__setattr__(self, 'rest', WordStyle(self.rest))
