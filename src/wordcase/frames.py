"""Apply naming conventions to pandas objects.

Useful for standardizing column headers or identifier columns in tabular
data before export, e.g. turning 'First Name' and 'lastName' columns into
'first_name' and 'last_name'.
"""

__docformat__ = 'google'

__all__ = [
    'convert_series',
    'rename_columns'
]

import logging
import pandas as pd
from collections import Counter
from typing import Union
from wordcase.cases import convert, rule_for
from wordcase.entities import CaseConvention

logger = logging.getLogger(__name__)

def convert_series(series: pd.Series, convention: Union[CaseConvention, str]) -> pd.Series:
    """
    Convert every string in a Series to a naming convention.

    Missing values are passed through unchanged.

    Args:
        series: Series of strings
        convention: A `CaseConvention` or its value

    Returns:
        New Series with the same index

    Raises:
        TypeError: If a non-missing value is not a string.
        ValueError: If convention is not a known naming convention.

    Example:
        >>> convert_series(pd.Series(['Hello World', None]), 'kebab').tolist()
        ['hello-world', None]
    """
    rule_for(convention)
    return series.map(lambda value: convert(value, convention), na_action='ignore')

def rename_columns(frame: pd.DataFrame, convention: Union[CaseConvention, str]) -> pd.DataFrame:
    """
    Return a copy of a DataFrame with string column labels converted to a naming convention.

    Non-string labels are left as they are.

    Args:
        frame: Any DataFrame
        convention: A `CaseConvention` or its value

    Raises:
        ValueError: If two labels convert to the same label, or if convention
            is not a known naming convention.

    Example:
        >>> frame = pd.DataFrame(columns=['First Name', 'lastName', 0])
        >>> rename_columns(frame, 'snake').columns.tolist()
        ['first_name', 'last_name', 0]
    """
    rule_for(convention)
    mapping = {
        label: convert(label, convention)
        for label in frame.columns if isinstance(label, str)
    }
    new_labels = [mapping.get(label, label) for label in frame.columns]

    if len(set(new_labels)) < len(set(frame.columns)):
        duplicates = [label for label, count in Counter(new_labels).items() if count > 1]
        raise ValueError(f'Column labels collide after conversion: {duplicates}')

    logger.debug('Renaming %d columns to %s', len(mapping), rule_for(convention).convention.value)
    return frame.rename(columns=mapping)
