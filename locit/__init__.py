"""
Locit: Latvian Noun Declension
Classifies Latvian nouns into declension groups and generates all
7 cases in singular and plural.
"""

from typing import Optional

__version__ = "0.1.0"

from locit.constants import CapsStyle, Case, DeclensionGroup, Gender, GNumber
from locit.declension import InflectionTable, NounOptions, inflect
from locit.exceptions import (
    ConfigurationError, InvalidPluralFormError, InvalidSuffixLengthError,
    InvalidWordError, LatvianError, MixedCapsError, NoCaseError,
)
from locit.noun import Noun
from locit.palatalization import palatalize
from locit.special_cases import SpecialCaseEntry, register_special_case


def declension_of(
    word: str,
    case: Case,
    number: Optional[GNumber] = None,
    options: Optional[NounOptions] = None,
) -> str:
    """
    Decline a word in one call.

    Example:
        >>> import locit
        >>> locit.declension_of("Kalniņš", locit.Case.DATIVE)
        'Kalniņam'
    """
    return Noun(word, options).declension(case, number)


__all__ = [
    "__version__",
    "declension_of",
    "Noun",
    "NounOptions",
    "inflect",
    "InflectionTable",
    "palatalize",
    "register_special_case",
    "SpecialCaseEntry",
    "CapsStyle",
    "Case",
    "DeclensionGroup",
    "Gender",
    "GNumber",
    "LatvianError",
    "InvalidWordError",
    "MixedCapsError",
    "NoCaseError",
    "ConfigurationError",
    "InvalidPluralFormError",
    "InvalidSuffixLengthError",
]
