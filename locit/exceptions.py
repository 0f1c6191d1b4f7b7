"""
Exception hierarchy for Locit.

Every error carries a stable ``code`` string so callers can branch on the
failure kind without matching on message text:

    INVALID_WORD           input contains characters outside the alphabet
    MIXED_CAPS             input mixes capitalization styles
    NO_CASE                requested cell is not defined for the word
    INVALID_PLURAL_FORM    special case links a plural to itself
    INVALID_SUFFIX_LENGTH  special case strips more than the whole word
"""

from typing import Optional


class LatvianError(Exception):
    """Base class for all errors raised by Locit."""

    code = "UNKNOWN"

    def __init__(self, message: str, word: Optional[str] = None):
        self.word = word
        self.message = message
        super().__init__(message)


# ============================================================================
# Input Validation
# ============================================================================

class InvalidWordError(LatvianError, ValueError):
    """Raised when a word contains characters outside the Latvian alphabet."""

    code = "INVALID_WORD"

    def __init__(self, word: str):
        super().__init__(f"Invalid Latvian word: {word}.", word)


class MixedCapsError(LatvianError, ValueError):
    """Raised when a word is neither lowercase, uppercase nor title case."""

    code = "MIXED_CAPS"

    def __init__(self, word: str):
        super().__init__(f"Mixed capitalization style: {word}.", word)


# ============================================================================
# Lookup
# ============================================================================

class NoCaseError(LatvianError, LookupError):
    """
    Raised when a (case, number) cell does not exist for a word.

    This is expected for defective paradigms (reflexive nouns, pronoun
    vocatives) and should be read as "not applicable".
    """

    code = "NO_CASE"

    def __init__(self, word: str, case, number):
        self.case = case
        self.number = number
        super().__init__(
            f"Case {case.name.lower()} ({number.name.lower()}) is not defined for word {word}.",
            word,
        )


# ============================================================================
# Special Case Data
# ============================================================================

class ConfigurationError(LatvianError):
    """Raised when special case data is inconsistent."""


class InvalidPluralFormError(ConfigurationError):
    """Raised when a special case names itself as its linked plural."""

    code = "INVALID_PLURAL_FORM"

    def __init__(self, word: str):
        super().__init__(f"Plural form can not be identical to the base word: {word}.", word)


class InvalidSuffixLengthError(ConfigurationError):
    """Raised when a special case suffix length exceeds the word length."""

    code = "INVALID_SUFFIX_LENGTH"

    def __init__(self, word: str, suffix_len: int):
        self.suffix_len = suffix_len
        super().__init__(
            f"Suffix length {suffix_len} is longer than the base word: {word}.",
            word,
        )
