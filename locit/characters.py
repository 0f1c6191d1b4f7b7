"""
Character handling for Locit.

Provides alphabet validation, capitalization style detection and
restoration, and an approximate syllable counter.
"""

import re

from locit.constants import CapsStyle, LATVIAN_LETTERS, VOWELS

_WORD_PATTERN = re.compile(rf"^[{LATVIAN_LETTERS}{LATVIAN_LETTERS.upper()}]+$")


# ============================================================================
# Character Testing Functions
# ============================================================================

def validate_word(word: str) -> bool:
    """
    Test if a word consists entirely of Latvian letters.

    Args:
        word: The word to test.

    Returns:
        True for a non-empty word drawn solely from the alphabet.
    """
    if not word:
        return False
    return bool(_WORD_PATTERN.match(word))


def is_vowel(char: str) -> bool:
    """Check if a character is a (long or short) vowel."""
    return char.lower() in VOWELS


# ============================================================================
# Capitalization
# ============================================================================

def get_caps_style(word: str) -> CapsStyle:
    """
    Detect the capitalization style of a word.

    Args:
        word: The word to inspect.

    Returns:
        LOWER_CASE, UPPER_CASE or TITLE_CASE; UNKNOWN for mixed styles
        and for words that fail validation.
    """
    if not validate_word(word):
        return CapsStyle.UNKNOWN
    if word == word.lower():
        return CapsStyle.LOWER_CASE
    if word == word.upper():
        return CapsStyle.UPPER_CASE
    lower = word.lower()
    if word == lower[0].upper() + lower[1:]:
        return CapsStyle.TITLE_CASE
    return CapsStyle.UNKNOWN


def set_caps_style(word: str, caps_style: CapsStyle) -> str:
    """
    Apply a capitalization style to a word.

    Example:
        >>> set_caps_style("kalniņš", CapsStyle.TITLE_CASE)
        'Kalniņš'
    """
    if not word:
        return word
    if caps_style == CapsStyle.LOWER_CASE:
        return word.lower()
    if caps_style == CapsStyle.UPPER_CASE:
        return word.upper()
    if caps_style == CapsStyle.TITLE_CASE:
        return word[0].upper() + word[1:].lower()
    return word


# ============================================================================
# Syllables
# ============================================================================

def get_syllable_count(word: str) -> int:
    """
    Approximate syllable count of a word.

    Counts continuous stretches of vowels, so diphthongs ("ie", "au")
    count once. The real number of syllables is a more complex matter;
    characters are not validated.

    Example:
        >>> get_syllable_count("kapitālisms")
        4
    """
    count = 0
    was_vowel = False
    for char in word:
        if is_vowel(char):
            if not was_vowel:
                count += 1
            was_vowel = True
        else:
            was_vowel = False
    return count
