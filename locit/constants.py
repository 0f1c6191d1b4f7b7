"""
Consolidated constants for Locit.

This module provides a single source of truth for:
- Grammatical enums (gender, declension group, case, number)
- Capitalization styles detected on input words
- Per-declension suffix lengths and default genders
- Human-readable names used by the CLI and JSON output

All other modules should import from here to avoid duplication.
"""

from enum import IntEnum
from typing import Dict


# ============================================================================
# Grammatical Enums
# ============================================================================

class Gender(IntEnum):
    """Grammatical gender. UNKNOWN is a real value, not an absence."""
    UNKNOWN = 0
    MASCULINE = 1
    FEMININE = 2


class DeclensionGroup(IntEnum):
    """Noun declension group."""
    UNKNOWN = 0
    D1 = 1  # mast-s, vēj-š
    D2 = 2  # apl-is
    D3 = 3  # med-us
    D4 = 4  # naud-a
    D5 = 5  # zemen-e
    D6 = 6  # krāsn-s
    REFLEXIVE_MASCULINE = 7  # klausītāj-ies
    REFLEXIVE_FEMININE = 8  # atgriešan-ās
    DEFINITE_ADJECTIVE_MASCULINE = 9  # liel-ais
    DEFINITE_ADJECTIVE_FEMININE = 10  # skaist-ā
    PRONOUN = 11  # es, tu, tas
    INDECLINABLE = 99  # kino, desmit


class GNumber(IntEnum):
    """Grammatical number."""
    SINGULAR = 0
    PLURAL = 1


class Case(IntEnum):
    """Grammatical case. Values index the cells of an inflection row."""
    NOMINATIVE = 0
    GENITIVE = 1
    DATIVE = 2
    ACCUSATIVE = 3
    INSTRUMENTAL = 4
    LOCATIVE = 5
    VOCATIVE = 6


class CapsStyle(IntEnum):
    """Capitalization style of an input word."""
    UNKNOWN = 0
    LOWER_CASE = 1
    UPPER_CASE = 2
    TITLE_CASE = 3


# ============================================================================
# Declension Tables
# ============================================================================

# Number of trailing characters stripped from the base to get the root
DECLENSION_SUFFIX_LEN: Dict[DeclensionGroup, int] = {
    DeclensionGroup.UNKNOWN: 0,
    DeclensionGroup.D1: 1,
    DeclensionGroup.D2: 2,
    DeclensionGroup.D3: 2,
    DeclensionGroup.D4: 1,
    DeclensionGroup.D5: 1,
    DeclensionGroup.D6: 1,
    DeclensionGroup.REFLEXIVE_MASCULINE: 3,
    DeclensionGroup.REFLEXIVE_FEMININE: 2,
    DeclensionGroup.DEFINITE_ADJECTIVE_MASCULINE: 3,
    DeclensionGroup.DEFINITE_ADJECTIVE_FEMININE: 1,
    DeclensionGroup.PRONOUN: 0,
    DeclensionGroup.INDECLINABLE: 0,
}

DECLENSION_GENDER: Dict[DeclensionGroup, Gender] = {
    DeclensionGroup.UNKNOWN: Gender.UNKNOWN,
    DeclensionGroup.D1: Gender.MASCULINE,
    DeclensionGroup.D2: Gender.MASCULINE,
    DeclensionGroup.D3: Gender.MASCULINE,
    DeclensionGroup.D4: Gender.FEMININE,
    DeclensionGroup.D5: Gender.FEMININE,
    DeclensionGroup.D6: Gender.FEMININE,
    DeclensionGroup.REFLEXIVE_MASCULINE: Gender.MASCULINE,
    DeclensionGroup.REFLEXIVE_FEMININE: Gender.FEMININE,
    DeclensionGroup.DEFINITE_ADJECTIVE_MASCULINE: Gender.MASCULINE,
    DeclensionGroup.DEFINITE_ADJECTIVE_FEMININE: Gender.FEMININE,
    DeclensionGroup.PRONOUN: Gender.UNKNOWN,
    DeclensionGroup.INDECLINABLE: Gender.UNKNOWN,
}

# Preposition read in front of instrumental forms ("ar robotu")
INSTRUMENTAL_PREPOSITION = "ar"

# Lowercase Latvian alphabet (ō and ŗ are kept for older orthography)
LATVIAN_LETTERS = "aābcčdeēfgģhiījkķlļmnņoōprŗsštuūvzž"

VOWELS = "aāeēiīoōuū"


# ============================================================================
# Human-readable Names
# ============================================================================

DECLENSION_DESCRIPTIONS: Dict[DeclensionGroup, str] = {
    DeclensionGroup.UNKNOWN: "Unknown",
    DeclensionGroup.D1: "1st declension (-s, -š)",
    DeclensionGroup.D2: "2nd declension (-is)",
    DeclensionGroup.D3: "3rd declension (-us)",
    DeclensionGroup.D4: "4th declension (-a)",
    DeclensionGroup.D5: "5th declension (-e)",
    DeclensionGroup.D6: "6th declension (-s)",
    DeclensionGroup.REFLEXIVE_MASCULINE: "Reflexive, masculine (-ies)",
    DeclensionGroup.REFLEXIVE_FEMININE: "Reflexive, feminine (-ās)",
    DeclensionGroup.DEFINITE_ADJECTIVE_MASCULINE: "Definite adjective, masculine (-ais)",
    DeclensionGroup.DEFINITE_ADJECTIVE_FEMININE: "Definite adjective, feminine (-ā)",
    DeclensionGroup.PRONOUN: "Pronoun",
    DeclensionGroup.INDECLINABLE: "Indeclinable",
}

CASE_NAMES_LV: Dict[Case, str] = {
    Case.NOMINATIVE: "nominatīvs",
    Case.GENITIVE: "ģenitīvs",
    Case.DATIVE: "datīvs",
    Case.ACCUSATIVE: "akuzatīvs",
    Case.INSTRUMENTAL: "instrumentālis",
    Case.LOCATIVE: "lokatīvs",
    Case.VOCATIVE: "vokatīvs",
}


def get_declension_description(group: int) -> str:
    """Get human-readable description of a declension group."""
    try:
        return DECLENSION_DESCRIPTIONS[DeclensionGroup(group)]
    except ValueError:
        return f"Group {group}"
