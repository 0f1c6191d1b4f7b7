"""
Special cases (irregular words) for Locit.

Words listed here bypass the suffix-based classification: their
declension group, suffix length and gender are given explicitly, and
selected singular forms are fixed. The built-in dataset covers:

- 1st/2nd declension vocative and genitive irregulars
- 3rd declension feminine plural-only nouns
- 4th/5th declension masculine and plural-only nouns
- the closed 6th declension (consonant stem) list
- indeclinable exceptions
- personal and demonstrative pronouns
- cardinal numerals 2-9

The process-wide ``REGISTRY`` is loaded with this dataset at import time
and may be extended with ``register_special_case``. Extend it during
start-up; lookups are not guarded.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

from locit.constants import Case, DeclensionGroup, Gender
from locit.exceptions import InvalidPluralFormError, InvalidSuffixLengthError

logger = logging.getLogger(__name__)


# ============================================================================
# Special Case Entry
# ============================================================================

@dataclass(frozen=True)
class SpecialCaseEntry:
    """
    Override record for a single base word.

    Attributes:
        declension_group: Group replacing the suffix-based classification.
        suffix_len: Suffix length; defaults to the group's standard length.
        gender: Gender; ignored when the caller forces one.
        genitive .. vocative: Fixed singular forms (first write wins).
        use_palatalized: Force palatalization on or off; None lets the
            declension rules decide.
        plural_only: The word has no singular paradigm.
        linked_plural: Base form whose singular paradigm is this word's plural.
    """
    declension_group: Optional[DeclensionGroup] = None
    suffix_len: Optional[int] = None
    gender: Optional[Gender] = None
    genitive: Optional[str] = None
    dative: Optional[str] = None
    accusative: Optional[str] = None
    instrumental: Optional[str] = None
    locative: Optional[str] = None
    vocative: Optional[str] = None
    use_palatalized: Optional[bool] = None
    plural_only: bool = False
    linked_plural: Optional[str] = None

    def case_forms(self) -> List[Tuple[Case, str]]:
        """Return the explicit singular forms as (case, form) pairs."""
        forms = [
            (Case.GENITIVE, self.genitive),
            (Case.DATIVE, self.dative),
            (Case.ACCUSATIVE, self.accusative),
            (Case.INSTRUMENTAL, self.instrumental),
            (Case.LOCATIVE, self.locative),
            (Case.VOCATIVE, self.vocative),
        ]
        return [(case, form) for case, form in forms if form]


def _entry(group: DeclensionGroup, **kwargs) -> SpecialCaseEntry:
    return SpecialCaseEntry(declension_group=group, **kwargs)


# ============================================================================
# Built-in Dataset
# ============================================================================

D1 = DeclensionGroup.D1
D2 = DeclensionGroup.D2
D3 = DeclensionGroup.D3
D4 = DeclensionGroup.D4
D5 = DeclensionGroup.D5
D6 = DeclensionGroup.D6
MASC = Gender.MASCULINE
FEM = Gender.FEMININE

NOUN_SPECIAL_CASES: Dict[str, SpecialCaseEntry] = {
    # D1
    'biedrs': _entry(D1, suffix_len=1, vocative='biedri'),
    'tēvs': _entry(D1, suffix_len=1, vocative='tēv'),
    'cilvēks': _entry(D1, suffix_len=1, vocative='cilvēk'),

    # D2
    'tētis': _entry(D2, use_palatalized=False),
    'viesis': _entry(D2, use_palatalized=False),
    'suns': _entry(D2, suffix_len=1, genitive='suņa'),
    'akmens': _entry(D2, suffix_len=1, genitive='akmens', vocative='akmen'),
    'asmens': _entry(D2, suffix_len=1, genitive='asmens', vocative='asmen'),
    'rudens': _entry(D2, suffix_len=1, genitive='rudens', vocative='ruden'),
    'tesmens': _entry(D2, suffix_len=1, genitive='tesmens', vocative='tesmen'),
    'ūdens': _entry(D2, suffix_len=1, genitive='ūdens', vocative='ūden'),
    'zibens': _entry(D2, suffix_len=1, genitive='zibens', vocative='ziben'),
    'mēness': _entry(D2, suffix_len=1, genitive='mēness', vocative='mēness'),
    'sāls': _entry(D2, suffix_len=1, genitive='sāls', vocative='sāl'),

    # D3
    'pelus': _entry(D3, gender=FEM, dative='pelūm', locative='pelūs', plural_only=True),
    'ragus': _entry(D3, gender=FEM, dative='ragūm', locative='ragūs', plural_only=True),
    'dzirnus': _entry(D3, gender=FEM, dative='dzirnūm', locative='dzirnūs', plural_only=True),

    # D4
    'puika': _entry(D4, gender=MASC),
    'lauva': _entry(D4, gender=MASC),
    'janka': _entry(D4, gender=MASC),
    # meita, māsa, sieva: older data marked these masculine (meitam);
    # they keep the feminine default (meitai)
    'meita': _entry(D4, vocative='meit'),
    'māsa': _entry(D4, vocative='mās'),
    'ragavas': _entry(D4, suffix_len=2, plural_only=True),
    'sieva': _entry(D4, vocative='siev'),

    # D5
    'bikses': _entry(D5, suffix_len=2, plural_only=True),
    'bende': _entry(D5, gender=MASC),
    'kase': _entry(D5, use_palatalized=False),

    # Indeclinable
    'bakarā': _entry(DeclensionGroup.INDECLINABLE, plural_only=True),
}

# 6th declension: a closed list of feminine consonant stems
D6_NOUNS: Tuple[str, ...] = (
    'acs', 'asins', 'auss', 'avs', 'azots', 'balss', 'birzs', 'blakts',
    'cilts', 'dakts', 'debess', 'dūksts', 'dzelzs', 'govs', 'ilkss',
    'izkapts', 'kārts', 'klēts', 'klints', 'krāsns', 'krūts', 'kūts',
    'līksts', 'lecekts', 'maksts', 'nāss', 'nakts', 'nots', 'olekts',
    'pāksts', 'palts', 'pils', 'pirts', 'plīts', 'pults', 'sakts', 'šalts',
    'sirds', 'smilts', 'telts', 'takts', 'tāss', 'uguns', 'uts', 'valsts',
    'vāts', 'vēsts', 'zivs', 'zoss', 'žults',
)

D6_UNPALATALIZED = frozenset([
    'acs', 'auss', 'balss', 'debess', 'dūksts', 'dzelzs', 'maksts', 'pults',
    'uts', 'valsts', 'vēsts', 'zoss', 'žults',
])

D6_PLURAL_ONLY: Dict[str, SpecialCaseEntry] = {
    'brokastis': _entry(D6, use_palatalized=False, suffix_len=2, plural_only=True),
    'cēsis': _entry(D6, use_palatalized=False, suffix_len=2, plural_only=True),
    'durvis': _entry(D6, suffix_len=2, plural_only=True),
    'jūtis': _entry(D6, use_palatalized=False, suffix_len=2, plural_only=True),
    'ļaudis': _entry(D6, suffix_len=2, gender=MASC, plural_only=True),
}

# (base, gender, genitive, dative, accusative, instrumental, locative, linked plural)
PRONOUNS: List[Tuple[str, Gender, str, str, str, str, str, Optional[str]]] = [
    ('es', Gender.UNKNOWN, 'manis', 'man', 'mani', 'mani', 'manī', 'mēs'),
    ('mēs', Gender.UNKNOWN, 'mūsu', 'mums', 'mūs', 'mums', 'mūsos', None),
    ('tu', Gender.UNKNOWN, 'tevis', 'tev', 'tevi', 'tevi', 'tevī', 'jūs'),
    ('jūs', Gender.UNKNOWN, 'jūsu', 'jums', 'jūs', 'jums', 'jūsos', None),
    ('pats', MASC, 'paša', 'pašam', 'pašu', 'pašu', 'pašā', 'paši'),
    ('paši', MASC, 'pašu', 'pašiem', 'pašus', 'pašiem', 'pašos', None),
    ('pati', FEM, 'pašas', 'pašai', 'pašu', 'pašu', 'pašā', 'pašas'),
    ('pašas', FEM, 'pašu', 'pašām', 'pašas', 'pašām', 'pašās', None),
    ('tas', MASC, 'tā', 'tam', 'to', 'to', 'tajā', 'tie'),
    ('tie', MASC, 'to', 'tiem', 'tos', 'tiem', 'tajos', None),
    ('tā', FEM, 'tās', 'tai', 'to', 'to', 'tajā', 'tās'),
    ('tās', FEM, 'to', 'tām', 'tās', 'tām', 'tajās', None),
    ('šis', MASC, 'šī', 'šim', 'šo', 'šo', 'šajā', 'šie'),
    ('šie', MASC, 'šo', 'šiem', 'šos', 'šiem', 'šajos', None),
    ('šī', FEM, 'šīs', 'šai', 'šo', 'šo', 'šajā', 'šīs'),
    ('šīs', FEM, 'šo', 'šīm', 'šīs', 'šīm', 'šajās', None),
]

# Cardinal numerals 2-9 (except "trīs") decline like plural nouns
NUMERALS_MASCULINE = ('divi', 'četri', 'pieci', 'seši', 'septiņi', 'astoņi', 'deviņi')
NUMERALS_FEMININE = ('divas', 'četras', 'piecas', 'sešas', 'septiņas', 'astoņas', 'deviņas')

TRIS = SpecialCaseEntry(
    declension_group=DeclensionGroup.UNKNOWN,
    genitive='triju', dative='trim', accusative='trīs',
    instrumental='trim', locative='trīs', vocative='trīs',
    plural_only=True,
)


def build_builtin_special_cases() -> Dict[str, SpecialCaseEntry]:
    """
    Build the built-in special case table.

    Returns:
        Fresh dict mapping lowercase base word to its entry.
    """
    cases: Dict[str, SpecialCaseEntry] = dict(NOUN_SPECIAL_CASES)

    for word in D6_NOUNS:
        if word in D6_UNPALATALIZED:
            cases[word] = _entry(D6, use_palatalized=False)
        else:
            cases[word] = _entry(D6)
    cases.update(D6_PLURAL_ONLY)

    for word, gender, gen, dat, acc, ins, loc, linked in PRONOUNS:
        cases[word] = SpecialCaseEntry(
            declension_group=DeclensionGroup.PRONOUN,
            gender=gender,
            genitive=gen,
            dative=dat,
            accusative=acc,
            instrumental=ins,
            locative=loc,
            plural_only=linked is None,
            linked_plural=linked,
        )

    for word in NUMERALS_MASCULINE:
        cases[word] = _entry(D1, plural_only=True)
    for word in NUMERALS_FEMININE:
        cases[word] = _entry(D4, suffix_len=2, plural_only=True)
    cases['trīs'] = TRIS

    return cases


# ============================================================================
# Registry
# ============================================================================

class SpecialCaseRegistry:
    """
    Mutable mapping from lowercase base word to SpecialCaseEntry.

    Registration and reset are serialized with a lock; lookups are plain
    dict reads and assume registration happens before concurrent use.
    """

    def __init__(self, entries: Optional[Dict[str, SpecialCaseEntry]] = None):
        self._lock = threading.Lock()
        self._entries: Dict[str, SpecialCaseEntry] = dict(entries or {})

    def lookup(self, word: str) -> Optional[SpecialCaseEntry]:
        """Get the entry for an exact lowercase base word, if any."""
        return self._entries.get(word)

    def register(self, word: str, entry: SpecialCaseEntry) -> None:
        """Add or replace the entry for a word."""
        with self._lock:
            self._entries[word] = entry
        logger.debug(f"Registered special case: {word} -> {entry}")

    def reset(self) -> None:
        """Drop runtime registrations and reload the built-in dataset."""
        with self._lock:
            self._entries = build_builtin_special_cases()
        logger.debug(f"Special case registry reset ({len(self._entries)} entries)")

    def validate(self) -> None:
        """
        Check every entry for data-integrity errors.

        Raises:
            InvalidPluralFormError: An entry links a plural to itself.
            InvalidSuffixLengthError: An entry strips more than the word.
        """
        for word, entry in self.items():
            check_entry(word, entry)

    def items(self) -> Iterator[Tuple[str, SpecialCaseEntry]]:
        return iter(list(self._entries.items()))

    def __contains__(self, word: str) -> bool:
        return word in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def check_entry(word: str, entry: SpecialCaseEntry) -> None:
    """Raise a ConfigurationError if an entry is inconsistent with its word."""
    if entry.linked_plural is not None and entry.linked_plural == word:
        raise InvalidPluralFormError(word)
    if entry.declension_group is None or entry.suffix_len is None:
        return
    if not 0 <= entry.suffix_len <= len(word):
        raise InvalidSuffixLengthError(word, entry.suffix_len)


REGISTRY = SpecialCaseRegistry(build_builtin_special_cases())


def lookup_special_case(word: str) -> Optional[SpecialCaseEntry]:
    """Look up a word in the process-wide registry."""
    return REGISTRY.lookup(word)


def register_special_case(word: str, entry: SpecialCaseEntry) -> None:
    """
    Register a special case in the process-wide registry.

    Args:
        word: Base form; stored lowercase.
        entry: Override record.

    Example:
        >>> register_special_case('superkrāsns', SpecialCaseEntry(DeclensionGroup.D6))
    """
    REGISTRY.register(word.lower(), entry)
