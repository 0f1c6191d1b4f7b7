"""
Latvian noun declension system for Locit.

This module classifies a base form (nominative singular) into one of the
declension groups and generates its full inflection grid:

    7 cases x 2 numbers, nominative singular always being the base.

Classification is either override-driven (the word is a special case) or
follows a fixed-priority suffix ladder. Generation applies one rule set per
group on the root (R), the palatalized root (Rp) or the base itself.

Declension groups:
    D1   mast-s, vēj-š         D6   krāsn-s
    D2   apl-is                REFLEXIVE_MASCULINE  klausītāj-ies
    D3   med-us                REFLEXIVE_FEMININE   atgriešan-ās
    D4   naud-a                DEFINITE_ADJECTIVE_MASCULINE  liel-ais
    D5   zemen-e               DEFINITE_ADJECTIVE_FEMININE   skaist-ā
    PRONOUN, INDECLINABLE, UNKNOWN
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, FrozenSet, Iterator, List, Optional, Tuple

from locit.characters import get_syllable_count, validate_word
from locit.constants import (
    Case, DeclensionGroup, Gender, GNumber,
    DECLENSION_GENDER, DECLENSION_SUFFIX_LEN,
)
from locit.exceptions import InvalidPluralFormError, InvalidWordError
from locit.palatalization import extract_root, palatalize
from locit.special_cases import (
    REGISTRY, SpecialCaseEntry, SpecialCaseRegistry, check_entry,
)

logger = logging.getLogger(__name__)

SG = GNumber.SINGULAR
PL = GNumber.PLURAL


# ============================================================================
# Options
# ============================================================================

@dataclass(frozen=True)
class NounOptions:
    """
    Per-word configuration.

    Attributes:
        override_gender: Forces gender resolution unless UNKNOWN.
        proper_noun: Shortens 1st declension vocatives and relaxes
            2nd declension palatalization.
        use_ar_with_instrumental: Read instrumental forms with "ar ".
        use_palatalized_r: Enable the dialectal r -> ŗ mutation.
    """
    override_gender: Gender = Gender.UNKNOWN
    proper_noun: bool = False
    use_ar_with_instrumental: bool = True
    use_palatalized_r: bool = False


# ============================================================================
# Classification
# ============================================================================

# Evaluated top to bottom, first match wins. Several suffixes are tails
# of others ("ais"/"is", "ies"/"s"), so the order must not change.
SUFFIX_LADDER: List[Tuple[Tuple[str, ...], DeclensionGroup]] = [
    (('ais',), DeclensionGroup.DEFINITE_ADJECTIVE_MASCULINE),
    (('is',), DeclensionGroup.D2),
    (('us',), DeclensionGroup.D3),
    (('tājies', 'ējies', 'umies'), DeclensionGroup.REFLEXIVE_MASCULINE),
    (('šanās', 'tājās', 'ējās'), DeclensionGroup.REFLEXIVE_FEMININE),
    (('s', 'š'), DeclensionGroup.D1),
    (('a',), DeclensionGroup.D4),
    (('e',), DeclensionGroup.D5),
    (('ā',), DeclensionGroup.DEFINITE_ADJECTIVE_FEMININE),
    (('o', 'ē', 'ī', 'ū', 'padsmit', 'desmit'), DeclensionGroup.INDECLINABLE),
]


def classify_by_suffix(base: str) -> DeclensionGroup:
    """
    Get the declension group of a regular word from its ending.

    Args:
        base: Nominative singular, lowercase.

    Returns:
        The first matching group on the ladder, or UNKNOWN.
    """
    for suffixes, group in SUFFIX_LADDER:
        if base.endswith(suffixes):
            return group
    return DeclensionGroup.UNKNOWN


def resolve_gender(
    override_gender: Gender,
    entry_gender: Optional[Gender],
    group: DeclensionGroup,
) -> Gender:
    """
    Resolve gender: caller override, then special case, then group default.
    """
    if override_gender != Gender.UNKNOWN:
        return override_gender
    if entry_gender is not None:
        return entry_gender
    return DECLENSION_GENDER[group]


@dataclass(frozen=True)
class Analysis:
    """Classification result for one base word."""
    base: str
    declension_group: DeclensionGroup
    suffix_len: int
    gender: Gender
    root: str
    root_palatalized: str
    use_palatalized: Optional[bool] = None
    plural_only: bool = False
    special_case: Optional[SpecialCaseEntry] = None


def analyze(
    base: str,
    options: Optional[NounOptions] = None,
    registry: Optional[SpecialCaseRegistry] = None,
) -> Analysis:
    """
    Classify a base word and derive its roots.

    Args:
        base: Nominative singular, lowercase.
        options: Word configuration.
        registry: Special case registry; defaults to the process-wide one.

    Returns:
        Analysis with group, suffix length, gender and roots.

    Raises:
        InvalidPluralFormError: The special case links to itself.
        InvalidSuffixLengthError: The special case suffix is too long.
    """
    options = options or NounOptions()
    registry = registry if registry is not None else REGISTRY

    entry = registry.lookup(base)
    if entry is not None:
        check_entry(base, entry)
        group = entry.declension_group
        if group is None:
            # suffix_len only applies together with a group
            group = DeclensionGroup.UNKNOWN
            suffix_len = DECLENSION_SUFFIX_LEN[group]
        elif entry.suffix_len is not None:
            suffix_len = entry.suffix_len
        else:
            suffix_len = DECLENSION_SUFFIX_LEN[group]
        gender = resolve_gender(options.override_gender, entry.gender, group)
        use_palatalized = entry.use_palatalized
        plural_only = entry.plural_only
        source = "special case"
    else:
        group = classify_by_suffix(base)
        suffix_len = DECLENSION_SUFFIX_LEN[group]
        gender = resolve_gender(options.override_gender, None, group)
        use_palatalized = None
        plural_only = False
        source = "suffix ladder"

    root = extract_root(base, suffix_len)
    logger.debug(
        f"Classified {base!r} by {source}: {group.name}, "
        f"suffix_len={suffix_len}, gender={gender.name}"
    )
    return Analysis(
        base=base,
        declension_group=group,
        suffix_len=suffix_len,
        gender=gender,
        root=root,
        root_palatalized=palatalize(root, options.use_palatalized_r),
        use_palatalized=use_palatalized,
        plural_only=plural_only,
        special_case=entry,
    )


# ============================================================================
# Inflection Table
# ============================================================================

class InflectionTable:
    """
    Sparse, write-once grid of inflected forms.

    One row per number, one cell per case. An empty cell means the form
    does not exist for the word. The first write to a cell wins, and
    singular writes are dropped for plural-only words.
    """

    def __init__(self, plural_only: bool = False):
        self.plural_only = plural_only
        self._rows: List[List[Optional[str]]] = [[None] * len(Case) for _ in GNumber]

    def set(self, number: GNumber, case: Case, form: str) -> bool:
        """
        Write a cell unless it is already filled.

        Returns:
            True if the form was stored.
        """
        if self.plural_only and number == GNumber.SINGULAR:
            return False
        row = self._rows[number]
        if row[case]:
            return False
        row[case] = form
        return True

    def get(self, number: GNumber, case: Case) -> Optional[str]:
        return self._rows[number][case]

    @property
    def default_number(self) -> GNumber:
        """Number read when the caller does not ask for one."""
        return GNumber.PLURAL if self.plural_only else GNumber.SINGULAR

    def __iter__(self) -> Iterator[Tuple[GNumber, Case, str]]:
        for number in GNumber:
            for case in Case:
                form = self._rows[number][case]
                if form is not None:
                    yield number, case, form

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def as_dict(self) -> Dict[GNumber, Dict[Case, str]]:
        """Return defined cells as {number: {case: form}}."""
        result: Dict[GNumber, Dict[Case, str]] = {number: {} for number in GNumber}
        for number, case, form in self:
            result[number][case] = form
        return result

    def __eq__(self, other) -> bool:
        if not isinstance(other, InflectionTable):
            return NotImplemented
        return self.plural_only == other.plural_only and self._rows == other._rows

    def __repr__(self) -> str:
        return f"InflectionTable({self.as_dict()!r}, plural_only={self.plural_only})"


# ============================================================================
# Inflection Rule Definition
# ============================================================================

class Stem(Enum):
    """What an inflection suffix is attached to."""
    ROOT = "root"
    PALATALIZED = "palatalized"
    BASE = "base"


@dataclass(frozen=True)
class InflectionRule:
    """
    A single cell of a declension pattern.

    Attributes:
        number: Grammatical number of the cell.
        case: Grammatical case of the cell.
        suffix: Ending appended to the stem.
        stem: Root, palatalized root or the whole base.
    """
    number: GNumber
    case: Case
    suffix: str = ""
    stem: Stem = Stem.ROOT

    def apply(self, analysis: Analysis) -> str:
        if self.stem == Stem.BASE:
            return analysis.base + self.suffix
        if self.stem == Stem.PALATALIZED:
            return analysis.root_palatalized + self.suffix
        return analysis.root + self.suffix


def resolve_use_palatalized(analysis: Analysis, options: NounOptions) -> bool:
    """
    Decide whether palatalized cells use the mutated root.

    An explicit special case value always wins. Otherwise the 2nd
    declension palatalizes except after -ckis, -skis, -astis, -atis and
    short proper nouns in -tis/-dis; the 5th and 6th always do.
    """
    if analysis.use_palatalized is not None:
        return analysis.use_palatalized
    base = analysis.base
    if analysis.declension_group == DeclensionGroup.D2:
        if base.endswith(('ckis', 'skis', 'astis', 'atis')):
            return False
        if (options.proper_noun and base.endswith(('tis', 'dis'))
                and get_syllable_count(base) < 3):
            return False
        return True
    return analysis.declension_group in (DeclensionGroup.D5, DeclensionGroup.D6)


def _mutable_stem(analysis: Analysis, options: NounOptions) -> Stem:
    return Stem.PALATALIZED if resolve_use_palatalized(analysis, options) else Stem.ROOT


# ============================================================================
# Regular Noun Declensions
# ============================================================================

def generate_d1_rules(analysis: Analysis, options: NounOptions) -> List[InflectionRule]:
    """1st declension: mast-s, vēj-š."""
    short_vocative = options.proper_noun or analysis.base.endswith(('ējs', 'ājs', 'iņš', 'nieks'))
    return [
        InflectionRule(SG, Case.GENITIVE, "a"),
        InflectionRule(SG, Case.DATIVE, "am"),
        InflectionRule(SG, Case.ACCUSATIVE, "u"),
        InflectionRule(SG, Case.INSTRUMENTAL, "u"),
        InflectionRule(SG, Case.LOCATIVE, "ā"),
        InflectionRule(SG, Case.VOCATIVE, "", Stem.ROOT if short_vocative else Stem.BASE),
        InflectionRule(PL, Case.NOMINATIVE, "i"),
        InflectionRule(PL, Case.GENITIVE, "u"),
        InflectionRule(PL, Case.DATIVE, "iem"),
        InflectionRule(PL, Case.ACCUSATIVE, "us"),
        InflectionRule(PL, Case.INSTRUMENTAL, "iem"),
        InflectionRule(PL, Case.LOCATIVE, "os"),
        InflectionRule(PL, Case.VOCATIVE, "i"),
    ]


def generate_d2_rules(analysis: Analysis, options: NounOptions) -> List[InflectionRule]:
    """2nd declension: apl-is. Genitive and plural palatalize."""
    stem = _mutable_stem(analysis, options)
    return [
        InflectionRule(SG, Case.GENITIVE, "a", stem),
        InflectionRule(SG, Case.DATIVE, "im"),
        InflectionRule(SG, Case.ACCUSATIVE, "i"),
        InflectionRule(SG, Case.INSTRUMENTAL, "i"),
        InflectionRule(SG, Case.LOCATIVE, "ī"),
        InflectionRule(SG, Case.VOCATIVE, "i"),
        InflectionRule(PL, Case.NOMINATIVE, "i", stem),
        InflectionRule(PL, Case.GENITIVE, "u", stem),
        InflectionRule(PL, Case.DATIVE, "iem", stem),
        InflectionRule(PL, Case.ACCUSATIVE, "us", stem),
        InflectionRule(PL, Case.INSTRUMENTAL, "iem", stem),
        InflectionRule(PL, Case.LOCATIVE, "os", stem),
        InflectionRule(PL, Case.VOCATIVE, "i", stem),
    ]


def generate_d3_rules(analysis: Analysis, options: NounOptions) -> List[InflectionRule]:
    """3rd declension: med-us. Feminine nouns keep -u- in the plural."""
    masculine = analysis.gender == Gender.MASCULINE
    rules = [
        InflectionRule(SG, Case.GENITIVE, "", Stem.BASE),
        InflectionRule(SG, Case.DATIVE, "um" if masculine else "ui"),
        InflectionRule(SG, Case.ACCUSATIVE, "u"),
        InflectionRule(SG, Case.INSTRUMENTAL, "u"),
        InflectionRule(SG, Case.LOCATIVE, "ū"),
        InflectionRule(SG, Case.VOCATIVE, "u"),
        InflectionRule(PL, Case.GENITIVE, "u"),
        InflectionRule(PL, Case.ACCUSATIVE, "us"),
    ]
    if masculine:
        rules += [
            InflectionRule(PL, Case.NOMINATIVE, "i"),
            InflectionRule(PL, Case.DATIVE, "iem"),
            InflectionRule(PL, Case.INSTRUMENTAL, "iem"),
            InflectionRule(PL, Case.LOCATIVE, "os"),
            InflectionRule(PL, Case.VOCATIVE, "i"),
        ]
    else:
        rules += [
            InflectionRule(PL, Case.NOMINATIVE, "us"),
            InflectionRule(PL, Case.DATIVE, "ūm"),
            InflectionRule(PL, Case.INSTRUMENTAL, "ūm"),
            InflectionRule(PL, Case.LOCATIVE, "ūs"),
            InflectionRule(PL, Case.VOCATIVE, "us"),
        ]
    return rules


def generate_d4_rules(analysis: Analysis, options: NounOptions) -> List[InflectionRule]:
    """4th declension: naud-a. Long nouns have a bare-root vocative."""
    masculine = analysis.gender == Gender.MASCULINE
    vocative = "a" if get_syllable_count(analysis.base) < 3 else ""
    return [
        InflectionRule(SG, Case.GENITIVE, "as"),
        InflectionRule(SG, Case.DATIVE, "am" if masculine else "ai"),
        InflectionRule(SG, Case.ACCUSATIVE, "u"),
        InflectionRule(SG, Case.INSTRUMENTAL, "u"),
        InflectionRule(SG, Case.LOCATIVE, "ā"),
        InflectionRule(SG, Case.VOCATIVE, vocative),
        InflectionRule(PL, Case.NOMINATIVE, "as"),
        InflectionRule(PL, Case.GENITIVE, "u"),
        InflectionRule(PL, Case.DATIVE, "ām"),
        InflectionRule(PL, Case.ACCUSATIVE, "as"),
        InflectionRule(PL, Case.INSTRUMENTAL, "ām"),
        InflectionRule(PL, Case.LOCATIVE, "ās"),
        InflectionRule(PL, Case.VOCATIVE, "as"),
    ]


def generate_d5_rules(analysis: Analysis, options: NounOptions) -> List[InflectionRule]:
    """5th declension: zemen-e. Plural genitive palatalizes."""
    masculine = analysis.gender == Gender.MASCULINE
    vocative = "e" if get_syllable_count(analysis.base) < 3 else ""
    return [
        InflectionRule(SG, Case.GENITIVE, "es"),
        InflectionRule(SG, Case.DATIVE, "em" if masculine else "ei"),
        InflectionRule(SG, Case.ACCUSATIVE, "i"),
        InflectionRule(SG, Case.INSTRUMENTAL, "i"),
        InflectionRule(SG, Case.LOCATIVE, "ē"),
        InflectionRule(SG, Case.VOCATIVE, vocative),
        InflectionRule(PL, Case.NOMINATIVE, "es"),
        InflectionRule(PL, Case.GENITIVE, "u", _mutable_stem(analysis, options)),
        InflectionRule(PL, Case.DATIVE, "ēm"),
        InflectionRule(PL, Case.ACCUSATIVE, "es"),
        InflectionRule(PL, Case.INSTRUMENTAL, "ēm"),
        InflectionRule(PL, Case.LOCATIVE, "ēs"),
        InflectionRule(PL, Case.VOCATIVE, "es"),
    ]


def generate_d6_rules(analysis: Analysis, options: NounOptions) -> List[InflectionRule]:
    """6th declension: krāsn-s. Plural genitive palatalizes."""
    feminine = analysis.gender == Gender.FEMININE
    return [
        InflectionRule(SG, Case.GENITIVE, "s"),
        InflectionRule(SG, Case.DATIVE, "ij" if feminine else "im"),
        InflectionRule(SG, Case.ACCUSATIVE, "i"),
        InflectionRule(SG, Case.INSTRUMENTAL, "i"),
        InflectionRule(SG, Case.LOCATIVE, "ī"),
        InflectionRule(SG, Case.VOCATIVE, "", Stem.BASE),
        InflectionRule(PL, Case.NOMINATIVE, "is"),
        InflectionRule(PL, Case.GENITIVE, "u", _mutable_stem(analysis, options)),
        InflectionRule(PL, Case.DATIVE, "īm"),
        InflectionRule(PL, Case.ACCUSATIVE, "is"),
        InflectionRule(PL, Case.INSTRUMENTAL, "īm"),
        InflectionRule(PL, Case.LOCATIVE, "īs"),
        InflectionRule(PL, Case.VOCATIVE, "is"),
    ]


# ============================================================================
# Reflexive Nouns (defective paradigms)
# ============================================================================

def generate_reflexive_masculine_rules(analysis: Analysis, options: NounOptions) -> List[InflectionRule]:
    """klausītāj-ies: no dative, locative or vocative."""
    return [
        InflectionRule(SG, Case.GENITIVE, "ās"),
        InflectionRule(SG, Case.ACCUSATIVE, "os"),
        InflectionRule(SG, Case.INSTRUMENTAL, "os"),
        InflectionRule(PL, Case.NOMINATIVE, "", Stem.BASE),
        InflectionRule(PL, Case.GENITIVE, "os"),
        InflectionRule(PL, Case.ACCUSATIVE, "os"),
    ]


def generate_reflexive_feminine_rules(analysis: Analysis, options: NounOptions) -> List[InflectionRule]:
    """atgriešan-ās: no dative, locative or vocative."""
    return [
        InflectionRule(SG, Case.GENITIVE, "", Stem.BASE),
        InflectionRule(SG, Case.ACCUSATIVE, "os"),
        InflectionRule(SG, Case.INSTRUMENTAL, "os"),
        InflectionRule(PL, Case.NOMINATIVE, "", Stem.BASE),
        InflectionRule(PL, Case.GENITIVE, "os"),
        InflectionRule(PL, Case.ACCUSATIVE, "", Stem.BASE),
    ]


# ============================================================================
# Definite Adjectives
# ============================================================================

def _uses_short_adjective_suffixes(analysis: Analysis, endings: Tuple[str, ...]) -> bool:
    # "pēdējais" -> "pēdējam", not "pēdējajam"
    return analysis.base.endswith(endings) or get_syllable_count(analysis.base) > 3


def generate_definite_adjective_masculine_rules(analysis: Analysis, options: NounOptions) -> List[InflectionRule]:
    """liel-ais"""
    if _uses_short_adjective_suffixes(analysis, ('amais', 'ējais')):
        sg_dative, sg_locative, pl_dative, pl_locative = "am", "ā", "iem", "os"
    else:
        sg_dative, sg_locative, pl_dative, pl_locative = "ajam", "ajā", "ajiem", "ajos"
    return [
        InflectionRule(SG, Case.GENITIVE, "ā"),
        InflectionRule(SG, Case.DATIVE, sg_dative),
        InflectionRule(SG, Case.ACCUSATIVE, "o"),
        InflectionRule(SG, Case.INSTRUMENTAL, "o"),
        InflectionRule(SG, Case.LOCATIVE, sg_locative),
        InflectionRule(SG, Case.VOCATIVE, "", Stem.BASE),
        InflectionRule(PL, Case.NOMINATIVE, "ie"),
        InflectionRule(PL, Case.GENITIVE, "o"),
        InflectionRule(PL, Case.DATIVE, pl_dative),
        InflectionRule(PL, Case.ACCUSATIVE, "os"),
        InflectionRule(PL, Case.INSTRUMENTAL, pl_dative),
        InflectionRule(PL, Case.LOCATIVE, pl_locative),
        InflectionRule(PL, Case.VOCATIVE, "ie"),
    ]


def generate_definite_adjective_feminine_rules(analysis: Analysis, options: NounOptions) -> List[InflectionRule]:
    """skaist-ā"""
    if _uses_short_adjective_suffixes(analysis, ('amā', 'ējā')):
        sg_dative, sg_locative, pl_dative, pl_locative = "ai", "ā", "ām", "ās"
    else:
        sg_dative, sg_locative, pl_dative, pl_locative = "ajai", "ajā", "ajām", "ajās"
    return [
        InflectionRule(SG, Case.GENITIVE, "ās"),
        InflectionRule(SG, Case.DATIVE, sg_dative),
        InflectionRule(SG, Case.ACCUSATIVE, "o"),
        InflectionRule(SG, Case.INSTRUMENTAL, "o"),
        InflectionRule(SG, Case.LOCATIVE, sg_locative),
        InflectionRule(SG, Case.VOCATIVE, "", Stem.BASE),
        InflectionRule(PL, Case.NOMINATIVE, "ās"),
        InflectionRule(PL, Case.GENITIVE, "o"),
        InflectionRule(PL, Case.DATIVE, pl_dative),
        InflectionRule(PL, Case.ACCUSATIVE, "ās"),
        InflectionRule(PL, Case.INSTRUMENTAL, pl_dative),
        InflectionRule(PL, Case.LOCATIVE, pl_locative),
        InflectionRule(PL, Case.VOCATIVE, "ās"),
    ]


# ============================================================================
# Indeclinable Words
# ============================================================================

def generate_indeclinable_rules(analysis: Analysis, options: NounOptions) -> List[InflectionRule]:
    """kino, desmit: the base in every cell."""
    return [
        InflectionRule(number, case, "", Stem.BASE)
        for number in GNumber
        for case in Case
        if (number, case) != (SG, Case.NOMINATIVE)
    ]


RuleGenerator = Callable[[Analysis, NounOptions], List[InflectionRule]]

# Pronouns and unknown words get no generated cells beyond the nominative
GROUP_RULES: Dict[DeclensionGroup, RuleGenerator] = {
    DeclensionGroup.D1: generate_d1_rules,
    DeclensionGroup.D2: generate_d2_rules,
    DeclensionGroup.D3: generate_d3_rules,
    DeclensionGroup.D4: generate_d4_rules,
    DeclensionGroup.D5: generate_d5_rules,
    DeclensionGroup.D6: generate_d6_rules,
    DeclensionGroup.REFLEXIVE_MASCULINE: generate_reflexive_masculine_rules,
    DeclensionGroup.REFLEXIVE_FEMININE: generate_reflexive_feminine_rules,
    DeclensionGroup.DEFINITE_ADJECTIVE_MASCULINE: generate_definite_adjective_masculine_rules,
    DeclensionGroup.DEFINITE_ADJECTIVE_FEMININE: generate_definite_adjective_feminine_rules,
    DeclensionGroup.INDECLINABLE: generate_indeclinable_rules,
}


# ============================================================================
# Generation
# ============================================================================

def apply_special_case(
    table: InflectionTable,
    analysis: Analysis,
    registry: SpecialCaseRegistry,
    seen: FrozenSet[str] = frozenset(),
) -> None:
    """
    Write a special case's explicit forms into the table.

    Explicit singular forms go first, then the linked plural's paradigm
    fills the plural row, then plural-only words copy their explicit forms
    into the plural row as well.
    """
    entry = analysis.special_case
    if entry is None:
        return

    forms = entry.case_forms()
    for case, form in forms:
        table.set(SG, case, form)

    if entry.linked_plural is not None:
        if entry.linked_plural == analysis.base or entry.linked_plural in seen:
            raise InvalidPluralFormError(analysis.base)
        linked = inflect(
            entry.linked_plural,
            NounOptions(use_ar_with_instrumental=False),
            registry,
            _seen=seen | {analysis.base},
        )
        for case in Case:
            form = linked.get(linked.default_number, case)
            # Defective linked words simply leave the cell empty
            if form is not None:
                table.set(PL, case, form)

    if entry.plural_only:
        table.set(PL, Case.NOMINATIVE, analysis.base)
        for case, form in forms:
            table.set(PL, case, form)


def generate(
    analysis: Analysis,
    options: Optional[NounOptions] = None,
    registry: Optional[SpecialCaseRegistry] = None,
    _seen: FrozenSet[str] = frozenset(),
) -> InflectionTable:
    """
    Generate the inflection grid for an analyzed word.

    Args:
        analysis: Result of analyze().
        options: Word configuration.
        registry: Special case registry used for linked plurals.

    Returns:
        A new InflectionTable.
    """
    options = options or NounOptions()
    registry = registry if registry is not None else REGISTRY

    table = InflectionTable(plural_only=analysis.plural_only)
    apply_special_case(table, analysis, registry, _seen)
    table.set(SG, Case.NOMINATIVE, analysis.base)

    generator = GROUP_RULES.get(analysis.declension_group)
    if generator is not None:
        for rule in generator(analysis, options):
            table.set(rule.number, rule.case, rule.apply(analysis))
    return table


def inflect(
    word: str,
    options: Optional[NounOptions] = None,
    registry: Optional[SpecialCaseRegistry] = None,
    _seen: FrozenSet[str] = frozenset(),
) -> InflectionTable:
    """
    Compute the full inflection table of a word.

    Capitalization and the instrumental preposition are not applied;
    the table holds lowercase forms.

    Args:
        word: Nominative singular.
        options: Word configuration.
        registry: Special case registry; defaults to the process-wide one.

    Returns:
        InflectionTable with every defined cell.

    Raises:
        InvalidWordError: The word has non-alphabet characters.
        ConfigurationError: The word's special case data is inconsistent.

    Example:
        >>> inflect("robots").get(GNumber.PLURAL, Case.NOMINATIVE)
        'roboti'
    """
    if not validate_word(word):
        raise InvalidWordError(word)
    base = word.lower()
    analysis = analyze(base, options, registry)
    return generate(analysis, options, registry, _seen)
