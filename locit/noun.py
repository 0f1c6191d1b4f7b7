"""
Noun: a Latvian word together with its lazily computed paradigm.

Usage:
    >>> from locit import Noun, Case, GNumber
    >>> noun = Noun("robots")
    >>> noun.declension(Case.GENITIVE)
    'robota'
    >>> noun.declension(Case.INSTRUMENTAL, GNumber.PLURAL)
    'ar robotiem'
"""

from typing import Dict, Optional, Tuple

from locit.characters import get_caps_style, set_caps_style, validate_word
from locit.constants import (
    CapsStyle, Case, DeclensionGroup, Gender, GNumber, INSTRUMENTAL_PREPOSITION,
)
from locit.declension import (
    Analysis, InflectionTable, NounOptions,
    analyze, generate, resolve_use_palatalized,
)
from locit.exceptions import InvalidWordError, MixedCapsError, NoCaseError
from locit.palatalization import palatalize
from locit.special_cases import (
    REGISTRY, SpecialCaseEntry, SpecialCaseRegistry, register_special_case,
)


class Noun:
    """
    A Latvian noun (or pronoun, numeral, definite adjective).

    Construction validates the word and records its capitalization.
    Analysis and declension run on first use and are memoized; both are
    computed into local objects and published by a single assignment.
    """

    def __init__(
        self,
        word: str,
        options: Optional[NounOptions] = None,
        registry: Optional[SpecialCaseRegistry] = None,
    ):
        """
        Args:
            word: Nominative singular in lower, upper or title case.
            options: Word configuration.
            registry: Special case registry; defaults to the process-wide one.

        Raises:
            InvalidWordError: The word has non-alphabet characters.
            MixedCapsError: The word mixes capitalization styles.
        """
        if not validate_word(word):
            raise InvalidWordError(word)
        self.caps_style = get_caps_style(word)
        if self.caps_style == CapsStyle.UNKNOWN:
            raise MixedCapsError(word)

        self.base = word.lower()
        self.options = options or NounOptions()
        self._registry = registry
        self._analysis: Optional[Analysis] = None
        self._inflections: Optional[InflectionTable] = None

    def __repr__(self) -> str:
        return f"Noun({set_caps_style(self.base, self.caps_style)!r})"

    @property
    def registry(self) -> SpecialCaseRegistry:
        return self._registry if self._registry is not None else REGISTRY

    # ------------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------------

    @property
    def is_analyzed(self) -> bool:
        return self._analysis is not None

    @property
    def has_inflections(self) -> bool:
        return self._inflections is not None

    def analyze(self) -> None:
        """Detect declension group, gender and roots. Idempotent."""
        if self._analysis is not None:
            return
        self._analysis = analyze(self.base, self.options, self.registry)

    def decline(self) -> None:
        """Populate the inflection table. Idempotent; analyzes first if needed."""
        if self._inflections is not None:
            return
        self.analyze()
        self._inflections = generate(self._analysis, self.options, self.registry)

    # ------------------------------------------------------------------------
    # Analysis results
    # ------------------------------------------------------------------------

    @property
    def analysis(self) -> Analysis:
        self.analyze()
        return self._analysis

    @property
    def declension_group(self) -> DeclensionGroup:
        return self.analysis.declension_group

    @property
    def gender(self) -> Gender:
        return self.analysis.gender

    @property
    def suffix_len(self) -> int:
        return self.analysis.suffix_len

    @property
    def root(self) -> str:
        return self.analysis.root

    @property
    def root_palatalized(self) -> str:
        return self.analysis.root_palatalized

    @property
    def plural_only(self) -> bool:
        return self.analysis.plural_only

    @property
    def use_palatalized(self) -> bool:
        return resolve_use_palatalized(self.analysis, self.options)

    @property
    def inflections(self) -> InflectionTable:
        self.decline()
        return self._inflections

    # ------------------------------------------------------------------------
    # Accessor
    # ------------------------------------------------------------------------

    def declension(self, case: Case, number: Optional[GNumber] = None) -> str:
        """
        Get an inflected form.

        Plural-only words always read the plural row. The form is returned
        in the word's original capitalization, and instrumental forms are
        prefixed with "ar " unless disabled in the options.

        Args:
            case: Grammatical case.
            number: Grammatical number; singular when omitted.

        Returns:
            The inflected form.

        Raises:
            NoCaseError: The form does not exist for this word.
        """
        table = self.inflections
        if self.plural_only:
            number = GNumber.PLURAL
        elif number is None:
            number = GNumber.SINGULAR

        form = table.get(number, case)
        if form is None:
            raise NoCaseError(self.base, case, number)

        form = set_caps_style(form, self.caps_style)
        if case == Case.INSTRUMENTAL and self.options.use_ar_with_instrumental:
            form = f"{INSTRUMENTAL_PREPOSITION} {form}"
        return form

    def forms(self) -> Dict[Tuple[Case, GNumber], str]:
        """Get every defined form keyed by (case, number), as declension() reads it."""
        return {
            (case, number): self.declension(case, number)
            for number, case, _ in self.inflections
        }

    # ------------------------------------------------------------------------
    # Static helpers
    # ------------------------------------------------------------------------

    @staticmethod
    def palatalize(root: str, use_palatalized_r: bool = False) -> str:
        """Palatalize the end of a root. See locit.palatalization.palatalize."""
        return palatalize(root, use_palatalized_r)

    @staticmethod
    def add_special_case(word: str, entry: SpecialCaseEntry) -> None:
        """Register a special case in the process-wide registry."""
        register_special_case(word, entry)
