"""
Tests for special_cases.py - Irregular nouns and the special case registry.
"""

import pytest

from locit import (
    Case, DeclensionGroup, Gender, GNumber, Noun, NounOptions, SpecialCaseEntry,
    ConfigurationError, InvalidPluralFormError, InvalidSuffixLengthError,
    register_special_case,
)
from locit.special_cases import (
    D6_NOUNS, REGISTRY, SpecialCaseRegistry, build_builtin_special_cases,
    lookup_special_case,
)

PL = GNumber.PLURAL


class TestSecondDeclensionSpecialCases:
    """Irregular 2nd declension nouns."""

    def test_suns(self):
        n = Noun('suns')
        assert [n.declension(case) for case in Case] == [
            'suns', 'suņa', 'sunim', 'suni', 'ar suni', 'sunī', 'suni',
        ]
        assert [n.declension(case, PL) for case in Case] == [
            'suņi', 'suņu', 'suņiem', 'suņus', 'ar suņiem', 'suņos', 'suņi',
        ]

    def test_akmens(self):
        n = Noun('akmens')
        assert [n.declension(case) for case in Case] == [
            'akmens', 'akmens', 'akmenim', 'akmeni', 'ar akmeni', 'akmenī', 'akmen',
        ]
        assert [n.declension(case, PL) for case in Case] == [
            'akmeņi', 'akmeņu', 'akmeņiem', 'akmeņus', 'ar akmeņiem', 'akmeņos', 'akmeņi',
        ]

    def test_palatalization_overrides(self):
        assert Noun('briedis').declension(Case.GENITIVE) == 'brieža'
        n = Noun('tētis')
        assert n.declension(Case.GENITIVE) == 'tēta'
        assert n.declension(Case.DATIVE, PL) == 'tētiem'
        n = Noun('viesis')
        assert n.declension(Case.NOMINATIVE, PL) == 'viesi'
        assert n.declension(Case.DATIVE, PL) == 'viesiem'
        assert Noun('tumšmatis').declension(Case.NOMINATIVE, PL) == 'tumšmati'


class TestThirdDeclensionSpecialCases:
    """Plural-only feminine 3rd declension nouns."""

    def test_pelus(self):
        n = Noun('pelus')
        assert n.declension(Case.GENITIVE, PL) == 'pelu'
        assert n.declension(Case.DATIVE, PL) == 'pelūm'
        assert n.declension(Case.ACCUSATIVE, PL) == 'pelus'
        assert n.declension(Case.LOCATIVE, PL) == 'pelūs'

    def test_singular_overrides_land_in_plural(self):
        n = Noun('pelus')
        assert n.inflections.get(GNumber.SINGULAR, Case.DATIVE) is None
        assert n.declension(Case.DATIVE) == 'pelūm'


class TestFourthDeclensionSpecialCases:
    """Irregular 4th declension nouns."""

    @pytest.mark.parametrize("word", ['lauva', 'puika'])
    def test_masculine(self, word):
        root = word[:-1]
        n = Noun(word)
        assert n.gender == Gender.MASCULINE
        assert [n.declension(case) for case in Case] == [
            word, root + 'as', root + 'am', root + 'u', 'ar ' + root + 'u', root + 'ā', word,
        ]
        assert [n.declension(case, PL) for case in Case] == [
            root + 'as', root + 'u', root + 'ām', root + 'as', 'ar ' + root + 'ām', root + 'ās', root + 'as',
        ]

    def test_feminine_vocatives(self):
        n = Noun('meita')
        assert n.gender == Gender.FEMININE
        assert n.declension(Case.DATIVE) == 'meitai'
        assert n.declension(Case.VOCATIVE) == 'meit'


class TestFifthAndSixthDeclensionSpecialCases:
    """Unpalatalized plural genitives."""

    def test_kase(self):
        assert Noun('kase').declension(Case.GENITIVE, PL) == 'kasu'

    def test_brokastis(self):
        assert Noun('brokastis').declension(Case.GENITIVE, PL) == 'brokastu'

    def test_all_sixth_declension_nouns_registered(self):
        for word in D6_NOUNS:
            assert Noun(word).declension_group == DeclensionGroup.D6


class TestRegistration:
    """Runtime registration of special cases."""

    def test_add_unknown_special_case(self):
        Noun.add_special_case('superkrāsns', SpecialCaseEntry(declension_group=DeclensionGroup.D6))
        n = Noun('superkrāsns')
        n.analyze()
        assert n.declension_group == DeclensionGroup.D6
        assert n.declension(Case.DATIVE) == 'superkrāsnij'

    def test_register_lowercases(self):
        register_special_case('Superkrāsns', SpecialCaseEntry(declension_group=DeclensionGroup.D6))
        assert 'superkrāsns' in REGISTRY
        assert Noun('SUPERKRĀSNS').declension(Case.DATIVE) == 'SUPERKRĀSNIJ'

    def test_registration_is_undone_between_tests(self):
        assert lookup_special_case('superkrāsns') is None
        assert Noun('superkrāsns').declension_group == DeclensionGroup.D1

    def test_replace_existing(self):
        register_special_case('suns', SpecialCaseEntry(declension_group=DeclensionGroup.D1))
        assert Noun('suns').declension(Case.GENITIVE) == 'suna'

    def test_override_gender_beats_special_case(self):
        n = Noun('puika', NounOptions(override_gender=Gender.FEMININE))
        assert n.declension(Case.DATIVE) == 'puikai'

    def test_reset(self):
        registry = SpecialCaseRegistry()
        registry.register('vārds', SpecialCaseEntry(declension_group=DeclensionGroup.D1))
        assert len(registry) == 1
        registry.reset()
        assert 'vārds' not in registry
        assert len(registry) == len(build_builtin_special_cases())

    def test_private_registry(self):
        registry = SpecialCaseRegistry({'robots': SpecialCaseEntry(declension_group=DeclensionGroup.D6)})
        assert Noun('robots', registry=registry).declension_group == DeclensionGroup.D6
        assert Noun('robots').declension_group == DeclensionGroup.D1


class TestValidation:
    """Configuration errors in special case data."""

    def test_builtin_dataset_is_valid(self):
        REGISTRY.validate()

    def test_self_linked_plural(self):
        registry = SpecialCaseRegistry({
            'ab': SpecialCaseEntry(declension_group=DeclensionGroup.PRONOUN, linked_plural='ab'),
        })
        with pytest.raises(InvalidPluralFormError) as exc_info:
            Noun('ab', registry=registry).decline()
        assert exc_info.value.code == 'INVALID_PLURAL_FORM'
        with pytest.raises(InvalidPluralFormError):
            registry.validate()

    def test_linked_plural_cycle(self):
        registry = SpecialCaseRegistry({
            'ab': SpecialCaseEntry(declension_group=DeclensionGroup.PRONOUN, linked_plural='ba'),
            'ba': SpecialCaseEntry(declension_group=DeclensionGroup.PRONOUN, linked_plural='ab'),
        })
        with pytest.raises(InvalidPluralFormError):
            Noun('ab', registry=registry).decline()

    def test_suffix_too_long(self):
        registry = SpecialCaseRegistry({
            'ab': SpecialCaseEntry(declension_group=DeclensionGroup.D1, suffix_len=5),
        })
        with pytest.raises(InvalidSuffixLengthError) as exc_info:
            Noun('ab', registry=registry).analyze()
        assert exc_info.value.code == 'INVALID_SUFFIX_LENGTH'
        assert exc_info.value.suffix_len == 5
        with pytest.raises(ConfigurationError):
            registry.validate()

    def test_registration_is_not_validated_eagerly(self):
        register_special_case('ab', SpecialCaseEntry(declension_group=DeclensionGroup.D1, suffix_len=5))
        with pytest.raises(InvalidSuffixLengthError):
            Noun('ab').analyze()

    def test_suffix_len_without_group_is_ignored(self):
        register_special_case('vārdsa', SpecialCaseEntry(suffix_len=2))
        n = Noun('vārdsa')
        assert n.declension_group == DeclensionGroup.UNKNOWN
        assert n.suffix_len == 0
        assert n.root == 'vārdsa'

    def test_suffix_len_without_group_is_not_checked(self):
        registry = SpecialCaseRegistry({'ab': SpecialCaseEntry(suffix_len=5)})
        registry.validate()
        assert Noun('ab', registry=registry).root == 'ab'
