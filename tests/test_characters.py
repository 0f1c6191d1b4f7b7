"""
Tests for characters.py - Alphabet validation, capitalization and syllables.
"""

import pytest

from locit.characters import (
    get_caps_style, get_syllable_count, is_vowel, set_caps_style, validate_word,
)
from locit.constants import CapsStyle


class TestValidateWord:
    """Tests for validate_word."""

    @pytest.mark.parametrize("word", ['vārdiņš', 'a', 'ŪDENS', 'Ķirsis', 'ōdze', 'ŗūķis'])
    def test_valid(self, word):
        assert validate_word(word) is True

    @pytest.mark.parametrize("word", ['nederīgs!', 'divi vārdi', ' un ', '123', '', 'ku-kū', 'xylofons'])
    def test_invalid(self, word):
        assert validate_word(word) is False


class TestIsVowel:
    """Tests for is_vowel."""

    def test_long_and_short(self):
        assert is_vowel('a')
        assert is_vowel('ā')
        assert is_vowel('Ū')

    def test_consonant(self):
        assert not is_vowel('š')
        assert not is_vowel('k')


class TestCapsStyle:
    """Tests for capitalization detection and restoration."""

    def test_detect(self):
        assert get_caps_style('mazie') == CapsStyle.LOWER_CASE
        assert get_caps_style('LIELIE') == CapsStyle.UPPER_CASE
        assert get_caps_style('Īpašvārds') == CapsStyle.TITLE_CASE
        assert get_caps_style('JoCīGs') == CapsStyle.UNKNOWN

    def test_detect_invalid_word(self):
        assert get_caps_style('Nav!') == CapsStyle.UNKNOWN

    def test_single_capital_letter_is_upper(self):
        assert get_caps_style('A') == CapsStyle.UPPER_CASE

    def test_apply(self):
        assert set_caps_style('mAZIe', CapsStyle.LOWER_CASE) == 'mazie'
        assert set_caps_style('liELie', CapsStyle.UPPER_CASE) == 'LIELIE'
        assert set_caps_style('kalniņš', CapsStyle.TITLE_CASE) == 'Kalniņš'

    def test_apply_unknown_is_identity(self):
        assert set_caps_style('JoCīGs', CapsStyle.UNKNOWN) == 'JoCīGs'

    @pytest.mark.parametrize("word", ['ēzelis', 'ĒZELIS', 'Ēzelis'])
    def test_round_trip(self, word):
        assert set_caps_style(word.lower(), get_caps_style(word)) == word


class TestSyllableCount:
    """Tests for get_syllable_count."""

    def test_counts(self):
        assert get_syllable_count('kapitālisms') == 4
        assert get_syllable_count('spēle') == 2
        assert get_syllable_count('x') == 0

    def test_diphthong_counts_once(self):
        assert get_syllable_count('lauva') == 2
        assert get_syllable_count('miervaldis') == 3

    def test_uppercase_vowels(self):
        assert get_syllable_count('ĀBOLS') == 2
        assert get_syllable_count('Kapitālisms') == get_syllable_count('kapitālisms')
