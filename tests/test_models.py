"""
Tests for models.py - Pydantic paradigm models.
"""

import json

from locit import Noun, NounOptions
from locit.models import CaseForms, ParadigmResult


class TestParadigmResult:
    """Tests for ParadigmResult.from_noun."""

    def test_regular_noun(self):
        result = ParadigmResult.from_noun(Noun('robots'))
        assert result.word == 'robots'
        assert result.declension_group == 'D1'
        assert result.gender == 'masculine'
        assert result.root == 'robot'
        assert result.plural_only is False
        assert len(result.forms) == 7
        assert result.forms[0] == CaseForms(
            case='nominative', case_lv='nominatīvs', singular='robots', plural='roboti',
        )

    def test_form_lookup(self):
        result = ParadigmResult.from_noun(Noun('robots'))
        assert result.form('genitive') == 'robota'
        assert result.form('instrumental', 'plural') == 'ar robotiem'
        assert result.form('ablative') is None

    def test_keeps_caps_and_options(self):
        noun = Noun('Robots', NounOptions(use_ar_with_instrumental=False))
        result = ParadigmResult.from_noun(noun)
        assert result.word == 'Robots'
        assert result.form('instrumental') == 'Robotu'

    def test_defective_cells_are_none(self):
        result = ParadigmResult.from_noun(Noun('es'))
        assert result.form('vocative') is None
        assert result.form('vocative', 'plural') is None
        assert result.form('dative', 'plural') == 'mums'

    def test_plural_only(self):
        result = ParadigmResult.from_noun(Noun('durvis'))
        assert result.plural_only is True
        assert result.form('genitive') is None
        assert result.form('genitive', 'plural') == 'durvju'

    def test_json(self):
        result = ParadigmResult.from_noun(Noun('zivs'))
        data = json.loads(result.model_dump_json())
        assert data['declension_group'] == 'D6'
        assert data['forms'][2]['singular'] == 'zivij'
