"""
Tests for cli.py - Command line interface.
"""

import json

import pytest

from locit import settings
from locit.cli import main
from locit.lexicon import get_session, init_lexicon, save_special_case
from locit.constants import DeclensionGroup
from locit.special_cases import SpecialCaseEntry


@pytest.fixture(autouse=True)
def no_default_lexicon(tmp_path, monkeypatch):
    """Point the default lexicon somewhere empty."""
    monkeypatch.setattr(settings, 'LEXICON_PATH', tmp_path / 'default.db')


class TestCLIBasics:
    """Tests for basic CLI functionality."""

    def test_version(self, capsys):
        """Test version flag."""
        result = main(['--version'])
        assert result == 0
        captured = capsys.readouterr()
        assert 'locit' in captured.out
        assert '0.1.0' in captured.out

    def test_help(self, capsys):
        """Test help flag."""
        with pytest.raises(SystemExit) as exc_info:
            main(['--help'])
        assert exc_info.value.code == 0
        captured = capsys.readouterr()
        assert 'Latvian' in captured.out

    def test_no_args(self, capsys):
        """Test running with no arguments."""
        result = main([])
        assert result == 1


class TestCLIOutput:
    """Tests for declension output."""

    def test_paradigm_table(self, capsys):
        assert main(['robots']) == 0
        out = capsys.readouterr().out
        assert out.startswith('robots')
        assert 'ģenitīvs' in out
        assert 'ar robotiem' in out

    def test_defective_cells_shown_as_dash(self, capsys):
        assert main(['es']) == 0
        out = capsys.readouterr().out
        vocative_line = [line for line in out.splitlines() if 'vokatīvs' in line][0]
        assert vocative_line.split()[1:] == ['-', '-']

    def test_several_words(self, capsys):
        assert main(['robots', 'zivs']) == 0
        out = capsys.readouterr().out
        assert 'robotiem' in out
        assert 'zivīm' in out

    def test_single_case(self, capsys):
        assert main(['-c', 'genitive', 'robots']) == 0
        assert capsys.readouterr().out.strip() == 'robota'

    def test_single_case_plural(self, capsys):
        assert main(['-c', 'dative', '-p', 'robots']) == 0
        assert capsys.readouterr().out.strip() == 'robotiem'

    def test_no_ar(self, capsys):
        assert main(['-c', 'instrumental', '--no-ar', 'robots']) == 0
        assert capsys.readouterr().out.strip() == 'robotu'

    def test_proper_noun(self, capsys):
        assert main(['--proper', '-c', 'vocative', 'Toms']) == 0
        assert capsys.readouterr().out.strip() == 'Tom'

    def test_gender(self, capsys):
        assert main(['-g', 'masculine', '-c', 'dative', 'pļāpa']) == 0
        assert capsys.readouterr().out.strip() == 'pļāpam'

    def test_palatalized_r(self, capsys):
        assert main(['--palatalized-r', '-c', 'genitive', 'kāris']) == 0
        assert capsys.readouterr().out.strip() == 'kāŗa'

    def test_full_json(self, capsys):
        assert main(['-f', 'robots']) == 0
        data = json.loads(capsys.readouterr().out)
        assert data['word'] == 'robots'
        assert data['declension_group'] == 'D1'
        assert data['forms'][1]['singular'] == 'robota'

    def test_full_json_several_words(self, capsys):
        assert main(['-f', 'robots', 'zivs']) == 0
        data = json.loads(capsys.readouterr().out)
        assert [item['word'] for item in data] == ['robots', 'zivs']

    def test_unknown_case_name(self):
        with pytest.raises(SystemExit):
            main(['-c', 'ablative', 'robots'])


class TestCLIErrors:
    """Tests for error reporting."""

    def test_invalid_word(self, capsys):
        assert main(['robots!']) == 1
        assert 'Invalid Latvian word' in capsys.readouterr().err

    def test_mixed_caps(self, capsys):
        assert main(['RoBoTs']) == 1
        assert 'Mixed capitalization' in capsys.readouterr().err

    def test_no_case(self, capsys):
        assert main(['-c', 'vocative', 'es']) == 1
        assert 'not defined for word' in capsys.readouterr().err

    def test_missing_lexicon(self, tmp_path, capsys):
        assert main(['-d', str(tmp_path / 'missing.db'), 'robots']) == 1
        assert 'lexicon not found' in capsys.readouterr().err


class TestCLILexicon:
    """Tests for lexicon loading and init-db."""

    def test_lexicon_flag(self, tmp_path, capsys):
        path = tmp_path / 'words.db'
        with get_session(path) as session:
            save_special_case(session, 'superkrāsns', SpecialCaseEntry(declension_group=DeclensionGroup.D6))
            session.commit()
        assert main(['-d', str(path), '-c', 'dative', 'superkrāsns']) == 0
        assert capsys.readouterr().out.strip() == 'superkrāsnij'

    def test_default_lexicon(self, capsys):
        with get_session(settings.LEXICON_PATH) as session:
            save_special_case(session, 'superkrāsns', SpecialCaseEntry(declension_group=DeclensionGroup.D6))
            session.commit()
        assert main(['-c', 'dative', 'superkrāsns']) == 0
        assert capsys.readouterr().out.strip() == 'superkrāsnij'

    def test_without_lexicon(self, capsys):
        assert main(['-c', 'dative', 'superkrāsns']) == 0
        assert capsys.readouterr().out.strip() == 'superkrāsnam'

    def test_init_db(self, tmp_path, capsys):
        path = tmp_path / 'out.db'
        assert main(['init-db', '-o', str(path)]) == 0
        assert path.exists()
        assert 'Lexicon written' in capsys.readouterr().out

    def test_init_db_default_path(self, capsys):
        assert main(['init-db']) == 0
        assert settings.LEXICON_PATH.exists()

    def test_init_db_existing(self, tmp_path, capsys):
        path = tmp_path / 'out.db'
        init_lexicon(path)
        assert main(['init-db', '-o', str(path)]) == 1
        assert 'already exists' in capsys.readouterr().err
        assert main(['init-db', '-o', str(path), '--force']) == 0
