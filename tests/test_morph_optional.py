import pytest

from jastylelint import morph
from jastylelint.checker import check_text
from jastylelint.manager import RulesManager


def _require_backend():
    if not morph.is_available():
        pytest.skip('fugashi/janome not installed')


def test_tokenize_without_text():
    assert morph.tokenize('') == []


def test_tokenize_offsets():
    _require_backend()
    text = '私は本を読みます。'
    tokens = morph.tokenize(text)
    assert tokens
    assert morph.backend() in ('fugashi', 'janome')
    for t in tokens:
        assert text[t.start:t.end] == t.surface
    assert any(t.is_particle() for t in tokens)


def test_check_text_with_morph():
    _require_backend()
    manager = RulesManager({'enable_particle_repetition': True})
    found = check_text('私は本を彼は読む。', manager, morph=True)
    assert any(d.code.value == 'particle-repetition' for d in found)
