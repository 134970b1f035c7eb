import pytest

from jastylelint.manager import RulesManager


def _run(text, *names):
    return RulesManager().check_with_rules(text, [], names)


@pytest.mark.parametrize("text", ["・A\n-B", "-B\n・A", "-A\n・B\n-C"])
def test_bullet_style_mix(text):
    [d] = _run(text, "bullet-style-mix")
    assert (d.start, d.end) == (0, len(text))


@pytest.mark.parametrize("text", ["・A\n・B", "- A\n- B", "**強調**\n* A", "---\n- A"])
def test_bullet_single_style(text):
    assert _run(text, "bullet-style-mix") == []


def test_bullet_counts_in_message():
    [d] = _run("  ・A\n・B\n* C", "bullet-style-mix")
    assert d.data["variants"] == {"nakaguro": 2, "asterisk": 1}
    assert "・（2箇所）" in d.message


def test_quotation_style_mix():
    [d] = _run('「A」と"B"', "quotation-style-mix")
    assert set(d.data["variants"]) == {"japanese", "double"}


def test_emphasis_style_mix():
    assert _run("**A**と__B__", "emphasis-style-mix")
    assert _run("**A**と**B**", "emphasis-style-mix") == []


def test_punctuation_style_mix():
    [d] = _run("A、B。C，D", "punctuation-style-mix")
    assert "日本語スタイル（、。）が2箇所" in d.message
    assert "欧文スタイル（，．）が1箇所" in d.message


def test_pronoun_mix():
    [d] = _run("私は行く。僕は行かない。", "pronoun-mix")
    assert d.data["variants"] == {"私": 1, "僕": 1}


def test_unit_notation_mix():
    [d] = _run("5kmと3キロメートル", "unit-notation-mix")
    assert d.data["category"] == "distance"
    assert _run("5kmと3km", "unit-notation-mix") == []


def test_english_case_mix():
    text = "API と api を使う。Test は一つ。"
    [d] = _run(text, "english-case-mix")
    assert d.data["group"] == "api"
