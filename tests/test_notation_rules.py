from jastylelint.manager import RulesManager
from jastylelint.notation_rules import arabic_to_kanji, convert_alphabet, kanji_to_arabic


def _run(text, *names, **config):
    return RulesManager(config).check_with_rules(text, [], names)


def test_number_width_follows_majority():
    text = "２０２５年に25件"
    [d] = _run(text, "number-width-mix")
    assert d.snippet(text) == "25"
    assert d.suggestions == ("２５",)


def test_number_width_swapped_proportions():
    text = "2025年に２５件"
    [d] = _run(text, "number-width-mix")
    assert d.snippet(text) == "２５"
    assert d.suggestions == ("25",)


def test_number_width_tie_prefers_half():
    text = "１と2"
    [d] = _run(text, "number-width-mix")
    assert d.snippet(text) == "１"
    assert d.suggestions == ("1",)


def test_alphabet_width():
    text = "ＡＢＣとabcの混在です"
    [d] = _run(text, "alphabet-width")
    assert d.snippet(text) == "ＡＢＣ"
    assert d.suggestions == ("ABC",)
    assert d.data["dominant"] == "half"


def test_convert_alphabet_both_ways():
    assert convert_alphabet("Ａｂ", "half") == "Ab"
    assert convert_alphabet("Ab", "full") == "Ａｂ"


def test_symbol_width_per_symbol():
    text = "A:B、C：D、E：F"
    [d] = _run(text, "symbol-width-mix")
    assert d.snippet(text) == ":"
    assert d.suggestions == ("：",)
    assert "コロン" in d.message


def test_numeral_style():
    text = "三十人と二十人と5人"
    [d] = _run(text, "numeral-style-mix")
    assert d.snippet(text) == "5"
    assert d.suggestions == ("五",)


def test_numeral_conversions():
    assert kanji_to_arabic("二〇二五") == "2025"
    assert kanji_to_arabic("十") == "十"
    assert arabic_to_kanji("２０") == "二〇"


def test_date_format():
    text = "2025年1月1日と2025/1/2"
    [d] = _run(text, "date-format-variant")
    assert d.snippet(text) == "2025/1/2"
    assert d.data["dominant"] == "kanji"
    assert d.suggestions[0].endswith("に統一する")


def test_okurigana_variant():
    [d] = _run("意見を表わす", "okurigana-variant")
    assert "表す" in d.suggestions[0]


def test_katakana_chouon():
    [d] = _run("サーバを使う", "katakana-chouon")
    assert "サーバー" in d.suggestions[0]
    assert _run("サーバーを使う", "katakana-chouon") == []


def test_kanji_opening():
    [d] = _run("確認して下さい", "kanji-opening")
    assert d.suggestions == ("「ください」に変更する",)


def test_term_notation():
    [d] = _run("Githubで公開します", "term-notation")
    assert "GitHub" in d.suggestions[0]
    assert _run("MyGithubProject", "term-notation") == []
    assert _run("Githubで公開します", "term-notation", enable_web_tech_dictionary=False) == []


def test_term_notation_custom_rules():
    text = "サーバ側で処理する"
    [d] = _run(text, "term-notation", custom_notation_rules={"サーバ側": "サーバー側"})
    assert d.snippet(text) == "サーバ側"
    assert "サーバー側" in d.suggestions[0]


def test_halfwidth_kana():
    [d] = _run("ｶﾀｶﾅです", "halfwidth-kana")
    assert d.suggestions == ("「カタカナ」に変更する",)


def test_dash_tilde():
    [d] = _run("10-20件", "dash-tilde-normalization")
    assert d.suggestions == ("「10〜20」に変更する",)
    assert _run("10〜20件", "dash-tilde-normalization") == []


def test_time_range_reported_once():
    text = "10:00-12:00に開催"
    [d] = _run(text, "dash-tilde-normalization")
    assert d.snippet(text) == "10:00-12:00"


def test_space_around_unit():
    [d] = _run("容量は10GBです", "space-around-unit")
    assert d.suggestions == ("「10 GB」に変更する",)
    [d] = _run("v2で対応", "space-around-unit")
    assert d.suggestions == ("「v 2」に変更する",)
    assert _run("容量は10 GBです", "space-around-unit") == []


def test_nakaguro_run():
    [d] = _run("A・・B", "nakaguro-usage")
    assert "2個" in d.message
