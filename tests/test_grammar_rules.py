from jastylelint.grammar_rules import detect_style, lacks_subject, ra_nuki_correction
from jastylelint.manager import RulesManager
from jastylelint.models import Token


def _run(text, *names, tokens=(), **config):
    return RulesManager(config).check_with_rules(text, tokens, names)


def test_style_consistency_flags_minority_sentence():
    text = "これはペンです。あれは本である。"
    [d] = _run(text, "style-consistency")
    assert d.code.value == "style-inconsistency"
    assert d.snippet(text) == "あれは本である。"
    assert d.data["dominant"] == "keigo"


def test_detect_style():
    assert detect_style("行きます。") == "keigo"
    assert detect_style("本である。") == "joutai"
    assert detect_style("行きました。") is None


def test_ra_nuki_without_tokens_uses_dictionary():
    [d] = _run("明日なら食べれる", "ra-nuki-detection")
    assert d.code.value == "ra-nuki"
    assert d.suggestions == ("食べられる",)


def test_ra_nuki_with_tokens():
    tokens = [Token("見れる", "動詞", 0, 3, conjugation="一段")]
    [d] = _run("見れる", "ra-nuki", tokens=tokens)
    assert d.suggestions == ("見られる",)


def test_ra_nuki_split_tokens():
    tokens = [
        Token("食べ", "動詞", 0, 2, base_form="食べる", conjugation="下一段"),
        Token("れる", "動詞", 2, 4),
    ]
    [d] = _run("食べれる", "ra-nuki", tokens=tokens)
    assert (d.start, d.end) == (0, 4)
    assert d.suggestions == ("食べられる",)


def test_ra_nuki_correction_skips_godan():
    assert ra_nuki_correction("考えれる") == "考えられる"
    assert ra_nuki_correction("走れる", "五段・ラ行") is None


def test_double_negation():
    [d] = _run("できないわけではない", "double-negation")
    assert d.code.value == "double-negation"


def test_particle_repetition_needs_tokens_and_enabling():
    text = "私は本を彼は読む"
    tokens = [
        Token("私", "名詞", 0, 1),
        Token("は", "助詞", 1, 2),
        Token("本", "名詞", 2, 3),
        Token("を", "助詞", 3, 4),
        Token("彼", "名詞", 4, 5),
        Token("は", "助詞", 5, 6),
        Token("読む", "動詞", 6, 8),
    ]
    assert _run(text, "particle-repetition", tokens=tokens) == []
    [d] = _run(text, "particle-repetition", tokens=tokens, enable_particle_repetition=True)
    assert d.data == {"particle": "は", "count": 2}


def test_conjunction_repetition():
    text = "しかし、Aです。しかし、Bです。"
    [d] = _run(text, "conjunction-repetition")
    assert (d.start, d.end) == (8, 11)
    assert "「ところが」に変更する" in d.suggestions


def test_adversative_ga():
    text = "行きますが、Aです。行きますが、Bです。"
    tokens = [
        Token("行き", "動詞", 0, 2),
        Token("ます", "助動詞", 2, 4),
        Token("が", "助詞", 4, 5),
        Token("行き", "動詞", 10, 12),
        Token("ます", "助動詞", 12, 14),
        Token("が", "助詞", 14, 15),
    ]
    [d] = _run(text, "adversative-ga", tokens=tokens)
    assert (d.start, d.end) == (14, 15)
    assert _run(text, "adversative-ga") == []


def test_comma_count():
    [d] = _run("私は、今日、朝、昼、夜、と、食事をしました。", "comma-count")
    assert d.data["comma_count"] == 6
    assert _run("私は、今日、朝、食事をしました。", "comma-count") == []


def test_long_sentence_threshold():
    text = "あ" * 121 + "。"
    [d] = _run(text, "long-sentence")
    assert d.data["length"] == 122
    assert _run(text, "long-sentence", long_sentence_threshold=200) == []


def test_no_particle_chain():
    assert _run("東京の会社の部長", "no-particle-chain") == []
    [d] = _run("東京の会社の部長の息子", "no-particle-chain")
    assert d.data["chain_length"] == 3


def test_monotonous_ending():
    [d] = _run("Aです。Bです。Cです。", "monotonous-ending")
    assert d.data == {"ending": "です", "count": 3}
    assert _run("Aです。Bだ。Cです。", "monotonous-ending") == []


def test_missing_subject():
    assert lacks_subject("昨日、買いました。")
    [d] = _run("昨日、買いました。", "missing-subject")
    assert d.code.value == "missing-subject"
    assert _run("私は昨日、買いました。", "missing-subject") == []


def test_adverb_agreement():
    [d] = _run("決して行きます", "adverb-agreement")
    assert d.data["adverb"] == "決して"
    assert _run("決して行きません", "adverb-agreement") == []


def test_twisted_sentence_reported_once():
    [d] = _run("私の夢は医者になりたいです", "twisted-sentence")
    assert d.suggestions == ("私の夢は医者になることです",)


def test_passive_overuse():
    text = "報告書が作成された。結果が分析された。結論が導かれた。"
    [d] = _run(text, "passive-overuse")
    assert d.data["count"] == 3
    assert _run("報告書が作成された。結果を分析した。", "passive-overuse") == []


def test_consecutive_passive():
    text = "Aが作成された。Bが確認された。Cが承認された。"
    [d] = _run(text, "passive-overuse")
    assert "3回連続" in d.message


def test_noun_chain_phrase_and_tokens():
    [d] = _run("品質管理体制強化計画書", "noun-chain")
    assert d.code.value == "noun-chain"
    text = "顧客情報管理画面設計"
    tokens = [Token(text[i:i + 2], "名詞", i, i + 2) for i in range(0, 10, 2)]
    [d] = _run(text, "noun-chain", tokens=tokens)
    assert d.data["chain_length"] == 5


def test_brackets():
    assert _run("「A」", "bracket-quote-mismatch") == []
    [d] = _run("「A", "bracket-quote-mismatch")
    assert d.data == {"kind": "unclosed", "expected": "」"}
    [d] = _run("A」", "bracket-quote-mismatch")
    assert d.data == {"kind": "unopened", "expected": "「"}
    assert _run("（「テスト」を実行）", "bracket-quote-mismatch") == []


def test_phrase_tables():
    [d] = _run("頭痛が痛い", "tautology")
    assert d.suggestions == ("頭が痛い", "頭痛がする")
    [d] = _run("馬から落馬する", "redundant-expression")
    assert d.suggestions == ("落馬",)
    [d] = _run("勉強をする", "sahen-verb")
    assert d.suggestions == ("勉強する",)
    [d] = _run("意志が低い", "homophone")
    assert "意識が低い" in d.suggestions
    [d] = _run("赤い大きな花", "modifier-position")
    assert d.suggestions == ("大きな赤い",)
    [d] = _run("晴れた。しかし、外出した。", "conjunction-misuse")
    assert d.suggestions == ("晴れた。そこで、外出した",)


def test_honorific_longest_match():
    text = "お客様がおっしゃられました"
    [d] = _run(text, "honorific-error")
    assert d.snippet(text) == text
    assert d.suggestions == ("お客様がおっしゃいました",)


def test_ambiguous_demonstrative():
    found = _run("それは問題だ。しかし、それも重要だ。", "ambiguous-demonstrative")
    assert found
    assert all(d.code.value == "ambiguous-demonstrative" for d in found)


def test_weak_expression_levels():
    text = "これは正しいかもしれない"
    [d] = _run(text, "weak-expression")
    assert d.suggestions == ("「可能性がある」に変更する",)
    assert _run(text, "weak-expression", weak_expression_level="loose") == []
    assert _run("そうだと思う", "weak-expression") == []
    assert _run("そうだと思う", "weak-expression", weak_expression_level="strict")
