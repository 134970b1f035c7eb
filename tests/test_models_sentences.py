import pytest

from jastylelint.models import Diagnostic, RuleCode, Token, classify_ending, offset_to_position
from jastylelint.sentences import split_sentences


def test_split_sentences_offsets():
    text = "これはペンです。あれは本です！"
    sentences = split_sentences(text)
    assert [s.text for s in sentences] == ["これはペンです。", "あれは本です！"]
    assert (sentences[0].start, sentences[0].end) == (0, 8)
    assert (sentences[1].start, sentences[1].end) == (8, 15)
    for s in sentences:
        assert text[s.start:s.end] == s.text


def test_consecutive_terminators_stay_with_sentence():
    sentences = split_sentences("本当？！次へ。")
    assert [s.text for s in sentences] == ["本当？！", "次へ。"]


def test_trailing_text_without_terminator():
    sentences = split_sentences("一文目。二文目")
    assert sentences[-1].text == "二文目"
    assert sentences[-1].end == len("一文目。二文目")


def test_empty_and_blank_text():
    assert split_sentences("") == []
    assert split_sentences("   \n") == []


def test_sentence_flags_and_tokens():
    tokens = [Token("私", "名詞", 0, 1), Token("は", "助詞", 1, 2), Token("行く", "動詞", 8, 10)]
    sentences = split_sentences("私は、行きます。行く。", tokens)
    first, second = sentences
    assert first.comma_count == 1
    assert first.ends_with_desu_masu and not first.ends_with_dearu
    assert [t.surface for t in first.tokens] == ["私", "は"]
    assert [t.surface for t in second.tokens] == ["行く"]


def test_classify_ending():
    assert classify_ending("これはペンです。") == (True, False)
    assert classify_ending("これはペンである。") == (False, True)
    assert classify_ending("走った") == (False, False)


def test_token_rejects_empty_span():
    with pytest.raises(ValueError):
        Token("あ", "名詞", 3, 3)


def test_offset_to_position():
    pos = offset_to_position("ab\ncd", 4)
    assert (pos.line, pos.character) == (1, 1)
    assert offset_to_position("ab", 99).character == 2


def test_diagnostic_to_dict():
    d = Diagnostic(0, 2, "msg", RuleCode.RA_NUKI, "ra-nuki-detection", ("見られる",))
    out = d.to_dict("見れる")
    assert out["code"] == "ra-nuki"
    assert out["source"] == "jastylelint"
    assert out["suggestions"] == ["見られる"]
    assert out["range"]["end"] == {"line": 0, "character": 2}
    assert d.snippet("見れる") == "見れ"


def test_tokens_assigned_across_many_sentences():
    n = 500
    text = "あい。" * n
    tokens = []
    for k in range(n):
        base = k * 3
        tokens.append(Token("あ", "名詞", base, base + 1))
        tokens.append(Token("い", "名詞", base + 1, base + 2))
        # 句点をまたいで次の文に食い込む
        if k + 1 < n:
            tokens.append(Token("。あ", "記号", base + 2, base + 4))
    sentences = split_sentences(text, tokens)
    assert len(sentences) == n
    assert all([t.surface for t in s.tokens] == ["あ", "い"] for s in sentences)
    assert sentences[-1].tokens[0].start == (n - 1) * 3
