"""文・トークン単位の文法ルールと、フレーズ辞書ルールのメッセージ。

トークンが渡されない場合（形態素解析器なし）は、トークンを必要とする
ルールは何も返さない。ら抜き言葉のみテキスト辞書での検出に切り替える。
"""
from __future__ import annotations

import re
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from . import rule_data as data
from .matching import (
    UNCLOSED,
    find_chains,
    find_runs,
    match_brackets,
    scan_dictionary,
)
from .models import Diagnostic, RuleContext, Sentence, Token
from .rules import Rule

KEIGO = "keigo"
JOUTAI = "joutai"
STYLE_NAMES = {KEIGO: "敬体", JOUTAI: "常体"}
STYLE_ENDINGS = {KEIGO: "です/ます", JOUTAI: "である"}

_TAIL_RE = re.compile(r"[。！？!?]$")
_SEGMENT_RE = re.compile(r"[^。！？!?\n]+")

NO_CHAIN_MAX_GAP = 20
MISSING_SUBJECT_MAX_LENGTH = 25
MISSING_SUBJECT_ENDINGS = ("ました。", "ます。", "です。")


def _bare(text: str) -> str:
    return _TAIL_RE.sub("", text.strip())


def _trimmed_span(sentence: Sentence) -> Tuple[int, int]:
    lead = len(sentence.text) - len(sentence.text.lstrip())
    return sentence.start + lead, sentence.start + lead + len(sentence.text.strip())


# ---------------------------------------------------------------------------
# 文体
# ---------------------------------------------------------------------------

def detect_style(text: str) -> Optional[str]:
    body = _bare(text)
    if data.KEIGO_ENDING_RE.search(body):
        return KEIGO
    if any(p.search(body) for p in data.JOUTAI_ENDING_RES):
        return JOUTAI
    return None


def dominant_style(sentences: Sequence[Sentence]) -> Optional[str]:
    styles = [detect_style(s.text) for s in sentences]
    keigo = styles.count(KEIGO)
    joutai = styles.count(JOUTAI)
    if keigo > joutai:
        return KEIGO
    if joutai > keigo:
        return JOUTAI
    return KEIGO if keigo else None


def check_style_consistency(rule: Rule, tokens: Sequence[Token], context: RuleContext) -> Iterable[Diagnostic]:
    dominant = dominant_style(context.sentences)
    if dominant is None:
        return
    for sentence in context.sentences:
        style = detect_style(sentence.text)
        if style is None or style == dominant:
            continue
        yield rule.diagnostic(
            sentence.start,
            sentence.end,
            f"文体の混在が検出されました。この文は{STYLE_NAMES[style]}ですが、"
            f"文書全体は{STYLE_NAMES[dominant]}が主に使用されています。",
            [f"文末を「{STYLE_ENDINGS[dominant]}」に統一してください"],
            style=style,
            dominant=dominant,
        )


# ---------------------------------------------------------------------------
# ら抜き言葉
# ---------------------------------------------------------------------------

def ra_nuki_correction(surface: str, conjugation: str = "") -> Optional[str]:
    """ら抜きの形なら正しい形を返す。五段動詞（帰れる等）は可能動詞なので対象外。"""
    if surface in data.RA_NUKI_PATTERNS:
        return data.RA_NUKI_PATTERNS[surface]
    if conjugation.startswith("五段"):
        return None
    m = data.RA_NUKI_VERB_RE.match(surface)
    if m:
        return f"{m.group(1)}られ{m.group(2)}"
    return None


def _ra_nuki_message(surface: str, correct: str) -> str:
    return f"ら抜き言葉「{surface}」が検出されました。正しくは「{correct}」です。"


def check_ra_nuki(rule: Rule, tokens: Sequence[Token], context: RuleContext) -> Iterable[Diagnostic]:
    if not tokens:
        for m in scan_dictionary(context.document_text, data.RA_NUKI_PATTERNS):
            yield rule.diagnostic(m.index, m.end, _ra_nuki_message(m.key, m.value), [m.value])
        return

    i = 0
    while i < len(tokens):
        token = tokens[i]
        if token.is_verb():
            correct = ra_nuki_correction(token.surface, token.conjugation)
            if correct:
                yield rule.diagnostic(token.start, token.end, _ra_nuki_message(token.surface, correct), [correct])
                i += 1
                continue
        if i + 1 < len(tokens):
            pair = _two_token_ra_nuki(token, tokens[i + 1])
            if pair is not None:
                surface, correct = pair
                yield rule.diagnostic(token.start, tokens[i + 1].end, _ra_nuki_message(surface, correct), [correct])
                i += 2
                continue
        i += 1


def _two_token_ra_nuki(verb: Token, auxiliary: Token) -> Optional[Tuple[str, str]]:
    # 「食べ」+「れる」のように分割された場合
    if not verb.is_verb() or auxiliary.pos not in ("動詞", "助動詞"):
        return None
    if not auxiliary.surface.startswith("れ"):
        return None
    if not verb.conjugation.startswith(("一段", "上一段", "下一段")):
        return None
    if verb.base_form and not verb.base_form.endswith("る"):
        return None
    return verb.surface + auxiliary.surface, f"{verb.surface}られ{auxiliary.surface[1:]}"


# ---------------------------------------------------------------------------
# 助詞・接続詞
# ---------------------------------------------------------------------------

def check_particle_repetition(rule: Rule, tokens: Sequence[Token], context: RuleContext) -> Iterable[Diagnostic]:
    for sentence in context.sentences:
        positions: Dict[str, List[int]] = {}
        for token in sentence.tokens:
            if token.is_particle():
                positions.setdefault(token.surface, []).append(token.start)
        for particle, found in positions.items():
            if len(found) < 2:
                continue
            yield rule.diagnostic(
                sentence.start,
                sentence.end,
                f"同じ助詞「{particle}」が{len(found)}回使用されています。文の構造を見直してください。",
                ["文を分割する", "別の表現に言い換える"],
                particle=particle,
                count=len(found),
            )


def leading_conjunction(sentence: Sentence) -> Optional[str]:
    text = sentence.text.strip()
    return next((c for c in data.COMMON_CONJUNCTIONS if text.startswith(c)), None)


def check_conjunction_repetition(rule: Rule, tokens: Sequence[Token], context: RuleContext) -> Iterable[Diagnostic]:
    sentences = context.sentences
    for prev, current in zip(sentences, sentences[1:]):
        conj = leading_conjunction(current)
        if conj is None or conj != leading_conjunction(prev):
            continue
        start = _trimmed_span(current)[0]
        alternatives = data.CONJUNCTION_ALTERNATIVES.get(conj, data.DEFAULT_CONJUNCTION_ALTERNATIVES)
        yield rule.diagnostic(
            start,
            start + len(conj),
            f"接続詞「{conj}」が連続して使用されています。",
            [f"「{alt}」に変更する" for alt in alternatives],
        )


def adversative_ga_tokens(sentence: Sentence) -> List[Token]:
    found = []
    prev = None
    for token in sentence.tokens:
        if token.surface == "が" and token.is_particle() and prev is not None:
            if prev.pos in ("動詞", "形容詞", "助動詞") or prev.surface in ("です", "ます"):
                found.append(token)
        prev = token
    return found


def check_adversative_ga(rule: Rule, tokens: Sequence[Token], context: RuleContext) -> Iterable[Diagnostic]:
    sentences = context.sentences
    for prev, current in zip(sentences, sentences[1:]):
        current_gas = adversative_ga_tokens(current)
        if current_gas and adversative_ga_tokens(prev):
            ga = current_gas[0]
            yield rule.diagnostic(
                ga.start,
                ga.end,
                "逆接の「が」が連続する文で使用されています。文の分割や接続詞の変更を検討してください。",
                ["文を分割する", "「しかし」「けれども」などの接続詞に変更する"],
            )


# ---------------------------------------------------------------------------
# 文の長さ・読点
# ---------------------------------------------------------------------------

def check_comma_count(rule: Rule, tokens: Sequence[Token], context: RuleContext) -> Iterable[Diagnostic]:
    threshold = context.config.comma_count_threshold
    for sentence in context.sentences:
        if sentence.comma_count > threshold:
            yield rule.diagnostic(
                sentence.start,
                sentence.end,
                f"1文中に読点が{sentence.comma_count}個使用されています（閾値: {threshold}個）。文を分割することを検討してください。",
                ["文を複数の短い文に分割する", "不要な修飾語を削除する"],
                comma_count=sentence.comma_count,
            )


def split_suggestions(text: str) -> List[str]:
    suggestions = []
    if "、" in text:
        suggestions.append("読点「、」の位置で文を分割することを検討してください")
    conj = next((c for c in data.SPLIT_CONJUNCTIONS if c in text), None)
    if conj:
        suggestions.append(f"「{conj}」の前後で文を分割することを検討してください")
    suggestions.append("1文を2〜3文に分割して、読みやすくすることを検討してください")
    suggestions.append("主語と述語を明確にして、文の構造を単純化してください")
    return suggestions


def check_long_sentence(rule: Rule, tokens: Sequence[Token], context: RuleContext) -> Iterable[Diagnostic]:
    threshold = context.config.long_sentence_threshold
    for sentence in context.sentences:
        length = len(sentence.text)
        if length > threshold:
            yield rule.diagnostic(
                sentence.start,
                sentence.end,
                f"文が長すぎます（{length}文字、閾値: {threshold}文字）。文の分割を検討してください。",
                split_suggestions(sentence.text),
                length=length,
            )


# ---------------------------------------------------------------------------
# 連続検出
# ---------------------------------------------------------------------------

def check_no_particle_chain(rule: Rule, tokens: Sequence[Token], context: RuleContext) -> Iterable[Diagnostic]:
    text = context.document_text
    threshold = context.config.no_particle_chain_threshold
    for segment in _SEGMENT_RE.finditer(text):
        positions = [segment.start() + i for i, ch in enumerate(segment.group(0)) if ch == "の"]
        for chain in find_chains(positions, NO_CHAIN_MAX_GAP, threshold):
            yield rule.diagnostic(
                chain.first,
                chain.last + 1,
                f"助詞「の」が{chain.length}回連続しています（閾値: {threshold}回）。文の書き換えを検討してください。",
                [
                    "文を分割して「の」の使用回数を減らす",
                    "一部を別の表現に置き換える（例：「における」「に関する」）",
                    "主語を明確にして文を書き換える",
                ],
                chain_length=chain.length,
            )


def sentence_ending(sentence: Sentence) -> Optional[str]:
    m = data.SENTENCE_ENDING_RE.search(sentence.text.rstrip())
    return m.group(1) if m else None


def check_monotonous_ending(rule: Rule, tokens: Sequence[Token], context: RuleContext) -> Iterable[Diagnostic]:
    sentences = context.sentences
    threshold = context.config.monotonous_ending_threshold
    endings = [sentence_ending(s) for s in sentences]
    for run in find_runs(endings, threshold):
        yield rule.diagnostic(
            sentences[run.first].start,
            sentences[run.last].end,
            f"文末「{run.key}」が{run.length}回連続しています（閾値: {threshold}回）。表現を多様化してください。",
            data.ENDING_VARIATIONS.get(run.key, data.DEFAULT_ENDING_VARIATIONS),
            ending=run.key,
            count=run.length,
        )


def check_noun_chain(rule: Rule, tokens: Sequence[Token], context: RuleContext) -> Iterable[Diagnostic]:
    text = context.document_text
    spans: List[Tuple[int, int]] = []
    for m in scan_dictionary(text, data.NOUN_CHAIN_PATTERNS):
        spans.append((m.index, m.end))
        yield rule.diagnostic(
            m.index,
            m.end,
            f"名詞が連続して読みにくくなっています。{m.value}",
            [m.value],
            chain_length=len(m.key),
        )

    threshold = context.config.noun_chain_threshold
    flags = [True if t.is_noun() else None for t in tokens]
    for run in find_runs(flags, threshold):
        start, end = tokens[run.first].start, tokens[run.last].end
        if any(s <= start and end <= e for s, e in spans):
            continue
        yield rule.diagnostic(
            start,
            end,
            f"名詞が連続して読みにくくなっています。{data.NOUN_CHAIN_DEFAULT_NOTE}",
            [data.NOUN_CHAIN_DEFAULT_NOTE],
            chain_length=run.length,
        )


def check_passive_overuse(rule: Rule, tokens: Sequence[Token], context: RuleContext) -> Iterable[Diagnostic]:
    text = context.document_text
    consecutive = data.CONSECUTIVE_PASSIVE_RE.search(text)
    if consecutive:
        yield rule.diagnostic(
            consecutive.start(),
            consecutive.end(),
            "受身表現が3回連続で使用されています。能動態への書き換えを検討してください。",
            ["能動態に書き換えることを検討してください"],
            count=3,
        )
        return
    # 「された。」は「れた。」にも一致するので、終わり位置で重複を除く
    ends = {m.end() for pattern in data.PASSIVE_RES for m in pattern.finditer(text)}
    threshold = context.config.passive_overuse_threshold
    if len(ends) >= threshold:
        yield rule.diagnostic(
            0,
            len(text),
            f"受身表現が{len(ends)}回使用されています（閾値: {threshold}回）。能動態への書き換えを検討してください。",
            ["能動態への書き換えを検討してください"],
            count=len(ends),
        )


# ---------------------------------------------------------------------------
# 主語・副詞・ねじれ・指示語
# ---------------------------------------------------------------------------

def lacks_subject(text: str) -> bool:
    body = text.strip()
    return (
        len(body) < MISSING_SUBJECT_MAX_LENGTH
        and "は" not in body
        and "が" not in body
        and body.endswith(MISSING_SUBJECT_ENDINGS)
    )


def check_missing_subject(rule: Rule, tokens: Sequence[Token], context: RuleContext) -> Iterable[Diagnostic]:
    for sentence in context.sentences:
        if lacks_subject(sentence.text):
            start, end = _trimmed_span(sentence)
            yield rule.diagnostic(
                start,
                end,
                "主語が明示されていない可能性があります。主語を明示することを検討してください",
                ["「私は」「彼は」などの主語を追加"],
            )


def check_adverb_agreement(rule: Rule, tokens: Sequence[Token], context: RuleContext) -> Iterable[Diagnostic]:
    for sentence in context.sentences:
        body = _bare(sentence.text)
        for adverb, required, forbidden, example in data.ADVERB_AGREEMENT_RULES:
            if adverb not in body:
                continue
            actual = next((f for f in forbidden if body.endswith(f)), None)
            if actual is None:
                continue
            start, end = _trimmed_span(sentence)
            yield rule.diagnostic(
                start,
                end,
                f"副詞「{adverb}」は「{'、'.join(required)}」などと呼応します。"
                f"現在の文末「{actual}」との呼応を確認してください。",
                [example],
                adverb=adverb,
            )


TWISTED_SENTENCE_MESSAGE = "ねじれ文が検出されました。主語と述語の対応を確認してください。"


def check_twisted_sentence(rule: Rule, tokens: Sequence[Token], context: RuleContext) -> Iterable[Diagnostic]:
    text = context.document_text
    spans: List[Tuple[int, int]] = []
    for m in scan_dictionary(text, data.TWISTED_SENTENCE_PATTERNS):
        correct, explanation = m.value
        spans.append((m.index, m.end))
        yield rule.diagnostic(m.index, m.end, TWISTED_SENTENCE_MESSAGE, [correct], explanation=explanation)
    for pattern, explanation in data.TWISTED_SENTENCE_RES:
        for m in pattern.finditer(text):
            if any(s <= m.start() and m.end() <= e for s, e in spans):
                continue
            spans.append((m.start(), m.end()))
            yield rule.diagnostic(m.start(), m.end(), TWISTED_SENTENCE_MESSAGE, [explanation], explanation=explanation)


def check_ambiguous_demonstrative(rule: Rule, tokens: Sequence[Token], context: RuleContext) -> Iterable[Diagnostic]:
    text = context.document_text
    for m in scan_dictionary(text, data.AMBIGUOUS_DEMONSTRATIVE_PATTERNS):
        yield rule.diagnostic(m.index, m.end, f"曖昧な指示語が検出されました。{m.value}", ["具体的な名詞で置き換える"])
    for pattern in data.LEADING_DEMONSTRATIVE_RES:
        m = pattern.match(text)
        if m:
            yield rule.diagnostic(
                0,
                m.end(),
                f"曖昧な指示語が検出されました。{data.LEADING_DEMONSTRATIVE_NOTE}",
                ["具体的な名詞で置き換える"],
            )


# ---------------------------------------------------------------------------
# 括弧
# ---------------------------------------------------------------------------

def check_brackets(rule: Rule, tokens: Sequence[Token], context: RuleContext) -> Iterable[Diagnostic]:
    for issue in match_brackets(context.document_text):
        if issue.kind == UNCLOSED:
            message = f"開き括弧「{issue.bracket}」に対応する閉じ括弧「{issue.expected}」がありません。"
            suggestion = f"対応する「{issue.expected}」を追加する"
        else:
            message = f"閉じ括弧「{issue.bracket}」に対応する開き括弧「{issue.expected}」がありません。"
            suggestion = f"対応する「{issue.expected}」を追加するか、不要な「{issue.bracket}」を削除する"
        yield rule.diagnostic(issue.index, issue.index + 1, message, [suggestion], kind=issue.kind, expected=issue.expected)


# ---------------------------------------------------------------------------
# フレーズ辞書ルールのメッセージ
# ---------------------------------------------------------------------------

def tautology_message(key: str, value) -> str:
    return f"重複表現「{key}」が検出されました。{value[1]}が重複しています。"


def homophone_message(key: str, value) -> str:
    return f"同音異義語「{key}」の使い方を確認してください。{value[1]}"


def sahen_message(key: str, value: str) -> str:
    return f"サ変動詞「{key}」の「を」は省略できます。「{value}」への簡潔化を検討してください。"


def honorific_message(key: str, value: str) -> str:
    return f"二重敬語「{key}」が検出されました。「{value}」が正しい形式です。"


HONORIFIC_TABLE: Dict[str, str] = {**data.DOUBLE_HONORIFIC_PATTERNS, **data.HONORIFIC_MISUSE_PATTERNS}

# 表現 -> (提案, 説明)
MODIFIER_TABLE: Dict[str, Tuple[str, str]] = {
    **{k: (order, explanation) for k, (order, explanation) in data.MODIFIER_ORDER_PATTERNS.items()},
    **{k: (explanation, explanation) for k, explanation in data.AMBIGUOUS_MODIFIER_PATTERNS.items()},
}


def modifier_message(key: str, value) -> str:
    return f"修飾語の位置に問題がある可能性があります。{value[1]}"


def conjunction_misuse_message(key: str, value) -> str:
    correct, conjunction, explanation = value
    return f"接続詞「{conjunction}」の使い方が文脈に合わない可能性があります。{explanation}"


DOUBLE_NEGATION_RES: List[Tuple[re.Pattern, str]] = [
    (re.compile(re.escape(pattern)), suggestion) for pattern, suggestion in data.DOUBLE_NEGATION_PATTERNS
]


def weak_expression_patterns(config) -> List[Tuple[re.Pattern, Tuple[str, str]]]:
    levels = data.WEAK_EXPRESSION_LEVEL_FILTER[config.weak_expression_level]
    return [
        (re.compile(regex), (name, stronger))
        for regex, name, stronger, level in data.WEAK_EXPRESSION_PATTERNS
        if level in levels
    ]


__all__ = [
    "KEIGO",
    "JOUTAI",
    "detect_style",
    "dominant_style",
    "check_style_consistency",
    "ra_nuki_correction",
    "check_ra_nuki",
    "check_particle_repetition",
    "leading_conjunction",
    "check_conjunction_repetition",
    "adversative_ga_tokens",
    "check_adversative_ga",
    "check_comma_count",
    "split_suggestions",
    "check_long_sentence",
    "check_no_particle_chain",
    "sentence_ending",
    "check_monotonous_ending",
    "check_noun_chain",
    "check_passive_overuse",
    "lacks_subject",
    "check_missing_subject",
    "check_adverb_agreement",
    "check_twisted_sentence",
    "check_ambiguous_demonstrative",
    "check_brackets",
    "tautology_message",
    "homophone_message",
    "sahen_message",
    "honorific_message",
    "HONORIFIC_TABLE",
    "MODIFIER_TABLE",
    "modifier_message",
    "conjunction_misuse_message",
    "DOUBLE_NEGATION_RES",
    "weak_expression_patterns",
]
