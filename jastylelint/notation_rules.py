"""表記・文字種に関するルールの収集関数と変換関数。

全角/半角や漢数字/アラビア数字などの「表記の揃え」は、文書内の多数派に
合わせる方針で判定する（matching.dominant_variant）。
"""
from __future__ import annotations

import re
import unicodedata
from typing import Dict, Iterable, List, Sequence

from . import rule_data as data
from .dictionaries import build_term_dictionary
from .matching import (
    DictionaryMatch,
    VariantOccurrence,
    collect_mix,
    collect_variants,
    group_words,
    occurrences_from_positions,
    resolve_overlaps,
    scan_regex,
)
from .models import Diagnostic, PatternOccurrence, RuleContext, Token
from .rules import Rule

FULL = "full"
HALF = "half"
WIDTH_LABELS = {FULL: "全角", HALF: "半角"}

KANJI = "kanji"
ARABIC = "arabic"

_FULL_DIGITS = "０１２３４５６７８９"
_HALF_DIGITS = "0123456789"
_TO_HALF_DIGITS = str.maketrans(_FULL_DIGITS, _HALF_DIGITS)
_TO_FULL_DIGITS = str.maketrans(_HALF_DIGITS, _FULL_DIGITS)
_WIDTH_OFFSET = 0xFEE0

_FULL_NUMBER_RE = re.compile(r"[０-９]+")
_HALF_NUMBER_RE = re.compile(r"[0-9]+")
_FULL_ALPHA_RE = re.compile(r"[Ａ-Ｚａ-ｚ]+")
_HALF_ALPHA_RE = re.compile(r"[A-Za-z]+")

_SYMBOLS: Dict[str, tuple] = {}
for _full, _half, _name in data.SYMBOL_PAIRS:
    _SYMBOLS[_full] = (FULL, _half, _name)
    _SYMBOLS[_half] = (HALF, _full, _name)
del _full, _half, _name


# ---------------------------------------------------------------------------
# 数字・アルファベットの全角/半角
# ---------------------------------------------------------------------------

def collect_number_widths(text: str) -> List[VariantOccurrence]:
    return collect_variants(text, [(FULL, _FULL_NUMBER_RE), (HALF, _HALF_NUMBER_RE)])


def convert_digits(value: str, target: str) -> str:
    return value.translate(_TO_FULL_DIGITS if target == FULL else _TO_HALF_DIGITS)


def number_width_message(occ: VariantOccurrence, dominant: str) -> str:
    return (
        f"数字「{occ.text}」は{WIDTH_LABELS[occ.variant]}ですが、"
        f"文書内では{WIDTH_LABELS[dominant]}が多く使用されています。表記を統一することを推奨します。"
    )


def number_width_suggestions(occ: VariantOccurrence, dominant: str) -> List[str]:
    return [convert_digits(occ.text, dominant)]


def collect_alphabet_widths(text: str) -> List[VariantOccurrence]:
    return collect_variants(text, [(FULL, _FULL_ALPHA_RE), (HALF, _HALF_ALPHA_RE)])


def convert_alphabet(value: str, target: str) -> str:
    if target == HALF:
        return "".join(chr(ord(c) - _WIDTH_OFFSET) if "Ａ" <= c <= "ｚ" else c for c in value)
    return "".join(chr(ord(c) + _WIDTH_OFFSET) if c.isascii() and c.isalpha() else c for c in value)


def alphabet_width_message(occ: VariantOccurrence, dominant: str) -> str:
    return f"全角と半角アルファベットが混在しています。「{occ.text}」を{WIDTH_LABELS[dominant]}に統一してください。"


def alphabet_width_suggestions(occ: VariantOccurrence, dominant: str) -> List[str]:
    return [convert_alphabet(occ.text, dominant)]


# ---------------------------------------------------------------------------
# 記号の全角/半角（記号の種類ごとに多数決）
# ---------------------------------------------------------------------------

def collect_symbol_widths(text: str) -> List[VariantOccurrence]:
    return [
        VariantOccurrence(_SYMBOLS[ch][0], ch, i)
        for i, ch in enumerate(text)
        if ch in _SYMBOLS
    ]


def symbol_name(occ: VariantOccurrence) -> str:
    return _SYMBOLS[occ.text][2]


def symbol_width_message(occ: VariantOccurrence, dominant: str) -> str:
    return (
        f"{symbol_name(occ)}「{occ.text}」は{WIDTH_LABELS[occ.variant]}ですが、"
        f"文書内では{WIDTH_LABELS[dominant]}が多く使用されています。表記を統一することを推奨します。"
    )


def symbol_width_suggestions(occ: VariantOccurrence, dominant: str) -> List[str]:
    return [_SYMBOLS[occ.text][1]]


# ---------------------------------------------------------------------------
# 漢数字/アラビア数字
# ---------------------------------------------------------------------------

def collect_numeral_styles(text: str) -> List[VariantOccurrence]:
    found = [
        occ
        for occ in collect_variants(text, [(KANJI, data.KANJI_NUMERAL_RE), (ARABIC, data.ARABIC_NUMERAL_RE)])
        if occ.variant == ARABIC or len(occ.text) >= 2
    ]
    return found


def kanji_to_arabic(value: str) -> str:
    # 十・百などの位取り文字は1桁に置き換えられないので除く
    converted = "".join(data.KANJI_TO_ARABIC.get(c, "") for c in value)
    return converted or value


def arabic_to_kanji(value: str) -> str:
    half = value.translate(_TO_HALF_DIGITS)
    return "".join(data.ARABIC_TO_KANJI[int(c)] if c.isdigit() else c for c in half)


def numeral_style_message(occ: VariantOccurrence, dominant: str) -> str:
    if occ.variant == ARABIC:
        return f"数字「{occ.text}」はアラビア数字ですが、文書内では漢数字が多く使用されています。表記を統一することを推奨します。"
    return f"数字「{occ.text}」は漢数字ですが、文書内ではアラビア数字が多く使用されています。表記を統一することを推奨します。"


def numeral_style_suggestions(occ: VariantOccurrence, dominant: str) -> List[str]:
    return [arabic_to_kanji(occ.text) if dominant == KANJI else kanji_to_arabic(occ.text)]


# ---------------------------------------------------------------------------
# 日付形式
# ---------------------------------------------------------------------------

DATE_FORMAT_NAMES = {key: label for key, _pattern, label in data.DATE_FORMATS}


def collect_dates(text: str) -> List[VariantOccurrence]:
    matches = scan_regex(text, [(pattern, key) for key, pattern, _label in data.DATE_FORMATS])
    return [VariantOccurrence(str(m.value), m.key, m.index) for m in matches]


def date_format_message(occ: VariantOccurrence, dominant: str) -> str:
    return (
        f"日付「{occ.text}」は{DATE_FORMAT_NAMES[occ.variant]}ですが、"
        f"文書内では{DATE_FORMAT_NAMES[dominant]}が多く使用されています。表記を統一することを推奨します。"
    )


def date_format_suggestions(occ: VariantOccurrence, dominant: str) -> List[str]:
    return [f"{DATE_FORMAT_NAMES[dominant]}に統一する"]


# ---------------------------------------------------------------------------
# 辞書系ルールの補助
# ---------------------------------------------------------------------------

KATAKANA_TABLE = {k: v for k, v in data.KATAKANA_CHOUON.items() if k not in data.KATAKANA_EXCEPTIONS}


def skip_existing_chouon(text: str, key: str, idx: int, standard: str) -> bool:
    """直後に長音符が続く場合はすでに標準形なので対象外。"""
    after = idx + len(key)
    return after < len(text) and text[after] == "ー" and standard.endswith("ー")


# 英単語の一部には一致させない（日本語の語は前後を問わない）
_WORD_HEAD = r"(?<![A-Za-z0-9_])"
_WORD_TAIL = r"(?![A-Za-z0-9_])"


def term_patterns(config) -> List[tuple]:
    return [
        (re.compile(_WORD_HEAD + re.escape(wrong) + _WORD_TAIL), (wrong, correct))
        for wrong, correct in build_term_dictionary(config).items()
    ]


# ---------------------------------------------------------------------------
# 個別ロジック
# ---------------------------------------------------------------------------

def check_halfwidth_kana(rule: Rule, tokens: Sequence[Token], context: RuleContext) -> Iterable[Diagnostic]:
    for m in data.HALFWIDTH_KANA_RE.finditer(context.document_text):
        value = m.group(0)
        full = unicodedata.normalize("NFKC", value)
        yield rule.diagnostic(
            m.start(),
            m.end(),
            f"半角カナ「{value}」は全角カナ「{full}」に変換することを推奨します。",
            [f"「{full}」に変更する"],
        )


def check_dash_tilde(rule: Rule, tokens: Sequence[Token], context: RuleContext) -> Iterable[Diagnostic]:
    text = context.document_text
    found = []
    for pattern in data.RANGE_RES:
        for m in pattern.finditer(text):
            if m.group(2) != data.WAVE_DASH:
                found.append(m)
    # 時刻の範囲と数値の範囲が重なる場合は長い方
    spans = resolve_overlaps(_as_matches(found))
    for item in spans:
        m = item.value
        symbol = m.group(2)
        name = data.DASH_NAMES.get(symbol, data.DEFAULT_DASH_NAME)
        fixed = m.group(1) + data.WAVE_DASH + m.group(3)
        yield rule.diagnostic(
            m.start(),
            m.end(),
            f"範囲表現「{m.group(0)}」の{name}は、波ダッシュ「〜」に統一することを推奨します。",
            [f"「{fixed}」に変更する"],
        )


def _as_matches(found: Sequence[re.Match]) -> List[DictionaryMatch]:
    return [DictionaryMatch(m.group(0), m, m.start()) for m in found]


def check_space_around_unit(rule: Rule, tokens: Sequence[Token], context: RuleContext) -> Iterable[Diagnostic]:
    text = context.document_text
    for m in data.NUMBER_UNIT_RE.finditer(text):
        number, unit = m.group(1), m.group(2)
        if unit not in data.ENGLISH_UNITS:
            continue
        yield rule.diagnostic(
            m.start(),
            m.end(),
            f"「{m.group(0)}」は数字と単位の間にスペースを入れることを推奨します。",
            [f"「{number} {unit}」に変更する"],
        )
    for m in data.UNIT_PREFIX_RE.finditer(text):
        prefix, number = m.group(1), m.group(2)
        yield rule.diagnostic(
            m.start(),
            m.end(),
            f"「{m.group(0)}」は英字と数字の間にスペースを入れることを推奨します。",
            [f"「{prefix} {number}」に変更する"],
        )


def check_nakaguro(rule: Rule, tokens: Sequence[Token], context: RuleContext) -> Iterable[Diagnostic]:
    for m in data.NAKAGURO_RUN_RE.finditer(context.document_text):
        run = m.group(0)
        yield rule.diagnostic(
            m.start(),
            m.end(),
            f"中黒「{run}」が{len(run)}個連続しています。1個に修正することを推奨します。",
            ["「・」（1個）に変更する"],
        )


# ---------------------------------------------------------------------------
# 混在検出の収集関数
# ---------------------------------------------------------------------------

BULLET_LABELS = {"nakaguro": "・", "hyphen": "-", "asterisk": "*"}


def collect_bullets(text: str) -> Dict[str, PatternOccurrence]:
    positions: Dict[str, List[int]] = {key: [] for key in BULLET_LABELS}
    offset = 0
    for line in text.split("\n"):
        body = line.lstrip()
        pos = offset + len(line) - len(body)
        if body.startswith("・"):
            positions["nakaguro"].append(pos)
        elif body.startswith("-") and not body.startswith("--"):
            positions["hyphen"].append(pos)
        elif body.startswith("*") and not body.startswith("**"):
            positions["asterisk"].append(pos)
        offset += len(line) + 1
    return occurrences_from_positions(positions)


def _labelled(patterns: Dict[str, PatternOccurrence], labels: Dict[str, str]) -> str:
    return "と".join(f"{labels[key]}（{occ.count}箇所）" for key, occ in patterns.items())


def bullet_message(patterns: Dict[str, PatternOccurrence]) -> str:
    return f"箇条書き記号が混在しています。{_labelled(patterns, BULLET_LABELS)}が使用されています。どれかに統一してください。"


QUOTATION_LABELS = {key: label for key, _pattern, label in data.QUOTATION_STYLES}


def collect_quotations(text: str) -> Dict[str, PatternOccurrence]:
    return collect_mix(text, [(key, pattern) for key, pattern, _label in data.QUOTATION_STYLES])


def quotation_message(patterns: Dict[str, PatternOccurrence]) -> str:
    return f"引用符のスタイルが混在しています。{_labelled(patterns, QUOTATION_LABELS)}が使用されています。どれかに統一してください。"


EMPHASIS_LABELS = {key: label for key, _pattern, label in data.EMPHASIS_STYLES}


def collect_emphasis(text: str) -> Dict[str, PatternOccurrence]:
    return collect_mix(text, [(key, pattern) for key, pattern, _label in data.EMPHASIS_STYLES])


def emphasis_message(patterns: Dict[str, PatternOccurrence]) -> str:
    return f"強調記号のスタイルが混在しています。{_labelled(patterns, EMPHASIS_LABELS)}が使用されています。どちらかに統一してください。"


def collect_punctuation(text: str) -> Dict[str, PatternOccurrence]:
    return collect_mix(text, data.PUNCTUATION_STYLES)


def punctuation_message(patterns: Dict[str, PatternOccurrence]) -> str:
    japanese = patterns["japanese"].count if "japanese" in patterns else 0
    western = patterns["western"].count if "western" in patterns else 0
    return (
        f"句読点のスタイルが混在しています。日本語スタイル（、。）が{japanese}箇所、"
        f"欧文スタイル（，．）が{western}箇所あります。どちらかに統一してください。"
    )


def collect_pronouns(text: str) -> Dict[str, PatternOccurrence]:
    positions: Dict[str, List[int]] = {}
    for m in data.PRONOUN_RE.finditer(text):
        positions.setdefault(m.group(1), []).append(m.start())
    return occurrences_from_positions(positions)


def pronoun_message(patterns: Dict[str, PatternOccurrence]) -> str:
    listed = "と".join(f"{name}（{occ.count}箇所）" for name, occ in patterns.items())
    return f"人称代名詞が混在しています。{listed}が使用されています。どれかに統一してください。"


def collect_english_case(text: str) -> Dict[str, Dict[str, PatternOccurrence]]:
    return group_words((m.group(0), m.start()) for m in data.ENGLISH_WORD_RE.finditer(text))


def english_case_message(group: str, patterns: Dict[str, PatternOccurrence]) -> str:
    return f"英語表記「{group}」の大文字小文字が統一されていません。{'、'.join(patterns)}が混在しています。"


def english_case_suggestions(group: str, patterns: Dict[str, PatternOccurrence]) -> List[str]:
    first = next(iter(patterns))
    return [f"「{first}」または「{group.upper()}」に統一してください"]


def check_unit_notation(rule: Rule, tokens: Sequence[Token], context: RuleContext) -> Iterable[Diagnostic]:
    text = context.document_text
    for category, symbol_re, katakana_re in data.UNIT_CATEGORIES:
        symbols = [m.group(0) for m in symbol_re.finditer(text)]
        katakana = [m.group(0) for m in katakana_re.finditer(text)]
        if symbols and katakana:
            yield rule.diagnostic(
                0,
                len(text),
                f"単位表記が混在しています。記号表記（{'、'.join(symbols)}）とカタカナ表記（{'、'.join(katakana)}）が使用されています。",
                ["記号表記（km、kg）またはカタカナ表記（キロメートル、キログラム）のどちらかに統一してください"],
                category=category,
            )
            # 最初に混在したカテゴリのみ報告する
            break


__all__ = [
    "FULL",
    "HALF",
    "KANJI",
    "ARABIC",
    "collect_number_widths",
    "convert_digits",
    "collect_alphabet_widths",
    "convert_alphabet",
    "collect_symbol_widths",
    "symbol_name",
    "collect_numeral_styles",
    "kanji_to_arabic",
    "arabic_to_kanji",
    "collect_dates",
    "DATE_FORMAT_NAMES",
    "KATAKANA_TABLE",
    "skip_existing_chouon",
    "term_patterns",
    "check_halfwidth_kana",
    "check_dash_tilde",
    "check_space_around_unit",
    "check_nakaguro",
    "collect_bullets",
    "collect_quotations",
    "collect_emphasis",
    "collect_punctuation",
    "collect_pronouns",
    "collect_english_case",
    "check_unit_notation",
]
