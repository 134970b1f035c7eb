"""ルールエンジンが共有するデータモデル。

- Token: 形態素1つ分（表層形・品詞・オフセット）
- Sentence: 句点で区切った1文と、その文に含まれるトークン
- RuleContext: 1回の解析呼び出しで全ルールが参照する不変のスナップショット
- Diagnostic: ルールが返す指摘（範囲・メッセージ・コード・修正候補）

位置はすべて文書先頭からの文字オフセット（半開区間 [start, end)）で保持し、
行・桁への変換は出力時にのみ行う。
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple, TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .config import RulesConfig

SOURCE = "jastylelint"

SEVERITIES = ("INFO", "WARN", "ERROR")
SEVERITY_ORDER = {"INFO": 0, "WARN": 1, "ERROR": 2}

_TERMINATOR_TAIL_RE = re.compile(r"[。！？!?]$")
_DESU_MASU_RE = re.compile(r"(です|ます)$")
_DEARU_RE = re.compile(r"である$")


class RuleCode(str, Enum):
    STYLE_INCONSISTENCY = "style-inconsistency"
    RA_NUKI = "ra-nuki"
    DOUBLE_NEGATION = "double-negation"
    PARTICLE_REPETITION = "particle-repetition"
    CONJUNCTION_REPETITION = "conjunction-repetition"
    ADVERSATIVE_GA = "adversative-ga"
    ALPHABET_WIDTH = "alphabet-width"
    WEAK_EXPRESSION = "weak-expression"
    COMMA_COUNT = "comma-count"
    TERM_NOTATION = "term-notation"
    KANJI_OPENING = "kanji-opening"
    REDUNDANT_EXPRESSION = "redundant-expression"
    TAUTOLOGY = "tautology"
    NO_PARTICLE_CHAIN = "no-particle-chain"
    MONOTONOUS_ENDING = "monotonous-ending"
    LONG_SENTENCE = "long-sentence"
    SAHEN_VERB = "sahen-verb"
    MISSING_SUBJECT = "missing-subject"
    TWISTED_SENTENCE = "twisted-sentence"
    HOMOPHONE = "homophone"
    HONORIFIC_ERROR = "honorific-error"
    ADVERB_AGREEMENT = "adverb-agreement"
    MODIFIER_POSITION = "modifier-position"
    AMBIGUOUS_DEMONSTRATIVE = "ambiguous-demonstrative"
    PASSIVE_OVERUSE = "passive-overuse"
    NOUN_CHAIN = "noun-chain"
    CONJUNCTION_MISUSE = "conjunction-misuse"
    OKURIGANA_VARIANT = "okurigana-variant"
    ORTHOGRAPHY_VARIANT = "orthography-variant"
    KATAKANA_CHOUON = "katakana-chouon"
    HALFWIDTH_KANA = "halfwidth-kana"
    NUMBER_WIDTH_MIX = "number-width-mix"
    SYMBOL_WIDTH_MIX = "symbol-width-mix"
    NUMERAL_STYLE_MIX = "numeral-style-mix"
    DATE_FORMAT_VARIANT = "date-format-variant"
    DASH_TILDE_NORMALIZATION = "dash-tilde-normalization"
    SPACE_AROUND_UNIT = "space-around-unit"
    BRACKET_QUOTE_MISMATCH = "bracket-quote-mismatch"
    NAKAGURO_USAGE = "nakaguro-usage"
    BULLET_STYLE_MIX = "bullet-style-mix"
    QUOTATION_STYLE_MIX = "quotation-style-mix"
    EMPHASIS_STYLE_MIX = "emphasis-style-mix"
    PUNCTUATION_STYLE_MIX = "punctuation-style-mix"
    PRONOUN_MIX = "pronoun-mix"
    UNIT_NOTATION_MIX = "unit-notation-mix"
    ENGLISH_CASE_MIX = "english-case-mix"
    HEADING_LEVEL_SKIP = "heading-level-skip"
    TABLE_COLUMN_MISMATCH = "table-column-mismatch"
    CODE_BLOCK_LANGUAGE = "code-block-language"
    SENTENCE_ENDING_COLON = "sentence-ending-colon"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Token:
    surface: str
    pos: str
    start: int
    end: int
    base_form: str = ""
    reading: str = ""
    conjugation: str = ""  # 活用型（例: 一段, 五段・ラ行）
    pos_detail: str = ""

    def __post_init__(self) -> None:
        if self.start < 0 or self.start >= self.end:
            raise ValueError(f"invalid token span [{self.start}, {self.end}) for {self.surface!r}")

    def is_particle(self) -> bool:
        return self.pos == "助詞"

    def is_verb(self) -> bool:
        return self.pos == "動詞"

    def is_noun(self) -> bool:
        return self.pos == "名詞"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "surface": self.surface,
            "pos": self.pos,
            "start": self.start,
            "end": self.end,
            "base_form": self.base_form,
            "reading": self.reading,
            "conjugation": self.conjugation,
            "pos_detail": self.pos_detail,
        }


def classify_ending(text: str) -> Tuple[bool, bool]:
    """(です/ます で終わるか, である で終わるか) を返す。末尾の句点類は1つだけ除く。"""
    body = _TERMINATOR_TAIL_RE.sub("", text.strip())
    return bool(_DESU_MASU_RE.search(body)), bool(_DEARU_RE.search(body))


@dataclass(frozen=True)
class Sentence:
    text: str
    start: int
    end: int
    tokens: Tuple[Token, ...] = ()
    comma_count: int = 0
    ends_with_desu_masu: bool = False
    ends_with_dearu: bool = False

    @classmethod
    def build(cls, text: str, start: int, end: int, tokens: Tuple[Token, ...] = ()) -> "Sentence":
        desu_masu, dearu = classify_ending(text)
        return cls(
            text=text,
            start=start,
            end=end,
            tokens=tuple(tokens),
            comma_count=text.count("、"),
            ends_with_desu_masu=desu_masu,
            ends_with_dearu=dearu,
        )


@dataclass(frozen=True)
class RuleContext:
    document_text: str
    sentences: Tuple[Sentence, ...]
    config: "RulesConfig"


@dataclass(frozen=True)
class PatternOccurrence:
    variant_key: str
    count: int
    positions: Tuple[int, ...] = ()


@dataclass(frozen=True)
class Position:
    line: int
    character: int

    def to_dict(self) -> Dict[str, int]:
        return {"line": self.line, "character": self.character}


def offset_to_position(text: str, offset: int) -> Position:
    """文字オフセットを 0 始まりの (行, 桁) に変換する。範囲外はクランプ。"""
    offset = max(0, min(offset, len(text)))
    line = text.count("\n", 0, offset)
    last_nl = text.rfind("\n", 0, offset)
    return Position(line=line, character=offset - (last_nl + 1))


@dataclass(frozen=True)
class Diagnostic:
    start: int
    end: int
    message: str
    code: RuleCode
    rule_name: str
    suggestions: Tuple[str, ...] = ()
    severity: str = "WARN"
    source: str = SOURCE
    data: Dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    @property
    def length(self) -> int:
        return self.end - self.start

    def snippet(self, text: str) -> str:
        return text[self.start:self.end]

    def to_dict(self, text: Optional[str] = None) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "start": self.start,
            "end": self.end,
            "severity": self.severity,
            "message": self.message,
            "code": self.code.value,
            "rule_name": self.rule_name,
            "source": self.source,
            "suggestions": list(self.suggestions),
            "data": dict(self.data),
        }
        if text is not None:
            out["range"] = {
                "start": offset_to_position(text, self.start).to_dict(),
                "end": offset_to_position(text, self.end).to_dict(),
            }
        return out


__all__ = [
    "SOURCE",
    "SEVERITIES",
    "SEVERITY_ORDER",
    "RuleCode",
    "Token",
    "Sentence",
    "RuleContext",
    "PatternOccurrence",
    "Position",
    "Diagnostic",
    "classify_ending",
    "offset_to_position",
]
