"""ルール群が共有するマッチングアルゴリズム。

1. 辞書/パターンの部分文字列走査と重なり解消
2. スタックによる括弧・引用符の対応チェック
3. 間隔を許容した連続出現（チェーン）の検出
4. 多数決による優勢表記の決定
5. 複数スタイルの混在判定

いずれも純粋関数で、空入力に対しては空の結果を返す。
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import (
    Callable,
    Dict,
    Hashable,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Pattern,
    Sequence,
    Tuple,
    TypeVar,
)

from .models import PatternOccurrence

V = TypeVar("V")
K = TypeVar("K", bound=Hashable)


# ---------------------------------------------------------------------------
# 1. 辞書走査
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DictionaryMatch:
    key: str
    value: object
    index: int

    @property
    def end(self) -> int:
        return self.index + len(self.key)


def find_all(text: str, needle: str) -> Iterator[int]:
    """needle の出現位置をすべて返す（1文字ずつ進めるので重なりも拾う）。"""
    if not needle:
        return
    idx = text.find(needle)
    while idx != -1:
        yield idx
        idx = text.find(needle, idx + 1)


def resolve_overlaps(matches: Iterable[DictionaryMatch]) -> List[DictionaryMatch]:
    """位置順に並べ、重なるものは長い方を残す。同じ長さなら先に見つかった方。"""
    kept: List[DictionaryMatch] = []
    for item in sorted(matches, key=lambda m: m.index):
        hit = next((i for i, f in enumerate(kept) if f.index <= item.index < f.end), None)
        if hit is None:
            kept.append(item)
        elif len(item.key) > len(kept[hit].key):
            kept[hit] = item
    return kept


def scan_dictionary(
    text: str,
    table: Mapping[str, V] | Iterable[Tuple[str, V]],
    skip: Optional[Callable[[str, int, V], bool]] = None,
) -> List[DictionaryMatch]:
    items = table.items() if isinstance(table, Mapping) else table
    found: List[DictionaryMatch] = []
    for key, value in items:
        for idx in find_all(text, key):
            if skip is not None and skip(key, idx, value):
                continue
            found.append(DictionaryMatch(key, value, idx))
    return resolve_overlaps(found)


def scan_regex(text: str, patterns: Iterable[Tuple[Pattern[str], V]]) -> List[DictionaryMatch]:
    """正規表現版の走査。key にはマッチした文字列が入る。"""
    found: List[DictionaryMatch] = []
    for pattern, value in patterns:
        for m in pattern.finditer(text):
            if m.group(0):
                found.append(DictionaryMatch(m.group(0), value, m.start()))
    return resolve_overlaps(found)


# ---------------------------------------------------------------------------
# 2. 括弧の対応
# ---------------------------------------------------------------------------

BRACKET_PAIRS: Dict[str, str] = {
    "「": "」",
    "『": "』",
    "（": "）",
    "【": "】",
    "〈": "〉",
    "《": "》",
    "〔": "〕",
    "｛": "｝",
    "［": "］",
    "(": ")",
    "[": "]",
    "{": "}",
    "<": ">",
    '"': '"',
    "'": "'",
}

UNCLOSED = "unclosed"
UNOPENED = "unopened"


@dataclass(frozen=True)
class BracketIssue:
    kind: str  # unclosed | unopened
    bracket: str
    index: int
    expected: str


def match_brackets(text: str, pairs: Mapping[str, str] = BRACKET_PAIRS) -> List[BracketIssue]:
    closers = {close: open_ for open_, close in pairs.items()}
    stack: List[Tuple[str, int]] = []
    issues: List[BracketIssue] = []

    for i, ch in enumerate(text):
        is_open = ch in pairs
        is_close = ch in closers
        if is_open and is_close:
            # 開閉が同じ記号は、同じ記号が開いていれば閉じとみなす
            if stack and stack[-1][0] == ch:
                stack.pop()
            else:
                stack.append((ch, i))
            continue
        if is_open:
            stack.append((ch, i))
            continue
        if not is_close:
            continue
        opener = closers[ch]
        if not stack:
            issues.append(BracketIssue(UNOPENED, ch, i, opener))
            continue
        if stack[-1][0] == opener:
            stack.pop()
            continue
        depth = next((k for k in range(len(stack) - 1, -1, -1) if stack[k][0] == opener), None)
        if depth is None:
            issues.append(BracketIssue(UNOPENED, ch, i, opener))
            continue
        while len(stack) - 1 > depth:
            open_ch, idx = stack.pop()
            issues.append(BracketIssue(UNCLOSED, open_ch, idx, pairs[open_ch]))
        stack.pop()

    while stack:
        open_ch, idx = stack.pop()
        issues.append(BracketIssue(UNCLOSED, open_ch, idx, pairs[open_ch]))
    return issues


# ---------------------------------------------------------------------------
# 3. チェーン検出
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Chain:
    first: int
    last: int
    length: int


def find_chains(positions: Sequence[int], max_gap: int, threshold: int) -> List[Chain]:
    """隣接する出現の間隔が max_gap 以下のものを1つのチェーンとみなす。"""
    chains: List[Chain] = []
    if not positions:
        return chains
    ordered = sorted(positions)
    begin = 0
    for i in range(1, len(ordered) + 1):
        if i < len(ordered) and ordered[i] - ordered[i - 1] <= max_gap:
            continue
        length = i - begin
        if length >= threshold:
            chains.append(Chain(ordered[begin], ordered[i - 1], length))
        begin = i
    return chains


@dataclass(frozen=True)
class Run:
    key: object
    first: int  # 要素の添字
    last: int
    length: int


def find_runs(keys: Sequence[Optional[K]], threshold: int) -> List[Run]:
    """同じキーが threshold 回以上連続する区間を返す。None は連続を断ち切る。"""
    runs: List[Run] = []
    begin = 0
    for i in range(1, len(keys) + 1):
        if i < len(keys) and keys[i] is not None and keys[i] == keys[begin]:
            continue
        length = i - begin
        if keys and keys[begin] is not None and length >= threshold:
            runs.append(Run(keys[begin], begin, i - 1, length))
        begin = i
    return runs


# ---------------------------------------------------------------------------
# 4. 優勢表記
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class VariantOccurrence:
    variant: str
    text: str
    index: int

    @property
    def end(self) -> int:
        return self.index + len(self.text)


def collect_variants(text: str, patterns: Iterable[Tuple[str, Pattern[str]]]) -> List[VariantOccurrence]:
    found = [
        VariantOccurrence(variant, m.group(0), m.start())
        for variant, pattern in patterns
        for m in pattern.finditer(text)
        if m.group(0)
    ]
    return sorted(found, key=lambda o: o.index)


def dominant_variant(occurrences: Sequence[VariantOccurrence], tie_default: Optional[str] = None) -> Optional[str]:
    """重み（一致文字数の合計）が最大の表記を返す。表記が2種類未満なら None。"""
    weights: Dict[str, int] = {}
    for occ in sorted(occurrences, key=lambda o: o.index):
        weights[occ.variant] = weights.get(occ.variant, 0) + len(occ.text)
    if len(weights) < 2:
        return None
    top = max(weights.values())
    tied = [v for v, w in weights.items() if w == top]
    if tie_default is not None and tie_default in tied:
        return tie_default
    return tied[0]


def minority_occurrences(
    occurrences: Sequence[VariantOccurrence], tie_default: Optional[str] = None
) -> Tuple[Optional[str], List[VariantOccurrence]]:
    dominant = dominant_variant(occurrences, tie_default)
    if dominant is None:
        return None, []
    return dominant, sorted((o for o in occurrences if o.variant != dominant), key=lambda o: o.index)


# ---------------------------------------------------------------------------
# 5. 混在判定
# ---------------------------------------------------------------------------

def occurrences_from_positions(positions: Mapping[str, Sequence[int]]) -> Dict[str, PatternOccurrence]:
    return {
        key: PatternOccurrence(key, len(pos), tuple(pos))
        for key, pos in positions.items()
        if pos
    }


def regex_positions(text: str, pattern: Pattern[str]) -> List[int]:
    return [m.start() for m in pattern.finditer(text)]


def collect_mix(text: str, patterns: Iterable[Tuple[str, Pattern[str]]]) -> Dict[str, PatternOccurrence]:
    return occurrences_from_positions({key: regex_positions(text, p) for key, p in patterns})


def is_mixed(patterns: Mapping[str, PatternOccurrence]) -> bool:
    return len(patterns) >= 2


def group_words(words: Iterable[Tuple[str, int]], key: Callable[[str], str] = str.lower) -> Dict[str, Dict[str, PatternOccurrence]]:
    """(語, 位置) を key ごとにまとめ、さらに表記ごとの出現にする。"""
    grouped: Dict[str, Dict[str, List[int]]] = {}
    for word, pos in words:
        grouped.setdefault(key(word), {}).setdefault(word, []).append(pos)
    return {k: occurrences_from_positions(v) for k, v in grouped.items()}


__all__ = [
    "DictionaryMatch",
    "find_all",
    "resolve_overlaps",
    "scan_dictionary",
    "scan_regex",
    "BRACKET_PAIRS",
    "UNCLOSED",
    "UNOPENED",
    "BracketIssue",
    "match_brackets",
    "Chain",
    "find_chains",
    "Run",
    "find_runs",
    "VariantOccurrence",
    "collect_variants",
    "dominant_variant",
    "minority_occurrences",
    "occurrences_from_positions",
    "regex_positions",
    "collect_mix",
    "is_mixed",
    "group_words",
]
