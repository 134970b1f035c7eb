"""ルールの共通インターフェースと汎用ルール種別。

個々のルールはクラスを増やさず、データ（辞書・正規表現・収集関数）を
以下の種別に渡して作る。登録は registry.py の表で行う。

- DictionaryRule: 辞書の部分文字列走査（重なりは長い方を優先）
- PatternRule: 正規表現テーブルの走査
- DominantFormRule: 多数派の表記に合わせて少数派を指摘
- MixRule / GroupedMixRule: 複数スタイルの混在を文書単位で1件指摘
- FunctionRule: 文・トークン・Markdown 構造を見る個別ロジック
"""
from __future__ import annotations

from collections import OrderedDict
from typing import (
    Any,
    Callable,
    Dict,
    Iterable,
    List,
    Mapping,
    Optional,
    Pattern,
    Sequence,
    Tuple,
    Union,
    TYPE_CHECKING,
)

from .matching import (
    VariantOccurrence,
    is_mixed,
    minority_occurrences,
    scan_dictionary,
    scan_regex,
)
from .models import Diagnostic, PatternOccurrence, RuleCode, RuleContext, Token

if TYPE_CHECKING:  # pragma: no cover
    from .config import RulesConfig


class Rule:
    """全ルールの基底。check() は純粋関数で、該当なしなら空リストを返す。"""

    def __init__(self, name: str, code: RuleCode, config_key: str, description: str = ""):
        self.name = name
        self.code = code
        self.config_key = config_key
        self.description = description

    def is_enabled(self, config: "RulesConfig") -> bool:
        return bool(getattr(config, self.config_key, False))

    def check(self, tokens: Sequence[Token], context: RuleContext) -> List[Diagnostic]:
        raise NotImplementedError

    def diagnostic(
        self,
        start: int,
        end: int,
        message: str,
        suggestions: Iterable[str] = (),
        **data: Any,
    ) -> Diagnostic:
        return Diagnostic(
            start=start,
            end=end,
            message=message,
            code=self.code,
            rule_name=self.name,
            suggestions=tuple(suggestions),
            data=data,
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"


TableSource = Union[Mapping[str, Any], Callable[["RulesConfig"], Mapping[str, Any]]]


class DictionaryRule(Rule):
    def __init__(
        self,
        name: str,
        code: RuleCode,
        config_key: str,
        table: TableSource,
        message: Callable[[str, Any], str],
        suggestions: Callable[[str, Any], Sequence[str]],
        description: str = "",
        skip: Optional[Callable[[str, str, int, Any], bool]] = None,
    ):
        super().__init__(name, code, config_key, description)
        self.table = table
        self.message = message
        self.suggestions = suggestions
        self.skip = skip

    def resolve_table(self, config: "RulesConfig") -> Mapping[str, Any]:
        return self.table(config) if callable(self.table) else self.table

    def check(self, tokens: Sequence[Token], context: RuleContext) -> List[Diagnostic]:
        text = context.document_text
        table = self.resolve_table(context.config)
        if not text or not table:
            return []
        skip = None
        if self.skip is not None:
            user_skip = self.skip

            def skip(key: str, idx: int, value: Any) -> bool:
                return user_skip(text, key, idx, value)

        return [
            self.diagnostic(m.index, m.end, self.message(m.key, m.value), self.suggestions(m.key, m.value))
            for m in scan_dictionary(text, table, skip)
        ]


PatternSource = Union[
    Sequence[Tuple[Pattern[str], Any]],
    Callable[["RulesConfig"], Sequence[Tuple[Pattern[str], Any]]],
]


class PatternRule(Rule):
    """正規表現テーブルを走査する。value はメッセージ組み立て用の任意データ。"""

    def __init__(
        self,
        name: str,
        code: RuleCode,
        config_key: str,
        patterns: PatternSource,
        message: Callable[[str, Any], str],
        suggestions: Callable[[str, Any], Sequence[str]],
        description: str = "",
    ):
        super().__init__(name, code, config_key, description)
        self.patterns = patterns
        self.message = message
        self.suggestions = suggestions

    def check(self, tokens: Sequence[Token], context: RuleContext) -> List[Diagnostic]:
        text = context.document_text
        patterns = self.patterns(context.config) if callable(self.patterns) else self.patterns
        if not text:
            return []
        return [
            self.diagnostic(m.index, m.end, self.message(m.key, m.value), self.suggestions(m.key, m.value))
            for m in scan_regex(text, patterns)
        ]


class DominantFormRule(Rule):
    """出現を表記ごとに集計し、多数派でない表記の出現をすべて指摘する。

    group は投票単位（記号の種類ごとに多数決する場合など）。省略時は文書全体で1回。
    """

    def __init__(
        self,
        name: str,
        code: RuleCode,
        config_key: str,
        collect: Callable[[str], List[VariantOccurrence]],
        message: Callable[[VariantOccurrence, str], str],
        suggestions: Callable[[VariantOccurrence, str], Sequence[str]],
        tie_default: Optional[str] = None,
        group: Optional[Callable[[VariantOccurrence], str]] = None,
        description: str = "",
    ):
        super().__init__(name, code, config_key, description)
        self.collect = collect
        self.message = message
        self.suggestions = suggestions
        self.tie_default = tie_default
        self.group = group

    def check(self, tokens: Sequence[Token], context: RuleContext) -> List[Diagnostic]:
        text = context.document_text
        if not text:
            return []
        groups: Dict[str, List[VariantOccurrence]] = OrderedDict()
        for occ in self.collect(text):
            key = self.group(occ) if self.group is not None else ""
            groups.setdefault(key, []).append(occ)

        flagged: List[Tuple[VariantOccurrence, str]] = []
        for occurrences in groups.values():
            dominant, minority = minority_occurrences(occurrences, self.tie_default)
            if dominant is not None:
                flagged.extend((occ, dominant) for occ in minority)
        flagged.sort(key=lambda item: item[0].index)
        return [
            self.diagnostic(
                occ.index,
                occ.end,
                self.message(occ, dominant),
                self.suggestions(occ, dominant),
                variant=occ.variant,
                dominant=dominant,
            )
            for occ, dominant in flagged
        ]


class MixRule(Rule):
    """2種類以上のスタイルが使われていれば、文書全体に1件だけ指摘する。"""

    def __init__(
        self,
        name: str,
        code: RuleCode,
        config_key: str,
        collect: Callable[[str], Dict[str, PatternOccurrence]],
        message: Callable[[Dict[str, PatternOccurrence]], str],
        suggestions: Sequence[str],
        description: str = "",
    ):
        super().__init__(name, code, config_key, description)
        self.collect = collect
        self.message = message
        self.suggestions = tuple(suggestions)

    def check(self, tokens: Sequence[Token], context: RuleContext) -> List[Diagnostic]:
        text = context.document_text
        if not text:
            return []
        patterns = self.collect(text)
        if not is_mixed(patterns):
            return []
        counts = {key: occ.count for key, occ in patterns.items()}
        return [self.diagnostic(0, len(text), self.message(patterns), self.suggestions, variants=counts)]


class GroupedMixRule(Rule):
    """グループ（例: 小文字化した英単語）ごとに混在を判定する。"""

    def __init__(
        self,
        name: str,
        code: RuleCode,
        config_key: str,
        collect: Callable[[str], Dict[str, Dict[str, PatternOccurrence]]],
        message: Callable[[str, Dict[str, PatternOccurrence]], str],
        suggestions: Callable[[str, Dict[str, PatternOccurrence]], Sequence[str]],
        description: str = "",
    ):
        super().__init__(name, code, config_key, description)
        self.collect = collect
        self.message = message
        self.suggestions = suggestions

    def check(self, tokens: Sequence[Token], context: RuleContext) -> List[Diagnostic]:
        text = context.document_text
        if not text:
            return []
        return [
            self.diagnostic(0, len(text), self.message(group, patterns), self.suggestions(group, patterns), group=group)
            for group, patterns in self.collect(text).items()
            if is_mixed(patterns)
        ]


CheckFunction = Callable[[Rule, Sequence[Token], RuleContext], Iterable[Diagnostic]]


class FunctionRule(Rule):
    def __init__(self, name: str, code: RuleCode, config_key: str, func: CheckFunction, description: str = ""):
        super().__init__(name, code, config_key, description)
        self.func = func

    def check(self, tokens: Sequence[Token], context: RuleContext) -> List[Diagnostic]:
        return list(self.func(self, tokens, context))


__all__ = [
    "Rule",
    "DictionaryRule",
    "PatternRule",
    "DominantFormRule",
    "MixRule",
    "GroupedMixRule",
    "FunctionRule",
    "CheckFunction",
]
