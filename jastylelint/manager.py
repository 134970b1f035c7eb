"""ルールの実行管理。

check_text() の流れ:
1. 設定のスナップショットを1回だけ取得
2. 文に分割して RuleContext を作る
3. 登録順に有効なルールを実行し、診断を連結する

ルールが例外を投げた場合はログに残し、そのルールだけ今回の結果から外す。
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Mapping, Optional, Sequence, Union

from .config import ConfigurationStore, RulesConfig
from .models import Diagnostic, RuleContext, Token
from .registry import build_rules
from .rules import Rule
from .sentences import split_sentences

LOGGER = logging.getLogger(__name__)

ConfigInput = Union[RulesConfig, Mapping[str, object], None]


class RulesManager:
    def __init__(
        self,
        config: ConfigInput = None,
        rules: Optional[Sequence[Rule]] = None,
        store: Optional[ConfigurationStore] = None,
    ):
        if store is None:
            store = ConfigurationStore(config if isinstance(config, RulesConfig) else None)
            if isinstance(config, Mapping):
                store.update_configuration(dict(config))
        elif config is not None:
            store.update_configuration(config.to_dict() if isinstance(config, RulesConfig) else dict(config))
        self._store = store
        self._rules: List[Rule] = list(rules) if rules is not None else build_rules()

    @property
    def store(self) -> ConfigurationStore:
        return self._store

    # -- 実行 ---------------------------------------------------------------

    def check_text(self, text: str, tokens: Sequence[Token] = ()) -> List[Diagnostic]:
        return self._run(self._rules, text, tokens)

    def check_with_rules(self, text: str, tokens: Sequence[Token], names: Iterable[str]) -> List[Diagnostic]:
        """指定した名前（またはコード）のルールだけを実行する。設定による無効化は有効。"""
        wanted = set(names)
        selected = [r for r in self._rules if r.name in wanted or r.code.value in wanted]
        return self._run(selected, text, tokens)

    def _run(self, rules: Sequence[Rule], text: str, tokens: Sequence[Token]) -> List[Diagnostic]:
        config = self._store.get_configuration()
        tokens = tuple(tokens)
        context = RuleContext(document_text=text, sentences=tuple(split_sentences(text, tokens)), config=config)
        diagnostics: List[Diagnostic] = []
        for rule in rules:
            if not rule.is_enabled(config):
                continue
            try:
                found = rule.check(tokens, context)
            except Exception:
                LOGGER.warning("rule %s failed; skipped", rule.name, exc_info=True)
                continue
            LOGGER.debug("rule %s: %d issue(s)", rule.name, len(found))
            diagnostics.extend(found)
        return diagnostics

    # -- 設定 ---------------------------------------------------------------

    def update_config(self, partial: Optional[Mapping[str, object]] = None, **changes: object) -> RulesConfig:
        return self._store.update_configuration(partial, **changes)

    def get_config(self) -> RulesConfig:
        return self._store.get_configuration()

    def reset(self) -> RulesConfig:
        return self._store.reset()

    # -- ルール一覧 ---------------------------------------------------------

    def get_rules(self) -> List[Rule]:
        return list(self._rules)

    def get_enabled_rules(self) -> List[Rule]:
        config = self._store.get_configuration()
        return [r for r in self._rules if r.is_enabled(config)]


__all__ = ["RulesManager"]
