"""ルール設定のスキーマと、変更通知つきの設定ストア。

RulesConfig は不変。更新は replace() で新しいインスタンスを作る。
解析中のルールは RuleContext に入ったスナップショットだけを見るため、
途中で設定が差し替わっても影響を受けない。

設定ファイル:
- TOML: [tool.jastylelint] セクション（pyproject.toml など）
- YAML / JSON: トップレベルのマッピング
キーは snake_case / camelCase どちらでも指定できる（enableAWSDictionary など）。
"""
from __future__ import annotations

import dataclasses
import json
import logging
import re
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

try:
    import tomllib  # Python 3.11+
except Exception:  # pragma: no cover
    tomllib = None  # type: ignore

import yaml

LOGGER = logging.getLogger(__name__)

WEAK_EXPRESSION_LEVELS = ("strict", "normal", "loose")
CONFIG_SECTION = "jastylelint"

_CAMEL_BOUNDARY_RE = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


class ConfigError(ValueError):
    """設定値が不正なときに送出する。"""


@dataclass(frozen=True)
class RulesConfig:
    # 既存の高度ルール
    enable_style_consistency: bool = True
    enable_ra_nuki_detection: bool = True
    enable_double_negation: bool = True
    enable_particle_repetition: bool = False
    enable_conjunction_repetition: bool = True
    enable_adversative_ga: bool = True
    enable_alphabet_width: bool = True
    enable_weak_expression: bool = True
    weak_expression_level: str = "normal"
    enable_comma_count: bool = True
    comma_count_threshold: int = 4
    enable_term_notation: bool = True
    enable_kanji_opening: bool = True
    enable_redundant_expression: bool = True
    enable_tautology: bool = True
    # 追加ルール
    enable_no_particle_chain: bool = True
    no_particle_chain_threshold: int = 3
    enable_monotonous_ending: bool = True
    monotonous_ending_threshold: int = 3
    enable_long_sentence: bool = True
    long_sentence_threshold: int = 120
    enable_sahen_verb: bool = True
    enable_missing_subject: bool = True
    enable_twisted_sentence: bool = True
    enable_homophone: bool = True
    enable_honorific_error: bool = True
    enable_adverb_agreement: bool = True
    enable_modifier_position: bool = True
    enable_ambiguous_demonstrative: bool = True
    enable_passive_overuse: bool = True
    passive_overuse_threshold: int = 3
    enable_noun_chain: bool = True
    noun_chain_threshold: int = 5
    enable_conjunction_misuse: bool = True
    # 混在検出・Markdown
    enable_bullet_style_mix: bool = True
    enable_quotation_style_mix: bool = True
    enable_emphasis_style_mix: bool = True
    enable_punctuation_style_mix: bool = True
    enable_pronoun_mix: bool = True
    enable_unit_notation_mix: bool = True
    enable_english_case_mix: bool = True
    enable_heading_level_skip: bool = True
    enable_table_column_mismatch: bool = True
    enable_code_block_language: bool = True
    enable_sentence_ending_colon: bool = True
    # 技術用語辞書
    enable_web_tech_dictionary: bool = True
    enable_generative_ai_dictionary: bool = True
    enable_aws_dictionary: bool = True
    enable_azure_dictionary: bool = True
    enable_oci_dictionary: bool = True
    custom_notation_rules: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            if f.type == "bool" and not isinstance(value, bool):
                raise ConfigError(f"{f.name} は真偽値で指定してください: {value!r}")
            if f.type == "int":
                if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                    raise ConfigError(f"{f.name} は1以上の整数で指定してください: {value!r}")
        if self.weak_expression_level not in WEAK_EXPRESSION_LEVELS:
            raise ConfigError(
                f"weak_expression_level は {', '.join(WEAK_EXPRESSION_LEVELS)} のいずれかです: "
                f"{self.weak_expression_level!r}"
            )
        rules = self.custom_notation_rules
        if not isinstance(rules, Mapping) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in rules.items()
        ):
            raise ConfigError("custom_notation_rules は文字列から文字列へのマッピングです")
        # 呼び出し元の dict を共有しない
        object.__setattr__(self, "custom_notation_rules", dict(rules))

    @classmethod
    def keys(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in dataclasses.fields(cls))

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]] = None) -> "RulesConfig":
        return DEFAULT_RULES_CONFIG.replace(**normalize_keys(data or {}))

    def replace(self, **changes: Any) -> "RulesConfig":
        unknown = sorted(set(changes) - set(self.keys()))
        if unknown:
            raise ConfigError(f"未知の設定キー: {', '.join(unknown)}")
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)


DEFAULT_RULES_CONFIG = RulesConfig()


def normalize_key(key: str) -> str:
    """camelCase のキーを snake_case に変換する（enableAWSDictionary -> enable_aws_dictionary）。"""
    return _CAMEL_BOUNDARY_RE.sub("_", key.replace("-", "_")).lower()


def normalize_keys(data: Mapping[str, Any]) -> Dict[str, Any]:
    return {normalize_key(str(k)): v for k, v in data.items()}


# ---------------------------------------------------------------------------
# 変更通知つきストア
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ConfigurationChangeEvent:
    configuration: RulesConfig
    affected_keys: Tuple[str, ...]

    def affects(self, key: str) -> bool:
        return normalize_key(key) in self.affected_keys


Listener = Callable[[ConfigurationChangeEvent], None]


class Disposable:
    def __init__(self, callback: Callable[[], None]):
        self._callback: Optional[Callable[[], None]] = callback

    def dispose(self) -> None:
        if self._callback is not None:
            callback, self._callback = self._callback, None
            callback()


class ConfigurationStore:
    """RulesConfig を保持し、更新時にリスナーへ通知する。"""

    def __init__(self, initial: Optional[RulesConfig] = None, defaults: RulesConfig = DEFAULT_RULES_CONFIG):
        self._defaults = defaults
        self._config = initial if initial is not None else defaults
        self._listeners: List[Listener] = []
        self._lock = threading.Lock()

    def get_configuration(self) -> RulesConfig:
        return self._config

    def get_value(self, key: str) -> Any:
        name = normalize_key(key)
        if name not in RulesConfig.keys():
            raise ConfigError(f"未知の設定キー: {key}")
        return getattr(self._config, name)

    def update_configuration(self, partial: Optional[Mapping[str, Any]] = None, **changes: Any) -> RulesConfig:
        merged = normalize_keys(partial or {})
        merged.update(normalize_keys(changes))
        merged = {k: v for k, v in merged.items() if v is not None}
        with self._lock:
            self._config = self._config.replace(**merged)
            config = self._config
        if merged:
            self._notify(ConfigurationChangeEvent(config, tuple(merged)))
        return config

    def reset(self) -> RulesConfig:
        with self._lock:
            self._config = self._defaults
            config = self._config
        self._notify(ConfigurationChangeEvent(config, RulesConfig.keys()))
        return config

    def on_did_change_configuration(self, listener: Listener) -> Disposable:
        with self._lock:
            self._listeners.append(listener)

        def _remove() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return Disposable(_remove)

    def _notify(self, event: ConfigurationChangeEvent) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            try:
                listener(event)
            except Exception:
                LOGGER.exception("configuration listener %r failed", listener)


# ---------------------------------------------------------------------------
# 設定ファイル
# ---------------------------------------------------------------------------

def load_config_file(path: str | Path) -> Dict[str, Any]:
    """設定ファイルを読み込み、正規化済みのキーで返す。

    TOML の場合は [tool.jastylelint] を、YAML/JSON の場合はトップレベルの
    マッピングを設定とみなす。
    """
    p = Path(path)
    if not p.is_file():
        raise FileNotFoundError(str(p))
    suffix = p.suffix.lower()
    if suffix == ".toml":
        if tomllib is None:
            raise RuntimeError("TOML設定の読込には Python 3.11 以降が必要です")
        with p.open("rb") as f:
            doc = tomllib.load(f)
        tool = doc.get("tool", {}) if isinstance(doc, dict) else {}
        section = tool.get(CONFIG_SECTION, {}) if isinstance(tool, dict) else {}
        if CONFIG_SECTION not in tool and CONFIG_SECTION in doc:
            section = doc[CONFIG_SECTION]
    else:
        text = p.read_text(encoding="utf-8-sig")
        section = yaml.safe_load(text) if suffix in {".yaml", ".yml"} else json.loads(text)
    if section is None:
        section = {}
    if not isinstance(section, dict):
        raise ConfigError(f"設定はマッピングである必要があります: {p}")
    return normalize_keys(section)


__all__ = [
    "ConfigError",
    "RulesConfig",
    "DEFAULT_RULES_CONFIG",
    "WEAK_EXPRESSION_LEVELS",
    "ConfigurationChangeEvent",
    "ConfigurationStore",
    "Disposable",
    "normalize_key",
    "normalize_keys",
    "load_config_file",
]
