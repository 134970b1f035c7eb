from __future__ import annotations
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml

from .checker import FileReport, check_paths
from .config import WEAK_EXPRESSION_LEVELS, ConfigError, load_config_file
from .evals import EvalsRunner, format_report, format_summary
from .external_rules import load_notation_rules
from .manager import RulesManager
from .models import SEVERITIES
from .morph import is_available as morph_available


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="jastylelint",
        description="日本語の文章を検査し、表記ゆれ・文体混在・冗長表現などを指摘します"
    )
    p.add_argument("paths", nargs="*", help="走査するファイル/ディレクトリ")
    p.add_argument("--json", action="store_true", help="JSONで出力")
    p.add_argument("--config", help="設定ファイル(TOML: [tool.jastylelint] / YAML / JSON)を読み込み、既定値を上書き")
    p.add_argument("--rules", action="append", metavar="FILE", help="追加の表記ルールファイル YAML/JSON (複数指定は繰り返し)")
    p.add_argument("--enable", action="append", default=[], metavar="NAME", help="ルールを有効化(ルール名またはコード、繰り返し可)")
    p.add_argument("--disable", action="append", default=[], metavar="NAME", help="ルールを無効化(ルール名またはコード、繰り返し可)")
    p.add_argument("--set", action="append", default=[], dest="settings", metavar="KEY=VALUE", help="設定値を直接指定 (例: long_sentence_threshold=80)")
    p.add_argument("--weak-level", choices=WEAK_EXPRESSION_LEVELS, help="弱い表現の検出レベル")
    # morph: 既定は環境が許せば有効。--no-morph で明示的に無効化。
    p.add_argument("--morph", dest="morph", action="store_true", default=None, help="形態素解析でトークン依存のルールも実行(要: fugashi/janome)")
    p.add_argument("--no-morph", dest="morph", action="store_false", help="形態素解析を無効化")
    p.add_argument("--jobs", type=int, default=1, help="並列実行のワーカー数")
    p.add_argument("--min-severity", choices=SEVERITIES, default="INFO", help="この重大度未満を非表示にします (既定: INFO)")
    p.add_argument("--fail-on-issue", action="store_true", help="問題が1件でもあれば終了コード1")
    p.add_argument("--list-rules", action="store_true", help="ルール一覧と有効/無効を表示")
    p.add_argument("--evals", action="store_true", help="NG例コーパスで検出率を評価し、Markdownレポートを出力")
    p.add_argument("--verbose", action="store_true", help="デバッグログを表示")
    return p


def _parse_value(raw: str) -> Any:
    lowered = raw.strip().lower()
    if lowered in {"true", "yes", "on"}:
        return True
    if lowered in {"false", "no", "off"}:
        return False
    try:
        return int(raw)
    except ValueError:
        return raw


def _parse_settings(items: List[str]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for item in items:
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            raise ConfigError(f"--set は KEY=VALUE 形式で指定してください: {item!r}")
        out[key.strip()] = _parse_value(value)
    return out


def _toggle_keys(manager: RulesManager, names: List[str]) -> List[str]:
    keys: List[str] = []
    for name in names:
        found = [r.config_key for r in manager.get_rules() if name in (r.name, r.code.value)]
        if not found:
            raise ConfigError(f"未知のルール: {name}")
        keys.extend(k for k in found if k not in keys)
    return keys


def _offset_to_linecol(text: str, idx: int) -> Tuple[int, int]:
    # 1-based line/col
    if idx <= 0:
        return 1, 1
    line = text.count("\n", 0, idx) + 1
    last_nl = text.rfind("\n", 0, idx)
    return line, idx - (last_nl + 1) + 1


def _print_reports(reports: List[FileReport]) -> int:
    total = 0
    for report in reports:
        for d in report.diagnostics:
            line, col = _offset_to_linecol(report.text, d.start)
            loc = f"{Path(report.path).resolve()}:{line}:{col}" if report.path else "<memory>"
            base_msg = f"{loc}: [{d.severity}] {d.message}"
            extra = []
            snippet = d.snippet(report.text).replace("\n", " ")
            if snippet:
                extra.append(snippet)
            if d.suggestions:
                extra.append(f"suggest: {' / '.join(d.suggestions)}")
            extra.append(f"rule: {d.code.value}")
            print(base_msg + " | " + " | ".join(extra))
            total += 1
    if total:
        print(f"Total: {total} issue(s)")
    else:
        print("No issues found.")
    return total


def _list_rules(manager: RulesManager) -> None:
    config = manager.get_config()
    for rule in manager.get_rules():
        mark = "on " if rule.is_enabled(config) else "off"
        print(f"[{mark}] {rule.name} ({rule.code.value}) {rule.description}".rstrip())


def main(argv: list[str] | None = None):
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    manager = RulesManager()
    try:
        if args.config:
            manager.update_config(load_config_file(args.config))
        custom: Dict[str, str] = dict(manager.get_config().custom_notation_rules)
        for rf in args.rules or []:
            custom.update(load_notation_rules(rf))
        if args.rules:
            manager.update_config(custom_notation_rules=custom)
        changes: Dict[str, Any] = {}
        changes.update({k: True for k in _toggle_keys(manager, args.enable)})
        changes.update({k: False for k in _toggle_keys(manager, args.disable)})
        changes.update(_parse_settings(args.settings))
        if args.weak_level:
            changes["weak_expression_level"] = args.weak_level
        if changes:
            manager.update_config(changes)
    except (OSError, ValueError, yaml.YAMLError, RuntimeError) as e:
        print(f"[warn] failed to load configuration: {e}", file=sys.stderr)
        return 2

    if args.list_rules:
        _list_rules(manager)
        return 0

    if args.morph and not morph_available():
        print("[warn] --morph が有効ですが 形態素解析器(fugashi/janome) が見つかりません。通常モードで実行します。", file=sys.stderr)
    morph = morph_available() if args.morph is None else bool(args.morph)

    if args.evals:
        manager.update_config(enable_particle_repetition=True)
        runner = EvalsRunner(manager=manager, tokenizer=None if morph else (lambda text: []))
        result = runner.run()
        if args.json:
            print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        else:
            print(format_report(result))
            print(format_summary(result), file=sys.stderr)
        return 0

    if not args.paths:
        parser.error("検査するファイル/ディレクトリを指定してください")

    reports = [r.filter(args.min_severity) for r in check_paths(args.paths, manager, morph=morph, jobs=args.jobs)]
    if args.json:
        data = [r.to_dict() for r in reports]
        print(json.dumps(data, ensure_ascii=False, indent=2))
        total = sum(len(r.diagnostics) for r in reports)
    else:
        total = _print_reports(reports)
    if args.fail_on_issue and total:
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
