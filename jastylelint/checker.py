"""高レベル API: テキスト/ファイル/パス群に対するスタイル検査

- 形態素解析オプション（トークン依存のルール用）
- パス走査と並列実行
"""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from .file_scanner import iter_files, read_text
from .manager import RulesManager
from .models import Diagnostic, SEVERITY_ORDER
from .morph import is_available as morph_available, tokenize


@dataclass
class FileReport:
    path: Optional[str]
    text: str
    diagnostics: List[Diagnostic] = field(default_factory=list)

    def filter(self, min_severity: str) -> "FileReport":
        floor = SEVERITY_ORDER.get(min_severity, 0)
        kept = [d for d in self.diagnostics if SEVERITY_ORDER.get(d.severity, 1) >= floor]
        return FileReport(self.path, self.text, kept)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "file": self.path,
            "diagnostics": [d.to_dict(self.text) for d in self.diagnostics],
        }


def check_text(
    text: str,
    manager: Optional[RulesManager] = None,
    morph: bool = False,
) -> List[Diagnostic]:
    manager = manager or RulesManager()
    tokens = tokenize(text) if morph and morph_available() else []
    return manager.check_text(text, tokens)


def check_file(
    path: str | Path,
    manager: Optional[RulesManager] = None,
    morph: bool = False,
) -> Optional[FileReport]:
    """テキストとして読めないファイルは None。"""
    text = read_text(Path(path))
    if text is None:
        return None
    return FileReport(str(path), text, check_text(text, manager, morph=morph))


def check_paths(
    paths: Iterable[str],
    manager: Optional[RulesManager] = None,
    morph: bool = False,
    jobs: int = 1,
) -> List[FileReport]:
    """ファイル順に並んだレポートを返す。各呼び出しは設定のスナップショットを個別に取る。"""
    manager = manager or RulesManager()
    files = list(iter_files(paths))
    if jobs and jobs > 1:
        with ThreadPoolExecutor(max_workers=jobs) as ex:
            reports = list(ex.map(lambda f: check_file(f, manager, morph), files))
    else:
        reports = [check_file(f, manager, morph) for f in files]
    return [r for r in reports if r is not None]


__all__ = ["check_text", "check_file", "check_paths", "FileReport"]
