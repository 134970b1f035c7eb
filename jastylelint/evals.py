"""NG例コーパスによる検出率の評価。

各カテゴリのNG例をルールエンジンに通し、期待するルールコードの診断が
1件以上出たかどうかで検出を判定する。結果は Markdown レポートと
コンソール向けサマリーに整形できる。
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Callable, Dict, List, Optional, Sequence

from .manager import RulesManager
from .models import Diagnostic, Token
from .morph import is_available as morph_available, tokenize
from .ng_examples import IMPLEMENTED, NG_EXAMPLE_CATEGORIES, NOT_IMPL, NGExample, NGExampleCategory

LOGGER = logging.getLogger(__name__)

PASS = "PASS"
FAIL = "FAIL"

Tokenizer = Callable[[str], List[Token]]


def round_half_up(value: float) -> int:
    """四捨五入（Python の round は偶数丸めなので使わない）。"""
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def _rate(detected: int, total: int) -> int:
    return round_half_up(detected / total * 100) if total else 0


@dataclass
class ExampleResult:
    text: str
    detected: bool
    expected_rule: str
    matched_rule: Optional[str] = None
    diagnostics: List[Diagnostic] = field(default_factory=list)


@dataclass
class CategoryResult:
    category_id: str
    category_name: str
    status: str
    total_examples: int
    detected_examples: int
    detection_rate: int
    representative_example: str = ""
    examples: List[ExampleResult] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.category_id,
            "name": self.category_name,
            "status": self.status,
            "total": self.total_examples,
            "detected": self.detected_examples,
            "rate": self.detection_rate,
            "example": self.representative_example,
        }


@dataclass
class EvalResult:
    categories: List[CategoryResult]
    total_categories: int
    implemented_categories: int
    total_examples: int
    detected_examples: int
    detection_rate: int
    timestamp: str

    @property
    def passed(self) -> List[CategoryResult]:
        return [c for c in self.categories if c.status == PASS]

    @property
    def failed(self) -> List[CategoryResult]:
        return [c for c in self.categories if c.status == FAIL]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_categories": self.total_categories,
            "implemented_categories": self.implemented_categories,
            "total_examples": self.total_examples,
            "detected_examples": self.detected_examples,
            "detection_rate": self.detection_rate,
            "timestamp": self.timestamp,
            "categories": [c.to_dict() for c in self.categories],
        }


def default_manager() -> RulesManager:
    # particle-repetition は既定で無効だが評価対象なので有効にする
    return RulesManager({"enable_particle_repetition": True})


class EvalsRunner:
    def __init__(
        self,
        categories: Sequence[NGExampleCategory] = NG_EXAMPLE_CATEGORIES,
        manager: Optional[RulesManager] = None,
        tokenizer: Optional[Tokenizer] = None,
    ):
        self.categories = list(categories)
        self.manager = manager or default_manager()
        if tokenizer is None and morph_available():
            tokenizer = tokenize
        self.tokenizer = tokenizer

    def evaluate_example(self, example: NGExample, expected_rule: str) -> ExampleResult:
        tokens = self.tokenizer(example.text) if self.tokenizer else []
        diagnostics = self.manager.check_text(example.text, tokens)
        matched = next((d for d in diagnostics if d.code.value == expected_rule), None)
        return ExampleResult(
            text=example.text,
            detected=matched is not None,
            expected_rule=expected_rule,
            matched_rule=matched.code.value if matched else None,
            diagnostics=diagnostics,
        )

    def evaluate_category(self, category: NGExampleCategory) -> CategoryResult:
        total = len(category.examples)
        representative = category.examples[0].text if category.examples else ""
        if category.status == NOT_IMPL:
            return CategoryResult(category.id, category.name, NOT_IMPL, total, 0, 0, representative)

        examples = [self.evaluate_example(e, category.expected_rule) for e in category.examples]
        detected = sum(1 for r in examples if r.detected)
        status = PASS if examples and detected == total else FAIL
        LOGGER.debug("category %s: %d/%d detected", category.id, detected, total)
        return CategoryResult(
            category.id,
            category.name,
            status,
            total,
            detected,
            _rate(detected, total),
            representative,
            examples,
        )

    def run(self) -> EvalResult:
        results = [self.evaluate_category(c) for c in self.categories]
        implemented = [r for r in results if r.status != NOT_IMPL]
        implemented_total = sum(r.total_examples for r in implemented)
        detected = sum(r.detected_examples for r in implemented)
        return EvalResult(
            categories=results,
            total_categories=len(results),
            implemented_categories=sum(1 for c in self.categories if c.status == IMPLEMENTED),
            total_examples=sum(r.total_examples for r in results),
            detected_examples=detected,
            detection_rate=_rate(detected, implemented_total),
            timestamp=datetime.now().isoformat(timespec="seconds"),
        )


def _cell(text: str, limit: int = 30) -> str:
    text = text.replace("\n", " ").replace("|", "\\|")
    return text if len(text) <= limit else text[:limit] + "…"


def format_report(result: EvalResult) -> str:
    """Markdown 形式のレポート。"""
    lines = [
        "# Japanese Grammar Evals Report",
        "",
        f"Generated: {result.timestamp}",
        "",
        coverage_badge(result.detection_rate),
        "",
        "## Summary",
        "",
        f"- Total Categories: {result.total_categories}",
        f"- Implemented: {result.implemented_categories}",
        f"- Total Examples: {result.total_examples}",
        f"- Detected: {result.detected_examples}",
        f"- Detection Rate: {result.detection_rate}%",
        "",
        "## Category Results",
        "",
        "| Category | Status | Detected | Rate | Example |",
        "|---|---|---|---|---|",
    ]
    for c in result.categories:
        detected = "-" if c.status == NOT_IMPL else f"{c.detected_examples}/{c.total_examples}"
        rate = "-" if c.status == NOT_IMPL else f"{c.detection_rate}%"
        lines.append(
            f"| {c.category_name} (`{c.category_id}`) | {c.status} | {detected} | {rate} "
            f"| {_cell(c.representative_example)} |"
        )
    failed = result.failed
    if failed:
        lines += ["", "## Missed Examples", ""]
        for c in failed:
            for e in c.examples:
                if not e.detected:
                    lines.append(f"- `{c.category_id}`: {_cell(e.text, 60)}")
    return "\n".join(lines) + "\n"


def format_summary(result: EvalResult) -> str:
    lines = [
        "=== Japanese Grammar Evals Report ===",
        f"Total Categories: {result.total_categories}",
        f"Implemented: {result.implemented_categories}",
        f"Detected: {result.detected_examples}/{result.total_examples} ({result.detection_rate}%)",
        f"PASS: {len(result.passed)}  FAIL: {len(result.failed)}",
    ]
    return "\n".join(lines)


def coverage_badge(rate: int) -> str:
    """README 用の shields.io バッジ。"""
    color = "brightgreen" if rate >= 90 else "green" if rate >= 75 else "yellow" if rate >= 50 else "red"
    return f"![Coverage](https://img.shields.io/badge/coverage-{rate}%25-{color})"


__all__ = [
    "PASS",
    "FAIL",
    "round_half_up",
    "ExampleResult",
    "CategoryResult",
    "EvalResult",
    "EvalsRunner",
    "default_manager",
    "format_report",
    "format_summary",
    "coverage_badge",
]
