from jastylelint.evals import (
    FAIL,
    PASS,
    EvalsRunner,
    coverage_badge,
    default_manager,
    format_report,
    format_summary,
    round_half_up,
)
from jastylelint.ng_examples import (
    IMPLEMENTED,
    NG_EXAMPLE_CATEGORIES,
    NOT_IMPL,
    NGExample,
    NGExampleCategory,
    implemented_categories,
    total_example_count,
)


def _no_tokens(text):
    return []


CATEGORIES = [
    NGExampleCategory(
        "double-negation", "二重否定", "", "double-negation", IMPLEMENTED,
        (NGExample("できないわけではない"), NGExample("知らないことはない")),
    ),
    NGExampleCategory(
        "kanji-opening", "漢字開き", "", "kanji-opening", IMPLEMENTED,
        (NGExample("確認して下さい"), NGExample("問題ありません")),
    ),
    NGExampleCategory(
        "double-particle", "二重助詞", "", "double-particle", NOT_IMPL,
        (NGExample("私がが行く"),),
    ),
]


def test_round_half_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(66.666) == 67
    assert round_half_up(33.333) == 33


def test_corpus_shape():
    assert len(NG_EXAMPLE_CATEGORIES) == 31
    assert len([c for c in NG_EXAMPLE_CATEGORIES if c.status == NOT_IMPL]) == 4
    assert len(implemented_categories()) == 27
    assert total_example_count() == sum(len(c.examples) for c in NG_EXAMPLE_CATEGORIES)
    assert all(c.examples for c in NG_EXAMPLE_CATEGORIES)


def test_default_manager_enables_particle_repetition():
    assert default_manager().get_config().enable_particle_repetition is True


def test_category_statuses():
    result = EvalsRunner(CATEGORIES, tokenizer=_no_tokens).run()
    by_id = {c.category_id: c for c in result.categories}

    assert by_id["double-negation"].status == PASS
    assert by_id["double-negation"].detection_rate == 100

    assert by_id["kanji-opening"].status == FAIL
    assert by_id["kanji-opening"].detected_examples == 1
    assert by_id["kanji-opening"].detection_rate == 50
    missed = [e for e in by_id["kanji-opening"].examples if not e.detected]
    assert [e.text for e in missed] == ["問題ありません"]

    skipped = by_id["double-particle"]
    assert skipped.status == NOT_IMPL
    assert skipped.detected_examples == 0
    assert skipped.examples == []
    assert skipped.representative_example == "私がが行く"


def test_overall_rate_uses_implemented_examples():
    result = EvalsRunner(CATEGORIES, tokenizer=_no_tokens).run()
    assert result.total_categories == 3
    assert result.implemented_categories == 2
    assert result.total_examples == 5
    assert result.detected_examples == 3
    assert result.detection_rate == 75


def test_example_result_records_matched_rule():
    runner = EvalsRunner(CATEGORIES, tokenizer=_no_tokens)
    hit = runner.evaluate_example(NGExample("できないわけではない"), "double-negation")
    assert hit.detected and hit.matched_rule == "double-negation"
    miss = runner.evaluate_example(NGExample("できる"), "double-negation")
    assert not miss.detected and miss.matched_rule is None


def test_report_formatting():
    result = EvalsRunner(CATEGORIES, tokenizer=_no_tokens).run()
    report = format_report(result)
    assert report.startswith("# Japanese Grammar Evals Report")
    assert "## Summary" in report
    assert "## Category Results" in report
    assert "| 二重否定 (`double-negation`) | PASS |" in report
    assert "NOT_IMPL" in report
    assert "## Missed Examples" in report
    assert "![Coverage](https://img.shields.io/badge/coverage-75%25-green)" in report
    summary = format_summary(result)
    assert summary.splitlines()[0] == "=== Japanese Grammar Evals Report ==="
    assert "Total Categories: 3" in summary
    assert "Detected: 3/5 (75%)" in summary


def test_full_corpus_runs_without_tokenizer():
    result = EvalsRunner(tokenizer=_no_tokens).run()
    assert result.total_categories == 31
    assert 0 < result.detection_rate <= 100
    by_id = {c.category_id: c for c in result.categories}
    for cid in ("double-negation", "kanji-opening", "term-notation", "tautology", "monotonous-ending"):
        assert by_id[cid].status == PASS, cid


def test_coverage_badge_colors():
    assert coverage_badge(100).endswith("coverage-100%25-brightgreen)")
    assert coverage_badge(90).endswith("-brightgreen)")
    assert coverage_badge(75).endswith("-green)")
    assert coverage_badge(50).endswith("-yellow)")
    assert coverage_badge(49).endswith("-red)")
