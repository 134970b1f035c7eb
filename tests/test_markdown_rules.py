from jastylelint.manager import RulesManager
from jastylelint.markdown_rules import count_columns, find_tables


def _run(text, *names):
    return RulesManager().check_with_rules(text, [], names)


def test_heading_level_skip():
    text = "# タイトル\n### 詳細"
    [d] = _run(text, "heading-level-skip")
    assert d.snippet(text) == "### 詳細"
    assert "h2" in d.message
    assert _run("# A\n## B\n### C\n# D\n## E", "heading-level-skip") == []


def test_heading_inside_code_fence_ignored():
    assert _run("# A\n```\n### not a heading\n```", "heading-level-skip") == []


def test_heading_inside_tilde_fence_ignored():
    text = "# タイトル\n~~~bash\n### コメント\n~~~\n## 節\n"
    assert _run(text, "heading-level-skip") == []


def test_backtick_line_does_not_close_tilde_fence():
    text = "# A\n~~~\n```\n### inside\n~~~\n### after"
    [d] = _run(text, "heading-level-skip")
    assert d.snippet(text) == "### after"


def test_table_column_mismatch():
    text = "| a | b |\n|---|---|\n| 1 | 2 | 3 |"
    [d] = _run(text, "table-column-mismatch")
    assert d.data == {"expected": 2, "actual": 3}
    assert d.snippet(text) == "| 1 | 2 | 3 |"


def test_table_separator_mismatch_message():
    text = "| a | b | c |\n|---|---|\n| 1 | 2 | 3 |"
    [d] = _run(text, "table-column-mismatch")
    assert "区切り行" in d.message


def test_table_helpers():
    assert count_columns("| a | b |") == 2
    assert count_columns("a | b | c") == 3
    tables = find_tables("前文\n| a |\n| b |\n後文\n| only |")
    assert len(tables) == 1


def test_code_block_language():
    [d] = _run("```\nprint(1)\n```", "code-block-language")
    assert d.start == 0
    assert _run("```python\nprint(1)\n```", "code-block-language") == []


def test_code_block_after_closed_fence():
    text = "```python\nx\n```\n\n```\ny\n```"
    [d] = _run(text, "code-block-language")
    assert d.snippet(text) == "```"
    assert d.start == text.index("\n```\ny") + 1


def test_sentence_ending_colon():
    text = "結果は次のとおり："
    [d] = _run(text, "sentence-ending-colon")
    assert d.snippet(text) == "："
    assert _run("結果は次のとおりです。", "sentence-ending-colon") == []
