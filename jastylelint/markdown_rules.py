"""Markdown 構造のルール（見出し・テーブル・コードブロック・文末コロン）。"""
from __future__ import annotations

import re
from typing import Iterable, Iterator, List, Sequence, Tuple

from . import rule_data as data
from .models import Diagnostic, RuleContext, Token
from .rules import Rule


def iter_lines(text: str) -> Iterator[Tuple[int, str]]:
    """(行頭オフセット, 行) を返す。改行は含まない。"""
    offset = 0
    for line in text.split("\n"):
        yield offset, line
        offset += len(line) + 1


def _fence_closes(line: str, fence: str) -> bool:
    return re.match("^" + re.escape(fence) + r"{3,}\s*$", line) is not None


def check_heading_level_skip(rule: Rule, tokens: Sequence[Token], context: RuleContext) -> Iterable[Diagnostic]:
    fence = ""
    previous = 0
    for offset, line in iter_lines(context.document_text):
        if fence:
            if _fence_closes(line, fence):
                fence = ""
            continue
        m = data.FENCE_RE.match(line)
        if m:
            fence = m.group(1)[0]
            continue
        m = data.HEADING_RE.match(line)
        if not m:
            continue
        level = len(m.group(1))
        if previous and level > previous + 1:
            expected = previous + 1
            yield rule.diagnostic(
                offset,
                offset + len(line),
                f"見出しレベルが飛んでいます。h{previous}の次にh{level}が使用されています。h{expected}を使用してください。",
                [f"h{expected}（{'#' * expected} ）を使用してください"],
                level=level,
                previous=previous,
            )
        previous = level


def count_columns(line: str) -> int:
    body = line.strip()
    if body.startswith("|"):
        body = body[1:]
    if body.endswith("|"):
        body = body[:-1]
    return len(body.split("|"))


def find_tables(text: str) -> List[List[Tuple[int, str]]]:
    tables: List[List[Tuple[int, str]]] = []
    current: List[Tuple[int, str]] = []
    for offset, line in iter_lines(text):
        if line.strip().startswith("|"):
            current.append((offset, line))
            continue
        if len(current) >= 2:
            tables.append(current)
        current = []
    if len(current) >= 2:
        tables.append(current)
    return tables


def check_table_column_mismatch(rule: Rule, tokens: Sequence[Token], context: RuleContext) -> Iterable[Diagnostic]:
    for table in find_tables(context.document_text):
        expected = count_columns(table[0][1])
        for offset, line in table:
            actual = count_columns(line)
            if actual == expected:
                continue
            if data.TABLE_SEPARATOR_RE.match(line.strip()):
                message = f"テーブルの区切り行の列数が一致しません。ヘッダーは{expected}列ですが、区切り行は{actual}列です。"
                suggestion = f"区切り行を{expected}列に修正してください（例: {'|---' * expected}|）"
            else:
                message = f"テーブルの列数が一致しません。ヘッダーは{expected}列ですが、この行は{actual}列です。"
                suggestion = f"{expected}列に修正してください"
            yield rule.diagnostic(offset, offset + len(line), message, [suggestion], expected=expected, actual=actual)


def check_code_block_language(rule: Rule, tokens: Sequence[Token], context: RuleContext) -> Iterable[Diagnostic]:
    fence = ""
    for offset, line in iter_lines(context.document_text):
        if fence:
            if _fence_closes(line, fence):
                fence = ""
            continue
        m = data.FENCE_RE.match(line)
        if not m:
            continue
        fence = m.group(1)[0]
        if not m.group(2).strip():
            yield rule.diagnostic(
                offset,
                offset + len(line),
                "コードブロックに言語指定がありません。シンタックスハイライトのために言語を指定してください。",
                [
                    "```javascript、```python、```bash などの言語指定を追加してください",
                    "プレーンテキストの場合は ```text を使用できます",
                ],
            )


def _followed_by_list(text: str, end: int) -> bool:
    rest = text[end:]
    return any(p.match(rest) for p in data.LIST_AFTER_COLON_RES)


def check_sentence_ending_colon(rule: Rule, tokens: Sequence[Token], context: RuleContext) -> Iterable[Diagnostic]:
    text = context.document_text
    for sentence in context.sentences:
        body = sentence.text.rstrip()
        if not body.endswith("："):
            continue
        if _followed_by_list(text, sentence.end):
            continue
        colon = sentence.start + len(body) - 1
        yield rule.diagnostic(
            colon,
            colon + 1,
            "文末にコロン（：）が使用されています。句点（。）に変更するか、文を続けてください。",
            ["コロンを句点（。）に変更する", "文を続けて完結させる", "箇条書きを追加する"],
        )


__all__ = [
    "iter_lines",
    "check_heading_level_skip",
    "count_columns",
    "find_tables",
    "check_table_column_mismatch",
    "check_code_block_language",
    "check_sentence_ending_colon",
]
