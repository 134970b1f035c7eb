"""句点による文分割。

文末記号（。！？!?）で区切り、連続する文末記号は直前の文に含める。
空白だけの区間は捨て、末尾に文末記号のない残りがあれば最後の文とする。
"""
from __future__ import annotations

from typing import List, Sequence

from .models import Sentence, Token

SENTENCE_TERMINATORS = frozenset("。！？!?")


def split_sentences(text: str, tokens: Sequence[Token] = ()) -> List[Sentence]:
    """トークンは開始位置の昇順を前提とし、カーソルを進めながら各文へ割り当てる。

    文の境界をまたぐトークンはどの文にも含めない。
    """
    sentences: List[Sentence] = []
    if not text or not text.strip():
        return sentences

    cursor = 0
    count = len(tokens)

    def _emit(start: int, end: int) -> None:
        nonlocal cursor
        while cursor < count and tokens[cursor].start < start:
            cursor += 1
        inside: List[Token] = []
        while cursor < count and tokens[cursor].start < end:
            if tokens[cursor].end <= end:
                inside.append(tokens[cursor])
            cursor += 1
        body = text[start:end]
        if not body.strip():
            return
        sentences.append(Sentence.build(body, start, end, tuple(inside)))

    current = 0
    i = 0
    n = len(text)
    while i < n:
        if text[i] in SENTENCE_TERMINATORS:
            while i + 1 < n and text[i + 1] in SENTENCE_TERMINATORS:
                i += 1
            _emit(current, i + 1)
            current = i + 1
        i += 1
    if current < n:
        _emit(current, n)
    return sentences


__all__ = ["split_sentences", "SENTENCE_TERMINATORS"]
