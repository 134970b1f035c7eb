"""形態素解析(オプション)サポート。

優先度:
- fugashi(MeCab) + unidic系 があればそれを利用
- なければ Janome にフォールバック
- どちらも無ければ tokenize() は空リストを返す（トークン依存のルールは何もしない）
"""
from __future__ import annotations

import logging
from typing import List, Optional

from .models import Token

LOGGER = logging.getLogger(__name__)

_tokenizer = None
_backend: Optional[str] = None  # "fugashi" | "janome" | None
_probed = False


def is_available() -> bool:
    global _tokenizer, _backend, _probed
    if _tokenizer is not None:
        return True
    if _probed:
        return False
    _probed = True
    try:
        from fugashi import Tagger  # type: ignore

        _tokenizer = Tagger()
        _backend = "fugashi"
        return True
    except ImportError:
        LOGGER.debug("fugashi is not installed")
    except RuntimeError:
        # fugashi はあるが辞書(unidic)が見つからない
        LOGGER.debug("fugashi dictionary is not available", exc_info=True)
    try:
        from janome.tokenizer import Tokenizer  # type: ignore

        _tokenizer = Tokenizer()
        _backend = "janome"
        return True
    except ImportError:
        LOGGER.debug("janome is not installed")
        return False


def backend() -> Optional[str]:
    is_available()
    return _backend


def _feature(word, name: str) -> str:
    value = getattr(word.feature, name, None)
    return value if isinstance(value, str) and value != "*" else ""


def _janome_field(value: str) -> str:
    return "" if value in ("", "*") else value


def tokenize(text: str) -> List[Token]:
    """形態素ごとの Token を返す。オフセットは元テキスト上の位置。"""
    if not text or not is_available():
        return []
    tokens: List[Token] = []
    idx = 0
    if _backend == "fugashi":
        for w in _tokenizer(text):
            surf = w.surface
            if not surf:
                continue
            pos = text.find(surf, idx)
            if pos < 0:
                pos = idx
            end = pos + len(surf)
            tokens.append(Token(
                surface=surf,
                pos=_feature(w, "pos1"),
                start=pos,
                end=end,
                base_form=_feature(w, "lemma") or surf,
                reading=_feature(w, "kana"),
                conjugation=_feature(w, "cType"),
                pos_detail=_feature(w, "pos2"),
            ))
            idx = end
    else:
        for tok in _tokenizer.tokenize(text):
            surf = tok.surface
            if not surf:
                continue
            pos = text.find(surf, idx)
            if pos < 0:
                pos = idx
            end = pos + len(surf)
            parts = tok.part_of_speech.split(",")
            tokens.append(Token(
                surface=surf,
                pos=parts[0],
                start=pos,
                end=end,
                base_form=_janome_field(tok.base_form) or surf,
                reading=_janome_field(tok.reading),
                conjugation=_janome_field(tok.infl_type),
                pos_detail=_janome_field(parts[1]) if len(parts) > 1 else "",
            ))
            idx = end
    return tokens


__all__ = ["is_available", "backend", "tokenize"]
