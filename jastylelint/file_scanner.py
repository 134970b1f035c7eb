"""検査対象ファイルの走査ユーティリティ。

- ディレクトリは再帰的にたどり、隠しディレクトリ（.git など）は除外
- バイナリらしいものは除外(ヒューリスティック)
- 文字コードは候補を順に試す（UTF-16 はBOMつきのみ）
"""
from __future__ import annotations

import codecs
import logging
import os
from pathlib import Path
from typing import Iterable, Iterator, Optional

LOGGER = logging.getLogger(__name__)

BINARY_BYTES = set(range(0, 9)) | {11, 12} | set(range(14, 32))
ENCODING_CANDIDATES = ("utf-8-sig", "cp932", "shift_jis")


def is_probably_text(data: bytes, threshold: float = 0.30) -> bool:
    if not data:
        return True
    non_text = sum(b in BINARY_BYTES for b in data)
    return non_text / len(data) < threshold


def decode_text(raw: bytes, encoding_candidates: Iterable[str] = ENCODING_CANDIDATES) -> Optional[str]:
    # BOMなしのUTF-16はcp932のバイト列とも区別できないので、BOMがある場合だけ扱う
    if raw.startswith((codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)):
        return raw.decode("utf-16")
    for enc in encoding_candidates:
        try:
            return raw.decode(enc).lstrip("﻿")
        except UnicodeDecodeError:
            continue
    return None


def read_text(path: Path, encoding_candidates: Iterable[str] = ENCODING_CANDIDATES) -> Optional[str]:
    """テキストとして読めない場合は None。"""
    try:
        raw = path.read_bytes()
    except OSError as exc:
        LOGGER.warning("cannot read %s: %s", path, exc)
        return None
    if not is_probably_text(raw):
        LOGGER.debug("skip binary file %s", path)
        return None
    return decode_text(raw, encoding_candidates)


def iter_files(paths: Iterable[str | os.PathLike[str]]) -> Iterator[Path]:
    for p in paths:
        path = Path(p)
        if path.is_file():
            yield path
        elif path.is_dir():
            for root, dirs, files in os.walk(path):
                dirs[:] = sorted(d for d in dirs if not d.startswith("."))
                for f in sorted(files):
                    yield Path(root) / f
        else:
            LOGGER.warning("no such file or directory: %s", path)


__all__ = ["iter_files", "read_text", "decode_text", "is_probably_text", "ENCODING_CANDIDATES"]
