"""YAML / JSON から表記ルール（誤表記 -> 正しい表記）をロードするユーティリティ。
フォーマット例:

YAML (マッピング):
---
Javascript: JavaScript
サーバ: サーバー

YAML (配列):
---
- pattern: "Github"
  suggestion: "GitHub"

JSON: 上記と同じ構造のオブジェクトまたは配列。
読み込んだ辞書は設定の custom_notation_rules にマージして使う。
"""
from __future__ import annotations

import codecs
import json
from pathlib import Path
from typing import Dict

import yaml

ENCODINGS = ("utf-8-sig", "cp932")


def _decode(raw: bytes) -> str:
    # PowerShell の Set-Content は BOMつき UTF-16 で書き出すことがある
    if raw.startswith((codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)):
        return raw.decode("utf-16")
    for enc in ENCODINGS:
        try:
            return raw.decode(enc)
        except UnicodeDecodeError:
            continue
    raise ValueError("ルールファイルを解釈できる文字コードがありません")


def load_notation_rules(path: str | Path) -> Dict[str, str]:
    p = Path(path)
    if not p.is_file():
        raise FileNotFoundError(str(p))
    text = _decode(p.read_bytes()).lstrip("﻿")
    if p.suffix.lower() in {".yaml", ".yml"}:
        data = yaml.safe_load(text)
    else:
        data = json.loads(text)
    if data is None:
        return {}

    rules: Dict[str, str] = {}
    if isinstance(data, dict):
        items = list(data.items())
    elif isinstance(data, list):
        items = []
        for item in data:
            if not isinstance(item, dict):
                raise ValueError(f"配列の要素は pattern/suggestion を持つマッピングです: {item!r}")
            items.append((item.get("pattern"), item.get("suggestion")))
    else:
        raise ValueError("ルールファイルはマッピングか配列である必要があります")

    for incorrect, correct in items:
        if not isinstance(incorrect, str) or not isinstance(correct, str) or not incorrect:
            raise ValueError(f"表記ルールは文字列の組である必要があります: {incorrect!r} -> {correct!r}")
        rules[incorrect] = correct
    return rules


__all__ = ["load_notation_rules", "ENCODINGS"]
