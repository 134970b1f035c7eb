import json

import pytest

from jastylelint.external_rules import load_notation_rules
from jastylelint.manager import RulesManager


def test_yaml_mapping(tmp_path):
    p = tmp_path / "rules.yaml"
    p.write_text("Pytorch: PyTorch\nサーバ側: サーバー側\n", encoding="utf-8")
    assert load_notation_rules(p) == {"Pytorch": "PyTorch", "サーバ側": "サーバー側"}


def test_yaml_list(tmp_path):
    p = tmp_path / "rules.yml"
    p.write_text('- pattern: "Github"\n  suggestion: "GitHub"\n', encoding="utf-8")
    assert load_notation_rules(p) == {"Github": "GitHub"}


def test_json_utf16(tmp_path):
    p = tmp_path / "rules.json"
    p.write_bytes(json.dumps([{"pattern": "ウィンドウズ", "suggestion": "Windows"}], ensure_ascii=False).encode("utf-16"))
    assert load_notation_rules(p) == {"ウィンドウズ": "Windows"}


def test_json_with_bom(tmp_path):
    p = tmp_path / "rules.json"
    p.write_text(json.dumps({"Pytorch": "PyTorch"}), encoding="utf-8-sig")
    assert load_notation_rules(p) == {"Pytorch": "PyTorch"}


def test_empty_yaml(tmp_path):
    p = tmp_path / "empty.yaml"
    p.write_text("", encoding="utf-8")
    assert load_notation_rules(p) == {}


def test_invalid_entries(tmp_path):
    p = tmp_path / "bad.yaml"
    p.write_text("Pytorch: 1\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_notation_rules(p)
    q = tmp_path / "bad.json"
    q.write_text('["Pytorch"]', encoding="utf-8")
    with pytest.raises(ValueError):
        load_notation_rules(q)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_notation_rules(tmp_path / "nope.yaml")


def test_loaded_rules_feed_term_notation(tmp_path):
    p = tmp_path / "rules.yaml"
    p.write_text("Pytorch: PyTorch\n", encoding="utf-8")
    manager = RulesManager({"custom_notation_rules": load_notation_rules(p)})
    text = "Pytorchで学習する"
    [d] = manager.check_with_rules(text, [], ["term-notation"])
    assert d.snippet(text) == "Pytorch"
    assert "PyTorch" in d.suggestions[0]
