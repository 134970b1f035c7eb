from jastylelint.checker import check_file, check_paths, check_text
from jastylelint.file_scanner import decode_text, is_probably_text


def test_check_text_default_manager():
    found = check_text("確認して下さい。")
    assert any(d.code.value == "kanji-opening" for d in found)


def test_check_paths_walks_directories(tmp_path):
    (tmp_path / "a.txt").write_text("確認して下さい。", encoding="utf-8")
    (tmp_path / "b.txt").write_text("問題ありません。", encoding="cp932")
    hidden = tmp_path / ".git"
    hidden.mkdir()
    (hidden / "c.txt").write_text("確認して下さい。", encoding="utf-8")
    (tmp_path / "blob.bin").write_bytes(bytes(range(0, 8)) * 20)

    reports = check_paths([str(tmp_path)])
    names = [r.path.split("/")[-1].split("\\")[-1] for r in reports]
    assert names == ["a.txt", "b.txt"]
    assert reports[1].text == "問題ありません。"


def test_check_paths_parallel_matches_serial(tmp_path):
    for i in range(4):
        (tmp_path / f"{i}.md").write_text(f"確認して下さい。項目{i}", encoding="utf-8")
    serial = check_paths([str(tmp_path)])
    parallel = check_paths([str(tmp_path)], jobs=3)
    assert [r.to_dict() for r in serial] == [r.to_dict() for r in parallel]


def test_binary_file_is_skipped(tmp_path):
    p = tmp_path / "x.bin"
    p.write_bytes(b"\x00\x01\x02\x03" * 10)
    assert check_file(p) is None


def test_report_filter_and_dict(tmp_path):
    p = tmp_path / "a.txt"
    p.write_text("確認して下さい。", encoding="utf-8")
    report = check_file(p)
    assert report.diagnostics
    assert report.filter("ERROR").diagnostics == []
    data = report.to_dict()
    assert data["file"] == str(p)
    assert "range" in data["diagnostics"][0]


def test_text_detection_helpers():
    assert is_probably_text(b"")
    assert not is_probably_text(b"\x00\x01\x02")
    assert decode_text("日本語".encode("utf-16")) == "日本語"
