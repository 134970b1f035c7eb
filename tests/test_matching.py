from jastylelint.matching import (
    UNCLOSED,
    UNOPENED,
    VariantOccurrence,
    dominant_variant,
    find_chains,
    find_runs,
    group_words,
    is_mixed,
    match_brackets,
    minority_occurrences,
    scan_dictionary,
)


def test_longer_match_wins():
    found = scan_dictionary("abcd", {"ab": 1, "abc": 2})
    assert [(m.key, m.index) for m in found] == [("abc", 0)]


def test_equal_length_first_found_wins():
    found = scan_dictionary("abc", {"ab": 1, "bc": 2})
    assert [m.key for m in found] == ["ab"]


def test_non_overlapping_matches_all_reported():
    found = scan_dictionary("ab-ab", {"ab": 1})
    assert [m.index for m in found] == [0, 3]


def test_skip_callback():
    found = scan_dictionary("ab-ab", {"ab": 1}, skip=lambda key, idx, value: idx == 0)
    assert [m.index for m in found] == [3]


def test_empty_inputs():
    assert scan_dictionary("", {"a": 1}) == []
    assert scan_dictionary("abc", {}) == []
    assert match_brackets("") == []
    assert find_chains([], 20, 3) == []
    assert find_runs([], 3) == []
    assert dominant_variant([]) is None


def test_brackets_balanced():
    assert match_brackets("「A」") == []
    assert match_brackets("（「テスト」を実行）") == []


def test_brackets_unclosed_and_unopened():
    [issue] = match_brackets("「A")
    assert (issue.kind, issue.bracket, issue.index, issue.expected) == (UNCLOSED, "「", 0, "」")
    [issue] = match_brackets("A」")
    assert (issue.kind, issue.index, issue.expected) == (UNOPENED, 1, "「")


def test_brackets_crossed_pops_inner():
    issues = match_brackets("（「A）")
    assert [(i.kind, i.bracket) for i in issues] == [(UNCLOSED, "「")]


def test_symmetric_quotes():
    assert match_brackets('"A"') == []
    [issue] = match_brackets('"A')
    assert issue.kind == UNCLOSED


def test_find_chains():
    [chain] = find_chains([2, 5, 8], 20, 3)
    assert (chain.first, chain.last, chain.length) == (2, 8, 3)
    assert find_chains([0, 30, 60], 20, 2) == []


def test_find_runs_breaks_on_none():
    [run] = find_runs(["a", "a", "a", None, "a"], 3)
    assert (run.key, run.first, run.last, run.length) == ("a", 0, 2, 3)
    assert find_runs([None, None, None], 2) == []
    assert find_runs(["a", "b", "a"], 2) == []


def test_dominant_variant_weights_and_ties():
    occ = [VariantOccurrence("full", "ＡＢ", 0), VariantOccurrence("half", "ab", 3)]
    assert dominant_variant(occ) == "full"
    assert dominant_variant(occ, tie_default="half") == "half"
    heavier = occ + [VariantOccurrence("half", "c", 6)]
    dominant, minority = minority_occurrences(heavier, tie_default="full")
    assert dominant == "half"
    assert [o.text for o in minority] == ["ＡＢ"]


def test_single_variant_is_not_flagged():
    occ = [VariantOccurrence("half", "ab", 0), VariantOccurrence("half", "cd", 3)]
    assert minority_occurrences(occ) == (None, [])


def test_group_words():
    groups = group_words([("API", 0), ("api", 5), ("Test", 9)])
    assert set(groups) == {"api", "test"}
    assert is_mixed(groups["api"])
    assert not is_mixed(groups["test"])
    assert groups["api"]["API"].positions == (0,)
