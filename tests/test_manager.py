import logging

from jastylelint.config import RulesConfig
from jastylelint.manager import RulesManager
from jastylelint.models import RuleCode
from jastylelint.registry import build_rules
from jastylelint.rules import FunctionRule

SAMPLE = (
    "これはペンです。あれは本である。\n"
    "確認して下さい。2025年に２５件の報告書が作成された。\n"
    "・項目A\n- 項目B\n"
)


def test_every_code_has_a_rule():
    rules = build_rules()
    assert {r.code for r in rules} == set(RuleCode)
    assert len({r.name for r in rules}) == len(rules)


def test_particle_repetition_disabled_by_default():
    manager = RulesManager()
    enabled = {r.name for r in manager.get_enabled_rules()}
    assert "particle-repetition" not in enabled
    assert "double-negation" in enabled
    assert len(manager.get_rules()) == len(build_rules())


def test_check_text_is_idempotent():
    manager = RulesManager()
    first = manager.check_text(SAMPLE)
    second = manager.check_text(SAMPLE)
    assert first == second
    codes = {d.code for d in first}
    assert RuleCode.STYLE_INCONSISTENCY in codes
    assert RuleCode.KANJI_OPENING in codes
    assert RuleCode.BULLET_STYLE_MIX in codes


def test_empty_text():
    assert RulesManager().check_text("") == []


def test_diagnostics_follow_registration_order():
    manager = RulesManager()
    order = {r.code: i for i, r in enumerate(manager.get_rules())}
    positions = [order[d.code] for d in manager.check_text(SAMPLE)]
    assert positions == sorted(positions)


def test_disable_rule_by_config():
    manager = RulesManager()
    assert manager.check_with_rules("できないわけではない", [], ["double-negation"])
    manager.update_config(enable_double_negation=False)
    assert manager.check_with_rules("できないわけではない", [], ["double-negation"]) == []
    manager.reset()
    assert manager.get_config() == RulesConfig()


def test_constructor_accepts_mapping_and_config():
    assert RulesManager({"commaCountThreshold": 9}).get_config().comma_count_threshold == 9
    config = RulesConfig(long_sentence_threshold=50)
    assert RulesManager(config).get_config() is config


def test_failing_rule_is_isolated(caplog):
    def broken(rule, tokens, context):
        raise RuntimeError("boom")

    rules = [FunctionRule("broken", RuleCode.TAUTOLOGY, "enable_tautology", broken)]
    rules += [r for r in build_rules() if r.name == "double-negation"]
    manager = RulesManager(rules=rules)
    with caplog.at_level(logging.WARNING, logger="jastylelint.manager"):
        found = manager.check_text("できないわけではない")
    assert [d.code for d in found] == [RuleCode.DOUBLE_NEGATION]
    assert any("broken" in r.getMessage() for r in caplog.records)


def test_config_snapshot_is_stable_during_run():
    holder = {}

    def mutate(rule, tokens, context):
        holder["manager"].update_config(enable_double_negation=False)
        return []

    rules = [FunctionRule("mutate", RuleCode.TAUTOLOGY, "enable_tautology", mutate)]
    rules += [r for r in build_rules() if r.name == "double-negation"]
    manager = RulesManager(rules=rules)
    holder["manager"] = manager
    assert len(manager.check_text("できないわけではない")) == 1
    assert manager.check_text("できないわけではない") == []
