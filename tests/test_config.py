import json
import logging
import threading

import pytest

from jastylelint.config import (
    ConfigError,
    ConfigurationStore,
    RulesConfig,
    load_config_file,
    normalize_key,
)


def test_defaults():
    config = RulesConfig()
    assert config.enable_particle_repetition is False
    assert config.enable_double_negation is True
    assert config.weak_expression_level == "normal"
    assert config.comma_count_threshold == 4
    assert config.long_sentence_threshold == 120
    assert config.custom_notation_rules == {}


def test_invalid_values_raise():
    with pytest.raises(ConfigError):
        RulesConfig(comma_count_threshold=0)
    with pytest.raises(ConfigError):
        RulesConfig(long_sentence_threshold=True)
    with pytest.raises(ConfigError):
        RulesConfig(weak_expression_level="extreme")
    with pytest.raises(ConfigError):
        RulesConfig(enable_homophone="yes")
    with pytest.raises(ConfigError):
        RulesConfig().replace(no_such_key=True)


def test_config_error_is_value_error():
    assert issubclass(ConfigError, ValueError)


def test_camel_case_keys():
    assert normalize_key("enableAWSDictionary") == "enable_aws_dictionary"
    assert normalize_key("longSentenceThreshold") == "long_sentence_threshold"
    config = RulesConfig.from_mapping({"enableAWSDictionary": False, "commaCountThreshold": 6})
    assert config.enable_aws_dictionary is False
    assert config.comma_count_threshold == 6


def test_custom_rules_are_copied():
    rules = {"foo": "Foo"}
    config = RulesConfig(custom_notation_rules=rules)
    rules["bar"] = "Bar"
    assert config.custom_notation_rules == {"foo": "Foo"}


def test_store_round_trip():
    store = ConfigurationStore()
    updated = store.update_configuration({"longSentenceThreshold": 80}, enable_tautology=False)
    assert store.get_configuration() is updated
    assert store.get_value("long_sentence_threshold") == 80
    assert store.get_value("enableTautology") is False
    again = store.update_configuration(updated.to_dict())
    assert again == updated


def test_store_rejects_bad_update_without_changing_state():
    store = ConfigurationStore()
    before = store.get_configuration()
    with pytest.raises(ConfigError):
        store.update_configuration(comma_count_threshold=-1)
    with pytest.raises(ConfigError):
        store.update_configuration(unknown_flag=True)
    assert store.get_configuration() is before
    with pytest.raises(ConfigError):
        store.get_value("unknown_flag")


def test_listener_notified_and_disposed():
    store = ConfigurationStore()
    events = []
    handle = store.on_did_change_configuration(events.append)
    store.update_configuration(enable_homophone=False)
    assert len(events) == 1
    assert events[0].affects("enableHomophone")
    assert not events[0].affects("enable_tautology")
    assert events[0].configuration.enable_homophone is False
    handle.dispose()
    handle.dispose()
    store.update_configuration(enable_homophone=True)
    assert len(events) == 1


def test_listener_failure_is_logged(caplog):
    store = ConfigurationStore()
    seen = []

    def broken(event):
        raise RuntimeError("boom")

    store.on_did_change_configuration(broken)
    store.on_did_change_configuration(seen.append)
    with caplog.at_level(logging.ERROR, logger="jastylelint.config"):
        store.update_configuration(enable_sahen_verb=False)
    assert len(seen) == 1
    assert store.get_value("enable_sahen_verb") is False
    assert any("listener" in r.getMessage() for r in caplog.records)


def test_listeners_registered_from_threads():
    store = ConfigurationStore()
    seen = []
    handles = []

    def register():
        for _ in range(50):
            handles.append(store.on_did_change_configuration(seen.append))

    workers = [threading.Thread(target=register) for _ in range(4)]
    for w in workers:
        w.start()
    for w in workers:
        w.join()
    store.update_configuration(enable_tautology=False)
    assert len(seen) == 200
    for handle in handles:
        handle.dispose()
    store.update_configuration(enable_tautology=True)
    assert len(seen) == 200


def test_listener_can_dispose_itself_during_notification():
    store = ConfigurationStore()
    calls = []
    handle = None

    def once(event):
        calls.append(event)
        handle.dispose()
        store.get_value("enable_tautology")

    handle = store.on_did_change_configuration(once)
    store.update_configuration(enable_tautology=False)
    store.update_configuration(enable_tautology=True)
    assert len(calls) == 1


def test_reset_notifies_every_key():
    store = ConfigurationStore()
    store.update_configuration(enable_noun_chain=False)
    events = []
    store.on_did_change_configuration(events.append)
    config = store.reset()
    assert config == RulesConfig()
    assert set(events[0].affected_keys) == set(RulesConfig.keys())


def test_load_yaml_and_json(tmp_path):
    y = tmp_path / "cfg.yaml"
    y.write_text("enableTermNotation: false\nlong_sentence_threshold: 90\n", encoding="utf-8")
    assert load_config_file(y) == {"enable_term_notation": False, "long_sentence_threshold": 90}

    j = tmp_path / "cfg.json"
    j.write_text(json.dumps({"weakExpressionLevel": "strict"}), encoding="utf-8")
    assert load_config_file(j) == {"weak_expression_level": "strict"}

    bad = tmp_path / "bad.yaml"
    bad.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config_file(bad)

    with pytest.raises(FileNotFoundError):
        load_config_file(tmp_path / "missing.yaml")


def test_load_toml_section(tmp_path):
    pytest.importorskip("tomllib")
    t = tmp_path / "pyproject.toml"
    t.write_text("[tool.jastylelint]\nenableHomophone = false\nnoun_chain_threshold = 7\n", encoding="utf-8")
    data = load_config_file(t)
    assert data == {"enable_homophone": False, "noun_chain_threshold": 7}
    assert RulesConfig.from_mapping(data).noun_chain_threshold == 7
