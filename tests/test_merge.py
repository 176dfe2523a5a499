from commitweave.config.defaults import default_config, default_document
from commitweave.config.merge import merge_configs
from commitweave.config.redact import REDACTED
from commitweave.config.store import ConfigStore


def test_merge_preserves_untouched_nested_fields():
    merged = merge_configs({"ai": {"apiKey": "x", "model": "m1"}}, {"ai": {"model": "m2"}})

    assert merged["ai"] == {"apiKey": "x", "model": "m2"}


def test_merge_replaces_arrays_wholesale(document):
    override = {"commitTypes": [{"type": "feat", "emoji": "✨", "description": "Feature"}]}

    merged = merge_configs(document, override)

    assert merged["commitTypes"] == override["commitTypes"]


def test_merge_does_not_modify_inputs(document):
    original = default_document()
    override = {"claude": {"enabled": True}, "ui": {"colors": False}}

    merged = merge_configs(document, override)
    merged["claude"]["model"] = "changed"

    assert document == original
    assert override == {"claude": {"enabled": True}, "ui": {"colors": False}}


def test_merge_nested_section_missing_from_base():
    merged = merge_configs({"version": "1.0"}, {"hooks": {"preCommit": ["lint"]}})
    assert merged["hooks"] == {"preCommit": ["lint"]}


def test_merge_skips_top_level_none():
    merged = merge_configs({"maxBodyLength": 72, "ai": {"model": "m"}}, {"maxBodyLength": None, "ai": None})
    assert merged == {"maxBodyLength": 72, "ai": {"model": "m"}}


def test_merge_nested_none_clears_field():
    merged = merge_configs({"ai": {"apiKey": "x", "model": "m1"}}, {"ai": {"apiKey": None}})
    assert merged["ai"] == {"apiKey": None, "model": "m1"}


def test_merge_ignores_redacted_placeholder():
    base = {"ai": {"apiKey": "sk-live", "model": "m1"}, "token": "t-live"}
    override = {"ai": {"apiKey": REDACTED, "model": "m2"}, "token": REDACTED}

    merged = merge_configs(base, override)

    assert merged == {"ai": {"apiKey": "sk-live", "model": "m2"}, "token": "t-live"}


def test_merge_keeps_placeholder_under_plain_keys():
    merged = merge_configs({"ai": {"model": "m1"}}, {"ai": {"model": REDACTED}})
    assert merged["ai"]["model"] == REDACTED


def test_merge_accepts_models():
    merged = merge_configs(default_config(), {"emojiEnabled": False})

    assert merged["emojiEnabled"] is False
    assert merged["commitTypes"] == default_document()["commitTypes"]


def test_store_exposes_merge():
    assert ConfigStore.merge_configs({"a": 1}, {"b": 2}) == {"a": 1, "b": 2}
