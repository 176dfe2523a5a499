import json

from commitweave.config.defaults import default_config, default_document
from commitweave.config.diff import DiffItem, format_diff_item
from commitweave.config.redact import (
    MINIMAL_FIELDS,
    REDACTED,
    create_minimal_config,
    is_secret_key,
    redact_diff,
    strip_secrets,
)


def test_strip_secrets_masks_secret_keys():
    stripped = strip_secrets({"apiKey": "sk-123", "model": "gpt-4"})

    assert stripped == {"apiKey": REDACTED, "model": "gpt-4"}
    assert "sk-123" not in json.dumps(stripped)


def test_strip_secrets_recurses_into_nested_sections():
    doc = default_document()
    doc["ai"] = {"provider": "openai", "apiKey": "sk-live", "model": "gpt-4"}
    doc["claude"]["apiKey"] = "claude-live"
    doc["integrations"] = {"github": {"accessToken": "ghp_1", "Password": "hunter2"}}

    stripped = strip_secrets(doc)
    serialized = json.dumps(stripped)

    for value in ("sk-live", "claude-live", "ghp_1", "hunter2"):
        assert value not in serialized
    assert stripped["ai"]["model"] == "gpt-4"
    assert stripped["integrations"]["github"]["Password"] == REDACTED


def test_strip_secrets_leaves_empty_and_null_values():
    stripped = strip_secrets({"apiKey": "", "token": None, "claude": {"apiKey": ""}})

    assert stripped == {"apiKey": "", "token": None, "claude": {"apiKey": ""}}


def test_strip_secrets_is_idempotent():
    doc = default_document()
    doc["ai"] = {"apiKey": "sk-123", "model": "m"}
    doc["claude"]["apiKey"] = "abc"

    once = strip_secrets(doc)

    assert strip_secrets(once) == once


def test_strip_secrets_does_not_modify_input():
    doc = {"ai": {"apiKey": "sk-123"}}
    strip_secrets(doc)
    assert doc["ai"]["apiKey"] == "sk-123"


def test_strip_secrets_does_not_scan_lists():
    stripped = strip_secrets({"hooks": {"preCommit": ["export API_KEY=abc"]}, "items": [{"apiKey": "x"}]})
    assert stripped["items"] == [{"apiKey": "x"}]


def test_strip_secrets_accepts_model():
    config = default_config().model_copy(
        update={"claude": default_config().claude.model_copy(update={"api_key": "sk-ant"})}
    )
    stripped = strip_secrets(config)
    assert stripped["claude"]["apiKey"] == REDACTED


def test_is_secret_key():
    assert is_secret_key("apiKey")
    assert is_secret_key("GITHUB_TOKEN")
    assert is_secret_key("clientSecret")
    assert is_secret_key("password")
    assert not is_secret_key("model")
    assert not is_secret_key("emojiEnabled")


def test_strip_secrets_only_masks_strings():
    # maxTokens matches "token" but holds a number
    stripped = strip_secrets({"claude": {"maxTokens": 4000, "apiKey": "x"}})
    assert stripped["claude"] == {"maxTokens": 4000, "apiKey": REDACTED}


def test_minimal_config_excludes_everything_else():
    doc = default_document()
    doc["ai"] = {"apiKey": "k"}

    minimal = create_minimal_config(doc)

    assert "ai" not in minimal
    assert "claude" not in minimal
    assert set(minimal) == set(MINIMAL_FIELDS)
    assert minimal["commitTypes"] == doc["commitTypes"]


def test_minimal_config_skips_absent_fields():
    minimal = create_minimal_config({"version": "1.0", "ai": {"apiKey": "k"}})
    assert minimal == {"version": "1.0"}


def test_redact_diff_masks_secret_values():
    diff = [
        DiffItem("claude.apiKey", "sk-old", "sk-new", "modified"),
        DiffItem("ai", None, {"provider": "openai", "apiKey": "sk-x"}, "added"),
        DiffItem("claude.model", "m1", "m2", "modified"),
        DiffItem("ai.apiKey", "", "sk-y", "modified"),
    ]

    redacted = redact_diff(diff)

    assert redacted[0] == DiffItem("claude.apiKey", REDACTED, REDACTED, "modified")
    assert redacted[1].new == {"provider": "openai", "apiKey": REDACTED}
    assert redacted[2] == diff[2]
    assert redacted[3].old == ""
    assert "sk-" not in "".join(format_diff_item(item) for item in redacted)
