import pytest

from commitweave.config.defaults import DEFAULT_COMMIT_TYPES, default_config, default_document
from commitweave.config.schema import Config, as_document, parse_config
from commitweave.exceptions import SchemaValidationError


def test_default_config_is_valid():
    config = default_config()

    assert len(config.commit_types) == len(DEFAULT_COMMIT_TYPES)
    assert config.get_commit_type("feat").emoji == "✨"
    assert config.max_subject_length == 50
    assert config.max_body_length == 72
    assert config.version == "1.0"
    assert config.claude is not None and not config.claude.enabled
    assert config.ui.fancy_ui


def test_parse_fills_optional_defaults():
    config = parse_config({"commitTypes": [{"type": "feat", "emoji": "✨", "description": "Feature"}]})

    assert config.emoji_enabled
    assert config.conventional_commits
    assert not config.ai_summary
    assert config.max_subject_length == 50
    assert config.version == "1.0"
    assert config.ai is None


def test_parse_requires_commit_types():
    with pytest.raises(SchemaValidationError, match="commitTypes") as excinfo:
        parse_config({"emojiEnabled": True})

    assert excinfo.value.errors
    assert "reset" in excinfo.value.suggestion


@pytest.mark.parametrize(
    "field, value",
    [
        ("maxSubjectLength", 0),
        ("maxBodyLength", -5),
        ("emojiEnabled", "sometimes"),
        ("commitTypes", "feat"),
    ],
)
def test_parse_rejects_bad_values(document, field, value):
    document[field] = value
    with pytest.raises(SchemaValidationError):
        parse_config(document)


def test_parse_rejects_unknown_provider(document):
    document["ai"] = {"provider": "cohere"}
    with pytest.raises(SchemaValidationError, match="ai.provider"):
        parse_config(document)


def test_parse_rejects_out_of_range_temperature(document):
    document["ai"] = {"provider": "openai", "temperature": 3}
    with pytest.raises(SchemaValidationError):
        parse_config(document)


def test_to_document_uses_camel_case():
    document = default_document()
    document["ai"] = {"provider": "openai", "apiKey": "sk", "maxTokens": 200}

    output = parse_config(document).to_document()

    assert output["ai"] == {"provider": "openai", "apiKey": "sk", "temperature": 0.7, "maxTokens": 200}
    assert output["ui"]["fancyUI"] is True
    assert "commitTypes" in output and "commit_types" not in output


def test_unknown_fields_are_ignored(document):
    document["legacyOption"] = True
    assert "legacyOption" not in parse_config(document).to_document()


def test_duplicate_types_are_accepted(document):
    document["commitTypes"].append(dict(document["commitTypes"][0]))
    config = parse_config(document)
    assert [ct.type for ct in config.commit_types].count("feat") == 2


def test_as_document_copies_mappings(document):
    copied = as_document(document)
    copied["commitTypes"].clear()
    assert document["commitTypes"]


def test_as_document_rejects_non_mappings():
    with pytest.raises(SchemaValidationError):
        as_document(["not", "an", "object"])


def test_config_model_accepts_field_names():
    config = Config(commit_types=[], max_subject_length=60)
    assert config.max_subject_length == 60
