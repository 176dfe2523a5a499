import pytest

from commitweave.builder import CommitBuilder, create_commit_message
from commitweave.config.defaults import default_config
from commitweave.exceptions import BuilderStateError


@pytest.fixture
def config():
    return default_config()


def test_build_conventional_header_with_emoji(config):
    message = CommitBuilder(config).set_type("feat").set_scope("core").set_subject("add auth handler").build()

    assert message == "feat(core): ✨ add auth handler"


def test_build_with_breaking_body_and_footer(config):
    message = (
        CommitBuilder(config)
        .set_type("fix")
        .set_subject("drop legacy flag")
        .set_breaking_change(True)
        .set_body("The --legacy flag is gone.")
        .set_footer("Closes #12")
        .build()
    )

    assert message == "fix!: 🐛 drop legacy flag\n\nThe --legacy flag is gone.\n\nCloses #12"


def test_build_without_emoji(config):
    config = config.model_copy(update={"emoji_enabled": False})

    message = CommitBuilder(config).set_type("docs").set_subject("update readme").build()

    assert message == "docs: update readme"


def test_build_non_conventional(config):
    config = config.model_copy(update={"conventional_commits": False})

    message = CommitBuilder(config).set_type("feat").set_scope("ui").set_subject("add dark mode").build()

    assert message == "✨ add dark mode"


def test_explicit_emoji_overrides_type_emoji(config):
    message = CommitBuilder(config).set_type("feat").set_subject("ship it").set_emoji("🎉").build()
    assert message == "feat: 🎉 ship it"


def test_subject_overflow_raises_at_set_time(config):
    builder = CommitBuilder(config).set_type("feat")

    with pytest.raises(BuilderStateError, match=r"Subject length \(51\) exceeds maximum allowed \(50\)"):
        builder.set_subject("x" * 51)


def test_subject_at_limit_is_accepted(config):
    CommitBuilder(config).set_type("feat").set_subject("x" * 50).build()


def test_build_requires_type_and_subject(config):
    with pytest.raises(BuilderStateError, match="Type and subject are required"):
        CommitBuilder(config).set_subject("orphan").build()

    with pytest.raises(BuilderStateError):
        CommitBuilder(config).set_type("feat").build()


def test_reset_clears_fields(config):
    builder = CommitBuilder(config).set_type("feat").set_subject("one")
    builder.reset()

    with pytest.raises(BuilderStateError):
        builder.build()


def test_validate_collects_errors(config):
    result = CommitBuilder(config).set_type("feature").validate()

    assert not result.valid
    assert result.errors == ["Commit subject is required", "Unknown commit type: feature"]


def test_validate_passes(config):
    assert CommitBuilder(config).set_type("feat").set_subject("ok").validate().valid


def test_unknown_type_renders_without_emoji(config):
    assert CommitBuilder(config).set_type("wip").set_subject("draft").build() == "wip: draft"


def test_create_commit_message_uses_defaults():
    message = create_commit_message("perf", "cache lookups", scope="db", body="Faster.")
    assert message == "perf(db): 🚀 cache lookups\n\nFaster."
