"""Settings Assembly Tests."""

from datetime import timedelta
from pathlib import Path

import pytest
from pydantic import SecretStr, ValidationError
from structlog.testing import capture_logs

from pursuit_config import (
    AppSettings,
    BuildMode,
    Failure,
    MissingRequiredError,
    ParseFailureError,
    SettingsAssembler,
    Success,
    assemble,
    load_settings,
)
from pursuit_config.assembler import DERIVED_FLAGS
from pursuit_config.schema import CONFIG_SCHEMA, FieldKind, GITHUB_TOKEN_ADVISORY, field_by_attr
from pursuit_config.types import HostPreference, SemanticVersion, ZERO_VERSION


def advisories(logs):
    return [entry for entry in logs if entry["event"] == "config.credential_absent"]


class TestDefaults:

    def test_defaults_when_absent(self, base_env):
        """Test every optional field falls back to its documented default."""
        settings = load_settings(base_env)

        assert settings.static_dir == "./static"
        assert settings.app_root == "http://localhost:3000"
        assert settings.host == HostPreference("*4")
        assert settings.port == 3000
        assert settings.ip_from_header is False
        assert settings.analytics is None
        assert settings.data_dir == "./data"
        assert settings.github_auth_token is None
        assert settings.max_hoogle_parse_errors == 250
        assert settings.hoogle_database_max_age == timedelta(hours=1)
        assert settings.minimum_compiler_version == ZERO_VERSION

    def test_schema_defaults_match_record(self, base_env):
        settings = load_settings(base_env)
        for field in CONFIG_SCHEMA:
            if field.kind is FieldKind.OPTIONAL_WITH_DEFAULT:
                assert getattr(settings, field.attr) == field.default


class TestPresentValues:

    def test_present_values_override_defaults(self, full_env):
        settings = load_settings(full_env)

        assert settings.static_dir == "/srv/pursuit/static"
        assert settings.app_root == "https://pursuit.purescript.org"
        assert settings.host == HostPreference("127.0.0.1")
        assert settings.port == 8080
        assert settings.ip_from_header is True
        assert settings.analytics == "UA-12345-1"
        assert settings.data_dir == "/srv/pursuit/data"
        assert settings.github_auth_token == SecretStr("ghp_mock_token_12345")
        assert settings.github_client_id == "client-id"
        assert settings.github_client_secret.get_secret_value() == "client-secret"
        assert settings.max_hoogle_parse_errors == 10
        assert settings.hoogle_database_max_age == timedelta(minutes=10)
        assert settings.minimum_compiler_version == SemanticVersion((0, 12, 0))

    def test_quoted_and_unquoted_strings_agree(self, base_env):
        unquoted = load_settings({**base_env, "PURSUIT_APPROOT": "http://localhost:3000"})
        quoted = load_settings({**base_env, "PURSUIT_APPROOT": '"http://localhost:3000"'})
        assert unquoted.app_root == quoted.app_root == "http://localhost:3000"

    def test_minimum_compiler_version(self, base_env):
        settings = load_settings({**base_env, "PURSUIT_MINIMUM_COMPILER_VERSION": "2.3.1"})
        assert settings.minimum_compiler_version.branch == (2, 3, 1)
        assert settings.minimum_compiler_version.tags == ()

    def test_unprefixed_variables_ignored(self, base_env):
        settings = load_settings({**base_env, "PORT": "9999", "HOST": "10.0.0.1"})
        assert settings.port == 3000
        assert settings.host == HostPreference("*4")


class TestFailures:

    @pytest.mark.parametrize("variable", ["PURSUIT_GITHUB_CLIENT_ID", "PURSUIT_GITHUB_CLIENT_SECRET"])
    def test_missing_required(self, base_env, variable):
        del base_env[variable]
        result = assemble(base_env)

        assert isinstance(result, Failure)
        assert isinstance(result.error, MissingRequiredError)
        assert result.error.variable == variable

    def test_first_error_wins(self):
        """Test schema order decides which error surfaces."""
        result = assemble({})
        assert isinstance(result, Failure)
        assert result.error.variable == "PURSUIT_GITHUB_CLIENT_ID"

    @pytest.mark.parametrize("variable,raw", [
        ("PURSUIT_PORT", "abc"),
        ("PURSUIT_PORT", '"3000"'),
        ("PURSUIT_PORT", "3000.0"),
        ("PURSUIT_PORT", "3_000"),
        ("PURSUIT_MAX_HOOGLE_PARSE_ERRORS", "250.0"),
        ("PURSUIT_HOOGLE_DATABASE_MAX_AGE_SECONDS", "250.0"),
        ("PURSUIT_IP_FROM_HEADER", "sometimes"),
        ("PURSUIT_MAX_HOOGLE_PARSE_ERRORS", "1.5"),
        ("PURSUIT_HOOGLE_DATABASE_MAX_AGE_SECONDS", "1h"),
        ("PURSUIT_MINIMUM_COMPILER_VERSION", "2..1"),
        ("PURSUIT_APPROOT", 'http://"localhost'),
        ("PURSUIT_GOOGLE_ANALYTICS_CODE", 'UA-"1'),
    ])
    def test_malformed_value_is_fatal_even_with_default(self, base_env, variable, raw):
        result = assemble({**base_env, variable: raw})

        assert isinstance(result, Failure)
        assert isinstance(result.error, ParseFailureError)
        assert result.error.variable == variable
        assert result.error.raw == raw
        assert variable in str(result.error)
        assert raw in str(result.error)

    def test_load_settings_raises(self, base_env):
        del base_env["PURSUIT_GITHUB_CLIENT_SECRET"]
        with pytest.raises(MissingRequiredError):
            load_settings(base_env)


class TestCredentialAdvisory:

    def test_absent_token_emits_one_advisory(self, base_env):
        with capture_logs() as logs:
            result = assemble(base_env)

        assert isinstance(result, Success)
        assert result.settings.github_auth_token is None

        emitted = advisories(logs)
        assert len(emitted) == 1
        assert emitted[0]["log_level"] == "warning"
        assert emitted[0]["variable"] == "PURSUIT_GITHUB_AUTH_TOKEN"
        assert emitted[0]["message"] == GITHUB_TOKEN_ADVISORY

    def test_present_token_emits_nothing(self, full_env):
        with capture_logs() as logs:
            assemble(full_env)
        assert advisories(logs) == []

    def test_advisory_once_per_assembly(self, base_env):
        assembler = SettingsAssembler(base_env)
        field = field_by_attr("github_auth_token")

        with capture_logs() as logs:
            assembler.assemble()
            assembler.resolve_optional_no_default(field)
        assert len(advisories(logs)) == 1

    def test_token_never_logged(self, full_env):
        with capture_logs() as logs:
            assemble(full_env)
        assert "ghp_mock_token_12345" not in repr(logs)


class TestBuildMode:

    def test_production_flags_off(self, base_env):
        settings = load_settings(base_env, BuildMode.PRODUCTION)
        assert all(getattr(settings, flag) is False for flag in DERIVED_FLAGS)

    def test_development_flags_on(self, base_env):
        settings = load_settings(base_env, BuildMode.DEVELOPMENT)
        assert all(getattr(settings, flag) is True for flag in DERIVED_FLAGS)

    def test_flags_not_read_from_environment(self, base_env):
        env = {**base_env, "PURSUIT_SHOULD_LOG_ALL": "true", "PURSUIT_RELOAD_TEMPLATES": "true"}
        settings = load_settings(env, BuildMode.PRODUCTION)
        assert settings.should_log_all is False
        assert settings.reload_templates is False


class TestRecord:

    def test_assembly_is_deterministic(self, full_env):
        first = assemble(full_env)
        second = assemble(full_env)
        assert first == second
        assert first.settings == second.settings

    def test_record_is_immutable(self, base_env):
        settings = load_settings(base_env)
        with pytest.raises(ValidationError):
            settings.port = 1

    def test_secrets_hidden_in_repr(self, full_env):
        settings = load_settings(full_env)
        assert "client-secret" not in repr(settings)
        assert "ghp_mock_token_12345" not in repr(settings)

    def test_every_schema_field_documented_on_record(self):
        for field in CONFIG_SCHEMA:
            assert AppSettings.model_fields[field.attr].description

    def test_every_schema_field_in_record(self, base_env):
        settings = load_settings(base_env)
        record_fields = set(type(settings).model_fields)
        assert {field.attr for field in CONFIG_SCHEMA} | set(DERIVED_FLAGS) == record_fields


def test_default_environment_is_process_environment(monkeypatch, base_env):
    """Test assemble() reads os.environ when no mapping is given."""
    for key, value in base_env.items():
        monkeypatch.setenv(key, value)
    monkeypatch.setenv("PURSUIT_PORT", "4000")

    settings = load_settings()
    assert settings.port == 4000


def test_env_example_documents_every_variable():
    """Test .env.example lists every environment-sourced setting."""
    env_example = (Path(__file__).parent.parent / ".env.example").read_text()
    for field in CONFIG_SCHEMA:
        assert f"PURSUIT_{field.name}" in env_example
