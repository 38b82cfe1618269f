"""Tests for YAML config loading infrastructure."""

from pathlib import Path

import pytest

from by_example.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)
from by_example.config.infrastructure.yaml_loader import YamlConfigLoader
from tests.config.fake_observer import FakeConfigObserver

# __file__ is tests/config/infrastructure/test_yaml_loader.py
FIXTURES = Path(__file__).parent.parent.parent / "fixtures"


def _fixture(name: str) -> Path:
    return FIXTURES / name


class TestValidConfigLoading:
    """A valid YAML config loads correctly with all fields populated."""

    def test_loads_name_and_version(self) -> None:
        cfg = YamlConfigLoader(observer=FakeConfigObserver()).load(
            path=_fixture("valid_config.yaml")
        )

        assert cfg.name == "fixture-suites"
        assert cfg.version == "2"

    def test_loads_suites(self) -> None:
        cfg = YamlConfigLoader(observer=FakeConfigObserver()).load(
            path=_fixture("valid_config.yaml")
        )

        assert [s.target for s in cfg.suites] == ["tests.fixtures.passing_suite"]

    def test_loads_report_settings(self) -> None:
        cfg = YamlConfigLoader(observer=FakeConfigObserver()).load(
            path=_fixture("valid_config.yaml")
        )

        assert cfg.report.show_passing is True
        assert cfg.report.max_repr_length == 40

    def test_emits_config_loaded(self) -> None:
        observer = FakeConfigObserver()
        YamlConfigLoader(observer=observer).load(path=_fixture("valid_config.yaml"))

        assert observer.loaded == [
            {"name": "fixture-suites", "version": "2", "total_suites": "1"}
        ]

    def test_defaults_applied(self, tmp_path: Path) -> None:
        path = tmp_path / "minimal.yaml"
        path.write_text("name: minimal\n", encoding="utf-8")

        cfg = YamlConfigLoader(observer=FakeConfigObserver()).load(path=path)

        assert cfg.version == "1"
        assert cfg.suites == []
        assert cfg.report.show_passing is False
        assert cfg.report.max_repr_length == 200


class TestEnvInterpolation:
    def test_env_vars_substituted(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BY_EXAMPLE_SUITE_NAME", "from-env")
        monkeypatch.setenv("BY_EXAMPLE_TARGET", "pkg.suite:examples")
        monkeypatch.delenv("BY_EXAMPLE_REPR_LENGTH", raising=False)

        cfg = YamlConfigLoader(observer=FakeConfigObserver()).load(
            path=_fixture("env_config.yaml")
        )

        assert cfg.name == "from-env"
        assert cfg.suites[0].target == "pkg.suite:examples"
        assert cfg.report.max_repr_length == 64

    def test_default_use_reported(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BY_EXAMPLE_SUITE_NAME", "from-env")
        monkeypatch.delenv("BY_EXAMPLE_TARGET", raising=False)
        monkeypatch.delenv("BY_EXAMPLE_REPR_LENGTH", raising=False)
        observer = FakeConfigObserver()

        cfg = YamlConfigLoader(observer=observer).load(path=_fixture("env_config.yaml"))

        assert cfg.suites[0].target == "tests.fixtures.passing_suite"
        assert observer.defaults_used == ["BY_EXAMPLE_TARGET", "BY_EXAMPLE_REPR_LENGTH"]

    def test_missing_env_var_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("BY_EXAMPLE_SUITE_NAME", raising=False)

        with pytest.raises(MissingEnvVarsError) as exc_info:
            YamlConfigLoader(observer=FakeConfigObserver()).load(
                path=_fixture("env_config.yaml")
            )

        assert exc_info.value.missing_vars == ["BY_EXAMPLE_SUITE_NAME"]


class TestInvalidConfig:
    def test_missing_file_raises_load_error(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigLoadError):
            YamlConfigLoader(observer=FakeConfigObserver()).load(
                path=tmp_path / "absent.yaml"
            )

    def test_malformed_yaml_raises_load_error(self) -> None:
        with pytest.raises(ConfigLoadError) as exc_info:
            YamlConfigLoader(observer=FakeConfigObserver()).load(
                path=_fixture("malformed.yaml")
            )

        assert "invalid YAML" in str(exc_info.value)

    def test_schema_violation_raises_validation_error(self) -> None:
        with pytest.raises(ConfigValidationError):
            YamlConfigLoader(observer=FakeConfigObserver()).load(
                path=_fixture("invalid_config.yaml")
            )

    def test_non_mapping_top_level_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ConfigValidationError):
            YamlConfigLoader(observer=FakeConfigObserver()).load(path=path)

    def test_no_loaded_event_on_failure(self) -> None:
        observer = FakeConfigObserver()
        with pytest.raises(ConfigValidationError):
            YamlConfigLoader(observer=observer).load(path=_fixture("invalid_config.yaml"))

        assert observer.loaded == []
