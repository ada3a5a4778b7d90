from pathlib import Path

import pytest

from dohelper.config import Settings, _deep_merge, load_config, load_settings
from dohelper.exceptions import ConfigurationError

pytestmark = [pytest.mark.unit]


class TestDeepMerge:
    def test_shallow_override(self):
        assert _deep_merge({"a": 1, "b": 2}, {"b": 3}) == {"a": 1, "b": 3}

    def test_nested_merge(self):
        base = {"logging": {"level": "INFO", "file": "a.log"}}
        override = {"logging": {"level": "DEBUG"}}
        assert _deep_merge(base, override) == {"logging": {"level": "DEBUG", "file": "a.log"}}

    def test_empty_override(self):
        assert _deep_merge({"a": 1}, {}) == {"a": 1}


class TestLoadConfig:
    def test_no_files_returns_defaults(self, tmp_path: Path):
        result = load_config(project_dir=tmp_path / "nope", global_path=tmp_path / "nope.toml")
        assert result == {"logging": {}}

    def test_project_overrides_global(self, tmp_path: Path):
        global_toml = tmp_path / "defaults.toml"
        global_toml.write_text('token_env = "GLOBAL_TOKEN"\n[logging]\nlevel = "INFO"\n')
        project_dir = tmp_path / "project"
        project_dir.mkdir()
        (project_dir / "dohelper.toml").write_text('token_env = "PROJECT_TOKEN"\n')

        result = load_config(project_dir=project_dir, global_path=global_toml)

        assert result["token_env"] == "PROJECT_TOKEN"
        assert result["logging"]["level"] == "INFO"

    def test_explicit_path(self, tmp_path: Path):
        path = tmp_path / "custom.toml"
        path.write_text('token_env = "CUSTOM"\n')
        result = load_config(project_path=path, global_path=tmp_path / "nope.toml")
        assert result["token_env"] == "CUSTOM"

    def test_explicit_path_missing(self, tmp_path: Path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(project_path=tmp_path / "missing.toml", global_path=tmp_path / "nope.toml")

    def test_invalid_toml(self, tmp_path: Path):
        (tmp_path / "dohelper.toml").write_text("token_env = \n")
        with pytest.raises(ConfigurationError, match="Invalid settings file"):
            load_config(project_dir=tmp_path, global_path=tmp_path / "nope.toml")


class TestSettings:
    def test_defaults(self):
        assert Settings.from_raw({}) == Settings(token_env="DO_TOKEN", log_level="WARNING", log_file=None)

    def test_level_is_case_insensitive(self):
        assert Settings.from_raw({"logging": {"level": "debug"}}).log_level == "DEBUG"

    def test_unknown_level(self):
        with pytest.raises(ConfigurationError, match="Unknown log level"):
            Settings.from_raw({"logging": {"level": "LOUD"}})

    def test_empty_token_env(self):
        with pytest.raises(ConfigurationError, match="token_env"):
            Settings.from_raw({"token_env": ""})

    def test_logging_must_be_table(self):
        with pytest.raises(ConfigurationError, match="table"):
            Settings.from_raw({"logging": "DEBUG"})

    def test_load_settings(self, tmp_path: Path):
        (tmp_path / "dohelper.toml").write_text('[logging]\nlevel = "ERROR"\nfile = "out.log"\n')
        settings = load_settings(project_dir=tmp_path, global_path=tmp_path / "nope.toml")
        assert settings.log_level == "ERROR"
        assert settings.log_file == "out.log"
