"""Tests for YuSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from yu.config.settings import YuSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("YU_CONFIG", "YU_VERBOSE", "YU_REMOVE_CONTAINERS", "YU_SEED_SCRIPT"):
        monkeypatch.delenv(var, raising=False)


class TestYuSettingsDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = YuSettings.from_cli(project_root=tmp_path)
        assert settings.project_root == tmp_path
        assert settings.verbose is False
        assert settings.remove_containers is True
        assert settings.compose.command == ("docker-compose",)
        assert settings.compose.file == "docker-compose.yml"
        assert settings.services.manifest == "Gemfile"
        assert settings.services.test_entrypoint == "bin/test"
        assert settings.scaffold.marker_suffix == ".j2"

    def test_frozen(self, tmp_path: Path) -> None:
        settings = YuSettings.from_cli(project_root=tmp_path)
        with pytest.raises(Exception):
            settings.verbose = True  # type: ignore[misc]

    def test_derived_paths(self, tmp_path: Path) -> None:
        settings = YuSettings.from_cli(project_root=tmp_path)
        assert settings.compose_file == tmp_path / "docker-compose.yml"
        assert settings.seed_path == tmp_path / "seed"


class TestCliFlags:
    def test_none_flags_do_not_override(self, tmp_path: Path) -> None:
        (tmp_path / "yu.toml").write_text("verbose = true\n")
        settings = YuSettings.from_cli(project_root=tmp_path, verbose=None)
        assert settings.verbose is True

    def test_flags_override_toml(self, tmp_path: Path) -> None:
        (tmp_path / "yu.toml").write_text("remove_containers = true\n")
        settings = YuSettings.from_cli(project_root=tmp_path, remove_containers=False)
        assert settings.remove_containers is False


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "yu.toml"
        toml.write_text(
            '[compose]\ncommand = ["docker", "compose"]\n[services]\nmanifest = "Pipfile"\n'
        )
        settings = YuSettings.from_cli(project_root=tmp_path)
        assert settings.compose.command == ("docker", "compose")
        assert settings.services.manifest == "Pipfile"
        assert settings.services.test_entrypoint == "bin/test"  # default preserved

    def test_project_root_from_config_location(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "yu.toml").write_text("")
        nested = tmp_path / "users" / "lib"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        settings = YuSettings.from_cli()
        assert settings.project_root == tmp_path.resolve()
        assert settings.config_path is not None

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom.toml"
        custom.write_text('seed_script = "bin/seed"\n')
        settings = YuSettings.from_cli(config_path=str(custom), project_root=tmp_path)
        assert settings.seed_script == "bin/seed"

    def test_invalid_toml_raises(self, tmp_path: Path) -> None:
        (tmp_path / "yu.toml").write_text("[compose\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            YuSettings.from_cli(project_root=tmp_path)


class TestEnvVars:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "yu.toml").write_text('seed_script = "from-toml"\n')
        monkeypatch.setenv("YU_SEED_SCRIPT", "from-env")
        settings = YuSettings.from_cli(project_root=tmp_path)
        assert settings.seed_script == "from-env"

    def test_nested_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("YU_SERVICES__SHELL", "sh")
        settings = YuSettings.from_cli(project_root=tmp_path)
        assert settings.services.shell == "sh"
