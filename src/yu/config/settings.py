"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``YU_*`` prefix
  3. TOML file    — ``yu.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

Uses Pydantic Settings v2 with a custom :class:`TomlSettingsSource` that
reuses the ``find_config`` walk-up discovery from
:mod:`yu.config.discovery`.
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from yu.config.discovery import find_config
from yu.config.models import ComposeConfig, ScaffoldConfig, ServicesConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``yu.toml`` file discovered via walk-up."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                import click

                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        """Return the full TOML data dict for Pydantic to merge."""
        return self._data


# Thread-local storage for TOML path during construction.
_tls = threading.local()


class YuSettings(BaseSettings):
    """Unified settings for the yu CLI.

    Built once by the root command and stored on ``click.Context.obj``
    (via :class:`~yu.commands._context.AppContext`).  Frozen, so the
    verbose and container-removal toggles cannot change mid-run.

    Attributes:
        project_root: Directory holding the compose file and the service
            directories (parent of ``yu.toml``, or CWD if none found).
        config_path: The ``yu.toml`` in effect, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "YU_",
        "env_nested_delimiter": "__",
    }

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    verbose: bool = False
    log_json: bool = False
    remove_containers: bool = True

    seed_script: str = "seed"

    # --- TOML sections ---
    compose: ComposeConfig = Field(default_factory=ComposeConfig)
    services: ServicesConfig = Field(default_factory=ServicesConfig)
    scaffold: ScaffoldConfig = Field(default_factory=ScaffoldConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        **cli_flags: Any,
    ) -> YuSettings:
        """Construct settings from CLI invocation.

        Discovers ``yu.toml`` via walk-up (or explicit *config_path*),
        resolves *project_root* from the config file's parent directory,
        and merges CLI flags as highest-priority overrides.  Flags passed
        as ``None`` were not given on the command line and do not override
        lower-priority sources.
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(project_root)

        resolved_root = project_root
        if resolved_root is None:
            resolved_root = toml_path.parent.resolve() if toml_path else Path.cwd()

        overrides = {key: value for key, value in cli_flags.items() if value is not None}

        _tls.toml_path = toml_path
        try:
            return cls(
                project_root=resolved_root,
                config_path=toml_path,
                **overrides,
            )
        finally:
            _tls.toml_path = None

    @property
    def compose_file(self) -> Path:
        return self.project_root / self.compose.file

    @property
    def seed_path(self) -> Path:
        return self.project_root / self.seed_script
