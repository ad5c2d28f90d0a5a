"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, yu.toml only contains overrides.
A Ruby project laid out the usual way needs no yu.toml at all.
"""

from __future__ import annotations

from pydantic import BaseModel

DEFAULT_COMPOSE_FILE = "docker-compose.yml"


class ComposeConfig(BaseModel):
    """[compose] section."""

    model_config = {"frozen": True}

    command: tuple[str, ...] = ("docker-compose",)
    runtime_command: tuple[str, ...] = ("docker",)
    file: str = DEFAULT_COMPOSE_FILE


class ServicesConfig(BaseModel):
    """[services] section: how service directories are recognised and used."""

    model_config = {"frozen": True}

    manifest: str = "Gemfile"
    test_entrypoint: str = "bin/test"
    package_command: tuple[str, ...] = ("bundle", "package", "--all", "--no-install")
    shell: str = "bash"
    test_env: str = "APP_ENV=test"
    recursive_discovery: bool = False


class ScaffoldConfig(BaseModel):
    """[scaffold] section."""

    model_config = {"frozen": True}

    template: str = "ruby_base"
    template_dir: str = ""
    marker_suffix: str = ".j2"
    fragment: str = "_docker-compose.yml"
