"""Scaffold template lookup and Jinja2 rendering with per-project overrides."""

from __future__ import annotations

from importlib.resources import files
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from yu.config.models import ScaffoldConfig

PROJECT_TEMPLATE_DIR = Path(".yu") / "templates"


def packaged_template_dir(name: str) -> Path:
    """Directory of a template shipped inside the ``yu`` package."""
    return Path(str(files("yu") / "templates" / name))


def resolve_template_dir(config: ScaffoldConfig, *, project_root: Path) -> Path:
    """Find the template tree to copy for a new service.

    Lookup order: an explicit ``scaffold.template_dir`` (relative paths are
    taken from the project root), then ``.yu/templates/<template>/`` inside
    the project, then the template packaged with yu.
    """
    if config.template_dir:
        return project_root / config.template_dir

    override = project_root / PROJECT_TEMPLATE_DIR / config.template
    if override.is_dir():
        return override
    return packaged_template_dir(config.template)


def build_template_environment(directory: Path) -> Environment:
    """Jinja2 environment loading templates from *directory*.

    Undefined template variables raise instead of rendering empty.
    """
    return Environment(
        loader=FileSystemLoader(str(directory)),
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )
