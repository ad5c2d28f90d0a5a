"""Scaffold generation behind ``yu service``.

A new service is a copy of a template tree.  Files whose names end in the
marker suffix (``.j2``) are rendered with Jinja2, with ``service_name`` as
the only variable, and replaced by their rendered output.  The compose
fragment (``_docker-compose.yml``) is then appended to the project's
compose file and removed from the service directory.

Failures abort the command; files already written are left in place.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Sequence
from pathlib import Path

from jinja2 import TemplateError

from yu.errors import YuError
from yu.infrastructure.discovery import normalise_service_names
from yu.infrastructure.templates import build_template_environment, resolve_template_dir
from yu.output.messages import info
from yu.services.base import BaseService

logger = logging.getLogger(__name__)


class ScaffoldService(BaseService):
    """Creates new service directories from a template."""

    @property
    def template_dir(self) -> Path:
        return resolve_template_dir(self._settings.scaffold, project_root=self.project_root)

    def existing_services(self, service_names: Sequence[str]) -> list[str]:
        return [name for name in service_names if (self.project_root / name).exists()]

    def generate(self, names: Sequence[str]) -> list[Path]:
        """Scaffold every service in *names*, or none if any already exists or repeats."""
        if not names:
            raise YuError("Please provide service name(s)")

        service_names = normalise_service_names(names)
        duplicates = sorted({name for name in service_names if service_names.count(name) > 1})
        if duplicates:
            raise YuError("Service names given more than once: " + ", ".join(duplicates))

        existing = self.existing_services(service_names)
        if existing:
            raise YuError(
                "The following services already exist in the project: " + ", ".join(existing)
            )

        template_dir = self.template_dir
        if not template_dir.is_dir():
            raise YuError(f"Service template not found: {template_dir}")

        created: list[Path] = []
        for service_name in service_names:
            info(f"Generating service scaffold for {service_name}...")
            try:
                service_dir = self.copy_template(template_dir, service_name)
                self.render_templates(service_dir, service_name=service_name)
                self.append_compose_fragment(service_dir)
            except (OSError, TemplateError) as exc:
                logger.debug("Scaffolding %s failed", service_name, exc_info=True)
                raise YuError(f"Could not generate {service_name}: {exc}") from exc
            created.append(service_dir)
        return created

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    def copy_template(self, template_dir: Path, service_name: str) -> Path:
        target = self.project_root / service_name
        logger.debug("Copying %s to %s", template_dir, target)
        shutil.copytree(template_dir, target, symlinks=True)
        return target

    def render_templates(self, service_dir: Path, *, service_name: str) -> list[Path]:
        """Render and replace every marked file (hidden ones included)."""
        suffix = self._settings.scaffold.marker_suffix
        env = build_template_environment(service_dir)

        rendered: list[Path] = []
        for template_path in sorted(service_dir.rglob(f"*{suffix}")):
            if not template_path.is_file():
                continue
            target = template_path.with_name(template_path.name[: -len(suffix)])
            template_name = template_path.relative_to(service_dir).as_posix()
            content = env.get_template(template_name).render(service_name=service_name)
            target.write_text(content, encoding="utf-8")
            shutil.copymode(template_path, target)
            template_path.unlink()
            rendered.append(target)
        return rendered

    def append_compose_fragment(self, service_dir: Path) -> bool:
        """Splice the service's compose fragment into the project compose file.

        Returns False when the template carries no fragment.
        """
        fragment = service_dir / self._settings.scaffold.fragment
        if not fragment.is_file():
            return False

        compose_file = self._settings.compose_file
        logger.debug("Appending %s to %s", fragment, compose_file)
        with compose_file.open("ab") as fh:
            fh.write(fragment.read_bytes())
        fragment.unlink()
        return True
