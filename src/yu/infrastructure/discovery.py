"""Service discovery: which subdirectories of the project are services.

Nothing is cached: every call reflects the filesystem at that moment.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path, PurePath

from yu.config.models import ServicesConfig


def services_with_marker(root: Path, marker: str, *, recursive: bool = False) -> set[str]:
    """Return the names of top-level directories under *root* holding *marker*.

    *marker* is a path relative to the service directory (``Gemfile``,
    ``bin/test``).  With *recursive*, a marker anywhere below a top-level
    directory counts for that directory.  Hidden directories are skipped.
    """
    pattern = f"**/{marker}" if recursive else f"*/{marker}"
    marker_depth = len(PurePath(marker).parts)
    found: set[str] = set()
    for path in root.glob(pattern):
        if not path.is_file():
            continue
        service_parts = path.relative_to(root).parts[:-marker_depth]
        # "**" also matches zero directories, i.e. a marker in the root itself.
        if not service_parts:
            continue
        if any(part.startswith(".") for part in service_parts):
            continue
        found.add(service_parts[0])
    return found


def normalise_service_name(name_or_path: str) -> str:
    """Reduce a service name or path (``./services/foo/``) to ``foo``."""
    return PurePath(name_or_path).name or name_or_path


def normalise_service_names(names: Iterable[str]) -> list[str]:
    return [normalise_service_name(name) for name in names]


def packageable_services(root: Path, config: ServicesConfig) -> set[str]:
    """Services carrying a dependency manifest."""
    return services_with_marker(root, config.manifest, recursive=config.recursive_discovery)


def testable_services(root: Path, config: ServicesConfig) -> set[str]:
    """Services carrying a test entrypoint."""
    return services_with_marker(
        root, config.test_entrypoint, recursive=config.recursive_discovery
    )
