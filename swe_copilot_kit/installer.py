from __future__ import annotations

import logging
import os
import shutil
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .config import CATEGORIES, DESTINATION_ROOT, SKILL_FILENAME, TEMPLATE_PREFIX, Category, templates_root

logger = logging.getLogger(__name__)


class CopyErrorKind(str, Enum):
    source_missing = "source_missing"
    destination_exists = "destination_exists"
    io_error = "io_error"
    unknown_category = "unknown_category"


@dataclass(frozen=True)
class CopyOptions:
    force: bool = False
    target_dir: Path | None = None
    templates_dir: Path | None = None


@dataclass(frozen=True)
class CopyResult:
    success: bool
    files_count: int
    destination: Path
    error: str | None = None
    error_kind: CopyErrorKind | None = None

    @classmethod
    def ok(cls, files_count: int, destination: Path) -> "CopyResult":
        return cls(success=True, files_count=max(files_count, 0), destination=destination)

    @classmethod
    def failed(cls, kind: CopyErrorKind, error: str, destination: Path) -> "CopyResult":
        return cls(
            success=False,
            files_count=0,
            destination=destination,
            error=error or kind.value,
            error_kind=kind,
        )


def get_templates_dir() -> Path:
    return templates_root()


def _should_copy(name: str) -> bool:
    return name.startswith(TEMPLATE_PREFIX) or name == SKILL_FILENAME


def _ignore_unprefixed(directory: str, names: list[str]) -> set[str]:
    # Directories are always traversed; only files are filtered.
    return {
        name
        for name in names
        if not os.path.isdir(os.path.join(directory, name)) and not _should_copy(name)
    }


def _count_files(root: Path) -> int:
    return sum(1 for path in root.rglob("*") if path.is_file())


def _copy_template_directory(source: Path, destination: Path, force: bool) -> CopyResult:
    try:
        if not source.exists():
            return CopyResult.failed(
                CopyErrorKind.source_missing,
                f"Source directory not found: {source}",
                destination,
            )

        if destination.exists() and not force:
            return CopyResult.failed(
                CopyErrorKind.destination_exists,
                f"Destination already exists: {destination}. Use force option to overwrite.",
                destination,
            )

        destination.parent.mkdir(parents=True, exist_ok=True)
        shutil.copytree(
            source,
            destination,
            ignore=_ignore_unprefixed,
            copy_function=shutil.copy,
            dirs_exist_ok=force,
        )
        files_count = _count_files(destination)
    except OSError as error:
        logger.debug("Copy from %s to %s failed", source, destination, exc_info=True)
        return CopyResult.failed(CopyErrorKind.io_error, str(error), destination)

    logger.debug("Copied %s -> %s (%d files)", source, destination, files_count)
    return CopyResult.ok(files_count, destination)


def copy_category(category: Category | str, options: CopyOptions | None = None) -> CopyResult:
    """Copy one template category into ``<target>/.github/<category>``.

    Failures (unknown category, missing source, existing destination without
    ``force``, any ``OSError``) come back as a failed :class:`CopyResult` and
    never raise.
    """
    options = options or CopyOptions()
    target_dir = options.target_dir or Path.cwd()
    try:
        category = Category(category)
    except ValueError:
        name = str(category)
        return CopyResult.failed(
            CopyErrorKind.unknown_category,
            f"Unknown template category: {name}",
            target_dir / DESTINATION_ROOT / name,
        )

    source = (options.templates_dir or templates_root()) / category.value
    destination = target_dir / DESTINATION_ROOT / category.value
    return _copy_template_directory(source, destination, options.force)


def copy_prompts(options: CopyOptions | None = None) -> CopyResult:
    return copy_category(Category.prompts, options)


def copy_agents(options: CopyOptions | None = None) -> CopyResult:
    return copy_category(Category.agents, options)


def copy_skills(options: CopyOptions | None = None) -> CopyResult:
    return copy_category(Category.skills, options)


def init_all(options: CopyOptions | None = None) -> dict[str, CopyResult]:
    """Install every category in order; one failure does not stop the others."""
    return {category.value: copy_category(category, options) for category in CATEGORIES}
