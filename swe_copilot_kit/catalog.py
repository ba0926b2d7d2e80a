from __future__ import annotations

import logging
from pathlib import Path

import yaml

from .config import CATEGORIES, CATEGORY_SUFFIXES, SKILL_FILENAME, TEMPLATE_PREFIX, Category, templates_root

logger = logging.getLogger(__name__)


def _is_template_name(name: str, category: Category) -> bool:
    return name.startswith(TEMPLATE_PREFIX) and name.endswith(CATEGORY_SUFFIXES[category])


def _is_skill_dir(path: Path) -> bool:
    return path.name.startswith(TEMPLATE_PREFIX) and (path / SKILL_FILENAME).is_file()


def _list_category(source: Path, category: Category) -> list[str]:
    if not source.is_dir():
        return []

    names = []
    for entry in source.iterdir():
        if entry.is_file() and _is_template_name(entry.name, category):
            names.append(entry.name)
        elif category is Category.skills and entry.is_dir() and _is_skill_dir(entry):
            names.append(entry.name)
    return sorted(names)


def list_templates(templates_dir: Path | None = None) -> dict[str, list[str]]:
    """Return the bundled template names for every category.

    A category whose source directory is missing yields an empty list.
    """
    root = templates_dir or templates_root()
    return {category.value: _list_category(root / category.value, category) for category in CATEGORIES}


def _split_frontmatter(text: str) -> dict:
    lines = text.splitlines()
    if not lines or lines[0].strip() != "---":
        return {}

    for idx in range(1, len(lines)):
        if lines[idx].strip() == "---":
            try:
                data = yaml.safe_load("\n".join(lines[1:idx])) or {}
            except yaml.YAMLError:
                return {}
            return data if isinstance(data, dict) else {}
    return {}


def describe_template(path: Path) -> str:
    """Read the ``description`` field from a template's YAML front matter."""
    if path.is_dir():
        path = path / SKILL_FILENAME
    if not path.is_file():
        return ""

    try:
        content = path.read_text(encoding="utf-8", errors="ignore")
    except OSError as error:
        logger.debug("Could not read %s: %s", path, error)
        return ""

    description = _split_frontmatter(content).get("description") or ""
    return " ".join(str(description).split())
