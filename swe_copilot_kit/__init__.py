"""Install SWE Copilot prompts, agents and skills into a project's .github directory."""

from .catalog import describe_template, list_templates
from .config import Category, templates_root
from .gitignore import update_gitignore
from .installer import (
    CopyErrorKind,
    CopyOptions,
    CopyResult,
    copy_agents,
    copy_category,
    copy_prompts,
    copy_skills,
    get_templates_dir,
    init_all,
)

__version__ = "1.1.0"

__all__ = [
    "Category",
    "CopyErrorKind",
    "CopyOptions",
    "CopyResult",
    "__version__",
    "copy_agents",
    "copy_category",
    "copy_prompts",
    "copy_skills",
    "describe_template",
    "get_templates_dir",
    "init_all",
    "list_templates",
    "templates_root",
    "update_gitignore",
]
