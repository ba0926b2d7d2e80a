from __future__ import annotations

from enum import Enum
from pathlib import Path


class Category(str, Enum):
    prompts = "prompts"
    agents = "agents"
    skills = "skills"


CATEGORIES = (Category.prompts, Category.agents, Category.skills)

TEMPLATE_PREFIX = "swe."
SKILL_FILENAME = "SKILL.md"

CATEGORY_SUFFIXES = {
    Category.prompts: ".prompt.md",
    Category.agents: ".agent.md",
    Category.skills: ".skill.md",
}

DESTINATION_ROOT = ".github"

GITIGNORE_MARKER = "# Generated SWE Copilot Kit"
GITIGNORE_PATTERNS = (
    ".github/agents/swe.*",
    ".github/prompts/swe.*",
    ".github/skills/swe.*",
)


def templates_root() -> Path:
    return Path(__file__).resolve().parent / "templates"
