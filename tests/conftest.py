from pathlib import Path

import pytest


def _write(path: Path, content: str = "") -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


@pytest.fixture
def templates_dir(tmp_path: Path) -> Path:
    root = tmp_path / "templates"
    _write(root / "prompts" / "swe.foo.prompt.md", "---\ndescription: Foo prompt\n---\nbody\n")
    _write(root / "prompts" / "bar.prompt.md", "not shipped\n")
    _write(root / "agents" / "swe.x.agent.md", "---\ndescription: X agent\n---\n")
    _write(root / "agents" / "notes.txt", "not shipped\n")
    _write(root / "skills" / "swe.lint" / "SKILL.md", "---\ndescription: Lint skill\n---\n")
    _write(root / "skills" / "swe.lint" / "helper.sh", "not shipped\n")
    _write(root / "skills" / "swe.solo.skill.md", "single-file skill\n")
    return root


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    root = tmp_path / "project"
    root.mkdir()
    return root
