from pathlib import Path

from swe_copilot_kit.config import templates_root
from swe_copilot_kit.catalog import describe_template, list_templates


def test_list_templates_keeps_only_prefixed_names(templates_dir: Path):
    listing = list_templates(templates_dir)

    assert listing["prompts"] == ["swe.foo.prompt.md"]
    assert listing["agents"] == ["swe.x.agent.md"]
    assert listing["skills"] == ["swe.lint", "swe.solo.skill.md"]


def test_list_templates_missing_category_is_empty(tmp_path: Path):
    (tmp_path / "prompts").mkdir()
    (tmp_path / "prompts" / "swe.only.prompt.md").write_text("", encoding="utf-8")

    listing = list_templates(tmp_path)

    assert listing == {"prompts": ["swe.only.prompt.md"], "agents": [], "skills": []}


def test_skill_directory_without_skill_file_is_ignored(tmp_path: Path):
    (tmp_path / "skills" / "swe.empty").mkdir(parents=True)

    assert list_templates(tmp_path)["skills"] == []


def test_bundled_templates_follow_naming_conventions():
    listing = list_templates()

    assert listing["prompts"]
    assert listing["agents"]
    assert listing["skills"]
    assert all(name.startswith("swe.") and name.endswith(".prompt.md") for name in listing["prompts"])
    assert all(name.startswith("swe.") and name.endswith(".agent.md") for name in listing["agents"])
    assert all((templates_root() / "skills" / name / "SKILL.md").is_file() for name in listing["skills"])


def test_describe_template_reads_frontmatter(templates_dir: Path):
    assert describe_template(templates_dir / "prompts" / "swe.foo.prompt.md") == "Foo prompt"
    assert describe_template(templates_dir / "skills" / "swe.lint") == "Lint skill"


def test_describe_template_without_frontmatter(templates_dir: Path):
    assert describe_template(templates_dir / "skills" / "swe.solo.skill.md") == ""
    assert describe_template(templates_dir / "prompts" / "missing.prompt.md") == ""


def test_describe_template_invalid_yaml(tmp_path: Path):
    path = tmp_path / "swe.bad.prompt.md"
    path.write_text("---\ndescription: [unclosed\n---\n", encoding="utf-8")

    assert describe_template(path) == ""


def test_describe_template_empty_description(tmp_path: Path):
    path = tmp_path / "swe.blank.prompt.md"
    path.write_text("---\ndescription:\n---\nbody\n", encoding="utf-8")

    assert describe_template(path) == ""
