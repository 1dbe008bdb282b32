"""Tests for SKILL.md parsing and rendering."""

from pathlib import Path

import pytest

from dotai.errors import InvalidSkillError
from dotai.skills.parser import parse_skill, parse_skill_safe, render_skill_template


def test_parse_frontmatter_and_body(tmp_path: Path) -> None:
    skill_dir = tmp_path / "code-reviewer"
    skill_dir.mkdir()
    (skill_dir / "SKILL.md").write_text(
        "---\n"
        "name: code-reviewer\n"
        "description: Reviews code for quality\n"
        "license: MIT\n"
        "---\n"
        "\n"
        "# Code Reviewer\n\n"
        "Review all code changes.\n",
        encoding="utf-8",
    )

    skill = parse_skill(skill_dir / "SKILL.md")

    assert skill.name == "code-reviewer"
    assert skill.description == "Reviews code for quality"
    assert skill.metadata["license"] == "MIT"
    assert skill.body.startswith("\n# Code Reviewer")
    assert skill.folder == "code-reviewer"
    assert skill.path == skill_dir


def test_metadata_name_wins_over_folder(tmp_path: Path) -> None:
    skill_dir = tmp_path / "folder-name"
    skill_dir.mkdir()
    (skill_dir / "SKILL.md").write_text(
        "---\nname: metadata-name\ndescription: x\n---\nBody\n", encoding="utf-8"
    )

    skill = parse_skill(skill_dir / "SKILL.md")

    assert skill.name == "metadata-name"
    assert skill.folder == "folder-name"


def test_folder_name_is_fallback(tmp_path: Path) -> None:
    skill_dir = tmp_path / "simple"
    skill_dir.mkdir()
    (skill_dir / "SKILL.md").write_text("# Simple\n\nJust content.\n", encoding="utf-8")

    skill = parse_skill(skill_dir / "SKILL.md")

    assert skill.name == "simple"
    assert skill.description == ""
    assert "Just content." in skill.body


def test_malformed_frontmatter_raises(tmp_path: Path) -> None:
    skill_dir = tmp_path / "broken"
    skill_dir.mkdir()
    (skill_dir / "SKILL.md").write_text(
        "---\nname: [unclosed\n---\nBody\n", encoding="utf-8"
    )

    with pytest.raises(InvalidSkillError):
        parse_skill(skill_dir / "SKILL.md")

    skill, error = parse_skill_safe(skill_dir / "SKILL.md")
    assert skill is None
    assert error


def test_non_mapping_frontmatter_raises(tmp_path: Path) -> None:
    path = tmp_path / "list" / "SKILL.md"
    path.parent.mkdir()
    path.write_text("---\n- a\n- b\n---\nBody\n", encoding="utf-8")

    with pytest.raises(InvalidSkillError, match="mapping"):
        parse_skill(path)


def test_missing_file_raises_but_safe_returns_none(tmp_path: Path) -> None:
    with pytest.raises(InvalidSkillError):
        parse_skill(tmp_path / "missing" / "SKILL.md")

    assert parse_skill_safe(tmp_path / "missing" / "SKILL.md") == (None, None)


def test_template_uses_generated_body_when_instructions_empty(tmp_path: Path) -> None:
    text = render_skill_template("demo", "Demo skill: does things")
    path = tmp_path / "demo" / "SKILL.md"
    path.parent.mkdir()
    path.write_text(text, encoding="utf-8")

    skill = parse_skill(path)

    assert skill.name == "demo"
    assert skill.description == "Demo skill: does things"
    assert "# demo" in skill.body
    assert "## When to use this skill" in skill.body


def test_template_keeps_given_instructions() -> None:
    text = render_skill_template("demo", "desc", "Always write tests.")

    assert "Always write tests." in text
    assert "When to use this skill" not in text
