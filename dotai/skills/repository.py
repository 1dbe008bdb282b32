import re
from pathlib import Path
from typing import Iterator

from dotai.constants import (
    DESCRIPTION_MAX_LENGTH,
    SKILL_FILENAME,
    SKILL_NAME_PATTERN,
)
from dotai.errors import (
    InvalidDescriptionError,
    InvalidSkillError,
    InvalidSkillNameError,
    SkillExistsError,
    SkillNotFoundError,
)
from dotai.paths import skills_repo_dir
from dotai.skills.models import CreatedSkill, Skill
from dotai.skills.parser import parse_skill, parse_skill_safe, render_skill_template
from dotai.utils import remove_path, replace_tree

_SKILL_NAME_RE = re.compile(SKILL_NAME_PATTERN)


def validate_skill_name(name: str) -> str:
    if not _SKILL_NAME_RE.fullmatch(name):
        raise InvalidSkillNameError(name)
    return name


def validate_description(description: str) -> str:
    text = description.strip()
    if not text:
        raise InvalidDescriptionError("Description is required")
    if len(text) > DESCRIPTION_MAX_LENGTH:
        raise InvalidDescriptionError(
            f"Description must be {DESCRIPTION_MAX_LENGTH} characters or less"
        )
    return text


class SkillRepository:
    """Central skill repository: one folder per skill holding a SKILL.md."""

    def __init__(self, root: Path | None = None) -> None:
        self._root = root

    @property
    def root(self) -> Path:
        return self._root if self._root is not None else skills_repo_dir()

    def skill_dir(self, name: str) -> Path:
        return self.root / validate_skill_name(name)

    def skill_file(self, name: str) -> Path:
        return self.skill_dir(name) / SKILL_FILENAME

    def create_skill(
        self, name: str, description: str, instructions: str = ""
    ) -> CreatedSkill:
        path = self.skill_dir(name)
        description = validate_description(description)
        if path.exists():
            raise SkillExistsError(name, path)

        path.mkdir(parents=True)
        skill_file = path / SKILL_FILENAME
        skill_file.write_text(
            render_skill_template(name, description, instructions), encoding="utf-8"
        )
        return CreatedSkill(
            name=name, description=description, path=path, skill_file=skill_file
        )

    def iter_skills(self) -> Iterator[Skill]:
        if not self.root.is_dir():
            return
        for child in sorted(self.root.iterdir()):
            if not child.is_dir():
                continue
            skill, _ = parse_skill_safe(child / SKILL_FILENAME)
            if skill is not None:
                yield skill

    def list_skills(self) -> list[Skill]:
        return list(self.iter_skills())

    def get_skill(self, name: str) -> Skill | None:
        skill_file = self.skill_file(name)
        if not skill_file.is_file():
            return None
        return parse_skill(skill_file)

    def require_skill(self, name: str) -> Skill:
        skill = self.get_skill(name)
        if skill is None:
            raise SkillNotFoundError(name)
        return skill

    def import_skill(self, source_path: Path) -> Skill:
        source = source_path.expanduser().resolve()
        skill_file = source / SKILL_FILENAME
        if not skill_file.is_file():
            raise InvalidSkillError(source, f"no {SKILL_FILENAME} found")

        imported = parse_skill(skill_file)
        name = validate_skill_name(imported.name or source.name)

        target = self.skill_dir(name)
        if target.resolve() != source:
            replace_tree(source, target)
        return parse_skill(target / SKILL_FILENAME)

    def remove_skill(self, name: str) -> bool:
        return remove_path(self.skill_dir(name))
