from pathlib import Path
from typing import Any

from dotai.errors import UnknownProviderError
from dotai.paths import config_file_path, expand_home, skills_repo_dir
from dotai.providers.skills import get_skill_provider, skill_provider_ids
from dotai.sync.models import Scope
from dotai.utils import now_iso, read_json_object, write_json


class ConfigService:
    """User preferences persisted in ``~/.dotai/config.json``.

    Files written by older versions are shallow-merged over the defaults on
    load, so keys added later appear without any migration step.
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path if self._path is not None else config_file_path()

    def default_config(self) -> dict[str, Any]:
        return {
            "enabledProviders": skill_provider_ids(),
            "defaultScope": Scope.GLOBAL.value,
            "skillsRepo": None,
            "createdAt": now_iso(),
        }

    def init_config(self) -> dict[str, Any]:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        if not self.path.exists():
            write_json(self.path, self.default_config())
        config = self.load_config()
        self.skills_repo_dir(config).mkdir(parents=True, exist_ok=True)
        return config

    def load_config(self) -> dict[str, Any]:
        payload, _ = read_json_object(self.path)
        config = self.default_config()
        config.update(payload)
        if not isinstance(config.get("enabledProviders"), list):
            config["enabledProviders"] = skill_provider_ids()
        if config.get("defaultScope") not in (scope.value for scope in Scope):
            config["defaultScope"] = Scope.GLOBAL.value
        return config

    def save_config(self, config: dict[str, Any]) -> None:
        write_json(self.path, config)

    def update_config(self, **changes: Any) -> dict[str, Any]:
        config = self.load_config()
        config.update(changes)
        config["updatedAt"] = now_iso()
        self.save_config(config)
        return config

    def enabled_providers(self) -> list[str]:
        return [str(item) for item in self.load_config()["enabledProviders"]]

    def default_scope(self) -> Scope:
        return Scope(self.load_config()["defaultScope"])

    def enable_provider(self, provider_id: str) -> dict[str, Any]:
        if get_skill_provider(provider_id) is None:
            raise UnknownProviderError(provider_id)
        config = self.load_config()
        if provider_id not in config["enabledProviders"]:
            config["enabledProviders"].append(provider_id)
            self.save_config(config)
        return config

    def disable_provider(self, provider_id: str) -> dict[str, Any]:
        config = self.load_config()
        config["enabledProviders"] = [
            item for item in config["enabledProviders"] if item != provider_id
        ]
        self.save_config(config)
        return config

    def set_default_scope(self, scope: Scope | str) -> dict[str, Any]:
        return self.update_config(defaultScope=Scope(scope).value)

    def set_skills_repo(self, path: Path | None) -> dict[str, Any]:
        value = str(path.expanduser().resolve()) if path is not None else None
        return self.update_config(skillsRepo=value)

    def skills_repo_dir(self, config: dict[str, Any] | None = None) -> Path:
        config = config if config is not None else self.load_config()
        custom = config.get("skillsRepo")
        if isinstance(custom, str) and custom.strip():
            return expand_home(custom.strip())
        return skills_repo_dir()
