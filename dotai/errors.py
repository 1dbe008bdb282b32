from pathlib import Path


class DotaiError(Exception):
    """Base user-facing application error."""


class NotFoundError(DotaiError):
    pass


class SkillNotFoundError(NotFoundError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Skill '{name}' not found in central repository")


class ServerNotFoundError(NotFoundError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"MCP server '{name}' not found")


class SkillExistsError(DotaiError):
    def __init__(self, name: str, path: Path) -> None:
        self.name = name
        self.path = path
        super().__init__(f"Skill '{name}' already exists: {path}")


class UnknownProviderError(DotaiError):
    def __init__(self, provider_id: str) -> None:
        self.provider_id = provider_id
        super().__init__(f"Unknown provider: {provider_id}")


class LaunchError(DotaiError):
    def __init__(self, command: list[str], detail: str) -> None:
        self.command = command
        self.detail = detail
        super().__init__(f"Could not run '{command[0]}' ({detail})")


class ValidationError(DotaiError, ValueError):
    pass


class InvalidSkillNameError(ValidationError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Invalid skill name '{name}' (use lowercase letters, digits and hyphens)"
        )


class InvalidDescriptionError(ValidationError):
    pass


class InvalidServerError(ValidationError):
    def __init__(self, name: str, detail: str) -> None:
        self.name = name
        self.detail = detail
        super().__init__(f"Invalid MCP server '{name}' ({detail})")


class DotaiFileError(DotaiError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class InvalidSkillError(DotaiFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid skill ({detail})")

