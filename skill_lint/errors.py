from pathlib import Path
from typing import Iterable


class SkillLintError(Exception):
    """Base user-facing application error."""


class SkillFileError(SkillLintError):
    def __init__(self, path: str | Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class MalformedFrontMatterError(SkillFileError):
    def __init__(self, path: str | Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Malformed front matter ({detail})")


class UnknownFieldError(SkillFileError):
    def __init__(self, path: str | Path, fields: Iterable[str]) -> None:
        self.fields = tuple(sorted(fields))
        super().__init__(
            path=path,
            message=f"Unknown front matter fields ({', '.join(self.fields)})",
        )


class MissingRequiredFileError(SkillFileError):
    def __init__(self, path: str | Path) -> None:
        super().__init__(path=path, message="Missing required file")


class MissingConfigFileError(SkillFileError):
    def __init__(self, path: str | Path) -> None:
        super().__init__(path=path, message="Missing required config file")


class MissingSkillsRootError(SkillFileError):
    def __init__(self, path: str | Path) -> None:
        super().__init__(path=path, message="Skills directory not found")


class InvalidYamlFormatError(SkillFileError):
    def __init__(self, path: str | Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid YAML format ({detail})")


class InvalidEncodingError(SkillFileError):
    def __init__(self, path: str | Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid UTF-8 encoding ({detail})")


class InvalidConfigSchemaError(SkillFileError):
    def __init__(self, path: str | Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid config schema ({detail})")


class DuplicateSkillNameError(SkillLintError):
    def __init__(self, name: str, directories: Iterable[str]) -> None:
        self.name = name
        self.directories = tuple(sorted(directories))
        super().__init__(
            f"Duplicate skill name '{name}' declared by: "
            f"{', '.join(self.directories)}"
        )
