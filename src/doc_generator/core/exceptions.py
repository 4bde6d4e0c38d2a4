"""Domain exceptions."""


class DocGeneratorError(Exception):
    """Base class for doc generator failures."""


class TemplateNotFoundError(DocGeneratorError, LookupError):
    """No template is registered for a (dialect, name) pair."""

    def __init__(self, folder: str, name: str) -> None:
        self.folder = folder
        self.name = name
        super().__init__(f"Template not found: {folder}/{name}.json")


class InvalidTemplateError(DocGeneratorError, ValueError):
    """A template file exists but has no usable body."""

    def __init__(self, folder: str, name: str, reason: str) -> None:
        self.folder = folder
        self.name = name
        super().__init__(f"Invalid template format in {folder}/{name}.json: {reason}")
