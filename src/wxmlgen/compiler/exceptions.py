from typing import Optional


class WxmlgenError(Exception):
    """Base class for wxmlgen errors."""


class TemplateGenerationError(WxmlgenError):
    """Raised when a node cannot be rendered into the target dialect."""

    def __init__(self, message: str, template_name: Optional[str] = None):
        self.message = message
        self.template_name = template_name
        super().__init__(message)

    def __str__(self) -> str:
        if self.template_name:
            return f"{self.template_name}: {self.message}"
        return self.message


class AstLoadError(WxmlgenError):
    """Raised when a serialized AST or options document is malformed."""

    def __init__(self, message: str, file_path: str = "", path: str = ""):
        self.message = message
        self.file_path = file_path
        self.path = path
        super().__init__(message)

    def __str__(self) -> str:
        location = self.file_path
        if self.path:
            location = f"{location}:{self.path}" if location else self.path
        return f"{location}: {self.message}" if location else self.message
