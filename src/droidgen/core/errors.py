"""Exception hierarchy for template materialization."""

from __future__ import annotations


class DroidgenError(Exception):
    """Base exception for all droidgen errors."""


class MaterializationError(DroidgenError):
    """A materialization run was aborted.

    Attributes:
        path: The template-relative or destination path being processed.
        cause: The underlying exception, if any.
    """

    def __init__(self, message: str, path: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is None:
            return f"{self.message}: {self.path}"
        return f"{self.message}: {self.path} ({self.cause})"


class InvalidTemplatePathError(MaterializationError):
    """A template entry path breaks the structural assumptions of the mapper."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Invalid template path ({reason})", path)
        self.reason = reason


class DirectoryCreationError(MaterializationError):
    """The filesystem refused to create a directory."""

    def __init__(self, path: str, cause: BaseException | None = None) -> None:
        super().__init__("Failed to create directory", path, cause)


class TemplateReadError(MaterializationError):
    """A template entry could not be read from its source."""

    def __init__(self, path: str, cause: BaseException | None = None) -> None:
        super().__init__("Failed to read template", path, cause)


class TemplateWriteError(MaterializationError):
    """A rendered file could not be written to the output directory."""

    def __init__(self, path: str, cause: BaseException | None = None) -> None:
        super().__init__("Failed to write file", path, cause)
