"""Errors raised by the package."""

from __future__ import annotations

from pathlib import Path


class RokitError(Exception):
    """Base class for all errors raised by the package."""


class HomeNotFoundError(RokitError):
    """Raised when the user's home directory cannot be found."""

    def __init__(self) -> None:
        super().__init__("home directory not found")


class MissingFileError(RokitError):
    """Raised when a required file does not exist."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f"file not found: {self.path}")


class ExtractError(RokitError):
    """Base class for failures while extracting an artifact."""


class UnknownFormatError(ExtractError):
    """Raised when an artifact has no known archive format."""

    def __init__(self) -> None:
        super().__init__("unknown format")


class FileMissingError(ExtractError):
    """Raised when the wanted binary is not inside an archive."""

    def __init__(self, format, file_name: str, archive_name: str) -> None:
        self.format = format
        self.file_name = file_name
        self.archive_name = archive_name
        super().__init__(
            f"missing binary '{file_name}' in {format} file '{archive_name}'"
        )


class OSMismatchError(ExtractError):
    """Raised when an extracted binary was built for another operating system."""

    def __init__(self, current_os, file_os, file_name: str, archive_name: str) -> None:
        self.current_os = current_os
        self.file_os = file_os
        self.file_name = file_name
        self.archive_name = archive_name
        super().__init__(
            f"mismatch in OS for binary '{file_name}' in archive '{archive_name}'"
            f"\ncurrent OS is {current_os}, binary is {file_os}"
        )


class GenericExtractError(ExtractError):
    """Raised when extraction fails; carries the first bytes of the body."""

    def __init__(self, source: BaseException, body: str) -> None:
        self.source = source
        self.body = body
        super().__init__(f"{source}\nresponse body first bytes:\n{body}")