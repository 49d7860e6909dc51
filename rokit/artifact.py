"""Releases and the downloadable artifacts they contain."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cmp_to_key

from rokit.decompression import decompress_gzip
from rokit.descriptor import Descriptor
from rokit.errors import (
    FileMissingError,
    GenericExtractError,
    OSMismatchError,
    RokitError,
    UnknownFormatError,
)
from rokit.executable import detect_os_from_executable
from rokit.extraction import extract_tar_file, extract_zip_file
from rokit.formats import ArtifactFormat
from rokit.providers import ArtifactProvider
from rokit.sorting import sort_preferred_artifact, sort_preferred_formats
from rokit.targets import OS

_BODY_PREVIEW_BYTES = 128


def _body_preview(contents: bytes) -> str:
    if len(contents) > _BODY_PREVIEW_BYTES + 6:
        head = contents[:_BODY_PREVIEW_BYTES].decode("utf-8", errors="replace")
        return f"{head.strip()} <...>"
    return contents.decode("utf-8", errors="replace")


@dataclass(frozen=True)
class Artifact:
    """A downloadable file belonging to a release of a tool."""

    provider: ArtifactProvider
    format: ArtifactFormat | None
    id: str | None
    url: str | None
    name: str | None
    tool_name: str

    def extract_contents(self, contents: bytes) -> bytes:
        """Extract the tool's binary from the raw downloaded artifact.

        Raises an ExtractError subclass if the format is unknown, the binary
        is missing or unreadable, or it was built for another OS.
        """
        if self.format is None:
            raise UnknownFormatError()
        fmt = self.format
        data = bytes(contents)

        try:
            if fmt is ArtifactFormat.ZIP:
                found = extract_zip_file(data, self.tool_name)
            elif fmt is ArtifactFormat.TAR:
                found = extract_tar_file(data, self.tool_name)
            elif fmt is ArtifactFormat.TAR_GZ:
                tar = decompress_gzip(data)
                found = extract_tar_file(tar, self.tool_name)
            else:
                found = decompress_gzip(data)
        except RokitError as err:
            if fmt is ArtifactFormat.TAR_GZ and err.__cause__ is not None and not isinstance(
                err.__cause__, RokitError
            ) and "tar" not in str(err).lower() and _is_gzip_failure(data):
                raise
            raise GenericExtractError(err, _body_preview(data)) from err

        archive_name = self.name or ""
        if found is None:
            raise FileMissingError(fmt, self.tool_name, archive_name)

        current_os = OS.current_system()
        file_os = detect_os_from_executable(found)
        if file_os is not None and file_os != current_os:
            raise OSMismatchError(current_os, file_os, self.tool_name, archive_name)
        return found

    @classmethod
    def sort_by_system_compatibility(cls, artifacts) -> list["Artifact"]:
        """Return the artifacts compatible with this system, best first."""
        return _sort_by_system_compatibility(artifacts, allow_partial=False)

    @classmethod
    def find_partially_compatible_fallback(cls, artifacts) -> "Artifact | None":
        """Return the best artifact for this system's OS, even if the arch differs.

        The result is not guaranteed to run; check its contents before use.
        """
        ordered = _sort_by_system_compatibility(artifacts, allow_partial=True)
        return ordered[0] if ordered else None


def _is_gzip_failure(data: bytes) -> bool:
    try:
        decompress_gzip(data)
    except RokitError:
        return True
    return False


@dataclass
class Release:
    """A release of a tool: its artifacts and an optional changelog."""

    changelog: str | None = None
    artifacts: list[Artifact] = field(default_factory=list)


def _sort_by_system_compatibility(artifacts, allow_partial: bool) -> list[Artifact]:
    current = Descriptor.current_system()
    candidates = []
    for artifact in artifacts:
        if artifact.name is None:
            continue
        desc = Descriptor.detect(artifact.name)
        if desc is None:
            continue
        if current.is_compatible_with(desc) or (allow_partial and current.os == desc.os):
            candidates.append((desc, artifact))

    def compare(left, right) -> int:
        (desc_a, artifact_a), (desc_b, artifact_b) = left, right
        return (
            current.sort_by_preferred_compat(desc_a, desc_b)
            or sort_preferred_artifact(artifact_a, artifact_b)
            or sort_preferred_formats(artifact_a, artifact_b)
        )

    candidates.sort(key=cmp_to_key(compare))
    return [artifact for _, artifact in candidates]