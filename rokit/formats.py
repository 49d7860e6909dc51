"""Archive formats of downloadable artifacts."""

from __future__ import annotations

from rokit.targets import _OrderedEnum

_ALLOWED_EXTENSIONS = ("zip", "tar", "gz", "tgz")
_MAX_EXTENSIONS = 2


def _split_extension(path: str) -> tuple[str, str] | None:
    """Split the last extension off the final path component, if it has one."""
    name = path.rstrip("/").rsplit("/", 1)[-1]
    if not name or name == "..":
        return None
    stem, dot, extension = name.rpartition(".")
    if not dot or not stem:
        return None
    return stem, extension


def split_filename_and_extensions(name: str) -> tuple[str, list[str]]:
    """Split a file name into its base name and up to two archive extensions.

    Only known archive extensions are split off; once one has been, the
    directory part of the name is dropped as well.
    """
    current = name
    extensions: list[str] = []
    while (split := _split_extension(current)) is not None:
        stem, extension = split
        if extension.lower() not in _ALLOWED_EXTENSIONS:
            break
        extensions.append(extension)
        current = stem
        if len(extensions) >= _MAX_EXTENSIONS:
            break
    extensions.reverse()
    return current, extensions


class ArtifactFormat(_OrderedEnum):
    """An archive format; declaration order is the order of preference."""

    TAR_GZ = "tar.gz"
    TAR = "tar"
    ZIP = "zip"
    GZ = "gz"

    def as_str(self) -> str:
        """Return the name of the format, such as "tar.gz"."""
        return self.value

    @classmethod
    def from_extensions(cls, extensions) -> "ArtifactFormat | None":
        """Determine the format from a sequence of file extensions."""
        lowered = [ext.lower() for ext in extensions]
        if not lowered:
            return None
        last = lowered[-1]
        if last == "zip":
            return cls.ZIP
        if last == "tar":
            return cls.TAR
        if last == "tgz":
            return cls.TAR_GZ
        if lowered[-2:] == ["tar", "gz"]:
            return cls.TAR_GZ
        if last == "gz":
            return cls.GZ
        return None

    @classmethod
    def from_path_or_url(cls, path_or_url: str) -> "ArtifactFormat | None":
        """Determine the format from the extensions of a path or URL."""
        _, extensions = split_filename_and_extensions(path_or_url)
        return cls.from_extensions(extensions)

    @classmethod
    def parse(cls, text: str) -> "ArtifactFormat":
        """Parse a format name such as "zip", "tar", "tar.gz" or "tgz"."""
        lowered = text.strip().lower()
        if lowered == "zip":
            return cls.ZIP
        if lowered == "tar":
            return cls.TAR
        if lowered in ("tar.gz", "tgz"):
            return cls.TAR_GZ
        raise ValueError(f"unknown artifact format '{lowered}'")