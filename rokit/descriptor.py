"""Descriptions of systems and compatibility checks between them."""

from __future__ import annotations

from dataclasses import dataclass

from rokit.executable import parse_executable
from rokit.targets import OS, Arch, Toolchain


class DescriptionParseError(ValueError):
    """Raised when no operating system can be found in a description."""

    def __init__(self, message: str = "unknown OS, or no OS detected") -> None:
        super().__init__(message)


def _compare(a, b) -> int:
    """Compare two optional ordered values, with None sorting first."""
    if a == b:
        return 0
    if a is None:
        return -1
    if b is None:
        return 1
    return -1 if a < b else 1


@dataclass(frozen=True)
class Descriptor:
    """An operating system, architecture and preferred toolchain.

    May describe the current host or a target system, and is used to
    check compatibility between systems.
    """

    os: OS
    arch: Arch | None = None
    toolchain: Toolchain | None = None

    @classmethod
    def current_system(cls) -> "Descriptor":
        """Describe the current host system."""
        return cls(
            os=OS.current_system(),
            arch=Arch.current_system(),
            toolchain=Toolchain.current_system(),
        )

    @classmethod
    def detect(cls, search_string: str) -> "Descriptor | None":
        """Detect a descriptor from keywords, or None if no OS is found."""
        os = OS.detect(search_string)
        if os is None:
            return None
        return cls(
            os=os,
            arch=Arch.detect(search_string),
            toolchain=Toolchain.detect(search_string),
        )

    @classmethod
    def parse(cls, text: str) -> "Descriptor":
        """Parse a descriptor from text, raising DescriptionParseError if no OS is found."""
        found = cls.detect(text)
        if found is None:
            raise DescriptionParseError()
        return found

    @classmethod
    def detect_from_executable(cls, binary_contents: bytes) -> "Descriptor | None":
        """Describe the system an executable was built for, or None."""
        result = parse_executable(binary_contents)
        if result is None:
            return None
        os, arch = result
        return cls(os=os, arch=arch, toolchain=None)

    def is_compatible_with(self, other: "Descriptor") -> bool:
        """Return True if binaries described by other can run on this system.

        The OS must match, and so must the architecture, except that 64-bit
        Windows and Linux run 32-bit x86 and Apple Silicon macOS runs x64.
        """
        if self.os != other.os:
            return False
        if self.arch == other.arch:
            return True
        return (self.os, self.arch, other.arch) in (
            (OS.WINDOWS, Arch.X64, Arch.X86),
            (OS.LINUX, Arch.X64, Arch.X86),
            (OS.MACOS, Arch.ARM64, Arch.X64),
        )

    def sort_by_preferred_compat(self, a: "Descriptor", b: "Descriptor") -> int:
        """Compare a and b by how well they suit this system.

        Returns a negative number if a is preferred, positive if b is, zero
        if neither is. Exact matches come first, then preferred architecture
        and toolchain.
        """
        a_exact = a.os == self.os and a.arch == self.arch
        b_exact = b.os == self.os and b.arch == self.arch
        if a_exact and not b_exact:
            return -1
        if b_exact and not a_exact:
            return 1
        if a.arch != b.arch:
            return _compare(a.arch, b.arch)
        if a.toolchain != b.toolchain:
            return _compare(a.toolchain, b.toolchain)
        return _compare(a.os, b.os)