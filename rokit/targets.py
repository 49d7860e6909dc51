"""Operating systems, architectures and toolchains, detected from names."""

from __future__ import annotations

import enum
import platform
import re
import sys
from functools import total_ordering

_SEPARATOR_PATTERN = re.compile(r"[\s_-]")


def is_word_separator(char: str) -> bool:
    """Return True if the character separates words in an artifact name."""
    return char.isspace() or char in "-_"


def split_words(text: str) -> list[str]:
    """Split text on word separators, keeping empty parts."""
    return _SEPARATOR_PATTERN.split(text)


@total_ordering
class _OrderedEnum(enum.Enum):
    """Enum whose members compare by their declaration order."""

    def _rank(self) -> int:
        return list(type(self)).index(self)

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._rank() < other._rank()  # type: ignore[union-attr]

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.value))

    def __eq__(self, other: object) -> bool:
        return self is other

    def __str__(self) -> str:
        return self.value


def _match_full_word(lowered: str, table):
    for part in split_words(lowered):
        for member, keywords in table:
            if part in keywords:
                return member
    return None


def _match_substring(lowered: str, table):
    for member, keywords in table:
        if any(keyword in lowered for keyword in keywords):
            return member
    return None


class OS(_OrderedEnum):
    """An operating system."""

    WINDOWS = "windows"
    MACOS = "macos"
    LINUX = "linux"

    @classmethod
    def current_system(cls) -> "OS":
        """Return the operating system of the host."""
        plat = sys.platform
        if plat in ("win32", "cygwin"):
            return cls.WINDOWS
        if plat == "darwin":
            return cls.MACOS
        if plat.startswith("linux"):
            return cls.LINUX
        raise RuntimeError(f"Unsupported OS: {plat}")

    @classmethod
    def detect(cls, search_string: str) -> "OS | None":
        """Detect an operating system from keywords in a string."""
        lowered = search_string.lower()
        found = _match_substring(lowered, _OS_SUBSTRINGS)
        if found is not None:
            return found
        return _match_full_word(lowered, _OS_FULL_WORDS)

    def as_str(self) -> str:
        """Return the name of the operating system, such as "windows"."""
        return self.value


class Arch(_OrderedEnum):
    """A processor architecture.

    Declaration order matters: ARM comes before x86 so native binaries on
    ARM systems are preferred over emulated ones.
    """

    ARM64 = "arm64"
    X64 = "x64"
    ARM32 = "arm32"
    X86 = "x86"

    @classmethod
    def current_system(cls) -> "Arch":
        """Return the architecture of the host."""
        machine = platform.machine().lower()
        if machine in ("aarch64", "arm64"):
            return cls.ARM64
        if machine in ("x86_64", "amd64", "x64"):
            return cls.X64
        if machine in ("x86", "i386", "i486", "i586", "i686"):
            return cls.X86
        if machine.startswith("arm"):
            return cls.ARM32
        raise RuntimeError(f"Unsupported architecture: {machine}")

    @classmethod
    def detect(cls, search_string: str) -> "Arch | None":
        """Detect an architecture from keywords in a string."""
        lowered = search_string.lower()
        found = _match_substring(lowered, _ARCH_SUBSTRINGS)
        if found is not None:
            return found
        found = _match_full_word(lowered, _ARCH_FULL_WORDS)
        if found is not None:
            return found
        # A macOS universal binary runs on both x64 and arm64 hosts; calling it
        # x64 lets it pass compatibility checks on either.
        if "universal" in lowered and OS.detect(lowered) is OS.MACOS:
            return cls.X64
        return None

    def as_str(self) -> str:
        """Return the name of the architecture, such as "x64"."""
        return self.value


class Toolchain(_OrderedEnum):
    """A compiler toolchain."""

    MSVC = "msvc"
    GNU = "gnu"
    MUSL = "musl"

    @classmethod
    def current_system(cls) -> "Toolchain | None":
        """Return the host toolchain; it is not detected, so always None."""
        return None

    @classmethod
    def detect(cls, search_string: str) -> "Toolchain | None":
        """Detect a toolchain from keywords in a string."""
        return _match_substring(search_string.lower(), _TOOLCHAIN_KEYWORDS)

    def as_str(self) -> str:
        """Return the name of the toolchain, such as "gnu"."""
        return self.value


# Substrings may match anywhere and take priority over full words.
_OS_SUBSTRINGS = (
    (OS.WINDOWS, ("windows",)),
    (OS.MACOS, ("macos", "darwin", "apple")),
    (OS.LINUX, ("linux", "ubuntu", "debian", "fedora")),
)

# Full words must stand alone between separators.
_OS_FULL_WORDS = (
    (OS.WINDOWS, ("win", "win32", "win64")),
    (OS.MACOS, ("mac", "osx")),
    (OS.LINUX, ()),
)

_ARCH_SUBSTRINGS = (
    (Arch.ARM64, ("aarch64", "arm64", "armv9")),
    (Arch.X64, ("x86-64", "x86_64", "amd64", "win64", "win-x64")),
    (Arch.ARM32, ("arm32", "armv7")),
    (Arch.X86, ("i686", "i386", "win32", "win-x86")),
)

_ARCH_FULL_WORDS = (
    (Arch.ARM64, ()),
    (Arch.X64, ("x64", "win")),
    (Arch.ARM32, ("arm",)),
    (Arch.X86, ("x86",)),
)

_TOOLCHAIN_KEYWORDS = (
    (Toolchain.MSVC, ("msvc",)),
    (Toolchain.GNU, ("gnu",)),
    (Toolchain.MUSL, ("musl",)),
)