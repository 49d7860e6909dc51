"""Providers that artifacts can be downloaded from."""

from __future__ import annotations

import enum


class ArtifactProvider(enum.Enum):
    """An artifact provider. GitHub is the default."""

    GITHUB = "github"

    @classmethod
    def default(cls) -> "ArtifactProvider":
        """Return the default provider."""
        return cls.GITHUB

    @classmethod
    def parse(cls, text: str) -> "ArtifactProvider":
        """Parse a provider name, ignoring case and surrounding whitespace."""
        lowered = text.strip().lower()
        for member in cls:
            if member.value == lowered:
                return member
        raise ValueError(f"unknown artifact provider '{lowered}'")

    def as_str(self) -> str:
        """Return the lowercase identifier of this provider."""
        return self.value

    def display_name(self) -> str:
        """Return the human-readable name of this provider."""
        return _DISPLAY_NAMES[self]

    def __str__(self) -> str:
        return self.value


_DISPLAY_NAMES = {ArtifactProvider.GITHUB: "GitHub"}