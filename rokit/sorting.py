"""Preference orderings for artifacts that suit the system equally well."""

from __future__ import annotations

import semver

from rokit.targets import OS, Arch, split_words

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _ascii_equal_ignore_case(a: str, b: str) -> bool:
    return a.translate(_ASCII_LOWER) == b.translate(_ASCII_LOWER)


def _is_version(word: str) -> bool:
    try:
        semver.Version.parse(word.lstrip("v"))
    except (ValueError, TypeError):
        return False
    return True


def _is_plain_word(word: str) -> bool:
    """Return True if a word is not an arch, OS, version or number."""
    return (
        Arch.detect(word) is None
        and OS.detect(word) is None
        and not _is_version(word)
        and not all(char.isnumeric() for char in word)
    )


def count_non_tool_mentions(name: str, tool_name: str) -> int:
    """Count how many words of an artifact name differ from the tool name.

    Words naming an architecture, OS, version or number are ignored.
    """
    if not name.strip():
        return 0
    name_words = [word for word in split_words(name) if _is_plain_word(word)]
    tool_words = split_words(tool_name)
    length_difference = abs(len(name_words) - len(tool_words))
    word_difference = sum(
        1
        for name_word, tool_word in zip(name_words, tool_words)
        if not _ascii_equal_ignore_case(name_word, tool_word)
    )
    return length_difference + word_difference


def sort_preferred_artifact(artifact_a, artifact_b) -> int:
    """Compare artifacts by how closely their names match the tool name.

    Returns a negative number if artifact_a is preferred, positive if
    artifact_b is, and zero if neither is.
    """
    count_a = count_non_tool_mentions(artifact_a.name or "", artifact_a.tool_name)
    count_b = count_non_tool_mentions(artifact_b.name or "", artifact_b.tool_name)
    return (count_a > count_b) - (count_a < count_b)


def sort_preferred_formats(artifact_a, artifact_b) -> int:
    """Compare artifacts by archive format; a known format beats none."""
    format_a, format_b = artifact_a.format, artifact_b.format
    if format_a is None and format_b is None:
        return 0
    if format_a is None:
        return 1
    if format_b is None:
        return -1
    if format_a == format_b:
        return 0
    return -1 if format_a < format_b else 1